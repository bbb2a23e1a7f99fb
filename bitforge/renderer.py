"""Rendering subsystem."""

from __future__ import annotations

from typing import Any

from .subsystem import Subsystem


class RendererSubsystem(Subsystem):
    """Renders each frame; currently asks the engine to exit after one frame."""

    def __init__(self, engine_instance: Any) -> None:
        super().__init__("Renderer Subsystem", engine_instance)

    def should_tick(self) -> bool:
        return True

    def tick(self, delta_time_ns: int) -> None:
        self.engine_instance.exit_request(0)