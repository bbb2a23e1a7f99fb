"""Base class for the engine's subsystems."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .logger import get_logger

_log = get_logger()


class Subsystem(ABC):
    """A named part of the engine that may be ticked every frame."""

    def __init__(self, name: str, engine_instance: Any) -> None:
        if not name:
            raise ValueError("subsystem name must be a non-empty string")
        self._name = str(name)
        self._engine_instance = engine_instance
        _log.info("Subsystem initializing: %s", self._name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def engine_instance(self) -> Any:
        return self._engine_instance

    @abstractmethod
    def should_tick(self) -> bool:
        """Whether the engine should call :meth:`tick` each frame."""

    def tick(self, delta_time_ns: int) -> None:
        """Advance the subsystem by one frame."""

    def shutdown(self) -> None:
        """Release the subsystem."""
        _log.info("Subsystem shutdown: %s", self._name)