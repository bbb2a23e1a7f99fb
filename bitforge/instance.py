"""The engine instance: owns the subsystems and drives the frame loop."""

from __future__ import annotations

from .logger import get_logger
from .renderer import RendererSubsystem
from .subsystem import Subsystem
from .timer import TimerSubsystem
from .vector import BoundedVector

VERSION = (1, 0, 0)
VERSION_STRING = "1.0.0"
MINIMUM_FRAME_TIME_MS = 16.6666

_log = get_logger()


class BitforgeInstance:
    """Runs one frame of every subsystem per tick until an exit is requested."""

    def __init__(self) -> None:
        _log.info("Bitforge v%s heating up", VERSION_STRING)
        self._exit_requested = False
        self._exit_code = 0

        self._timer = TimerSubsystem(self)
        self._timer.set_minimum_frame_time(MINIMUM_FRAME_TIME_MS)

        self._subsystems = BoundedVector(2)
        self._subsystems.append(self._timer)
        self._subsystems.append(RendererSubsystem(self))

    @property
    def timer(self) -> TimerSubsystem:
        return self._timer

    @property
    def subsystems(self) -> tuple[Subsystem, ...]:
        return tuple(self._subsystems)

    def tick(self) -> None:
        """Run one frame."""
        self._timer.mark_start_work()
        self._tick_subsystems()
        self._timer.mark_end_work()

    def _tick_subsystems(self) -> None:
        delta_time_ns = self._timer.latest_frame_delta_time_ns()
        for subsystem in self._subsystems:
            if subsystem.should_tick():
                subsystem.tick(delta_time_ns)

    def exit_request(self, exit_code: int = 0) -> None:
        """Ask the frame loop to stop with ``exit_code``."""
        self._exit_code = exit_code
        self._exit_requested = True

    def is_exit_requested(self) -> bool:
        return self._exit_requested

    def exit_code(self) -> int:
        return self._exit_code

    def shutdown(self) -> None:
        """Shut the subsystems down, last created first."""
        for subsystem in reversed(self.subsystems):
            subsystem.shutdown()