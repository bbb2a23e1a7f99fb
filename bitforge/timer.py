"""Frame timing: measures each frame and pads it to a minimum length."""

from __future__ import annotations

import time
from typing import Any, Callable

from .subsystem import Subsystem

_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000


class TimerSubsystem(Subsystem):
    """Tracks frame work time and enforces a minimum frame time.

    ``clock`` (nanoseconds) and ``sleep`` (seconds) may be replaced to drive
    the timer from another time source.
    """

    def __init__(self, engine_instance: Any) -> None:
        super().__init__("Timer Subsystem", engine_instance)
        self.clock: Callable[[], int] = time.monotonic_ns
        self.sleep: Callable[[float], None] = time.sleep
        self._minimum_frame_time_ns = 0
        self._frame_start_ns = 0
        self._latest_frame_time_ns = 0

    def should_tick(self) -> bool:
        return False

    @property
    def minimum_frame_time_ns(self) -> int:
        return self._minimum_frame_time_ns

    def set_minimum_frame_time(self, minimum_frame_time_ms: float) -> None:
        """Set the shortest a frame may last, in milliseconds."""
        self._minimum_frame_time_ns = int(minimum_frame_time_ms * _NS_PER_MS)

    def mark_start_work(self) -> None:
        self._frame_start_ns = self.clock()

    def mark_end_work(self) -> None:
        self.possible_sleep()
        self.frame_finished()

    def possible_sleep(self) -> None:
        """Wait until the minimum frame time has passed since the frame started."""
        if self._minimum_frame_time_ns == 0:
            return
        while (elapsed := self.clock() - self._frame_start_ns) < self._minimum_frame_time_ns:
            self.sleep((self._minimum_frame_time_ns - elapsed) / _NS_PER_S)

    def frame_finished(self) -> None:
        self._latest_frame_time_ns = self.clock() - self._frame_start_ns

    def latest_frame_delta_time_ns(self) -> int:
        """Length of the last finished frame in nanoseconds."""
        return self._latest_frame_time_ns