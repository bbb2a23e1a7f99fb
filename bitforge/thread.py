"""Named worker threads whose body returns an exit code."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod

from .logger import get_logger

_log = get_logger()


class Thread(ABC):
    """A named thread that runs :meth:`main` and keeps its exit code."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._thread: threading.Thread | None = None
        self._exit_code: int | None = None
        self._error: BaseException | None = None

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def main(self) -> int:
        """The thread body; returns its exit code."""

    def start(self) -> None:
        """Start running :meth:`main` on a new thread."""
        if self._thread is not None:
            raise RuntimeError(f"thread {self._name!r} already started")
        self._thread = threading.Thread(target=self._run, name=self._name)
        self._thread.start()

    def _run(self) -> None:
        _log.info("Starting thread")
        try:
            self._exit_code = self.main()
        except BaseException as exc:
            self._error = exc
            return
        _log.info("Exiting thread with code %s", self._exit_code)

    def join(self) -> int | None:
        """Wait for the thread to finish and return its exit code."""
        if self._thread is None:
            raise RuntimeError(f"thread {self._name!r} was never started")
        self._thread.join()
        if self._error is not None:
            raise self._error
        return self._exit_code