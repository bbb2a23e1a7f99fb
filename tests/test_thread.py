import threading

import pytest

from bitforge.thread import Thread


class _Worker(Thread):
    def __init__(self, name, code):
        super().__init__(name)
        self.code = code
        self.ran_on = None

    def main(self):
        self.ran_on = threading.current_thread().name
        return self.code


class _Failing(Thread):
    def main(self):
        raise KeyError("boom")


def test_join_returns_exit_code():
    worker = _Worker("worker", 7)
    Thread.start(worker)
    assert Thread.join(worker) == 7


def test_main_runs_on_named_thread():
    worker = _Worker("loader", 0)
    Thread.start(worker)
    Thread.join(worker)
    assert worker.ran_on == "loader"
    assert worker.ran_on != threading.current_thread().name


def test_join_without_start_raises():
    with pytest.raises(RuntimeError):
        Thread.join(_Worker("idle", 0))


def test_double_start_raises():
    worker = _Worker("twice", 0)
    Thread.start(worker)
    Thread.join(worker)
    with pytest.raises(RuntimeError):
        Thread.start(worker)


def test_error_in_main_surfaces_on_join():
    failing = _Failing("failing")
    Thread.start(failing)
    with pytest.raises(KeyError):
        Thread.join(failing)


def test_thread_is_abstract():
    with pytest.raises(TypeError):
        Thread("abstract")