from bitforge.instance import BitforgeInstance


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.now += max(1, round(seconds * 1_000_000_000))


def _instance():
    clock = FakeClock()
    instance = BitforgeInstance()
    instance.timer.clock = clock
    instance.timer.sleep = clock.sleep
    return instance


def test_startup_is_logged(caplog):
    _instance()
    assert "Bitforge v1.0.0 heating up" in caplog.messages


def test_subsystems_in_creation_order():
    instance = _instance()
    assert [s.name for s in instance.subsystems] == ["Timer Subsystem", "Renderer Subsystem"]
    assert instance.subsystems[0] is instance.timer


def test_fresh_instance_not_exiting():
    instance = _instance()
    assert instance.is_exit_requested() is False
    assert instance.exit_code() == 0


def test_tick_ends_with_exit_request():
    instance = _instance()
    instance.tick()
    assert instance.is_exit_requested() is True
    assert instance.exit_code() == 0


def test_tick_respects_minimum_frame_time():
    instance = _instance()
    instance.tick()
    assert instance.timer.minimum_frame_time_ns > 0
    assert instance.timer.latest_frame_delta_time_ns() >= instance.timer.minimum_frame_time_ns


def test_exit_request_keeps_code():
    instance = _instance()
    instance.exit_request(3)
    assert instance.is_exit_requested() is True
    assert instance.exit_code() == 3


def test_shutdown_in_reverse_order(caplog):
    instance = _instance()
    caplog.clear()
    instance.shutdown()
    shutdowns = [m for m in caplog.messages if m.startswith("Subsystem shutdown: ")]
    assert shutdowns == [
        "Subsystem shutdown: Renderer Subsystem",
        "Subsystem shutdown: Timer Subsystem",
    ]