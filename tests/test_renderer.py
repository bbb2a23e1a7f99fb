from bitforge.renderer import RendererSubsystem


class _Engine:
    def __init__(self):
        self.requests = []

    def exit_request(self, exit_code=0):
        self.requests.append(exit_code)


def test_renderer_ticks():
    renderer = RendererSubsystem(_Engine())
    assert renderer.should_tick() is True


def test_renderer_name():
    assert RendererSubsystem(_Engine()).name == "Renderer Subsystem"


def test_tick_requests_clean_exit():
    engine = _Engine()
    renderer = RendererSubsystem(engine)
    renderer.tick(16_000_000)
    assert engine.requests == [0]