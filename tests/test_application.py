import pytest

from orbitengine import renderer as render
from orbitengine.application import Application
from orbitengine.events import KeyPressedEvent, WindowCloseEvent, WindowResizeEvent
from orbitengine.input import Input
from orbitengine.layers import Layer
from orbitengine.renderer import Renderer
from orbitengine.window import Window


class FakeWindow(Window):
    def __init__(self):
        self.callback = None
        self.updates = 0

    def on_update(self):
        self.updates += 1

    @property
    def width(self):
        return 1280

    @property
    def height(self):
        return 720

    def set_event_callback(self, callback):
        self.callback = callback

    def set_vsync(self, enabled):
        pass

    def set_cursor_visible(self, value):
        pass

    def force_cursor_center(self, value):
        pass

    def is_vsync(self):
        return True


class FakeRenderer(Renderer):
    def __init__(self):
        self.frames = 0

    def draw(self):
        self.frames += 1

    def create_buffer(self, submesh):
        return 1

    def draw_submesh(self, submesh, camera):
        return 1

    def load_texture_image(self, path):
        return 1

    def destroy(self):
        pass


class Recording(Layer):
    def __init__(self, name, log, consume=False):
        super().__init__(name)
        self.log = log
        self.consume = consume
        self.steps = []

    def on_update(self, ts):
        self.steps.append(ts)

    def on_event(self, event):
        self.log.append(self.name)
        if self.consume:
            event.handled = True


@pytest.fixture(autouse=True)
def _clean_state():
    render.install(None)
    Input.reset()
    yield
    render.install(None)
    Input.reset()


def make_app(**kwargs):
    return Application(FakeWindow(), **kwargs)


def test_construction_wires_window_and_renderer():
    backend = FakeRenderer()
    app = make_app(renderer=backend)
    assert app.window.callback == app.on_event
    assert render.get_renderer() is backend
    assert Application.current() is app
    assert any(isinstance(layer, Input) for layer in app.layers)


def test_window_close_stops_application():
    app = make_app()
    event = WindowCloseEvent()
    app.window.callback(event)
    assert app.running is False
    assert event.handled is True


def test_events_go_top_down_through_layers():
    app = make_app()
    log = []
    app.push_layer(Recording("A", log))
    app.push_layer(Recording("B", log))
    app.push_overlay(Recording("C", log))
    app.on_event(WindowResizeEvent(800, 600))
    assert log == ["C", "A", "B"]


def test_handled_event_stops_propagation():
    app = make_app()
    log = []
    app.push_layer(Recording("A", log))
    app.push_overlay(Recording("C", log, consume=True))
    app.on_event(WindowResizeEvent(800, 600))
    assert log == ["C"]


def test_input_layer_consumes_key_events():
    app = make_app()
    log = []
    app.push_layer(Recording("A", log))
    app.push_overlay(Recording("C", log))
    app.on_event(KeyPressedEvent(87, 0))
    assert log == ["C"]
    assert Input.is_key_down(87)


def test_step_measures_time_between_frames():
    times = iter([0.0, 0.5, 2.0])
    app = make_app(clock=lambda: next(times))
    layer = Recording("A", [])
    app.push_layer(layer)
    first = app.step()
    second = app.step()
    assert first.seconds == pytest.approx(0.5)
    assert second.seconds == pytest.approx(1.5)
    assert layer.steps == [first, second]
    assert app.window.updates == 2


def test_run_loops_until_closed_then_destroys():
    class Game(Application):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self.frames = 0
            self.destroyed = False

        def update(self):
            self.frames += 1
            if self.frames == 3:
                self.window.callback(WindowCloseEvent())

        def destroy(self):
            self.destroyed = True

    backend = FakeRenderer()
    game = Game(FakeWindow(), renderer=backend, clock=lambda: 0.0)
    assert Application.current() is game
    game.run()
    assert game.running is False
    assert game.frames == 3
    assert game.destroyed is True
    assert backend.frames == 3
    assert game.window.updates == 3