import pytest

from orbitengine.events import (
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
)
from orbitengine.input import Input, KeyState


@pytest.fixture(autouse=True)
def clean_input():
    Input.reset()
    yield
    Input.reset()


def test_layer_name():
    assert Input().name == "Input Layer"


def test_key_press_and_release():
    layer = Input()
    pressed = KeyPressedEvent(87, 0)
    layer.on_event(pressed)
    assert pressed.handled is True
    assert Input.is_key_down(87) is True
    assert Input.key_state(87) is KeyState.PRESSED

    released = KeyReleasedEvent(87)
    layer.on_event(released)
    assert released.handled is True
    assert Input.is_key_down(87) is False
    assert Input.key_state(87) is KeyState.RELEASED


def test_unknown_key_is_released():
    assert Input.is_key_down(65) is False
    assert Input.key_state(65) is KeyState.RELEASED


def test_mouse_buttons():
    layer = Input()
    layer.on_event(MouseButtonPressedEvent(1))
    assert Input.is_mouse_button_down(1) is True
    assert Input.is_mouse_button_down(0) is False
    layer.on_event(MouseButtonReleasedEvent(1))
    assert Input.is_mouse_button_down(1) is False


def test_mouse_moved_sets_position():
    event = MouseMovedEvent(12.5, 40.0)
    Input().on_event(event)
    assert Input.mouse_position() == (12.5, 40.0)
    assert event.handled is True


def test_mouse_scroll_uses_reported_offsets():
    event = MouseScrolledEvent(1.5, 3.0)
    Input().on_event(event)
    assert Input.mouse_scroll() == (event.x_offset, event.y_offset)
    assert Input.mouse_scroll()[0] == 1.5


def test_other_events_are_not_handled():
    event = WindowCloseEvent()
    Input().on_event(event)
    assert event.handled is False


def test_reset_clears_state():
    layer = Input()
    layer.on_event(KeyPressedEvent(32, 0))
    layer.on_event(MouseMovedEvent(3.0, 4.0))
    Input.reset()
    assert Input.is_key_down(32) is False
    assert Input.mouse_position() == (0.0, 0.0)