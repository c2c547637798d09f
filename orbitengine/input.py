"""Input layer that records keyboard and mouse state from events."""

from __future__ import annotations

import enum

from orbitengine.events import (
    Event,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
)
from orbitengine.layers import Layer


class KeyState(enum.IntEnum):
    """State of a key or mouse button."""

    RELEASED = 0
    PRESSED = 1


class Input(Layer):
    """Layer that consumes input events and keeps global input state."""

    _key_map: dict[int, KeyState] = {}
    _mouse_button_map: dict[int, KeyState] = {}
    _mouse_position: tuple[float, float] = (0.0, 0.0)
    _mouse_scroll: tuple[float, float] = (0.0, 0.0)

    def __init__(self) -> None:
        super().__init__("Input Layer")

    def on_event(self, event: Event) -> None:
        """Record the event's effect on the input state and mark it handled."""
        if isinstance(event, KeyPressedEvent):
            Input._key_map[event.key_code] = KeyState.PRESSED
        elif isinstance(event, KeyReleasedEvent):
            Input._key_map[event.key_code] = KeyState.RELEASED
        elif isinstance(event, MouseButtonPressedEvent):
            Input._mouse_button_map[event.button] = KeyState.PRESSED
        elif isinstance(event, MouseButtonReleasedEvent):
            Input._mouse_button_map[event.button] = KeyState.RELEASED
        elif isinstance(event, MouseMovedEvent):
            Input._mouse_position = (float(event.x), float(event.y))
        elif isinstance(event, MouseScrolledEvent):
            Input._mouse_scroll = (float(event.x_offset), float(event.y_offset))
        else:
            return
        event.handled = True

    @classmethod
    def is_key_down(cls, key: int) -> bool:
        return cls.key_state(key) is KeyState.PRESSED

    @classmethod
    def is_mouse_button_down(cls, button: int) -> bool:
        return Input._mouse_button_map.get(button, KeyState.RELEASED) is KeyState.PRESSED

    @classmethod
    def key_state(cls, key: int) -> KeyState:
        return Input._key_map.get(key, KeyState.RELEASED)

    @classmethod
    def mouse_position(cls) -> tuple[float, float]:
        return Input._mouse_position

    @classmethod
    def mouse_scroll(cls) -> tuple[float, float]:
        return Input._mouse_scroll

    @classmethod
    def reset(cls) -> None:
        """Forget all recorded input."""
        Input._key_map.clear()
        Input._mouse_button_map.clear()
        Input._mouse_position = (0.0, 0.0)
        Input._mouse_scroll = (0.0, 0.0)