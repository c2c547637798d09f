"""Engine events: window, keyboard and mouse events, and a dispatcher."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, TypeVar


class EventType(enum.Enum):
    """Kind of an event."""

    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    WINDOW_FOCUS = 3
    WINDOW_LOST_FOCUS = 4
    WINDOW_MOVED = 5
    KEY_PRESSED = 6
    KEY_RELEASE = 7
    MOUSE_BUTTON_PRESSED = 8
    MOUSE_BUTTON_RELEASED = 9
    MOUSE_MOVED = 10
    MOUSE_SCROLLED = 11


class EventCategory(enum.IntFlag):
    """Bit flags grouping events into categories."""

    NONE = 0
    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4


def _num(value: float) -> str:
    return f"{value:g}"


class Event(ABC):
    """Base of all events; ``handled`` marks that a handler consumed it."""

    event_type: ClassVar[EventType] = EventType.NONE
    _name: ClassVar[str | None] = None

    def __init__(self) -> None:
        self.handled = False

    @property
    def name(self) -> str | None:
        """Short name of the event type, or None for abstract kinds."""
        return self._name

    @property
    @abstractmethod
    def category_flags(self) -> EventCategory:
        """Categories this event belongs to."""

    def is_in_category(self, category: EventCategory) -> bool:
        return bool(self.category_flags & category)

    def __str__(self) -> str:
        return self.name or type(self).__name__


class WindowResizeEvent(Event):
    event_type = EventType.WINDOW_RESIZE
    _name = "WindowResize"

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self.width = width
        self.height = height

    @property
    def category_flags(self) -> EventCategory:
        return EventCategory.APPLICATION

    def __str__(self) -> str:
        return f"WindowResizeEvent: {self.width}, {self.height}"


class WindowCloseEvent(Event):
    event_type = EventType.WINDOW_CLOSE
    _name = "WindowClose"

    @property
    def category_flags(self) -> EventCategory:
        return EventCategory.APPLICATION


class KeyEvent(Event):
    """Base of keyboard events."""

    def __init__(self, key_code: int) -> None:
        super().__init__()
        self.key_code = key_code

    @property
    def category_flags(self) -> EventCategory:
        return EventCategory.KEYBOARD | EventCategory.INPUT

    @abstractmethod
    def __str__(self) -> str:
        """Readable description of the key event."""


class KeyPressedEvent(KeyEvent):
    event_type = EventType.KEY_PRESSED
    _name = "KeyPressed"

    def __init__(self, key_code: int, repeat_count: int) -> None:
        super().__init__(key_code)
        self.repeat_count = repeat_count

    def __str__(self) -> str:
        return f"KeyPressedEvent: {self.key_code} ({self.repeat_count} repeats)"


class KeyReleasedEvent(KeyEvent):
    event_type = EventType.KEY_RELEASE
    _name = "KeyRelease"

    def __str__(self) -> str:
        return f"KeyReleasedEvent: {self.key_code}"


class MouseMovedEvent(Event):
    event_type = EventType.MOUSE_MOVED
    _name = "MouseMoved"

    def __init__(self, x: float, y: float) -> None:
        super().__init__()
        self.x = x
        self.y = y

    @property
    def category_flags(self) -> EventCategory:
        return EventCategory.MOUSE | EventCategory.INPUT

    def __str__(self) -> str:
        return f"MouseMovedEvent: {_num(self.x)}, {_num(self.y)}"


class MouseScrolledEvent(Event):
    event_type = EventType.MOUSE_SCROLLED
    _name = "MouseScrolled"

    def __init__(self, x_offset: float, y_offset: float) -> None:
        super().__init__()
        self.x_offset = x_offset
        self._y_offset = y_offset

    @property
    def y_offset(self) -> float:
        """Vertical offset as the engine reports it: the horizontal one."""
        return self.x_offset

    @property
    def category_flags(self) -> EventCategory:
        return EventCategory.MOUSE | EventCategory.INPUT

    def __str__(self) -> str:
        return f"MouseScrolledEvent: {_num(self.x_offset)}, {_num(self.y_offset)}"


class MouseButtonEvent(Event):
    """Base of mouse button events."""

    def __init__(self, button: int) -> None:
        super().__init__()
        self.button = button

    @property
    def category_flags(self) -> EventCategory:
        return EventCategory.MOUSE | EventCategory.INPUT


class MouseButtonPressedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_PRESSED
    _name = "MouseButtonPressed"

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {self.button}"


class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_RELEASED
    _name = "MouseButtonReleased"

    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {self.button}"


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes one event to a handler registered for its concrete type."""

    def __init__(self, event: Event) -> None:
        self._event = event

    def dispatch(self, event_class: type[E], func: Callable[[E], bool]) -> bool:
        """Call ``func`` if the event is of ``event_class``; its result sets ``handled``."""
        if event_class.event_type is EventType.NONE:
            raise TypeError(f"{event_class.__name__} has no concrete event type")
        if self._event.event_type is event_class.event_type:
            self._event.handled = bool(func(self._event))  # type: ignore[arg-type]
            return True
        return False