"""Window configuration and the interface every platform window implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

from orbitengine.events import Event

EventCallback = Callable[[Event], None]


@dataclass
class WindowConfig:
    """Title and size requested for a new window."""

    title: str = "Orbit Engine"
    width: int = 1280
    height: int = 720


class Window(ABC):
    """A platform window that reports its events through one callback."""

    @abstractmethod
    def on_update(self) -> None:
        """Poll events and present the frame."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Current width in pixels."""

    @property
    @abstractmethod
    def height(self) -> int:
        """Current height in pixels."""

    @abstractmethod
    def set_event_callback(self, callback: EventCallback) -> None:
        """Route every window event to ``callback``."""

    @abstractmethod
    def set_vsync(self, enabled: bool) -> None:
        """Turn vertical sync on or off."""

    @abstractmethod
    def set_cursor_visible(self, value: bool) -> None:
        """Show or hide the cursor."""

    @abstractmethod
    def force_cursor_center(self, value: bool) -> None:
        """Keep the cursor centred after each update when ``value`` is true."""

    @abstractmethod
    def is_vsync(self) -> bool:
        """Whether vertical sync is on."""