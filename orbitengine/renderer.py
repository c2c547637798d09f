"""Renderer interface and the process-wide renderer and active camera."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from orbitengine.log import core_logger

_MISSING = "NO RENDER FOUND!"


class Renderer(ABC):
    """A graphics back end."""

    @abstractmethod
    def draw(self) -> None:
        """Clear the frame and prepare for drawing."""

    @abstractmethod
    def create_buffer(self, submesh: Any) -> int:
        """Upload a sub-mesh's geometry."""

    @abstractmethod
    def draw_submesh(self, submesh: Any, camera: Any) -> int:
        """Draw one sub-mesh as seen from ``camera``."""

    @abstractmethod
    def load_texture_image(self, path: str) -> int:
        """Load an image file as a texture and return its id."""

    @abstractmethod
    def destroy(self) -> None:
        """Release the renderer's resources."""


@dataclass
class _RenderState:
    renderer: Renderer | None = None
    active_camera: Any = None


_state = _RenderState()


def install(renderer: Renderer | None) -> Renderer | None:
    """Make ``renderer`` the one used by the engine and return it."""
    _state.renderer = renderer
    return _state.renderer


def get_renderer() -> Renderer | None:
    """The renderer in use, or None."""
    return _state.renderer


def update() -> bool:
    """Start a frame on the installed renderer; False if there is none."""
    renderer = _state.renderer
    if renderer is None:
        core_logger().error(_MISSING)
        return False
    renderer.draw()
    return True


def generate_buffers(submesh: Any) -> int | None:
    """Upload ``submesh`` with the installed renderer; None if there is none."""
    renderer = _state.renderer
    if renderer is None:
        core_logger().error(_MISSING)
        return None
    return renderer.create_buffer(submesh)


def draw_submesh(submesh: Any, camera: Any) -> int | None:
    """Draw ``submesh`` with the installed renderer; None if there is none."""
    renderer = _state.renderer
    if renderer is None:
        core_logger().error(_MISSING)
        return None
    return renderer.draw_submesh(submesh, camera)


def get_active_camera() -> Any:
    """The camera scenes are drawn from, or None."""
    return _state.active_camera


def set_active_camera(camera: Any) -> Any:
    """Make ``camera`` the one scenes are drawn from and return it."""
    _state.active_camera = camera
    return _state.active_camera