"""Fly camera component and view-matrix helper."""

from __future__ import annotations

import math

import numpy as np

from orbitengine import renderer
from orbitengine.component import Component
from orbitengine.transform import Transform, Vec3Like
from orbitengine.window import WindowConfig

YAW = -1.0
PITCH = 0.0
FOV = 45.0
PITCH_LIMIT = 89.0
WORLD_UP = np.array([0.0, 1.0, 0.0])


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def look_at(eye: Vec3Like, center: Vec3Like, up: Vec3Like) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` at ``center``.

    The result is row-major: multiply a column vector ``(x, y, z, 1)`` on the right.
    """
    eye_v = np.asarray(eye, dtype=float)
    f = _normalize(np.asarray(center, dtype=float) - eye_v)
    s = _normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -(s @ eye_v)
    m[1, 3] = -(u @ eye_v)
    m[2, 3] = f @ eye_v
    return m


class Camera(Component):
    """A camera steered by yaw and pitch; creating one makes it the active camera."""

    def __init__(
        self,
        position: Vec3Like | None = None,
        fov: float = FOV,
        width: int | None = None,
        height: int | None = None,
    ) -> None:
        defaults = WindowConfig()
        self._transform = Transform(position)
        self._yaw = YAW
        self._pitch = PITCH
        self._fov = float(fov)
        self.width = defaults.width if width is None else width
        self.height = defaults.height if height is None else height
        self._update()
        renderer.set_active_camera(self)

    def _update(self) -> None:
        yaw = math.radians(self._yaw)
        pitch = math.radians(self._pitch)
        front = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self.front = _normalize(front)
        self.right = _normalize(np.cross(self.front, WORLD_UP))
        self.up = _normalize(np.cross(self.right, self.front))

    @property
    def position(self) -> np.ndarray:
        return self._transform.world_position

    def set_position(self, position: Vec3Like) -> None:
        self._transform.position = position
        self._update()

    @property
    def view_matrix(self) -> np.ndarray:
        pos = self.position
        return look_at(pos, pos + self.front, self.up)

    @property
    def yaw(self) -> float:
        return self._yaw

    @yaw.setter
    def yaw(self, value: float) -> None:
        self._yaw = float(value)
        self._update()

    @property
    def pitch(self) -> float:
        return self._pitch

    @pitch.setter
    def pitch(self, value: float) -> None:
        self._pitch = float(value)
        self._update()

    @property
    def fov(self) -> float:
        return self._fov

    def set_fov(self, fov: float) -> None:
        self._fov = float(fov)
        self._update()

    def move_forward(self, amount: float) -> None:
        self.set_position(self.position + self.front * amount)

    def move_backward(self, amount: float) -> None:
        self.set_position(self.position - self.front * amount)

    def move_right(self, amount: float) -> None:
        self.set_position(self.position + self.right * amount)

    def move_left(self, amount: float) -> None:
        self.set_position(self.position - self.right * amount)

    def translate(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> None:
        """Add to the local position along each axis."""
        self.set_position(self._transform.position + np.array([dx, dy, dz], dtype=float))

    def add_pitch(self, value: float) -> None:
        """Tilt up or down, clamped to avoid flipping over the poles."""
        self._pitch = min(max(self._pitch + value, -PITCH_LIMIT), PITCH_LIMIT)
        self._update()

    def add_yaw(self, value: float) -> None:
        self._yaw += value
        self._update()