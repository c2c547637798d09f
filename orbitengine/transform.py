"""Position, rotation and scale of an object, relative to an optional parent."""

from __future__ import annotations

from typing import Iterable, Union

import numpy as np

from orbitengine.component import Component

Vec3Like = Union[Iterable[float], np.ndarray]


def _vec3(value: Vec3Like) -> np.ndarray:
    arr = np.array(value, dtype=float).reshape(-1)
    if arr.shape != (3,):
        raise ValueError(f"expected three components, got {arr.shape[0]}")
    return arr


class Transform(Component):
    """Local position, rotation and scale; world values add the parent's."""

    def __init__(
        self,
        position: Vec3Like | None = None,
        rotation: Vec3Like | None = None,
        scale: Vec3Like | None = None,
    ) -> None:
        self._position = _vec3((0.0, 0.0, 0.0) if position is None else position)
        self._rotation = _vec3((0.0, 0.0, 0.0) if rotation is None else rotation)
        self._scale = _vec3((1.0, 1.0, 1.0) if scale is None else scale)
        self.parent: Transform | None = None

    @property
    def position(self) -> np.ndarray:
        """Local position."""
        return self._position

    @position.setter
    def position(self, value: Vec3Like) -> None:
        self._position = _vec3(value)

    @property
    def rotation(self) -> np.ndarray:
        """Local rotation."""
        return self._rotation

    @rotation.setter
    def rotation(self, value: Vec3Like) -> None:
        self._rotation = _vec3(value)

    @property
    def scale(self) -> np.ndarray:
        """Local scale."""
        return self._scale

    @scale.setter
    def scale(self, value: Vec3Like) -> None:
        self.set_scale(value)

    @property
    def world_position(self) -> np.ndarray:
        """Position plus the world position of every ancestor."""
        if self.parent is None:
            return self._position.copy()
        return self._position + self.parent.world_position

    @property
    def world_rotation(self) -> np.ndarray:
        """Rotation plus the world rotation of every ancestor."""
        if self.parent is None:
            return self._rotation.copy()
        return self._rotation + self.parent.world_rotation

    def set_scale(self, scale: float | Vec3Like) -> None:
        """Set the scale from three values or one value for all axes."""
        if np.ndim(scale) == 0:
            self._scale = np.full(3, float(scale))  # type: ignore[arg-type]
        else:
            self._scale = _vec3(scale)  # type: ignore[arg-type]

    def set_parent(self, parent: Component | None) -> None:
        """Make ``parent`` the transform this one is relative to, or detach."""
        if parent is not None and not isinstance(parent, Transform):
            raise TypeError(f"parent must be a Transform, not {type(parent).__name__}")
        ancestor = parent
        while ancestor is not None:
            if ancestor is self:
                raise ValueError("a transform cannot be its own ancestor")
            ancestor = ancestor.parent
        self.parent = parent

    def __repr__(self) -> str:
        return (
            f"Transform(position={self._position.tolist()}, "
            f"rotation={self._rotation.tolist()}, scale={self._scale.tolist()})"
        )