"""A piece of a mesh with its own geometry, transform and textures."""

from __future__ import annotations

import numpy as np

from orbitengine import renderer as render
from orbitengine.texture import Texture
from orbitengine.transform import Transform


class SubMesh:
    """Geometry buffers of one part of a mesh."""

    def __init__(self, parent: Transform | None) -> None:
        self.active = True
        self.name = ""
        self.parent = parent
        self.transform = Transform()

        self.vertices = np.empty((0, 3), dtype=float)
        self.normals = np.empty((0, 3), dtype=float)
        self.uvs = np.empty((0, 2), dtype=float)
        self.indices = np.empty(0, dtype=np.uint32)
        self.vertices_count = 0
        self.indices_count = 0
        self.has_normals = False
        self.has_uvs = False

        self.vao = 0
        self.vbo = 0
        self.ebo = 0
        self.vbos: list[int] = []

        self.textures: list[Texture] = []

    def generate(self) -> int | None:
        """Upload the geometry with the installed renderer."""
        return render.generate_buffers(self)

    def add_texture(self, texture: Texture) -> None:
        self.textures.append(texture)

    def __repr__(self) -> str:
        return (
            f"SubMesh({self.name!r}, vertices={self.vertices_count}, "
            f"indices={self.indices_count})"
        )