"""Mesh component made of sub-meshes loaded from disk."""

from __future__ import annotations

import os

from orbitengine import renderer as render
from orbitengine.component import Component
from orbitengine.mesh_loader import load_submeshes
from orbitengine.submesh import SubMesh
from orbitengine.timestep import Timestep
from orbitengine.transform import Transform


class Mesh(Component):
    """A drawable mesh; each sub-mesh is placed relative to the mesh's transform."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.transform = Transform()
        self.submeshes: list[SubMesh] = load_submeshes(path, self.transform)
        for submesh in self.submeshes:
            submesh.generate()
            submesh.transform.set_parent(self.transform)

    def draw(self) -> None:
        """Draw every sub-mesh with the active camera."""
        camera = render.get_active_camera()
        for submesh in self.submeshes:
            render.draw_submesh(submesh, camera)

    def set_parent(self, parent: Component | None) -> None:
        self.transform.set_parent(parent)

    def on_update(self, ts: Timestep) -> None:
        self.draw()