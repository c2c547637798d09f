"""Image textures attached to sub-meshes."""

from __future__ import annotations

import enum
import os

from orbitengine import renderer as render
from orbitengine.component import Component


class TextureType(enum.IntEnum):
    """Role a texture plays in shading."""

    DIFFUSE = 0
    METALLIC = 1
    ROUGHNESS = 2
    NORMAL = 3
    AO = 4


class Texture(Component):
    """A diffuse texture loaded through the installed renderer."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        backend = render.get_renderer()
        if backend is None:
            raise RuntimeError("no renderer is installed to load textures")
        self.path = os.fspath(path)
        self.texture_type = TextureType.DIFFUSE
        self.texture_id = backend.load_texture_image(self.path)

    def __repr__(self) -> str:
        return f"Texture({self.path!r}, id={self.texture_id})"