"""Core of a small layered game engine: events, layers, input state, transforms, a camera, meshes and an application loop."""

__version__ = "0.1.0"

__all__ = [
    "application",
    "camera",
    "component",
    "entity",
    "events",
    "input",
    "layers",
    "log",
    "mesh",
    "mesh_loader",
    "renderer",
    "submesh",
    "texture",
    "timestep",
    "transform",
    "window",
]