"""Reader for the engine's binary mesh files.

A mesh is a main file holding the number of sub-meshes as a little-endian
unsigned 32-bit integer, followed by one file per sub-mesh named after the
main file with the sub-mesh index appended.
"""

from __future__ import annotations

import os
from typing import BinaryIO

import numpy as np

from orbitengine.log import core_logger
from orbitengine.submesh import SubMesh
from orbitengine.transform import Transform

_F32 = np.dtype("<f4")
_U32 = np.dtype("<u4")


class MeshFormatError(ValueError):
    """A mesh file is truncated or malformed."""


def _read(stream: BinaryIO, dtype: np.dtype, count: int, what: str) -> np.ndarray:
    size = dtype.itemsize * count
    data = stream.read(size)
    if len(data) < size:
        raise MeshFormatError(f"truncated {what}: expected {size} bytes, got {len(data)}")
    return np.frombuffer(data, dtype=dtype, count=count).astype(float)


def read_submesh(stream: BinaryIO, index: int, parent: Transform | None) -> SubMesh:
    """Read one sub-mesh from an open binary stream."""
    log = core_logger()
    info = _read(stream, _F32, 3, "header")
    vertices_count, indices_count = int(info[0]), int(info[1])
    if vertices_count < 0 or indices_count < 0:
        raise MeshFormatError("negative element count in header")

    flags = _read(stream, _F32, 3, "flags")
    position = _read(stream, _F32, 3, "position")

    submesh = SubMesh(parent)
    submesh.name = f"SubMesh {index}"
    submesh.vertices_count = vertices_count
    submesh.indices_count = indices_count
    submesh.has_normals = bool(flags[0])
    submesh.has_uvs = bool(flags[1])
    submesh.transform = Transform(position)

    submesh.vertices = _read(stream, _F32, vertices_count * 3, "vertices").reshape(-1, 3)
    log.info("%s Vertices loaded!", vertices_count)

    submesh.normals = _read(stream, _F32, vertices_count * 3, "normals").reshape(-1, 3)
    log.info("%s Normals loaded!", vertices_count)

    if submesh.has_uvs:
        uvs = _read(stream, _F32, vertices_count * 2, "uvs").reshape(-1, 2)
        uvs[:, 1] *= -1
        submesh.uvs = uvs
        log.info("%s UVs loaded!", vertices_count)

    # Only whole triangles are kept from the index data.
    needed = (indices_count // 3) * 3
    data = stream.read(_U32.itemsize * indices_count * 3)
    if len(data) < needed * _U32.itemsize:
        raise MeshFormatError(
            f"truncated indices: expected {needed} values, got {len(data) // _U32.itemsize}"
        )
    submesh.indices = np.frombuffer(data[: needed * _U32.itemsize], dtype=_U32).astype(np.uint32)
    log.info("%s Indices loaded!", indices_count)
    return submesh


def load_submeshes(path: str | os.PathLike[str], parent: Transform | None) -> list[SubMesh]:
    """Load every sub-mesh of the mesh at ``path``.

    A missing main file gives no sub-meshes; a missing sub-mesh file is
    logged and ends loading.
    """
    log = core_logger()
    base = os.fspath(path)
    try:
        with open(base, "rb") as main:
            head = main.read(_U32.itemsize)
    except OSError:
        return []
    if len(head) < _U32.itemsize:
        raise MeshFormatError("truncated sub-mesh count")
    count = int(np.frombuffer(head, dtype=_U32)[0])

    submeshes: list[SubMesh] = []
    for index in range(count):
        name = f"{base}{index}"
        log.info("Loading file %s.", name)
        try:
            stream = open(name, "rb")
        except OSError:
            log.error("Opening mesh file problem")
            break
        with stream:
            submeshes.append(read_submesh(stream, index, parent))
    return submeshes