"""Triangle meshes: the built-in demo shapes and a Wavefront OBJ reader."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Union

from softrender.geometry import Vertex3D

VERTICES_PER_FACE = 3


class MeshLoadError(ValueError):
    """Raised when a mesh file cannot be read or does not describe a mesh."""


@dataclass(frozen=True)
class Mesh:
    """Vertices and a flat list of face indices, three per triangle."""

    vertices: tuple[Sequence[float], ...]
    faces: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", tuple(self.vertices))
        object.__setattr__(self, "faces", tuple(int(i) for i in self.faces))
        if len(self.faces) % VERTICES_PER_FACE:
            raise ValueError(
                f"face index count {len(self.faces)} is not a multiple of {VERTICES_PER_FACE}"
            )
        count = len(self.vertices)
        for index in self.faces:
            if not 0 <= index < count:
                raise ValueError(f"face index {index} out of range for {count} vertices")

    def triangles(self) -> Iterator[tuple[Sequence[float], Sequence[float], Sequence[float]]]:
        """Yield each face as a triple of vertices."""
        indices = iter(self.faces)
        for a, b, c in zip(indices, indices, indices):
            yield self.vertices[a], self.vertices[b], self.vertices[c]


def _face_index(token: str, vertex_count: int, line_number: int) -> int:
    head = token.split("/", 1)[0]
    try:
        index = int(head)
    except ValueError:
        raise MeshLoadError(f"line {line_number}: bad face index {token!r}") from None
    if index > 0:
        return index - 1
    if index < 0:
        return vertex_count + index
    raise MeshLoadError(f"line {line_number}: face index 0 is not allowed")


def parse_obj(lines: Iterable[str]) -> Mesh:
    """Build a mesh from the vertex and face lines of an OBJ document.

    Polygons with more than three corners are split into a triangle fan.
    Other statements (normals, texture coordinates, groups, materials) are ignored.
    """
    vertices: list[Vertex3D] = []
    faces: list[int] = []
    for line_number, raw in enumerate(lines, start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        keyword, *fields = line.split()
        if keyword == "v":
            if len(fields) < 3:
                raise MeshLoadError(f"line {line_number}: vertex needs three coordinates")
            try:
                x, y, z = (float(value) for value in fields[:3])
            except ValueError:
                raise MeshLoadError(f"line {line_number}: bad vertex {line!r}") from None
            vertices.append(Vertex3D(x, y, z))
        elif keyword == "f":
            if len(fields) < VERTICES_PER_FACE:
                raise MeshLoadError(f"line {line_number}: face needs at least three vertices")
            corners = [_face_index(token, len(vertices), line_number) for token in fields]
            first = corners[0]
            for second, third in zip(corners[1:], corners[2:]):
                faces.extend((first, second, third))
    if not faces:
        raise MeshLoadError("no faces found")
    try:
        return Mesh(tuple(vertices), tuple(faces))
    except ValueError as error:
        raise MeshLoadError(str(error)) from None


def load_obj(path: Union[str, os.PathLike]) -> Mesh:
    """Read an OBJ file into a mesh."""
    try:
        with open(path, encoding="utf-8") as stream:
            return parse_obj(stream)
    except OSError as error:
        raise MeshLoadError(f"cannot read {os.fspath(path)}: {error}") from error


_HOUSE_FACES = (0, 1, 2, 1, 3, 2, 0, 4, 1)

_CUBE_FACES = (
    0, 1, 2,
    0, 2, 3,
    4, 0, 3,
    4, 3, 7,
    5, 4, 7,
    5, 7, 6,
    1, 5, 6,
    1, 6, 2,
    4, 5, 1,
    4, 1, 0,
    2, 6, 7,
    2, 7, 3,
)


def house_screen() -> Mesh:
    """A house outline given directly in pixel coordinates."""
    vertices = ((300, 300), (600, 300), (300, 500), (600, 500), (450, 150))
    return Mesh(vertices, _HOUSE_FACES)


def house_clip() -> Mesh:
    """A house outline given in clip coordinates."""
    vertices = ((-0.5, 0.0), (0.5, 0.0), (-0.5, -0.5), (0.5, -0.5), (0.0, 0.5))
    return Mesh(vertices, _HOUSE_FACES)


def cube() -> Mesh:
    """A unit cube centred on the origin."""
    vertices = (
        Vertex3D(0.5, 0.5, -0.5),
        Vertex3D(-0.5, 0.5, -0.5),
        Vertex3D(-0.5, -0.5, -0.5),
        Vertex3D(0.5, -0.5, -0.5),
        Vertex3D(0.5, 0.5, 0.5),
        Vertex3D(-0.5, 0.5, 0.5),
        Vertex3D(-0.5, -0.5, 0.5),
        Vertex3D(0.5, -0.5, 0.5),
    )
    return Mesh(vertices, _CUBE_FACES)


def cube_view_space() -> Mesh:
    """The unit cube moved back to sit in front of a camera at the origin."""
    vertices = (
        Vertex3D(0.5, 0.5, -3.5),
        Vertex3D(-0.5, 0.5, -3.5),
        Vertex3D(-0.5, -0.5, -3.5),
        Vertex3D(0.5, -0.5, -3.5),
        Vertex3D(0.5, 0.5, -2.5),
        Vertex3D(-0.5, 0.5, -2.5),
        Vertex3D(-0.5, -0.5, -2.5),
        Vertex3D(0.5, -0.5, -2.5),
    )
    return Mesh(vertices, _CUBE_FACES)