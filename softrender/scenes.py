"""Drawing meshes through each stage of the rendering pipeline.

Every ``draw_*`` function takes a mesh whose vertices are in a particular
coordinate space, carries each triangle to screen coordinates and draws its
outline on a canvas. Triangles with a vertex that cannot be projected
(one lying in the camera's plane) are skipped. Each function returns the
number of triangles it drew.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence

import numpy as np

from softrender.geometry import (
    Frustum,
    Vertex3D,
    clip_to_screen,
    local_to_world,
    view_to_clip,
    world_to_view,
)
from softrender.matrices import build_mvp, transform_point
from softrender.meshes import Mesh
from softrender.raster import Canvas, Color

Vector3 = tuple[float, float, float]


@dataclass(frozen=True)
class Transform:
    """Where a mesh sits in the world: position, orientation (pitch, yaw, roll) and scale."""

    position: Vector3 = (0.0, 0.0, 0.0)
    orientation: Vector3 = (0.0, 0.0, 0.0)
    scale: Vector3 = (1.0, 1.0, 1.0)


@dataclass(frozen=True)
class Camera:
    """A camera placed by orienting it (yaw, pitch, roll) and then translating it."""

    position: Vector3 = (0.0, 0.0, 0.0)
    orientation: Vector3 = (0.0, 0.0, 0.0)


_CAMERA_PRESETS = {
    1: Camera((0.0, 0.0, 3.0), (0.0, 0.0, 0.0)),
    2: Camera((0.0, 0.0, 5.0), (0.0, 0.0, 0.0)),
    3: Camera((0.0, 0.0, 2.0), (0.0, 0.0, 0.0)),
    4: Camera((1.5, 0.0, 2.6), (0.0, math.pi / 6, 0.0)),
}


def camera_preset(number: int) -> Camera:
    """Return one of the four numbered camera placements."""
    try:
        return _CAMERA_PRESETS[number]
    except KeyError:
        raise ValueError(f"no camera preset {number}; choose 1 to 4") from None


def _as_vertex(vertex: Sequence[float]) -> Vertex3D:
    if len(vertex) == 2:
        return Vertex3D(float(vertex[0]), float(vertex[1]), 0.0)
    x, y, z = vertex[:3]
    return Vertex3D(float(x), float(y), float(z))


def _draw_projected(
    canvas: Canvas, mesh: Mesh, color: Color, to_clip: Callable[[Vertex3D], Vertex3D]
) -> int:
    drawn = 0
    for triangle in mesh.triangles():
        try:
            corners = [
                clip_to_screen(canvas.width, canvas.height, to_clip(_as_vertex(vertex)))
                for vertex in triangle
            ]
        except ZeroDivisionError:
            continue
        canvas.draw_triangle(*corners, color)
        drawn += 1
    return drawn


def draw_screen_mesh(canvas: Canvas, mesh: Mesh, color: Color) -> int:
    """Draw a mesh whose vertices are already pixel coordinates."""
    drawn = 0
    for triangle in mesh.triangles():
        corners = [(int(vertex[0]), int(vertex[1])) for vertex in triangle]
        canvas.draw_triangle(*corners, color)
        drawn += 1
    return drawn


def draw_clip_mesh(canvas: Canvas, mesh: Mesh, color: Color) -> int:
    """Draw a mesh given in clip coordinates; any z is ignored."""
    return _draw_projected(canvas, mesh, color, lambda vertex: vertex)


def draw_view_mesh(canvas: Canvas, frustum: Frustum, mesh: Mesh, color: Color) -> int:
    """Draw a mesh given in view coordinates, camera at the origin looking down -z."""
    return _draw_projected(canvas, mesh, color, lambda vertex: view_to_clip(frustum, vertex))


def draw_world_mesh(
    canvas: Canvas, frustum: Frustum, camera: Camera, mesh: Mesh, color: Color
) -> int:
    """Draw a mesh given in world coordinates as seen by a camera."""

    def to_clip(vertex: Vertex3D) -> Vertex3D:
        view = world_to_view(camera.position, camera.orientation, vertex)
        return view_to_clip(frustum, view)

    return _draw_projected(canvas, mesh, color, to_clip)


def draw_local_mesh(
    canvas: Canvas,
    frustum: Frustum,
    camera: Camera,
    transform: Transform,
    mesh: Mesh,
    color: Color,
) -> int:
    """Draw a mesh given in local coordinates, placed in the world by a transform."""

    def to_clip(vertex: Vertex3D) -> Vertex3D:
        world = local_to_world(
            transform.position, transform.orientation, transform.scale, vertex
        )
        view = world_to_view(camera.position, camera.orientation, world)
        return view_to_clip(frustum, view)

    return _draw_projected(canvas, mesh, color, to_clip)


def draw_matrix_mesh(
    canvas: Canvas,
    model: np.ndarray,
    view: np.ndarray,
    projection: np.ndarray,
    mesh: Mesh,
    color: Color,
) -> int:
    """Draw a mesh carried to clip space by a model-view-projection matrix."""
    mvp = build_mvp(model, view, projection)
    return _draw_projected(canvas, mesh, color, lambda vertex: transform_point(mvp, vertex))