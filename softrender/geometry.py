"""Vertices, viewing frustums and the coordinate-space transforms of the pipeline.

Every transform works on plain floats. Positions, orientations and scales are
any three-element sequences ``(x, y, z)``. Orientation angles are in radians:
``x`` is pitch, ``y`` is yaw and ``z`` is roll.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple, Sequence

Vector3 = Sequence[float]


class Vertex3D(NamedTuple):
    """A point in some three-dimensional coordinate space."""

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Frustum:
    """The planes of a symmetric viewing frustum."""

    near: float
    far: float
    left: float
    right: float
    bottom: float
    top: float

    @classmethod
    def from_fov(cls, fovy: float, aspect: float, near: float, far: float) -> "Frustum":
        """Build a frustum from a vertical field of view in degrees and an aspect ratio."""
        top = near * math.tan(math.radians(fovy) / 2)
        right = top * aspect
        return cls(near=near, far=far, left=-right, right=right, bottom=-top, top=top)


def local_to_world(
    position: Vector3, orientation: Vector3, scale: Vector3, vertex: Vertex3D
) -> Vertex3D:
    """Rotate (yaw, pitch, roll), then scale, then translate a local-space vertex."""
    pitch, yaw, roll = orientation
    sx, sy, sz = scale
    px, py, pz = position

    yaw_x = vertex.x * math.cos(yaw) + vertex.z * math.sin(yaw)
    yaw_y = vertex.y
    yaw_z = -vertex.x * math.sin(yaw) + vertex.z * math.cos(yaw)

    pitch_x = yaw_x
    pitch_y = yaw_y * math.cos(pitch) - yaw_z * math.sin(pitch)
    pitch_z = yaw_y * math.sin(pitch) + yaw_z * math.cos(pitch)

    roll_x = pitch_x * math.cos(roll) - pitch_y * math.sin(roll)
    roll_y = pitch_x * math.sin(roll) + pitch_y * math.cos(roll)
    roll_z = pitch_z

    return Vertex3D(roll_x * sx + px, roll_y * sy + py, roll_z * sz + pz)


def world_to_view(
    camera_position: Vector3, camera_orientation: Vector3, vertex: Vertex3D
) -> Vertex3D:
    """Apply the inverse of the camera's placement to a world-space vertex.

    The camera is assumed to have been oriented (yaw, pitch, roll) and then
    translated, so the vertex is translated back first and then rotated by the
    negated angles in the reverse order.
    """
    cx, cy, cz = camera_position
    pitch, yaw, roll = (-angle for angle in camera_orientation)

    tx = vertex.x - cx
    ty = vertex.y - cy
    tz = vertex.z - cz

    roll_x = tx * math.cos(roll) - ty * math.sin(roll)
    roll_y = tx * math.sin(roll) + ty * math.cos(roll)
    roll_z = tz

    pitch_x = roll_x
    pitch_y = roll_y * math.cos(pitch) - roll_z * math.sin(pitch)
    pitch_z = roll_y * math.sin(pitch) + roll_z * math.cos(pitch)

    yaw_x = pitch_x * math.cos(yaw) + pitch_z * math.sin(yaw)
    # The y component is carried over from the world-space vertex unchanged.
    yaw_y = vertex.y
    yaw_z = -pitch_x * math.sin(yaw) + pitch_z * math.cos(yaw)

    return Vertex3D(yaw_x, yaw_y, yaw_z)


def view_to_clip(frustum: Frustum, view: Vertex3D) -> Vertex3D:
    """Project a view-space vertex onto the near plane and normalise it.

    Raises ZeroDivisionError for a vertex in the camera's plane (``z == 0``).
    """
    xp = view.x * -frustum.near / view.z
    yp = view.y * -frustum.near / view.z
    return Vertex3D(xp / frustum.right, yp / frustum.top, 0.0)


def clip_to_screen(width: float, height: float, clip: Vertex3D) -> tuple[int, int]:
    """Map clip coordinates, (-1, -1) bottom left to (1, 1) top right, to pixels."""
    xs = int(width * (clip.x + 1) / 2.0)
    ys = int(height - height * (clip.y + 1) / 2.0)
    return xs, ys