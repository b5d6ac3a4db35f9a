"""4x4 homogeneous matrices for the model, view and projection transforms."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from softrender.geometry import Frustum, Vertex3D

Vector3 = Sequence[float]


def _translation(x: float, y: float, z: float) -> np.ndarray:
    matrix = np.identity(4)
    matrix[:3, 3] = (x, y, z)
    return matrix


def _scaling(x: float, y: float, z: float) -> np.ndarray:
    return np.diag((float(x), float(y), float(z), 1.0))


def _rotation_x(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [[1, 0, 0, 0], [0, c, -s, 0], [0, s, c, 0], [0, 0, 0, 1]], dtype=float
    )


def _rotation_y(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [[c, 0, s, 0], [0, 1, 0, 0], [-s, 0, c, 0], [0, 0, 0, 1]], dtype=float
    )


def _rotation_z(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [[c, -s, 0, 0], [s, c, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]], dtype=float
    )


def build_model_matrix(position: Vector3, orientation: Vector3, scale: Vector3) -> np.ndarray:
    """Rotate (yaw, then pitch, then roll), then scale, then translate."""
    pitch, yaw, roll = orientation
    return (
        _translation(*position)
        @ _scaling(*scale)
        @ _rotation_z(roll)
        @ _rotation_x(pitch)
        @ _rotation_y(yaw)
    )


def build_view_matrix(camera_position: Vector3, camera_orientation: Vector3) -> np.ndarray:
    """Invert a camera that was oriented (yaw, pitch, roll) and then translated."""
    pitch, yaw, roll = camera_orientation
    cx, cy, cz = camera_position
    return (
        _rotation_y(-yaw)
        @ _rotation_x(-pitch)
        @ _rotation_z(-roll)
        @ _translation(-cx, -cy, -cz)
    )


def build_projection_matrix(frustum: Frustum) -> np.ndarray:
    """The perspective projection matrix of a viewing frustum."""
    n, f = frustum.near, frustum.far
    l, r = frustum.left, frustum.right
    b, t = frustum.bottom, frustum.top
    return np.array(
        [
            [2 * n / (r - l), 0, (r + l) / (r - l), 0],
            [0, 2 * n / (t - b), (t + b) / (t - b), 0],
            [0, 0, -(f + n) / (f - n), -2 * f * n / (f - n)],
            [0, 0, -1, 0],
        ],
        dtype=float,
    )


def build_mvp(model: np.ndarray, view: np.ndarray, projection: np.ndarray) -> np.ndarray:
    """Combine the matrices so that model is applied first and projection last."""
    return np.asarray(projection) @ np.asarray(view) @ np.asarray(model)


def transform_point(matrix: np.ndarray, vertex: Vector3) -> Vertex3D:
    """Transform a point and divide by w.

    Raises ZeroDivisionError when the transformed point has ``w == 0``.
    """
    x, y, z = vertex
    hx, hy, hz, hw = np.asarray(matrix, dtype=float) @ np.array((x, y, z, 1.0))
    if hw == 0:
        raise ZeroDivisionError("transformed point has w == 0")
    return Vertex3D(float(hx / hw), float(hy / hw), float(hz / hw))