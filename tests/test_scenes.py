import math

import numpy as np
import pytest

from softrender.geometry import Frustum, Vertex3D, clip_to_screen
from softrender.meshes import Mesh, cube, cube_view_space, house_clip, house_screen
from softrender.raster import Canvas, Color
from softrender.scenes import (
    Camera,
    Transform,
    camera_preset,
    draw_clip_mesh,
    draw_local_mesh,
    draw_matrix_mesh,
    draw_screen_mesh,
    draw_view_mesh,
    draw_world_mesh,
)

WIDTH, HEIGHT = 800, 600


@pytest.fixture
def frustum():
    return Frustum.from_fov(60.0, WIDTH / HEIGHT, 0.1, 100.0)


def _canvas():
    return Canvas(WIDTH, HEIGHT)


def test_camera_presets_match_the_source_values():
    assert camera_preset(1) == Camera((0, 0, 3), (0, 0, 0))
    assert camera_preset(2) == Camera((0, 0, 5), (0, 0, 0))
    assert camera_preset(3) == Camera((0, 0, 2), (0, 0, 0))
    four = camera_preset(4)
    assert four.position == (1.5, 0, 2.6)
    assert four.orientation[1] == pytest.approx(math.pi / 6)


@pytest.mark.parametrize("number", [0, 5, -1])
def test_unknown_camera_preset_is_rejected(number):
    with pytest.raises(ValueError):
        camera_preset(number)


def test_transform_defaults_are_identity():
    transform = Transform()
    assert transform.position == (0.0, 0.0, 0.0)
    assert transform.orientation == (0.0, 0.0, 0.0)
    assert transform.scale == (1.0, 1.0, 1.0)


def test_screen_mesh_draws_at_vertex_pixels():
    canvas = _canvas()
    drawn = draw_screen_mesh(canvas, house_screen(), Color.WHITE)
    assert drawn == len(house_screen().faces) // 3
    for vertex in house_screen().vertices:
        assert canvas.get_pixel(vertex) == Color.WHITE


def test_clip_mesh_vertices_land_where_clip_to_screen_puts_them():
    canvas = _canvas()
    mesh = house_clip()
    draw_clip_mesh(canvas, mesh, Color.GREEN)
    for vertex in mesh.vertices:
        point = clip_to_screen(WIDTH, HEIGHT, Vertex3D(vertex[0], vertex[1], 0.0))
        assert canvas.get_pixel(point) == Color.GREEN


def test_world_mesh_with_camera_at_origin_equals_view_mesh(frustum):
    expected = _canvas()
    draw_view_mesh(expected, frustum, cube_view_space(), Color.WHITE)
    actual = _canvas()
    draw_world_mesh(actual, frustum, Camera(), cube_view_space(), Color.WHITE)
    assert np.array_equal(expected.pixels, actual.pixels)
    assert expected.pixels.any()


def test_local_mesh_with_identity_transform_equals_view_mesh(frustum):
    expected = _canvas()
    draw_view_mesh(expected, frustum, cube_view_space(), Color.BLUE)
    actual = _canvas()
    draw_local_mesh(actual, frustum, Camera(), Transform(), cube_view_space(), Color.BLUE)
    assert np.array_equal(expected.pixels, actual.pixels)


def test_matrix_mesh_with_identity_matrices_equals_clip_mesh():
    identity = np.identity(4)
    expected = _canvas()
    draw_clip_mesh(expected, cube(), Color.RED)
    actual = _canvas()
    drawn = draw_matrix_mesh(actual, identity, identity, identity, cube(), Color.RED)
    assert drawn == len(cube().faces) // 3
    assert np.array_equal(expected.pixels, actual.pixels)


def test_triangle_in_camera_plane_is_skipped(frustum):
    mesh = Mesh(
        (Vertex3D(0, 0, 0), Vertex3D(1, 0, -2), Vertex3D(0, 1, -2)), (0, 1, 2)
    )
    canvas = _canvas()
    assert draw_view_mesh(canvas, frustum, mesh, Color.WHITE) == 0
    assert not canvas.pixels[:, :, :3].any()


def test_moving_camera_back_shrinks_the_drawing(frustum):
    near = _canvas()
    draw_world_mesh(near, frustum, camera_preset(3), cube(), Color.RED)
    far = _canvas()
    draw_world_mesh(far, frustum, camera_preset(2), cube(), Color.RED)
    near_lit = np.argwhere(near.pixels[:, :, 0])
    far_lit = np.argwhere(far.pixels[:, :, 0])
    near_span = near_lit.max(axis=0) - near_lit.min(axis=0)
    far_span = far_lit.max(axis=0) - far_lit.min(axis=0)
    assert (far_span < near_span).all()