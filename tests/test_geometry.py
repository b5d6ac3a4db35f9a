import math

import pytest

from softrender.geometry import (
    Frustum,
    Vertex3D,
    clip_to_screen,
    local_to_world,
    view_to_clip,
    world_to_view,
)

ZERO = (0.0, 0.0, 0.0)
ONE = (1.0, 1.0, 1.0)


def _xyz(v):
    return (v.x, v.y, v.z)


def _length(v):
    return math.sqrt(v.x**2 + v.y**2 + v.z**2)


def test_local_to_world_identity():
    v = Vertex3D(0.5, -0.25, 2.0)
    out = local_to_world(ZERO, ZERO, ONE, v)
    assert _xyz(out) == pytest.approx((0.5, -0.25, 2.0), abs=1e-9)


def test_local_to_world_translation_adds_position():
    v = Vertex3D(0.5, 0.5, -0.5)
    out = local_to_world((-1.5, 0.0, 3.0), ZERO, ONE, v)
    assert _xyz(out) == pytest.approx((-1.0, 0.5, 2.5), abs=1e-9)


def test_local_to_world_scale_multiplies():
    v = Vertex3D(0.5, -0.5, 0.5)
    out = local_to_world(ZERO, ZERO, (2.0, 3.0, 4.0), v)
    assert _xyz(out) == pytest.approx((1.0, -1.5, 2.0), abs=1e-9)


@pytest.mark.parametrize(
    "orientation",
    [(math.pi / 12, math.pi / 8, 0.0), (0.0, 0.0, math.pi / 12), (1.0, 2.0, 3.0)],
)
def test_rotation_preserves_length(orientation):
    v = Vertex3D(0.5, -0.5, 0.5)
    out = local_to_world(ZERO, orientation, ONE, v)
    assert math.isclose(_length(out), _length(v))


def test_yaw_keeps_y_component():
    v = Vertex3D(0.3, 0.7, -0.2)
    out = local_to_world(ZERO, (0.0, 1.1, 0.0), ONE, v)
    assert math.isclose(out.y, v.y)


def test_world_to_view_identity_camera():
    v = Vertex3D(0.5, 0.5, -0.5)
    out = world_to_view(ZERO, ZERO, v)
    assert _xyz(out) == pytest.approx((0.5, 0.5, -0.5), abs=1e-9)


def test_world_to_view_translates_by_camera():
    v = Vertex3D(0.5, 0.5, -0.5)
    out = world_to_view((0.0, 0.0, 3.0), ZERO, v)
    assert _xyz(out) == pytest.approx((0.5, 0.5, -3.5), abs=1e-9)


def test_world_to_view_inverts_yawed_placement():
    position = (1.5, 0.0, 2.6)
    orientation = (0.0, math.pi / 6, 0.0)
    v = Vertex3D(0.2, -0.4, 0.9)
    world = local_to_world(position, orientation, ONE, v)
    out = world_to_view(position, orientation, world)
    assert _xyz(out) == pytest.approx((0.2, -0.4, 0.9), abs=1e-9)


def test_frustum_from_fov_is_symmetric():
    f = Frustum.from_fov(60.0, 16 / 9, 0.1, 100.0)
    assert f.left == -f.right
    assert f.bottom == -f.top
    assert math.isclose(f.right / f.top, 16 / 9)
    assert (f.near, f.far) == (0.1, 100.0)


def test_frustum_ninety_degrees_top_equals_near():
    f = Frustum.from_fov(90.0, 1.0, 0.5, 10.0)
    assert math.isclose(f.top, 0.5)
    assert math.isclose(f.right, 0.5)


def test_view_to_clip_maps_frustum_corner_to_unit():
    f = Frustum.from_fov(60.0, 1.5, 0.1, 100.0)
    clip = view_to_clip(f, Vertex3D(f.right, f.top, -f.near))
    assert _xyz(clip) == pytest.approx((1.0, 1.0, 0.0), abs=1e-9)


def test_view_to_clip_perspective_divides_by_depth():
    f = Frustum.from_fov(60.0, 1.0, 0.1, 100.0)
    near = view_to_clip(f, Vertex3D(0.5, 0.5, -2.5))
    far = view_to_clip(f, Vertex3D(0.5, 0.5, -5.0))
    assert math.isclose(near.x, 2 * far.x)
    assert math.isclose(near.y, 2 * far.y)


def test_view_to_clip_zero_depth_raises():
    f = Frustum.from_fov(60.0, 1.0, 0.1, 100.0)
    with pytest.raises(ZeroDivisionError):
        view_to_clip(f, Vertex3D(1.0, 1.0, 0.0))


def test_clip_to_screen_corners_and_centre():
    assert clip_to_screen(800, 600, Vertex3D(-1.0, 1.0, 0.0)) == (0, 0)
    assert clip_to_screen(800, 600, Vertex3D(1.0, -1.0, 0.0)) == (800, 600)
    assert clip_to_screen(800, 600, Vertex3D(0.0, 0.0, 0.0)) == (400, 300)


def test_clip_to_screen_truncates_toward_zero():
    xs, ys = clip_to_screen(3, 3, Vertex3D(0.0, 0.0, 0.0))
    assert (xs, ys) == (1, 1)