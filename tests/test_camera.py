import math

import pytest

from fdfview.camera import (
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Camera,
    Key,
    Projection,
    project,
    scale_factor,
)
from fdfview.errors import ExitCode, FdfError
from fdfview.mapfile import Point, parse_map


@pytest.fixture
def flat_map():
    return parse_map("0 0 0\n0 10 0\n0 0 0\n")


@pytest.fixture
def tall_map():
    return parse_map("0 400\n0 0\n")


@pytest.fixture
def middle_map():
    return parse_map("0 100\n0 0\n")


def _plain_camera(projection=Projection.TOP_VIEW):
    return Camera(projection=projection, scale=1.0, x_offset=0, y_offset=0)


def test_scale_factor_shrinks_with_larger_maps():
    assert scale_factor(20, 20) < scale_factor(10, 10)


def test_scale_factor_limited_by_tighter_side():
    assert scale_factor(10, 10) == scale_factor(5, 10)


def test_scale_factor_small_values_unchanged():
    assert scale_factor(WINDOW_WIDTH, WINDOW_HEIGHT) == pytest.approx(1.0)


def test_for_map_defaults(flat_map):
    camera = Camera.for_map(flat_map)
    assert camera.projection is Projection.ISOMETRIC
    assert camera.x_offset == WINDOW_WIDTH // 2 + 100
    assert camera.y_offset == WINDOW_HEIGHT // 2
    assert camera.multi_factor == 10
    assert (camera.rotate_x, camera.rotate_y, camera.rotate_z) == (0, 0, 0)
    assert camera.scale == scale_factor(flat_map.width, flat_map.height)


def test_height_factor_for_tall_and_middle_maps(tall_map, middle_map):
    assert Camera.for_map(tall_map).multi_factor == 0.05
    assert Camera.for_map(middle_map).multi_factor == 1


def test_escape_raises_clean_exit(flat_map):
    camera = Camera.for_map(flat_map)
    with pytest.raises(FdfError) as info:
        camera.handle_key(Key.ESCAPE, flat_map.max_z)
    assert info.value.code == ExitCode.OK


def test_height_keys_round_trip(flat_map):
    camera = Camera.for_map(flat_map)
    before = camera.multi_factor
    assert camera.handle_key(Key.X, flat_map.max_z, bonus=False)
    assert camera.multi_factor == before + 1
    camera.handle_key(Key.Z, flat_map.max_z, bonus=False)
    assert camera.multi_factor == before


def test_mandatory_ignores_bonus_keys(flat_map):
    camera = Camera.for_map(flat_map)
    before = Camera.for_map(flat_map)
    for key in (Key.EQUAL, Key.UP, Key.W, Key.TWO, Key.R):
        assert camera.handle_key(key, flat_map.max_z, bonus=False) is False
    assert camera == before


def test_movement_keys(flat_map):
    camera = Camera.for_map(flat_map)
    y = camera.y_offset
    x = camera.x_offset
    camera.handle_key(Key.UP, flat_map.max_z)
    assert camera.y_offset == y + 10
    camera.handle_key(Key.DOWN, flat_map.max_z)
    camera.handle_key(Key.LEFT, flat_map.max_z)
    camera.handle_key(Key.RIGHT, flat_map.max_z)
    assert (camera.x_offset, camera.y_offset) == (x, y)


def test_zoom_keys_round_trip(tall_map):
    camera = Camera.for_map(tall_map)
    before = camera.scale
    camera.handle_key(Key.EQUAL, tall_map.max_z)
    assert camera.scale > before
    camera.handle_key(Key.MINUS, tall_map.max_z)
    assert camera.scale == pytest.approx(before)


def test_rotation_keys_round_trip(flat_map):
    camera = Camera.for_map(flat_map)
    camera.handle_key(Key.W, flat_map.max_z)
    camera.handle_key(Key.D, flat_map.max_z)
    camera.handle_key(Key.E, flat_map.max_z)
    assert camera.rotate_x > 0 and camera.rotate_y > 0 and camera.rotate_z > 0
    camera.handle_key(Key.S, flat_map.max_z)
    camera.handle_key(Key.A, flat_map.max_z)
    camera.handle_key(Key.Q, flat_map.max_z)
    assert camera.rotate_x == pytest.approx(0)
    assert camera.rotate_y == pytest.approx(0)
    assert camera.rotate_z == pytest.approx(0)


def test_projection_keys(flat_map):
    camera = Camera.for_map(flat_map)
    camera.handle_key(Key.TWO, flat_map.max_z)
    assert camera.projection is Projection.OBLIQUE
    camera.handle_key(Key.THREE, flat_map.max_z)
    assert camera.projection is Projection.TOP_VIEW
    camera.handle_key(Key.ONE, flat_map.max_z)
    assert camera.projection is Projection.ISOMETRIC


def test_reset_key_restores_start(flat_map):
    camera = Camera.for_map(flat_map)
    for key in (Key.TWO, Key.UP, Key.W, Key.EQUAL, Key.X):
        camera.handle_key(key, flat_map.max_z)
    assert camera != Camera.for_map(flat_map)
    assert camera.handle_key(Key.R, flat_map.max_z)
    assert camera == Camera.for_map(flat_map)


def test_unknown_key_is_ignored(flat_map):
    camera = Camera.for_map(flat_map)
    assert camera.handle_key(0x1234, flat_map.max_z) is False
    assert camera == Camera.for_map(flat_map)


def test_project_leaves_inputs_alone():
    camera = _plain_camera(Projection.ISOMETRIC)
    start = Point(1.0, 2.0, 3.0, 0xFF0000)
    end = Point(4.0, 5.0, 6.0, 0x00FF00)
    new_start, new_end = project(camera, start, end)
    assert start == Point(1.0, 2.0, 3.0, 0xFF0000)
    assert end == Point(4.0, 5.0, 6.0, 0x00FF00)
    assert (new_start.color, new_end.color) == (0xFF0000, 0x00FF00)


def test_top_view_scales_only():
    camera = Camera(projection=Projection.TOP_VIEW, scale=2.0, x_offset=0, y_offset=0)
    start, _ = project(camera, Point(3.0, 4.0, 7.0), Point(0.0, 0.0, 0.0))
    assert (start.x, start.y) == pytest.approx((6.0, 8.0))


def test_offsets_shift_projection():
    camera = _plain_camera(Projection.ISOMETRIC)
    point = Point(2.0, -1.0, 3.0)
    base, _ = project(camera, point, point)
    camera.x_offset += 10
    camera.y_offset -= 10
    moved, _ = project(camera, point, point)
    assert moved.x == pytest.approx(base.x + 10)
    assert moved.y == pytest.approx(base.y - 10)


def test_isometric_diagonal_lands_on_vertical_axis():
    camera = _plain_camera(Projection.ISOMETRIC)
    start, end = project(camera, Point(5.0, 5.0, 0.0), Point(-3.0, -3.0, 2.0))
    assert start.x == pytest.approx(0.0)
    assert end.x == pytest.approx(0.0)


def test_isometric_height_raises_point():
    camera = _plain_camera(Projection.ISOMETRIC)
    low, high = project(camera, Point(1.0, 1.0, 0.0), Point(1.0, 1.0, 4.0))
    assert high.y < low.y
    assert high.x == pytest.approx(low.x)


def test_oblique_flat_diagonal_ratio():
    camera = _plain_camera(Projection.OBLIQUE)
    start, _ = project(camera, Point(2.0, 2.0, 0.0), Point(0.0, 0.0, 0.0))
    assert start.x / start.y == pytest.approx(math.sqrt(3))


def test_full_turn_matches_no_rotation():
    camera = _plain_camera(Projection.TOP_VIEW)
    point = Point(3.0, -2.0, 0.0)
    base, _ = project(camera, point, point)
    camera.rotate_z = 2 * math.pi
    turned, _ = project(camera, point, point)
    assert (turned.x, turned.y) == pytest.approx((base.x, base.y))


def test_quarter_turn_about_z():
    camera = _plain_camera(Projection.TOP_VIEW)
    camera.rotate_z = math.pi / 2
    point = Point(3.0, -2.0, 0.0)
    turned, _ = project(camera, point, point)
    assert turned.x == pytest.approx(-point.y)
    assert turned.y == pytest.approx(point.x)