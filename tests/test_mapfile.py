import pytest

from fdfview.errors import ExitCode, FdfError
from fdfview.mapfile import (
    BOTTOM_COLOR,
    DEFAULT_COLOR,
    MID_COLOR,
    TOP_COLOR,
    HeightMap,
    Point,
    height_color,
    parse_hex,
    parse_map,
    read_map,
    valid_map_name,
)

SQUARE = "0 0 0\n0 10 0\n0 0 0\n"


def test_dimensions_and_max_height():
    heightmap = parse_map(SQUARE)
    assert (heightmap.width, heightmap.height) == (3, 3)
    assert heightmap.max_z == 10
    assert len(heightmap.points) == 3
    assert all(len(row) == 3 for row in heightmap.points)


def test_points_are_centred():
    heightmap = parse_map(SQUARE)
    assert heightmap.points[1][1].x == 0
    assert heightmap.points[1][1].y == 0
    assert heightmap.points[1][1].z == 10
    xs = sorted({p.x for row in heightmap.points for p in row})
    assert xs[0] == -xs[-1]


def test_center_to_origin_shifts_by_half_size():
    heightmap = HeightMap(width=4, height=2, points=[[Point(3.0, 1.0)]])
    heightmap.center_to_origin()
    assert heightmap.points[0][0].x == 1.0
    assert heightmap.points[0][0].y == 0.0


def test_trailing_space_and_missing_newline():
    heightmap = parse_map("1 2 \n3 4")
    assert heightmap.width == 2
    assert [p.z for p in heightmap.points[1]] == [3.0, 4.0]


def test_explicit_colour_is_used():
    heightmap = parse_map("0,0xFF0000 1\n2 3,0x00ff00\n")
    assert heightmap.points[0][0].color == 0xFF0000
    assert heightmap.points[1][1].color == 0x00FF00
    assert heightmap.points[1][1].z == 3


def test_default_colour_without_height_colours():
    heightmap = parse_map("5 -5\n0 0\n")
    assert all(p.color == DEFAULT_COLOR for row in heightmap.points for p in row)


def test_height_colours():
    heightmap = parse_map("5 -5\n0 0\n", height_colors=True)
    assert heightmap.points[0][0].color == TOP_COLOR
    assert heightmap.points[0][1].color == BOTTOM_COLOR
    assert heightmap.points[1][0].color == MID_COLOR


def test_height_color_by_sign():
    assert height_color(7) == TOP_COLOR
    assert height_color(0) == MID_COLOR
    assert height_color(-7) == BOTTOM_COLOR


def test_negative_heights_leave_max_at_zero():
    heightmap = parse_map("-3 -4\n-1 -2\n")
    assert heightmap.max_z == 0
    assert heightmap.points[0][0].z == -3


def test_parse_hex_is_case_insensitive():
    assert parse_hex("FF") == parse_hex("ff") == 255
    assert parse_hex("1a2B") == int("1a2B", 16)


def test_parse_hex_stops_at_non_digit():
    assert parse_hex("ff\n") == parse_hex("ff")
    assert parse_hex("") == 0


@pytest.mark.parametrize(
    "text",
    ["", "1 2\n", "1\n2\n3\n", "1 2 3\n4 5\n", "1 2\n\n3 4\n"],
)
def test_invalid_maps_raise(text):
    with pytest.raises(FdfError) as info:
        parse_map(text)
    assert info.value.code == ExitCode.MAP_ALLOC


def test_read_map_round_trip(tmp_path):
    path = tmp_path / "square.fdf"
    path.write_text(SQUARE)
    heightmap = read_map(path)
    assert heightmap == parse_map(SQUARE)


def test_read_map_missing_file(tmp_path):
    with pytest.raises(FdfError):
        read_map(tmp_path / "absent.fdf")


def test_valid_map_name(tmp_path):
    good = tmp_path / "map.fdf"
    good.write_text(SQUARE)
    empty = tmp_path / "empty.fdf"
    empty.write_text("")
    other = tmp_path / "map.txt"
    other.write_text(SQUARE)
    assert valid_map_name(good) is True
    assert valid_map_name(empty) is False
    assert valid_map_name(other) is False
    assert valid_map_name(tmp_path / "missing.fdf") is False