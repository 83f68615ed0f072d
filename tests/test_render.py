from fdfview.camera import Camera, project
from fdfview.canvas import Canvas
from fdfview.mapfile import parse_map
from fdfview.render import (
    BORDER_COLOR,
    MENU_BAR_COLOR,
    MENU_TEXT_COLOR,
    WINDOW_BACKGROUND,
    Label,
    menu_labels,
    render,
    render_background,
    render_menu_bar,
)


def test_background_fills_inside_and_frames_edges():
    canvas = Canvas(20, 20)
    render_background(canvas, 0x123456)
    assert canvas.get_pixel(10, 10) == 0x123456
    assert canvas.get_pixel(15, 15) == 0x123456
    assert canvas.get_pixel(0, 0) == BORDER_COLOR
    assert canvas.get_pixel(4, 10) == BORDER_COLOR
    assert canvas.get_pixel(16, 10) == BORDER_COLOR
    assert canvas.get_pixel(10, 19) == BORDER_COLOR


def test_menu_bar_covers_left_panel_only():
    canvas = Canvas(300, 50)
    render_menu_bar(canvas, 0xABCDEF)
    assert canvas.get_pixel(100, 20) == 0xABCDEF
    assert canvas.get_pixel(2, 20) == BORDER_COLOR
    assert canvas.get_pixel(197, 20) == BORDER_COLOR
    assert canvas.get_pixel(100, 46) == BORDER_COLOR
    assert canvas.get_pixel(250, 20) == 0


def test_menu_labels_plain():
    labels = menu_labels(0x111111, False)
    assert labels[-1].text == "Bonus is much more fun :)"
    assert all(label.color == 0x111111 for label in labels)
    assert Label(20, 100, 0x111111, "Increase Scale Z - 'x'") in labels


def test_menu_labels_bonus():
    labels = menu_labels(0x222222, True)
    texts = [label.text for label in labels]
    assert "Reset Projection - 'r'" in texts
    assert "Bonus is much more fun :)" not in texts
    ys = [label.y for label in labels]
    assert ys == sorted(ys)


def test_render_draws_map_and_menu():
    heightmap = parse_map("0 0 0\n0 0 0\n0 0 0\n")
    camera = Camera.for_map(heightmap)
    canvas = Canvas(1300, 900)
    labels = render(canvas, heightmap, camera, False)
    assert labels == menu_labels(MENU_TEXT_COLOR, False)
    center = heightmap.points[1][1]
    screen, _ = project(camera, center, center)
    assert canvas.get_pixel(int(screen.x), int(screen.y)) == 0xFFFFFF
    assert canvas.get_pixel(100, 100) == MENU_BAR_COLOR
    assert canvas.get_pixel(0, 0) == BORDER_COLOR
    assert canvas.get_pixel(1299, 899) == BORDER_COLOR
    assert canvas.get_pixel(1250, 20) == WINDOW_BACKGROUND


def test_render_uses_map_colours():
    row = " ".join(["0,0xFF0000"] * 3)
    heightmap = parse_map(f"{row}\n{row}\n{row}\n", height_colors=True)
    camera = Camera.for_map(heightmap)
    canvas = Canvas(1300, 900)
    labels = render(canvas, heightmap, camera, True)
    assert labels == menu_labels(MENU_TEXT_COLOR, True)
    center = heightmap.points[1][1]
    screen, _ = project(camera, center, center)
    assert canvas.get_pixel(int(screen.x), int(screen.y)) == 0xFF0000