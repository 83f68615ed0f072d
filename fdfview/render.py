"""Drawing of the wire-frame, the background and the side menu."""

from __future__ import annotations

from dataclasses import dataclass

from fdfview.camera import Camera, project
from fdfview.canvas import Canvas, draw_line
from fdfview.mapfile import HeightMap, Point

WINDOW_BACKGROUND = 0x22223B
MENU_BAR_COLOR = 0x4A4E69
MENU_TEXT_COLOR = 0xF2E9E4
BORDER_COLOR = 0x010101

MENU_WIDTH = 200
BORDER = 5


@dataclass(frozen=True)
class Label:
    """A line of menu text; ``y`` is the baseline."""

    x: int
    y: int
    color: int
    text: str


_ASCII_MENU: tuple[tuple[int, int, str], ...] = (
    (25, 20, "     __________  ______"),
    (25, 30, "    / ____/ __ \\/ ____/"),
    (25, 40, "   / /_  / / / / /_    "),
    (25, 50, "  / __/ / /_/ / __/    "),
    (25, 60, " /_/   /_____/_/       "),
    (20, 75, "_________________________"),
)

_HEIGHT_MENU: tuple[tuple[int, int, str], ...] = (
    (20, 100, "Increase Scale Z - 'x'"),
    (20, 120, "Decrease Scale Z - 'z'"),
)

_PLAIN_MENU: tuple[tuple[int, int, str], ...] = (
    (20, 160, "Bonus is much more fun :)"),
)

_BONUS_MENU: tuple[tuple[int, int, str], ...] = (
    (20, 150, "Zoom in - '+'"),
    (20, 170, "Zoom out - '-'"),
    (20, 200, "Move Up - 'Arrow Up'"),
    (20, 220, "Move Down - 'Arrow Down'"),
    (20, 240, "Move Left - 'Arrow Left'"),
    (20, 260, "Move Right - 'Arrow Right'"),
    (20, 290, "Rotate X - 'a / d'"),
    (20, 310, "Rotate Y - 'w / s'"),
    (20, 330, "Rotate Z - 'q / e'"),
    (20, 360, "Isometric Projection - '1'"),
    (20, 380, "Oblique Projection - '2'"),
    (20, 400, "Top-Down Projection - '3'"),
    (20, 430, "Reset Projection - 'r'"),
)


def _fill_rect(canvas: Canvas, left: int, top: int, right: int, bottom: int,
               color: int) -> None:
    for y in range(max(top, 0), min(bottom, canvas.height)):
        for x in range(max(left, 0), min(right, canvas.width)):
            canvas.put_pixel(x, y, color)


def render_background(canvas: Canvas, color: int) -> None:
    """Fill the canvas with ``color`` inside a thin dark frame."""
    width, height = canvas.width, canvas.height
    far_x = width - BORDER + 1
    far_y = height - BORDER + 1
    canvas.fill(color)
    _fill_rect(canvas, 0, 0, width, BORDER, BORDER_COLOR)
    _fill_rect(canvas, 0, far_y, width, height, BORDER_COLOR)
    _fill_rect(canvas, 0, BORDER, BORDER, far_y, BORDER_COLOR)
    _fill_rect(canvas, far_x, BORDER, width, far_y, BORDER_COLOR)


def render_menu_bar(canvas: Canvas, color: int) -> None:
    """Paint the framed menu panel along the left edge."""
    width = min(MENU_WIDTH, canvas.width)
    far_x = MENU_WIDTH - BORDER
    far_y = canvas.height - BORDER
    for y in range(canvas.height):
        edge_row = y < BORDER or y > far_y
        for x in range(width):
            framed = edge_row or x < BORDER or x > far_x
            canvas.put_pixel(x, y, BORDER_COLOR if framed else color)


def menu_labels(color: int, bonus: bool = False) -> list[Label]:
    """Return the menu text lines in drawing order."""
    entries = _ASCII_MENU + _HEIGHT_MENU + (_BONUS_MENU if bonus else _PLAIN_MENU)
    return [Label(x, y, color, text) for x, y, text in entries]


def _segment(canvas: Canvas, camera: Camera, start: Point, end: Point) -> None:
    first, second = project(camera, start, end)
    draw_line(canvas, first, second)


def render(canvas: Canvas, heightmap: HeightMap, camera: Camera,
           bonus: bool = False) -> list[Label]:
    """Draw one frame of the map and return the menu text to show over it."""
    render_background(canvas, WINDOW_BACKGROUND)
    points = heightmap.points
    for y, row in enumerate(points):
        for x, point in enumerate(row):
            if x < heightmap.width - 1:
                _segment(canvas, camera, point, row[x + 1])
            if y < heightmap.height - 1:
                _segment(canvas, camera, point, points[y + 1][x])
    render_menu_bar(canvas, MENU_BAR_COLOR)
    return menu_labels(MENU_TEXT_COLOR, bonus)