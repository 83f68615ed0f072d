"""Reading of .fdf height maps."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from fdfview.errors import ExitCode, FdfError

TOP_COLOR = 0xF4A261
MID_COLOR = 0x2A9D8F
BOTTOM_COLOR = 0x264653
DEFAULT_COLOR = 0xFFFFFF

_LINE = re.compile(r"[^\n]*\n|[^\n]+")
_INT_PREFIX = re.compile(r"[\t\n\v\f\r ]*([+-]?\d+)")
_HEX_PREFIX = re.compile(r"[0-9A-Fa-f]*")


@dataclass
class Point:
    """One vertex of the map: position, height and colour."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    color: int = 0


@dataclass
class HeightMap:
    """A grid of points, ``points[row][column]``."""

    width: int
    height: int
    points: list[list[Point]] = field(default_factory=list)
    max_z: float = 0.0

    def center_to_origin(self) -> None:
        """Shift every point so the grid is centred on the origin."""
        dx = self.width // 2
        dy = self.height // 2
        for row in self.points:
            for point in row:
                point.x -= dx
                point.y -= dy


def valid_map_name(path: str | Path) -> bool:
    """Return True if the name contains ``.fdf`` and the file has a first line."""
    if ".fdf" not in str(path):
        return False
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            first = handle.readline()
    except OSError:
        return False
    return first != ""


def parse_hex(digits: str) -> int:
    """Parse the leading hexadecimal digits of ``digits`` (either case)."""
    match = _HEX_PREFIX.match(digits)
    text = match.group(0) if match else ""
    return int(text, 16) if text else 0


def height_color(z: float) -> int:
    """Return the colour for a height when the map gives none."""
    if z > 0:
        return TOP_COLOR
    if z == 0:
        return MID_COLOR
    return BOTTOM_COLOR


def _atoi(token: str) -> int:
    match = _INT_PREFIX.match(token)
    return int(match.group(1)) if match else 0


def _tokens(line: str) -> list[str]:
    words = []
    for word in line.split(" "):
        if not word:
            continue
        if word == "\n":
            break
        words.append(word)
    return words


def _token_color(token: str, z: float, height_colors: bool) -> int:
    if "," in token:
        x_at = token.find("x")
        start = x_at + 1 if x_at >= 0 else token.index(",") + 1
        return parse_hex(token[start:])
    if height_colors:
        return height_color(z)
    return DEFAULT_COLOR


def parse_map(text: str, height_colors: bool = False) -> HeightMap:
    """Build a centred height map from the text of a .fdf file.

    Every line must hold the same number of values, and the map must be at
    least two values wide and two lines high; otherwise FdfError is raised.
    """
    rows = [_tokens(line) for line in _LINE.findall(text)]
    height = len(rows)
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        width = 0
    if width < 2 or height < 2:
        raise FdfError(ExitCode.MAP_ALLOC)

    heightmap = HeightMap(width=width, height=height)
    for y, row in enumerate(rows):
        points = []
        for x, token in enumerate(row):
            z = float(_atoi(token))
            heightmap.max_z = max(heightmap.max_z, z)
            points.append(
                Point(float(x), float(y), z, _token_color(token, z, height_colors))
            )
        heightmap.points.append(points)
    heightmap.center_to_origin()
    return heightmap


def read_map(path: str | Path, height_colors: bool = False) -> HeightMap:
    """Read and parse a .fdf file."""
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise FdfError(ExitCode.MAP_ALLOC) from exc
    return parse_map(text, height_colors)