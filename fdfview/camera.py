"""Camera state, keyboard control and projection of map points."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum

from fdfview.errors import ExitCode, FdfError
from fdfview.mapfile import HeightMap, Point

WINDOW_WIDTH = 1300
WINDOW_HEIGHT = 900

ISO_ANGLE = math.radians(30)
"""Angle of the isometric and oblique axes."""

ROTATION_STEP = math.radians(5)
"""Rotation applied by one key press."""

OBLIQUE_SCALE = 1.545
MOVE_STEP = 10


class Projection(Enum):
    """How map points are laid onto the screen."""

    ISOMETRIC = 1
    OBLIQUE = 2
    TOP_VIEW = 3


class Key(IntEnum):
    """X keysyms of the keys the viewer reacts to."""

    ESCAPE = 0xFF1B
    LEFT = 0xFF51
    UP = 0xFF52
    RIGHT = 0xFF53
    DOWN = 0xFF54
    MINUS = 0x2D
    EQUAL = 0x3D
    ONE = 0x31
    TWO = 0x32
    THREE = 0x33
    A = 0x61
    D = 0x64
    E = 0x65
    Q = 0x71
    R = 0x72
    S = 0x73
    W = 0x77
    X = 0x78
    Z = 0x7A


_PROJECTION_KEYS = {
    Key.ONE: Projection.ISOMETRIC,
    Key.TWO: Projection.OBLIQUE,
    Key.THREE: Projection.TOP_VIEW,
}

_MOVES = {
    Key.UP: (0, MOVE_STEP),
    Key.DOWN: (0, -MOVE_STEP),
    Key.LEFT: (MOVE_STEP, 0),
    Key.RIGHT: (-MOVE_STEP, 0),
}

_ROTATIONS = {
    Key.W: ("rotate_x", ROTATION_STEP),
    Key.S: ("rotate_x", -ROTATION_STEP),
    Key.D: ("rotate_y", ROTATION_STEP),
    Key.A: ("rotate_y", -ROTATION_STEP),
    Key.E: ("rotate_z", ROTATION_STEP),
    Key.Q: ("rotate_z", -ROTATION_STEP),
}


def scale_factor(width: int, height: int) -> float:
    """Return the zoom that fits a map of this size into the window.

    Small factors (below 3) are used as they are; larger ones leave a margin.
    """
    factor = min(WINDOW_WIDTH / width, WINDOW_HEIGHT / height)
    if factor < 3:
        return factor
    return factor / 1.2


def _height_factor(max_z: float) -> float:
    if max_z < 50:
        return 10.0
    if max_z > 300:
        return 0.05
    return 1.0


@dataclass
class Camera:
    """View parameters: projection, zoom, offsets, height factor and rotations."""

    projection: Projection = Projection.ISOMETRIC
    scale: float = 1.0
    x_offset: float = WINDOW_WIDTH // 2 + 100
    y_offset: float = WINDOW_HEIGHT // 2
    multi_factor: float = 1.0
    rotate_x: float = 0.0
    rotate_y: float = 0.0
    rotate_z: float = 0.0
    home_scale: float = field(default=1.0, repr=False)

    @classmethod
    def for_map(cls, heightmap: HeightMap) -> Camera:
        """Return a camera set up to show the whole map."""
        camera = cls()
        camera.reset(heightmap)
        return camera

    def reset(self, heightmap: HeightMap) -> None:
        """Return every setting to its starting value for ``heightmap``."""
        self.home_scale = scale_factor(heightmap.width, heightmap.height)
        self._restore(heightmap.max_z)

    def _restore(self, max_z: float) -> None:
        self.projection = Projection.ISOMETRIC
        self.scale = self.home_scale
        self.x_offset = WINDOW_WIDTH // 2 + 100
        self.y_offset = WINDOW_HEIGHT // 2
        self.multi_factor = _height_factor(max_z)
        self.rotate_x = 0.0
        self.rotate_y = 0.0
        self.rotate_z = 0.0

    def handle_key(self, key: int, max_z: float, bonus: bool = True) -> bool:
        """Apply a key press; return True if the camera reacted to it.

        Escape raises FdfError with the normal exit code. Without ``bonus``
        only the height keys (x and z) are known.
        """
        if key == Key.ESCAPE:
            raise FdfError(ExitCode.OK)
        if key in (Key.X, Key.Z):
            step = 1.0 if max_z < 20 else 0.01
            self.multi_factor += step if key == Key.X else -step
            return True
        if not bonus:
            return False
        if key in (Key.EQUAL, Key.MINUS):
            step = 1.0 if max_z < 50 else 0.2
            self.scale += step if key == Key.EQUAL else -step
        elif key in _MOVES:
            dx, dy = _MOVES[key]
            self.x_offset += dx
            self.y_offset += dy
        elif key in _ROTATIONS:
            name, step = _ROTATIONS[key]
            setattr(self, name, getattr(self, name) + step)
        elif key == Key.R:
            self._restore(max_z)
        elif key in _PROJECTION_KEYS:
            self.projection = _PROJECTION_KEYS[Key(key)]
        else:
            return False
        return True


def _isometric(camera: Camera, point: Point) -> None:
    x = (point.x - point.y) * math.cos(ISO_ANGLE)
    y = (point.x + point.y) * math.sin(ISO_ANGLE) - point.z * camera.multi_factor
    point.x, point.y = x, y


def _oblique(camera: Camera, point: Point) -> None:
    lift = 0.5 * (point.z * -camera.multi_factor)
    point.x = (point.x + lift) * OBLIQUE_SCALE * math.cos(ISO_ANGLE)
    point.y = (point.y + lift) * OBLIQUE_SCALE * math.sin(ISO_ANGLE)


def _rotate_x(camera: Camera, point: Point) -> None:
    cos_a, sin_a = math.cos(camera.rotate_x), math.sin(camera.rotate_x)
    z = point.z * camera.multi_factor
    point.y, point.z = point.y * cos_a - z * sin_a, point.y * sin_a + z * cos_a


def _rotate_y(camera: Camera, point: Point) -> None:
    cos_a, sin_a = math.cos(camera.rotate_y), math.sin(camera.rotate_y)
    point.x, point.z = (
        point.x * cos_a + point.z * sin_a,
        point.x * sin_a + point.z * cos_a,
    )


def _rotate_z(camera: Camera, point: Point) -> None:
    cos_a, sin_a = math.cos(camera.rotate_z), math.sin(camera.rotate_z)
    point.x, point.y = (
        point.x * cos_a - point.y * sin_a,
        point.x * sin_a + point.y * cos_a,
    )


def _transform(camera: Camera, point: Point) -> Point:
    moved = replace(point)
    moved.x *= camera.scale
    moved.y *= camera.scale
    if camera.projection is Projection.ISOMETRIC:
        _isometric(camera, moved)
    elif camera.projection is Projection.OBLIQUE:
        _oblique(camera, moved)
    _rotate_x(camera, moved)
    _rotate_y(camera, moved)
    _rotate_z(camera, moved)
    moved.x += camera.x_offset
    moved.y += camera.y_offset
    return moved


def project(camera: Camera, start: Point, end: Point) -> tuple[Point, Point]:
    """Return screen positions of both ends of a segment; inputs are unchanged."""
    return _transform(camera, start), _transform(camera, end)