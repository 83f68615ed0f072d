"""An in-memory 32-bit image and line drawing onto it."""

from __future__ import annotations

import math
import sys
from array import array
from typing import Protocol

from fdfview.errors import ExitCode, FdfError


class _Vertex(Protocol):
    x: float
    y: float
    color: int


class Canvas:
    """A width x height grid of 32-bit pixels, stored row by row.

    Pixels hold 0xAARRGGBB values; the byte form is little-endian, so each
    pixel is written blue, green, red, alpha.
    """

    bits_per_pixel = 32

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = array("I", bytes(4 * width * height))

    @property
    def line_length(self) -> int:
        """Number of bytes in one row."""
        return self.width * 4

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel.

        Coordinates below zero or beyond the far edge raise FdfError with the
        pixel-range exit code; a pixel exactly on the far edge is dropped.
        """
        if x < 0 or y < 0 or x > self.width or y > self.height:
            raise FdfError(ExitCode.PIXEL_RANGE)
        if x == self.width or y == self.height:
            return
        self._pixels[y * self.width + x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the value of one pixel."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return self._pixels[y * self.width + x]

    def fill(self, color: int) -> None:
        """Set every pixel to ``color``."""
        self._pixels = array("I", [color & 0xFFFFFFFF]) * (self.width * self.height)

    def to_bytes(self) -> bytes:
        """Return the pixels as little-endian 32-bit words, row by row."""
        data = array("I", self._pixels)
        if sys.byteorder == "big":
            data.byteswap()
        return data.tobytes()


def _line_along_x(canvas: Canvas, start: _Vertex, end: _Vertex) -> None:
    delta_x = abs(int(end.x - start.x))
    raw_dy = int(end.y - start.y)
    y_step = -1 if raw_dy < 0 else 1
    delta_y = abs(raw_dy)
    x = int(start.x)
    y = int(start.y)
    decision = 2 * delta_y - delta_x
    while x <= end.x:
        if 0 <= x < canvas.width and 0 <= y < canvas.height:
            canvas.put_pixel(x, y, start.color)
        if decision > 0:
            y += y_step
            decision += 2 * (delta_y - delta_x)
        else:
            decision += 2 * delta_y
        x += 1


def _line_along_y(canvas: Canvas, start: _Vertex, end: _Vertex) -> None:
    raw_dx = int(end.x - start.x)
    x_step = -1 if raw_dx < 0 else 1
    delta_x = abs(raw_dx)
    delta_y = abs(int(end.y - start.y))
    x = int(start.x)
    y = int(start.y)
    decision = 2 * delta_x - delta_y
    while y <= end.y:
        if 0 <= x < canvas.width and 0 <= y < canvas.height:
            canvas.put_pixel(x, y, start.color)
        if decision > 0:
            x += x_step
            decision += 2 * (delta_x - delta_y)
        else:
            decision += 2 * delta_x
        y += 1


def draw_line(canvas: Canvas, start: _Vertex, end: _Vertex) -> None:
    """Draw a line between two points with Bresenham's algorithm.

    The line takes the colour of the point it is walked from (the one with
    the smaller coordinate along the major axis). Parts outside the canvas
    are skipped.
    """
    if not all(math.isfinite(c) for c in (start.x, start.y, end.x, end.y)):
        return
    if abs(end.x - start.x) > abs(end.y - start.y):
        if start.x > end.x:
            start, end = end, start
        _line_along_x(canvas, start, end)
    else:
        if start.y > end.y:
            start, end = end, start
        _line_along_y(canvas, start, end)