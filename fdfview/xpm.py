"""Loading of XPM images into canvases."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from fdfview.canvas import Canvas
from fdfview.colors import NONE_COLOR, lookup_color

TRANSPARENT = 0xFF000000
"""Pixel value given to the ``None`` colour."""

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_BLOCK_COMMENTS = re.compile(r'"[^"]*"?|/\*.*?(?:\*/|\Z)', re.DOTALL)
_LINE_COMMENTS = re.compile(r'"[^"]*"?|//[^\n]*(?:\n|\Z)')
_QUOTED = re.compile(r'"([^"]*)"')
_ATOI = re.compile(r"[\t\n\v\f\r ]*([+-]?\d+)")
_STRTOL_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _blank(match: re.Match[str]) -> str:
    found = match.group(0)
    return found if found.startswith('"') else " " * len(found)


def strip_comments(text: str) -> str:
    """Replace C comments outside double quotes with spaces.

    Block comments go first, then line comments together with the newline
    that ends them.
    """
    text = _BLOCK_COMMENTS.sub(_blank, text)
    return _LINE_COMMENTS.sub(_blank, text)


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Return the colour for an XPM colour specification.

    ``#`` introduces hexadecimal digits. Otherwise ``name`` (joined to
    ``end`` with a space when given) is looked up as a colour name; unknown
    names give 0 and ``none`` gives -1.
    """
    if name.startswith("#"):
        match = _STRTOL_HEX.match(name[1:])
        sign, digits = match.group(1), match.group(2)
        value = int(digits, 16) if digits else 0
        return -value if sign == "-" else value
    if end is not None:
        name = f"{name} {end}"[:63]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in ``text``."""
    for match in _QUOTED.finditer(text):
        yield match.group(1)


def _atoi(word: str) -> int:
    match = _ATOI.match(word)
    return int(match.group(1)) if match else 0


def xpm_to_image(lines: Iterable[str]) -> Canvas:
    """Build a canvas from the strings of an XPM image."""
    rows = iter(lines)

    def next_line() -> str:
        try:
            return next(rows)
        except StopIteration:
            raise XpmError("XPM data ends early") from None

    header = split_words(next_line())
    if len(header) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header: {' '.join(header[:4])!r}")

    last_wins = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line()
        words = split_words(line[cpp:])
        try:
            at = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line without a 'c' key: {line!r}") from None
        if at >= len(words):
            raise XpmError(f"colour line without a colour: {line!r}")
        rgb = text_to_rgb(words[at], words[at + 1] if at + 1 < len(words) else None)
        key = line[:cpp]
        if last_wins:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    canvas = Canvas(width, height)
    for y in range(height):
        line = next_line()
        codes = (line[start:start + cpp] for start in range(0, width * cpp, cpp))
        for x, code in enumerate(codes):
            color = palette.get(code, 0)
            if color == NONE_COLOR:
                color = TRANSPARENT
            canvas.put_pixel(x, y, color)
    return canvas


def xpm_file_to_image(path: str | Path) -> Canvas:
    """Read an XPM file and build a canvas from it."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return xpm_to_image(quoted_lines(strip_comments(text)))