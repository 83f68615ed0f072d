"""Exit codes of the viewer and the messages that go with them."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Reasons the viewer stops."""

    OK = 0
    INVALID_NAME = 1
    FDF_ALLOC = 2
    MLX_ALLOC = 3
    WINDOW_ALLOC = 4
    PIXEL_RANGE = 5
    BRESENHAM = 6
    MAP_ALLOC = 7
    MATRIX_ALLOC = 8
    CAMERA_ALLOC = 9


_GREEN = "\033[32;3m"
_RED = "\033[31;3m"
_RESET = "\033[0m"

_TEXTS: dict[ExitCode, str] = {
    ExitCode.OK: "FDF closed, Thank You :)",
    ExitCode.INVALID_NAME: "Error, invalid map name :(",
    ExitCode.FDF_ALLOC: "Error, unable to allocate fdf :(",
    ExitCode.MLX_ALLOC: "Error, unable to allocate mlx :(",
    ExitCode.WINDOW_ALLOC: "Error, unable to allocate window :(",
    ExitCode.PIXEL_RANGE: "Error, pixel outside window range :(",
    ExitCode.BRESENHAM: "Error, unable to use bresenham :(",
    ExitCode.MAP_ALLOC: "Error, unable to allocate map :(",
    ExitCode.MATRIX_ALLOC: "Error, unable to allocate matrix :(",
    ExitCode.CAMERA_ALLOC: "Error, unable to allocate camera :(",
}


def message(code: int) -> str:
    """Return the coloured terminal message for an exit code.

    Codes without a message give an empty string.
    """
    try:
        exit_code = ExitCode(code)
    except ValueError:
        return ""
    colour = _GREEN if exit_code is ExitCode.OK else _RED
    return f"{colour}{_TEXTS[exit_code]}{_RESET}\n"


class FdfError(Exception):
    """Raised when the viewer has to stop; carries the exit code."""

    def __init__(self, code: int) -> None:
        self.code = int(code)
        super().__init__(message(self.code).rstrip("\n"))