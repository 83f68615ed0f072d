"""Conversion of 0xRRGGBB colours to pixel values of a TrueColor visual."""

from __future__ import annotations

Shifts = tuple[int, int, int, int, int, int]


def _shift_and_width(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit mask, got {mask!r}")
    shift = (mask & -mask).bit_length() - 1
    mask >>= shift
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return shift, width


def color_shifts(red_mask: int, green_mask: int, blue_mask: int) -> Shifts:
    """Return (red shift, red bits, green shift, green bits, blue shift, blue bits).

    Each shift is the position of the lowest set bit of the mask and each bit
    count is the length of the run of ones starting there.
    """
    red = _shift_and_width(red_mask)
    green = _shift_and_width(green_mask)
    blue = _shift_and_width(blue_mask)
    return (*red, *green, *blue)


def good_color(color: int, depth: int, shifts: Shifts) -> int:
    """Return the pixel value for ``color`` on a visual of the given depth.

    Visuals of 24 bits or more take the colour unchanged; shallower ones get
    each channel cut to the width of its mask and moved into place.
    """
    if depth >= 24:
        return color
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )