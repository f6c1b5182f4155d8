"""Packed 0x00RRGGBB colors and two-tone brightness helpers."""

from __future__ import annotations

import math


def pack(r: int, g: int, b: int) -> int:
    """Pack red, green and blue bytes into one color. The top byte stays zero."""
    return ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def unpack(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


BLACK = pack(0, 0, 0)
WHITE = pack(255, 255, 255)

BACKGROUND = BLACK
FOREGROUND = WHITE

# Out of 255 per channel.
TRANSPARENCY_THRESHOLD = 100


def round_half_up(value: float) -> int:
    """Round halves away from zero (2.5 -> 3), unlike the builtin round()."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def darken(color: int, fraction: float) -> int:
    """Scale each channel of ``color`` to ``fraction`` (0.0 to 1.0) of its brightness.

    1.0 returns the color unchanged, 0.0 returns black.
    """
    fraction = max(0.0, min(1.0, float(fraction)))
    r, g, b = unpack(color)
    return pack(
        round_half_up(r * fraction),
        round_half_up(g * fraction),
        round_half_up(b * fraction),
    )


def brightness(color: int) -> int:
    """Channel sum; three times the average without the division."""
    r, g, b = unpack(color)
    return r + g + b


_FOREGROUND_BRIGHTNESS = brightness(FOREGROUND)


def is_mostly_transparent(pixel: int) -> bool:
    """Whether ``pixel`` is close enough to BACKGROUND to be drawn over when composing.

    Only meaningful for foreground-on-black rendering: BACKGROUND must be 0.
    """
    return _FOREGROUND_BRIGHTNESS - brightness(pixel) > TRANSPARENCY_THRESHOLD * 3
