"""Rendered D'ni numeral glyphs, cached per scale."""

from __future__ import annotations

import logging

from .colors import BACKGROUND, round_half_up
from .compositor import LineCompositor
from .grid import GridBuffer
from .rasterizer import FontSource, render_glyph

logger = logging.getLogger("dniclock.renderer")

# Base-25 digits 0-24 in the numeral font's character slots. Fixed by the font.
DIGIT_CHARACTERS = "0123456789)!@#$%^&*([]\\{}|"
DIGIT_COUNT = 25
TWO_DIGIT_COUNT = 60
COLON = ":"

assert DIGIT_CHARACTERS[0] == "0" and DIGIT_CHARACTERS[DIGIT_COUNT] == "|"


def digit_character(n: int) -> str:
    """ASCII slot of the single digit ``n`` (0-24) in the numeral font."""
    if not 0 <= n < DIGIT_COUNT:
        raise ValueError(f"digit out of range: {n}")
    return DIGIT_CHARACTERS[n]


def digit_overlap(scale: float) -> int:
    """Pixels by which the walls of neighbouring digits overlap."""
    return round_half_up(scale * 0.25)


def split_two_digit(n: int) -> tuple[int, int]:
    """Return ``(tens, ones)`` of ``n`` in base 25."""
    return n // 25, n % 25


class GlyphCache:
    """Single digits and the colon are rendered eagerly; two-digit numerals on first use."""

    def __init__(self, scale: float, numeral_font: FontSource, ascii_font: FontSource) -> None:
        self.scale = scale
        self.digits: list[GridBuffer] = [
            render_glyph(numeral_font, digit_character(n), scale) for n in range(DIGIT_COUNT)
        ]
        self.numerals: list[GridBuffer | None] = [None] * TWO_DIGIT_COUNT
        self.colon = render_glyph(ascii_font, COLON, scale)
        logger.info(
            f"glyph cache built scale={scale}",
            extra={"event": "glyph_cache_built", "scale": scale, "glyphs": DIGIT_COUNT + 1},
        )

    @classmethod
    def build(cls, scale: float, numeral_font: FontSource, ascii_font: FontSource) -> GlyphCache:
        return cls(scale, numeral_font, ascii_font)

    def get_single_digit(self, n: int) -> GridBuffer:
        if not 0 <= n < DIGIT_COUNT:
            raise ValueError(f"single digit out of range: {n}")
        return self.digits[n]

    def get_colon(self) -> GridBuffer:
        return self.colon

    def get_two_digit(self, n: int) -> GridBuffer:
        """Numeral ``n`` (0-59) padded to two digits."""
        if not 0 <= n < TWO_DIGIT_COUNT:
            raise ValueError(f"two-digit numeral out of range: {n}")
        numeral = self.numerals[n]
        if numeral is None:
            logger.debug(f"composing numeral {n}", extra={"event": "numeral_cache_miss", "n": n})
            numeral = self.compose_two_digit(n)
            self.numerals[n] = numeral
        return numeral

    def compose_two_digit(self, n: int) -> GridBuffer:
        tens, ones = split_two_digit(n)
        ones_buf = self.get_single_digit(ones)
        tens_buf = self.get_single_digit(tens)
        if ones_buf.height != tens_buf.height:
            raise ValueError(f"digit heights differ: {tens_buf.height} != {ones_buf.height}")

        overlap = digit_overlap(self.scale)
        height = ones_buf.height
        line = LineCompositor(
            GridBuffer.create(BACKGROUND, tens_buf.width + ones_buf.width - overlap, height),
            x=0,
            y=0,
            line_height=height,
        )
        line.write_glyph_composing(tens_buf)
        line.move(-overlap)
        line.write_glyph_composing(ones_buf)
        return line.buf
