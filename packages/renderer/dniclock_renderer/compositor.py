"""Writes glyphs left to right along a single line of a destination grid."""

from __future__ import annotations

from .colors import is_mostly_transparent
from .grid import GridBuffer
from .models import WriteMode


class LineCompositor:
    """Cursor-tracked glyph writer.

    ``x`` is where the next glyph starts, ``y`` the top of the line. Glyphs shorter
    than ``line_height`` are centered vertically.
    """

    def __init__(self, buf: GridBuffer, x: int = 0, y: int = 0, line_height: int = 0) -> None:
        self.buf = buf
        self.x = x
        self.y = y
        self.line_height = line_height

    def write_glyph(self, glyph: GridBuffer, mode: WriteMode = WriteMode.OVERWRITE) -> None:
        """Blit ``glyph`` at the cursor and advance by its width."""
        height_diff = self.line_height - glyph.height
        if height_diff < 0:
            raise ValueError(f"glyph of height {glyph.height} is taller than the {self.line_height}px line")
        centered_y = self.y + height_diff // 2

        if WriteMode(mode) is WriteMode.COMPOSE:
            self.buf.copy_region_if(self.x, centered_y, glyph, is_mostly_transparent)
        else:
            self.buf.copy_region(self.x, centered_y, glyph)

        self.x += glyph.width

    def write_glyph_composing(self, glyph: GridBuffer) -> None:
        """Write only over destination pixels that are close to the background."""
        self.write_glyph(glyph, WriteMode.COMPOSE)

    def move(self, dx: int) -> None:
        self.x += dx
