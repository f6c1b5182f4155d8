"""Renders one character at one scale into a glyph grid."""

from __future__ import annotations

from typing import Protocol

from .colors import BACKGROUND, FOREGROUND, darken
from .grid import GridBuffer
from .models import GlyphOutline


class GlyphRenderError(RuntimeError):
    """A font could not produce an outline for a character."""


class FontLoadError(GlyphRenderError):
    """A font file could not be opened or parsed."""


class FontSource(Protocol):
    def outline(self, character: str, scale: float) -> GlyphOutline:
        """Tight bounds and coverage of ``character`` at ``scale``; raises GlyphRenderError."""
        ...


def render_glyph(font: FontSource, character: str, scale: float) -> GridBuffer:
    """Rasterize ``character`` to a grid of FOREGROUND darkened by coverage over BACKGROUND.

    Errors from the font propagate; callers must only ask for characters the font has.
    """
    outline = font.outline(character, scale)
    buf = GridBuffer.create(BACKGROUND, outline.width, outline.height)

    def plot(x: int, y: int, coverage: float) -> None:
        buf.set(x, y, darken(FOREGROUND, coverage))

    outline.draw(plot)
    return buf
