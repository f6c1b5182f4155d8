"""Pillow-backed font sources for the numeral and ASCII faces."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from .colors import round_half_up
from .models import GlyphOutline
from .rasterizer import FontLoadError, GlyphRenderError

FALLBACK_ASCII_FONTS = ("SourceSansPro-Regular.ttf", "DejaVuSans.ttf", "Arial.ttf")
REFERENCE_SIZE = 100


class PillowFont:
    """Scalable font read with FreeType through Pillow.

    ``scale`` is the line height in pixels, ascent plus descent, not the em size.
    FreeType wants an em size, so it is derived from the metrics at a reference size
    and rounded to a whole pixel.
    """

    def __init__(self, loader, name: str) -> None:
        self._loader = loader
        self.name = name
        self._sizes: dict[int, ImageFont.FreeTypeFont] = {}
        self._height_per_em: float | None = None

    @classmethod
    def from_path(cls, path: str | Path) -> PillowFont:
        path = Path(path).expanduser()
        if not path.is_file():
            raise FontLoadError(f"font file not found: {path}")
        font = cls(lambda size: ImageFont.truetype(str(path), size), path.name)
        # Parse once up front so a broken file fails here, not on first glyph.
        font._font(12)
        return font

    @classmethod
    def ascii_default(cls, path: str | Path | None = None) -> PillowFont:
        """Configured file, then common system faces, then Pillow's bundled font."""
        if path:
            return cls.from_path(path)
        for name in FALLBACK_ASCII_FONTS:
            try:
                ImageFont.truetype(name, 12)
            except OSError:
                continue
            return cls(lambda size, name=name: ImageFont.truetype(name, size), name)
        return cls(lambda size: ImageFont.load_default(size), "pillow-default")

    def _font(self, size: int):
        font = self._sizes.get(size)
        if font is None:
            try:
                font = self._loader(size)
            except OSError as exc:
                raise FontLoadError(f"cannot load {self.name} at size {size}: {exc}") from exc
            self._sizes[size] = font
        return font

    def pixel_size(self, scale: float) -> int:
        """FreeType size whose ascent plus descent is closest to ``scale``."""
        if self._height_per_em is None:
            reference = self._font(REFERENCE_SIZE)
            getmetrics = getattr(reference, "getmetrics", None)
            height = sum(getmetrics()) if getmetrics is not None else 0
            # Bitmap fonts have no metrics to scale by.
            self._height_per_em = height / REFERENCE_SIZE if height > 0 else 1.0
        return max(1, round_half_up(scale / self._height_per_em))

    def outline(self, character: str, scale: float) -> GlyphOutline:
        font = self._font(self.pixel_size(scale))
        left, top, right, bottom = font.getbbox(character)
        width, height = int(right - left), int(bottom - top)
        if width <= 0 or height <= 0:
            raise GlyphRenderError(f"{self.name} has no outline for {character!r} at scale {scale}")

        image = Image.new("L", (width, height), 0)
        ImageDraw.Draw(image).text((-left, -top), character, font=font, fill=255)
        coverage = np.asarray(image, dtype=np.float32) / 255.0
        return GlyphOutline(width=width, height=height, coverage=coverage)
