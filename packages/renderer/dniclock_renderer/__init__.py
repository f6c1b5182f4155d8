"""Glyph rendering, caching, and compositing for the D'ni clock face."""

from .colors import BACKGROUND, FOREGROUND, darken, is_mostly_transparent, pack, unpack
from .compositor import LineCompositor
from .export import glyph_sheet, grid_to_rgb32_bytes, save_png, to_image
from .fonts import PillowFont
from .glyph_cache import DIGIT_CHARACTERS, GlyphCache, digit_overlap
from .grid import GridBuffer
from .models import GlyphOutline, WriteMode
from .rasterizer import FontLoadError, FontSource, GlyphRenderError, render_glyph

__all__ = [
    "BACKGROUND",
    "DIGIT_CHARACTERS",
    "FOREGROUND",
    "FontLoadError",
    "FontSource",
    "GlyphCache",
    "GlyphOutline",
    "GlyphRenderError",
    "GridBuffer",
    "LineCompositor",
    "PillowFont",
    "WriteMode",
    "darken",
    "digit_overlap",
    "glyph_sheet",
    "grid_to_rgb32_bytes",
    "is_mostly_transparent",
    "pack",
    "render_glyph",
    "save_png",
    "to_image",
    "unpack",
]
