"""Grid-to-image conversion helpers and the glyph inspection sheet."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image

from .colors import BACKGROUND
from .compositor import LineCompositor
from .glyph_cache import DIGIT_COUNT, TWO_DIGIT_COUNT, GlyphCache
from .grid import GridBuffer


def grid_to_rgb888(grid: GridBuffer) -> np.ndarray:
    data = grid.as_flat_view()
    rgb = np.empty((len(data), 3), dtype=np.uint8)
    rgb[:, 0] = (data >> 16) & 0xFF
    rgb[:, 1] = (data >> 8) & 0xFF
    rgb[:, 2] = data & 0xFF
    return rgb.reshape((grid.height, grid.width, 3))


def grid_to_rgb32_bytes(grid: GridBuffer) -> bytes:
    """Little-endian 0xFFRRGGBB words, the layout of QImage.Format_RGB32."""
    return (grid.as_flat_view() | np.uint32(0xFF000000)).astype("<u4").tobytes()


def to_image(grid: GridBuffer) -> Image.Image:
    if grid.width == 0 or grid.height == 0:
        return Image.new("RGB", (grid.width, grid.height))
    return Image.fromarray(grid_to_rgb888(grid))


def save_png(grid: GridBuffer, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    to_image(grid).save(path, format="PNG")
    return path


def _row_layout(glyphs: list[GridBuffer], gap: int) -> tuple[int, int]:
    width = sum(g.width for g in glyphs) + gap * (len(glyphs) + 1)
    height = max((g.height for g in glyphs), default=0)
    return width, height


def glyph_sheet(cache: GlyphCache, gap: int = 4, per_row: int = 10) -> GridBuffer:
    """All single digits and the colon on one row, then every two-digit numeral."""
    rows = [[cache.get_single_digit(n) for n in range(DIGIT_COUNT)] + [cache.get_colon()]]
    numerals = [cache.get_two_digit(n) for n in range(TWO_DIGIT_COUNT)]
    rows.extend(numerals[i : i + per_row] for i in range(0, len(numerals), per_row))

    sizes = [_row_layout(row, gap) for row in rows]
    width = max(w for w, _ in sizes)
    height = sum(h for _, h in sizes) + gap * (len(rows) + 1)
    sheet = GridBuffer.create(BACKGROUND, width, height)

    y = gap
    for row, (_, line_height) in zip(rows, sizes):
        line = LineCompositor(sheet, x=gap, y=y, line_height=line_height)
        for glyph in row:
            line.write_glyph(glyph)
            line.move(gap)
        y += line_height + gap
    return sheet
