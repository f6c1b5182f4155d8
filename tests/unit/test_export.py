import sys
import tempfile
import unittest
from pathlib import Path

from PIL import Image

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "tests" / "unit"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from fakes import BoxFont

from dniclock_renderer.colors import BACKGROUND, FOREGROUND, pack
from dniclock_renderer.export import glyph_sheet, grid_to_rgb32_bytes, save_png, to_image
from dniclock_renderer.glyph_cache import GlyphCache
from dniclock_renderer.grid import GridBuffer


class ExportTests(unittest.TestCase):
    def test_image_pixels(self):
        grid = GridBuffer.create(BACKGROUND, 3, 2)
        grid.set(2, 1, pack(10, 20, 30))
        image = to_image(grid)
        self.assertEqual(image.mode, "RGB")
        self.assertEqual(image.size, (3, 2))
        self.assertEqual(image.getpixel((2, 1)), (10, 20, 30))
        self.assertEqual(image.getpixel((0, 0)), (0, 0, 0))

    def test_empty_grid(self):
        self.assertEqual(to_image(GridBuffer()).size, (0, 0))

    def test_rgb32_layout(self):
        grid = GridBuffer.create(pack(0x12, 0x34, 0x56), 1, 1)
        self.assertEqual(grid_to_rgb32_bytes(grid), bytes([0x56, 0x34, 0x12, 0xFF]))

    def test_png_round_trip(self):
        grid = GridBuffer.create(FOREGROUND, 4, 4)
        with tempfile.TemporaryDirectory() as tmp:
            out = save_png(grid, Path(tmp) / "nested" / "frame.png")
            with Image.open(out) as image:
                self.assertEqual(image.size, (4, 4))
                self.assertEqual(image.convert("RGB").getpixel((3, 3)), (255, 255, 255))

    def test_glyph_sheet_fills_numeral_cache(self):
        cache = GlyphCache.build(20.0, BoxFont(), BoxFont(height_ratio=0.5))
        sheet = glyph_sheet(cache, gap=2)
        self.assertNotIn(None, cache.numerals)
        self.assertGreater(sheet.width, sum(cache.get_single_digit(n).width for n in range(25)))
        self.assertEqual(sheet.height, 7 * 20 + 8 * 2)
        self.assertEqual(sheet.get(2, 2), FOREGROUND)
        self.assertEqual(sheet.get(0, 0), BACKGROUND)


if __name__ == "__main__":
    unittest.main()
