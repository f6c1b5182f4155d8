import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from dniclock_renderer.colors import (
    BACKGROUND,
    FOREGROUND,
    brightness,
    darken,
    is_mostly_transparent,
    pack,
    round_half_up,
    unpack,
)


class ColorTests(unittest.TestCase):
    def test_pack_layout(self):
        self.assertEqual(pack(0x12, 0x34, 0x56), 0x123456)
        self.assertEqual(unpack(0xFF123456), (0x12, 0x34, 0x56))

    def test_background_is_zero(self):
        self.assertEqual(BACKGROUND, 0)
        self.assertEqual(FOREGROUND, 0xFFFFFF)

    def test_darken_bounds(self):
        color = pack(200, 100, 3)
        self.assertEqual(darken(color, 1.0), color)
        self.assertEqual(darken(color, 0.0), 0)
        self.assertEqual(darken(color, 7.5), color)
        self.assertEqual(darken(color, -1.0), 0)

    def test_darken_rounds_halves_up(self):
        self.assertEqual(darken(FOREGROUND, 0.5), pack(128, 128, 128))
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(2.4999), 2)

    def test_transparency_endpoints(self):
        self.assertTrue(is_mostly_transparent(BACKGROUND))
        self.assertFalse(is_mostly_transparent(FOREGROUND))

    def test_transparency_threshold(self):
        self.assertEqual(brightness(pack(155, 155, 154)), 464)
        self.assertTrue(is_mostly_transparent(pack(155, 155, 154)))
        self.assertFalse(is_mostly_transparent(pack(155, 155, 155)))


if __name__ == "__main__":
    unittest.main()
