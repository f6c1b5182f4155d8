import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "tests" / "unit"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from fakes import BoxFont, MissingFont

from dniclock_renderer.colors import BACKGROUND, FOREGROUND
from dniclock_renderer.glyph_cache import (
    DIGIT_CHARACTERS,
    GlyphCache,
    digit_character,
    digit_overlap,
    split_two_digit,
)
from dniclock_renderer.rasterizer import GlyphRenderError, render_glyph


class UnevenFont(BoxFont):
    def size(self, character, scale):
        width, height = super().size(character, scale)
        return width, height - (1 if character == "1" else 0)


class AlphabetTests(unittest.TestCase):
    def test_lookup_table_is_fixed(self):
        self.assertEqual(DIGIT_CHARACTERS, "0123456789)!@#$%^&*([]\\{}|")
        self.assertEqual(digit_character(10), ")")
        self.assertEqual(digit_character(19), "(")
        self.assertEqual(digit_character(24), "}")

    def test_digit_out_of_range(self):
        with self.assertRaises(ValueError):
            digit_character(25)
        with self.assertRaises(ValueError):
            digit_character(-1)

    def test_overlap(self):
        self.assertEqual(digit_overlap(40.0), 10)
        self.assertEqual(digit_overlap(50.0), 13)
        self.assertEqual(digit_overlap(10.0), 3)

    def test_split(self):
        self.assertEqual(split_two_digit(26), (1, 1))
        self.assertEqual(split_two_digit(59), (2, 9))
        self.assertEqual(split_two_digit(7), (0, 7))


class GlyphCacheTests(unittest.TestCase):
    def setUp(self):
        self.numerals = BoxFont()
        self.ascii = BoxFont(height_ratio=0.5)
        self.cache = GlyphCache.build(40.0, self.numerals, self.ascii)

    def test_eager_build(self):
        self.assertEqual([c for c, _ in self.numerals.calls], list(DIGIT_CHARACTERS[:25]))
        self.assertEqual(self.ascii.calls, [(":", 40.0)])
        self.assertEqual(self.cache.scale, 40.0)
        self.assertEqual(self.cache.numerals, [None] * 60)

    def test_single_digits(self):
        for n in range(25):
            expected = render_glyph(BoxFont(), DIGIT_CHARACTERS[n], 40.0)
            self.assertEqual(self.cache.get_single_digit(n), expected)
        with self.assertRaises(ValueError):
            self.cache.get_single_digit(25)

    def test_colon(self):
        colon = self.cache.get_colon()
        self.assertEqual((colon.width, colon.height), self.ascii.size(":", 40.0))

    def test_rebuild_is_identical(self):
        other = GlyphCache.build(40.0, BoxFont(), BoxFont(height_ratio=0.5))
        for n in range(25):
            self.assertEqual(other.get_single_digit(n), self.cache.get_single_digit(n))

    def test_two_digit_dimensions(self):
        overlap = digit_overlap(40.0)
        for n in range(60):
            tens, ones = split_two_digit(n)
            tens_buf = self.cache.get_single_digit(tens)
            ones_buf = self.cache.get_single_digit(ones)
            numeral = self.cache.compose_two_digit(n)
            self.assertEqual(numeral.height, ones_buf.height)
            self.assertEqual(numeral.width, tens_buf.width + ones_buf.width - overlap)

    def test_two_digit_is_cached(self):
        first = self.cache.get_two_digit(42)
        self.assertIs(self.cache.numerals[42], first)
        second = self.cache.get_two_digit(42)
        self.assertIs(second, first)
        self.assertEqual(second, self.cache.compose_two_digit(42))

    def test_two_digit_out_of_range(self):
        with self.assertRaises(ValueError):
            self.cache.get_two_digit(60)

    def test_twenty_six_overlaps_two_ones(self):
        one = self.cache.get_single_digit(1)
        numeral = self.cache.get_two_digit(26)
        self.assertEqual(numeral.width, 2 * one.width - 10)

        mid = numeral.height // 2
        second_start = one.width - 10
        # Wall of the tens digit survives under the ones digit.
        self.assertEqual(numeral.get(one.width - 1, mid), FOREGROUND)
        self.assertEqual(numeral.get(second_start, mid), FOREGROUND)
        self.assertEqual(numeral.get(numeral.width - 1, mid), FOREGROUND)
        self.assertEqual(numeral.get(1, 1), BACKGROUND)
        # Top edges stay solid across the overlap.
        for x in range(second_start, one.width):
            self.assertEqual(numeral.get(x, 0), FOREGROUND)

    def test_leading_zero(self):
        numeral = self.cache.get_two_digit(3)
        zero = self.cache.get_single_digit(0)
        for y in range(zero.height):
            self.assertEqual(numeral.get(0, y), zero.get(0, y))

    def test_mismatched_heights(self):
        cache = GlyphCache.build(40.0, UnevenFont(), BoxFont())
        with self.assertRaises(ValueError):
            cache.get_two_digit(27)
        self.assertIsNone(cache.numerals[27])

    def test_log_events(self):
        with self.assertLogs("dniclock.renderer", "DEBUG") as logs:
            cache = GlyphCache.build(40.0, BoxFont(), BoxFont())
            cache.get_two_digit(26)
            cache.get_two_digit(26)

        events = [(r.levelname, r.event) for r in logs.records]
        self.assertEqual(events, [("INFO", "glyph_cache_built"), ("DEBUG", "numeral_cache_miss")])
        self.assertEqual(logs.records[0].scale, 40.0)
        self.assertEqual(logs.records[1].n, 26)

    def test_missing_glyph_is_fatal(self):
        with self.assertRaises(GlyphRenderError):
            GlyphCache.build(40.0, BoxFont(), MissingFont())


if __name__ == "__main__":
    unittest.main()
