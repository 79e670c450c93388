from __future__ import annotations

import unittest

from brandbento.color import (
    adaptive_text_color,
    color_harmony,
    contrast_level,
    contrast_ratio,
    contrast_text_color,
    hex_to_hsl,
    hsl_to_hex,
    hue_distance,
    is_hex_color,
    normalize_hex,
    relative_luminance,
)


class TestColorMathContract(unittest.TestCase):
    def test_normalize_hex_accepts_short_long_and_bare_forms(self) -> None:
        self.assertEqual(normalize_hex("#abc"), "#AABBCC")
        self.assertEqual(normalize_hex("abc"), "#AABBCC")
        self.assertEqual(normalize_hex(" 112233 "), "#112233")
        self.assertEqual(normalize_hex("#a1B2c3"), "#A1B2C3")

    def test_normalize_hex_rejects_garbage_without_raising(self) -> None:
        for bad in ("", "#12", "#12345", "#GGGGGG", "red", None, 123, ["#FFFFFF"]):
            self.assertIsNone(normalize_hex(bad), f"expected None for {bad!r}")
            self.assertFalse(is_hex_color(bad))

    def test_hsl_round_trip_primaries(self) -> None:
        red = hex_to_hsl("#FF0000")
        self.assertAlmostEqual(red.h, 0.0)
        self.assertAlmostEqual(red.s, 100.0)
        self.assertAlmostEqual(red.l, 50.0)
        self.assertEqual(hsl_to_hex(0, 100, 50), "#FF0000")
        self.assertEqual(hsl_to_hex(120, 100, 50), "#00FF00")
        self.assertEqual(hsl_to_hex(0, 0, 100), "#FFFFFF")
        self.assertEqual(hsl_to_hex(210, 60, 0), "#000000")

    def test_invalid_hex_is_neutral_for_numeric_helpers(self) -> None:
        hsl = hex_to_hsl("nope")
        self.assertEqual((hsl.h, hsl.s, hsl.l), (0.0, 0.0, 0.0))
        self.assertEqual(relative_luminance("nope"), 0.0)

    def test_contrast_ratio_bounds(self) -> None:
        self.assertAlmostEqual(contrast_ratio("#FFFFFF", "#000000"), 21.0, places=6)
        self.assertAlmostEqual(contrast_ratio("#000000", "#FFFFFF"), 21.0, places=6)
        self.assertAlmostEqual(contrast_ratio("#777777", "#777777"), 1.0, places=9)

    def test_contrast_level_normal_vs_large_text(self) -> None:
        normal = contrast_level("#777777", "#FFFFFF")
        self.assertEqual(normal.ratio, 4.48)
        self.assertFalse(normal.aa)
        self.assertEqual(normal.level, "fail")

        large = contrast_level("#777777", "#FFFFFF", font_size_px=24)
        self.assertTrue(large.aa)
        self.assertFalse(large.aaa)
        self.assertEqual(large.level, "AA")

        best = contrast_level("#000000", "#FFFFFF")
        self.assertEqual(best.level, "AAA")
        self.assertEqual(best.ratio, 21.0)

    def test_text_color_helpers(self) -> None:
        self.assertEqual(contrast_text_color("#FFFFFF"), "#000000")
        self.assertEqual(contrast_text_color("#000000"), "#FFFFFF")
        self.assertEqual(adaptive_text_color("#FFFFFF", "#111111", "#EEEEEE"), "#111111")
        self.assertEqual(adaptive_text_color("#101010", "#111111", "#EEEEEE"), "#EEEEEE")

    def test_harmony_and_hue_distance(self) -> None:
        h = color_harmony("#FF0000")
        self.assertEqual(h.complementary, "#00FFFF")
        self.assertEqual(len(h.analogous), 2)
        self.assertEqual(len(h.triadic), 2)
        self.assertAlmostEqual(hue_distance(350, 10), 20.0)
        self.assertAlmostEqual(hue_distance(0, 180), 180.0)


if __name__ == "__main__":
    unittest.main(verbosity=2)
