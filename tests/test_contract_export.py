from __future__ import annotations

import json
import unittest

from brandbento.export import EMPTY_CSS, export_css, export_json, parse_brand_json
from brandbento.model import Brand, Logo
from brandbento.presets import BRAND_PRESETS, DEFAULT_BRAND


class TestCssExportContract(unittest.TestCase):
    def test_none_is_a_placeholder_block(self) -> None:
        self.assertEqual(export_css(None), EMPTY_CSS)
        self.assertEqual(export_css(None), ":root { /* No brand data */ }")

    def test_default_brand_tokens(self) -> None:
        css = export_css(DEFAULT_BRAND)
        self.assertTrue(css.startswith(":root {"))
        self.assertTrue(css.endswith("}"))
        for line in (
            "--font-primary: Inter;",
            "--type-base-size: 16px;",
            "--type-letter-spacing: 0;",
            "--color-bg: #FFFFFF;",
            "--color-text: #171717;",
            "--color-surface-0: #FFFFFF;",
            "--color-surface-3: #F0F0F0;",
            '--logo-text: "BENTO";',
            "--button-radius: 10px;",
            "--button-color: #000000;",
        ):
            self.assertIn(line, css)
        self.assertNotIn("--color-surface-4:", css)

    def test_logo_text_is_quoted_safely(self) -> None:
        css = export_css(Brand(logo=Logo(text='Say "hi"')))
        self.assertIn('--logo-text: "Say \\"hi\\"";', css)


class TestJsonExportContract(unittest.TestCase):
    def test_none_is_an_empty_object(self) -> None:
        self.assertEqual(export_json(None), "{}")

    def test_layout_is_indented_and_sorted(self) -> None:
        text = export_json(DEFAULT_BRAND)
        self.assertIn('\n  "colors": {', text)
        obj = json.loads(text)
        self.assertEqual(list(obj), sorted(obj))
        self.assertEqual(obj["colors"]["paletteColors"][0], "#000000")

    def test_round_trip_for_every_preset(self) -> None:
        for name, brand in BRAND_PRESETS.items():
            self.assertEqual(parse_brand_json(export_json(brand)), brand, name)

    def test_round_trip_keeps_malformed_palette_entries(self) -> None:
        from brandbento.store import BrandStore

        store = BrandStore()
        store.apply_palette(["#FFFFFF", "#000000", None, 42])
        brand = store.brand
        self.assertEqual(brand.colors.palette_colors, ("#FFFFFF", "#000000", None, 42))
        self.assertEqual(parse_brand_json(export_json(brand)), brand)

    def test_parse_errors(self) -> None:
        with self.assertRaises(TypeError):
            parse_brand_json(b"{}")  # type: ignore[arg-type]
        with self.assertRaises(ValueError):
            parse_brand_json("[]")
        with self.assertRaises(ValueError):
            parse_brand_json("{broken")
        self.assertEqual(parse_brand_json("{}"), Brand())

    def test_partial_json_keeps_defaults(self) -> None:
        b = parse_brand_json('{"logo": {"text": "PARTIAL", "size": "big"}}')
        self.assertEqual(b.logo.text, "PARTIAL")
        self.assertEqual(b.logo.size, Logo().size)
        self.assertEqual(b.colors, Brand().colors)


if __name__ == "__main__":
    unittest.main(verbosity=2)
