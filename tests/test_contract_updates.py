from __future__ import annotations

import unittest

from brandbento.model import MAX_SURFACES
from brandbento.presets import DEFAULT_BRAND, INITIAL_TILES
from brandbento.updates import (
    brand_patch_changes,
    content_changes,
    find_tile,
    values_differ,
    with_brand,
    with_colors,
    with_placement_content,
    with_tile_content,
    with_tile_surface,
    with_tile_type,
    with_typography,
)


class TestChangeDetection(unittest.TestCase):
    def test_values_differ(self) -> None:
        self.assertFalse(values_differ([1, 2], (1, 2)))
        self.assertTrue(values_differ([1], [1, 2]))
        self.assertFalse(values_differ({"a": [1]}, {"a": (1,)}))
        self.assertTrue(values_differ({"a": 1}, {"b": 1}))
        self.assertTrue(values_differ(True, 1))
        self.assertFalse(values_differ(1, 1.0))
        self.assertFalse(values_differ(None, None))

    def test_content_changes(self) -> None:
        self.assertFalse(content_changes({"a": 1}, {"a": 1}))
        self.assertFalse(content_changes({"a": 1}, {}))
        self.assertTrue(content_changes({"a": 1}, {"b": None}))
        self.assertTrue(content_changes({"items": ("x",)}, {"items": ["y"]}))

    def test_brand_patch_changes(self) -> None:
        self.assertFalse(brand_patch_changes(DEFAULT_BRAND, {"colors": {"bg": "#FFFFFF"}}))
        self.assertTrue(brand_patch_changes(DEFAULT_BRAND, {"colors": {"bg": "#000000"}}))
        self.assertTrue(brand_patch_changes(DEFAULT_BRAND, {"typography": {"letterSpacing": "wide"}}))
        self.assertFalse(brand_patch_changes(DEFAULT_BRAND, {"layout": {"grid": 12}}))
        self.assertFalse(brand_patch_changes(DEFAULT_BRAND, {"logo": "text"}))
        self.assertFalse(brand_patch_changes(DEFAULT_BRAND, None))  # type: ignore[arg-type]


class TestUpdateBuilders(unittest.TestCase):
    def test_brand_builders_return_new_records(self) -> None:
        out = with_brand(DEFAULT_BRAND, {"colors": {"primary": "#123456"}, "logo": {"text": "NEW"}})
        self.assertEqual(out.colors.primary, "#123456")
        self.assertEqual(out.logo.text, "NEW")
        self.assertEqual(DEFAULT_BRAND.colors.primary, "#000000")
        self.assertEqual(DEFAULT_BRAND.logo.text, "BENTO")
        self.assertIs(out.typography, DEFAULT_BRAND.typography)

    def test_unknown_keys_are_dropped(self) -> None:
        out = with_typography(DEFAULT_BRAND, {"kerning": 3})
        self.assertIs(out.typography, DEFAULT_BRAND.typography)

    def test_camel_and_snake_keys(self) -> None:
        a = with_typography(DEFAULT_BRAND, {"baseSize": 18})
        b = with_typography(DEFAULT_BRAND, {"base_size": 18})
        self.assertEqual(a, b)
        self.assertEqual(a.typography.base_size, 18)

    def test_surfaces_are_clamped(self) -> None:
        many = with_colors(DEFAULT_BRAND, {"surfaces": ["#FFFFFF"] * 12})
        self.assertEqual(len(many.colors.surfaces), MAX_SURFACES)
        none = with_colors(DEFAULT_BRAND, {"surfaces": []})
        self.assertEqual(none.colors.surfaces, (DEFAULT_BRAND.colors.surface,))

    def test_caller_lists_are_not_shared(self) -> None:
        items = ["one", "two"]
        tiles = with_tile_content(INITIAL_TILES, "utility-1", {"items": items})
        items.append("three")
        self.assertEqual(find_tile(tiles, "utility-1").content["items"], ("one", "two"))
        self.assertEqual(
            find_tile(INITIAL_TILES, "utility-1").content["items"],
            ("Responsive Grid", "Live Tokens", "Undo/Redo Support"),
        )

    def test_tile_type_swap(self) -> None:
        self.assertIs(with_tile_type(INITIAL_TILES, "hero-1", "hologram"), INITIAL_TILES)
        tiles = with_tile_type(INITIAL_TILES, "hero-1", "overlay", {"headline": "H"})
        hero = find_tile(tiles, "hero-1")
        self.assertEqual((hero.type, hero.content), ("overlay", {"headline": "H"}))
        self.assertEqual(find_tile(INITIAL_TILES, "hero-1").type, "hero")

    def test_tile_surface_and_placement_content(self) -> None:
        src = {"hero": 1}
        self.assertEqual(with_tile_surface(src, "hero", None), {})
        self.assertEqual(with_tile_surface(src, "b", 3), {"hero": 1, "b": 3})
        self.assertEqual(src, {"hero": 1})

        pc = {"hero": {"headline": "A"}}
        out = with_placement_content(pc, "hero", {"cta": "Go"})
        self.assertEqual(out["hero"], {"headline": "A", "cta": "Go"})
        self.assertEqual(pc, {"hero": {"headline": "A"}})


if __name__ == "__main__":
    unittest.main(verbosity=2)
