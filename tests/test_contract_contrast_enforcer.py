from __future__ import annotations

import unittest

from brandbento.color import contrast_ratio, hex_to_hsl, parse_hex, relative_luminance
from brandbento.contrast import (
    MIN_ACCENT_CONTRAST,
    MIN_PRIMARY_CONTRAST,
    enforce_contrast,
    lift_to_ratio,
    validate_roles,
)
from brandbento.model import ColorRoles


class TestContrastEnforcerContract(unittest.TestCase):
    def test_passing_roles_are_returned_unchanged(self) -> None:
        roles = ColorRoles()
        self.assertIs(enforce_contrast(roles), roles)

    def test_light_background_darkens_text_minimally(self) -> None:
        out = enforce_contrast(ColorRoles(bg="#FFFFFF", text="#CCCCCC"))
        self.assertEqual(out.bg, "#FFFFFF")
        ratio = contrast_ratio(out.text, out.bg)
        self.assertGreaterEqual(ratio, 4.5)
        self.assertLess(ratio, 4.7)
        r, g, b = parse_hex(out.text)
        self.assertTrue(r == g == b, "gray text must stay gray")

    def test_dark_background_lightens_text(self) -> None:
        out = enforce_contrast(ColorRoles(bg="#111111", text="#333333"))
        self.assertEqual(out.bg, "#111111")
        self.assertGreater(relative_luminance(out.text), relative_luminance("#333333"))
        self.assertGreaterEqual(contrast_ratio(out.text, out.bg), 4.5)

    def test_background_moves_when_text_extreme_is_not_enough(self) -> None:
        out = enforce_contrast(ColorRoles(bg="#808080", text="#707070"), 7.0)
        self.assertEqual(out.text, "#000000")
        self.assertNotEqual(out.bg, "#808080")
        self.assertGreater(relative_luminance(out.bg), relative_luminance("#808080"))
        self.assertGreaterEqual(contrast_ratio(out.text, out.bg), 7.0)

    def test_maximum_ratio_is_reachable(self) -> None:
        out = enforce_contrast(ColorRoles(bg="#808080", text="#7F7F7F"), 21.0)
        self.assertEqual(out.text, "#000000")
        self.assertEqual(out.bg, "#FFFFFF")

    def test_unreachable_ratio_returns_best_effort(self) -> None:
        out = enforce_contrast(ColorRoles(bg="#808080", text="#7F7F7F"), 22.0)
        self.assertAlmostEqual(contrast_ratio(out.text, out.bg), 21.0, places=6)

    def test_hue_is_preserved_when_text_moves(self) -> None:
        out = enforce_contrast(ColorRoles(bg="#FFFFFF", text="#9999FF"))
        self.assertGreaterEqual(contrast_ratio(out.text, out.bg), 4.5)
        self.assertLess(abs(hex_to_hsl(out.text).h - 240.0), 3.0)

    def test_primary_and_accent_are_lifted_against_bg(self) -> None:
        roles = ColorRoles(bg="#FFFFFF", text="#000000", primary="#FFFF00", accent="#FFEE00")
        out = enforce_contrast(roles)
        self.assertGreaterEqual(contrast_ratio(out.primary, out.bg), MIN_PRIMARY_CONTRAST)
        self.assertGreaterEqual(contrast_ratio(out.accent, out.bg), MIN_ACCENT_CONTRAST)
        self.assertLess(abs(hex_to_hsl(out.primary).h - 60.0), 3.0)
        self.assertEqual(out.text, "#000000")

    def test_garbage_roles_never_raise(self) -> None:
        out = enforce_contrast(ColorRoles(bg="garbage", text="junk", primary="nope"))
        self.assertEqual(out.bg, "#FFFFFF")
        self.assertEqual(out.text, "#171717")
        self.assertEqual(out.primary, "nope")

    def test_lift_to_ratio_leaves_passing_colors_alone(self) -> None:
        self.assertEqual(lift_to_ratio("#000000", "#FFFFFF", 3.0), "#000000")
        self.assertEqual(lift_to_ratio("bad", "#FFFFFF", 3.0), "bad")

    def test_validate_roles_report(self) -> None:
        rep = validate_roles(ColorRoles(bg="#FFFFFF", text="#000000", primary="#000000"))
        self.assertEqual(rep.text_bg, 21.0)
        self.assertEqual(rep.primary_bg, 21.0)
        self.assertTrue(rep.passes_aa)

        rep = validate_roles(ColorRoles(bg="#FFFFFF", text="#777777"))
        self.assertEqual(rep.text_bg, 4.48)
        self.assertFalse(rep.passes_aa)


if __name__ == "__main__":
    unittest.main(verbosity=2)
