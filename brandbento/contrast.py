# brandbento/contrast.py
"""Contrast Enforcer.

Adjusts HSL lightness of text (and, if needed, bg) until the pair reaches the
required WCAG ratio. Hue and saturation are preserved. The search is a
bounded binary search, so it always terminates; when the target cannot be
met the closest candidate is returned instead of an error.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from brandbento.color import contrast_ratio, hex_to_hsl, hsl_to_hex, normalize_hex, relative_luminance
from brandbento.model import ColorRoles
from brandbento.util.console import obs_warn

MIN_TEXT_CONTRAST = 4.5
MIN_PRIMARY_CONTRAST = 3.0
MIN_ACCENT_CONTRAST = 2.5

SEARCH_ITERATIONS = 16


@dataclass(frozen=True)
class RoleContrastReport:
    text_bg: float
    primary_bg: float
    passes_aa: bool


def _search_lightness(moving: str, fixed: str, toward: float, min_ratio: float) -> Tuple[str, bool]:
    """Smallest lightness move of `moving` (toward 0 or 100) that meets `min_ratio`.

    Returns (color, met). When even the extreme fails, the extreme is
    returned with met=False.
    """
    hsl = hex_to_hsl(moving)
    extreme = hsl_to_hex(hsl.h, hsl.s, toward)
    if contrast_ratio(extreme, fixed) < min_ratio:
        return extreme, False

    lo = hsl.l  # fails
    hi = toward  # passes
    for _ in range(SEARCH_ITERATIONS):
        mid = (lo + hi) / 2.0
        if contrast_ratio(hsl_to_hex(hsl.h, hsl.s, mid), fixed) >= min_ratio:
            hi = mid
        else:
            lo = mid
    return hsl_to_hex(hsl.h, hsl.s, hi), True


def _away_from(bg: str, color: str) -> float:
    return 0.0 if relative_luminance(bg) >= relative_luminance(color) else 100.0


def lift_to_ratio(color: str, bg: str, min_ratio: float) -> str:
    """Return `color`, or the nearest lightness variant meeting `min_ratio` on `bg`."""
    hx = normalize_hex(color)
    if hx is None:
        return color
    if contrast_ratio(hx, bg) >= min_ratio:
        return color
    lifted, _met = _search_lightness(hx, bg, _away_from(bg, hx), min_ratio)
    return lifted


def enforce_contrast(roles: ColorRoles, min_ratio: float = MIN_TEXT_CONTRAST) -> ColorRoles:
    """Guarantee text/bg legibility; lift primary and accent against the final bg.

    Roles that already pass come back unchanged apart from hex normalization.
    `min_ratio` can only raise the 4.5:1 floor, never lower it. Never raises.
    """
    min_ratio = max(min_ratio, MIN_TEXT_CONTRAST)
    bg = normalize_hex(roles.bg) or "#FFFFFF"
    text = normalize_hex(roles.text) or "#171717"

    if contrast_ratio(text, bg) < min_ratio:
        light_bg = relative_luminance(bg) >= relative_luminance(text)
        text_toward = 0.0 if light_bg else 100.0
        bg_toward = 100.0 - text_toward

        text, met = _search_lightness(text, bg, text_toward, min_ratio)
        if not met:
            # text pinned at its extreme; move the background the other way
            bg, met = _search_lightness(bg, text, bg_toward, min_ratio)
        if not met:
            obs_warn("contrast", f"could not reach {min_ratio}:1 (best {contrast_ratio(text, bg):.2f}:1)")

    changes = {}
    if text != roles.text:
        changes["text"] = text
    if bg != roles.bg:
        changes["bg"] = bg

    primary = lift_to_ratio(roles.primary, bg, MIN_PRIMARY_CONTRAST)
    if primary != roles.primary:
        changes["primary"] = primary
    accent = lift_to_ratio(roles.accent, bg, MIN_ACCENT_CONTRAST)
    if accent != roles.accent:
        changes["accent"] = accent

    return replace(roles, **changes) if changes else roles


def validate_roles(roles: ColorRoles) -> RoleContrastReport:
    text_bg = contrast_ratio(roles.text, roles.bg)
    primary_bg = contrast_ratio(roles.primary, roles.bg)
    return RoleContrastReport(
        text_bg=round(text_bg * 100) / 100,
        primary_bg=round(primary_bg * 100) / 100,
        passes_aa=text_bg >= MIN_TEXT_CONTRAST,
    )


__all__ = [
    "MIN_ACCENT_CONTRAST",
    "MIN_PRIMARY_CONTRAST",
    "MIN_TEXT_CONTRAST",
    "RoleContrastReport",
    "SEARCH_ITERATIONS",
    "enforce_contrast",
    "lift_to_ratio",
    "validate_roles",
]
