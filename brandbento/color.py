# brandbento/color.py
"""Color math shared by the role mapper, the contrast enforcer and selectors.

All hex output is uppercase `#RRGGBB`. Parsing never raises: malformed input
yields `None` (or a documented neutral value for the numeric helpers).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional, Tuple

_HEX6_RE = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")
_HEX3_RE = re.compile(r"^#?([0-9a-fA-F])([0-9a-fA-F])([0-9a-fA-F])$")

AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0
AAA_LARGE = 4.5

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class HSL:
    h: float  # 0-360
    s: float  # 0-100
    l: float  # 0-100


@dataclass(frozen=True)
class ContrastResult:
    ratio: float
    aa: bool
    aaa: bool
    level: str  # "AAA" | "AA" | "fail"


@dataclass(frozen=True)
class Harmony:
    analogous: Tuple[str, str]
    complementary: str
    triadic: Tuple[str, str]


def parse_hex(value: Any) -> Optional[RGB]:
    if not isinstance(value, str):
        return None
    s = value.strip()
    m = _HEX6_RE.match(s)
    if m:
        return (int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))
    m = _HEX3_RE.match(s)
    if m:
        return (
            int(m.group(1) * 2, 16),
            int(m.group(2) * 2, 16),
            int(m.group(3) * 2, 16),
        )
    return None


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return "#{:02X}{:02X}{:02X}".format(_clamp_byte(r), _clamp_byte(g), _clamp_byte(b))


def _clamp_byte(v: int) -> int:
    return max(0, min(255, int(v)))


def normalize_hex(value: Any) -> Optional[str]:
    """Return `value` as uppercase 6-digit hex, or None if it is not a color."""
    rgb = parse_hex(value)
    if rgb is None:
        return None
    return rgb_to_hex(*rgb)


def is_hex_color(value: Any) -> bool:
    return parse_hex(value) is not None


def hex_to_hsl(value: Any) -> HSL:
    rgb = parse_hex(value)
    if rgb is None:
        return HSL(0.0, 0.0, 0.0)

    r, g, b = (c / 255.0 for c in rgb)
    mx = max(r, g, b)
    mn = min(r, g, b)
    l = (mx + mn) / 2.0
    h = 0.0
    s = 0.0

    if mx != mn:
        d = mx - mn
        s = d / (2.0 - mx - mn) if l > 0.5 else d / (mx + mn)
        if mx == r:
            h = ((g - b) / d + (6.0 if g < b else 0.0)) / 6.0
        elif mx == g:
            h = ((b - r) / d + 2.0) / 6.0
        else:
            h = ((r - g) / d + 4.0) / 6.0

    return HSL(h * 360.0, s * 100.0, l * 100.0)


def hsl_to_hex(h: float, s: float, l: float) -> str:
    s_n = max(0.0, min(100.0, float(s))) / 100.0
    l_n = max(0.0, min(100.0, float(l))) / 100.0
    h = float(h) % 360.0
    a = s_n * min(l_n, 1.0 - l_n)

    def f(n: int) -> int:
        k = (n + h / 30.0) % 12.0
        c = l_n - a * max(min(k - 3.0, 9.0 - k, 1.0), -1.0)
        # round-half-up, matching browser color serialization
        return int(255.0 * c + 0.5)

    return rgb_to_hex(f(0), f(8), f(4))


def rotate_hue(value: str, degrees: float) -> str:
    hsl = hex_to_hsl(value)
    return hsl_to_hex((hsl.h + degrees) % 360.0, hsl.s, hsl.l)


def hue_distance(a: float, b: float) -> float:
    d = abs(a - b) % 360.0
    return min(d, 360.0 - d)


def _linearize(c: float) -> float:
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(value: Any) -> float:
    rgb = parse_hex(value)
    if rgb is None:
        return 0.0
    r, g, b = (_linearize(c / 255.0) for c in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(a: Any, b: Any) -> float:
    """WCAG 2.1 contrast ratio, 1 (identical) to 21 (black on white)."""
    la = relative_luminance(a)
    lb = relative_luminance(b)
    lighter = max(la, lb)
    darker = min(la, lb)
    return (lighter + 0.05) / (darker + 0.05)


def is_large_text(font_size_px: float, bold: bool = False) -> bool:
    # 18pt regular or 14pt bold, in CSS pixels
    if bold:
        return font_size_px >= 18.66
    return font_size_px >= 24


def contrast_level(text: str, bg: str, font_size_px: float = 16, bold: bool = False) -> ContrastResult:
    ratio = contrast_ratio(text, bg)
    large = is_large_text(font_size_px, bold)
    aa = ratio >= (AA_LARGE if large else AA_NORMAL)
    aaa = ratio >= (AAA_LARGE if large else AAA_NORMAL)
    level = "AAA" if aaa else ("AA" if aa else "fail")
    return ContrastResult(ratio=round(ratio * 100) / 100, aa=aa, aaa=aaa, level=level)


def contrast_text_color(bg: str) -> str:
    return "#000000" if relative_luminance(bg) > 0.5 else "#FFFFFF"


def adaptive_text_color(bg: str, light_color: str, dark_color: str, threshold: float = 55) -> str:
    """Pick `light_color` on backgrounds lighter than `threshold` (HSL lightness).

    Callers pass the color to use *on* a light background first; the name
    follows the background, not the returned text.
    """
    return light_color if hex_to_hsl(bg).l > threshold else dark_color


def color_harmony(value: str) -> Harmony:
    return Harmony(
        analogous=(rotate_hue(value, 30), rotate_hue(value, -30)),
        complementary=rotate_hue(value, 180),
        triadic=(rotate_hue(value, 120), rotate_hue(value, 240)),
    )


__all__ = [
    "AA_NORMAL",
    "AAA_NORMAL",
    "ContrastResult",
    "HSL",
    "Harmony",
    "adaptive_text_color",
    "color_harmony",
    "contrast_level",
    "contrast_ratio",
    "contrast_text_color",
    "hex_to_hsl",
    "hsl_to_hex",
    "hue_distance",
    "is_hex_color",
    "normalize_hex",
    "parse_hex",
    "relative_luminance",
    "rgb_to_hex",
    "rotate_hue",
]
