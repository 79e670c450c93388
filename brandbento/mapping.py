# brandbento/mapping.py
"""Color Role Mapper.

Turns an ordered palette into semantic roles (bg, text, primary, accent,
surface, surfaces). Pure and deterministic: every ranking falls back to the
input position, so identical input yields identical output.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, List, Optional, Sequence, Tuple

from brandbento.color import hex_to_hsl, hsl_to_hex, hue_distance, normalize_hex
from brandbento.contrast import MIN_TEXT_CONTRAST, enforce_contrast
from brandbento.model import MAX_SURFACES, ColorRoles, freeze_value
from brandbento.util.console import obs_warn

DEFAULT_BG = "#FFFFFF"
DEFAULT_TEXT = "#171717"
DEFAULT_PRIMARY = "#000000"
DEFAULT_ACCENT = "#555555"
DEFAULT_SURFACE = "#F5F5F5"
DEFAULT_SURFACES: Tuple[str, ...] = ("#FFFFFF", "#F5F5F5", "#FAFAFA")

NEUTRAL_SATURATION = 10.0
TEXT_MAX_LIGHTNESS = 40.0
ACCENT_MIN_HUE_DISTANCE = 30.0
ACCENT_HUE_ROTATION = 150.0
EQUAL_LIGHTNESS_EPSILON = 0.5

COMPLEXITY_MODES = ("simple", "curated", "full")
CURATED_SURFACES = 3

PALETTE_STYLES = ("minimal", "neon", "dark", "light", "pastel")


@dataclass(frozen=True)
class ColorAnalysis:
    hex: str
    h: float
    s: float
    l: float
    index: int  # position in the input palette


def _as_sequence(palette: Any) -> Tuple[Any, ...]:
    if isinstance(palette, str):
        return (palette,)
    if not isinstance(palette, (list, tuple)):
        raise TypeError(f"palette must be a list or tuple of hex strings; got {type(palette).__name__}")
    return tuple(palette)


def analyze_colors(palette: Sequence[Any]) -> Tuple[ColorAnalysis, ...]:
    """Normalize and measure every parseable color; first occurrence wins."""
    out: List[ColorAnalysis] = []
    seen = set()
    for i, raw in enumerate(_as_sequence(palette)):
        hx = normalize_hex(raw)
        if hx is None:
            obs_warn("mapping", f"skipping malformed color at index {i}: {raw!r}")
            continue
        if hx in seen:
            continue
        seen.add(hx)
        hsl = hex_to_hsl(hx)
        out.append(ColorAnalysis(hex=hx, h=hsl.h, s=hsl.s, l=hsl.l, index=i))
    return tuple(out)


def derive_accent(primary: str) -> str:
    """Hue-rotated companion for palettes without a second chromatic color."""
    hsl = hex_to_hsl(primary)
    return hsl_to_hex(
        hsl.h + ACCENT_HUE_ROTATION,
        max(hsl.s, 40.0),
        min(65.0, max(35.0, hsl.l)),
    )


def _by_saturation(c: ColorAnalysis) -> Tuple[float, float, int]:
    # most saturated first, then closest to mid lightness
    return (-c.s, abs(c.l - 50.0), c.index)


def _surfaces(colors: Sequence[ColorAnalysis]) -> Tuple[str, ...]:
    ranked = sorted(colors, key=lambda c: (-c.l, c.index))
    return tuple(c.hex for c in ranked[:MAX_SURFACES])


def map_palette(palette: Sequence[Any]) -> ColorRoles:
    """Assign semantic roles to an ordered palette.

    Malformed entries are skipped. `palette_colors` always carries the input
    untouched.
    """
    raw = freeze_value(_as_sequence(palette))
    colors = analyze_colors(raw)

    if not colors:
        return ColorRoles(
            bg=DEFAULT_BG,
            text=DEFAULT_TEXT,
            primary=DEFAULT_PRIMARY,
            accent=DEFAULT_ACCENT,
            surface=DEFAULT_SURFACE,
            surfaces=DEFAULT_SURFACES,
            palette_colors=raw,
        )

    if len(colors) == 1:
        only = colors[0].hex
        return ColorRoles(
            bg=DEFAULT_BG,
            text=DEFAULT_TEXT,
            primary=only,
            accent=derive_accent(only),
            surface=only,
            surfaces=(only,),
            palette_colors=raw,
        )

    lightness = [c.l for c in colors]
    if max(lightness) - min(lightness) < EQUAL_LIGHTNESS_EPSILON:
        bg = DEFAULT_BG
        text = DEFAULT_TEXT
    else:
        bg = min(colors, key=lambda c: (-c.l, c.s, c.index)).hex
        dark = [c for c in colors if c.hex != bg and c.l <= TEXT_MAX_LIGHTNESS]
        text = min(dark, key=lambda c: (c.s, c.l, c.index)).hex if dark else DEFAULT_TEXT

    chromatic = sorted(
        (c for c in colors if c.hex not in (bg, text) and c.s >= NEUTRAL_SATURATION),
        key=_by_saturation,
    )

    primary_c: Optional[ColorAnalysis]
    if chromatic:
        primary_c = chromatic[0]
    else:
        rest = sorted((c for c in colors if c.hex != bg), key=_by_saturation)
        primary_c = rest[0] if rest else None
    primary = primary_c.hex if primary_c is not None else DEFAULT_PRIMARY

    others = [c for c in chromatic if c.hex != primary]
    if others and primary_c is not None:
        distinct = [c for c in others if hue_distance(c.h, primary_c.h) > ACCENT_MIN_HUE_DISTANCE]
        accent = (distinct or others)[0].hex
    else:
        accent = derive_accent(primary)

    surfaces = _surfaces(colors)
    return ColorRoles(
        bg=bg,
        text=text,
        primary=primary,
        accent=accent,
        surface=surfaces[0],
        surfaces=surfaces,
        palette_colors=raw,
    )


def apply_complexity(roles: ColorRoles, mode: str) -> ColorRoles:
    """Reduce a full mapping to the requested complexity level.

    simple   primary plus fixed neutrals
    curated  at most three surfaces
    full     unchanged (also used for unknown modes)
    """
    if mode == "simple":
        return ColorRoles(
            bg="#FAFAFA",
            text=DEFAULT_TEXT,
            primary=roles.primary,
            accent=roles.primary,
            surface=DEFAULT_SURFACE,
            surfaces=DEFAULT_SURFACES,
            palette_colors=(roles.primary,),
        )
    if mode == "curated":
        surfaces = tuple(roles.surfaces[:CURATED_SURFACES]) or (roles.surface,)
        return replace(roles, surfaces=surfaces, surface=surfaces[0])
    if mode != "full":
        obs_warn("mapping", f"unknown complexity mode {mode!r}; using 'full'")
    return roles


def resolve_palette(
    palette: Sequence[Any],
    complexity: str = "full",
    min_ratio: float = MIN_TEXT_CONTRAST,
) -> ColorRoles:
    """map -> enforce -> complexity, the pipeline behind palette application."""
    roles = enforce_contrast(map_palette(palette), min_ratio=min_ratio)
    return apply_complexity(roles, complexity)


def classify_palette_style(palette: Sequence[Any]) -> str:
    """Coarse visual style of a palette, used for library filters."""
    colors = analyze_colors(palette)
    if not colors:
        return "light"

    n = float(len(colors))
    avg_sat = sum(c.s for c in colors) / n
    avg_light = sum(c.l for c in colors) / n
    max_sat = max(c.s for c in colors)
    max_light = max(c.l for c in colors)
    neutral_ratio = sum(1 for c in colors if c.s < 15) / n
    dark_ratio = sum(1 for c in colors if c.l < 30) / n
    light_ratio = sum(1 for c in colors if c.l > 70) / n

    if neutral_ratio > 0.7 or avg_sat < 12:
        return "minimal"
    if max_sat > 85 and avg_sat > 50:
        return "neon"
    if dark_ratio > 0.5 or (avg_light < 35 and max_light < 70):
        return "dark"
    if light_ratio > 0.6 and avg_sat < 40:
        return "light"
    if avg_light > 65 and 15 < avg_sat < 60:
        return "pastel"
    return "light"


__all__ = [
    "COMPLEXITY_MODES",
    "ColorAnalysis",
    "DEFAULT_SURFACES",
    "PALETTE_STYLES",
    "analyze_colors",
    "apply_complexity",
    "classify_palette_style",
    "derive_accent",
    "map_palette",
    "resolve_palette",
]
