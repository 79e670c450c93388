# brandbento/export.py
"""Read-only export views of a Brand: CSS design tokens and JSON."""

from __future__ import annotations

import json
from typing import List, Optional

from brandbento.model import Brand

LETTER_SPACING_CSS = {
    "tight": "-0.02em",
    "normal": "0",
    "wide": "0.05em",
}

EMPTY_CSS = ":root { /* No brand data */ }"


def _css_string(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def export_css(brand: Optional[Brand]) -> str:
    """Render `brand` as CSS custom properties on `:root`."""
    if brand is None:
        return EMPTY_CSS

    t = brand.typography
    c = brand.colors
    logo = brand.logo
    ui = brand.ui

    lines: List[str] = [
        ":root {",
        "  /* Typography */",
        f"  --font-primary: {t.primary};",
        f"  --font-secondary: {t.secondary};",
        f"  --font-ui: {t.ui};",
        f"  --type-scale: {t.scale};",
        f"  --type-base-size: {t.base_size}px;",
        f"  --type-weight-headline: {t.weight_headline};",
        f"  --type-weight-body: {t.weight_body};",
        f"  --type-letter-spacing: {LETTER_SPACING_CSS.get(t.letter_spacing, '0')};",
        "",
        "  /* Colors */",
        f"  --color-bg: {c.bg};",
        f"  --color-text: {c.text};",
        f"  --color-primary: {c.primary};",
        f"  --color-accent: {c.accent};",
        f"  --color-surface: {c.surface};",
    ]
    for i, s in enumerate(c.surfaces):
        lines.append(f"  --color-surface-{i}: {s};")
    lines += [
        "",
        "  /* Logo */",
        f"  --logo-text: {_css_string(logo.text)};",
        f"  --logo-padding: {logo.padding}px;",
        f"  --logo-size: {logo.size}px;",
        "",
        "  /* UI */",
        f"  --button-radius: {ui.button_radius}px;",
        f"  --button-weight: {ui.button_weight};",
        f"  --button-color: {ui.button_color or c.primary};",
        "}",
    ]
    return "\n".join(lines)


def export_json(brand: Optional[Brand]) -> str:
    """Pretty-printed (2-space, key-sorted) JSON; `parse_brand_json` inverts it."""
    obj = brand.to_dict() if brand is not None else {}
    return json.dumps(obj, indent=2, sort_keys=True, ensure_ascii=False)


def parse_brand_json(text: str) -> Brand:
    """Parse JSON produced by `export_json` back into a Brand.

    Missing or mistyped fields take model defaults; non-object JSON raises
    ValueError.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str; got {type(text).__name__}")
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"invalid brand JSON: {e}") from e
    if not isinstance(obj, dict):
        raise ValueError(f"brand JSON must be an object; got {type(obj).__name__}")
    return Brand.from_dict(obj)


__all__ = [
    "EMPTY_CSS",
    "export_css",
    "export_json",
    "parse_brand_json",
]
