# brandbento/updates.py
"""Typed update builders and change detection.

Every builder returns a new record (or a new tuple/dict) and never mutates
its input, so snapshots held by history cannot be altered through a later
update. Unknown keys are dropped.
"""

from __future__ import annotations

from dataclasses import is_dataclass, replace
from typing import Any, Dict, Mapping, Optional, Tuple

from brandbento.model import (
    BRAND_SECTIONS,
    TILE_TYPES,
    Brand,
    Tile,
    TileContent,
    freeze_value,
)

BrandPatch = Mapping[str, Any]


def values_differ(a: Any, b: Any) -> bool:
    """Structural inequality; lists and tuples with equal elements are equal."""
    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        if len(a) != len(b):
            return True
        return any(values_differ(x, y) for x, y in zip(a, b))
    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if set(a.keys()) != set(b.keys()):
            return True
        return any(values_differ(a[k], b[k]) for k in a)
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is not type(b) or a != b
    return a != b


def _section_partial(section: Any, value: Any) -> Optional[Mapping[str, Any]]:
    if is_dataclass(value) and type(value) is type(section):
        return value.to_dict()
    if isinstance(value, Mapping):
        return value
    return None


def section_changes(section: Any, changes: Mapping[str, Any]) -> bool:
    """True if applying `changes` to the section record would alter it."""
    for attr, value in section.known_changes(changes).items():
        if values_differ(getattr(section, attr), value):
            return True
    return False


def brand_patch_changes(brand: Brand, patch: BrandPatch) -> bool:
    """Compare a brand patch against `brand` section by section, key by key."""
    if not isinstance(patch, Mapping):
        return False
    for name in BRAND_SECTIONS:
        if name not in patch:
            continue
        partial = _section_partial(getattr(brand, name), patch[name])
        if partial is not None and section_changes(getattr(brand, name), partial):
            return True
    return False


def content_changes(content: Mapping[str, Any], patch: Mapping[str, Any]) -> bool:
    for k, v in patch.items():
        if k not in content or values_differ(content[k], v):
            return True
    return False


# --- Brand builders -----------------------------------------------------------

def with_typography(brand: Brand, changes: Mapping[str, Any]) -> Brand:
    return replace(brand, typography=brand.typography.updated(changes))


def with_colors(brand: Brand, changes: Mapping[str, Any]) -> Brand:
    return replace(brand, colors=brand.colors.updated(changes))


def with_logo(brand: Brand, changes: Mapping[str, Any]) -> Brand:
    return replace(brand, logo=brand.logo.updated(changes))


def with_imagery(brand: Brand, changes: Mapping[str, Any]) -> Brand:
    return replace(brand, imagery=brand.imagery.updated(changes))


def with_ui(brand: Brand, changes: Mapping[str, Any]) -> Brand:
    return replace(brand, ui=brand.ui.updated(changes))


def with_brand(brand: Brand, patch: BrandPatch) -> Brand:
    """Apply a multi-section patch, e.g. {"colors": {...}, "logo": {...}}.

    Section values may be partial mappings or complete section records.
    """
    if not isinstance(patch, Mapping):
        return brand
    out = brand
    for name in BRAND_SECTIONS:
        if name not in patch:
            continue
        section = getattr(out, name)
        partial = _section_partial(section, patch[name])
        if partial is None:
            continue
        out = replace(out, **{name: section.updated(partial)})
    return out


# --- Tile / placement builders ------------------------------------------------

def find_tile(tiles: Tuple[Tile, ...], tile_id: str) -> Optional[Tile]:
    for t in tiles:
        if t.id == tile_id:
            return t
    return None


def with_tile_content(tiles: Tuple[Tile, ...], tile_id: str, content: Mapping[str, Any]) -> Tuple[Tile, ...]:
    patch = freeze_value(dict(content))
    return tuple(
        replace(t, content={**t.content, **patch}) if t.id == tile_id else t
        for t in tiles
    )


def with_tile_type(
    tiles: Tuple[Tile, ...],
    tile_id: str,
    new_type: str,
    default_content: Optional[Mapping[str, Any]] = None,
) -> Tuple[Tile, ...]:
    """Swap a tile's variant; its content is reset to `default_content`."""
    if new_type not in TILE_TYPES:
        return tiles
    content = freeze_value(dict(default_content or {}))
    return tuple(
        replace(t, type=new_type, content=dict(content)) if t.id == tile_id else t
        for t in tiles
    )


def with_tile_surface(
    tile_surfaces: Mapping[str, Optional[int]],
    placement_id: str,
    surface_index: Optional[int],
) -> Dict[str, Optional[int]]:
    """None clears the override for the placement."""
    out = dict(tile_surfaces)
    if surface_index is None:
        out.pop(placement_id, None)
    else:
        out[placement_id] = surface_index
    return out


def with_placement_content(
    placement_content: Mapping[str, TileContent],
    placement_id: str,
    content: Mapping[str, Any],
) -> Dict[str, TileContent]:
    out = {k: dict(v) for k, v in placement_content.items()}
    current = out.get(placement_id, {})
    out[placement_id] = {**current, **freeze_value(dict(content))}
    return out


__all__ = [
    "brand_patch_changes",
    "content_changes",
    "find_tile",
    "section_changes",
    "values_differ",
    "with_brand",
    "with_colors",
    "with_imagery",
    "with_logo",
    "with_placement_content",
    "with_tile_content",
    "with_tile_surface",
    "with_tile_type",
    "with_typography",
    "with_ui",
]
