# brandbento/placements.py
"""Placement tables.

A placement is a layout slot id ("hero", "a", ...) that is independent of the
tile occupying it. Content and surface overrides are keyed by placement.
Every placement maps to its own tile id; sharing a tile between placements
would make a type swap in one slot change another.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

PLACEMENT_KIND_BY_ID: Dict[str, str] = {
    "hero": "identity",
    "editorial": "editorial",
    "social": "social",
    "buttons": "interface",
    "logo": "identity",
    "colors": "colors",
    "product": "product",
    "a": "identity",
    "b": "editorial",
    "c": "interface",
    "d": "social",
    "e": "colors",
    "f": "editorial",
}

PLACEMENT_TILE_TYPE_BY_ID: Dict[str, str] = {
    "hero": "hero",
    "editorial": "editorial",
    "social": "social",
    "buttons": "ui-preview",
    "logo": "logo",
    "colors": "utility",
    "product": "product",
    "a": "logo",
    "b": "editorial",
    "c": "ui-preview",
    "d": "social",
    "e": "swatch",
    "f": "stats",
}

PLACEMENT_TILE_ID_BY_ID: Dict[str, str] = {
    "hero": "hero-1",
    "editorial": "editorial-1",
    "social": "social-1",
    "buttons": "ui-preview-1",
    "logo": "logo-1",
    "colors": "utility-1",
    "product": "product-1",
    "a": "slot-a",
    "b": "slot-b",
    "c": "slot-c",
    "d": "slot-d",
    "e": "slot-e",
    "f": "slot-f",
}

SLOT_PLACEMENTS: Tuple[str, ...] = ("a", "b", "c", "d", "e", "f")
SLOT_TILE_IDS: Tuple[str, ...] = tuple(PLACEMENT_TILE_ID_BY_ID[p] for p in SLOT_PLACEMENTS)

# Default surface index per placement; higher index = more color.
INITIAL_TILE_SURFACES: Dict[str, int] = {
    "editorial": 2,
    "social": 3,
    "product": 2,
    "b": 2,
    "d": 3,
    "f": 4,
}


def placement_kind(placement_id: Optional[str]) -> Optional[str]:
    if not placement_id:
        return None
    return PLACEMENT_KIND_BY_ID.get(placement_id)


def placement_tile_type(placement_id: Optional[str]) -> Optional[str]:
    if not placement_id:
        return None
    return PLACEMENT_TILE_TYPE_BY_ID.get(placement_id)


def placement_tile_id(placement_id: Optional[str]) -> Optional[str]:
    if not placement_id:
        return None
    return PLACEMENT_TILE_ID_BY_ID.get(placement_id)


__all__ = [
    "INITIAL_TILE_SURFACES",
    "PLACEMENT_KIND_BY_ID",
    "PLACEMENT_TILE_ID_BY_ID",
    "PLACEMENT_TILE_TYPE_BY_ID",
    "SLOT_PLACEMENTS",
    "SLOT_TILE_IDS",
    "placement_kind",
    "placement_tile_id",
    "placement_tile_type",
]
