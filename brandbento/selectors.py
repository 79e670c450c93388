# brandbento/selectors.py
"""Read-only views over a BrandStore."""

from __future__ import annotations

from typing import Optional, Sequence

from brandbento.model import Tile, TileContent, thaw_value
from brandbento.placements import placement_kind, placement_tile_id, placement_tile_type
from brandbento.store import BrandStore


def select_focused_tile(store: BrandStore) -> Optional[Tile]:
    """Tile behind the focused id.

    Lookup order: the placement's own tile id ("a" -> "slot-a"), then a
    direct tile id match, then the first tile of the placement's type.
    """
    focused = store.focused_tile_id
    if not focused:
        return None
    tiles = store.tiles

    tid = placement_tile_id(focused)
    for t in tiles:
        if t.id == tid:
            return t
    for t in tiles:
        if t.id == focused:
            return t
    ttype = placement_tile_type(focused)
    for t in tiles:
        if t.type == ttype:
            return t
    return None


def select_focused_kind(store: BrandStore) -> Optional[str]:
    """Content category of the focused placement ("hero" -> "identity"), if any."""
    return placement_kind(store.focused_tile_id)


def select_can_undo(store: BrandStore) -> bool:
    return len(store.history.past) > 0


def select_can_redo(store: BrandStore) -> bool:
    return len(store.history.future) > 0


def resolve_surface_color(
    surfaces: Sequence[str],
    bg: str,
    surface_index: Optional[int] = None,
    default_index: int = 0,
) -> str:
    """Surface color for a tile; falls back to `bg` when the index is out of range."""
    idx = surface_index if surface_index is not None else default_index
    if 0 <= idx < len(surfaces) and surfaces[idx]:
        return surfaces[idx]
    return bg


def select_surface_color(store: BrandStore, placement_id: str, default_index: int = 0) -> str:
    colors = store.brand.colors
    return resolve_surface_color(
        colors.surfaces,
        colors.bg,
        store.tile_surfaces.get(placement_id),
        default_index,
    )


def resolve_placement_content(store: BrandStore, placement_id: str) -> TileContent:
    """Content of the placement's tile overlaid with placement-level overrides."""
    base: TileContent = {}
    tid = placement_tile_id(placement_id)
    for t in store.tiles:
        if t.id == tid:
            base = dict(t.content)
            break
    overrides = store.placement_content.get(placement_id, {})
    return thaw_value({**base, **overrides})


__all__ = [
    "resolve_placement_content",
    "resolve_surface_color",
    "select_can_redo",
    "select_can_undo",
    "select_focused_kind",
    "select_focused_tile",
    "select_surface_color",
]
