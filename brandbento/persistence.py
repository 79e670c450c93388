# brandbento/persistence.py
"""Persisted document layout, schema upgrade and load-time reconciliation.

Layout:
  {schemaVersion, brand, tiles, activePreset, theme, tileSurfaces,
   placementContent}

Undo history, focus and previews are session state and never persisted.
Loading never fails on schema drift: each top-level field is reconciled
against current defaults on its own.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from brandbento.model import THEMES, Brand, HistoryState, Tile, TileContent, freeze_value, thaw_value
from brandbento.placements import INITIAL_TILE_SURFACES, SLOT_TILE_IDS
from brandbento.presets import DEFAULT_BRAND, INITIAL_TILES, SLOT_TILES, default_placement_content
from brandbento.util.console import obs_warn

JsonPath = Union[str, Path]

LATEST_SCHEMA_VERSION = 2

ALLOWED_IMAGE_PREFIXES: Tuple[str, ...] = ("data:image/", "blob:", "https://", "http://")


@dataclass(frozen=True)
class PersistedDocument:
    brand: Brand = DEFAULT_BRAND
    tiles: Tuple[Tile, ...] = INITIAL_TILES
    active_preset: str = "default"
    theme: str = "system"
    tile_surfaces: Mapping[str, Optional[int]] = field(default_factory=lambda: dict(INITIAL_TILE_SURFACES))
    placement_content: Mapping[str, TileContent] = field(default_factory=default_placement_content)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tiles", tuple(self.tiles))
        object.__setattr__(self, "tile_surfaces", freeze_value(self.tile_surfaces))
        object.__setattr__(self, "placement_content", freeze_value(self.placement_content))

    def document(self) -> HistoryState:
        return HistoryState(
            brand=self.brand,
            tiles=self.tiles,
            tile_surfaces=self.tile_surfaces,
            placement_content=self.placement_content,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schemaVersion": LATEST_SCHEMA_VERSION,
            "brand": self.brand.to_dict(),
            "tiles": [t.to_dict() for t in self.tiles],
            "activePreset": self.active_preset,
            "theme": self.theme,
            "tileSurfaces": dict(self.tile_surfaces),
            "placementContent": thaw_value(self.placement_content),
        }


def is_valid_image_src(src: Any) -> bool:
    return isinstance(src, str) and src.startswith(ALLOWED_IMAGE_PREFIXES)


# --- Upgrader -----------------------------------------------------------------

def _coerce_version(v: Any) -> int:
    # Documents written before the envelope existed carry no version.
    if v is None:
        return 1
    return v if isinstance(v, int) and not isinstance(v, bool) else 0


def apply_schema_v2(obj: Dict[str, Any]) -> Dict[str, Any]:
    """v1 -> v2: every letter placement owns a `slot-*` tile.

    Older documents shared tiles between named and letter placements; the
    missing slot tiles are appended with their default content.
    """
    out = dict(obj)
    tiles = out.get("tiles")
    if isinstance(tiles, list) and tiles:
        present = {t.get("id") for t in tiles if isinstance(t, dict)}
        missing = [t.to_dict() for t in SLOT_TILES if t.id not in present]
        if missing:
            out["tiles"] = list(tiles) + missing
    out["schemaVersion"] = 2
    return out


def upgrade_document(obj: Any) -> Dict[str, Any]:
    """Upgrade a persisted document to LATEST_SCHEMA_VERSION.

    Idempotent and non-mutating. Never downgrades: a newer document raises
    ValueError, as does an unusable version marker.
    """
    if not isinstance(obj, dict):
        raise TypeError(f"document must be dict; got {type(obj).__name__}")

    cur = _coerce_version(obj.get("schemaVersion"))
    if cur < 1:
        raise ValueError(f"unsupported schemaVersion: {obj.get('schemaVersion')!r}")
    if cur > LATEST_SCHEMA_VERSION:
        raise ValueError(f"schemaVersion {cur} is newer than supported ({LATEST_SCHEMA_VERSION})")

    out = obj
    if cur < 2:
        out = apply_schema_v2(out)
    return out


# --- Reconciliation -----------------------------------------------------------

def _reconcile_brand(data: Any) -> Brand:
    brand = Brand.from_dict(data, DEFAULT_BRAND)
    if brand.logo.image is not None and not is_valid_image_src(brand.logo.image):
        obs_warn("persistence", "discarding logo image with unrecognized scheme")
        brand = replace(brand, logo=replace(brand.logo, image=None))
    return brand


def _reconcile_tiles(data: Any) -> Tuple[Tile, ...]:
    if not isinstance(data, list) or not data:
        return INITIAL_TILES
    out: List[Tile] = []
    seen = set()
    for i, raw in enumerate(data):
        tile = Tile.from_dict(raw)
        if tile is None:
            obs_warn("persistence", f"dropping unusable tile at index {i}")
            continue
        if tile.id in seen:
            continue
        seen.add(tile.id)
        out.append(tile)
    return tuple(out) if out else INITIAL_TILES


def _reconcile_surfaces(data: Any) -> Dict[str, Optional[int]]:
    out: Dict[str, Optional[int]] = dict(INITIAL_TILE_SURFACES)
    if not isinstance(data, Mapping):
        return out
    for k, v in data.items():
        if isinstance(k, str) and isinstance(v, int) and not isinstance(v, bool) and v >= 0:
            out[k] = v
    return out


def _reconcile_placement_content(data: Any) -> Dict[str, TileContent]:
    out = default_placement_content()
    if not isinstance(data, Mapping):
        return out
    for k, v in data.items():
        if isinstance(k, str) and isinstance(v, Mapping):
            out[k] = freeze_value(dict(v))
    return out


def reconcile_document(obj: Any) -> PersistedDocument:
    """Merge a persisted (possibly old or partial) document over defaults.

    Never raises: garbage in any field falls back to that field's default.
    """
    if not isinstance(obj, dict):
        obs_warn("persistence", f"ignoring non-object document ({type(obj).__name__})")
        return PersistedDocument()

    try:
        data = upgrade_document(obj)
    except ValueError as e:
        obs_warn("persistence", f"{e}; reconciling fields as-is")
        data = obj

    preset = data.get("activePreset")
    theme = data.get("theme")
    return PersistedDocument(
        brand=_reconcile_brand(data.get("brand")),
        tiles=_reconcile_tiles(data.get("tiles")),
        active_preset=preset if isinstance(preset, str) and preset else "default",
        theme=theme if theme in THEMES else "system",
        tile_surfaces=_reconcile_surfaces(data.get("tileSurfaces")),
        placement_content=_reconcile_placement_content(data.get("placementContent")),
    )


def missing_slot_ids(tiles: Tuple[Tile, ...]) -> List[str]:
    present = {t.id for t in tiles}
    return [sid for sid in SLOT_TILE_IDS if sid not in present]


# --- IO -----------------------------------------------------------------------

def dump_document(doc: PersistedDocument) -> str:
    return json.dumps(doc.to_dict(), indent=2, sort_keys=True, ensure_ascii=False) + "\n"


def load_document_from_json(path: JsonPath) -> PersistedDocument:
    """Load and reconcile a persisted document from a JSON file.

    Unreadable JSON raises ValueError; anything that parses is reconciled.
    """
    p = Path(path)
    try:
        obj = json.loads(p.read_text(encoding="utf-8", errors="replace"))
    except json.JSONDecodeError as e:
        raise ValueError(f"invalid JSON in {p}: {e}") from e
    return reconcile_document(obj)


def save_document_to_json(path: JsonPath, doc: PersistedDocument) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(dump_document(doc), encoding="utf-8")
    return p


__all__ = [
    "ALLOWED_IMAGE_PREFIXES",
    "LATEST_SCHEMA_VERSION",
    "PersistedDocument",
    "dump_document",
    "is_valid_image_src",
    "load_document_from_json",
    "missing_slot_ids",
    "reconcile_document",
    "save_document_to_json",
    "upgrade_document",
]
