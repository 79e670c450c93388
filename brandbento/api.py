"""brandbento.api

Stable *library* entrypoint for the Brand Bento engine.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from brandbento.color import contrast_level, contrast_ratio, normalize_hex
from brandbento.config import EngineConfig
from brandbento.contrast import enforce_contrast, validate_roles
from brandbento.export import export_css, export_json, parse_brand_json
from brandbento.history import MAX_HISTORY
from brandbento.mapping import apply_complexity, map_palette, resolve_palette
from brandbento.model import Brand, ColorRoles, History, HistoryState, Tile
from brandbento.palette_input import parse_palette_input
from brandbento.persistence import (
    LATEST_SCHEMA_VERSION,
    PersistedDocument,
    load_document_from_json,
    reconcile_document,
    save_document_to_json,
    upgrade_document,
)
from brandbento.selectors import (
    resolve_placement_content,
    resolve_surface_color,
    select_can_redo,
    select_can_undo,
    select_focused_kind,
    select_focused_tile,
)
from brandbento.store import (
    BrandStore,
    SetPlacementContent,
    SetTileSurface,
    UpdateBrand,
    UpdateColors,
    UpdateImagery,
    UpdateLogo,
    UpdateTile,
    UpdateTypography,
    UpdateUI,
)
from brandbento.validate import DocumentValidationError, assert_valid_document, validate_document

JsonPath = Union[str, Path]


def load_store_from_json(path: JsonPath, *, config: Optional[EngineConfig] = None) -> BrandStore:
    """Rehydrate a store from a persisted document file (history starts empty)."""
    return BrandStore(config=config, persisted=load_document_from_json(path))


def save_store_to_json(store: BrandStore, path: JsonPath) -> Path:
    if not isinstance(store, BrandStore):
        raise TypeError(f"store must be BrandStore; got {type(store).__name__}")
    return save_document_to_json(path, store.to_persisted())


# --- Public API exports (locked by contract tests) ------------------------
# Keep changes intentional and reviewable.
# Prefer append-only unless you are intentionally reshaping the public surface.
_PUBLIC_EXPORTS = (
    "Brand",
    "BrandStore",
    "ColorRoles",
    "DocumentValidationError",
    "EngineConfig",
    "History",
    "HistoryState",
    "LATEST_SCHEMA_VERSION",
    "MAX_HISTORY",
    "PersistedDocument",
    "SetPlacementContent",
    "SetTileSurface",
    "Tile",
    "UpdateBrand",
    "UpdateColors",
    "UpdateImagery",
    "UpdateLogo",
    "UpdateTile",
    "UpdateTypography",
    "UpdateUI",
    "apply_complexity",
    "assert_valid_document",
    "contrast_level",
    "contrast_ratio",
    "enforce_contrast",
    "export_css",
    "export_json",
    "load_document_from_json",
    "load_store_from_json",
    "map_palette",
    "normalize_hex",
    "parse_brand_json",
    "parse_palette_input",
    "reconcile_document",
    "resolve_palette",
    "resolve_placement_content",
    "resolve_surface_color",
    "save_document_to_json",
    "save_store_to_json",
    "select_can_redo",
    "select_can_undo",
    "select_focused_kind",
    "select_focused_tile",
    "upgrade_document",
    "validate_document",
    "validate_roles",
)

__all__ = [n for n in _PUBLIC_EXPORTS if n in globals()]
# --- /Public API exports --------------------------------------------------
