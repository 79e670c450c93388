# brandbento/validate.py
"""Document validation helpers (library-facing).

Validation is an offline check for tooling and tests. Loading never depends
on it: `persistence.reconcile_document` accepts anything.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from brandbento.color import is_hex_color
from brandbento.model import BRAND_SECTIONS, MAX_SURFACES, THEMES, TILE_TYPES
from brandbento.persistence import LATEST_SCHEMA_VERSION, is_valid_image_src


class DocumentValidationError(ValueError):
    """Raised when a persisted document fails validation."""


_COLOR_KEYS = ("bg", "text", "primary", "accent", "surface")


def _require(cond: bool, msg: str, errs: List[str]) -> None:
    if not cond:
        errs.append(msg)


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def validate_brand(brand: Any, *, label: str = "brand") -> List[str]:
    errs: List[str] = []
    if not isinstance(brand, dict):
        return [f"{label} must be dict"]

    for name in BRAND_SECTIONS:
        if name in brand:
            _require(isinstance(brand[name], dict), f"{label}.{name} must be dict", errs)

    colors = brand.get("colors")
    if isinstance(colors, dict):
        for k in _COLOR_KEYS:
            if k in colors:
                _require(is_hex_color(colors[k]), f"{label}.colors.{k} must be hex color", errs)
        if "surfaces" in colors:
            s = colors["surfaces"]
            ok = isinstance(s, list) and 1 <= len(s) <= MAX_SURFACES and all(is_hex_color(x) for x in s)
            _require(ok, f"{label}.colors.surfaces must be list of 1..{MAX_SURFACES} hex colors", errs)
        if "paletteColors" in colors:
            _require(isinstance(colors["paletteColors"], list), f"{label}.colors.paletteColors must be list", errs)

    typo = brand.get("typography")
    if isinstance(typo, dict):
        for k in ("primary", "secondary", "ui"):
            if k in typo:
                _require(
                    isinstance(typo[k], str) and bool(typo[k].strip()),
                    f"{label}.typography.{k} must be non-empty string",
                    errs,
                )
        if "letterSpacing" in typo:
            _require(
                typo["letterSpacing"] in ("tight", "normal", "wide"),
                f"{label}.typography.letterSpacing must be tight|normal|wide",
                errs,
            )

    logo = brand.get("logo")
    if isinstance(logo, dict) and logo.get("image") is not None:
        _require(is_valid_image_src(logo["image"]), f"{label}.logo.image has unrecognized scheme", errs)

    return errs


def _validate_tiles(tiles: Any, errs: List[str]) -> None:
    if not isinstance(tiles, list):
        errs.append("tiles must be list")
        return
    _require(len(tiles) > 0, "tiles must be non-empty", errs)
    seen = set()
    for i, t in enumerate(tiles):
        if not isinstance(t, dict):
            errs.append(f"tiles[{i}] must be dict")
            continue
        tid = t.get("id")
        _require(isinstance(tid, str) and bool(tid.strip()), f"tiles[{i}].id must be non-empty string", errs)
        if isinstance(tid, str):
            _require(tid not in seen, f"tiles[{i}].id duplicated: {tid}", errs)
            seen.add(tid)
        _require(t.get("type") in TILE_TYPES, f"tiles[{i}].type must be a known tile type", errs)
        _require(isinstance(t.get("content", {}), dict), f"tiles[{i}].content must be dict", errs)
        for k in ("colSpan", "rowSpan"):
            if k in t:
                _require(_is_int(t[k]) and t[k] >= 1, f"tiles[{i}].{k} must be int >= 1", errs)
        if t.get("surfaceIndex") is not None:
            si = t["surfaceIndex"]
            _require(_is_int(si) and si >= 0, f"tiles[{i}].surfaceIndex must be int >= 0", errs)


def validate_document(doc: Any) -> List[str]:
    """Return a list of stable error strings (empty when valid)."""
    if not isinstance(doc, dict):
        return ["document must be dict"]

    errs: List[str] = []

    if "schemaVersion" in doc:
        v = doc["schemaVersion"]
        _require(
            _is_int(v) and 1 <= v <= LATEST_SCHEMA_VERSION,
            f"schemaVersion must be int in 1..{LATEST_SCHEMA_VERSION}",
            errs,
        )

    errs.extend(validate_brand(doc.get("brand")))
    _validate_tiles(doc.get("tiles"), errs)

    if "activePreset" in doc:
        _require(isinstance(doc["activePreset"], str), "activePreset must be string", errs)
    if "theme" in doc:
        _require(doc["theme"] in THEMES, f"theme must be one of {'|'.join(THEMES)}", errs)

    surfaces = doc.get("tileSurfaces", {})
    if not isinstance(surfaces, dict):
        errs.append("tileSurfaces must be dict")
    else:
        for k, v in surfaces.items():
            if v is not None:
                _require(_is_int(v) and v >= 0, f"tileSurfaces.{k} must be int >= 0", errs)

    content = doc.get("placementContent", {})
    if not isinstance(content, dict):
        errs.append("placementContent must be dict")
    else:
        for k, v in content.items():
            _require(isinstance(v, Mapping), f"placementContent.{k} must be dict", errs)

    return errs


def assert_valid_document(doc: Dict[str, Any]) -> None:
    errs = validate_document(doc)
    if errs:
        raise DocumentValidationError("\n".join(errs))


__all__ = [
    "DocumentValidationError",
    "assert_valid_document",
    "validate_brand",
    "validate_document",
]
