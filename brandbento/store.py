# brandbento/store.py
"""Mutation Store.

One `BrandStore` instance owns one editable document (brand, tiles, per-
placement surface overrides, per-placement content) plus its undo history.
Callers hold the instance; nothing here is module-global.

Mutations come in two explicit flavours:

  apply_draft(op)  live update, no undo point (e.g. while a slider moves)
  commit(op)       one undo point if, and only if, the document changes

Document-replacing actions (palettes, presets, shuffles, reset, tile swaps)
are always commits. Session actions (focus, theme, font preview, templates)
never touch history; loading a template starts a new history.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Any, ClassVar, Mapping, Optional, Union

from brandbento.color import hex_to_hsl, parse_hex
from brandbento.config import EngineConfig
from brandbento.history import can_redo, can_undo, push_snapshot, step_back, step_forward
from brandbento.mapping import resolve_palette
from brandbento.model import TILE_TYPES, THEMES, Brand, History, HistoryState, TileContent, thaw_value
from brandbento.palettes import Palette, get_all_palettes, get_palette_by_id
from brandbento.persistence import PersistedDocument, reconcile_document
from brandbento.placements import INITIAL_TILE_SURFACES
from brandbento.presets import (
    BRAND_PRESETS,
    DEFAULT_BRAND,
    FONT_PAIRINGS,
    INITIAL_TILES,
    STARTER_TEMPLATES,
    FontPairing,
    StarterTemplate,
    default_placement_content,
    default_tile_content,
    get_template,
)
from brandbento.updates import (
    brand_patch_changes,
    content_changes,
    find_tile,
    section_changes,
    with_brand,
    with_placement_content,
    with_tile_content,
    with_tile_surface,
    with_tile_type,
    with_typography,
)
from brandbento.util.console import obs_warn

RESOLVED_THEMES = ("light", "dark")
FONT_PREVIEW_TARGETS = ("primary", "secondary")


# --- Tagged operations --------------------------------------------------------

@dataclass(frozen=True)
class UpdateBrand:
    """Multi-section patch: {"colors": {...}, "logo": {...}}."""

    patch: Mapping[str, Any]


@dataclass(frozen=True)
class UpdateTypography:
    changes: Mapping[str, Any]
    section: ClassVar[str] = "typography"


@dataclass(frozen=True)
class UpdateColors:
    changes: Mapping[str, Any]
    section: ClassVar[str] = "colors"


@dataclass(frozen=True)
class UpdateLogo:
    changes: Mapping[str, Any]
    section: ClassVar[str] = "logo"


@dataclass(frozen=True)
class UpdateImagery:
    changes: Mapping[str, Any]
    section: ClassVar[str] = "imagery"


@dataclass(frozen=True)
class UpdateUI:
    changes: Mapping[str, Any]
    section: ClassVar[str] = "ui"


@dataclass(frozen=True)
class UpdateTile:
    tile_id: str
    content: Mapping[str, Any]


@dataclass(frozen=True)
class SetTileSurface:
    placement_id: str
    surface_index: Optional[int]


@dataclass(frozen=True)
class SetPlacementContent:
    placement_id: str
    content: Mapping[str, Any]


SectionUpdate = Union[UpdateTypography, UpdateColors, UpdateLogo, UpdateImagery, UpdateUI]
Operation = Union[UpdateBrand, SectionUpdate, UpdateTile, SetTileSurface, SetPlacementContent]

_SECTION_OPS = (UpdateTypography, UpdateColors, UpdateLogo, UpdateImagery, UpdateUI)


@dataclass(frozen=True)
class FontPreview:
    font: str
    target: str = "primary"


def initial_document() -> HistoryState:
    return HistoryState(
        brand=DEFAULT_BRAND,
        tiles=INITIAL_TILES,
        tile_surfaces=dict(INITIAL_TILE_SURFACES),
        placement_content=default_placement_content(),
    )


def _palette_weight(p: Palette) -> float:
    """Shuffle weight: more colors and more hue variety are preferred.

    A palette holding any pure gray gets the flat minimum weight.
    """
    color_weight = min(len(p.colors), 7) / 7.0
    buckets = set()
    for hx in p.colors:
        rgb = parse_hex(hx)
        if rgb is None:
            continue
        if max(rgb) == min(rgb):
            return 0.4
        buckets.add(int(hex_to_hsl(hx).h // 60) % 6)
    hue_weight = min(len(buckets), 4) / 4.0
    return 0.4 + 0.3 * color_weight + 0.3 * hue_weight


class BrandStore:
    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        preset: Optional[str] = None,
        persisted: Any = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config if config is not None else EngineConfig()
        self._rng = rng if rng is not None else random.Random()

        self._doc = initial_document()
        self._history = History()
        self.active_preset = "default"
        self.theme = "system"
        self.resolved_theme = "light"
        self.focused_tile_id: Optional[str] = None
        self.font_preview: Optional[FontPreview] = None

        self._last_template_idx = -1
        self._last_palette_idx = -1
        self._last_font_idx = -1

        if persisted is not None:
            doc = persisted if isinstance(persisted, PersistedDocument) else reconcile_document(persisted)
            self._doc = doc.document()
            self.active_preset = doc.active_preset
            self.theme = doc.theme
        elif preset is not None:
            brand = BRAND_PRESETS.get(preset)
            if brand is None:
                obs_warn("store", f"unknown preset {preset!r}; starting from defaults")
            else:
                self._doc = replace(self._doc, brand=brand)
                self.active_preset = preset

    # --- Read access ------------------------------------------------------

    @property
    def brand(self) -> Brand:
        return self._doc.brand

    @property
    def tiles(self):
        return self._doc.tiles

    @property
    def tile_surfaces(self):
        return dict(self._doc.tile_surfaces)

    @property
    def placement_content(self):
        return thaw_value(self._doc.placement_content)

    @property
    def history(self) -> History:
        return self._history

    def snapshot(self) -> HistoryState:
        """The current editable document; snapshots are immutable."""
        return self._doc

    def to_persisted(self) -> PersistedDocument:
        d = self._doc
        return PersistedDocument(
            brand=d.brand,
            tiles=d.tiles,
            active_preset=self.active_preset,
            theme=self.theme,
            tile_surfaces=d.tile_surfaces,
            placement_content=d.placement_content,
        )

    # --- Draft / commit ---------------------------------------------------

    def _evolve(self, op: Operation) -> Optional[HistoryState]:
        """Document after `op`, or None when `op` changes nothing."""
        doc = self._doc

        if isinstance(op, UpdateBrand):
            if not brand_patch_changes(doc.brand, op.patch):
                return None
            nxt = replace(doc, brand=with_brand(doc.brand, op.patch))

        elif isinstance(op, _SECTION_OPS):
            if not section_changes(getattr(doc.brand, op.section), op.changes):
                return None
            nxt = replace(doc, brand=with_brand(doc.brand, {op.section: op.changes}))

        elif isinstance(op, UpdateTile):
            tile = find_tile(doc.tiles, op.tile_id)
            if tile is None:
                obs_warn("store", f"updateTile: unknown tile id {op.tile_id!r}")
                return None
            if not content_changes(tile.content, op.content):
                return None
            nxt = replace(doc, tiles=with_tile_content(doc.tiles, op.tile_id, op.content))

        elif isinstance(op, SetTileSurface):
            idx = op.surface_index
            if idx is not None and (isinstance(idx, bool) or not isinstance(idx, int) or idx < 0):
                obs_warn("store", f"setTileSurface: ignoring surface index {idx!r}")
                return None
            if doc.tile_surfaces.get(op.placement_id) == idx:
                return None
            nxt = replace(doc, tile_surfaces=with_tile_surface(doc.tile_surfaces, op.placement_id, idx))

        elif isinstance(op, SetPlacementContent):
            current: TileContent = doc.placement_content.get(op.placement_id, {})
            if not content_changes(current, op.content):
                return None
            nxt = replace(
                doc,
                placement_content=with_placement_content(doc.placement_content, op.placement_id, op.content),
            )

        else:
            raise TypeError(f"unsupported operation: {type(op).__name__}")

        return None if nxt == doc else nxt

    def apply_draft(self, op: Operation) -> bool:
        """Apply `op` to the live document without creating an undo point."""
        nxt = self._evolve(op)
        if nxt is None:
            return False
        self._doc = nxt
        return True

    def commit(self, op: Operation) -> bool:
        """Apply `op` as one undo point. Returns False (history untouched) on no-op."""
        nxt = self._evolve(op)
        if nxt is None:
            return False
        return self._commit_document(nxt)

    def _commit_document(self, nxt: HistoryState) -> bool:
        if nxt == self._doc:
            return False
        self._history = push_snapshot(self._history, self._doc, self.config.max_history)
        self._doc = nxt
        return True

    def _commit_brand(self, brand: Brand) -> bool:
        return self._commit_document(replace(self._doc, brand=brand))

    # --- Document actions (always commits) --------------------------------

    def apply_palette(self, palette: Any, complexity: Optional[str] = None) -> bool:
        mode = complexity if complexity is not None else self.config.default_complexity
        roles = resolve_palette(palette, mode, self.config.min_text_contrast)
        return self._commit_brand(replace(self.brand, colors=roles))

    def apply_palette_by_id(self, palette_id: str, complexity: Optional[str] = None) -> bool:
        p = get_palette_by_id(palette_id)
        if p is None:
            obs_warn("store", f"applyPalette: unknown palette id {palette_id!r}")
            return False
        return self.apply_palette(p.colors, complexity)

    def load_preset(self, name: str) -> bool:
        brand = BRAND_PRESETS.get(name)
        if brand is None:
            obs_warn("store", f"loadPreset: unknown preset {name!r}")
            return False
        changed = self._commit_brand(brand)
        self.active_preset = name
        return changed

    def apply_preset_brand(self, brand: Brand, name: str = "custom") -> bool:
        """Apply a complete Brand as-is (no mapping, no enforcement)."""
        if not isinstance(brand, Brand):
            raise TypeError(f"brand must be Brand; got {type(brand).__name__}")
        changed = self._commit_brand(brand)
        self.active_preset = name
        return changed

    def swap_tile_type(self, tile_id: str, new_type: str) -> bool:
        """Change a tile's variant; content resets to the new type's defaults."""
        if find_tile(self._doc.tiles, tile_id) is None:
            obs_warn("store", f"swapTileType: unknown tile id {tile_id!r}")
            return False
        if new_type not in TILE_TYPES:
            obs_warn("store", f"swapTileType: unknown tile type {new_type!r}")
            return False
        tiles = with_tile_type(self._doc.tiles, tile_id, new_type, default_tile_content(new_type))
        return self._commit_document(replace(self._doc, tiles=tiles))

    def reset_to_defaults(self) -> bool:
        changed = self._commit_document(initial_document())
        self.active_preset = "default"
        return changed

    def _pick_palette(self) -> Palette:
        palettes = get_all_palettes()
        weights = [_palette_weight(p) for p in palettes]
        r = self._rng.random() * sum(weights)
        idx = len(palettes) - 1
        for i, w in enumerate(weights):
            r -= w
            if r <= 0:
                idx = i
                break
        if len(palettes) > 1 and idx == self._last_palette_idx:
            idx = (idx + 1) % len(palettes)
        self._last_palette_idx = idx
        return palettes[idx]

    def _pick_font_pairing(self) -> FontPairing:
        idx = self._rng.randrange(len(FONT_PAIRINGS))
        if len(FONT_PAIRINGS) > 1 and idx == self._last_font_idx:
            idx = (idx + 1) % len(FONT_PAIRINGS)
        self._last_font_idx = idx
        return FONT_PAIRINGS[idx]

    def _shuffled_colors(self, brand: Brand) -> Brand:
        p = self._pick_palette()
        roles = resolve_palette(p.colors, "full", self.config.min_text_contrast)
        return replace(brand, colors=roles)

    def _shuffled_typography(self, brand: Brand) -> Brand:
        f = self._pick_font_pairing()
        return with_typography(
            brand,
            {
                "primary": f.primary,
                "secondary": f.secondary,
                "ui": f.secondary,
                "weight_headline": f.weight,
                "letter_spacing": f.spacing,
            },
        )

    def shuffle_colors(self) -> bool:
        changed = self._commit_brand(self._shuffled_colors(self.brand))
        self.active_preset = "custom"
        return changed

    def shuffle_typography(self) -> bool:
        changed = self._commit_brand(self._shuffled_typography(self.brand))
        self.active_preset = "custom"
        return changed

    def shuffle_brand(self) -> bool:
        brand = self._shuffled_typography(self._shuffled_colors(self.brand))
        changed = self._commit_brand(brand)
        self.active_preset = "custom"
        return changed

    # --- History ----------------------------------------------------------

    def undo(self) -> bool:
        history, restored = step_back(self._history, self._doc)
        if restored is None:
            return False
        self._history = history
        self._doc = restored
        return True

    def redo(self) -> bool:
        history, restored = step_forward(self._history, self._doc, self.config.max_history)
        if restored is None:
            return False
        self._history = history
        self._doc = restored
        return True

    @property
    def can_undo(self) -> bool:
        return can_undo(self._history)

    @property
    def can_redo(self) -> bool:
        return can_redo(self._history)

    # --- Session actions (never recorded) ---------------------------------

    def load_template(self, template: Union[str, StarterTemplate, None] = None) -> bool:
        """Replace the document with a starter template and start a new history.

        With no argument a random template is picked, never the same one twice
        in a row. Only the first tile of each type is kept.
        """
        if template is None:
            idx = self._rng.randrange(len(STARTER_TEMPLATES))
            if len(STARTER_TEMPLATES) > 1 and idx == self._last_template_idx:
                idx = (idx + 1) % len(STARTER_TEMPLATES)
            self._last_template_idx = idx
            chosen = STARTER_TEMPLATES[idx]
        elif isinstance(template, StarterTemplate):
            chosen = template
        else:
            found = get_template(template)
            if found is None:
                obs_warn("store", f"loadTemplate: unknown template {template!r}")
                return False
            chosen = found

        seen = set()
        tiles = []
        for t in chosen.tiles:
            if t.type in seen:
                continue
            seen.add(t.type)
            tiles.append(t)

        self._doc = HistoryState(
            brand=chosen.brand,
            tiles=tuple(tiles),
            tile_surfaces=dict(INITIAL_TILE_SURFACES),
            placement_content=default_placement_content(),
        )
        self._history = History()
        self.active_preset = "custom"
        return True

    def set_focused_tile(self, tile_id: Optional[str]) -> None:
        self.focused_tile_id = tile_id

    def set_theme(self, theme: str) -> None:
        if theme not in THEMES:
            raise ValueError(f"theme must be one of {list(THEMES)}; got {theme!r}")
        self.theme = theme

    def set_resolved_theme(self, resolved: str) -> None:
        if resolved not in RESOLVED_THEMES:
            raise ValueError(f"resolved theme must be one of {list(RESOLVED_THEMES)}; got {resolved!r}")
        self.resolved_theme = resolved

    def set_font_preview(self, font: Optional[str], target: str = "primary") -> None:
        if not font:
            self.font_preview = None
            return
        if target not in FONT_PREVIEW_TARGETS:
            raise ValueError(f"font preview target must be one of {list(FONT_PREVIEW_TARGETS)}; got {target!r}")
        self.font_preview = FontPreview(font=font, target=target)


__all__ = [
    "BrandStore",
    "FontPreview",
    "Operation",
    "SetPlacementContent",
    "SetTileSurface",
    "UpdateBrand",
    "UpdateColors",
    "UpdateImagery",
    "UpdateLogo",
    "UpdateTile",
    "UpdateTypography",
    "UpdateUI",
    "initial_document",
]
