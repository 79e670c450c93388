# brandbento/model.py
from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple, TypeVar

R = TypeVar("R", bound="_Record")

JsonDict = Dict[str, Any]
TileContent = Mapping[str, Any]

# Fixed tile variant set (render component tags).
TILE_TYPES: Tuple[str, ...] = (
    "hero",
    "editorial",
    "product",
    "ui-preview",
    "image",
    "utility",
    "menu",
    "logo",
    "split-hero",
    "overlay",
    "split-list",
    "social",
    "swatch",
    "stats",
    "pattern",
)

LETTER_SPACINGS = ("tight", "normal", "wide")
IMAGERY_STYLES = ("default", "grayscale", "tint")
BUTTON_STYLES = ("filled", "outline", "soft")
BUTTON_SIZES = ("compact", "default", "large")
THEMES = ("light", "dark", "system")


def freeze_value(v: Any) -> Any:
    """Deep read-only copy of `v`.

    Sequences become tuples and mappings become read-only views over a
    private dict, so nothing is shared with the caller or writable later.
    """
    if isinstance(v, (list, tuple)):
        return tuple(freeze_value(x) for x in v)
    if isinstance(v, Mapping):
        return MappingProxyType({str(k): freeze_value(x) for k, x in v.items()})
    return v


def thaw_value(v: Any) -> Any:
    """Plain JSON-shaped copy (lists and dicts) of a frozen value."""
    if isinstance(v, tuple):
        return [thaw_value(x) for x in v]
    if isinstance(v, Mapping):
        return {k: thaw_value(x) for k, x in v.items()}
    return v


def _freeze_field(record: Any, name: str) -> None:
    value = getattr(record, name)
    object.__setattr__(record, name, freeze_value(value if isinstance(value, Mapping) else {}))


def _accepts(default: Any, value: Any) -> bool:
    """Type gate used when merging persisted data over defaults."""
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, (int, float)):
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if isinstance(default, str):
        return isinstance(value, str)
    if isinstance(default, tuple):
        return isinstance(value, (list, tuple)) and all(isinstance(x, str) for x in value)
    if default is None:
        return value is None or isinstance(value, str)
    return False


class _Record:
    """Flat frozen record with camelCase persisted keys.

    `_KEYS` maps attribute name -> persisted key. Attributes not listed use
    their own name.
    """

    _KEYS: ClassVar[Dict[str, str]] = {}
    # Sequence fields kept verbatim; any list of JSON values is accepted.
    _VERBATIM: ClassVar[Tuple[str, ...]] = ()

    @classmethod
    def _key(cls, attr: str) -> str:
        return cls._KEYS.get(attr, attr)

    @classmethod
    def _attr_for(cls, key: str) -> Optional[str]:
        names = {f.name for f in fields(cls)}  # type: ignore[arg-type]
        if key in names:
            return key
        for attr, k in cls._KEYS.items():
            if k == key:
                return attr
        return None

    def to_dict(self) -> JsonDict:
        return {self._key(f.name): thaw_value(getattr(self, f.name)) for f in fields(self)}  # type: ignore[arg-type]

    @classmethod
    def from_dict(cls: type[R], data: Any, base: Optional[R] = None) -> R:
        """Merge `data` over `base` (default: a fresh default record).

        Unknown keys and values whose type does not match the default are
        ignored rather than trusted.
        """
        out = base if base is not None else cls()
        if not isinstance(data, Mapping):
            return out
        changes: Dict[str, Any] = {}
        for f in fields(cls):  # type: ignore[arg-type]
            key = cls._key(f.name)
            if key not in data:
                continue
            value = data[key]
            if f.name in cls._VERBATIM:
                ok = isinstance(value, (list, tuple))
            else:
                ok = _accepts(getattr(out, f.name), value)
            if ok:
                changes[f.name] = freeze_value(value)
        return replace(out, **changes) if changes else out

    def known_changes(self, changes: Mapping[str, Any]) -> Dict[str, Any]:
        """Translate a partial update (attr or persisted keys) to attr names.

        Keys that do not exist on this record are dropped.
        """
        out: Dict[str, Any] = {}
        for k, v in changes.items():
            attr = self._attr_for(str(k))
            if attr is None:
                continue
            out[attr] = freeze_value(v)
        return out

    def updated(self: R, changes: Mapping[str, Any]) -> R:
        known = self.known_changes(changes)  # type: ignore[attr-defined]
        return replace(self, **known) if known else self  # type: ignore[type-var]


@dataclass(frozen=True)
class Typography(_Record):
    primary: str = "Inter"
    secondary: str = "Plus Jakarta Sans"
    ui: str = "Inter"
    scale: float = 1.25
    base_size: int = 16
    weight_headline: str = "700"
    weight_body: str = "400"
    letter_spacing: str = "normal"  # "tight" | "normal" | "wide"

    _KEYS: ClassVar[Dict[str, str]] = {
        "base_size": "baseSize",
        "weight_headline": "weightHeadline",
        "weight_body": "weightBody",
        "letter_spacing": "letterSpacing",
    }


@dataclass(frozen=True)
class ColorRoles(_Record):
    """Semantic color roles; `palette_colors` is the untouched input palette."""

    bg: str = "#FFFFFF"
    text: str = "#171717"
    primary: str = "#000000"
    accent: str = "#555555"
    surface: str = "#F5F5F5"
    surfaces: Tuple[str, ...] = ("#FFFFFF", "#F5F5F5", "#FAFAFA", "#F0F0F0")
    palette_colors: Tuple[Any, ...] = ()

    _KEYS: ClassVar[Dict[str, str]] = {"palette_colors": "paletteColors"}
    _VERBATIM: ClassVar[Tuple[str, ...]] = ("palette_colors",)

    @classmethod
    def from_dict(cls, data: Any, base: Optional["ColorRoles"] = None) -> "ColorRoles":
        return clamp_surfaces(super().from_dict(data, base))

    def updated(self, changes: Mapping[str, Any]) -> "ColorRoles":
        return clamp_surfaces(super().updated(changes))


MAX_SURFACES = 7


def clamp_surfaces(roles: ColorRoles) -> ColorRoles:
    """Keep `surfaces` within 1..MAX_SURFACES entries."""
    if not roles.surfaces:
        return replace(roles, surfaces=(roles.surface or roles.bg,))
    if len(roles.surfaces) > MAX_SURFACES:
        return replace(roles, surfaces=tuple(roles.surfaces[:MAX_SURFACES]))
    return roles


@dataclass(frozen=True)
class Logo(_Record):
    text: str = "BENTO"
    image: Optional[str] = None
    padding: int = 16
    size: int = 24


@dataclass(frozen=True)
class Imagery(_Record):
    url: str = "https://images.unsplash.com/photo-1557683316-973673baf926?q=80&w=1000&auto=format&fit=crop"
    style: str = "default"  # "default" | "grayscale" | "tint"
    overlay: int = 0  # percent


@dataclass(frozen=True)
class UISettings(_Record):
    button_radius: int = 10
    button_style: str = "filled"
    button_color: Optional[str] = None
    button_size: str = "default"
    button_weight: int = 600
    button_uppercase: bool = False
    button_letter_spacing: float = 0

    _KEYS: ClassVar[Dict[str, str]] = {
        "button_radius": "buttonRadius",
        "button_style": "buttonStyle",
        "button_color": "buttonColor",
        "button_size": "buttonSize",
        "button_weight": "buttonWeight",
        "button_uppercase": "buttonUppercase",
        "button_letter_spacing": "buttonLetterSpacing",
    }


BRAND_SECTIONS: Tuple[str, ...] = ("typography", "colors", "logo", "imagery", "ui")


@dataclass(frozen=True)
class Brand:
    typography: Typography = field(default_factory=Typography)
    colors: ColorRoles = field(default_factory=ColorRoles)
    logo: Logo = field(default_factory=Logo)
    imagery: Imagery = field(default_factory=Imagery)
    ui: UISettings = field(default_factory=UISettings)

    def to_dict(self) -> JsonDict:
        return {name: getattr(self, name).to_dict() for name in BRAND_SECTIONS}

    @classmethod
    def from_dict(cls, data: Any, base: Optional["Brand"] = None) -> "Brand":
        """Section-by-section merge; each section keeps defaults for missing keys."""
        out = base if base is not None else cls()
        if not isinstance(data, Mapping):
            return out
        return Brand(
            typography=Typography.from_dict(data.get("typography"), out.typography),
            colors=ColorRoles.from_dict(data.get("colors"), out.colors),
            logo=Logo.from_dict(data.get("logo"), out.logo),
            imagery=Imagery.from_dict(data.get("imagery"), out.imagery),
            ui=UISettings.from_dict(data.get("ui"), out.ui),
        )


@dataclass(frozen=True)
class Tile:
    id: str
    type: str
    content: TileContent = field(default_factory=dict)
    col_span: int = 1
    row_span: int = 1
    surface_index: Optional[int] = None

    def __post_init__(self) -> None:
        _freeze_field(self, "content")

    def to_dict(self) -> JsonDict:
        d: JsonDict = {
            "id": self.id,
            "type": self.type,
            "content": thaw_value(self.content),
            "colSpan": self.col_span,
            "rowSpan": self.row_span,
        }
        if self.surface_index is not None:
            d["surfaceIndex"] = self.surface_index
        return d

    @classmethod
    def from_dict(cls, data: Any) -> Optional["Tile"]:
        """Build a tile from persisted data; None if id/type are unusable."""
        if not isinstance(data, Mapping):
            return None
        tid = data.get("id")
        ttype = data.get("type")
        if not isinstance(tid, str) or not tid.strip():
            return None
        if not isinstance(ttype, str) or ttype not in TILE_TYPES:
            return None
        content = data.get("content")
        col = data.get("colSpan")
        row = data.get("rowSpan")
        si = data.get("surfaceIndex")
        return cls(
            id=tid,
            type=ttype,
            content=content if isinstance(content, Mapping) else {},
            col_span=col if _is_span(col) else 1,
            row_span=row if _is_span(row) else 1,
            surface_index=si if isinstance(si, int) and not isinstance(si, bool) and si >= 0 else None,
        )


def _is_span(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool) and v >= 1


def make_tile(
    id: str,
    type: str,
    content: Optional[Mapping[str, Any]] = None,
    col_span: int = 1,
    row_span: int = 1,
    surface_index: Optional[int] = None,
) -> Tile:
    return Tile(
        id=id,
        type=type,
        content=content or {},
        col_span=col_span,
        row_span=row_span,
        surface_index=surface_index,
    )


@dataclass(frozen=True)
class HistoryState:
    """Full copy of the editable document (one undo step)."""

    brand: Brand
    tiles: Tuple[Tile, ...]
    tile_surfaces: Mapping[str, Optional[int]] = field(default_factory=dict)
    placement_content: Mapping[str, TileContent] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tiles", tuple(self.tiles))
        _freeze_field(self, "tile_surfaces")
        _freeze_field(self, "placement_content")

    def to_dict(self) -> JsonDict:
        return {
            "brand": self.brand.to_dict(),
            "tiles": [t.to_dict() for t in self.tiles],
            "tileSurfaces": dict(self.tile_surfaces),
            "placementContent": thaw_value(self.placement_content),
        }


@dataclass(frozen=True)
class History:
    past: Tuple[HistoryState, ...] = ()  # oldest first
    future: Tuple[HistoryState, ...] = ()  # most recently undone first


__all__ = [
    "BRAND_SECTIONS",
    "Brand",
    "ColorRoles",
    "History",
    "HistoryState",
    "Imagery",
    "Logo",
    "MAX_SURFACES",
    "TILE_TYPES",
    "THEMES",
    "Tile",
    "TileContent",
    "Typography",
    "UISettings",
    "clamp_surfaces",
    "freeze_value",
    "make_tile",
    "thaw_value",
]
