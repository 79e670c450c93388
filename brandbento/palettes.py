# brandbento/palettes.py
"""Static palette library (a curated subset, grouped by section)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from brandbento.mapping import classify_palette_style


@dataclass(frozen=True)
class Palette:
    id: str
    name: str
    colors: Tuple[str, ...]
    section: str


_SECTIONS: Tuple[Tuple[str, Tuple[Tuple[str, str, Tuple[str, ...]], ...]], ...] = (
    ("neutrals", (
        ("stone", "Stone", ("#0C0A09", "#1C1917", "#292524", "#44403B", "#57534D", "#79716B", "#A6A09B", "#D6D3D1", "#E7E5E4", "#F5F5F4", "#FAFAF9")),
        ("neutral", "Neutral", ("#0A0A0A", "#171717", "#262626", "#404040", "#525252", "#737373", "#A1A1A1", "#D4D4D4", "#E5E5E5", "#F5F5F5", "#FAFAFA")),
        ("slate", "Slate", ("#020618", "#0F172B", "#1D293D", "#314158", "#45556C", "#62748E", "#90A1B9", "#CAD5E2", "#E2E8F0", "#F1F5F9", "#F8FAFC")),
    )),
    ("fresh", (
        ("fresh-p13", "Fresh #1", ("#121212", "#EEEEEC", "#85CE41", "#F973EE", "#FF7900")),
        ("fresh-p15", "Fresh #2", ("#0F2323", "#DEEB52", "#FFFFFF")),
        ("fresh-p17", "Fresh #3", ("#55D065", "#D0E34C", "#FFC400", "#FF9937", "#E95585")),
    )),
    ("vibrant", (
        ("vibrant-p23", "Vibrant #1", ("#000000", "#FFFFFF", "#0400FC")),
        ("vibrant-p28", "Vibrant #2", ("#5F016F", "#FE33BA", "#FE80D3", "#FFADE4", "#F9F5F4")),
        ("vibrant-p39", "Vibrant #3", ("#161616", "#0A2DD3", "#66DDC9", "#EAD900")),
    )),
    ("bold", (
        ("bold-p50", "Bold #1", ("#FF5F01", "#1C1C1C", "#EDE3D7")),
        ("bold-p51", "Bold #2", ("#FFFFFF", "#000000", "#34C2DA", "#FD5401", "#FFEE15")),
    )),
    ("muted", (
        ("muted-p76", "Muted #1", ("#F1E6CA", "#8A9DDB", "#A9A135", "#345E50")),
        ("muted-p77", "Muted #2", ("#F5A5C3", "#205CD0", "#EFD46D", "#FDF1DB")),
        ("muted-p78", "Muted #3", ("#54312A", "#2D455A", "#D4ECEC")),
    )),
    ("earthy", (
        ("earthy-p106", "Earthy #1", ("#1A1A1A", "#C2431A", "#B98B1E", "#F6F3E1", "#34461D")),
        ("earthy-p107", "Earthy #2", ("#000000", "#F7F1EA", "#E79365", "#A9442D", "#9C9C63")),
    )),
    ("elegant", (
        ("elegant-p129", "Elegant #1", ("#B8734C", "#F5F1EE", "#3C3C3A")),
        ("elegant-p130", "Elegant #2", ("#9B6946", "#B3906E", "#EAE4D4", "#2D2D2D")),
    )),
    ("playful", (
        ("playful-p150", "Playful #1", ("#9FE870", "#FFD7EF", "#A0E1E1", "#163300", "#320707", "#21231D")),
        ("playful-p151", "Playful #2", ("#000000", "#36B4E5", "#45D093", "#FFFFFF", "#ED8ECE")),
    )),
    ("heritage", (
        ("heritage-p178", "Heritage #1", ("#000000", "#F6F3EE", "#B39262", "#54052B")),
        ("heritage-p179", "Heritage #2", ("#501D20", "#F4F1DE", "#D8C4A4", "#EE4037", "#4E632A", "#B9C6A3")),
    )),
    ("retro", (
        ("retro-p185", "Retro #1", ("#E3201B", "#FFB648", "#F8EBBE", "#5B2D27", "#1A5632")),
    )),
    ("corporate", (
        ("corporate-p207", "Corporate #1", ("#0025FF", "#FF6600", "#41EAD4", "#F5F5F5", "#A0A0A0", "#6535FF", "#000000")),
        ("corporate-p208", "Corporate #2", ("#000000", "#5F715F", "#F23127", "#F2ECD2", "#8A9E45", "#816C57", "#FFFFFF", "#B4C6C0", "#3C3628")),
    )),
)

PALETTES: Tuple[Palette, ...] = tuple(
    Palette(id=pid, name=name, colors=colors, section=section)
    for section, entries in _SECTIONS
    for pid, name, colors in entries
)

_BY_ID: Dict[str, Palette] = {p.id: p for p in PALETTES}


def get_all_palettes() -> List[Palette]:
    return list(PALETTES)


def get_palette_by_id(palette_id: str) -> Optional[Palette]:
    return _BY_ID.get(palette_id)


def palette_sections() -> List[str]:
    return [section for section, _entries in _SECTIONS]


def palettes_by_style(style: str) -> List[Palette]:
    """Library filter over `mapping.classify_palette_style`."""
    return [p for p in PALETTES if classify_palette_style(p.colors) == style]


__all__ = [
    "PALETTES",
    "Palette",
    "get_all_palettes",
    "get_palette_by_id",
    "palette_sections",
    "palettes_by_style",
]
