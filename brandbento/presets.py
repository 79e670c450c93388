# brandbento/presets.py
"""Static defaults: the default brand, named presets, tiles and templates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from brandbento.model import Brand, ColorRoles, Tile, TileContent, make_tile
from brandbento.placements import PLACEMENT_TILE_TYPE_BY_ID, SLOT_PLACEMENTS, placement_tile_id

_UNSPLASH = "https://images.unsplash.com/"

DEFAULT_BRAND = Brand(
    colors=ColorRoles(
        palette_colors=("#000000", "#555555", "#171717", "#525252", "#A1A1A1", "#D4D4D4", "#F5F5F5", "#FFFFFF"),
    ),
)


def _brand(data: Mapping[str, Any]) -> Brand:
    return Brand.from_dict(data, DEFAULT_BRAND)


BRAND_PRESETS: Dict[str, Brand] = {
    "default": DEFAULT_BRAND,
    "techStartup": _brand({
        "typography": {"primary": "Sora", "secondary": "Inter", "ui": "Inter", "scale": 1.2},
        "colors": {
            "bg": "#F5F7FA",
            "text": "#0F172A",
            "primary": "#3B82F6",
            "accent": "#64748B",
            "surface": "#FFFFFF",
            "surfaces": ["#FFFFFF", "#F1F5F9", "#E2E8F0", "#CBD5E1"],
            "paletteColors": ["#3B82F6", "#64748B", "#0F172A", "#314158", "#62748E", "#CAD5E2", "#F1F5F9", "#F5F7FA"],
        },
        "logo": {"text": "TECH"},
    }),
    "luxuryRetail": _brand({
        "typography": {
            "primary": "Playfair Display",
            "secondary": "Montserrat",
            "ui": "Montserrat",
            "scale": 1.33,
            "letterSpacing": "wide",
        },
        "colors": {
            "bg": "#FDFCFA",
            "text": "#1C1917",
            "primary": "#78716C",
            "accent": "#A8A29E",
            "surface": "#F5F5F4",
            "surfaces": ["#F5F5F4", "#FAFAF9", "#E7E5E4", "#D6D3D1"],
            "paletteColors": ["#78716C", "#A8A29E", "#1C1917", "#44403B", "#79716B", "#D6D3D1", "#F5F5F4", "#FDFCFA"],
        },
        "logo": {"text": "LUXE", "padding": 20, "size": 22},
    }),
    "communityNonprofit": _brand({
        "typography": {"primary": "Plus Jakarta Sans", "secondary": "Plus Jakarta Sans", "ui": "Plus Jakarta Sans"},
        "colors": {
            "bg": "#FFFFFF",
            "text": "#171717",
            "primary": "#0EA5E9",
            "accent": "#7DD3FC",
            "surface": "#F0F9FF",
            "surfaces": ["#F0F9FF", "#E0F2FE", "#BAE6FD", "#FFFFFF"],
            "paletteColors": ["#0EA5E9", "#7DD3FC", "#171717", "#4A5565", "#99A1AF", "#D1D5DC", "#F3F4F6", "#FFFFFF"],
        },
        "logo": {"text": "UNITE"},
    }),
    "creativeStudio": _brand({
        "typography": {"primary": "Bricolage Grotesque", "secondary": "Inter", "ui": "Inter", "scale": 1.3},
        "colors": {
            "bg": "#FAFAFA",
            "text": "#171717",
            "primary": "#F97316",
            "accent": "#D946EF",
            "surface": "#FFFFFF",
            "surfaces": ["#FFFFFF", "#FFF7ED", "#FEFCE8", "#FAF5FF"],
            "paletteColors": ["#F97316", "#D946EF", "#171717", "#3F3F46", "#71717B", "#D4D4D8", "#F4F4F5", "#FAFAFA"],
        },
        "logo": {"text": "STUDIO", "padding": 18, "size": 26},
    }),
    "foodDrink": _brand({
        "typography": {"primary": "Oswald", "secondary": "Montserrat", "ui": "Montserrat", "letterSpacing": "wide"},
        "colors": {
            "bg": "#F7F2EA",
            "text": "#1E1C2E",
            "primary": "#2D2A57",
            "accent": "#9A79E8",
            "surface": "#E3DBC8",
            "surfaces": ["#E3DBC8", "#9A79E8", "#2D2A57", "#F2EDE4"],
            "paletteColors": ["#2D2A57", "#9A79E8", "#1E1C2E", "#44403B", "#79716B", "#D6D3D1", "#E3DBC8", "#F7F2EA"],
        },
        "logo": {"text": "SAVOR SPIRE", "padding": 18, "size": 22},
        "imagery": {"url": _UNSPLASH + "photo-1504674900247-0877df9cc836?q=80&w=1000&auto=format&fit=crop"},
    }),
}

PRESET_NAMES: Tuple[str, ...] = tuple(BRAND_PRESETS)


def get_preset(name: str) -> Optional[Brand]:
    return BRAND_PRESETS.get(name)


# --- Tiles --------------------------------------------------------------------

DEFAULT_TILE_CONTENT: Dict[str, TileContent] = {
    "hero": {"headline": "New Hero", "subcopy": "Hero subcopy", "cta": "Click here"},
    "editorial": {"headline": "New Editorial", "body": "Editorial body text"},
    "product": {
        "label": "Product",
        "price": "$99",
        "image": _UNSPLASH + "photo-1634017839464-5c339ebe3cb4?q=80&w=500",
    },
    "ui-preview": {"headerTitle": "Learn More", "buttonLabel": "Get Started", "inputPlaceholder": "View Details"},
    "image": {"image": _UNSPLASH + "photo-1550684848-fac1c5b4e853?q=80&w=1000", "overlayText": "Image"},
    "utility": {"headline": "Features", "items": ("Item 1", "Item 2", "Item 3")},
    "menu": {"headline": "Menu", "items": ("Breakfast", "Brunch", "Seasonal")},
    "logo": {"label": "Brand"},
    "split-hero": {
        "headline": "Defining Style",
        "body": "A fusion of creativity and craftsmanship. We bring timeless pieces that elevate everyday design.",
        "cta": "Read More",
        "image": _UNSPLASH + "photo-1507003211169-0a1dd7228f2d?q=80&w=1000&auto=format&fit=crop",
    },
    "overlay": {
        "headline": "The Winter Collection",
        "body": "Garments and products so essential that they merge into the wholeness of our lives.",
        "label": "About Us",
        "image": _UNSPLASH + "photo-1469334031218-e382a71b716b?q=80&w=1000&auto=format&fit=crop",
    },
    "split-list": {
        "headline": "Design\nParadigm",
        "overlayText": "Core Services",
        "items": ("Brand Identity Systems", "Digital Experience Design", "Creative Direction"),
        "image": _UNSPLASH + "photo-1558618666-fcd25c85f82e?q=80&w=1000&auto=format&fit=crop",
    },
    "social": {"image": _UNSPLASH + "photo-1550684848-fac1c5b4e853?q=80&w=1000", "overlayText": "Atmosphere"},
}


def default_tile_content(tile_type: str) -> TileContent:
    """Fresh copy of the default content for a tile type ({} if none)."""
    return dict(DEFAULT_TILE_CONTENT.get(tile_type, {}))


def _slot_tiles() -> Tuple[Tile, ...]:
    out = []
    for p in SLOT_PLACEMENTS:
        ttype = PLACEMENT_TILE_TYPE_BY_ID[p]
        out.append(make_tile(str(placement_tile_id(p)), ttype, default_tile_content(ttype)))
    return tuple(out)


SLOT_TILES: Tuple[Tile, ...] = _slot_tiles()

INITIAL_TILES: Tuple[Tile, ...] = (
    make_tile(
        "hero-1",
        "hero",
        {
            "headline": "The future of brand storytelling",
            "subcopy": "Create cohesive brand worlds in minutes, not weeks.",
            "cta": "Get Started",
            "image": _UNSPLASH + "photo-1618005182384-a83a8bd57fbe?q=80&w=1000&auto=format&fit=crop",
        },
        col_span=2,
        row_span=2,
    ),
    make_tile(
        "image-1",
        "image",
        {
            "image": _UNSPLASH + "photo-1550684848-fac1c5b4e853?q=80&w=1000&auto=format&fit=crop",
            "overlayText": "Atmosphere",
        },
        row_span=2,
    ),
    make_tile(
        "editorial-1",
        "editorial",
        {
            "headline": "Design with intention",
            "body": "Every element in our system is designed to work together, ensuring your brand stays consistent across all touchpoints.",
        },
    ),
    make_tile(
        "product-1",
        "product",
        {
            "label": "Core Module",
            "price": "$299",
            "image": _UNSPLASH + "photo-1634017839464-5c339ebe3cb4?q=80&w=500&auto=format&fit=crop",
        },
        col_span=2,
    ),
    make_tile(
        "ui-preview-1",
        "ui-preview",
        {"headerTitle": "Dashboard", "buttonLabel": "Submit", "inputPlaceholder": "Search..."},
    ),
    make_tile(
        "utility-1",
        "utility",
        {"headline": "Key Features", "items": ["Responsive Grid", "Live Tokens", "Undo/Redo Support"]},
    ),
    make_tile("logo-1", "logo", {"label": "Brand Identity"}),
    make_tile("social-1", "social", default_tile_content("social")),
) + SLOT_TILES

_SOCIAL_PLACEMENT_CONTENT: TileContent = {
    "socialHandle": "bento",
    "socialCaption": "Defining the new standard for calm, focused brand systems.",
    "socialLikes": "1,204 likes",
    "socialSponsored": "Sponsored",
    "socialAspect": "4:5",
}

DEFAULT_PLACEMENT_CONTENT: Dict[str, TileContent] = {
    "image": dict(_SOCIAL_PLACEMENT_CONTENT),
    "d": dict(_SOCIAL_PLACEMENT_CONTENT),
}


def default_placement_content() -> Dict[str, TileContent]:
    return {k: dict(v) for k, v in DEFAULT_PLACEMENT_CONTENT.items()}


# --- Shuffle sources ----------------------------------------------------------

@dataclass(frozen=True)
class FontPairing:
    primary: str
    secondary: str
    weight: str
    spacing: str


FONT_PAIRINGS: Tuple[FontPairing, ...] = (
    FontPairing("Sora", "Inter", "700", "normal"),
    FontPairing("Playfair Display", "Montserrat", "700", "wide"),
    FontPairing("Bricolage Grotesque", "Inter", "800", "normal"),
    FontPairing("Oswald", "Montserrat", "700", "wide"),
    FontPairing("Plus Jakarta Sans", "Inter", "600", "normal"),
    FontPairing("Inter", "JetBrains Mono", "700", "tight"),
    FontPairing("DM Serif Display", "DM Sans", "400", "normal"),
    FontPairing("Space Grotesk", "Inter", "700", "normal"),
    FontPairing("Fraunces", "Work Sans", "700", "normal"),
    FontPairing("Outfit", "Inter", "700", "normal"),
)


@dataclass(frozen=True)
class StarterTemplate:
    name: str
    brand: Brand
    tiles: Tuple[Tile, ...]


STARTER_TEMPLATES: Tuple[StarterTemplate, ...] = (
    StarterTemplate(
        name="Tech Startup",
        brand=_brand({
            "typography": {"primary": "Sora", "secondary": "Inter", "ui": "Inter", "scale": 1.2},
            "colors": {
                "bg": "#F5F7FA",
                "text": "#171717",
                "primary": "#3B82F6",
                "accent": "#64748B",
                "surface": "#FFFFFF",
                "surfaces": ["#FFFFFF", "#F1F5F9", "#E2E8F0", "#DBEAFE"],
                "paletteColors": [],
            },
            "logo": {"text": "TECHCO"},
        }),
        tiles=(
            make_tile("logo-1", "logo", {"label": "Since 2024"}),
            make_tile(
                "hero-1",
                "hero",
                {
                    "headline": "Software that gets out of your way",
                    "subcopy": "Less setup. More shipping. You know the drill.",
                    "cta": "Try It Free",
                },
                col_span=2,
                row_span=2,
            ),
            make_tile("social-1", "social", {"overlayText": "Building"}, row_span=3),
            make_tile(
                "editorial-1",
                "editorial",
                {"headline": "Tools, not slideware", "body": "We build things people actually use. Then we iterate."},
                row_span=2,
            ),
            make_tile(
                "ui-preview-1",
                "ui-preview",
                {"headerTitle": "Dashboard", "buttonLabel": "Deploy", "inputPlaceholder": "Paste your key..."},
                col_span=2,
            ),
        ),
    ),
    StarterTemplate(
        name="Luxury Retail",
        brand=_brand({
            "typography": {
                "primary": "Playfair Display",
                "secondary": "Montserrat",
                "ui": "Montserrat",
                "scale": 1.33,
                "letterSpacing": "wide",
            },
            "colors": {
                "bg": "#FDFCFA",
                "text": "#1C1917",
                "primary": "#78716C",
                "accent": "#A8A29E",
                "surface": "#F5F5F4",
                "surfaces": ["#F5F5F4", "#FAFAF9", "#E7E5E4", "#D6D3D1"],
                "paletteColors": [],
            },
            "logo": {"text": "MAISON", "padding": 20, "size": 22},
        }),
        tiles=(
            make_tile("social-1", "social", {"overlayText": "New Season"}, col_span=2, row_span=2),
            make_tile("logo-1", "logo", {"label": "Est. 1923"}),
            make_tile("product-1", "product", {"label": "The Signature", "price": "$2,400"}, row_span=2),
            make_tile(
                "editorial-1",
                "editorial",
                {"headline": "Less is the whole point", "body": "The best pieces don’t announce themselves."},
            ),
            make_tile(
                "hero-1",
                "split-hero",
                {
                    "headline": "Made to Last",
                    "body": "Not trend-proof. Trend-irrelevant. For people who choose.",
                    "cta": "Explore",
                },
                col_span=2,
            ),
            make_tile(
                "utility-1",
                "split-list",
                {
                    "headline": "Craft\n& Care",
                    "overlayText": "How It’s Made",
                    "items": ["Small-Batch Production", "Natural Dyes Only", "Transparent Sourcing"],
                },
            ),
        ),
    ),
    StarterTemplate(
        name="Minimalist Portfolio",
        brand=_brand({
            "typography": {
                "primary": "Inter",
                "secondary": "JetBrains Mono",
                "ui": "Inter",
                "scale": 1.2,
                "letterSpacing": "tight",
            },
            "colors": {
                "bg": "#FFFFFF",
                "text": "#171717",
                "primary": "#000000",
                "accent": "#666666",
                "surface": "#F5F5F5",
                "surfaces": ["#F5F5F5", "#FAFAFA", "#E5E5E5", "#FFFFFF"],
                "paletteColors": [],
            },
            "logo": {"text": "JD", "padding": 12, "size": 28},
        }),
        tiles=(
            make_tile(
                "hero-1",
                "hero",
                {
                    "headline": "I design things people use",
                    "subcopy": "Clean interfaces. Clear thinking. No fluff.",
                    "cta": "Say Hello",
                },
                col_span=2,
            ),
            make_tile("social-1", "social", {"overlayText": "Work"}, row_span=2),
            make_tile("logo-1", "logo", {"label": "Portfolio"}),
        ),
    ),
)


def get_template(name: str) -> Optional[StarterTemplate]:
    for t in STARTER_TEMPLATES:
        if t.name == name:
            return t
    return None


__all__ = [
    "BRAND_PRESETS",
    "DEFAULT_BRAND",
    "DEFAULT_PLACEMENT_CONTENT",
    "DEFAULT_TILE_CONTENT",
    "FONT_PAIRINGS",
    "FontPairing",
    "INITIAL_TILES",
    "PRESET_NAMES",
    "SLOT_TILES",
    "STARTER_TEMPLATES",
    "StarterTemplate",
    "default_placement_content",
    "default_tile_content",
    "get_preset",
    "get_template",
]
