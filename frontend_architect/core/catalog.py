from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(slots=True, frozen=True)
class Archetype:
    name: str
    characteristics: str
    fonts: tuple[str, ...]
    colors: str


@dataclass(slots=True, frozen=True)
class PaletteDirection:
    background: str
    text: str
    accent: str


@dataclass(slots=True, frozen=True)
class PaletteCatalog:
    off_whites_warm: tuple[str, ...]
    off_whites_cool: tuple[str, ...]
    off_blacks: tuple[str, ...]
    directions: Mapping[str, PaletteDirection]


ARCHETYPES: Mapping[str, Archetype] = MappingProxyType(
    {
        "SAAS_TECH": Archetype(
            name="SaaS/Tech",
            characteristics="Clean, systematic, trust-building",
            fonts=("Space Grotesk", "Plus Jakarta Sans", "Geist"),
            colors="Cool neutrals, single accent",
        ),
        "LUXURY_EDITORIAL": Archetype(
            name="Luxury/Editorial",
            characteristics="High contrast, refined, unhurried",
            fonts=("Playfair Display", "Cormorant", "Fraunces"),
            colors="Muted earth tones, cream/charcoal",
        ),
        "BRUTALIST_DEV": Archetype(
            name="Brutalist/Dev",
            characteristics="Raw, intentional ugliness, monospace",
            fonts=("JetBrains Mono", "IBM Plex Mono"),
            colors="High contrast, primary colors",
        ),
        "PLAYFUL_CONSUMER": Archetype(
            name="Playful/Consumer",
            characteristics="Rounded, bouncy, approachable",
            fonts=("Outfit", "Nunito", "Quicksand"),
            colors="Saturated, multi-color palettes",
        ),
        "CORPORATE_ENTERPRISE": Archetype(
            name="Corporate/Enterprise",
            characteristics="Conservative, authoritative, accessible",
            fonts=("Source Sans 3", "Noto Sans"),
            colors="Navy, forest, burgundy anchors",
        ),
        "CREATIVE_PORTFOLIO": Archetype(
            name="Creative/Portfolio",
            characteristics="Experimental, asymmetric, memorable",
            fonts=("Syne", "Clash Display", "Cabinet Grotesk"),
            colors="Bold or monochrome extremes",
        ),
    }
)

PALETTES = PaletteCatalog(
    off_whites_warm=("#FAFAFA", "#F5F5F4", "#FBF9F7"),
    off_whites_cool=("#F8FAFC",),
    off_blacks=("#0A0A0A", "#171717", "#1C1917"),
    directions=MappingProxyType(
        {
            # terracotta accent
            "warm_minimal": PaletteDirection("#FBF9F7", "#1C1917", "#C2410C"),
            # cyan
            "cool_tech": PaletteDirection("#0F172A", "#F8FAFC", "#06B6D4"),
            # red
            "paper_editorial": PaletteDirection("#FEFDFB", "#0A0A0A", "#DC2626"),
            # emerald
            "dark_mode": PaletteDirection("#0C0C0C", "#FAFAFA", "#10B981"),
        }
    ),
)


def resolve_archetype(text: str | None) -> Archetype | None:
    """Map a stated archetype such as "SaaS/Tech - clean" onto the catalog."""

    if not text or not isinstance(text, str):
        return None

    candidate = text.strip().strip("*").strip().lower()
    if not candidate:
        return None

    for key, archetype in ARCHETYPES.items():
        if candidate.startswith(archetype.name.lower()) or candidate.startswith(key.lower()):
            return archetype

    return None
