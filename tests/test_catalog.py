from __future__ import annotations

import pytest

from frontend_architect.core.catalog import ARCHETYPES, PALETTES, resolve_archetype
from frontend_architect.core.parsing import parse_design_decisions


def test_catalog_contents():
    assert len(ARCHETYPES) == 6
    assert ARCHETYPES["BRUTALIST_DEV"].fonts == ("JetBrains Mono", "IBM Plex Mono")
    assert PALETTES.directions["dark_mode"].background == "#0C0C0C"
    assert PALETTES.off_whites_cool == ("#F8FAFC",)


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        ARCHETYPES["NEW"] = ARCHETYPES["SAAS_TECH"]  # type: ignore[index]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("SaaS/Tech — clean and trustworthy", "SaaS/Tech"),
        ("  **playful/consumer** because kids", "Playful/Consumer"),
        ("creative_portfolio", "Creative/Portfolio"),
    ],
)
def test_resolve_archetype(text: str, expected: str):
    archetype = resolve_archetype(text)

    assert archetype is not None
    assert archetype.name == expected


@pytest.mark.parametrize("text", [None, "", "   ", "Retro/Vaporwave"])
def test_resolve_archetype_misses(text):
    assert resolve_archetype(text) is None


def test_resolve_parsed_decision():
    decisions = parse_design_decisions("ARCHETYPE: Corporate/Enterprise - for a bank")

    archetype = resolve_archetype(decisions.archetype)

    assert archetype is ARCHETYPES["CORPORATE_ENTERPRISE"]
