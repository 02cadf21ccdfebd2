from __future__ import annotations

import pytest

from frontend_architect.core.parsing import (
    extract_html,
    parse_design_decisions,
    parse_response,
)
from frontend_architect.core.types import DesignDecisions

FULL_RESPONSE = """Here is the design.

```
ARCHETYPE: Luxury/Editorial - refined and unhurried
FONTS: Fraunces + Source Serif 4
PALETTE: #FEFDFB / #0A0A0A / #DC2626
LAYOUT: Asymmetric 7/5 split with oversized serif headlines
```

```html
<!DOCTYPE html>
<html><body><h1>Atelier</h1></body></html>
```
"""


def test_labelled_fence_body_is_trimmed():
    text = "Intro\n```html\n\n   <div>x</div>   \n\n```\nOutro"

    assert extract_html(text) == "<div>x</div>"


def test_first_labelled_fence_wins():
    text = "```html\n<p>first</p>\n```\n\n```html\n<p>second</p>\n```"

    assert extract_html(text) == "<p>first</p>"


def test_first_doctype_fence_wins():
    text = (
        "```\n<!DOCTYPE html><html>first</html>\n```\n"
        "and a variant:\n"
        "```\n<!DOCTYPE html><html>second</html>\n```"
    )

    assert extract_html(text) == "<!DOCTYPE html><html>first</html>"


def test_labelled_fence_beats_doctype_fence():
    text = (
        "```\n<!DOCTYPE html><html>generic</html>\n```\n"
        "```html\n<main>labelled</main>\n```"
    )

    assert extract_html(text) == "<main>labelled</main>"


def test_unlabelled_doctype_fence():
    text = "Result:\n```\n<!doctype html>\n<html></html>\n```"

    assert extract_html(text) == "<!doctype html>\n<html></html>"


def test_unlabelled_fence_without_doctype_is_ignored():
    text = "```\nconsole.log('hi')\n```"

    assert extract_html(text) is None


def test_bare_document_is_returned_trimmed():
    assert extract_html("  <!DOCTYPE html><html></html>  ") == "<!DOCTYPE html><html></html>"


@pytest.mark.parametrize(
    "text",
    [
        "<HTML lang='en'></HTML>",
        "\n\n<html><body></body></html>\n",
        "<!DocType html>",
    ],
)
def test_bare_document_match_is_case_insensitive(text: str):
    assert extract_html(text) == text.strip()


def test_no_markup_returns_none():
    assert extract_html("just a sentence with no code") is None


def test_unterminated_fence_falls_through():
    assert extract_html("```html\n<div>never closed") is None


def test_unterminated_fence_on_bare_document():
    text = "<!DOCTYPE html>\n```html\n<div>"

    assert extract_html(text) == text


def test_partial_decisions():
    decisions = parse_design_decisions("ARCHETYPE: SaaS/Tech — clean and trustworthy")

    assert decisions == DesignDecisions(archetype="SaaS/Tech — clean and trustworthy")
    assert decisions.fonts is None
    assert decisions.palette is None
    assert decisions.layout is None


def test_first_matching_line_wins():
    text = "FONTS: Syne + Inter Tight\nsome prose\nFONTS: Arial + Roboto"

    assert parse_design_decisions(text).fonts == "Syne + Inter Tight"


@pytest.mark.parametrize("label", ["archetype", "Archetype", "ARCHETYPE"])
def test_labels_are_case_insensitive(label: str):
    decisions = parse_design_decisions(f"{label}: Brutalist/Dev")

    assert decisions.archetype == "Brutalist/Dev"


def test_value_stops_at_line_boundary():
    text = "PALETTE:   #0C0C0C / #FAFAFA / #10B981   \r\nLAYOUT: Bento grid\r\n"

    decisions = parse_design_decisions(text)

    assert decisions.palette == "#0C0C0C / #FAFAFA / #10B981"
    assert decisions.layout == "Bento grid"


def test_empty_label_does_not_swallow_next_line():
    decisions = parse_design_decisions("FONTS:\nPALETTE: cream / ink / red")

    assert decisions.fonts is None
    assert decisions.palette == "cream / ink / red"


def test_label_must_start_the_line():
    decisions = parse_design_decisions("The chosen LAYOUT: centered hero")

    assert decisions.layout is None


def test_full_response():
    parsed = parse_response(FULL_RESPONSE)

    assert parsed.html == "<!DOCTYPE html>\n<html><body><h1>Atelier</h1></body></html>"
    assert parsed.decisions.to_dict() == {
        "archetype": "Luxury/Editorial - refined and unhurried",
        "fonts": "Fraunces + Source Serif 4",
        "palette": "#FEFDFB / #0A0A0A / #DC2626",
        "layout": "Asymmetric 7/5 split with oversized serif headlines",
    }
    assert parsed.raw_response == FULL_RESPONSE


def test_parsing_is_deterministic():
    assert parse_response(FULL_RESPONSE) == parse_response(FULL_RESPONSE)


@pytest.mark.parametrize(
    "text",
    [
        "",
        None,
        "```",
        "``````",
        "```html",
        "ARCHETYPE:",
        "\x00\xff�" * 50,
        "```\n<!DOCTYPE" + "a" * 200_000,
        ("FONTS: x\n" * 10_000) + "```html\n",
    ],
)
def test_parsers_never_raise(text):
    html = extract_html(text)
    decisions = parse_design_decisions(text)
    parsed = parse_response(text)

    assert html is None or isinstance(html, str)
    assert isinstance(decisions, DesignDecisions)
    assert parsed.decisions == decisions


def test_empty_input_yields_all_absent():
    assert parse_design_decisions("") == DesignDecisions()
    assert parse_response("").html is None
