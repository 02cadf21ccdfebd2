from __future__ import annotations

import logging
import re

from .types import DesignDecisions, ParsedDesign

logger = logging.getLogger(__name__)

_HTML_FENCE = re.compile(r"```html[ \t]*\r?\n(.*?)```", re.DOTALL)
_DOCTYPE_FENCE = re.compile(r"```[ \t]*\r?\n(<!DOCTYPE.*?)```", re.DOTALL | re.IGNORECASE)
_RAW_DOCUMENT = re.compile(r"^(?:<!DOCTYPE|<html)", re.IGNORECASE)

# (field, label) pairs; the field name must exist on DesignDecisions.
DECISION_LABELS: tuple[tuple[str, str], ...] = (
    ("archetype", "ARCHETYPE"),
    ("fonts", "FONTS"),
    ("palette", "PALETTE"),
    ("layout", "LAYOUT"),
)


def _label_pattern(label: str) -> re.Pattern[str]:
    return re.compile(
        rf"^[ \t]*{re.escape(label)}:[ \t]*(\S.*)$",
        re.IGNORECASE | re.MULTILINE,
    )


_DECISION_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (field, _label_pattern(label)) for field, label in DECISION_LABELS
)


def extract_html(response_text: str | None) -> str | None:
    """Pull the HTML document out of a model response.

    Tried in order, first hit wins:

    1. the first ```html fence
    2. the first bare ``` fence whose body opens with a doctype
    3. the whole response, when it already starts with a doctype or <html>

    Returns None when none of these apply. Unterminated fences never match.
    """

    if not response_text or not isinstance(response_text, str):
        return None

    match = _HTML_FENCE.search(response_text)
    if match:
        logger.debug("Extracted HTML from labelled fence.")
        return match.group(1).strip()

    match = _DOCTYPE_FENCE.search(response_text)
    if match:
        logger.debug("Extracted HTML from unlabelled doctype fence.")
        return match.group(1).strip()

    stripped = response_text.strip()
    if _RAW_DOCUMENT.match(stripped):
        logger.debug("Response is a bare HTML document.")
        return stripped

    return None


def parse_design_decisions(response_text: str | None) -> DesignDecisions:
    if not response_text or not isinstance(response_text, str):
        return DesignDecisions()

    found: dict[str, str] = {}
    for field, pattern in _DECISION_PATTERNS:
        match = pattern.search(response_text)
        if match:
            found[field] = match.group(1).strip()

    return DesignDecisions(**found)


def parse_response(response_text: str | None) -> ParsedDesign:
    return ParsedDesign(
        html=extract_html(response_text),
        decisions=parse_design_decisions(response_text),
        raw_response=response_text if isinstance(response_text, str) else "",
    )
