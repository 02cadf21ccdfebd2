from __future__ import annotations

from dataclasses import asdict, dataclass

DEFAULT_IMAGE_MIME_TYPE = "image/png"


@dataclass(slots=True, frozen=True)
class TextPart:
    text: str


@dataclass(slots=True, frozen=True)
class InlineDataPart:
    mime_type: str
    data: str


ContentPart = TextPart | InlineDataPart


@dataclass(slots=True, frozen=True)
class DesignDecisions:
    archetype: str | None = None
    fonts: str | None = None
    palette: str | None = None
    layout: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return asdict(self)


@dataclass(slots=True, frozen=True)
class ParsedDesign:
    html: str | None
    decisions: DesignDecisions
    raw_response: str
