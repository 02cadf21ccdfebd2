from __future__ import annotations

from dataclasses import dataclass

from frontend_architect.core.types import ContentPart

from .schemas import GenerationConfig, SafetySetting


@dataclass(slots=True, frozen=True)
class GenerationRequest:
    model: str
    system_instruction: str
    contents: tuple[ContentPart, ...]
    generation_config: GenerationConfig
    safety_settings: tuple[SafetySetting, ...]
