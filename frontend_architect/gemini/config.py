from __future__ import annotations

from dataclasses import dataclass, field

from frontend_architect.core.instructions import SYSTEM_PROMPT, SYSTEM_PROMPT_VERSION

from .schemas import GenerationConfig, SafetySetting

DEFAULT_MODEL = "gemini-3-pro-preview"
MULTIMODAL_MEDIA_RESOLUTION = "high"

DEFAULT_GENERATION_CONFIG = GenerationConfig(
    thinking_level="high",
    temperature=0.8,
    max_output_tokens=32768,
    top_p=0.95,
    stop_sequences=[],
)

DEFAULT_SAFETY_SETTINGS: tuple[SafetySetting, ...] = tuple(
    SafetySetting(category=category, threshold="BLOCK_MEDIUM_AND_ABOVE")
    for category in (
        "HARM_CATEGORY_HARASSMENT",
        "HARM_CATEGORY_HATE_SPEECH",
        "HARM_CATEGORY_SEXUALLY_EXPLICIT",
        "HARM_CATEGORY_DANGEROUS_CONTENT",
    )
)


@dataclass(slots=True, frozen=True)
class ArchitectProfile:
    model: str = DEFAULT_MODEL
    system_instruction: str = SYSTEM_PROMPT
    instruction_version: str = SYSTEM_PROMPT_VERSION
    generation_config: GenerationConfig = field(
        default_factory=lambda: DEFAULT_GENERATION_CONFIG
    )
    safety_settings: tuple[SafetySetting, ...] = field(
        default_factory=lambda: DEFAULT_SAFETY_SETTINGS
    )


DEFAULT_PROFILE = ArchitectProfile()
