from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GenerationConfig(BaseModel):
    # Every field is optional so a partially-set instance works as overrides.
    thinking_level: str | None = Field(default=None, alias="thinkingLevel")
    temperature: float | None = None
    max_output_tokens: int | None = Field(default=None, alias="maxOutputTokens")
    top_p: float | None = Field(default=None, alias="topP")
    stop_sequences: list[str] | None = Field(default=None, alias="stopSequences")
    media_resolution: str | None = Field(default=None, alias="mediaResolution")

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)


class SafetySetting(BaseModel):
    category: str
    threshold: str

    model_config = ConfigDict(frozen=True)


class RequestOptions(BaseModel):
    model: str | None = None
    generation_config: GenerationConfig | None = Field(
        default=None,
        alias="generationConfig",
    )
    safety_settings: list[SafetySetting] | None = Field(
        default=None,
        alias="safetySettings",
    )

    model_config = ConfigDict(extra="allow", populate_by_name=True)
