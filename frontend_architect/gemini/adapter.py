from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from frontend_architect.core.errors import ArchitectError
from frontend_architect.core.types import (
    DEFAULT_IMAGE_MIME_TYPE,
    ContentPart,
    InlineDataPart,
    TextPart,
)

from .config import DEFAULT_PROFILE, MULTIMODAL_MEDIA_RESOLUTION, ArchitectProfile
from .schemas import GenerationConfig, RequestOptions
from .types import GenerationRequest

logger = logging.getLogger(__name__)

OptionsInput = RequestOptions | Mapping[str, Any] | None


def build_request(
    prompt: str,
    options: OptionsInput = None,
    *,
    profile: ArchitectProfile = DEFAULT_PROFILE,
) -> GenerationRequest:
    return _assemble(
        contents=(TextPart(text=prompt),),
        options=_coerce_options(options),
        profile=profile,
    )


def build_multimodal_request(
    prompt: str,
    image_data: str,
    mime_type: str = DEFAULT_IMAGE_MIME_TYPE,
    options: OptionsInput = None,
    *,
    profile: ArchitectProfile = DEFAULT_PROFILE,
) -> GenerationRequest:
    return _assemble(
        contents=(
            InlineDataPart(mime_type=mime_type, data=image_data),
            TextPart(text=prompt),
        ),
        options=_coerce_options(options),
        profile=profile,
        forced_config={"mediaResolution": MULTIMODAL_MEDIA_RESOLUTION},
    )


def request_payload(request: GenerationRequest) -> dict[str, Any]:
    return {
        "model": request.model,
        "systemInstruction": {
            "parts": [{"text": request.system_instruction}],
        },
        "contents": [
            {
                "role": "user",
                "parts": [_part_payload(part) for part in request.contents],
            }
        ],
        "generationConfig": request.generation_config.model_dump(
            by_alias=True,
            exclude_none=True,
        ),
        "safetySettings": [
            setting.model_dump() for setting in request.safety_settings
        ],
    }


def _assemble(
    contents: tuple[ContentPart, ...],
    options: RequestOptions,
    profile: ArchitectProfile,
    forced_config: dict[str, Any] | None = None,
) -> GenerationRequest:
    _warn_ignored_options(options)

    layers: list[dict[str, Any]] = []
    if forced_config:
        layers.append(forced_config)
    if options.generation_config is not None:
        # An override of None means "not set"; the lower layer stays.
        layers.append(
            {
                key: value
                for key, value in _explicit_fields(options.generation_config).items()
                if value is not None
            }
        )

    if options.safety_settings is not None:
        safety_settings = tuple(options.safety_settings)
    else:
        safety_settings = profile.safety_settings

    model = options.model or profile.model
    logger.debug(
        "Building %s request with instructions v%s (%d parts).",
        model,
        profile.instruction_version,
        len(contents),
    )

    return GenerationRequest(
        model=model,
        system_instruction=profile.system_instruction,
        contents=contents,
        generation_config=_merge_generation_config(profile.generation_config, layers),
        safety_settings=safety_settings,
    )


def _coerce_options(options: OptionsInput) -> RequestOptions:
    if options is None:
        return RequestOptions()

    if isinstance(options, RequestOptions):
        return options

    try:
        return RequestOptions.model_validate(options)
    except ValidationError as exc:
        first_error = exc.errors()[0] if exc.errors() else None
        raise ArchitectError(
            message=first_error["msg"] if first_error else "Invalid request options",
            code="invalid_options",
            param=_error_param(first_error),
        ) from exc


def _error_param(error: Any) -> str | None:
    if not error or not error.get("loc"):
        return None
    return ".".join(str(part) for part in error["loc"])


def _merge_generation_config(
    base: GenerationConfig,
    layers: list[dict[str, Any]],
) -> GenerationConfig:
    # Shallow overlay: later layers replace whole values, lists included.
    merged = _explicit_fields(base)
    for layer in layers:
        merged.update(layer)

    return GenerationConfig.model_validate(merged)


def _explicit_fields(config: GenerationConfig) -> dict[str, Any]:
    fields = GenerationConfig.model_fields
    explicit = {
        fields[name].alias or name: getattr(config, name)
        for name in fields
        if name in config.model_fields_set
    }
    if config.model_extra:
        explicit.update(config.model_extra)
    return explicit


def _part_payload(part: ContentPart) -> dict[str, Any]:
    if isinstance(part, InlineDataPart):
        return {
            "inlineData": {
                "mimeType": part.mime_type,
                "data": part.data,
            }
        }

    return {"text": part.text}


def _warn_ignored_options(options: RequestOptions) -> None:
    if not options.model_extra:
        return

    logger.warning(
        "Ignored unsupported request options: %s",
        ", ".join(sorted(options.model_extra.keys())),
    )
