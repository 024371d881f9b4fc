from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Literal

from .templates import (
    SIMILARITY_RESPONSE_SCHEMA,
    SOURCE_NOT_PROVIDED,
    STRICT_PROMPT_TEMPLATE,
    WEB_SEARCH_PROMPT_TEMPLATE,
)

DEFAULT_TEMPERATURE = 0.2


@dataclass(frozen=True)
class StrictRequest:
    prompt: str
    response_schema: dict[str, Any] = field(
        default_factory=lambda: copy.deepcopy(SIMILARITY_RESPONSE_SCHEMA)
    )
    temperature: float = DEFAULT_TEMPERATURE
    mode: Literal["strict"] = "strict"


@dataclass(frozen=True)
class WebSearchRequest:
    prompt: str
    temperature: float = DEFAULT_TEMPERATURE
    mode: Literal["web_search"] = "web_search"


AnalysisRequest = StrictRequest | WebSearchRequest


def build_strict_request(
    source_text: str,
    text_to_check: str,
    *,
    temperature: float = DEFAULT_TEMPERATURE,
) -> StrictRequest:
    prompt = STRICT_PROMPT_TEMPLATE.format(
        source_text=source_text,
        text_to_check=text_to_check,
    )
    return StrictRequest(prompt=prompt, temperature=temperature)


def build_web_search_request(
    source_text: str,
    text_to_check: str,
    *,
    temperature: float = DEFAULT_TEMPERATURE,
) -> WebSearchRequest:
    prompt = WEB_SEARCH_PROMPT_TEMPLATE.format(
        source_text=source_text.strip() or SOURCE_NOT_PROVIDED,
        text_to_check=text_to_check,
    )
    return WebSearchRequest(prompt=prompt, temperature=temperature)


def build_request(
    source_text: str,
    text_to_check: str,
    use_web_search: bool,
    *,
    temperature: float = DEFAULT_TEMPERATURE,
) -> AnalysisRequest:
    """Compose the model request for one comparison.

    Input preconditions are checked by the caller; this only formats the
    texts into the prompt for the selected mode.
    """
    if use_web_search:
        return build_web_search_request(
            source_text, text_to_check, temperature=temperature
        )
    return build_strict_request(source_text, text_to_check, temperature=temperature)
