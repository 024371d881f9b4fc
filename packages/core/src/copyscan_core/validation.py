from __future__ import annotations

from .errors import InputValidationError

WEB_SEARCH_INPUT_MESSAGE = "Please provide the text to check against the web."
STRICT_INPUT_MESSAGE = "Please provide both a source text and a text to check."


def is_ready(source_text: str, text_to_check: str, use_web_search: bool) -> bool:
    if use_web_search:
        return bool(text_to_check.strip())
    return bool(source_text.strip()) and bool(text_to_check.strip())


def validate_inputs(source_text: str, text_to_check: str, use_web_search: bool) -> None:
    if is_ready(source_text, text_to_check, use_web_search):
        return
    if use_web_search:
        raise InputValidationError(WEB_SEARCH_INPUT_MESSAGE)
    raise InputValidationError(STRICT_INPUT_MESSAGE)
