from __future__ import annotations

import logging
from typing import Any, Callable

import requests

from copyscan_core import AnalysisResult, CheckOutcome, InputValidationError
from copyscan_core.errors import ErrorKind
from copyscan_core.outcome import FAILURE_PREFIX, CheckFailure
from copyscan_core.validation import validate_inputs

logger = logging.getLogger(__name__)

HttpPost = Callable[..., requests.Response]

_KIND_BY_STATUS: dict[int, ErrorKind] = {
    400: "validation",
    422: "validation",
    500: "configuration",
    502: "parse",
    503: "transport",
}


def _error_detail(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("detail"), str):
        return body["detail"]
    text = (response.text or "").strip()
    return f"{FAILURE_PREFIX}API returned status {response.status_code}: {text[:300]}"


def request_check(
    base_url: str,
    source_text: str,
    text_to_check: str,
    use_web_search: bool,
    *,
    timeout: float = 120.0,
    http_post: HttpPost = requests.post,
) -> CheckOutcome:
    try:
        validate_inputs(source_text, text_to_check, use_web_search)
    except InputValidationError as exc:
        return CheckOutcome(error=CheckFailure.from_error(exc))

    payload: dict[str, Any] = {
        "source_text": source_text,
        "text_to_check": text_to_check,
        "use_web_search": use_web_search,
    }
    url = f"{base_url.rstrip('/')}/v1/check"
    try:
        response = http_post(url, json=payload, timeout=timeout)
    except requests.RequestException as exc:
        logger.error("Check request to %s failed: %s", url, exc)
        return CheckOutcome.failure("transport", f"{FAILURE_PREFIX}{exc}")

    if response.status_code != 200:
        kind = _KIND_BY_STATUS.get(response.status_code, "transport")
        return CheckOutcome.failure(kind, _error_detail(response))

    try:
        result = AnalysisResult.model_validate(response.json())
    except ValueError as exc:
        logger.error("Unexpected API response body: %s", exc)
        return CheckOutcome.failure(
            "parse", f"{FAILURE_PREFIX}Invalid response format from API"
        )
    return CheckOutcome.success(result)
