from __future__ import annotations

import math
from typing import Any

from copyscan_core.types import SimilarityMatch

_MATCH_LIST_KEYS = ("similarities", "matches")


class ShapeError(ValueError):
    """Raised when a decoded payload is missing a field or has the wrong type."""


def _percentage(value: Any) -> float:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise ShapeError("overallSimilarityPercentage must be a number")
    try:
        number = float(value)
    except OverflowError as exc:
        raise ShapeError("overallSimilarityPercentage is out of float range") from exc
    # Range is not enforced; only NaN and infinities are rejected.
    if not math.isfinite(number):
        raise ShapeError("overallSimilarityPercentage must be finite")
    return number


def _required_text(data: dict[str, Any], key: str, *, allow_empty: bool = True) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ShapeError(f"{key} must be a string")
    if not allow_empty and not value.strip():
        raise ShapeError(f"{key} must be non-empty")
    return value


def _match_list(data: dict[str, Any]) -> list[Any]:
    for key in _MATCH_LIST_KEYS:
        if key in data:
            value = data[key]
            if not isinstance(value, list):
                raise ShapeError(f"{key} must be a list")
            return value
    raise ShapeError("similarities is required")


def _to_match(item: Any, index: int) -> SimilarityMatch:
    if not isinstance(item, dict):
        raise ShapeError(f"similarities[{index}] must be an object")
    return SimilarityMatch(
        source_text=_required_text(item, "sourceText", allow_empty=False),
        checked_text=_required_text(item, "checkedText", allow_empty=False),
        explanation=_required_text(item, "explanation", allow_empty=False),
    )


def coerce_result_payload(
    payload: Any,
) -> tuple[float, str, tuple[SimilarityMatch, ...]]:
    if not isinstance(payload, dict):
        raise ShapeError("response must be a JSON object")

    percentage = _percentage(payload.get("overallSimilarityPercentage"))
    summary = _required_text(payload, "summary")
    matches = tuple(
        _to_match(item, index) for index, item in enumerate(_match_list(payload))
    )
    return percentage, summary, matches
