from __future__ import annotations

from collections.abc import Callable
import json
import logging

from copyscan_core.errors import ParseError
from copyscan_core.invoke.base import RawResponse
from copyscan_core.types import AnalysisMode, AnalysisResult

from .citations import citations_from_grounding, dedupe_citations
from .fenced import extract_fenced_json
from .shape import coerce_result_payload

logger = logging.getLogger(__name__)

STRICT_PARSE_MESSAGE = "Invalid response format from API"
WEB_SEARCH_PARSE_MESSAGE = (
    "Could not parse JSON response from the model when searching the web"
)


def parse_strict(raw: RawResponse) -> AnalysisResult:
    try:
        payload = json.loads((raw.text or "").strip())
        percentage, summary, matches = coerce_result_payload(payload)
    except ValueError as exc:
        logger.warning("Rejected strict-mode response: %s", exc)
        logger.debug("Raw response text: %r", raw.text)
        raise ParseError(STRICT_PARSE_MESSAGE) from exc

    return AnalysisResult(
        overall_similarity_percentage=percentage,
        summary=summary,
        matches=matches,
    )


def parse_web_search(raw: RawResponse) -> AnalysisResult:
    body = extract_fenced_json(raw.text)
    if body is None:
        logger.warning("No fenced JSON block in web-search response")
        logger.debug("Raw response text: %r", raw.text)
        raise ParseError(WEB_SEARCH_PARSE_MESSAGE)

    try:
        payload = json.loads(body)
        percentage, summary, matches = coerce_result_payload(payload)
    except ValueError as exc:
        logger.warning("Rejected web-search response: %s", exc)
        logger.debug("Raw response text: %r", raw.text)
        raise ParseError(WEB_SEARCH_PARSE_MESSAGE) from exc

    citations = dedupe_citations(citations_from_grounding(raw.grounding_chunks))
    return AnalysisResult(
        overall_similarity_percentage=percentage,
        summary=summary,
        matches=matches,
        web_citations=tuple(citations) if citations else None,
    )


_PARSERS: dict[str, Callable[[RawResponse], AnalysisResult]] = {
    "strict": parse_strict,
    "web_search": parse_web_search,
}


def parse_response(raw: RawResponse, mode: AnalysisMode) -> AnalysisResult:
    parser = _PARSERS.get(mode)
    if parser is None:
        raise ValueError(f"Unknown analysis mode: {mode}")
    return parser(raw)
