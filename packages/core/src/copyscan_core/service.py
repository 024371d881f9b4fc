from __future__ import annotations

import logging

from .errors import CopyscanError
from .invoke.base import Invoker
from .outcome import FAILURE_PREFIX, CheckFailure, CheckOutcome
from .parse import parse_response
from .prompts import DEFAULT_TEMPERATURE, build_request
from .types import AnalysisResult
from .validation import validate_inputs

logger = logging.getLogger(__name__)


async def check_similarity(
    invoker: Invoker,
    source_text: str,
    text_to_check: str,
    use_web_search: bool,
    *,
    temperature: float = DEFAULT_TEMPERATURE,
) -> AnalysisResult:
    validate_inputs(source_text, text_to_check, use_web_search)
    request = build_request(
        source_text, text_to_check, use_web_search, temperature=temperature
    )
    raw = await invoker.invoke(request)
    return parse_response(raw, request.mode)


async def run_check(
    invoker: Invoker,
    source_text: str,
    text_to_check: str,
    use_web_search: bool,
    *,
    temperature: float = DEFAULT_TEMPERATURE,
) -> CheckOutcome:
    """Run one check and normalize any failure into a displayable message."""
    try:
        result = await check_similarity(
            invoker,
            source_text,
            text_to_check,
            use_web_search,
            temperature=temperature,
        )
    except CopyscanError as exc:
        logger.error("Similarity check failed (%s): %s", exc.kind, exc)
        return CheckOutcome(error=CheckFailure.from_error(exc))
    except Exception as exc:
        logger.exception("Similarity check failed unexpectedly")
        return CheckOutcome.failure("transport", f"{FAILURE_PREFIX}{exc}")
    return CheckOutcome.success(result)
