from .errors import (
    ConfigurationError,
    CopyscanError,
    InputValidationError,
    ParseError,
    TransportError,
)
from .invoke import GeminiClient, Invoker, RawResponse
from .outcome import CheckFailure, CheckOutcome
from .parse import parse_response
from .prompts import AnalysisRequest, StrictRequest, WebSearchRequest, build_request
from .service import check_similarity, run_check
from .types import AnalysisMode, AnalysisResult, SimilarityMatch, WebCitation
from .validation import is_ready, validate_inputs

__all__ = [
    "AnalysisMode",
    "AnalysisRequest",
    "AnalysisResult",
    "CheckFailure",
    "CheckOutcome",
    "ConfigurationError",
    "CopyscanError",
    "GeminiClient",
    "InputValidationError",
    "Invoker",
    "ParseError",
    "RawResponse",
    "SimilarityMatch",
    "StrictRequest",
    "TransportError",
    "WebCitation",
    "WebSearchRequest",
    "build_request",
    "check_similarity",
    "is_ready",
    "parse_response",
    "run_check",
    "validate_inputs",
]
