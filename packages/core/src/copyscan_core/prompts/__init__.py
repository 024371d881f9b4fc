from .builder import (
    DEFAULT_TEMPERATURE,
    AnalysisRequest,
    StrictRequest,
    WebSearchRequest,
    build_request,
    build_strict_request,
    build_web_search_request,
)

__all__ = [
    "DEFAULT_TEMPERATURE",
    "AnalysisRequest",
    "StrictRequest",
    "WebSearchRequest",
    "build_request",
    "build_strict_request",
    "build_web_search_request",
]
