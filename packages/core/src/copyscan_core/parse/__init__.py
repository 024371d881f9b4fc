from .citations import citations_from_grounding, dedupe_citations
from .fenced import extract_fenced_json
from .response import parse_response, parse_strict, parse_web_search

__all__ = [
    "citations_from_grounding",
    "dedupe_citations",
    "extract_fenced_json",
    "parse_response",
    "parse_strict",
    "parse_web_search",
]
