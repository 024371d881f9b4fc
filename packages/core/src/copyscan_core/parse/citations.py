from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from copyscan_core.types import WebCitation


def _optional_text(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if isinstance(value, str) and value.strip():
        return value
    return None


def citations_from_grounding(chunks: Iterable[Any]) -> list[WebCitation]:
    """Map grounding chunks to citations, dropping chunks without a web uri."""
    citations: list[WebCitation] = []
    for chunk in chunks:
        if not isinstance(chunk, dict):
            continue
        web = chunk.get("web")
        if not isinstance(web, dict):
            continue
        uri = _optional_text(web, "uri")
        if uri is None:
            continue
        citations.append(WebCitation(uri=uri, title=_optional_text(web, "title") or uri))
    return citations


def dedupe_citations(citations: Iterable[WebCitation]) -> list[WebCitation]:
    """Keep the first citation per uri, preserving order."""
    seen: set[str] = set()
    unique: list[WebCitation] = []
    for citation in citations:
        if citation.uri in seen:
            continue
        seen.add(citation.uri)
        unique.append(citation)
    return unique
