from __future__ import annotations

from copyscan_core.parse import citations_from_grounding, dedupe_citations
from copyscan_core.types import WebCitation


def test_citations_drop_entries_without_uri() -> None:
    chunks = [
        {"web": {"uri": "https://a.com", "title": "A"}},
        {"web": {"uri": None, "title": "Missing"}},
        {"web": {"uri": "   "}},
        {"web": "https://not-a-dict.com"},
        "garbage",
        {},
    ]

    assert citations_from_grounding(chunks) == [
        WebCitation(uri="https://a.com", title="A")
    ]


def test_citation_title_falls_back_to_uri() -> None:
    citations = citations_from_grounding(
        [{"web": {"uri": "https://b.com"}}, {"web": {"uri": "https://c.com", "title": ""}}]
    )

    assert [c.title for c in citations] == ["https://b.com", "https://c.com"]


def test_dedupe_keeps_first_title_and_order() -> None:
    citations = [
        WebCitation(uri="https://b.com", title="B1"),
        WebCitation(uri="https://a.com", title="A1"),
        WebCitation(uri="https://b.com", title="B2"),
        WebCitation(uri="https://a.com", title="A2"),
    ]

    unique = dedupe_citations(citations)

    assert unique == [
        WebCitation(uri="https://b.com", title="B1"),
        WebCitation(uri="https://a.com", title="A1"),
    ]
    assert dedupe_citations(unique) == unique
