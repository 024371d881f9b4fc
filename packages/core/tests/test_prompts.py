from __future__ import annotations

from copyscan_core.prompts import StrictRequest, WebSearchRequest, build_request
from copyscan_core.prompts.templates import SIMILARITY_RESPONSE_SCHEMA


def test_strict_request_embeds_both_texts_and_schema() -> None:
    request = build_request("Alpha {braces} text.", "Beta text.", False)

    assert isinstance(request, StrictRequest)
    assert request.mode == "strict"
    assert request.temperature == 0.2
    assert "Alpha {braces} text." in request.prompt
    assert "Beta text." in request.prompt
    assert "```json" not in request.prompt
    assert request.response_schema == SIMILARITY_RESPONSE_SCHEMA
    assert request.response_schema["required"] == [
        "overallSimilarityPercentage",
        "summary",
        "similarities",
    ]
    item_schema = request.response_schema["properties"]["similarities"]["items"]
    assert item_schema["required"] == ["sourceText", "checkedText", "explanation"]


def test_strict_request_schema_is_not_shared() -> None:
    request = build_request("a", "b", False)
    request.response_schema["required"].append("extra")

    assert "extra" not in SIMILARITY_RESPONSE_SCHEMA["required"]


def test_web_search_request_asks_for_fenced_json() -> None:
    request = build_request("  Original passage.  ", "Some unique sentence.", True)

    assert isinstance(request, WebSearchRequest)
    assert request.mode == "web_search"
    assert "```json" in request.prompt
    assert "Google Search" in request.prompt
    assert "Original passage." in request.prompt
    assert "Some unique sentence." in request.prompt
    assert not hasattr(request, "response_schema")


def test_web_search_request_marks_missing_source() -> None:
    request = build_request("   ", "Some unique sentence.", True)

    assert "**Source Text:**\nNot provided.\n" in request.prompt


def test_build_request_passes_temperature() -> None:
    request = build_request("a", "b", True, temperature=0.7)

    assert request.temperature == 0.7
