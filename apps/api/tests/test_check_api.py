from __future__ import annotations

import asyncio
import json
from unittest.mock import patch

from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient
import pytest

from copyscan_core import ConfigurationError, GeminiClient
from copyscan_core.errors import TransportError
from copyscan_core.invoke.base import RawResponse
from copyscan_core.prompts import AnalysisRequest

from app.main import CheckRequest, app, check, get_invoker, health, lifespan


class _FakeInvoker:
    def __init__(self, response: RawResponse | None = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls = 0

    async def invoke(self, request: AnalysisRequest) -> RawResponse:
        self.calls += 1
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


_IDENTICAL = RawResponse(
    text=json.dumps(
        {
            "overallSimilarityPercentage": 100,
            "summary": "Identical",
            "similarities": [
                {
                    "sourceText": "The sky is blue.",
                    "checkedText": "The sky is blue.",
                    "explanation": "Exact match",
                }
            ],
        }
    )
)


def _client_with(invoker: _FakeInvoker) -> TestClient:
    app.dependency_overrides[get_invoker] = lambda: invoker
    return TestClient(app)


def teardown_function() -> None:
    app.dependency_overrides.clear()


def test_health() -> None:
    assert health() == {"status": "ok"}


def test_check_returns_analysis_result() -> None:
    invoker = _FakeInvoker(_IDENTICAL)

    result = asyncio.run(
        check(
            CheckRequest(source_text="The sky is blue.", text_to_check="The sky is blue."),
            invoker=invoker,
        )
    )

    assert result.overall_similarity_percentage == 100
    assert len(result.matches) == 1


def test_check_blank_input_is_rejected_without_model_call() -> None:
    invoker = _FakeInvoker(_IDENTICAL)

    with pytest.raises(HTTPException) as exc_info:
        asyncio.run(check(CheckRequest(source_text="x", text_to_check=""), invoker=invoker))

    assert exc_info.value.status_code == 400
    assert invoker.calls == 0


def test_check_endpoint_serializes_result() -> None:
    client = _client_with(_FakeInvoker(_IDENTICAL))

    response = client.post(
        "/v1/check",
        json={"source_text": "The sky is blue.", "text_to_check": "The sky is blue."},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["overall_similarity_percentage"] == 100
    assert body["matches"][0]["explanation"] == "Exact match"
    assert body["web_citations"] is None


def test_check_endpoint_maps_parse_error_to_502() -> None:
    client = _client_with(_FakeInvoker(RawResponse(text="no json")))

    response = client.post(
        "/v1/check",
        json={"text_to_check": "Some unique sentence.", "use_web_search": True},
    )

    assert response.status_code == 502
    assert response.json()["detail"] == (
        "Failed to check plagiarism: "
        "Could not parse JSON response from the model when searching the web"
    )


def test_check_endpoint_maps_transport_error_to_503() -> None:
    client = _client_with(_FakeInvoker(error=TransportError("offline")))

    response = client.post("/v1/check", json={"source_text": "a", "text_to_check": "b"})

    assert response.status_code == 503
    assert response.json()["detail"] == "Failed to check plagiarism: offline"


def test_lifespan_fails_fast_without_api_key() -> None:
    async def _start() -> None:
        async with lifespan(FastAPI()):
            pass

    with patch("app.main.settings.gemini_api_key", None):
        with pytest.raises(ConfigurationError):
            asyncio.run(_start())


def test_lifespan_builds_client_once() -> None:
    target = FastAPI()

    async def _start() -> None:
        async with lifespan(target):
            assert isinstance(target.state.invoker, GeminiClient)

    with patch("app.main.settings.gemini_api_key", "test-key"):
        with patch("copyscan_core.invoke.gemini.genai.Client") as client_cls:
            asyncio.run(_start())

    client_cls.assert_called_once_with(api_key="test-key")


def test_check_endpoint_rejects_non_finite_percentage() -> None:
    body = '{"overallSimilarityPercentage": NaN, "summary": "s", "similarities": []}'
    client = _client_with(_FakeInvoker(RawResponse(text=body)))

    response = client.post("/v1/check", json={"source_text": "a", "text_to_check": "b"})

    assert response.status_code == 502
    assert response.json()["detail"] == "Failed to check plagiarism: Invalid response format from API"


def test_check_endpoint_maps_unexpected_error_to_503() -> None:
    client = _client_with(_FakeInvoker(error=RuntimeError("unexpected")))

    response = client.post("/v1/check", json={"source_text": "a", "text_to_check": "b"})

    assert response.status_code == 503
    assert response.json()["detail"] == "Failed to check plagiarism: unexpected"
