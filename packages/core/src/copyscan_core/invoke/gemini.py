from __future__ import annotations

import logging
from typing import Any

from google import genai
from google.genai import errors as genai_errors
from google.genai import types
import httpx

from copyscan_core.errors import ConfigurationError, TransportError
from copyscan_core.prompts import AnalysisRequest, StrictRequest

from .base import RawResponse

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"


def build_generate_config(request: AnalysisRequest) -> types.GenerateContentConfig:
    if isinstance(request, StrictRequest):
        return types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=request.response_schema,
            temperature=request.temperature,
        )
    # Search tools cannot be combined with a response schema.
    return types.GenerateContentConfig(
        tools=[types.Tool(google_search=types.GoogleSearch())],
        temperature=request.temperature,
    )


def extract_grounding_chunks(response: Any) -> tuple[dict[str, Any], ...]:
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return ()
    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    extracted: list[dict[str, Any]] = []
    for chunk in chunks:
        if isinstance(chunk, dict):
            extracted.append(chunk)
        elif hasattr(chunk, "model_dump"):
            extracted.append(chunk.model_dump(exclude_none=True))
    return tuple(extracted)


class GeminiClient:
    """Sends analysis requests to Gemini through an injected SDK client."""

    def __init__(self, client: genai.Client, model: str = DEFAULT_MODEL) -> None:
        self.client = client
        self.model = model

    @classmethod
    def from_api_key(
        cls, api_key: str | None, model: str = DEFAULT_MODEL
    ) -> GeminiClient:
        cleaned = (api_key or "").strip()
        if not cleaned:
            raise ConfigurationError(
                "Missing Gemini API key; set GEMINI_API_KEY or API_KEY"
            )
        return cls(genai.Client(api_key=cleaned), model=model)

    async def invoke(self, request: AnalysisRequest) -> RawResponse:
        config = build_generate_config(request)
        logger.info("Calling %s in %s mode", self.model, request.mode)
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=request.prompt,
                config=config,
            )
        except genai_errors.APIError as exc:
            raise TransportError(
                f"Gemini request failed with status {exc.code}: {exc.message}"
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Gemini request failed: {exc}") from exc

        text = response.text or ""
        if request.mode == "strict":
            return RawResponse(text=text)
        return RawResponse(text=text, grounding_chunks=extract_grounding_chunks(response))
