from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

AnalysisMode = Literal["strict", "web_search"]


class SimilarityMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    source_text: str
    checked_text: str
    explanation: str


class WebCitation(BaseModel):
    model_config = ConfigDict(frozen=True)

    uri: str
    title: str


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall_similarity_percentage: float
    summary: str
    matches: tuple[SimilarityMatch, ...] = ()
    web_citations: tuple[WebCitation, ...] | None = None
