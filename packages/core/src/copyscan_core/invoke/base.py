from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from copyscan_core.prompts import AnalysisRequest


@dataclass(frozen=True)
class RawResponse:
    text: str
    grounding_chunks: tuple[dict[str, Any], ...] = ()


class Invoker(Protocol):
    async def invoke(self, request: AnalysisRequest) -> RawResponse: ...
