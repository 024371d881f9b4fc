from __future__ import annotations

from contextlib import asynccontextmanager
import logging

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from copyscan_core import AnalysisResult, GeminiClient, Invoker, run_check
from copyscan_core.errors import ErrorKind

from app.logger import configure_logging
from app.settings import settings

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[ErrorKind, int] = {
    "validation": 400,
    "parse": 502,
    "transport": 503,
    "configuration": 500,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    app.state.invoker = GeminiClient.from_api_key(
        settings.gemini_api_key, model=settings.gemini_model
    )
    logger.info("Copyscan API ready (model=%s)", settings.gemini_model)
    yield


app = FastAPI(title="Copyscan API", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class CheckRequest(BaseModel):
    source_text: str = ""
    text_to_check: str = ""
    use_web_search: bool = False


def get_invoker(request: Request) -> Invoker:
    invoker = getattr(request.app.state, "invoker", None)
    if invoker is None:
        raise HTTPException(status_code=500, detail="Model client is not configured")
    return invoker


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/v1/check", response_model=AnalysisResult)
async def check(
    payload: CheckRequest,
    invoker: Invoker = Depends(get_invoker),
) -> AnalysisResult:
    outcome = await run_check(
        invoker,
        payload.source_text,
        payload.text_to_check,
        payload.use_web_search,
        temperature=settings.temperature,
    )
    if outcome.error is not None:
        raise HTTPException(
            status_code=ERROR_STATUS[outcome.error.kind],
            detail=outcome.error.message,
        )
    return outcome.result
