from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from .errors import CopyscanError, ErrorKind
from .types import AnalysisResult

FAILURE_PREFIX = "Failed to check plagiarism: "


class CheckFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str

    @classmethod
    def from_error(cls, exc: CopyscanError) -> CheckFailure:
        message = str(exc)
        if exc.kind != "validation":
            message = f"{FAILURE_PREFIX}{message}"
        return cls(kind=exc.kind, message=message)


class CheckOutcome(BaseModel):
    """Either a complete result or a categorized failure, never both."""

    model_config = ConfigDict(frozen=True)

    result: AnalysisResult | None = None
    error: CheckFailure | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> CheckOutcome:
        if (self.result is None) == (self.error is None):
            raise ValueError("exactly one of result or error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.result is not None

    @classmethod
    def success(cls, result: AnalysisResult) -> CheckOutcome:
        return cls(result=result)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> CheckOutcome:
        return cls(error=CheckFailure(kind=kind, message=message))
