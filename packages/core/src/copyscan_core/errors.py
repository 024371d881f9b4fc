from __future__ import annotations

from typing import Literal

ErrorKind = Literal["validation", "configuration", "transport", "parse"]


class CopyscanError(RuntimeError):
    """Base class for errors surfaced to the presentation layer."""

    kind: ErrorKind = "transport"


class ConfigurationError(CopyscanError):
    """Raised when a required credential or setting is missing."""

    kind: ErrorKind = "configuration"


class TransportError(CopyscanError):
    """Raised when the model service call could not complete."""

    kind: ErrorKind = "transport"


class ParseError(CopyscanError):
    """Raised when the model response does not have the expected shape."""

    kind: ErrorKind = "parse"


class InputValidationError(CopyscanError):
    """Raised for blank inputs before any external call is made."""

    kind: ErrorKind = "validation"
