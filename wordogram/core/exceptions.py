"""Custom exception hierarchy for puzzle building."""

from __future__ import annotations

from typing import Any, Dict

from .constants import ErrorKind


class WordogramError(Exception):
    """Base exception for builder failures.

    Every subclass carries a ``kind`` and a ``detail`` mapping that names the
    offending row, pin or width so callers can report a structured failure.
    """

    kind: ErrorKind = ErrorKind.VALIDATION_FAILED

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.detail: Dict[str, Any] = detail

    def to_jsonable(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "message": str(self), "detail": dict(self.detail)}


class PhraseTooLongError(WordogramError):
    """Raised when the phrase exceeds the configured maximum length."""

    kind = ErrorKind.PHRASE_TOO_LONG


class WidthUnfittableError(WordogramError):
    """Raised when no width in the requested range can hold the phrase."""

    kind = ErrorKind.WIDTH_UNFITTABLE


class PinConflictError(WordogramError):
    """Raised when a pin cannot be honoured exactly."""

    kind = ErrorKind.PIN_CONFLICT


class SchemaUnsupportedError(WordogramError):
    """Raised when a stored artifact has an unknown schema version."""

    kind = ErrorKind.SCHEMA_UNSUPPORTED


class ValidationError(WordogramError):
    """Raised when the assembled puzzle fails its integrity checks."""

    kind = ErrorKind.VALIDATION_FAILED
