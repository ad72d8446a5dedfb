"""ossid Error Taxonomy.

This module defines the error hierarchy for ossid, providing structured
error handling with specific error codes and context information.
"""
from __future__ import annotations

from typing import Any


class OssidError(Exception):
    """Base exception for all ossid errors.

    Attributes:
        code: Error code following the ossid:<area>/<kind> pattern
        message: Human-readable error message
        details: Optional additional error context
    """

    def __init__(self, code: str, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to ``{code, message, details}`` dict."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class InvalidFormatError(OssidError, ValueError):
    """Raised when a token is not a structurally valid identifier.

    Raised by timestamp extraction, age computation and comparison whenever
    an input fails the validity check. Subclasses ValueError so callers can
    treat it like any other malformed-value error.

    Attributes:
        token: The rejected input (repr-safe, may be any type)
        reason: Short description of the failed rule
    """

    def __init__(self, token: Any, reason: str, details: dict[str, Any] | None = None) -> None:
        message = f"Invalid identifier {token!r}: {reason}"
        super().__init__(
            code="ossid:id/invalid_format",
            message=message,
            details={"token": repr(token), "reason": reason, **(details or {})},
        )
        self.token = token
        self.reason = reason


class RecordValidationError(OssidError):
    """Raised when an example record fails validation.

    Attributes:
        field: Name of the field that failed validation
    """

    def __init__(self, field: str, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="ossid:record/invalid",
            message=message,
            details={"field": field, **(details or {})},
        )
        self.field = field
