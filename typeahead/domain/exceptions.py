"""
Custom exceptions for the typeahead domain.

These exceptions represent domain-level errors and are independent
of infrastructure concerns (HTTP, serialization, etc.).
"""

from typing import Any, Optional


class TypeaheadException(Exception):
    """Base exception for all typeahead errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidCodeFormatException(TypeaheadException):
    """Raised when a unicode emoji code is not a hyphen-separated hex sequence."""

    def __init__(self, code: str, segment: Optional[str] = None):
        message = f"Invalid emoji code: {code!r}"
        if segment is not None:
            message += f" (bad segment {segment!r})"
        super().__init__(message=message, details={"code": code, "segment": segment})


class InvalidEmojiException(TypeaheadException):
    """Raised when an emoji record cannot be mapped to a known variant."""

    def __init__(self, reason: str, record: Optional[dict] = None):
        message = f"Invalid emoji record: {reason}"
        super().__init__(message=message, details={"reason": reason, "record": record})


class ValidationException(TypeaheadException):
    """Raised when input validation fails."""

    def __init__(self, field: str, value: Any, reason: str):
        message = f"Validation failed for {field}: {reason}"
        super().__init__(
            message=message,
            details={"field": field, "value": str(value), "reason": reason},
        )
