"""
Custom exception definitions.

This module defines the exception hierarchy for errors raised while
converting records into query values. Every error aborts the encode call
it was raised from; no partial result is returned.
"""

from typing import Optional


class QueryStringError(Exception):
    """
    Base exception for all querystring errors.

    This is the root exception class for the package, carrying an optional
    dictionary of context that is appended to the string form.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize querystring error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class UnsupportedTypeError(QueryStringError):
    """
    Raised when a record cannot be encoded.

    Only mappings and structured records (dataclass or pydantic model
    instances) are accepted.
    """

    def __init__(self, type_name: str, reason: str = ""):
        """
        Initialize unsupported type error.

        Args:
            type_name: Name of the rejected record type
            reason: Optional explanation
        """
        message = f"Unsupported type '{type_name}'"
        if reason:
            message += f": {reason}"

        super().__init__(message, {'type': type_name})
        self.type_name = type_name
        self.reason = reason


class TypeMismatchError(QueryStringError):
    """Raised when a mapping record has a non-string key or value."""

    def __init__(self, message: str, key: Optional[object] = None):
        details = {}
        if key is not None:
            details['key'] = repr(key)

        super().__init__(message, details)
        self.key = key


class EncoderFailureError(QueryStringError):
    """
    Raised when a field's custom encoder fails.

    The original exception is available as ``cause`` and is also chained
    as ``__cause__``.
    """

    def __init__(self, field_name: str, cause: BaseException):
        """
        Initialize encoder failure error.

        Args:
            field_name: Output name of the field whose encoder failed
            cause: Exception raised by the custom encoder
        """
        super().__init__(
            f"Custom encoder failed for field '{field_name}': {cause}",
            {'field': field_name, 'cause': type(cause).__name__},
        )
        self.field_name = field_name
        self.cause = cause


__all__ = [
    "QueryStringError",
    "UnsupportedTypeError",
    "TypeMismatchError",
    "EncoderFailureError",
]
