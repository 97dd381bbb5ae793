"""Error classes and helpers for common-date-formats.

The formatters themselves are lenient and never raise on ordinary
input. These exceptions cover the opt-in strict mode, timezone
resolution, and the tool surface, and can be turned into
serializable payloads for tool responses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, TypedDict


class ErrorPayload(TypedDict, total=False):
    code: str
    message: str
    details: Dict[str, Any]


@dataclass
class AppError(Exception):
    """Base application error with a code and optional details."""

    code: str
    message: str
    details: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> ErrorPayload:
        payload: ErrorPayload = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class InvalidDateError(AppError):
    """Raised in strict mode when a value is not a well-formed date/datetime."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("INVALID_DATE", message, details)


class UnknownTimezoneError(AppError):
    """Raised when a timezone name cannot be found in the zone database."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("UNKNOWN_TIMEZONE", message, details)


class UnknownFormatError(AppError):
    """Raised when a format style name is not registered."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("UNKNOWN_FORMAT", message, details)


class ConfigError(AppError):
    """Raised when DATEFMT_ environment settings cannot be parsed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("CONFIG_ERROR", message, details)


def to_error_payload(error: Exception) -> ErrorPayload:
    """Convert an exception into a structured error payload.

    Args:
        error: The exception to convert.

    Returns:
        A dictionary with ``code``, ``message`` and optional ``details``.

    Examples:
        >>> try:
        ...     raise UnknownFormatError("Unknown style", {"style": "iso"})
        ... except Exception as e:
        ...     payload = to_error_payload(e)
        ...     assert payload["code"] == "UNKNOWN_FORMAT"
    """

    if isinstance(error, AppError):
        return error.to_payload()
    # Fallback: wrap generic exceptions
    return {"code": "INTERNAL", "message": str(error)}
