"""Exception hierarchy for instant conversion and formatting."""

from __future__ import annotations

from typing import Any


class TsBridgeError(Exception):
    """Base exception for tsbridge failures.

    Carries a stable ``code`` and a ``detail`` mapping so the service layer
    can turn it into a structured ``ServiceError`` without string parsing.
    """

    code = "TSBRIDGE_ERROR"

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail or {}


class ClockUnavailableError(TsBridgeError):
    """Raised when the host real-time clock cannot be read."""

    code = "CLOCK_UNAVAILABLE"


class CalendarRangeExceededError(TsBridgeError):
    """Raised when whole seconds fall outside the representable calendar range."""

    code = "CALENDAR_RANGE_EXCEEDED"
