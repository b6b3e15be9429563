"""Convert UTC instants between calendar and seconds+nanoseconds form."""

from __future__ import annotations

__version__ = "0.1.0"

from tsbridge.domain.convert import from_seconds_nanos, normalize, to_seconds_nanos
from tsbridge.domain.errors import (
    CalendarRangeExceededError,
    ClockUnavailableError,
    TsBridgeError,
)
from tsbridge.domain.formatting import format_timestamp, render_native
from tsbridge.domain.instant import Instant, Timespec
from tsbridge.infrastructure.clock import (
    Clock,
    FixedClock,
    SystemClock,
    now_as_instant,
    now_as_timespec,
)

__all__ = [
    "__version__",
    "Instant",
    "Timespec",
    "to_seconds_nanos",
    "from_seconds_nanos",
    "normalize",
    "format_timestamp",
    "render_native",
    "Clock",
    "SystemClock",
    "FixedClock",
    "now_as_instant",
    "now_as_timespec",
    "TsBridgeError",
    "ClockUnavailableError",
    "CalendarRangeExceededError",
]
