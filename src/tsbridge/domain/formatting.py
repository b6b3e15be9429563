"""Fixed-pattern UTC timestamp rendering.

Two renderings:
- ``format_timestamp``: ``YYYY-MM-DD HH:MM:SS.`` followed by the nanosecond
  field as a plain integer. No zero-padding: 5 ns renders as ``.5``.
- ``render_native``: same calendar part, nanoseconds zero-padded to nine
  digits.

Calendar fields use the proleptic Gregorian calendar with no offset.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from tsbridge.domain.convert import to_seconds_nanos
from tsbridge.domain.errors import CalendarRangeExceededError
from tsbridge.domain.instant import Instant, Timespec

_EPOCH = datetime(1970, 1, 1)


def calendar_fields(seconds: int) -> datetime:
    """Break whole *seconds* since the epoch down into UTC calendar fields.

    Raises:
        CalendarRangeExceededError: If the result falls outside years 1..9999.
    """
    try:
        return _EPOCH + timedelta(seconds=seconds)
    except OverflowError as exc:
        raise CalendarRangeExceededError(
            f"{seconds} seconds since the epoch is outside the supported calendar range",
            detail={"seconds": seconds},
        ) from exc


def _format_calendar(seconds: int) -> str:
    dt = calendar_fields(seconds)
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d} "
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    )


def _as_pair(value: Instant | Timespec | tuple[int, int]) -> tuple[int, int]:
    if isinstance(value, Instant):
        ts = to_seconds_nanos(value)
        return ts.seconds, ts.nanoseconds
    seconds, nanoseconds = value
    return seconds, nanoseconds


def format_timestamp(value: Instant | Timespec | tuple[int, int]) -> str:
    """Render an Instant or a ``(seconds, nanoseconds)`` pair as a UTC timestamp.

    A pair's nanosecond field is printed exactly as given, so a
    non-canonical pair keeps its raw digits.

    Raises:
        CalendarRangeExceededError: If the whole seconds cannot be broken down.
    """
    seconds, nanoseconds = _as_pair(value)
    return f"{_format_calendar(seconds)}.{nanoseconds}"


def render_native(instant: Instant) -> str:
    """Render *instant* with a fixed-width, nine-digit fraction."""
    ts = to_seconds_nanos(instant)
    return f"{_format_calendar(ts.seconds)}.{ts.nanoseconds:09d}"
