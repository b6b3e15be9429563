"""Clock capability: the only point where tsbridge touches host time.

Production code reads :class:`SystemClock`; tests and reproducible runs
inject :class:`FixedClock`. Selection from configuration goes through
:func:`build_clock`.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Protocol

from tsbridge.domain.convert import from_seconds_nanos, to_seconds_nanos
from tsbridge.domain.errors import ClockUnavailableError
from tsbridge.domain.instant import Instant, Timespec

if TYPE_CHECKING:
    from tsbridge.config.models import ClockConfig

logger = logging.getLogger(__name__)


class Clock(Protocol):
    def now(self) -> Instant: ...


class SystemClock:
    """Host real-time clock with nanosecond resolution."""

    def now(self) -> Instant:
        try:
            ns = time.time_ns()
        except (OSError, OverflowError) as exc:
            raise ClockUnavailableError(
                "Host real-time clock could not be read",
                detail={"reason": str(exc)},
            ) from exc
        logger.debug("Read host clock: %d ns", ns)
        return Instant(ns)


class FixedClock:
    """Clock pinned to a single instant."""

    def __init__(self, instant: Instant) -> None:
        self._instant = instant

    def now(self) -> Instant:
        return self._instant


def build_clock(config: ClockConfig) -> Clock:
    """Return the clock selected by the ``[clock]`` config section."""
    if config.source == "fixed":
        instant = from_seconds_nanos(config.fixed_seconds, config.fixed_nanoseconds)
        logger.debug("Using fixed clock at %d ns", instant.ns)
        return FixedClock(instant)
    return SystemClock()


def now_as_instant(clock: Clock | None = None) -> Instant:
    """Current instant in calendar form."""
    return (clock or SystemClock()).now()


def now_as_timespec(clock: Clock | None = None) -> Timespec:
    """Current instant as a canonical ``(seconds, nanoseconds)`` pair.

    Derived from one ``clock.now()`` read split with
    :func:`~tsbridge.domain.convert.to_seconds_nanos`. ``time.time_ns`` is
    already the host's ``CLOCK_REALTIME`` reading, so a second host read
    would only add a second, later instant.
    """
    return to_seconds_nanos(now_as_instant(clock))
