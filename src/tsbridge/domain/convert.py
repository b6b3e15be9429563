"""Conversion between Instant and Timespec.

INVARIANT: ``to_seconds_nanos`` always yields a canonical Timespec, and
``from_seconds_nanos(*to_seconds_nanos(x)) == x`` for every Instant ``x``.
"""

from __future__ import annotations

from tsbridge.domain.instant import NANOS_PER_SECOND, Instant, Timespec


def to_seconds_nanos(instant: Instant) -> Timespec:
    """Split *instant* into whole seconds and a nanosecond remainder.

    Seconds are floored, so the remainder stays in ``[0, 999_999_999]``
    on both sides of the epoch.
    """
    seconds, nanoseconds = divmod(instant.ns, NANOS_PER_SECOND)
    return Timespec(seconds=seconds, nanoseconds=nanoseconds)


def from_seconds_nanos(seconds: int, nanoseconds: int) -> Instant:
    """Rebuild an Instant as ``epoch + seconds + nanoseconds``.

    *nanoseconds* is not range-checked. A value outside
    ``[0, 999_999_999]`` is added as-is and carries into the seconds.
    """
    return Instant(seconds * NANOS_PER_SECOND + nanoseconds)


def normalize(timespec: Timespec) -> Timespec:
    """Return the canonical Timespec denoting the same instant."""
    if timespec.is_canonical():
        return timespec
    return to_seconds_nanos(from_seconds_nanos(timespec.seconds, timespec.nanoseconds))
