"""Instant value types.

Two representations of the same point on the UTC timeline:
- Instant: opaque nanosecond count since the epoch (calendar form).
- Timespec: explicit ``(seconds, nanoseconds)`` pair.

Both are measured from 1970-01-01T00:00:00 UTC and are immutable.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

NANOS_PER_SECOND = 1_000_000_000
MAX_NANOSECOND = NANOS_PER_SECOND - 1


@dataclass(frozen=True, order=True)
class Instant:
    """A point in time as nanoseconds elapsed since the UTC epoch.

    Attributes:
        ns: Nanoseconds since 1970-01-01T00:00:00 UTC. Negative before it.
    """

    ns: int


@dataclass(frozen=True)
class Timespec:
    """Seconds since the epoch plus a sub-second nanosecond remainder.

    ``nanoseconds`` is canonical when it lies in ``[0, 999_999_999]``.
    Construction does not enforce this; see :meth:`is_canonical`.
    """

    seconds: int
    nanoseconds: int

    def __iter__(self) -> Iterator[int]:
        yield self.seconds
        yield self.nanoseconds

    def is_canonical(self) -> bool:
        return 0 <= self.nanoseconds <= MAX_NANOSECOND
