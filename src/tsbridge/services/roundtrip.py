"""RoundTripService: render one instant through both representations.

``demo`` reads the clock and produces four renderings:
1. native calendar rendering of the Instant (nine-digit fraction)
2. formatted Instant
3. formatted Timespec
4. formatted Instant rebuilt from the Timespec

Lines 2-4 must be textually identical. ``show`` does the same for a
caller-supplied ``(seconds, nanoseconds)`` pair.
"""

from __future__ import annotations

import logging

from tsbridge.domain.convert import from_seconds_nanos, normalize, to_seconds_nanos
from tsbridge.domain.errors import TsBridgeError
from tsbridge.domain.formatting import format_timestamp, render_native
from tsbridge.domain.instant import Instant, Timespec
from tsbridge.services.base import BaseService
from tsbridge.services.result import ServiceResult

logger = logging.getLogger(__name__)


class RoundTripService(BaseService):
    """Convert and render instants, reporting whether the renderings agree."""

    def demo(self) -> ServiceResult:
        """Read the clock and render it through every conversion path."""
        op = "demo"
        try:
            instant = self._clock.now()
            timespec = to_seconds_nanos(instant)
            native = render_native(instant)
            formatted = [format_timestamp(instant), format_timestamp(timespec)]
            rebuilt = from_seconds_nanos(timespec.seconds, timespec.nanoseconds)
            formatted.append(format_timestamp(rebuilt))
        except TsBridgeError as exc:
            return self._failure(op, exc)

        logger.debug("demo read %d ns -> (%d, %d)", instant.ns, *timespec)
        consistent = len(set(formatted)) == 1 and rebuilt == instant
        return _build_result(op, [native, *formatted], instant, timespec, consistent)

    def show(self, seconds: int, nanoseconds: int = 0) -> ServiceResult:
        """Render a caller-supplied pair and the instant rebuilt from it."""
        op = "show"
        given = Timespec(seconds=seconds, nanoseconds=nanoseconds)
        try:
            rebuilt = from_seconds_nanos(seconds, nanoseconds)
            canonical = normalize(given)
            native = render_native(rebuilt)
            from_pair = format_timestamp(given)
            from_instant = format_timestamp(rebuilt)
        except TsBridgeError as exc:
            return self._failure(op, exc)

        warnings: list[str] = []
        if given.is_canonical():
            consistent = from_pair == from_instant
        else:
            # The raw nanosecond digits cannot match the carried instant.
            consistent = format_timestamp(canonical) == from_instant
            warnings.append(
                f"nanoseconds {nanoseconds} outside [0, 999999999]; "
                f"carried to ({canonical.seconds}, {canonical.nanoseconds})"
            )
        return _build_result(
            op,
            [native, from_pair, from_instant],
            rebuilt,
            canonical,
            consistent,
            warnings=warnings,
        )


def _build_result(
    op: str,
    lines: list[str],
    instant: Instant,
    timespec: Timespec,
    consistent: bool,
    *,
    warnings: list[str] | None = None,
) -> ServiceResult:
    warnings = list(warnings or [])
    if not consistent:
        warnings.append("Renderings disagree")
    return ServiceResult(
        ok=True,
        op=op,
        data={
            "lines": lines,
            "seconds": timespec.seconds,
            "nanoseconds": timespec.nanoseconds,
            "consistent": consistent,
        },
        warnings=warnings,
        meta={"instant_ns": instant.ns},
    )
