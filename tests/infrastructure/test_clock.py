"""Tests for the clock capability."""

from unittest.mock import patch

import pytest

from tsbridge.config.models import ClockConfig
from tsbridge.domain.errors import ClockUnavailableError
from tsbridge.domain.instant import Instant, Timespec
from tsbridge.infrastructure.clock import (
    FixedClock,
    SystemClock,
    build_clock,
    now_as_instant,
    now_as_timespec,
)


class TestSystemClock:
    def test_returns_instant(self) -> None:
        assert isinstance(SystemClock().now(), Instant)

    def test_successive_reads_do_not_regress(self) -> None:
        clock = SystemClock()
        first = clock.now()
        second = clock.now()
        assert second >= first

    def test_reads_time_ns(self) -> None:
        with patch("tsbridge.infrastructure.clock.time") as fake_time:
            fake_time.time_ns.return_value = 42
            assert SystemClock().now() == Instant(42)

    def test_os_error_is_clock_unavailable(self) -> None:
        with patch("tsbridge.infrastructure.clock.time") as fake_time:
            fake_time.time_ns.side_effect = OSError("clock_gettime failed")
            with pytest.raises(ClockUnavailableError) as exc_info:
                SystemClock().now()
        assert exc_info.value.detail["reason"] == "clock_gettime failed"
        assert isinstance(exc_info.value.__cause__, OSError)


class TestFixedClock:
    def test_always_same_instant(self) -> None:
        clock = FixedClock(Instant(7))
        assert clock.now() == clock.now() == Instant(7)


class TestBuildClock:
    def test_default_is_system(self) -> None:
        assert isinstance(build_clock(ClockConfig()), SystemClock)

    def test_fixed(self) -> None:
        config = ClockConfig(source="fixed", fixed_seconds=2, fixed_nanoseconds=3)
        clock = build_clock(config)
        assert isinstance(clock, FixedClock)
        assert clock.now() == Instant(2_000_000_003)


class TestNowHelpers:
    def test_now_as_instant_uses_given_clock(self) -> None:
        assert now_as_instant(FixedClock(Instant(9))) == Instant(9)

    def test_now_as_instant_defaults_to_system(self) -> None:
        with patch("tsbridge.infrastructure.clock.time") as fake_time:
            fake_time.time_ns.return_value = 11
            assert now_as_instant() == Instant(11)

    def test_now_as_timespec(self) -> None:
        clock = FixedClock(Instant(1_700_000_000_123_000_000))
        assert now_as_timespec(clock) == Timespec(1_700_000_000, 123_000_000)

    def test_now_as_timespec_reads_clock_once(self) -> None:
        class CountingClock:
            reads = 0

            def now(self) -> Instant:
                self.reads += 1
                return Instant(-1)

        clock = CountingClock()
        assert now_as_timespec(clock) == Timespec(-1, 999_999_999)
        assert clock.reads == 1

    def test_now_as_timespec_from_host(self) -> None:
        with patch("tsbridge.infrastructure.clock.time") as fake_time:
            fake_time.time_ns.return_value = 1_700_000_000_000_000_005
            assert now_as_timespec() == Timespec(1_700_000_000, 5)
        assert fake_time.time_ns.call_count == 1
