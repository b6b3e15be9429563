"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from tsbridge.config.models import ClockConfig


class TestClockConfig:
    def test_defaults(self) -> None:
        cfg = ClockConfig()
        assert cfg.source == "system"
        assert cfg.fixed_seconds == 0
        assert cfg.fixed_nanoseconds == 0

    def test_rejects_unknown_source(self) -> None:
        with pytest.raises(ValidationError):
            ClockConfig(source="ntp")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        cfg = ClockConfig()
        with pytest.raises(ValidationError):
            cfg.source = "fixed"  # type: ignore[misc]
