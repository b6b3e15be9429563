"""Shared pytest fixtures for tsbridge tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from tsbridge.domain.instant import Instant
from tsbridge.infrastructure.clock import FixedClock

# 2023-11-14 22:13:20.123000000 UTC
SAMPLE_SECONDS = 1_700_000_000
SAMPLE_NANOS = 123_000_000


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no TSBRIDGE_* variables.

    Keeps a stray ``tsbridge.toml`` or exported env var on the host from
    leaking into settings resolution.
    """
    for key in list(os.environ):
        if key.startswith("TSBRIDGE_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None]:
    """Undo handler and level changes made by ``configure_logging`` in CLI runs."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    root_level = root.level
    ts = logging.getLogger("tsbridge")
    ts_level = ts.level
    yield
    root.handlers = handlers
    root.setLevel(root_level)
    ts.setLevel(ts_level)


@pytest.fixture
def sample_instant() -> Instant:
    return Instant(SAMPLE_SECONDS * 1_000_000_000 + SAMPLE_NANOS)


@pytest.fixture
def fixed_clock(sample_instant: Instant) -> FixedClock:
    return FixedClock(sample_instant)


@pytest.fixture
def pinned_clock_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pin the CLI clock to the sample instant through env vars."""
    monkeypatch.setenv("TSBRIDGE_CLOCK__SOURCE", "fixed")
    monkeypatch.setenv("TSBRIDGE_CLOCK__FIXED_SECONDS", str(SAMPLE_SECONDS))
    monkeypatch.setenv("TSBRIDGE_CLOCK__FIXED_NANOSECONDS", str(SAMPLE_NANOS))
