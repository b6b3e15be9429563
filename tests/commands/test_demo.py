"""Tests for the ``demo`` command."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from tsbridge.cli import cli

SAMPLE_LINE = "2023-11-14 22:13:20.123000000"


@pytest.mark.usefixtures("pinned_clock_env")
class TestDemoCommand:
    def test_four_lines(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["demo"])
        assert result.exit_code == 0
        assert result.stdout == f"{SAMPLE_LINE}\n" * 4
        assert result.stderr == ""

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "demo"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["op"] == "demo"
        assert data["data"]["lines"] == [SAMPLE_LINE] * 4
        assert data["data"]["seconds"] == 1_700_000_000
        assert data["data"]["nanoseconds"] == 123_000_000
        assert data["data"]["consistent"] is True

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "demo"])
        assert result.exit_code == 0
        assert result.stdout == f"{SAMPLE_LINE}\n"

    def test_verbose_labels(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "demo"])
        assert result.exit_code == 0
        assert "round-trip" in result.stdout
        assert "seconds: 1700000000" in result.stdout

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["demo", "--examples"])
        assert result.exit_code == 0
        assert "tsbridge demo" in result.output


class TestDemoFailures:
    def test_clock_unavailable_exits_1(self, cli_runner: CliRunner) -> None:
        with patch("tsbridge.infrastructure.clock.time") as fake_time:
            fake_time.time_ns.side_effect = OSError("down")
            result = cli_runner.invoke(cli, ["demo"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "ERROR" in result.stderr
        assert "Host real-time clock could not be read" in result.stderr

    def test_clock_unavailable_json(self, cli_runner: CliRunner) -> None:
        with patch("tsbridge.infrastructure.clock.time") as fake_time:
            fake_time.time_ns.side_effect = OSError("down")
            result = cli_runner.invoke(cli, ["--json", "demo"])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["error"]["code"] == "CLOCK_UNAVAILABLE"

    def test_calendar_range_exits_1(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TSBRIDGE_CLOCK__SOURCE", "fixed")
        monkeypatch.setenv("TSBRIDGE_CLOCK__FIXED_SECONDS", "253402300800")
        result = cli_runner.invoke(cli, ["demo"])
        assert result.exit_code == 1
        assert "outside the supported calendar range" in result.stderr
