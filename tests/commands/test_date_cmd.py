"""Tests for the date command group."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from bfn.cli import cli

pytestmark = pytest.mark.usefixtures("workdir")


class TestDateRange:
    def test_quiet_lists_dates(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "date", "range", "2024-02-27", "2024-03-01"])
        assert result.exit_code == 0
        assert result.stdout.split() == ["2024-02-27", "2024-02-28", "2024-02-29", "2024-03-01"]

    def test_rich_summary(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["date", "range", "2023-09-02", "2024-05-28"])
        assert result.exit_code == 0
        assert "count: 270" in result.stdout

    def test_reversed_range_is_empty(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "date", "range", "2024-01-02", "2024-01-01"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["dates"] == []

    def test_configured_limit(self, cli_runner: CliRunner, workdir: Path) -> None:
        (workdir / "bfn.toml").write_text("[calendar]\nmax_range_days = 3\n")
        result = cli_runner.invoke(cli, ["--json", "date", "range", "2024-01-01", "2024-01-10"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "RANGE_TOO_LARGE"

    def test_bad_date_is_usage_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["date", "range", "2024-13-01", "2024-01-01"])
        assert result.exit_code == 2


class TestDateMonth:
    def test_leap_february(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "date", "month", "2024-02-07"])
        data = json.loads(result.stdout)["data"]
        assert data["first_day"] == "2024-02-01"
        assert data["last_day"] == "2024-02-29"

    def test_quiet_prints_last_day(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "date", "month", "2023-07-12"])
        assert result.stdout.strip() == "2023-07-31"
