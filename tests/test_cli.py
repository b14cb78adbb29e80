"""Tests for the root bfn CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from bfn import __version__
from bfn.cli import cli

pytestmark = pytest.mark.usefixtures("workdir")


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "bfn" in result.output


def test_short_help_flag(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-h"])
    assert result.exit_code == 0
    assert "--json" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flag_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/test.toml", "--version"])
    assert result.exit_code == 0


def test_missing_config_path_falls_back_to_defaults(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-q", "-c", "/nonexistent/bfn.toml", "text", "strip-tags", "<"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "«"


def test_invalid_toml_reports_cleanly(cli_runner: CliRunner, workdir: Path) -> None:
    (workdir / "bfn.toml").write_text("[text\n")
    result = cli_runner.invoke(cli, ["text", "trim", "x"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output


@pytest.mark.parametrize(
    "content",
    ["[digest]\nrandom_bytes = 0\n", "[uuid]\nmax_batch = 0\n"],
)
def test_out_of_range_config_reports_cleanly(
    cli_runner: CliRunner, workdir: Path, content: str
) -> None:
    (workdir / "bfn.toml").write_text(content)
    result = cli_runner.invoke(cli, ["digest", "random"])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Invalid configuration in" in result.stderr
    assert "bfn.toml" in result.stderr
    assert result.stdout == ""


def test_invalid_env_value_reports_cleanly(
    cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("BFN_DIGEST__RANDOM_BYTES", "-3")
    result = cli_runner.invoke(cli, ["digest", "random"])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "BFN_" in result.stderr


def test_env_var_overrides_section(cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BFN_TEXT__CLOSE_MARK", "]")
    result = cli_runner.invoke(cli, ["-q", "text", "strip-tags", "a > b"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "a ] b"


# --- Command groups registered ---

EXPECTED_GROUPS = ["uuid", "text", "code", "digest", "date"]


@pytest.mark.parametrize("group", EXPECTED_GROUPS)
def test_group_registered(cli_runner: CliRunner, group: str) -> None:
    result = cli_runner.invoke(cli, [group, "--help"])
    assert result.exit_code == 0, f"{group} --help failed: {result.output}"


def test_all_groups_in_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    for name in EXPECTED_GROUPS:
        assert name in result.output, f"{name} missing from --help"
