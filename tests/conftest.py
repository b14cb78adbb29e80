"""Shared pytest fixtures for bfn tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from bfn.config.settings import BfnSettings
from bfn.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty working directory with no config file and no config env vars."""
    monkeypatch.delenv("BFN_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(workdir: Path) -> BfnSettings:
    """Default settings resolved from an empty working directory."""
    return BfnSettings.from_cli(search_root=workdir)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``-v`` enables telemetry in the current context; switch it back off."""
    yield
    disable_telemetry()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """CLI invocations reconfigure the root logger; restore it afterwards."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    bfn_logger = logging.getLogger("bfn")
    bfn_level = bfn_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    bfn_logger.setLevel(bfn_level)
