"""Tests for TextService."""

from __future__ import annotations

from pathlib import Path

from bfn.config.settings import BfnSettings
from bfn.services.text import TextService


class TestTextService:
    def test_trim_absent(self, settings: BfnSettings) -> None:
        result = TextService(settings).trim(None)
        assert result.op == "trim"
        assert result.data == {"value": ""}

    def test_squish(self, settings: BfnSettings) -> None:
        result = TextService(settings).squish("  Old     Minotaur \n ")
        assert result.op == "san_trim"
        assert result.data["value"] == "Old Minotaur"

    def test_strip_tags_default_marks(self, settings: BfnSettings) -> None:
        result = TextService(settings).strip_tags("Some numbers <text>   < and > letters.")
        assert result.data["value"] == "Some numbers « and » letters."

    def test_strip_tags_configured_marks(self, workdir: Path) -> None:
        (workdir / "bfn.toml").write_text('[text]\nopen_mark = "<<"\nclose_mark = ">>"\n')
        settings = BfnSettings.from_cli(search_root=workdir)
        result = TextService(settings).strip_tags("a < b > c")
        assert result.data["value"] == "a << b >> c"

    def test_upper_first_empty(self, settings: BfnSettings) -> None:
        assert TextService(settings).upper_first("").data == {"value": None}
