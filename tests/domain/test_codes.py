"""Tests for the disposal, recovery, and List of Waste code recognizers."""

from __future__ import annotations

import pytest

from bfn.domain.codes import (
    FAMILY_RECOGNIZERS,
    CodeFamily,
    recognize_by_family,
    recognize_disposal_code,
    recognize_low_code,
    recognize_recovery_code,
    resolve_family,
)


class TestDisposalCode:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("  d10   ", "D10"),
            ("  d10.21   ", "D10.21"),
            ("D1", "D1"),
            ("d1.2", "D1.2"),
            ("D01.05", "D01.05"),
            ("\td15\n", "D15"),
        ],
    )
    def test_valid(self, raw: str, expected: str) -> None:
        assert recognize_disposal_code(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [
            "  d10.2143434   ",
            "",
            "D",
            "D123",
            "D.1",
            "D1.",
            "D1.2.3",
            "D 10",
            "DD10",
            "R10",
            "ab10cd",
            "D1a",
        ],
    )
    def test_invalid(self, raw: str) -> None:
        assert recognize_disposal_code(raw) is None


class TestRecoveryCode:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("  r10   ", "R10"),
            ("  r10.21   ", "R10.21"),
            ("R13", "R13"),
            ("r1.1", "R1.1"),
        ],
    )
    def test_valid(self, raw: str, expected: str) -> None:
        assert recognize_recovery_code(raw) == expected

    @pytest.mark.parametrize("raw", ["  r10.2143434   ", "D10", "R", "R100", "r 1"])
    def test_invalid(self, raw: str) -> None:
        assert recognize_recovery_code(raw) is None


class TestLowCode:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("  10 20    30   ", "102030"),
            ("  10 20    30  * ", "102030*"),
            ("  abs 10 c 20   30  * ", "102030*"),
            ("  abs 10 c 20      ", "1020"),
            ("  abs 10 c       ", "10"),
            ("ab10cd", "10"),
            ("17 05 04*", "170504*"),
        ],
    )
    def test_valid(self, raw: str, expected: str) -> None:
        assert recognize_low_code(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [
            "  bla bla * ",
            " abc 125",
            "  10   * ",
            "",
            "1",
            "12345",
            "1234567",
            "123456**",
            "*123456",
            "1020*",
        ],
    )
    def test_invalid(self, raw: str) -> None:
        assert recognize_low_code(raw) is None

    def test_asymmetry_with_disposal(self) -> None:
        """LoW deletes embedded junk; disposal requires a whole-string match."""
        assert recognize_low_code("ab10cd") == "10"
        assert recognize_disposal_code("ab10cd") is None

    def test_information_separator_is_not_trimmed(self) -> None:
        assert recognize_disposal_code("\x1fd10") is None
        assert recognize_recovery_code("r1\x1c") is None

    def test_no_break_space_is_trimmed(self) -> None:
        assert recognize_disposal_code("\xa0d10\xa0") == "D10"


class TestRecognizeByFamily:
    def test_unknown_content_for_low(self) -> None:
        assert recognize_by_family("  bla bla * ", "loWCode") is None
        assert recognize_by_family(" bla", "loWCode") is None

    def test_low_family_case_insensitive(self) -> None:
        assert recognize_by_family("  10 20    30  * ", "loWCode") == "102030*"

    @pytest.mark.parametrize(
        "value,family,expected",
        [
            ("d10", "DisposalCode", "D10"),
            ("r10.1", "RECOVERYCODE", "R10.1"),
            ("170504", "lowcode", "170504"),
        ],
    )
    def test_dispatch(self, value: str, family: str, expected: str) -> None:
        assert recognize_by_family(value, family) == expected

    @pytest.mark.parametrize(
        "value,family",
        [
            ("", "lowcode"),
            (None, "lowcode"),
            ("10", ""),
            ("10", None),
            ("10", "wastecode"),
        ],
    )
    def test_absent_inputs_and_unknown_family(self, value: str | None, family: str | None) -> None:
        assert recognize_by_family(value, family) is None


class TestFamilies:
    def test_resolve_family(self) -> None:
        assert resolve_family("LOWCODE") is CodeFamily.LOW
        assert resolve_family("nope") is None
        assert resolve_family(None) is None

    def test_every_family_has_a_recognizer(self) -> None:
        assert set(FAMILY_RECOGNIZERS) == set(CodeFamily)
