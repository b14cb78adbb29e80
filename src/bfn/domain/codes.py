"""Environmental code recognizers — disposal, recovery, and List of Waste.

Grammars (whole string, ``d`` = decimal digit):
- disposal:  ``D d{1,2}`` or ``D d{1,2} . d{1,2}``  (letter case-insensitive)
- recovery:  ``R d{1,2}`` or ``R d{1,2} . d{1,2}``
- LoW:       ``dd`` | ``dddd`` | ``dddddd`` | ``dddddd*``

Disposal and recovery input is trimmed and must match as a whole. LoW input
is first reduced to its ASCII digits and ``*`` characters, so embedded
letters and spaces are deleted rather than rejected.

INVARIANT: non-conforming input yields ``None``, never an exception.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum

from bfn.domain.text import trim, upper_first

LOW_CODE_LENGTHS = (2, 4, 6)
_LOW_CODE_CHARS = frozenset("0123456789*")


class CodeFamily(StrEnum):
    """Recognized code family tokens (matched case-insensitively)."""

    DISPOSAL = "disposalcode"
    RECOVERY = "recoverycode"
    LOW = "lowcode"


def _is_short_number(part: str) -> bool:
    return 1 <= len(part) <= 2 and part.isdecimal()


def _recognize_lettered(value: str, letter: str) -> str | None:
    """Scan ``<letter> d{1,2} [. d{1,2}]`` over the trimmed value."""
    text = trim(value)
    if not text or text[0].upper() != letter:
        return None
    head, sep, tail = text[1:].partition(".")
    if not _is_short_number(head):
        return None
    if sep and not _is_short_number(tail):
        return None
    return upper_first(text)


def recognize_disposal_code(value: str) -> str | None:
    """Return the canonical disposal code (e.g. ``"D10.21"``) or ``None``.

    Examples:
        >>> recognize_disposal_code("  d10   ")
        'D10'
        >>> recognize_disposal_code("  d10.2143434   ") is None
        True
    """
    return _recognize_lettered(value, "D")


def recognize_recovery_code(value: str) -> str | None:
    """Return the canonical recovery code (e.g. ``"R13"``) or ``None``."""
    return _recognize_lettered(value, "R")


def recognize_low_code(value: str) -> str | None:
    """Return the List of Waste code found in *value*, or ``None``.

    Examples:
        >>> recognize_low_code("  abs 10 c 20   30  * ")
        '102030*'
        >>> recognize_low_code("  10   * ") is None
        True
    """
    residue = "".join(ch for ch in value if ch in _LOW_CODE_CHARS)
    if not residue:
        return None
    if residue.endswith("*"):
        # Only the full six-digit code may carry the hazardous marker.
        digits = residue[:-1]
        valid = len(digits) == 6 and digits.isdigit()
    else:
        valid = len(residue) in LOW_CODE_LENGTHS and residue.isdigit()
    return residue if valid else None


FAMILY_RECOGNIZERS: dict[CodeFamily, Callable[[str], str | None]] = {
    CodeFamily.DISPOSAL: recognize_disposal_code,
    CodeFamily.RECOVERY: recognize_recovery_code,
    CodeFamily.LOW: recognize_low_code,
}


def resolve_family(family: str | None) -> CodeFamily | None:
    """Map a family token (any case) to :class:`CodeFamily`, or ``None``."""
    if not family:
        return None
    try:
        return CodeFamily(family.lower())
    except ValueError:
        return None


def recognize_by_family(value: str | None, family: str | None) -> str | None:
    """Dispatch *value* to the recognizer named by *family*.

    Empty value, empty family, or an unknown family all yield ``None``.
    """
    if not value:
        return None
    code_family = resolve_family(family)
    if code_family is None:
        return None
    return FAMILY_RECOGNIZERS[code_family](value)
