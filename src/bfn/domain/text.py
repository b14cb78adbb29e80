"""Text sanitizing primitives — trimming, whitespace collapsing, tag stripping.

Absent input (``None``) is normalized to the empty string before any
processing, so callers only ever see "a string" back.

Whitespace means the Unicode ``White_Space`` property. That is narrower
than ``str.isspace`` and the default ``\\s``: the ASCII separators
``\\x1c``-``\\x1f`` are ordinary characters here.
"""

from __future__ import annotations

import re

OPEN_MARK = "«"
CLOSE_MARK = "»"

# Unicode White_Space code points.
WHITESPACE = "".join(
    map(
        chr,
        (
            *range(0x09, 0x0E),
            0x20,
            0x85,
            0xA0,
            0x1680,
            *range(0x2000, 0x200B),
            0x2028,
            0x2029,
            0x202F,
            0x205F,
            0x3000,
        ),
    )
)

_WS = f"[{re.escape(WHITESPACE)}]"
_WHITESPACE_RE = re.compile(f"{_WS}+")
_TAG_RE = re.compile(r"</?[a-zA-Z][^>]*>")
_LESS_RUN_RE = re.compile(f"<(?:{_WS}*<)*")
_GREATER_RUN_RE = re.compile(f">(?:{_WS}*>)*")


def trim(value: str | None) -> str:
    """Strip leading and trailing whitespace; ``None`` becomes ``""``."""
    return (value or "").strip(WHITESPACE)


def collapse_whitespace(value: str | None) -> str:
    """Replace every whitespace run with one space, then trim.

    Examples:
        >>> collapse_whitespace("  Old     Minotaur \\n\\n  \\t ")
        'Old Minotaur'
        >>> collapse_whitespace(None)
        ''
    """
    return _WHITESPACE_RE.sub(" ", value or "").strip(WHITESPACE)


def strip_markup(
    value: str | None,
    *,
    open_mark: str = OPEN_MARK,
    close_mark: str = CLOSE_MARK,
) -> str:
    """Remove HTML-like tags and neutralize leftover angle brackets.

    Tags (``<name ...>`` or ``</name ...>`` where the name starts with a
    letter) are dropped entirely. Brackets that survive tag removal are
    collapsed run-wise: consecutive ``<`` (whitespace allowed in between)
    become one *open_mark*, consecutive ``>`` become one *close_mark*.
    Whitespace is collapsed last.

    Examples:
        >>> strip_markup("<h1>Hello</h1> <p>World!</p>")
        'Hello World!'
        >>> strip_markup("Some numbers <text>   < and > letters.")
        'Some numbers « and » letters.'
    """
    if value is None:
        return ""
    text = _TAG_RE.sub("", value)
    text = _LESS_RUN_RE.sub(open_mark, text)
    text = _GREATER_RUN_RE.sub(close_mark, text)
    return collapse_whitespace(text)


def upper_first(word: str) -> str | None:
    """Uppercase the first character, leaving the rest untouched.

    Returns ``None`` for an empty string.
    """
    if not word:
        return None
    return word[0].upper() + word[1:]
