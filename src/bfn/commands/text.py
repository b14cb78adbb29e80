"""Command group: text sanitizing.

Omitting VALUE passes absent (null) text, which sanitizes to "".
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bfn.commands._base import BfnGroup
from bfn.services.text import TextService

if TYPE_CHECKING:
    from bfn.commands._context import AppContext

_TEXT_EXAMPLES = """\
  bfn text trim "  padded  "
  bfn text squish "  Old     Minotaur  "
  bfn text strip-tags "<h1>Hello</h1> <p>World!</p>"
  bfn text upper-first minotaur"""


@click.group(cls=BfnGroup, examples=_TEXT_EXAMPLES)
def text() -> None:
    """Trim, collapse whitespace, and strip markup."""


@text.command(examples='  bfn text trim "  padded  "')
@click.argument("value", required=False)
@click.pass_obj
def trim(app: AppContext, value: str | None) -> None:
    """Remove leading and trailing whitespace."""
    app.emit(TextService(app.settings).trim(value))


@text.command(examples='  bfn text squish "  Old     Minotaur \\t "')
@click.argument("value", required=False)
@click.pass_obj
def squish(app: AppContext, value: str | None) -> None:
    """Collapse whitespace runs to single spaces and trim."""
    app.emit(TextService(app.settings).squish(value))


@text.command(
    "strip-tags",
    examples="""\
  bfn text strip-tags "<h1>Hello</h1> <p>World!</p>"
  bfn -q text strip-tags "Some numbers <text> < and > letters.\"""",
)
@click.argument("value", required=False)
@click.pass_obj
def strip_tags(app: AppContext, value: str | None) -> None:
    """Remove HTML tags; stray < and > become guillemets."""
    app.emit(TextService(app.settings).strip_tags(value))


@text.command("upper-first", examples="  bfn text upper-first minotaur")
@click.argument("value")
@click.pass_obj
def upper_first(app: AppContext, value: str) -> None:
    """Uppercase the first character (null for empty input)."""
    app.emit(TextService(app.settings).upper_first(value))
