"""Command group: time-ordered UUID generation and decoding."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bfn.commands._base import BfnGroup

if TYPE_CHECKING:
    from bfn.commands._context import AppContext

_UUID_EXAMPLES = """\
  bfn uuid new
  bfn uuid new --count 5
  bfn uuid ts 018c0c88-5300-7cb5-b78c-dc0fe5427827
  bfn --json uuid ts 018c0c88-5300-7cb5-b78c-dc0fe5427827"""


@click.group("uuid", cls=BfnGroup, examples=_UUID_EXAMPLES)
def uuid_group() -> None:
    """Generate and decode time-ordered (v7) UUIDs."""


@uuid_group.command(
    examples="""\
  bfn uuid new
  bfn -q uuid new --count 10"""
)
@click.option("--count", "-n", default=1, type=int, help="Number of identifiers to generate.")
@click.pass_obj
def new(app: AppContext, count: int) -> None:
    """Generate fresh version-7 UUIDs."""
    from bfn.services.identifiers import IdentifierService

    app.emit(IdentifierService(app.settings).new(count=count))


@uuid_group.command(
    examples="""\
  bfn uuid ts 018c0c88-5300-7cb5-b78c-dc0fe5427827
  bfn -q uuid ts 018c0c88-5300-7cb5-b78c-dc0fe5427827"""
)
@click.argument("value")
@click.pass_obj
def ts(app: AppContext, value: str) -> None:
    """Extract the timestamp embedded in a v7 UUID (null for other versions)."""
    from bfn.services.identifiers import IdentifierService

    app.emit(IdentifierService(app.settings).timestamp(value))
