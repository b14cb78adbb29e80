"""Command group: environmental code recognition."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bfn.commands._base import BfnGroup
from bfn.domain.codes import CodeFamily
from bfn.services.codes import CodeService

if TYPE_CHECKING:
    from bfn.commands._context import AppContext

_CODE_EXAMPLES = """\
  bfn code parse --family lowcode "10 20 30 *"
  bfn code disposal " d10 " d10.21 D1.234
  bfn code recovery r13
  bfn -q code low "abs 10 c 20" "17 05 04\""""


@click.group(cls=BfnGroup, examples=_CODE_EXAMPLES)
def code() -> None:
    """Recognize disposal, recovery, and List of Waste codes."""


@code.command(
    examples="""\
  bfn code parse --family disposalcode d10
  bfn code parse -f LoWCode "  10 20    30  * \""""
)
@click.option(
    "--family",
    "-f",
    required=True,
    help=f"Code family ({', '.join(f.value for f in CodeFamily)}); case-insensitive.",
)
@click.argument("values", nargs=-1, required=True)
@click.pass_obj
def parse(app: AppContext, family: str, values: tuple[str, ...]) -> None:
    """Recognize VALUES as codes of the given family."""
    app.emit(CodeService(app.settings).parse(list(values), family))


def _family_command(name: str, family: CodeFamily, summary: str, example: str) -> None:
    @code.command(name, help=summary, examples=f"  bfn code {name} {example}")
    @click.argument("values", nargs=-1, required=True)
    @click.pass_obj
    def _cmd(app: AppContext, values: tuple[str, ...]) -> None:
        app.emit(CodeService(app.settings).parse(list(values), family.value))


_family_command("disposal", CodeFamily.DISPOSAL, "Recognize disposal codes (D10, D10.21).", "d10")
_family_command("recovery", CodeFamily.RECOVERY, "Recognize recovery codes (R1, R13.2).", "r13")
_family_command("low", CodeFamily.LOW, "Recognize List of Waste codes (170504*).", '"17 05 04 *"')
