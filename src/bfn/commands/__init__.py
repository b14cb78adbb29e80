"""Subcommand modules for bfn.

Provides register_commands(), which imports the command groups lazily so
``bfn --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every command group on the root CLI group."""
    from bfn.commands.code import code
    from bfn.commands.date_cmd import date_group
    from bfn.commands.digest import digest
    from bfn.commands.text import text
    from bfn.commands.uuid_cmd import uuid_group

    cli.add_command(uuid_group)
    cli.add_command(text)
    cli.add_command(code)
    cli.add_command(digest)
    cli.add_command(date_group)
