"""``bfn`` entry point: global flags, settings, and the command groups."""

from __future__ import annotations

import click

from bfn import __version__
from bfn.commands import register_commands
from bfn.commands._context import AppContext
from bfn.config.settings import BfnSettings

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(__version__, prog_name="bfn")
@click.option("--json", "json_output", is_flag=True, help="Print the full result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print bare values, one per line.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logs, error detail, and timings.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    metavar="PATH",
    default=None,
    help="Read this TOML file instead of searching for bfn.toml.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """bfn: identifiers, code recognition, and text clean-up for data pipelines."""
    ctx.obj = AppContext(
        BfnSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
