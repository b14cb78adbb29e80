"""Per-invocation state shared by every command.

The root group builds one :class:`AppContext` and stores it on
``click.Context.obj``; commands receive it through ``@click.pass_obj``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bfn.config.logging import configure_logging
from bfn.output.formatters import OutputSettings, format_result
from bfn.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from bfn.config.settings import BfnSettings
    from bfn.services.result import ServiceResult


class AppContext:
    def __init__(self, settings: BfnSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    @property
    def output_settings(self) -> OutputSettings:
        s = self.settings
        return OutputSettings(json_output=s.json_output, quiet=s.quiet, verbose=s.verbose)

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and exit with status 1 if it failed.

        Values go to stdout and failures to stderr, so a pipe only ever
        receives values. Quiet output has no room for warnings; they are
        echoed to stderr instead.
        """
        text = format_result(result, settings=self.output_settings)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if self.settings.quiet and not self.settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
