"""AppContext: the object every command receives via ``@click.pass_obj``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from catchup.config.logging import configure_logging
from catchup.output.formatters import OutputSettings, format_result
from catchup.services.telemetry import disable_telemetry, enable_telemetry

if TYPE_CHECKING:
    from catchup.config.settings import CatchupSettings
    from catchup.services.result import ServiceResult


class AppContext:
    """Resolved settings plus the single exit point for command output."""

    def __init__(self, settings: CatchupSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()
        else:
            disable_telemetry()

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; a failed result goes to stderr and exits with 1.

        Warnings go to stderr unless ``--json`` already carries them.
        """
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise click.exceptions.Exit(1)

        click.echo(text)
        if not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
