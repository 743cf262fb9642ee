"""Command group: calendar export (iCalendar file, calendar links)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from catchup.commands._base import CatchupGroup, participant_arguments, schedule_options

if TYPE_CHECKING:
    from catchup.commands._context import AppContext

_EXPORT_EXAMPLES = """\
  catchup export ics alice@example.com bob@example.com --output catchups.ics
  catchup export ics alice@example.com bob@example.com > catchups.ics
  catchup export links alice@example.com bob@example.com"""


@click.group(cls=CatchupGroup, examples=_EXPORT_EXAMPLES)
@click.pass_obj
def export(app: AppContext) -> None:
    """Export the schedule in calendar-importable formats."""


@export.command(
    examples="""\
  catchup export ics alice@example.com bob@example.com --output catchups.ics
  catchup export ics alice@example.com bob@example.com --output ~/Downloads/
  catchup export ics alice@example.com bob@example.com | less"""
)
@participant_arguments
@schedule_options
@click.option(
    "--output",
    "output_file",
    type=click.Path(),
    default=None,
    help="Output file or directory (omit to print to stdout).",
)
@click.pass_obj
def ics(
    app: AppContext,
    email_a: str,
    email_b: str,
    start_year: int | None,
    horizon: int | None,
    output_file: str | None,
) -> None:
    """Export every catch-up as one iCalendar (.ics) file."""
    from catchup.services.export import ExportService

    output = Path(output_file).expanduser() if output_file else None
    result = ExportService(app.settings).export_ics(
        email_a, email_b, output=output, start_year=start_year, horizon=horizon
    )

    if not result.ok or output is not None or app.settings.json_output:
        app.emit(result)
        return

    # Pipe-friendly: raw calendar to stdout
    click.echo(result.data["content"], nl=False)


@export.command(
    examples="""\
  catchup export links alice@example.com bob@example.com
  catchup -q export links alice@example.com bob@example.com --horizon 1"""
)
@participant_arguments
@schedule_options
@click.pass_obj
def links(
    app: AppContext,
    email_a: str,
    email_b: str,
    start_year: int | None,
    horizon: int | None,
) -> None:
    """Print a Google Calendar "create event" link for every catch-up."""
    from catchup.services.export import ExportService

    app.emit(
        ExportService(app.settings).export_links(
            email_a, email_b, start_year=start_year, horizon=horizon
        )
    )
