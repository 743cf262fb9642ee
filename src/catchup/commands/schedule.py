"""Standalone command: show the derived catch-up schedule."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from catchup.commands._base import CatchupCommand, participant_arguments, schedule_options

if TYPE_CHECKING:
    from catchup.commands._context import AppContext


@click.command(
    cls=CatchupCommand,
    examples="""\
  catchup schedule alice@example.com bob@example.com
  catchup schedule alice@example.com bob@example.com --start-year 2030 --horizon 5
  catchup --json schedule alice@example.com bob@example.com""",
)
@participant_arguments
@schedule_options
@click.pass_obj
def schedule(
    app: AppContext,
    email_a: str,
    email_b: str,
    start_year: int | None,
    horizon: int | None,
) -> None:
    """Show two catch-up times per year for EMAIL_A and EMAIL_B."""
    from catchup.services.schedule import ScheduleService

    app.emit(
        ScheduleService(app.settings).generate(
            email_a, email_b, start_year=start_year, horizon=horizon
        )
    )
