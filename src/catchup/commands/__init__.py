"""catchup subcommands, attached to the root group by :func:`register_commands`."""

from __future__ import annotations

import click

from catchup.commands.export import export
from catchup.commands.schedule import schedule


def register_commands(cli: click.Group) -> None:
    for command in (schedule, export):
        cli.add_command(command)
