"""``catchup`` entry point: global flags, then the schedule and export commands."""

from __future__ import annotations

import click

from catchup import __version__
from catchup.commands import register_commands
from catchup.commands._context import AppContext
from catchup.config.settings import CatchupSettings


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="catchup")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only times, URLs or paths.")
@click.option("-v", "--verbose", is_flag=True, help="Add links, timings and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Use this catchup.toml instead of searching for one.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """Two reproducible catch-up times a year for any two people."""
    ctx.obj = AppContext(CatchupSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
