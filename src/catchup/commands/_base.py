"""Click building blocks shared by catchup commands.

``CatchupCommand``/``CatchupGroup`` take an ``examples=`` string and expose
it as an eager ``--examples`` flag. The decorators below declare the
arguments and options common to every schedule-producing command.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

import click

P = ParamSpec("P")
R = TypeVar("R")


def _examples_option(examples: str) -> click.Option:
    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{examples}")
            ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples.",
    )


class CatchupCommand(click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        if examples:
            self.params.append(_examples_option(examples))


class CatchupGroup(click.Group):
    """Group whose subcommands are CatchupCommands by default."""

    command_class = CatchupCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        if examples:
            self.params.append(_examples_option(examples))


def participant_arguments(func: Callable[P, R]) -> Callable[P, R]:
    """Apply the two participant email arguments to a command."""
    func = click.argument("email_b", metavar="EMAIL_B")(func)
    func = click.argument("email_a", metavar="EMAIL_A")(func)
    return func


def schedule_options(func: Callable[P, R]) -> Callable[P, R]:
    """Apply the shared year-range flags to a command."""
    func = click.option(
        "--horizon",
        type=click.IntRange(min=1),
        default=None,
        help="Number of consecutive years (default: [schedule] horizon_years).",
    )(func)
    func = click.option(
        "--start-year",
        type=int,
        default=None,
        help="First year of the schedule (default: current UTC year).",
    )(func)
    return func
