"""Rich renderers for schedule and export results.

Each renderer prints into a StringIO-backed console from
:mod:`catchup.output.console`; :func:`render_result` returns the text.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from catchup.domain.calendar import format_basic
from catchup.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from catchup.services.result import ServiceResult

_EXPORT_FIELDS = ("output_file", "filename", "mime_type", "start_year", "horizon", "event_count")


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* for a terminal; ``verbose`` adds links, detail and timings."""
    console = create_console()
    if result.ok:
        _RENDERERS[result.op](result, console, verbose)
    else:
        _render_error(result, console, verbose)

    telemetry = (result.meta or {}).get("telemetry")
    if verbose and telemetry:
        console.print()
        console.print(_span_tree(telemetry))
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Bare output for ``--quiet``.

    Schedules print one ``YEAR FIRST SECOND`` line per year in compact UTC
    form, link exports one URL per line, and written calendars their path.
    """
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        return f"ERROR {result.op}: {message}"

    data = result.data
    if result.op == "schedule":
        return "\n".join(
            f"{e['year']} {_compact(e['first'])} {_compact(e['second'])}" for e in data["events"]
        )
    if result.op == "export_links":
        return "\n".join(link["url"] for link in data["links"])
    return str(data["output_file"])


def _compact(iso: str) -> str:
    return format_basic(datetime.fromisoformat(iso))


def _header(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "catchup.ok"), "  ", (result.op, "catchup.op")))


def _fields(console: Console, rows: Mapping[str, Any]) -> None:
    grid = Table.grid(padding=(0, 1))
    grid.add_column(style="catchup.key")
    grid.add_column()
    for key, value in rows.items():
        grid.add_row(Text(f"  {key}:"), Text(str(value)))
    console.print(grid)


def _span_tree(span: Mapping[str, Any], parent: Tree | None = None) -> Tree:
    ms = span.get("duration_ms", 0.0)
    style = "bold red" if ms > 1000 else "yellow" if ms > 100 else "dim"
    label = Text.assemble((f"{ms:8.2f}ms", style), f"  {span.get('name', '?')}")
    if notes := span.get("annotations"):
        label.append("  (" + ", ".join(f"{k}={v}" for k, v in notes.items()) + ")")

    node = Tree(label, guide_style="dim") if parent is None else parent.add(label)
    for child in span.get("children", []):
        _span_tree(child, node)
    return node


def _render_error(result: ServiceResult, console: Console, verbose: bool) -> None:
    error = result.error
    console.print(
        Text.assemble(
            ("ERROR", "catchup.error"),
            "  ",
            (result.op, "catchup.op"),
            f": {error.message if error else 'Unknown error'}",
        )
    )
    if verbose and error and error.detail:
        console.print(Text("  detail", style="dim"))
        _fields(console, error.detail)


def _render_schedule(result: ServiceResult, console: Console, verbose: bool) -> None:
    data = result.data
    _header(console, result)
    _fields(console, {"participants": ", ".join(data["participants"]), "title": data["title"]})
    console.print()

    table = Table(pad_edge=False)
    table.add_column("Year", style="catchup.year", no_wrap=True)
    table.add_column("First Catchup", style="catchup.time")
    table.add_column("Second Catchup", style="catchup.time")
    for event in data["events"]:
        table.add_row(str(event["year"]), event["first_human"], event["second_human"])
    console.print(table)

    if verbose:
        console.print()
        for event in data["events"]:
            for which in ("first", "second"):
                console.print(
                    Text.assemble(
                        (f"  {event['year']} {which:<6} ", "catchup.key"),
                        (event[f"{which}_url"], "catchup.url"),
                    ),
                    soft_wrap=True,
                )


def _render_export_ics(result: ServiceResult, console: Console, verbose: bool) -> None:
    _header(console, result)
    _fields(console, {key: result.data[key] for key in _EXPORT_FIELDS if key in result.data})


def _render_export_links(result: ServiceResult, console: Console, verbose: bool) -> None:
    _header(console, result)
    _fields(console, {"count": result.data["count"]})
    for link in result.data["links"]:
        console.print(
            Text.assemble(
                (f"  {link['year']} {link['which']:<6} ", "catchup.year"),
                (link["start"], "catchup.time"),
            )
        )
        console.print(Text(f"    {link['url']}", style="catchup.url"), soft_wrap=True)


_RENDERERS: dict[str, Callable[[ServiceResult, Console, bool], None]] = {
    "schedule": _render_schedule,
    "export_ics": _render_export_ics,
    "export_links": _render_export_links,
}
