"""Themed Rich consoles that render into a string buffer.

Color is dropped automatically when stdout is not a terminal (pipes,
CliRunner), so renderer output is plain text there.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CATCHUP_THEME = Theme(
    {
        "catchup.ok": "bold green",
        "catchup.error": "bold red",
        "catchup.op": "bold cyan",
        "catchup.key": "dim",
        "catchup.year": "bold blue",
        "catchup.time": "green",
        "catchup.path": "dim",
        "catchup.title": "bold",
        "catchup.url": "dim underline",
    }
)

# Wide enough for the schedule table's two long date columns.
CONSOLE_WIDTH = 120


def create_console() -> Console:
    return Console(file=StringIO(), theme=CATCHUP_THEME, highlight=False, width=CONSOLE_WIDTH)


def get_output(console: Console) -> str:
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
