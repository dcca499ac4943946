"""Rich theme and an off-screen console for building output strings.

Renderers print into a :class:`~rich.console.Console` backed by a string
buffer and hand the text back to the CLI, which decides between stdout and
stderr. Colour codes appear only when Rich detects a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

RELAY_THEME = Theme(
    {
        "relay.ok": "bold green",
        "relay.error": "bold red",
        "relay.op": "bold cyan",
        "relay.key": "dim",
        "relay.id": "bold blue",
        "relay.granted": "bold green",
        "relay.denied": "bold red",
        "relay.muted": "dim",
    }
)

OUTPUT_WIDTH = 120


def create_console() -> Console:
    return Console(file=StringIO(), theme=RELAY_THEME, highlight=False, width=OUTPUT_WIDTH)


def get_output(console: Console) -> str:
    """Everything printed to a console made by :func:`create_console`."""
    buffer = console.file
    if not isinstance(buffer, StringIO):
        msg = "console was not created by create_console()"
        raise TypeError(msg)
    return buffer.getvalue()
