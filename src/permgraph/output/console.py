"""Rich Console factory and theme for permgraph output.

Consoles render into a StringIO buffer so every renderer keeps the
``render_result() -> str`` contract. Outside a terminal (tests, pipes) Rich
drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PERMGRAPH_THEME = Theme(
    {
        "pg.ok": "bold green",
        "pg.error": "bold red",
        "pg.op": "bold cyan",
        "pg.key": "dim",
        "pg.index": "bold blue",
        "pg.label": "bold",
        "pg.edge": "magenta",
        "pg.yes": "green",
        "pg.no": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=PERMGRAPH_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
