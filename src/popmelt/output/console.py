"""Rich Console factory and theme for popmelt output.

Consoles render into a StringIO buffer so formatters keep returning ``str``.
Rich drops color codes automatically when there is no terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

POPMELT_THEME = Theme(
    {
        "pm.ok": "bold green",
        "pm.error": "bold red",
        "pm.warning": "bold yellow",
        "pm.op": "bold cyan",
        "pm.key": "dim",
        "pm.id": "bold blue",
        "pm.name": "bold",
    }
)


def create_console(*, width: int | None = None) -> Console:
    return Console(
        file=StringIO(),
        theme=POPMELT_THEME,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
