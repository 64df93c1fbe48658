"""Rich Console factory and theme for enumplay output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ENUMPLAY_THEME = Theme(
    {
        "ep.ok": "bold green",
        "ep.error": "bold red",
        "ep.op": "bold cyan",
        "ep.key": "dim",
        "ep.set": "bold magenta",
        "ep.variant": "bold blue",
        "ep.raw": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Emoji shortcodes are off: raw values such as ``:-)`` must print verbatim.
    """
    return Console(
        file=StringIO(),
        theme=ENUMPLAY_THEME,
        no_color=no_color,
        highlight=False,
        emoji=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
