"""Rich Console factory and theme for tzc output.

Consoles render to a StringIO buffer so renderers keep a ``-> str``
contract. In non-TTY environments (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TZC_THEME = Theme(
    {
        "tzc.ok": "bold green",
        "tzc.error": "bold red",
        "tzc.warning": "bold yellow",
        "tzc.header": "bold",
        "tzc.label": "dim",
        "tzc.zone": "cyan",
        "tzc.time": "green",
        "tzc.timestamp": "blue",
        "tzc.note": "dim",
        "tzc.tip": "yellow",
    }
)


def create_console(
    *,
    no_color: bool = False,
    color: bool = False,
    width: int | None = None,
) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        color: Emit ANSI codes even though the buffer is not a terminal;
            set when the final destination is one.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=TZC_THEME,
        no_color=no_color,
        force_terminal=True if color and not no_color else None,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
