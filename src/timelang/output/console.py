"""Rich Console factory and theme for timelang output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TIMELANG_THEME = Theme(
    {
        "tl.ok": "bold green",
        "tl.error": "bold red",
        "tl.op": "bold cyan",
        "tl.key": "dim",
        "tl.canonical": "bold",
        "tl.node": "bold blue",
        "tl.field": "cyan",
        "tl.value": "magenta",
        "tl.caret": "bold red",
        "tl.kind.specific": "green",
        "tl.kind.duration": "yellow",
        "tl.kind.range": "blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=TIMELANG_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str | None) -> str:
    """Return the Rich style name for an expression kind."""
    return f"tl.kind.{kind}" if kind else ""
