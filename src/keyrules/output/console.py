"""Rich Console factory and theme for keyrules output.

Consoles render to a StringIO buffer so renderers keep a
``render_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

KEYRULES_THEME = Theme(
    {
        "kr.ok": "bold green",
        "kr.error": "bold red",
        "kr.op": "bold cyan",
        "kr.key": "bold",
        "kr.field": "dim",
        "kr.message": "yellow",
        "kr.presence.required": "magenta",
        "kr.presence.optional": "blue",
    }
)


def create_console(*, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=KEYRULES_THEME,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_presence(presence: str) -> str:
    """Return the Rich style name for a presence value."""
    return f"kr.presence.{presence}" if presence in ("required", "optional") else ""
