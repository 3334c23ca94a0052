"""Rich Console factory and theme for usecasectl output.

Consoles render into a StringIO buffer so renderers keep a
``-> str`` contract. Rich disables color codes automatically outside a
terminal (tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

UC_THEME = Theme(
    {
        "uc.ok": "bold green",
        "uc.error": "bold red",
        "uc.warning": "bold yellow",
        "uc.op": "bold cyan",
        "uc.key": "dim",
        "uc.id": "bold blue",
        "uc.title": "bold",
        "uc.field": "magenta",
        "uc.example": "italic dim",
        "uc.level.SUMMARY": "cyan",
        "uc.level.USER_GOAL": "green",
        "uc.level.SUBFUNCTION": "yellow",
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
        theme=UC_THEME,
        no_color=no_color,
        highlight=False,
        markup=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_goal_level(goal_level: str) -> str:
    """Return the Rich style name for a canonical goal level."""
    return f"uc.level.{goal_level}" if goal_level in ("SUMMARY", "USER_GOAL", "SUBFUNCTION") else ""
