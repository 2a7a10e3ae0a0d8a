"""Rich Console factory and theme for zooctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ZOO_THEME = Theme(
    {
        "zoo.ok": "bold green",
        "zoo.error": "bold red",
        "zoo.warning": "bold yellow",
        "zoo.op": "bold cyan",
        "zoo.key": "dim",
        "zoo.id": "bold blue",
        "zoo.name": "bold",
        "zoo.health.stable": "green",
        "zoo.health.recovering": "yellow",
        "zoo.health.critical": "bold red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=ZOO_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_health(health_status: str) -> str:
    """Return the Rich style name for a health status (unknown values unstyled)."""
    if health_status in ("stable", "recovering", "critical"):
        return f"zoo.health.{health_status}"
    return ""
