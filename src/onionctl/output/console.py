"""Rich Console factory and theme for onionctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ONION_THEME = Theme(
    {
        "onion.ok": "bold green",
        "onion.error": "bold red",
        "onion.warning": "bold yellow",
        "onion.op": "bold cyan",
        "onion.key": "dim",
        "onion.ring.entities": "green",
        "onion.ring.domain": "blue",
        "onion.ring.application": "magenta",
        "onion.ring.repositories": "yellow",
    }
)

_RING_STYLES: dict[str, str] = {
    "Entities": "onion.ring.entities",
    "Domain Services": "onion.ring.domain",
    "Application Services": "onion.ring.application",
    "Repositories": "onion.ring.repositories",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ONION_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_ring(ring: str) -> str:
    """Return the Rich style name for a ring label."""
    return _RING_STYLES.get(ring, "")
