"""Rich Console factory and theme for wgraph output.

Consoles render into a StringIO buffer so renderers stay pure
``ServiceResult -> str`` functions.  Off a terminal (tests, pipes) Rich
drops the color codes by itself.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

WGRAPH_THEME = Theme(
    {
        "wg.ok": "bold green",
        "wg.info": "yellow",
        "wg.error": "bold red",
        "wg.op": "bold cyan",
        "wg.node": "bold blue",
        "wg.weight": "magenta",
        "wg.heading": "bold",
        "wg.key": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width.
    """
    return Console(
        file=StringIO(),
        theme=WGRAPH_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def format_weight(weight: float, precision: int = 6) -> str:
    """Format *weight* with *precision* significant digits (``1.0`` -> ``1``)."""
    return f"{weight:.{precision}g}"
