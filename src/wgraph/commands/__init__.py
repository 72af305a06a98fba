"""Subcommand modules for wgraph.

Provides register_commands(), which imports command modules lazily so
``wgraph --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from wgraph.commands.menu import menu

    cli.add_command(menu)
