"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to subcommands via
``@click.pass_obj``.  Provides the lazily created graph store and
centralized result emission (stdout/stderr routing).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wgraph.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from wgraph.config.settings import WgraphSettings
    from wgraph.infrastructure.store import GraphStore
    from wgraph.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The store is created on first use, so ``--help`` and ``--version``
    never build a graph.  One store backs the whole menu session.
    """

    def __init__(self, settings: WgraphSettings) -> None:
        self.settings = settings
        self._store: GraphStore | None = None

        from wgraph.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from wgraph.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def store(self) -> GraphStore:
        """The graph store (created lazily on first access)."""
        if self._store is None:
            from wgraph.infrastructure.store import GraphStore

            self._store = GraphStore.from_settings(self.settings)
        return self._store

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            weight_precision=self.settings.output.weight_precision,
        )

    @property
    def prompts_to_stderr(self) -> bool:
        """Send menu text and prompts to stderr so stdout carries only results."""
        return self.settings.json_output or self.settings.quiet

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult.

        * Success (``result.ok``): writes to stdout.
        * Failure: writes to stderr.  The menu keeps running, so no exit
          code is set here.
        """
        output = format_result(result, settings=self.output_settings)
        click.echo(output, err=not result.ok)
