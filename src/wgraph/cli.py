"""Root CLI group for wgraph with global flags and command registration."""

from __future__ import annotations

import click

from wgraph import __version__
from wgraph.commands import register_commands
from wgraph.commands._context import AppContext
from wgraph.config.settings import WgraphSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="wgraph")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logs and timing info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """wgraph — weighted directed graph playground.

    Without a subcommand, starts the interactive menu.
    """
    settings = WgraphSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        from wgraph.commands.menu import menu

        ctx.invoke(menu)


register_commands(cli)
