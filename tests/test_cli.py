"""Tests for the root wgraph CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from wgraph import __version__
from wgraph.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "wgraph" in result.output
    assert "menu" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_cli_no_args_starts_menu(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [], input="7\n8\n")
    assert result.exit_code == 0
    assert "1. Add Node" in result.stdout
    assert "Weighted Graph Representation:" in result.stdout
    assert "Exiting..." in result.stdout


@pytest.mark.parametrize(
    "flags",
    [["--json"], ["-q"], ["-v"], ["--log-json"], ["-c", "/tmp/missing-wgraph.toml"]],
)
def test_global_flags_accepted(cli_runner: CliRunner, flags: list[str]) -> None:
    result = cli_runner.invoke(cli, [*flags, "--version"])
    assert result.exit_code == 0


def test_menu_registered() -> None:
    assert "menu" in cli.commands


@pytest.mark.usefixtures("_isolated_cwd")
def test_invalid_config_value_is_reported(cli_runner: CliRunner, tmp_path: Path) -> None:
    (tmp_path / "wgraph.toml").write_text("[output]\nweight_precision = 0\n")
    result = cli_runner.invoke(cli, ["menu"], input="8\n")
    assert result.exit_code == 1
    assert "Error: Invalid configuration in" in result.stderr
    assert "weight_precision" in result.stderr
