"""Shared pytest fixtures and test helpers for wgraph tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from wgraph.domain.graph import WeightedGraph
from wgraph.infrastructure.store import GraphStore
from wgraph.services.graph import GraphService
from wgraph.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def graph() -> WeightedGraph:
    return WeightedGraph()


@pytest.fixture
def store() -> GraphStore:
    return GraphStore()


@pytest.fixture
def service(store: GraphStore) -> GraphService:
    return GraphService(store)


@pytest.fixture(autouse=True)
def _no_telemetry() -> Generator[None]:
    """Verbose CLI runs enable telemetry in the test thread's context."""
    yield
    disable_telemetry()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """CLI invocations reconfigure root logging; undo that after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    wgraph_level = logging.getLogger("wgraph").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("wgraph").setLevel(wgraph_level)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp dir so no stray wgraph.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("WGRAPH_CONFIG", raising=False)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def build_triangle(graph: WeightedGraph) -> WeightedGraph:
    """A->B (1.0), A->C (2.0), B->C (3.0)."""
    graph.add_edge("A", "B", 1.0)
    graph.add_edge("A", "C", 2.0)
    graph.add_edge("B", "C", 3.0)
    return graph


def menu_input(*steps: object) -> str:
    """Join menu answers into CliRunner input, always ending with Exit."""
    lines = [str(s) for s in steps]
    if not lines or lines[-1] != "8":
        lines.append("8")
    return "\n".join(lines) + "\n"
