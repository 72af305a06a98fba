"""Tests for WeightedGraph — storage invariants, mutations and traversals."""

from __future__ import annotations

import random

import networkx as nx
import pytest

from tests.conftest import build_triangle
from wgraph.domain.graph import (
    Edge,
    EdgeNotFoundError,
    GraphError,
    NodeNotFoundError,
    WeightedGraph,
)


def _edges(graph: WeightedGraph, node: str) -> list[tuple[str, float]]:
    return [(e.destination, e.weight) for e in graph.edges_from(node)]


# ---------------------------------------------------------------------------
# add_node
# ---------------------------------------------------------------------------


class TestAddNode:
    def test_new_node_reports_created(self, graph: WeightedGraph) -> None:
        assert graph.add_node("A") is True
        assert "A" in graph
        assert graph.edges_from("A") == []

    def test_existing_node_is_noop(self, graph: WeightedGraph) -> None:
        graph.add_edge("A", "B", 1.0)
        assert graph.add_node("A") is False
        assert graph.nodes() == ["A", "B"]
        assert _edges(graph, "A") == [("B", 1.0)]

    def test_registry_holds_distinct_ids(self, graph: WeightedGraph) -> None:
        ids = ["c", "a", "b", "a", "c", "c", "d"]
        for node in ids:
            graph.add_node(node)
        assert set(graph.nodes()) == set(ids)
        assert len(graph) == 4

    def test_insertion_order_preserved(self, graph: WeightedGraph) -> None:
        for node in ["z", "m", "a"]:
            graph.add_node(node)
        assert list(graph) == ["z", "m", "a"]


# ---------------------------------------------------------------------------
# add_edge
# ---------------------------------------------------------------------------


class TestAddEdge:
    def test_creates_both_endpoints(self, graph: WeightedGraph) -> None:
        created = graph.add_edge("A", "B", 1.5)
        assert created == ["A", "B"]
        assert graph.nodes() == ["A", "B"]
        assert _edges(graph, "A") == [("B", 1.5)]
        assert graph.edges_from("B") == []

    def test_creates_only_missing_endpoint(self, graph: WeightedGraph) -> None:
        graph.add_node("A")
        assert graph.add_edge("A", "B", 2.0) == ["B"]
        assert graph.add_edge("C", "A", 2.0) == ["C"]
        assert graph.add_edge("A", "C", 2.0) == []

    def test_parallel_edges_are_kept(self, graph: WeightedGraph) -> None:
        graph.add_edge("A", "B", 1.0)
        graph.add_edge("A", "B", 1.0)
        graph.add_edge("A", "B", 4.0)
        assert _edges(graph, "A") == [("B", 1.0), ("B", 1.0), ("B", 4.0)]
        assert graph.edge_count() == 3

    def test_self_loop(self, graph: WeightedGraph) -> None:
        assert graph.add_edge("X", "X", 0.5) == ["X"]
        assert _edges(graph, "X") == [("X", 0.5)]

    def test_weight_stored_as_float(self, graph: WeightedGraph) -> None:
        graph.add_edge("A", "B", 3)
        (edge,) = graph.edges_from("A")
        assert isinstance(edge.weight, float)


# ---------------------------------------------------------------------------
# delete_node
# ---------------------------------------------------------------------------


class TestDeleteNode:
    def test_removes_incoming_and_outgoing(self, graph: WeightedGraph) -> None:
        build_triangle(graph)
        removed = graph.delete_node("B")
        assert removed == 2
        assert graph.nodes() == ["A", "C"]
        assert _edges(graph, "A") == [("C", 2.0)]

    def test_no_dangling_references(self, graph: WeightedGraph) -> None:
        graph.add_edge("A", "X", 1.0)
        graph.add_edge("B", "X", 1.0)
        graph.add_edge("B", "X", 2.0)
        graph.add_edge("X", "A", 1.0)
        graph.add_edge("C", "A", 1.0)
        graph.delete_node("X")
        for node, edges in graph.snapshot():
            assert node != "X"
            assert all(e.destination != "X" for e in edges)
        assert _edges(graph, "C") == [("A", 1.0)]

    def test_self_loop_counted_once(self, graph: WeightedGraph) -> None:
        graph.add_edge("X", "X", 1.0)
        graph.add_edge("Y", "X", 1.0)
        assert graph.delete_node("X") == 2
        assert graph.nodes() == ["Y"]

    def test_missing_node_raises_without_change(self, graph: WeightedGraph) -> None:
        build_triangle(graph)
        before = graph.snapshot()
        with pytest.raises(NodeNotFoundError) as exc_info:
            graph.delete_node("Q")
        assert exc_info.value.node == "Q"
        assert graph.snapshot() == before

    def test_isolated_node(self, graph: WeightedGraph) -> None:
        graph.add_node("solo")
        assert graph.delete_node("solo") == 0
        assert len(graph) == 0


# ---------------------------------------------------------------------------
# update_weight
# ---------------------------------------------------------------------------


class TestUpdateWeight:
    def test_updates_weight(self, graph: WeightedGraph) -> None:
        graph.add_edge("A", "B", 1.0)
        assert graph.update_weight("A", "B", 7.5) == 1.0
        assert _edges(graph, "A") == [("B", 7.5)]

    def test_only_first_parallel_edge_changes(self, graph: WeightedGraph) -> None:
        graph.add_edge("A", "C", 0.1)
        graph.add_edge("A", "B", 1.0)
        graph.add_edge("A", "B", 5.0)
        graph.update_weight("A", "B", 9.0)
        assert _edges(graph, "A") == [("C", 0.1), ("B", 9.0), ("B", 5.0)]

    def test_missing_source(self, graph: WeightedGraph) -> None:
        with pytest.raises(EdgeNotFoundError) as exc_info:
            graph.update_weight("A", "B", 1.0)
        assert (exc_info.value.source, exc_info.value.destination) == ("A", "B")
        assert len(graph) == 0

    def test_missing_edge(self, graph: WeightedGraph) -> None:
        build_triangle(graph)
        before = graph.snapshot()
        with pytest.raises(EdgeNotFoundError):
            graph.update_weight("C", "A", 1.0)
        assert graph.snapshot() == before

    def test_reverse_direction_is_not_a_match(self, graph: WeightedGraph) -> None:
        graph.add_edge("A", "B", 1.0)
        with pytest.raises(EdgeNotFoundError):
            graph.update_weight("B", "A", 2.0)


# ---------------------------------------------------------------------------
# Traversals
# ---------------------------------------------------------------------------


class TestBfs:
    def test_triangle(self, graph: WeightedGraph) -> None:
        assert build_triangle(graph).bfs("A") == ["A", "B", "C"]

    def test_follows_edge_insertion_order(self, graph: WeightedGraph) -> None:
        graph.add_edge("A", "C", 1.0)
        graph.add_edge("A", "B", 1.0)
        graph.add_edge("C", "D", 1.0)
        assert graph.bfs("A") == ["A", "C", "B", "D"]

    def test_only_reachable_nodes(self, graph: WeightedGraph) -> None:
        build_triangle(graph)
        graph.add_node("isolated")
        assert graph.bfs("B") == ["B", "C"]
        assert graph.bfs("isolated") == ["isolated"]

    def test_cycle_visits_once(self, graph: WeightedGraph) -> None:
        graph.add_edge("A", "B", 1.0)
        graph.add_edge("B", "A", 1.0)
        graph.add_edge("B", "B", 1.0)
        assert graph.bfs("A") == ["A", "B"]

    def test_missing_start(self, graph: WeightedGraph) -> None:
        with pytest.raises(NodeNotFoundError):
            graph.bfs("nope")

    def test_matches_networkx_order(self) -> None:
        rng = random.Random(7)
        for _ in range(25):
            graph = WeightedGraph()
            oracle = nx.DiGraph()
            names = [f"n{i}" for i in range(12)]
            for _ in range(30):
                u, v = rng.choice(names), rng.choice(names)
                if oracle.has_edge(u, v):
                    continue
                graph.add_edge(u, v, rng.random())
                oracle.add_edge(u, v)
            start = graph.nodes()[0]
            expected = [start] + [v for _, v in nx.bfs_edges(oracle, start)]
            assert graph.bfs(start) == expected


class TestDfs:
    def test_triangle_last_edge_first(self, graph: WeightedGraph) -> None:
        assert build_triangle(graph).dfs("A") == ["A", "C", "B"]

    def test_duplicate_pushes_visited_once(self, graph: WeightedGraph) -> None:
        graph.add_edge("A", "B", 1.0)
        graph.add_edge("A", "B", 1.0)
        graph.add_edge("A", "C", 1.0)
        assert graph.dfs("A") == ["A", "C", "B"]

    def test_late_push_pops_before_earlier_one(self, graph: WeightedGraph) -> None:
        # B is pushed by A, then again by C; the copy pushed by C pops first.
        graph.add_edge("A", "B", 1.0)
        graph.add_edge("A", "C", 1.0)
        graph.add_edge("C", "B", 1.0)
        graph.add_edge("B", "D", 1.0)
        assert graph.dfs("A") == ["A", "C", "B", "D"]

    def test_differs_from_recursive_preorder(self, graph: WeightedGraph) -> None:
        build_triangle(graph)
        oracle = nx.DiGraph([("A", "B"), ("A", "C"), ("B", "C")])
        assert list(nx.dfs_preorder_nodes(oracle, "A")) == ["A", "B", "C"]
        assert graph.dfs("A") == ["A", "C", "B"]

    def test_cycle(self, graph: WeightedGraph) -> None:
        graph.add_edge("A", "B", 1.0)
        graph.add_edge("B", "C", 1.0)
        graph.add_edge("C", "A", 1.0)
        assert graph.dfs("A") == ["A", "B", "C"]

    def test_missing_start(self, graph: WeightedGraph) -> None:
        with pytest.raises(NodeNotFoundError):
            graph.dfs("nope")


# ---------------------------------------------------------------------------
# snapshot / errors
# ---------------------------------------------------------------------------


class TestSnapshot:
    def test_registry_order_and_edges(self, graph: WeightedGraph) -> None:
        build_triangle(graph)
        graph.add_node("D")
        assert graph.snapshot() == [
            ("A", [Edge("B", 1.0), Edge("C", 2.0)]),
            ("B", [Edge("C", 3.0)]),
            ("C", []),
            ("D", []),
        ]

    def test_returns_copies(self, graph: WeightedGraph) -> None:
        graph.add_edge("A", "B", 1.0)
        snap = graph.snapshot()
        snap[0][1][0].weight = 99.0
        snap[0][1].clear()
        assert _edges(graph, "A") == [("B", 1.0)]

    def test_empty(self, graph: WeightedGraph) -> None:
        assert graph.snapshot() == []


class TestErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(NodeNotFoundError, GraphError)
        assert issubclass(EdgeNotFoundError, GraphError)

    def test_messages(self) -> None:
        assert str(NodeNotFoundError("A")) == "Node 'A' does not exist"
        assert str(EdgeNotFoundError("A", "B")) == "Edge from 'A' to 'B' does not exist"

    def test_edges_from_missing_node(self, graph: WeightedGraph) -> None:
        with pytest.raises(NodeNotFoundError):
            graph.edges_from("A")
