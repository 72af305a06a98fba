"""GraphService — the seven graph operations behind the menu.

Each method runs inside ``store.transaction()``, converts domain errors
into ``NOT_FOUND`` results, and returns a :class:`ServiceResult` whose
``data`` is plain JSON-ready values.
"""

from __future__ import annotations

from typing import Any

import structlog

from wgraph.domain.graph import EdgeNotFoundError, NodeNotFoundError
from wgraph.services.base import BaseService
from wgraph.services.result import ServiceResult
from wgraph.services.telemetry import trace_span, traced

log = structlog.get_logger(__name__)


class GraphService(BaseService):
    """Mutations, traversals and the full-graph listing."""

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    @traced
    def add_node(self, node: str) -> ServiceResult:
        """Register *node*.  An existing node is reported, not an error."""
        with self._store.transaction() as graph:
            created = graph.add_node(node)
        log.debug("node.added" if created else "node.exists", node=node)
        return ServiceResult(ok=True, op="add_node", data={"node": node, "created": created})

    @traced
    def add_edge(self, source: str, destination: str, weight: float) -> ServiceResult:
        """Append a *source* -> *destination* edge, creating missing endpoints."""
        with self._store.transaction() as graph:
            created_nodes = graph.add_edge(source, destination, weight)
        log.debug(
            "edge.added",
            source=source,
            destination=destination,
            weight=weight,
            created_nodes=created_nodes,
        )
        return ServiceResult(
            ok=True,
            op="add_edge",
            data={
                "source": source,
                "destination": destination,
                "weight": float(weight),
                "created_nodes": created_nodes,
            },
        )

    @traced
    def delete_node(self, node: str) -> ServiceResult:
        """Remove *node* along with every edge into or out of it."""
        try:
            with self._store.transaction() as graph:
                edges_removed = graph.delete_node(node)
        except NodeNotFoundError:
            log.debug("node.missing", op="delete_node", node=node)
            return ServiceResult.not_found(
                "delete_node", f"Node '{node}' does not exist", node=node
            )
        log.debug("node.deleted", node=node, edges_removed=edges_removed)
        return ServiceResult(
            ok=True,
            op="delete_node",
            data={"node": node, "edges_removed": edges_removed},
        )

    @traced
    def update_weight(self, source: str, destination: str, weight: float) -> ServiceResult:
        """Rewrite the weight of the first *source* -> *destination* edge.

        Parallel edges after the first one keep their weights.
        """
        try:
            with self._store.transaction() as graph:
                previous = graph.update_weight(source, destination, weight)
        except EdgeNotFoundError:
            log.debug("edge.missing", source=source, destination=destination)
            return ServiceResult.not_found(
                "update_weight",
                f"Edge from '{source}' to '{destination}' does not exist",
                source=source,
                destination=destination,
            )
        log.debug(
            "edge.weight_updated",
            source=source,
            destination=destination,
            previous=previous,
            weight=weight,
        )
        return ServiceResult(
            ok=True,
            op="update_weight",
            data={
                "source": source,
                "destination": destination,
                "weight": float(weight),
                "previous_weight": previous,
            },
        )

    # ------------------------------------------------------------------
    # Traversals
    # ------------------------------------------------------------------

    @traced
    def bfs(self, start: str) -> ServiceResult:
        """Breadth-first visitation order from *start*."""
        return self._traverse("bfs", start)

    @traced
    def dfs(self, start: str) -> ServiceResult:
        """Depth-first (explicit stack) visitation order from *start*."""
        return self._traverse("dfs", start)

    def _traverse(self, op: str, start: str) -> ServiceResult:
        with trace_span(op) as span:
            try:
                with self._store.transaction() as graph:
                    order = graph.bfs(start) if op == "bfs" else graph.dfs(start)
            except NodeNotFoundError:
                log.debug("node.missing", op=op, node=start)
                return ServiceResult.not_found(
                    op, f"Start node '{start}' does not exist", node=start
                )
            if span:
                span.annotate("visited", len(order))

        log.debug("traversal.complete", op=op, start=start, visited=len(order))
        return ServiceResult(
            ok=True,
            op=op,
            data={"start": start, "count": len(order), "order": order},
        )

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    @traced
    def print_graph(self) -> ServiceResult:
        """Every node with its outgoing edges, in insertion order."""
        with self._store.transaction() as graph:
            snapshot = graph.snapshot()

        nodes: list[dict[str, Any]] = [
            {
                "id": node,
                "edges": [{"destination": e.destination, "weight": e.weight} for e in edges],
            }
            for node, edges in snapshot
        ]
        return ServiceResult(
            ok=True,
            op="print_graph",
            data={
                "node_count": len(nodes),
                "edge_count": sum(len(n["edges"]) for n in nodes),
                "nodes": nodes,
            },
        )
