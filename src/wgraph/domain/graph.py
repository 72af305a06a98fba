"""WeightedGraph — adjacency-list storage for a weighted directed graph.

Each node id maps to the ordered list of its outgoing edges.  Edge lists
keep insertion order and may contain parallel edges to the same
destination; nothing here deduplicates.

Two behaviours are kept on purpose and are observable:

- ``update_weight`` rewrites only the first matching edge.
- ``dfs`` uses an explicit stack, marks nodes on pop (not on push) and
  skips already-visited pops.  Its order differs from recursive pre-order
  DFS when several paths reach the same node.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass


class GraphError(Exception):
    """Base class for graph lookup failures."""


class NodeNotFoundError(GraphError):
    """Raised when an operation references a node that is not registered."""

    def __init__(self, node: str) -> None:
        super().__init__(f"Node '{node}' does not exist")
        self.node = node


class EdgeNotFoundError(GraphError):
    """Raised when no edge runs from *source* to *destination*."""

    def __init__(self, source: str, destination: str) -> None:
        super().__init__(f"Edge from '{source}' to '{destination}' does not exist")
        self.source = source
        self.destination = destination


@dataclass
class Edge:
    """Outgoing edge record.  The source is the key that owns the list."""

    destination: str
    weight: float


class WeightedGraph:
    """Mutable weighted directed graph keyed by string node ids."""

    def __init__(self) -> None:
        self._adjacency: dict[str, list[Edge]] = {}

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[str]:
        return iter(self._adjacency)

    def nodes(self) -> list[str]:
        """Node ids in insertion order."""
        return list(self._adjacency)

    def edges_from(self, node: str) -> list[Edge]:
        """Copy of *node*'s outgoing edges in insertion order."""
        try:
            edges = self._adjacency[node]
        except KeyError:
            raise NodeNotFoundError(node) from None
        return [Edge(e.destination, e.weight) for e in edges]

    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adjacency.values())

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_node(self, node: str) -> bool:
        """Register *node* with no edges.  Returns False if it already existed."""
        if node in self._adjacency:
            return False
        self._adjacency[node] = []
        return True

    def add_edge(self, source: str, destination: str, weight: float) -> list[str]:
        """Append an edge, creating missing endpoints first.

        Returns the ids of the nodes created by this call, source first.
        """
        created = [n for n in dict.fromkeys((source, destination)) if self.add_node(n)]
        self._adjacency[source].append(Edge(destination, float(weight)))
        return created

    def delete_node(self, node: str) -> int:
        """Remove *node* and every edge pointing at it.

        Returns the number of edges removed, counting the node's own
        outgoing edges.

        Raises:
            NodeNotFoundError: *node* is not registered.
        """
        if node not in self._adjacency:
            raise NodeNotFoundError(node)

        removed = 0
        for key, edges in self._adjacency.items():
            if key == node:
                continue
            kept = [e for e in edges if e.destination != node]
            removed += len(edges) - len(kept)
            self._adjacency[key] = kept
        removed += len(self._adjacency.pop(node))
        return removed

    def update_weight(self, source: str, destination: str, weight: float) -> float:
        """Overwrite the weight of the first *source* -> *destination* edge.

        Returns the previous weight.

        Raises:
            EdgeNotFoundError: *source* is missing or has no such edge.
        """
        for edge in self._adjacency.get(source, ()):
            if edge.destination == destination:
                previous = edge.weight
                edge.weight = float(weight)
                return previous
        raise EdgeNotFoundError(source, destination)

    # ------------------------------------------------------------------
    # Traversals
    # ------------------------------------------------------------------

    def bfs(self, start: str) -> list[str]:
        """Breadth-first visitation order from *start*.

        Neighbours are marked visited when enqueued, so each node is
        queued at most once.
        """
        if start not in self._adjacency:
            raise NodeNotFoundError(start)

        order: list[str] = []
        visited: set[str] = {start}
        queue: deque[str] = deque([start])
        while queue:
            current = queue.popleft()
            order.append(current)
            for edge in self._adjacency[current]:
                if edge.destination not in visited:
                    visited.add(edge.destination)
                    queue.append(edge.destination)
        return order

    def dfs(self, start: str) -> list[str]:
        """Depth-first visitation order from *start* using an explicit stack.

        Neighbours are pushed in edge order and marked only when popped,
        so the last-added edge is explored first and a node may sit on
        the stack more than once.
        """
        if start not in self._adjacency:
            raise NodeNotFoundError(start)

        order: list[str] = []
        visited: set[str] = set()
        stack: list[str] = [start]
        while stack:
            current = stack.pop()
            if current in visited:
                continue
            visited.add(current)
            order.append(current)
            for edge in self._adjacency[current]:
                if edge.destination not in visited:
                    stack.append(edge.destination)
        return order

    def snapshot(self) -> list[tuple[str, list[Edge]]]:
        """Every node with a copy of its outgoing edges, in registry order."""
        return [
            (node, [Edge(e.destination, e.weight) for e in edges])
            for node, edges in self._adjacency.items()
        ]
