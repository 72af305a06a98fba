"""GraphStore — owner of the process-lifetime graph.

The store is the single dependency injected into every service.  State is
never written anywhere; it lives exactly as long as the store does.

With ``thread_safe`` enabled, :meth:`transaction` serialises all access
behind one re-entrant lock.  The graph has no natural sharding key and
node deletion scans every adjacency list, so the lock covers the whole
structure.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager, nullcontext
from typing import TYPE_CHECKING

from wgraph.domain.graph import WeightedGraph

if TYPE_CHECKING:
    from collections.abc import Iterator
    from contextlib import AbstractContextManager

    from wgraph.config.settings import WgraphSettings

logger = logging.getLogger(__name__)


class GraphStore:
    """Holds one :class:`WeightedGraph` and guards access to it."""

    def __init__(self, *, thread_safe: bool = False) -> None:
        self._graph = WeightedGraph()
        self._thread_safe = thread_safe
        self._lock: AbstractContextManager[object] = (
            threading.RLock() if thread_safe else nullcontext()
        )

    @classmethod
    def from_settings(cls, settings: WgraphSettings) -> GraphStore:
        return cls(thread_safe=settings.graph.thread_safe)

    @property
    def thread_safe(self) -> bool:
        return self._thread_safe

    @property
    def graph(self) -> WeightedGraph:
        """The live graph.  Outside :meth:`transaction` there is no locking."""
        return self._graph

    @contextmanager
    def transaction(self) -> Iterator[WeightedGraph]:
        """Yield the graph with the store lock held (if any).

        Domain errors raised inside the block propagate unchanged.  The
        graph methods validate before mutating, so a failed operation
        leaves no partial change behind.

        Usage::

            with store.transaction() as graph:
                graph.add_edge("A", "B", 1.0)
        """
        with self._lock:
            yield self._graph

    def reset(self) -> None:
        """Discard every node and edge."""
        with self._lock:
            self._graph = WeightedGraph()
        logger.debug("Graph store reset")
