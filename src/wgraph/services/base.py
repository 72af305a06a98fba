"""BaseService — foundation for wgraph services.

Every service receives a :class:`GraphStore` at construction time and
does all graph access inside ``self._store.transaction()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wgraph.infrastructure.store import GraphStore


class BaseService:
    """Base for service-layer classes.

    Usage::

        class GraphService(BaseService):
            def add_node(self, node: str) -> ServiceResult:
                with self._store.transaction() as graph:
                    ...
    """

    def __init__(self, store: GraphStore) -> None:
        self._store = store
