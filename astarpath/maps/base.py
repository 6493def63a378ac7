"""Abstract node-map contract consumed by the path finder."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Optional

from astarpath.types import NodeId, PathNode


class NodeMap(ABC, Generic[NodeId]):
    """Graph contract for :class:`astarpath.finder.PathFinder`.

    Implementations must be side-effect free from the finder's point of view:
    ``lookup`` may be called more than once per identifier, and concurrent
    searches may call both methods from different threads.
    """

    @abstractmethod
    def lookup(self, node_id: NodeId) -> Optional[PathNode[NodeId]]:
        """Resolve ``node_id`` to a node, or return ``None`` if it is unknown."""

    @abstractmethod
    def neighbors(self, node: PathNode[NodeId]) -> Iterable[PathNode[NodeId]]:
        """Yield nodes reachable from ``node``.

        Each returned node's ``cost`` is the cost of moving from ``node`` into
        it. ``node`` itself must not be returned.
        """

    def has_neighbors(self, node: PathNode[NodeId]) -> bool:
        """Return True if ``node`` has at least one neighbor."""
        return any(True for _ in self.neighbors(node))
