"""Search-node bookkeeping for a single path search.

Search nodes form a tree rooted at the start node. They are stored in a flat
list and refer to their parent by index, so walking back from the
destination is a sequence of list lookups and no node keeps another alive.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from astarpath.types import Cost, PathNode


@dataclass(frozen=True)
class SearchNode:
    """One entry of the search tree.

    Attributes:
        node: Graph node this entry wraps.
        parent: Index of the parent entry, or ``None`` for the root.
        g: Accumulated cost from the start node.
        h: Heuristic estimate to the destination.
    """

    node: PathNode
    parent: Optional[int]
    g: Cost
    h: Cost

    @property
    def f(self) -> Cost:
        """Total score ``g + h``."""
        return self.g + self.h


class SearchTree:
    """Append-only arena of :class:`SearchNode` records."""

    def __init__(self) -> None:
        self._entries: List[SearchNode] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> SearchNode:
        return self._entries[index]

    def add_root(self, node: PathNode, h: Cost) -> int:
        """Insert the start node; its ``g`` is its own cost."""
        if self._entries:
            raise ValueError("Search tree already has a root")
        self._entries.append(SearchNode(node, None, node.cost, h))
        return 0

    def add_child(self, parent: int, node: PathNode, h: Cost) -> int:
        """Insert ``node`` reached from entry ``parent``; return its index.

        ``g`` is the parent's ``g`` plus the cost of entering ``node``.
        """
        parent_entry = self._entries[parent]
        self._entries.append(SearchNode(node, parent, parent_entry.g + node.cost, h))
        return len(self._entries) - 1

    def backtrack(self, index: int) -> List[PathNode]:
        """Return graph nodes from the root down to entry ``index``."""
        nodes: List[PathNode] = []
        current: Optional[int] = index
        while current is not None:
            entry = self._entries[current]
            nodes.append(entry.node)
            current = entry.parent
        nodes.reverse()
        return nodes
