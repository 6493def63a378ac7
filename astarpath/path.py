"""Immutable result of a path search.

A ``Path`` stores the nodes visited from start to destination together with
the total cost. Costs are derived from the nodes themselves (each node knows
the cost of entering it), so the cost of a path built by concatenation always
agrees with the cost recomputed from its node sequence.

The empty path (no nodes, zero cost) is the canonical "no route" result and
is exposed as the ``EMPTY_PATH`` singleton.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import cached_property
from itertools import accumulate
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from astarpath.types import Cost, NodeId, PathNode
from astarpath.utils.ids import EMPTY_RUN_ID, new_run_id


@dataclass(frozen=True, eq=False)
class Path:
    """Ordered, immutable sequence of nodes with a total cost.

    Attributes:
        nodes: Nodes from start to destination.
        path_id: Run identifier, generated fresh unless given. Not part of
            equality or hashing.
        tag: Free-form caller bookkeeping. Not part of equality or hashing.
        cost: Sum of ``node.cost`` over ``nodes``.
    """

    nodes: Tuple[PathNode, ...] = ()
    path_id: Optional[str] = None
    tag: Any = None
    cost: Cost = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        nodes = tuple(self.nodes)
        object.__setattr__(self, "nodes", nodes)
        if self.path_id is None:
            object.__setattr__(self, "path_id", new_run_id())
        object.__setattr__(self, "cost", self._prefix_costs[-1] if nodes else 0.0)

    @classmethod
    def empty(cls) -> "Path":
        """Return the canonical empty path."""
        return EMPTY_PATH

    @cached_property
    def _prefix_costs(self) -> Tuple[Cost, ...]:
        return tuple(accumulate(node.cost for node in self.nodes))

    @cached_property
    def node_ids(self) -> Tuple[NodeId, ...]:
        """Identifiers of the nodes in path order."""
        return tuple(node.id for node in self.nodes)

    @property
    def is_empty(self) -> bool:
        return len(self.nodes) == 0

    @property
    def src_node(self) -> PathNode:
        """Return the first node in the path.

        Raises:
            IndexError: If the path is empty.
        """
        if not self.nodes:
            raise IndexError("Empty path has no source node")
        return self.nodes[0]

    @property
    def dst_node(self) -> PathNode:
        """Return the last node in the path.

        Raises:
            IndexError: If the path is empty.
        """
        if not self.nodes:
            raise IndexError("Empty path has no destination node")
        return self.nodes[-1]

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[PathNode]:
        return iter(self.nodes)

    def __getitem__(self, idx: int) -> PathNode:
        return self.nodes[idx]

    def cost_at_index(self, index: int) -> Cost:
        """Return the cumulative cost from the first node through ``index``.

        Args:
            index: Position of the node in the path. Negative indexes are not
                accepted.

        Returns:
            Sum of node costs for ``nodes[0..index]`` inclusive.

        Raises:
            IndexError: If ``index`` is outside ``[0, len(path))``.
        """
        if index < 0 or index >= len(self.nodes):
            raise IndexError(
                f"Index {index} is out of range for a path of {len(self.nodes)} nodes"
            )
        return self._prefix_costs[index]

    def concat(self, other: "Path") -> "Path":
        """Return a new path made of this path's nodes followed by ``other``'s.

        Neither operand is modified; the result gets a fresh ``path_id``.

        Raises:
            TypeError: If ``other`` is not a ``Path``.
        """
        if not isinstance(other, Path):
            raise TypeError(f"Cannot concatenate Path with {type(other).__name__}")
        return Path(self.nodes + other.nodes)

    def __add__(self, other: Any) -> "Path":
        if not isinstance(other, Path):
            return NotImplemented
        return self.concat(other)

    @staticmethod
    def join(*paths: "Path") -> "Path":
        """Concatenate any number of paths, left to right."""
        return Path.join_all(paths)

    @staticmethod
    def join_all(paths: Iterable["Path"]) -> "Path":
        """Concatenate every path from an iterable, left to right.

        Raises:
            TypeError: If any element is not a ``Path``.
        """
        combined: list[PathNode] = []
        for p in paths:
            if not isinstance(p, Path):
                raise TypeError(f"Cannot concatenate Path with {type(p).__name__}")
            combined.extend(p.nodes)
        return Path(tuple(combined))

    def with_tag(self, tag: Any) -> "Path":
        """Return a copy carrying ``tag``; nodes and ``path_id`` are kept."""
        return replace(self, tag=tag)

    def _sort_key(self) -> Tuple[Cost, int]:
        return (self.cost, len(self.nodes))

    def __eq__(self, other: Any) -> bool:
        """Paths are equal when costs match and node ids match in order."""
        if self is other:
            return True
        if not isinstance(other, Path):
            return NotImplemented
        return self.cost == other.cost and self.node_ids == other.node_ids

    def __hash__(self) -> int:
        return hash((self.cost, self.node_ids))

    def __lt__(self, other: Any) -> bool:
        """Order by cost, then by node count (shorter first)."""
        if not isinstance(other, Path):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def __repr__(self) -> str:
        return f"Path({list(self.node_ids)}, cost={self.cost})"

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly representation.

        Tuple identifiers (e.g. grid coordinates) become lists.
        """
        return {
            "id": self.path_id,
            "nodes": [
                list(node_id) if isinstance(node_id, tuple) else node_id
                for node_id in self.node_ids
            ],
            "node_costs": [node.cost for node in self.nodes],
            "cost": self.cost,
            "tag": self.tag,
        }


#: Canonical "no path found" result.
EMPTY_PATH = Path((), path_id=EMPTY_RUN_ID)
