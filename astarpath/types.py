"""Base types shared by the search engine, maps, and paths."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Hashable, TypeVar, Union

#: Represents numeric cost of moving through the graph (distance, time, ...).
Cost = Union[int, float]

#: Node identifier. Anything hashable with a stable equality will do.
NodeId = TypeVar("NodeId", bound=Hashable)


@dataclass(frozen=True, eq=False)
class PathNode(Generic[NodeId]):
    """A graph node as seen by the search engine.

    Maps create these on demand, so two instances with the same identifier
    are interchangeable: equality and hashing only look at ``id``.

    Attributes:
        id: Identifier of the node inside its map.
        cost: Cost of moving *into* this node from the node it was reached
            from. Nodes returned by ``NodeMap.lookup`` usually carry 0.
        content: Optional payload attached by the map (e.g. node attributes).
    """

    id: NodeId
    cost: Cost = 0.0
    content: Any = None

    def __post_init__(self) -> None:
        if self.id is None:
            raise ValueError("PathNode id must not be None")
        if self.cost < 0:
            raise ValueError(
                f"Negative cost {self.cost} for node {self.id!r} is not supported"
            )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PathNode):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"PathNode({self.id!r}, cost={self.cost})"
