"""Heuristic contract and the always-zero default."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic

from astarpath.types import Cost, NodeId, PathNode


class HeuristicProvider(ABC, Generic[NodeId]):
    """Estimate the remaining cost between two nodes.

    The estimate must be non-negative. For the finder to return a
    minimum-cost path the estimate must never exceed the true remaining cost
    (admissible) and must satisfy ``h(a) <= cost(a, b) + h(b)`` for every
    edge ``a -> b`` (consistent). Neither property is checked.
    """

    @abstractmethod
    def estimate(self, from_node: PathNode[NodeId], to_node: PathNode[NodeId]) -> Cost:
        """Return the estimated cost from ``from_node`` to ``to_node``."""


class ZeroHeuristic(HeuristicProvider[NodeId]):
    """Always returns 0, making the search uniform-cost (Dijkstra)."""

    def estimate(self, from_node: PathNode[NodeId], to_node: PathNode[NodeId]) -> Cost:
        return 0.0

    def __repr__(self) -> str:
        return "ZeroHeuristic()"


class CallableHeuristic(HeuristicProvider[NodeId]):
    """Adapt a plain function ``(from_node, to_node) -> cost``."""

    def __init__(
        self, func: Callable[[PathNode[NodeId], PathNode[NodeId]], Cost]
    ) -> None:
        if not callable(func):
            raise ValueError("func must be callable")
        self.func = func

    def estimate(self, from_node: PathNode[NodeId], to_node: PathNode[NodeId]) -> Cost:
        return self.func(from_node, to_node)

    def __repr__(self) -> str:
        name = getattr(self.func, "__name__", repr(self.func))
        return f"CallableHeuristic({name})"
