"""Distance heuristics over coordinate identifiers.

Node identifiers are expected to be equal-length numeric tuples. Which one
is admissible depends on the movement model:

- ``ManhattanHeuristic``: 4-directional moves of unit cost.
- ``OctileHeuristic``: 8-directional moves, orthogonal 1, diagonal sqrt(2).
- ``ChebyshevHeuristic``: 8-directional moves that all cost 1.
- ``EuclideanHeuristic``: any of the above (weaker, but always admissible
  when every step costs at least its straight-line length).

``scale`` multiplies the estimate. Values above the cheapest per-unit step
cost make the heuristic inadmissible.
"""

from __future__ import annotations

import math
from abc import abstractmethod
from typing import Sequence, Tuple

from astarpath.heuristics.base import HeuristicProvider
from astarpath.types import Cost, PathNode

SQRT2 = math.sqrt(2)


class CoordinateHeuristic(HeuristicProvider[Tuple[float, ...]]):
    """Base for heuristics computed from per-axis absolute deltas."""

    def __init__(self, scale: float = 1.0) -> None:
        if scale < 0:
            raise ValueError(f"scale must be non-negative, got {scale}")
        self.scale = scale

    @staticmethod
    def _deltas(from_node: PathNode, to_node: PathNode) -> Tuple[float, ...]:
        a, b = from_node.id, to_node.id
        if len(a) != len(b):
            raise ValueError(
                f"Coordinate dimensions differ: {a!r} vs {b!r}"
            )
        return tuple(abs(bi - ai) for ai, bi in zip(a, b))

    def estimate(self, from_node: PathNode, to_node: PathNode) -> Cost:
        return self.scale * self.distance(self._deltas(from_node, to_node))

    @abstractmethod
    def distance(self, deltas: Sequence[float]) -> float:
        """Combine per-axis deltas into a distance."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(scale={self.scale})"


class EuclideanHeuristic(CoordinateHeuristic):
    def distance(self, deltas: Sequence[float]) -> float:
        return math.hypot(*deltas)


class ManhattanHeuristic(CoordinateHeuristic):
    def distance(self, deltas: Sequence[float]) -> float:
        return float(sum(deltas))


class ChebyshevHeuristic(CoordinateHeuristic):
    def distance(self, deltas: Sequence[float]) -> float:
        return float(max(deltas, default=0))


class OctileHeuristic(CoordinateHeuristic):
    """Exact 2-D grid distance with diagonal steps of cost sqrt(2)."""

    def distance(self, deltas: Sequence[float]) -> float:
        if len(deltas) != 2:
            raise ValueError("OctileHeuristic requires 2-D coordinates")
        dx, dy = deltas
        return float(max(dx, dy) + (SQRT2 - 1) * min(dx, dy))
