"""Heuristic providers estimating the remaining cost to a destination.

The finder uses ``ZeroHeuristic`` when none is supplied, which turns A* into
Dijkstra's algorithm. Coordinate heuristics work with tuple identifiers such
as the ``(x, y)`` cells of :class:`~astarpath.maps.GridMap`.
"""

from __future__ import annotations

from typing import Callable, Dict

from astarpath.heuristics.base import (
    CallableHeuristic,
    HeuristicProvider,
    ZeroHeuristic,
)
from astarpath.heuristics.coordinates import (
    ChebyshevHeuristic,
    EuclideanHeuristic,
    ManhattanHeuristic,
    OctileHeuristic,
)

HEURISTICS: Dict[str, Callable[[], HeuristicProvider]] = {
    "zero": ZeroHeuristic,
    "euclidean": EuclideanHeuristic,
    "manhattan": ManhattanHeuristic,
    "octile": OctileHeuristic,
    "chebyshev": ChebyshevHeuristic,
}


def heuristic_by_name(name: str) -> HeuristicProvider:
    """Instantiate a registered heuristic by case-insensitive name.

    Raises:
        ValueError: If the name is not registered.
    """
    try:
        return HEURISTICS[name.lower()]()
    except KeyError:
        valid = ", ".join(sorted(HEURISTICS))
        raise ValueError(
            f"Invalid heuristic '{name}'. Valid values are: {valid}"
        ) from None


__all__ = [
    "HeuristicProvider",
    "ZeroHeuristic",
    "CallableHeuristic",
    "EuclideanHeuristic",
    "ManhattanHeuristic",
    "OctileHeuristic",
    "ChebyshevHeuristic",
    "HEURISTICS",
    "heuristic_by_name",
]
