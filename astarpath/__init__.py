"""astarpath: generic A* path search over caller-defined graphs.

Callers describe their graph with a node map (identifier lookup and neighbor
expansion) and optionally a heuristic, then ask a ``PathFinder`` for the
cheapest route between two identifiers.

Primary API:
    PathFinder - A* engine with sync and thread-pool async search
    Path, EMPTY_PATH - Immutable search result and the "no route" sentinel
    PathNode - Graph node as produced by node maps
    NodeMap, GridMap, NetworkXMap - Graph contract and ready-made maps
    HeuristicProvider, ZeroHeuristic - Heuristic contract and its default

Example:
    from astarpath import GridMap, OctileHeuristic, PathFinder

    grid = GridMap.from_strings([
        ".....",
        "####.",
        ".....",
    ])
    path = PathFinder(grid, OctileHeuristic()).find_path((0, 0), (0, 2))
    print(path.node_ids, path.cost)
"""

from __future__ import annotations

from astarpath import cli, logging
from astarpath._version import __version__
from astarpath.comparers import BY_COST, BY_NODE_COUNT, PathComparer
from astarpath.config import DEFAULT_SEARCH_CONFIG, SearchConfig
from astarpath.finder import PathFinder, SearchResult, SearchStats
from astarpath.heuristics import (
    CallableHeuristic,
    ChebyshevHeuristic,
    EuclideanHeuristic,
    HeuristicProvider,
    ManhattanHeuristic,
    OctileHeuristic,
    ZeroHeuristic,
    heuristic_by_name,
)
from astarpath.maps import GridMap, NetworkXMap, NodeMap
from astarpath.path import EMPTY_PATH, Path
from astarpath.types import Cost, PathNode

__all__ = [
    # Version
    "__version__",
    # Engine
    "PathFinder",
    "SearchResult",
    "SearchStats",
    "SearchConfig",
    "DEFAULT_SEARCH_CONFIG",
    # Results
    "Path",
    "EMPTY_PATH",
    "PathComparer",
    "BY_COST",
    "BY_NODE_COUNT",
    # Graph side
    "PathNode",
    "Cost",
    "NodeMap",
    "GridMap",
    "NetworkXMap",
    # Heuristics
    "HeuristicProvider",
    "ZeroHeuristic",
    "CallableHeuristic",
    "EuclideanHeuristic",
    "ManhattanHeuristic",
    "OctileHeuristic",
    "ChebyshevHeuristic",
    "heuristic_by_name",
    # Utilities
    "cli",
    "logging",
]
