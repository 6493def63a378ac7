"""Loaders for grid text files, graph YAML files, and search configuration.

Grid files hold one row per line; ``#`` marks a wall and any other character
is open. Trailing blank lines are ignored.

Graph files are YAML mappings::

    directed: true          # optional, default true
    nodes: [A, B, C, D]     # optional, for isolated nodes
    edges:
      - [A, B, 1.0]         # source, target, cost
      - {source: B, target: C, cost: 2}
      - [C, D]              # cost defaults to 1

Search configuration files are YAML mappings of ``SearchConfig`` fields.
"""

from __future__ import annotations

from pathlib import Path as FilePath
from typing import Any, Dict, List, Union

import networkx as nx
import yaml

from astarpath.config import SearchConfig
from astarpath.maps.grid import GridMap

PathLike = Union[str, FilePath]


def parse_grid(text: str, wall_chars: str = "#", **kwargs: Any) -> GridMap:
    """Parse grid text into a :class:`GridMap`.

    Args:
        text: Grid rows separated by newlines.
        wall_chars: Characters that mark walls.
        **kwargs: Forwarded to ``GridMap`` (e.g. ``allow_diagonal``).

    Raises:
        ValueError: If the grid is empty or rows differ in length.
    """
    rows: List[str] = text.splitlines()
    while rows and not rows[-1].strip():
        rows.pop()
    if not rows:
        raise ValueError("Grid text contains no rows")
    return GridMap.from_strings(rows, wall_chars=wall_chars, **kwargs)


def load_grid(path: PathLike, wall_chars: str = "#", **kwargs: Any) -> GridMap:
    """Read a grid file. See :func:`parse_grid`."""
    text = FilePath(path).read_text(encoding="utf-8")
    return parse_grid(text, wall_chars=wall_chars, **kwargs)


def _parse_edge(entry: Any, index: int) -> tuple:
    if isinstance(entry, dict):
        if "source" not in entry or "target" not in entry:
            raise ValueError(
                f"Edge #{index} must include 'source' and 'target'"
            )
        unknown = set(entry) - {"source", "target", "cost"}
        if unknown:
            raise ValueError(
                f"Unrecognized key(s) {sorted(unknown)} in edge #{index}"
            )
        return entry["source"], entry["target"], entry.get("cost", 1)
    if isinstance(entry, (list, tuple)) and len(entry) in (2, 3):
        cost = entry[2] if len(entry) == 3 else 1
        return entry[0], entry[1], cost
    raise ValueError(
        f"Edge #{index} must be a [source, target, cost] list or a mapping"
    )


def _check_node(node: Any, where: str) -> None:
    try:
        hash(node)
    except TypeError:
        raise ValueError(
            f"Node {node!r} in {where} is not a valid identifier"
        ) from None
    if node is None:
        raise ValueError(f"Node in {where} must not be null")


def graph_from_dict(data: Dict[str, Any]) -> nx.Graph:
    """Build a NetworkX graph from the graph-file mapping described above.

    Returns:
        ``nx.DiGraph`` when ``directed`` is true (the default), else ``nx.Graph``.
        Edge costs are stored under the ``cost`` attribute.

    Raises:
        ValueError: On malformed structure, unhashable node names, or
            negative/non-numeric costs.
    """
    if not isinstance(data, dict):
        raise ValueError("The provided graph must map to a dictionary at top-level.")

    unknown = set(data) - {"directed", "nodes", "edges"}
    if unknown:
        raise ValueError(f"Unrecognized top-level key(s): {sorted(unknown)}")

    directed = data.get("directed", True)
    if not isinstance(directed, bool):
        raise ValueError("'directed' must be a boolean")

    graph: nx.Graph = nx.DiGraph() if directed else nx.Graph()

    nodes = data.get("nodes") or []
    if not isinstance(nodes, list):
        raise ValueError("'nodes' must be a list")
    for node in nodes:
        _check_node(node, "'nodes'")
    graph.add_nodes_from(nodes)

    edges = data.get("edges") or []
    if not isinstance(edges, list):
        raise ValueError("'edges' must be a list")
    for i, entry in enumerate(edges):
        u, v, cost = _parse_edge(entry, i)
        if isinstance(cost, bool) or not isinstance(cost, (int, float)):
            raise ValueError(f"Edge #{i} cost must be a number, got {cost!r}")
        if cost < 0:
            raise ValueError(f"Edge #{i} has negative cost {cost}")
        _check_node(u, f"edge #{i}")
        _check_node(v, f"edge #{i}")
        graph.add_edge(u, v, cost=cost)

    return graph


def _safe_load(text: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML: {e}") from e


def parse_graph_yaml(yaml_str: str) -> nx.Graph:
    """Parse a graph YAML string. See :func:`graph_from_dict`."""
    data = _safe_load(yaml_str)
    if data is None:
        data = {}
    return graph_from_dict(data)


def load_graph(path: PathLike) -> nx.Graph:
    """Read a graph YAML file. See :func:`graph_from_dict`."""
    return parse_graph_yaml(FilePath(path).read_text(encoding="utf-8"))


def load_search_config(path: PathLike) -> SearchConfig:
    """Read a YAML mapping of ``SearchConfig`` fields.

    An empty file yields the default configuration.
    """
    data = _safe_load(FilePath(path).read_text(encoding="utf-8"))
    return SearchConfig.from_dict(data)
