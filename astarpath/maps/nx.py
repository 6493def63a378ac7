"""Node map backed by a NetworkX graph.

Example:
    >>> import networkx as nx
    >>> from astarpath import PathFinder
    >>> from astarpath.maps import NetworkXMap
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", cost=1)
    >>> G.add_edge("B", "C", cost=2)
    >>> PathFinder(NetworkXMap(G)).find_path("A", "C").cost
    3.0
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Hashable, Iterable, List, Optional, Union

from astarpath.maps.base import NodeMap
from astarpath.types import Cost, PathNode

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


class NetworkXMap(NodeMap[Hashable]):
    """Expose a NetworkX graph through the node-map contract.

    Directed graphs are followed along edge direction; undirected graphs in
    both directions. Between a pair of nodes joined by parallel edges
    (multigraphs) only the cheapest edge is used. Self-loops are ignored.
    Node attribute dicts are attached to nodes as ``content``.
    """

    def __init__(
        self,
        graph: NxGraph,
        cost_attr: str = "cost",
        default_cost: Cost = 1.0,
    ) -> None:
        """Wrap ``graph``.

        Args:
            graph: Any NetworkX graph. It is read, never modified.
            cost_attr: Edge attribute holding the traversal cost.
            default_cost: Cost used when an edge lacks ``cost_attr``.

        Raises:
            ValueError: If ``graph`` is None or ``default_cost`` is negative.
        """
        if graph is None:
            raise ValueError("graph must not be None")
        if default_cost < 0:
            raise ValueError(f"default_cost must be non-negative, got {default_cost}")
        self.graph = graph
        self.cost_attr = cost_attr
        self.default_cost = default_cost

    def _edge_cost(self, u: Hashable, v: Hashable, attr: Dict[str, Any]) -> Cost:
        cost = attr.get(self.cost_attr, self.default_cost)
        if cost < 0:
            raise ValueError(f"Edge {u!r}->{v!r} has negative cost {cost}")
        return cost

    def lookup(self, node_id: Hashable) -> Optional[PathNode[Hashable]]:
        try:
            if node_id not in self.graph:
                return None
        except TypeError:
            # Unhashable identifiers cannot be graph nodes.
            return None
        return PathNode(node_id, 0.0, dict(self.graph.nodes[node_id]))

    def neighbors(self, node: PathNode[Hashable]) -> Iterable[PathNode[Hashable]]:
        u = node.id
        multigraph = self.graph.is_multigraph()
        children: List[PathNode[Hashable]] = []
        for v, edge_data in self.graph.adj[u].items():
            if v == u:
                continue
            if multigraph:
                cost = min(self._edge_cost(u, v, attr) for attr in edge_data.values())
            else:
                cost = self._edge_cost(u, v, edge_data)
            children.append(PathNode(v, cost, dict(self.graph.nodes[v])))
        return children

    def has_neighbors(self, node: PathNode[Hashable]) -> bool:
        return any(v != node.id for v in self.graph.adj[node.id])

    def __repr__(self) -> str:
        return (
            f"NetworkXMap({type(self.graph).__name__}, "
            f"nodes={self.graph.number_of_nodes()}, "
            f"edges={self.graph.number_of_edges()})"
        )
