"""Node maps: the graph side of a path search.

A node map resolves identifiers to :class:`~astarpath.types.PathNode`
instances and enumerates the neighbors of a node. Two ready-made maps are
provided:

- ``GridMap``: a 2-D grid with wall cells, 4- or 8-directional movement.
- ``NetworkXMap``: an adapter over any NetworkX graph.
"""

from astarpath.maps.base import NodeMap
from astarpath.maps.grid import GridMap
from astarpath.maps.nx import NetworkXMap

__all__ = ["NodeMap", "GridMap", "NetworkXMap"]
