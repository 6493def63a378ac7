"""Shared fixtures: small grids and graphs with known shortest paths."""

from __future__ import annotations

import networkx as nx
import pytest

from astarpath.maps import GridMap, NetworkXMap


@pytest.fixture
def open_grid():
    # 5x5, no walls, 8-directional
    return GridMap(5, 5)


@pytest.fixture
def gap_grid():
    # Row y=2 is a wall except the gap at x=3.
    #
    #   .....
    #   .....
    #   ###.#
    #   .....
    #   .....
    return GridMap.from_strings(
        [
            ".....",
            ".....",
            "###.#",
            ".....",
            ".....",
        ]
    )


@pytest.fixture
def sealed_grid():
    # Same as gap_grid without the gap.
    return GridMap.from_strings(
        [
            ".....",
            ".....",
            "#####",
            ".....",
            ".....",
        ]
    )


@pytest.fixture
def square_graph():
    # Metric:
    #        [1]       [1]
    #    A ───────► B ───────► D
    #    │                     ▲
    #    │ [1]             [5] │
    #    ▼                     │
    #    C ────────────────────┘
    #
    # Cheapest A->D is A-B-D with cost 2.
    g = nx.DiGraph()
    g.add_edge("A", "B", cost=1)
    g.add_edge("B", "D", cost=1)
    g.add_edge("A", "C", cost=1)
    g.add_edge("C", "D", cost=5)
    return NetworkXMap(g)


@pytest.fixture
def detour_graph():
    # A direct but expensive hop versus a cheap chain:
    #
    #    S ──[10]──► T
    #    │           ▲
    #   [1]         [1]
    #    ▼           │
    #    X ──[1]───► Y
    #
    # Cheapest S->T is S-X-Y-T with cost 3 and 4 nodes.
    g = nx.DiGraph()
    g.add_edge("S", "T", cost=10)
    g.add_edge("S", "X", cost=1)
    g.add_edge("X", "Y", cost=1)
    g.add_edge("Y", "T", cost=1)
    return NetworkXMap(g)
