"""Two-dimensional grid map with wall cells.

Cells are identified by ``(x, y)`` integer tuples, ``x`` being the column and
``y`` the row. Walls are stored in a boolean ``numpy`` array indexed as
``walls[y, x]``.

Movement is 8-directional by default, with orthogonal steps costing 1 and
diagonal steps costing sqrt(2). With ``allow_diagonal=False`` only the four
orthogonal neighbors are produced. With ``cut_corners=False`` a diagonal step
is refused when either of the two orthogonal cells it passes between is a
wall.
"""

from __future__ import annotations

import math
from numbers import Integral
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from astarpath.maps.base import NodeMap
from astarpath.types import Cost, PathNode

Cell = Tuple[int, int]

_ORTHOGONAL: Tuple[Cell, ...] = ((0, -1), (-1, 0), (1, 0), (0, 1))


class GridMap(NodeMap[Cell]):
    """Rectangular grid of open and wall cells."""

    def __init__(
        self,
        width: int,
        height: int,
        walls: Optional[Any] = None,
        allow_diagonal: bool = True,
        cut_corners: bool = True,
        orthogonal_cost: Cost = 1.0,
        diagonal_cost: Cost = math.sqrt(2),
    ) -> None:
        """Create a grid.

        Args:
            width: Number of columns.
            height: Number of rows.
            walls: Optional array-like of shape ``(height, width)``; truthy
                entries are walls. Defaults to an open grid.
            allow_diagonal: Produce diagonal neighbors.
            cut_corners: Allow diagonal steps that pass a wall corner.
            orthogonal_cost: Cost of a horizontal or vertical step.
            diagonal_cost: Cost of a diagonal step.

        Raises:
            ValueError: On non-positive dimensions, negative costs, or a
                wall array of the wrong shape.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        if orthogonal_cost < 0 or diagonal_cost < 0:
            raise ValueError("Step costs must be non-negative")

        if walls is None:
            wall_array = np.zeros((height, width), dtype=bool)
        else:
            wall_array = np.array(walls, dtype=bool)
            if wall_array.shape != (height, width):
                raise ValueError(
                    f"Wall array shape {wall_array.shape} does not match grid "
                    f"({height}, {width})"
                )

        self.width = width
        self.height = height
        self.allow_diagonal = allow_diagonal
        self.cut_corners = cut_corners
        self.orthogonal_cost = orthogonal_cost
        self.diagonal_cost = diagonal_cost
        self._walls = wall_array

    @classmethod
    def from_array(cls, walls: Any, **kwargs: Any) -> "GridMap":
        """Build a grid from a 2-D array-like of wall flags (rows first)."""
        wall_array = np.array(walls, dtype=bool)
        if wall_array.ndim != 2:
            raise ValueError(f"Expected a 2-D wall array, got {wall_array.ndim}-D")
        height, width = wall_array.shape
        return cls(width, height, walls=wall_array, **kwargs)

    @classmethod
    def from_strings(
        cls, rows: Sequence[str], wall_chars: str = "#", **kwargs: Any
    ) -> "GridMap":
        """Build a grid from text rows.

        Each character is one cell; characters in ``wall_chars`` are walls and
        everything else is open. All rows must have the same length.

        Example:
            >>> grid = GridMap.from_strings(["..#", "...", "#.."])
            >>> grid.is_wall(2, 0)
            True
        """
        rows = [row.rstrip("\r\n") for row in rows]
        if not rows:
            raise ValueError("Grid must have at least one row")
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Row {i} has length {len(row)}, expected {width}"
                )
        walls = [[ch in wall_chars for ch in row] for row in rows]
        return cls.from_array(walls, **kwargs)

    @property
    def walls(self) -> np.ndarray:
        """Read-only view of the wall array (``walls[y, x]``)."""
        view = self._walls.view()
        view.flags.writeable = False
        return view

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_wall(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` is a wall.

        Raises:
            IndexError: If the cell is outside the grid.
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) is outside the grid")
        return bool(self._walls[y, x])

    def set_wall(self, x: int, y: int, blocked: bool = True) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) is outside the grid")
        self._walls[y, x] = blocked

    def clear_wall(self, x: int, y: int) -> None:
        self.set_wall(x, y, blocked=False)

    def open_cells(self) -> Iterator[Cell]:
        """Yield every open cell in row-major order."""
        for y, x in zip(*np.nonzero(~self._walls)):
            yield (int(x), int(y))

    def _is_open(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and not self._walls[y, x]

    def lookup(self, node_id: Any) -> Optional[PathNode[Cell]]:
        """Resolve an ``(x, y)`` cell; walls and outside cells do not resolve."""
        if not isinstance(node_id, tuple) or len(node_id) != 2:
            return None
        x, y = node_id
        if not isinstance(x, Integral) or not isinstance(y, Integral):
            return None
        if isinstance(x, bool) or isinstance(y, bool):
            return None
        x, y = int(x), int(y)
        if not self._is_open(x, y):
            return None
        # No movement happened to get here.
        return PathNode((x, y), 0.0)

    def neighbors(self, node: PathNode[Cell]) -> Iterable[PathNode[Cell]]:
        x, y = node.id
        children: List[PathNode[Cell]] = []
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                diagonal = dx != 0 and dy != 0
                if diagonal and not self.allow_diagonal:
                    continue
                cx, cy = x + dx, y + dy
                if not self._is_open(cx, cy):
                    continue
                if diagonal and not self.cut_corners:
                    if not (self._is_open(x + dx, y) and self._is_open(x, y + dy)):
                        continue
                cost = self.diagonal_cost if diagonal else self.orthogonal_cost
                children.append(PathNode((cx, cy), cost))
        return children

    def has_neighbors(self, node: PathNode[Cell]) -> bool:
        x, y = node.id
        if any(self._is_open(x + dx, y + dy) for dx, dy in _ORTHOGONAL):
            return True
        return bool(self.neighbors(node))

    def __repr__(self) -> str:
        return (
            f"GridMap({self.width}x{self.height}, walls={int(self._walls.sum())}, "
            f"allow_diagonal={self.allow_diagonal})"
        )
