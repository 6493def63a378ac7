"""Ordering helpers for ranking collections of paths.

``Path`` already defines a total order (cost, then node count). These
helpers expose a single criterion each, for callers that collect many
results and want to rank or group them by one field only::

    ranked = sorted(paths, key=BY_NODE_COUNT.sort_key())
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cmp_to_key
from typing import Any, Callable, Optional

from astarpath.path import Path
from astarpath.types import Cost


class PathComparer(ABC):
    """Compare and hash paths by a single scalar key."""

    @abstractmethod
    def key(self, path: Path) -> Cost:
        """Return the scalar the comparer orders by."""

    def compare(self, x: Optional[Path], y: Optional[Path]) -> int:
        """Three-way comparison; ``None`` sorts before any path.

        Returns:
            -1, 0 or 1.

        Raises:
            TypeError: If a non-``None`` argument is not a ``Path``.
        """
        if x is None:
            return 0 if y is None else -1
        if y is None:
            return 1
        kx, ky = self.key(self._check(x)), self.key(self._check(y))
        return (kx > ky) - (kx < ky)

    def equals(self, x: Optional[Path], y: Optional[Path]) -> bool:
        if x is None or y is None:
            return x is None and y is None
        return self.key(self._check(x)) == self.key(self._check(y))

    def hash(self, path: Path) -> int:
        return hash(self.key(self._check(path)))

    def sort_key(self) -> Callable[[Optional[Path]], Any]:
        """Return a ``key=`` callable for ``sorted``/``min``/``max``."""
        return cmp_to_key(self.compare)

    @staticmethod
    def _check(obj: Any) -> Path:
        if not isinstance(obj, Path):
            raise TypeError(f"Expected Path, got {type(obj).__name__}")
        return obj


class PathCostComparer(PathComparer):
    def key(self, path: Path) -> Cost:
        return path.cost


class PathNodeCountComparer(PathComparer):
    def key(self, path: Path) -> Cost:
        return len(path)


BY_COST = PathCostComparer()
BY_NODE_COUNT = PathNodeCountComparer()
