"""Configuration classes for astarpath components."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class SearchConfig:
    """Tuning knobs for :class:`astarpath.finder.PathFinder`.

    Attributes:
        prune_isolated_destination: Return the empty path without searching
            when the destination has no neighbors. Only sound for maps where
            edges are symmetric (e.g. grids), so it is disabled by default.
        max_expansions: Upper bound on expanded nodes per search. ``None``
            means unbounded. Hitting the bound yields the empty path.
        async_max_workers: Worker count for the shared executor used by
            ``find_path_async``. ``None`` lets ``ThreadPoolExecutor`` decide.
    """

    prune_isolated_destination: bool = False
    max_expansions: Optional[int] = None
    async_max_workers: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.prune_isolated_destination, bool):
            raise ValueError(
                "prune_isolated_destination must be a boolean, "
                f"got {self.prune_isolated_destination!r}"
            )
        for name in ("max_expansions", "async_max_workers"):
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SearchConfig":
        """Build a config from a plain mapping, rejecting unknown keys.

        Args:
            data: Mapping of field names to values. ``None`` yields defaults.

        Returns:
            A validated ``SearchConfig``.

        Raises:
            ValueError: If ``data`` is not a mapping or has unknown keys.
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("Search configuration must be a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(str(k) for k in data if k not in known)
        if unknown:
            raise ValueError(
                f"Unrecognized search configuration keys: {', '.join(unknown)}"
            )
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


# Global default configuration instance
DEFAULT_SEARCH_CONFIG = SearchConfig()
