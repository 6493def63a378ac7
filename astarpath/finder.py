"""A* path search over a caller-supplied node map.

Notes:
    The open set is a binary heap ordered by ``f = g + h``; entries with equal
    ``f`` come out in insertion order. The first time an identifier is popped
    its route is final: the identifier is closed, later heap entries for it
    are discarded, and it is never reopened, even if a cheaper route to it
    shows up afterwards. This yields minimum-cost paths for admissible and
    consistent heuristics. With an admissible but inconsistent heuristic the
    search still terminates, but the result may be suboptimal.

    Cancellation is cooperative: the signal is polled once per loop
    iteration, and a cancelled search returns the empty path exactly like a
    search that found no route. Use :meth:`PathFinder.search` when the
    difference matters.
"""

from __future__ import annotations

import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, replace
from heapq import heappop, heappush
from itertools import count
from typing import Any, Generic, List, Optional, Protocol, Set, Tuple

from astarpath.config import DEFAULT_SEARCH_CONFIG, SearchConfig
from astarpath.heuristics.base import HeuristicProvider, ZeroHeuristic
from astarpath.logging import get_logger
from astarpath.maps.base import NodeMap
from astarpath.path import EMPTY_PATH, Path
from astarpath.search_tree import SearchTree
from astarpath.types import Cost, NodeId, PathNode

logger = get_logger(__name__)


class CancellationSignal(Protocol):
    """Anything with an ``is_set()`` method, e.g. ``threading.Event``."""

    def is_set(self) -> bool: ...


@dataclass(frozen=True)
class SearchStats:
    """Counters collected during one search.

    Attributes:
        expanded: Nodes popped from the open set and expanded.
        generated: Search nodes pushed onto the open set (root included).
        elapsed: Wall-clock duration in seconds.
        cancelled: The cancellation signal ended the search.
        limit_reached: ``SearchConfig.max_expansions`` ended the search.
    """

    expanded: int = 0
    generated: int = 0
    elapsed: float = 0.0
    cancelled: bool = False
    limit_reached: bool = False


@dataclass(frozen=True)
class SearchResult:
    """Path returned by a search together with its statistics."""

    path: Path
    stats: SearchStats

    @property
    def found(self) -> bool:
        return not self.path.is_empty


class PathFinder(Generic[NodeId]):
    """Find minimum-cost paths with the A* algorithm.

    The finder holds no per-search state, so one instance can serve
    concurrent searches as long as its node map and heuristic tolerate
    concurrent reads.

    Example:
        >>> from astarpath import PathFinder
        >>> from astarpath.heuristics import OctileHeuristic
        >>> from astarpath.maps import GridMap
        >>> finder = PathFinder(GridMap(5, 5), OctileHeuristic())
        >>> finder.find_path((0, 0), (4, 4)).node_ids
        ((0, 0), (1, 1), (2, 2), (3, 3), (4, 4))
    """

    def __init__(
        self,
        node_map: NodeMap[NodeId],
        heuristic: Optional[HeuristicProvider[NodeId]] = None,
        config: Optional[SearchConfig] = None,
    ) -> None:
        """Create a finder.

        Args:
            node_map: Graph to search. Must provide ``lookup`` and ``neighbors``.
            heuristic: Remaining-cost estimator. Defaults to ``ZeroHeuristic``.
            config: Search options. Defaults to ``DEFAULT_SEARCH_CONFIG``.

        Raises:
            ValueError: If ``node_map`` or ``heuristic`` lacks the required
                methods.
        """
        if node_map is None:
            raise ValueError("node_map must not be None")
        for method in ("lookup", "neighbors"):
            if not callable(getattr(node_map, method, None)):
                raise ValueError(
                    f"node_map must provide a callable '{method}' method"
                )
        if heuristic is None:
            heuristic = ZeroHeuristic()
        elif not callable(getattr(heuristic, "estimate", None)):
            raise ValueError("heuristic must provide a callable 'estimate' method")

        self.node_map = node_map
        self.heuristic = heuristic
        self.config = config if config is not None else DEFAULT_SEARCH_CONFIG

        self._executor: Optional[ThreadPoolExecutor] = None
        self._executor_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"PathFinder({self.node_map!r}, heuristic={self.heuristic!r})"

    def __enter__(self) -> "PathFinder[NodeId]":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.shutdown_executor()

    def find_path(
        self,
        start_id: NodeId,
        destination_id: NodeId,
        cancel: Optional[CancellationSignal] = None,
    ) -> Path:
        """Return the minimum-cost path from ``start_id`` to ``destination_id``.

        Args:
            start_id: Identifier of the start node.
            destination_id: Identifier of the destination node.
            cancel: Optional signal polled between expansions.

        Returns:
            The path found, or ``EMPTY_PATH`` when no route exists or the
            search was cancelled.

        Raises:
            KeyError: If either identifier does not resolve in the node map.
        """
        return self.search(start_id, destination_id, cancel).path

    def search(
        self,
        start_id: NodeId,
        destination_id: NodeId,
        cancel: Optional[CancellationSignal] = None,
    ) -> SearchResult:
        """Same as :meth:`find_path` but also return search statistics."""
        start_node, destination_node = self._resolve_endpoints(start_id, destination_id)

        logger.debug("Searching path from %r to %r", start_id, destination_id)
        started = time.perf_counter()

        if (
            self.config.prune_isolated_destination
            and start_node.id != destination_node.id
            and not self._has_neighbors(destination_node)
        ):
            logger.debug(
                "Destination %r has no neighbors, skipping search", destination_id
            )
            stats = SearchStats(elapsed=time.perf_counter() - started)
            return SearchResult(EMPTY_PATH, stats)

        path, stats = self._run(start_node, destination_node, cancel)
        stats = replace(stats, elapsed=time.perf_counter() - started)

        if stats.cancelled:
            logger.debug(
                "Search from %r to %r cancelled after %d expansions",
                start_id,
                destination_id,
                stats.expanded,
            )
        elif stats.limit_reached:
            logger.warning(
                "Search from %r to %r stopped at max_expansions=%d",
                start_id,
                destination_id,
                self.config.max_expansions,
            )
        elif path.is_empty:
            logger.debug(
                "No path from %r to %r (%d expanded)",
                start_id,
                destination_id,
                stats.expanded,
            )
        else:
            logger.debug(
                "Path from %r to %r: %d nodes, cost=%s, %d expanded in %.6fs",
                start_id,
                destination_id,
                len(path),
                path.cost,
                stats.expanded,
                stats.elapsed,
            )
        return SearchResult(path, stats)

    def find_path_async(
        self,
        start_id: NodeId,
        destination_id: NodeId,
        cancel: Optional[CancellationSignal] = None,
        executor: Optional[ThreadPoolExecutor] = None,
    ) -> "Future[Path]":
        """Run :meth:`find_path` on a worker thread.

        Set ``cancel`` to stop a running search; the future then resolves to
        the empty path. Unresolved endpoints surface as ``KeyError`` from
        ``Future.result()``.

        Args:
            start_id: Identifier of the start node.
            destination_id: Identifier of the destination node.
            cancel: Optional signal forwarded to the search loop.
            executor: Executor to submit to. Defaults to a pool owned by this
                finder, created on first use.

        Returns:
            A future resolving to the path.
        """
        pool = executor if executor is not None else self._shared_executor()
        return pool.submit(self.find_path, start_id, destination_id, cancel)

    def shutdown_executor(self, wait: bool = True) -> None:
        """Shut down the finder-owned executor, if one was created."""
        with self._executor_lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=wait)

    def _shared_executor(self) -> ThreadPoolExecutor:
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self.config.async_max_workers,
                    thread_name_prefix="astarpath",
                )
            return self._executor

    def _resolve_endpoints(
        self, start_id: NodeId, destination_id: NodeId
    ) -> Tuple[PathNode[NodeId], PathNode[NodeId]]:
        start_node = self.node_map.lookup(start_id)
        if start_node is None:
            logger.debug("Start node %r not found", start_id)
            raise KeyError(f"Start node '{start_id}' was not found.")
        destination_node = self.node_map.lookup(destination_id)
        if destination_node is None:
            logger.debug("Destination node %r not found", destination_id)
            raise KeyError(f"Destination node '{destination_id}' was not found.")
        return start_node, destination_node

    def _has_neighbors(self, node: PathNode[NodeId]) -> bool:
        has_neighbors = getattr(self.node_map, "has_neighbors", None)
        if callable(has_neighbors):
            return bool(has_neighbors(node))
        return any(True for _ in self.node_map.neighbors(node))

    def _run(
        self,
        start_node: PathNode[NodeId],
        destination_node: PathNode[NodeId],
        cancel: Optional[CancellationSignal],
    ) -> Tuple[Path, SearchStats]:
        """Core A* loop; ``elapsed`` is left for the caller to fill in."""
        estimate = self.heuristic.estimate
        max_expansions = self.config.max_expansions
        destination_id = destination_node.id

        tree = SearchTree()
        closed: Set[NodeId] = set()
        tie = count()
        open_heap: List[Tuple[Cost, int, int]] = []

        root = tree.add_root(start_node, estimate(start_node, destination_node))
        heappush(open_heap, (tree[root].f, next(tie), root))
        expanded = 0

        while open_heap:
            if cancel is not None and cancel.is_set():
                stats = SearchStats(expanded, len(tree), cancelled=True)
                return EMPTY_PATH, stats

            _, _, index = heappop(open_heap)
            current = tree[index]
            node_id = current.node.id

            if node_id == destination_id:
                path = Path(tuple(tree.backtrack(index)))
                return path, SearchStats(expanded, len(tree))

            # Stale entry: a cheaper one for the same id was already expanded.
            if node_id in closed:
                continue

            if max_expansions is not None and expanded >= max_expansions:
                stats = SearchStats(expanded, len(tree), limit_reached=True)
                return EMPTY_PATH, stats

            closed.add(node_id)
            expanded += 1

            for child in self.node_map.neighbors(current.node):
                if child.id in closed:
                    continue
                h = estimate(child, destination_node)
                child_index = tree.add_child(index, child, h)
                heappush(open_heap, (tree[child_index].f, next(tie), child_index))

        return EMPTY_PATH, SearchStats(expanded, len(tree))
