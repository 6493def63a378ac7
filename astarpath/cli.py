"""Command-line interface for astarpath."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path as FilePath
from typing import Any, Hashable, List, Optional, Tuple

from astarpath.config import SearchConfig
from astarpath.finder import PathFinder, SearchResult
from astarpath.heuristics import HEURISTICS, heuristic_by_name
from astarpath.io import load_graph, load_grid, load_search_config
from astarpath.logging import get_logger, set_global_log_level
from astarpath.maps.nx import NetworkXMap

logger = get_logger(__name__)


def _format_table(headers: List[str], rows: List[List[str]], min_width: int = 4) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_cost(value: Any) -> str:
    """Return cost formatted with up to three decimals.

    Examples:
        0.1 -> "0.1"; 10.0 -> "10"; 5.656854 -> "5.657".
    """
    try:
        v = float(value)
    except (TypeError, ValueError):
        return str(value)

    s = f"{v:,.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _parse_cell(value: str) -> Tuple[int, int]:
    """Parse ``"X,Y"`` into an ``(x, y)`` tuple for argparse."""
    parts = value.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected X,Y but got '{value}'")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"coordinates must be integers, got '{value}'"
        ) from None


def _resolve_graph_node(graph: Any, raw: str) -> Hashable:
    """Map a command-line node name onto a graph node.

    YAML may load numeric node names as numbers, so ``"3"`` is tried as a
    string, then as an int, then as a float.
    """
    if raw in graph:
        return raw
    for convert in (int, float):
        try:
            candidate = convert(raw)
        except ValueError:
            continue
        if candidate in graph:
            return candidate
    return raw


def _print_result(result: SearchResult, as_json: bool) -> None:
    path = result.path
    stats = result.stats

    if as_json:
        payload = {
            "found": result.found,
            "path": path.to_dict(),
            "stats": {
                "expanded": stats.expanded,
                "generated": stats.generated,
                "elapsed": stats.elapsed,
                "cancelled": stats.cancelled,
                "limit_reached": stats.limit_reached,
            },
        }
        print(json.dumps(payload, indent=2, default=str))
        return

    if path.is_empty:
        print("No path found")
        if stats.limit_reached:
            print("   (search stopped at max_expansions)")
    else:
        print(
            f"Path found: {len(path)} nodes, cost {_format_cost(path.cost)}"
        )
        rows = [
            [
                str(i),
                str(node.id),
                _format_cost(node.cost),
                _format_cost(path.cost_at_index(i)),
            ]
            for i, node in enumerate(path)
        ]
        print(_format_table(["#", "Node", "Step", "Total"], rows))
    print(
        f"Expanded {stats.expanded} nodes, generated {stats.generated} "
        f"in {_format_duration(stats.elapsed)}"
    )


def _load_config(path: Optional[FilePath]) -> SearchConfig:
    if path is None:
        return SearchConfig()
    return load_search_config(path)


def _run_grid(args: argparse.Namespace) -> None:
    try:
        grid = load_grid(
            args.grid,
            allow_diagonal=not args.no_diagonal,
            cut_corners=not args.no_corner_cutting,
        )
        config = _load_config(args.config)
        finder = PathFinder(grid, heuristic_by_name(args.heuristic), config)
        logger.info(
            f"Searching {grid.width}x{grid.height} grid "
            f"from {args.start} to {args.dest}"
        )
        result = finder.search(args.start, args.dest)
    except FileNotFoundError as e:
        logger.error(f"File not found: {e.filename}")
        print(f"ERROR: File not found: {e.filename}")
        sys.exit(1)
    except (KeyError, ValueError) as e:
        logger.error(f"Grid search failed: {type(e).__name__}: {e}")
        print(f"ERROR: Grid search failed: {type(e).__name__}: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error during grid search: {type(e).__name__}: {e}")
        print(f"ERROR: Unexpected error during grid search: {type(e).__name__}: {e}")
        sys.exit(1)

    _print_result(result, args.json)


def _run_graph(args: argparse.Namespace) -> None:
    try:
        graph = load_graph(args.graph)
        config = _load_config(args.config)
        finder = PathFinder(NetworkXMap(graph), config=config)
        start = _resolve_graph_node(graph, args.start)
        dest = _resolve_graph_node(graph, args.dest)
        logger.info(
            f"Searching graph with {graph.number_of_nodes()} nodes from "
            f"{start!r} to {dest!r}"
        )
        result = finder.search(start, dest)
    except FileNotFoundError as e:
        logger.error(f"File not found: {e.filename}")
        print(f"ERROR: File not found: {e.filename}")
        sys.exit(1)
    except (KeyError, ValueError) as e:
        logger.error(f"Graph search failed: {type(e).__name__}: {e}")
        print(f"ERROR: Graph search failed: {type(e).__name__}: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error during graph search: {type(e).__name__}: {e}")
        print(f"ERROR: Unexpected error during graph search: {type(e).__name__}: {e}")
        sys.exit(1)

    _print_result(result, args.json)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``astarpath`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="astarpath",
        description="Find minimum-cost paths on grids and graphs with A*.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{grid,graph}",
        help="Available commands",
    )

    grid_parser = subparsers.add_parser("grid", help="Search a text grid file")
    grid_parser.add_argument("grid", type=FilePath, help="Path to grid text file")
    grid_parser.add_argument(
        "--start", required=True, type=_parse_cell, help="Start cell as X,Y"
    )
    grid_parser.add_argument(
        "--dest", required=True, type=_parse_cell, help="Destination cell as X,Y"
    )
    grid_parser.add_argument(
        "--no-diagonal",
        action="store_true",
        help="Only allow horizontal and vertical moves",
    )
    grid_parser.add_argument(
        "--no-corner-cutting",
        action="store_true",
        help="Refuse diagonal moves past wall corners",
    )
    grid_parser.add_argument(
        "--heuristic",
        default="octile",
        choices=sorted(HEURISTICS),
        help="Heuristic to guide the search (default: octile)",
    )

    graph_parser = subparsers.add_parser("graph", help="Search a graph YAML file")
    graph_parser.add_argument("graph", type=FilePath, help="Path to graph YAML file")
    graph_parser.add_argument("--start", required=True, help="Start node name")
    graph_parser.add_argument("--dest", required=True, help="Destination node name")

    for p in (grid_parser, graph_parser):
        p.add_argument(
            "--config",
            "-c",
            type=FilePath,
            default=None,
            help="YAML file with search configuration",
        )
        p.add_argument(
            "--json", action="store_true", help="Print the result as JSON"
        )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "grid":
        _run_grid(args)
    elif args.command == "graph":
        _run_graph(args)


if __name__ == "__main__":
    main()
