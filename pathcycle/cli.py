"""Command-line interface for pathcycle."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, List, Optional

from pathcycle.algorithms.cycle import analyze
from pathcycle.algorithms.verify import run_sweep
from pathcycle.config import SweepConfig
from pathcycle.logging import configure_verbosity, get_logger
from pathcycle.path.builder import create_path

logger = get_logger(__name__)


def _format_table(headers: List[str], rows: List[List[Any]], min_width: int = 6) -> str:
    """Format rows as a plain ASCII table.

    Args:
        headers: Column headers.
        rows: Data rows; cells are converted with ``str``.
        min_width: Minimum column width.

    Returns:
        The table, or an empty string when there are no rows.
    """
    if not rows:
        return ""

    cells = [[str(item) for item in row] for row in [headers] + rows]
    widths = [
        max(min_width, max(len(row[col]) for row in cells))
        for col in range(len(headers))
    ]

    def format_row(row: List[str]) -> str:
        return "   " + " | ".join(f"{item:<{widths[i]}}" for i, item in enumerate(row))

    lines = [format_row(cells[0])]
    lines.append("   " + "-+-".join("-" * width for width in widths))
    lines.extend(format_row(row) for row in cells[1:])
    return "\n".join(lines)


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    """Return the unit matching count ``n``."""
    if n == 1:
        return singular
    return plural or (singular + "s")


def _analyze_shape(n_before: int, n_cycle: int, as_json: bool) -> None:
    logger.debug(f"Building path with {n_before} leading and {n_cycle} cycle nodes")
    path = create_path(n_before, n_cycle)
    info = analyze(path)

    if as_json:
        print(json.dumps(info.to_dict(), indent=2))
        return

    print(f"Path: {len(path)} {_plural(len(path), 'node')}")
    if not info.has_cycle:
        n_nodes = info.nodes_before_cycle
        print(f"No cycle; path ends after {n_nodes} {_plural(n_nodes, 'node')}")
        return
    print(f"Cycle starts at node {info.cycle_start}")
    print(f"  nodes before cycle: {info.nodes_before_cycle}")
    print(f"  nodes in cycle:     {info.nodes_in_cycle}")


def _run_sweep(max_before: int, max_cycle: int) -> int:
    """Run the shape sweep and print failures.

    Returns:
        Process exit status: 0 if every shape matched, 1 otherwise.
    """
    config = SweepConfig(max_nodes_before_cycle=max_before, max_nodes_in_cycle=max_cycle)
    logger.info(f"Sweeping {config.shape_count} path shapes")
    checks = run_sweep(config)
    failed = [check for check in checks if not check.passed]

    if failed:
        rows = [[str(c.expected), str(c.observed)] for c in failed]
        print(_format_table(["Expected", "Observed"], rows))
        logger.error(
            f"{len(failed)} of {len(checks)} {_plural(len(checks), 'shape')} failed"
        )
        return 1

    print(f"All {len(checks)} {_plural(len(checks), 'shape')} verified")
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``pathcycle`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="pathcycle",
        description="Detect and measure cycles in singly-linked paths.",
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
        metavar="{analyze,sweep}",
        help="Available commands",
    )

    analyze_parser = subparsers.add_parser(
        "analyze", help="Build a path of a given shape and analyze it"
    )
    analyze_parser.add_argument(
        "--before", "-b", type=int, default=0, help="Nodes before the cycle"
    )
    analyze_parser.add_argument(
        "--cycle", "-c", type=int, default=0, help="Nodes in the cycle"
    )
    analyze_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )

    sweep_parser = subparsers.add_parser(
        "sweep", help="Verify the analyzer over a grid of path shapes"
    )
    sweep_parser.add_argument(
        "--max-before",
        type=int,
        default=SweepConfig.max_nodes_before_cycle,
        help="Exclusive bound on nodes before the cycle",
    )
    sweep_parser.add_argument(
        "--max-cycle",
        type=int,
        default=SweepConfig.max_nodes_in_cycle,
        help="Exclusive bound on nodes in the cycle",
    )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    # Log records share stdout with the JSON document
    json_output = getattr(args, "json", False)
    configure_verbosity(verbose=args.verbose, quiet=args.quiet or json_output)
    logger.debug("Debug logging enabled")

    if args.command == "analyze":
        if args.before < 0 or args.cycle < 0:
            parser.error("--before and --cycle must be non-negative")
        _analyze_shape(args.before, args.cycle, args.json)
    elif args.command == "sweep":
        if args.max_before < 0 or args.max_cycle < 0:
            parser.error("--max-before and --max-cycle must be non-negative")
        status = _run_sweep(args.max_before, args.max_cycle)
        if status:
            raise SystemExit(status)


if __name__ == "__main__":
    main()
