from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from .metrics import MetricsCollector, ReportConfig
from .simulator import POLICY_FACTORIES, compare_policies
from .trace_suite import (
    DEFAULT_CAPACITIES,
    DEFAULT_DETAIL_CAPACITY,
    TRACE_RECIPES,
    get_trace,
    read_trace,
)

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def parse_arguments(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pagesim",
        description="PAGESIM - FIFO / LRU page replacement simulator",
        epilog=(
            "Examples:\n"
            "  pagesim                          # default trace, RSS 3 5 7\n"
            "  pagesim --trace belady --sizes 3 4\n"
            "  pagesim --pages 7 0 1 2 0 3 0 4 --sizes 3\n"
            "  pagesim --trace-file refs.txt --policies LRU"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--trace", default="default", help="Built-in trace key (see --list-traces)")
    source.add_argument("--trace-file", help="Text file of page references")
    source.add_argument("--pages", nargs="+", type=int, metavar="PAGE", help="Page references given inline")
    parser.add_argument(
        "--sizes",
        nargs="+",
        type=int,
        default=list(DEFAULT_CAPACITIES),
        metavar="N",
        help="Resident set sizes to trial (default: %(default)s)",
    )
    parser.add_argument(
        "--detail-size",
        type=int,
        default=DEFAULT_DETAIL_CAPACITY,
        metavar="N",
        help="Resident set size whose per-reference table is printed (default: %(default)s)",
    )
    parser.add_argument(
        "--policies",
        nargs="+",
        choices=list(POLICY_FACTORIES),
        default=list(POLICY_FACTORIES),
        type=str.upper,
        help="Policies to compare (default: %(default)s)",
    )
    parser.add_argument("--list-traces", action="store_true", help="List built-in traces and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def display_trace_list() -> None:
    print("Available traces:")
    for idx, recipe in enumerate(TRACE_RECIPES, 1):
        print(f"{idx}. {recipe.key} ({len(recipe.pages)} references)")
        print(f"   {recipe.description}")


def load_workload(args: argparse.Namespace) -> Tuple[str, List[int]]:
    if args.pages:
        return "inline", list(args.pages)
    if args.trace_file:
        return args.trace_file, read_trace(args.trace_file)
    return args.trace, get_trace(args.trace)


def validate_sizes(sizes: Sequence[int]) -> List[int]:
    """Reject non-positive sizes and drop duplicates, keeping order."""
    unique: List[int] = []
    for size in sizes:
        if size <= 0:
            raise ValueError(f"Resident set size must be a positive integer, got {size}")
        if size not in unique:
            unique.append(size)
    return unique


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_arguments(sys.argv[1:] if argv is None else argv)
    configure_logging(args.verbose)

    if args.list_traces:
        display_trace_list()
        return 0

    try:
        trace_name, trace = load_workload(args)
        if not trace:
            raise ValueError(f"Trace '{trace_name}' contains no page references")
        sizes = validate_sizes(args.sizes)
        factories = {name: POLICY_FACTORIES[name] for name in dict.fromkeys(args.policies)}
        results = compare_policies(trace, sizes, factories)
    except (ValueError, KeyError, OSError) as e:
        logger.debug("Simulation aborted", exc_info=True)
        message = e.args[0] if isinstance(e, KeyError) and e.args else e
        print(f"Error: {message}", file=sys.stderr)
        return 1

    collector = MetricsCollector(
        ReportConfig(trace_name=trace_name, total_requests=len(trace), capacities=sizes)
    )
    print(collector.build_report(results, detail_capacity=args.detail_size))
    return 0


if __name__ == "__main__":
    sys.exit(main())
