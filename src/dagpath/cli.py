"""dagpath CLI entry point.

Usage: dagpath longest graph.json [--weight-attribute cost] [--hops]
"""
import argparse
import logging
import sys

from dagpath.graph.longest import DEFAULT_WEIGHT_ATTRIBUTE, LongestPath
from dagpath.graph.topological import CyclicGraphError, SortAlgorithm, topological_sort
from dagpath.loader import FORMATS, GraphFormatError, load_graph

log = logging.getLogger(__name__)


def _add_longest_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "longest",
        help="Print the longest path through a DAG read from a file.",
    )
    p.add_argument("file", help="JSON or CSV edge list")
    p.add_argument(
        "--format", choices=FORMATS, default=None,
        help="Input format (default: from the file suffix)",
    )
    p.add_argument(
        "--weight-attribute", default=DEFAULT_WEIGHT_ATTRIBUTE,
        help=f"Edge attribute holding the weight (default: {DEFAULT_WEIGHT_ATTRIBUTE})",
    )
    p.add_argument(
        "--sort", choices=[a.value for a in SortAlgorithm],
        default=SortAlgorithm.DEPTH_FIRST.value,
        help="Topological sort algorithm (default: dfs)",
    )
    p.add_argument(
        "--hops", action="store_true",
        help="Ignore weights and count edges.",
    )


def _run_longest(args: argparse.Namespace) -> int:
    try:
        graph = load_graph(args.file, fmt=args.format)
    except (OSError, GraphFormatError) as exc:
        print(f"dagpath: {exc}", file=sys.stderr)
        return 2

    log.info("loaded %r from %s", graph, args.file)
    algorithm = SortAlgorithm(args.sort)
    engine = LongestPath(
        args.weight_attribute,
        sort=lambda g: topological_sort(g, algorithm),
        use_weights=not args.hops,
    )
    engine.init(graph)
    try:
        engine.compute()
    except CyclicGraphError as exc:
        print(f"dagpath: {exc}", file=sys.stderr)
        return 2

    print(" -> ".join(str(n) for n in engine.longest_path_list))
    unit = args.weight_attribute if engine.weighted else "hops"
    print(f"value: {engine.longest_path_value:g} ({unit})")
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="dagpath",
        description="Longest paths through directed acyclic graphs.",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="-v for progress, -vv for algorithm detail.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_longest_parser(subparsers)

    args = parser.parse_args(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "longest":
        sys.exit(_run_longest(args))
