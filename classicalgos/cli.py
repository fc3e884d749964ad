"""Command line front end: timed sorts, permutations and topological sort."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

from classicalgos.permutations import johnson_trotter
from classicalgos.sorting import heap_sort, merge_sort, quick_sort, timed_sort
from classicalgos.toposort import CycleError, topological_sort

SORTS = {"heap": heap_sort, "merge": merge_sort, "quick": quick_sort}


def _non_negative(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def _row(values) -> str:
    return "".join(f"{v} " for v in values)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="classicalgos")
    commands = parser.add_subparsers(dest="command", required=True)

    sort = commands.add_parser("sort", help="sort random integers and time it")
    sort.add_argument("algorithm", choices=sorted(SORTS))
    sort.add_argument("count", type=_non_negative, help="number of elements")
    sort.add_argument("--seed", type=int, default=None, help="random seed")

    perms = commands.add_parser("permutations", help="list permutations of 1..n")
    perms.add_argument("n", type=_non_negative)

    topo = commands.add_parser(
        "toposort", help="order a graph read as 'V E' followed by E pairs 'u v'"
    )
    topo.add_argument("file", nargs="?", type=Path, help="input file (default: stdin)")
    return parser


def _run_sort(args: argparse.Namespace) -> int:
    rng = random.Random(args.seed)
    values = [rng.randrange(10000) for _ in range(args.count)]
    result, elapsed = timed_sort(SORTS[args.algorithm], values)
    print("Sorted array:")
    print(_row(result))
    print(f"Time taken to sort {args.count} elements: {elapsed:f} seconds")
    return 0


def _run_permutations(args: argparse.Namespace) -> int:
    for perm in johnson_trotter(args.n):
        print(_row(perm))
    return 0


def _run_toposort(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    text = args.file.read_text() if args.file else sys.stdin.read()
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError:
        parser.error("graph input must contain only integers")
    if len(numbers) < 2:
        parser.error("graph input must start with the vertex and edge counts")
    vertex_count, edge_count = numbers[0], numbers[1]
    pairs = numbers[2:]
    if edge_count < 0 or len(pairs) < 2 * edge_count:
        parser.error(f"expected {edge_count} edges")
    edges = list(zip(pairs[0 : 2 * edge_count : 2], pairs[1 : 2 * edge_count : 2]))
    try:
        order = topological_sort(vertex_count, edges)
    except CycleError as error:
        print("Topological Order: " + _row(error.order))
        print("Graph has a cycle. Topological sort not possible.")
        return 1
    except ValueError as error:
        parser.error(str(error))
    print("Topological Order: " + _row(order))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "sort":
        return _run_sort(args)
    if args.command == "permutations":
        return _run_permutations(args)
    return _run_toposort(args, parser)


if __name__ == "__main__":
    raise SystemExit(main())