"""Command-line demonstrations of the package's algorithms."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from typing import Optional

from algokit.arrays import bubble_sort
from algokit.graphs import format_matrix
from algokit.heaps import heap_sort
from algokit.recursion import factorial

DEFAULT_GRAPH = ((0, 1, 0), (1, 0, 1), (0, 1, 0))
DEFAULT_BUBBLE_VALUES = (64, 34, 25, 12, 22)
DEFAULT_HEAP_VALUES = (12, 11, 13, 5, 6, 7)
DEFAULT_FACTORIAL = 5


def _join(values: Iterable[int]) -> str:
    return " ".join(str(value) for value in values)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algokit", description="Run a small algorithm demonstration."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("matrix", help="print a sample adjacency matrix")
    bubble = commands.add_parser("bubble-sort", help="sort integers with bubble sort")
    bubble.add_argument("values", nargs="*", type=int)
    heap = commands.add_parser("heap-sort", help="sort integers with heap sort")
    heap.add_argument("values", nargs="*", type=int)
    fact = commands.add_parser("factorial", help="compute a factorial")
    fact.add_argument("n", nargs="?", type=int, default=DEFAULT_FACTORIAL)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command named in ``argv`` and return the exit status."""
    args = _parser().parse_args(argv)
    if args.command == "matrix":
        print("Adjacency Matrix:")
        print(format_matrix(DEFAULT_GRAPH))
    elif args.command == "bubble-sort":
        values = args.values or DEFAULT_BUBBLE_VALUES
        print("Sorted array: " + _join(bubble_sort(values)))
    elif args.command == "heap-sort":
        values = args.values or DEFAULT_HEAP_VALUES
        print("Heap Sorted Array: " + _join(heap_sort(values)))
    else:
        print(f"Factorial of {args.n} is {factorial(args.n)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())