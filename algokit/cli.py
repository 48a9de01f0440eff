"""Command-line front end for the algorithms in this package."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence
from typing import TextIO

from algokit.graphs import format_mst, hamiltonian_cycle, prim_mst, tsp_min_distance
from algokit.numbers import fibonacci_series, is_armstrong
from algokit.optimization import Item, fractional_knapsack
from algokit.sequences import is_palindrome


def _read_matrix(stream: TextIO) -> list[list[int]]:
    """Read a square matrix of whitespace-separated integers."""
    try:
        values = [int(token) for token in stream.read().split()]
    except ValueError as exc:
        raise ValueError("matrix entries must be integers") from exc
    size = math.isqrt(len(values))
    if not values or size * size != len(values):
        raise ValueError("matrix must be square and non-empty")
    return [values[row * size:(row + 1) * size] for row in range(size)]


def _cmd_armstrong(args: argparse.Namespace) -> str:
    if args.number < 0:
        return f"{args.number} is not an Armstrong number.\n"
    verdict = "is" if is_armstrong(args.number) else "is not"
    return f"{args.number} {verdict} an Armstrong number.\n"


def _cmd_fibonacci(args: argparse.Namespace) -> str:
    if args.count <= 0:
        return "Please enter a positive integer.\n"
    series = fibonacci_series(args.count)
    return "Fibonacci Series:\n" + "".join(f"{value} " for value in series) + "\n"


def _cmd_palindrome(args: argparse.Namespace) -> str:
    verdict = "is" if is_palindrome(args.text) else "is not"
    return f"The string {verdict} a palindrome.\n"


def _cmd_hamiltonian(args: argparse.Namespace) -> str:
    with args.matrix as stream:
        graph = _read_matrix(stream)
    cycle = hamiltonian_cycle(graph)
    if cycle is None:
        return "Solution does not exist\n"
    return "Hamiltonian cycle exists:\n" + " ".join(map(str, cycle)) + "\n"


def _cmd_mst(args: argparse.Namespace) -> str:
    with args.matrix as stream:
        graph = _read_matrix(stream)
    return "Minimum Spanning Tree using Prim's Algorithm:\n" + format_mst(prim_mst(graph))


def _cmd_tsp(args: argparse.Namespace) -> str:
    with args.matrix as stream:
        distances = _read_matrix(stream)
    return f"Minimum Distance Travelled -> {tsp_min_distance(distances)}\n"


def _cmd_knapsack(args: argparse.Namespace) -> str:
    if len(args.items) % 2:
        raise ValueError("items must be given as VALUE WEIGHT pairs")
    pairs = zip(args.items[::2], args.items[1::2])
    items = [Item(value=value, weight=weight) for value, weight in pairs]
    best = fractional_knapsack(args.capacity, items)
    return f"Maximum value we can obtain = {best:.2f}\n"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algokit", description="Run classic algorithms.")
    commands = parser.add_subparsers(dest="command", required=True)

    armstrong = commands.add_parser("armstrong", help="test for an Armstrong number")
    armstrong.add_argument("number", type=int)
    armstrong.set_defaults(handler=_cmd_armstrong)

    fibonacci = commands.add_parser("fibonacci", help="print a Fibonacci series")
    fibonacci.add_argument("count", type=int)
    fibonacci.set_defaults(handler=_cmd_fibonacci)

    palindrome = commands.add_parser("palindrome", help="test a word for being a palindrome")
    palindrome.add_argument("text")
    palindrome.set_defaults(handler=_cmd_palindrome)

    for name, handler, text in (
        ("hamiltonian", _cmd_hamiltonian, "find a Hamiltonian cycle"),
        ("mst", _cmd_mst, "minimum spanning tree by Prim's algorithm"),
        ("tsp", _cmd_tsp, "shortest travelling-salesman tour"),
    ):
        sub = commands.add_parser(name, help=text)
        sub.add_argument(
            "matrix",
            nargs="?",
            type=argparse.FileType("r"),
            default="-",
            help="file holding the adjacency matrix (default: standard input)",
        )
        sub.set_defaults(handler=handler)

    knapsack = commands.add_parser("knapsack", help="fractional knapsack")
    knapsack.add_argument("capacity", type=int)
    knapsack.add_argument("items", nargs="*", type=float, metavar="VALUE WEIGHT")
    knapsack.set_defaults(handler=_cmd_knapsack)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` and run the chosen command; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        output = args.handler(args)
    except ValueError as exc:
        print(f"algokit: error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())