"""Command-line front end that reads a problem's input and prints its answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

from cpsolvers.problems_a import cheap_travel, mex_spiral
from cpsolvers.problems_b import is_t_prime, sort_by_reversal
from cpsolvers.problems_c import NameRegistry, has_median_split
from cpsolvers.problems_d import min_desk_length


class _Tokens:
    """Whitespace-separated tokens of the input, consumed in order."""

    def __init__(self, text: str) -> None:
        self._words = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def next_int(self) -> int:
        value = self.word()
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"expected an integer, got {value!r}") from None

    def ints(self, count: int) -> list[int]:
        return [self.next_int() for _ in range(count)]


def _solve_cheap_travel(tokens: _Tokens) -> Iterator[str]:
    n, m, a, b = tokens.ints(4)
    if m <= 0:
        raise ValueError("ride count of the multi-ride ticket must be positive")
    yield str(cheap_travel(n, m, a, b))


def _solve_mex_grid(tokens: _Tokens) -> Iterator[str]:
    for _ in range(tokens.next_int()):
        for row in mex_spiral(tokens.next_int()):
            yield " ".join(map(str, row))


def _solve_t_primes(tokens: _Tokens) -> Iterator[str]:
    for _ in range(tokens.next_int()):
        yield "YES" if is_t_prime(tokens.next_int()) else "NO"


def _solve_sort_array(tokens: _Tokens) -> Iterator[str]:
    values = tokens.ints(tokens.next_int())
    segment = sort_by_reversal(values)
    if segment is None:
        yield "no"
    else:
        yield "yes"
        yield f"{segment[0]} {segment[1]}"


def _solve_registration(tokens: _Tokens) -> Iterator[str]:
    registry = NameRegistry()
    for _ in range(tokens.next_int()):
        yield registry.register(tokens.word())


def _solve_median_splits(tokens: _Tokens) -> Iterator[str]:
    for _ in range(tokens.next_int()):
        n, k = tokens.ints(2)
        yield "YES" if has_median_split(tokens.ints(n), k) else "NO"


def _solve_olympiad(tokens: _Tokens) -> Iterator[str]:
    for _ in range(tokens.next_int()):
        n, m, k = tokens.ints(3)
        yield str(min_desk_length(n, m, k))


_SOLVERS: dict[str, Callable[[_Tokens], Iterator[str]]] = {
    "cheap-travel": _solve_cheap_travel,
    "mex-grid": _solve_mex_grid,
    "t-primes": _solve_t_primes,
    "sort-array": _solve_sort_array,
    "registration": _solve_registration,
    "median-splits": _solve_median_splits,
    "olympiad": _solve_olympiad,
}


def main(argv: list[str] | None = None) -> int:
    """Solve the named problem for the input on stdin (or a file)."""
    parser = argparse.ArgumentParser(
        prog="cpsolvers", description="Solve a problem from its judge-style input."
    )
    parser.add_argument("problem", choices=sorted(_SOLVERS))
    parser.add_argument(
        "-i", "--input", type=Path, default=None, help="read input from this file"
    )
    args = parser.parse_args(argv)

    text = args.input.read_text() if args.input is not None else sys.stdin.read()
    try:
        lines = list(_SOLVERS[args.problem](_Tokens(text)))
    except ValueError as exc:
        print(f"cpsolvers: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write("".join(f"{line}\n" for line in lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())