"""Solutions to the division A problems."""

from __future__ import annotations

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))  # right, down, left, up


def cheap_travel(n: int, m: int, a: int, b: int) -> int:
    """Minimum cost of n rides with single tickets at ``a`` or m-ride tickets at ``b``."""
    singles = n * a
    mixed = (n // m) * b + (n % m) * a
    only_multi = -(-n // m) * b
    return min(singles, mixed, only_multi)


def cut_ribbon(n: int, x: int, y: int, z: int) -> int:
    """Maximum number of pieces of lengths x, y, z that make up length n, or -1."""
    best = [-1] * (n + 1)
    best[0] = 0
    for length in range(1, n + 1):
        for piece in (x, y, z):
            if length >= piece and best[length - piece] != -1:
                best[length] = max(best[length], best[length - piece] + 1)
    return best[n]


def mex_spiral(n: int) -> list[list[int]]:
    """Fill an n x n grid with 0..n*n-1 in a spiral starting from the centre."""
    if n <= 0:
        return []
    grid = [[-1] * n for _ in range(n)]
    row = col = n // 2
    if n % 2 == 0:
        row -= 1
        col -= 1
    grid[row][col] = 0
    placed = 1
    direction = 0
    steps = 1
    while placed < n * n:
        for _ in range(2):
            d_row, d_col = _DIRECTIONS[direction]
            for _ in range(steps):
                row += d_row
                col += d_col
                if 0 <= row < n and 0 <= col < n and grid[row][col] == -1:
                    grid[row][col] = placed
                    placed += 1
            direction = (direction + 1) % 4
        steps += 1
    return grid


def has_two_substrings(s: str) -> bool:
    """Whether ``s`` holds non-overlapping occurrences of "AB" and "BA"."""
    ab = [i for i, pair in enumerate(zip(s, s[1:])) if pair == ("A", "B")]
    ba = [i for i, pair in enumerate(zip(s, s[1:])) if pair == ("B", "A")]
    if not ab or not ba:
        return False
    return ba[-1] >= ab[0] + 2 or ab[-1] >= ba[0] + 2


def min_rest_days(days: list[int]) -> int:
    """Fewest rest days when the same activity may not be done two days running.

    Each day code is 0 (nothing open), 1 (contest), 2 (gym) or 3 (both).
    """
    inf = float("inf")
    rest, contest, sport = 0, inf, inf
    for day in days:
        new_rest = min(rest, contest, sport) + 1
        new_contest = min(rest, sport) if day in (1, 3) else inf
        new_sport = min(rest, contest) if day in (2, 3) else inf
        rest, contest, sport = new_rest, new_contest, new_sport
    return int(min(rest, contest, sport))