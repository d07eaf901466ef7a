"""Solutions to the division D problems."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence


def arcology_sequence(n: int, m: int, k: int) -> list[int]:
    """Sequence of n values repeating 0..a-1, with a = max(n // (m + 1), k)."""
    period = max(n // (m + 1), k)
    if period <= 0:
        raise ValueError("period of the sequence must be positive")
    return [i % period for i in range(n)]


def count_topic_pairs(a: Sequence[int], b: Sequence[int]) -> int:
    """Number of pairs i < j with a[i] + a[j] > b[i] + b[j]."""
    if len(a) != len(b):
        raise ValueError("both sequences must have the same length")
    diffs = sorted(x - y for x, y in zip(a, b))
    return sum(
        len(diffs) - bisect_right(diffs, -d, lo=i + 1) for i, d in enumerate(diffs)
    )


def _fits(n: int, m: int, k: int, bench: int) -> bool:
    full, remainder = divmod(m, bench + 1)
    per_row = full * bench + min(remainder, bench)
    return n * per_row >= k


def min_desk_length(n: int, m: int, k: int) -> int:
    """Shortest longest bench that still seats k people in n rows of m seats."""
    low, high = 1, m
    answer = m
    while low <= high:
        mid = (low + high) // 2
        if _fits(n, m, k, mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer