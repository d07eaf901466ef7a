"""Solutions to the division B problems."""

from __future__ import annotations

import math
from functools import lru_cache

_T_PRIME_ROOT_LIMIT = 1_000_000


def max_books(times: list[int], limit: int) -> int:
    """Longest run of consecutive books whose reading times fit within ``limit``."""
    best = 0
    left = 0
    total = 0
    for right, t in enumerate(times):
        total += t
        while total > limit:
            total -= times[left]
            left += 1
        best = max(best, right - left + 1)
    return best


def can_make(x: int) -> bool:
    """Whether ``x`` is a sum of numbers 11, 111, 1111, ..."""
    return any(x - 111 * q >= 0 and (x - 111 * q) % 11 == 0 for q in range(101))


def flower_difference(beauties: list[int]) -> tuple[int, int]:
    """Maximum beauty difference and the number of pairs that reach it."""
    if not beauties:
        raise ValueError("at least one flower is required")
    low = min(beauties)
    high = max(beauties)
    n = len(beauties)
    if low == high:
        return 0, n * (n - 1) // 2
    return high - low, beauties.count(low) * beauties.count(high)


def sort_by_reversal(values: list[int]) -> tuple[int, int] | None:
    """1-based segment whose reversal sorts ``values``, or None if none exists.

    An already sorted list gives (1, 1).
    """
    target = sorted(values)
    mismatches = [i for i, (v, w) in enumerate(zip(values, target)) if v != w]
    if len(mismatches) < 2:
        return 1, 1
    left, right = mismatches[0], mismatches[-1]
    candidate = values[:left] + values[left : right + 1][::-1] + values[right + 1 :]
    if candidate == target:
        return left + 1, right + 1
    return None


def prime_sieve(limit: int) -> list[bool]:
    """Primality flags for 0..limit by the sieve of Eratosthenes."""
    flags = [True] * (limit + 1)
    for i in range(min(2, limit + 1)):
        flags[i] = False
    for i in range(2, math.isqrt(limit) + 1):
        if flags[i]:
            flags[i * i :: i] = [False] * len(range(i * i, limit + 1, i))
    return flags


@lru_cache(maxsize=1)
def _root_sieve() -> list[bool]:
    return prime_sieve(_T_PRIME_ROOT_LIMIT)


def is_t_prime(x: int) -> bool:
    """Whether ``x`` has exactly three divisors, i.e. is the square of a prime."""
    if x <= 0:
        return False
    root = math.isqrt(x)
    return root * root == x and root <= _T_PRIME_ROOT_LIMIT and _root_sieve()[root]


def min_clicks(n: int, m: int) -> int:
    """Fewest red (x2) and blue (-1) presses to turn ``n`` into ``m``."""
    if n >= m:
        return n - m
    if n < 1:
        raise ValueError("n must be positive to reach a larger m")
    clicks = 0
    while m > n:
        if m % 2:
            m += 1
            clicks += 1
        m //= 2
        clicks += 1
    return clicks + (n - m)


def lantern_radius(positions: list[int], length: int) -> float:
    """Smallest light radius so lanterns at ``positions`` light the street [0, length]."""
    if not positions:
        raise ValueError("at least one lantern is required")
    ordered = sorted(positions)
    radius = float(max(ordered[0], length - ordered[-1]))
    for prev, cur in zip(ordered, ordered[1:]):
        radius = max(radius, (cur - prev) / 2)
    return radius