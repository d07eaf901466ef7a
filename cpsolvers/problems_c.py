"""Solutions to the division C problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations


def mosquito_max(values: Sequence[int]) -> int:
    """Largest value reachable by moving units between odd/even pairs.

    If all values share one parity nothing can move and the maximum stays as
    is; otherwise everything can be gathered except one unit per odd value
    beyond the first.
    """
    if not values:
        raise ValueError("at least one value is required")
    odd = sum(1 for v in values if v % 2)
    if odd == 0 or odd == len(values):
        return max(values)
    return sum(values) - odd + 1


def divisible_by_eight(digits: str) -> str | None:
    """A subsequence of at most three digits forming a multiple of 8, or None.

    Single digits are tried first, then pairs and triples in index order;
    numbers of two or more digits may not start with zero.
    """
    for digit in digits:
        if int(digit) % 8 == 0:
            return digit
    for length in (2, 3):
        for combo in combinations(digits, length):
            if combo[0] != "0":
                candidate = "".join(combo)
                if int(candidate) % 8 == 0:
                    return candidate
    return None


def last_exam_day(exams: Iterable[tuple[int, int]]) -> int:
    """Earliest day of the last exam, taking each on its early or scheduled day.

    Each exam is a pair (scheduled day, early day).
    """
    last = 0
    for scheduled, early in sorted(exams):
        last = early if early >= last else scheduled
    return last


def min_max_numbers(m: int, s: int) -> tuple[str, str] | None:
    """Smallest and largest m-digit numbers with digit sum s, or None."""
    if m < 1:
        raise ValueError("length must be at least 1")
    if s < 0 or (s == 0 and m > 1) or s > 9 * m:
        return None
    if s == 0:
        return "0", "0"

    first = 1 + max(0, s - 9 * (m - 1) - 1)
    remaining = s - first
    tail: list[int] = []
    for _ in range(m - 1):
        digit = min(9, remaining)
        tail.append(digit)
        remaining -= digit
    smallest = str(first) + "".join(str(d) for d in reversed(tail))

    remaining = s
    largest_digits: list[str] = []
    for _ in range(m):
        digit = min(9, remaining)
        largest_digits.append(str(digit))
        remaining -= digit
    return smallest, "".join(largest_digits)


def max_query_sum(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> int:
    """Largest total of range-sum queries after reordering ``values``.

    Queries are 1-based inclusive (l, r) pairs.
    """
    n = len(values)
    diff = [0] * (n + 1)
    for left, right in queries:
        if not 1 <= left <= right <= n:
            raise ValueError(f"query ({left}, {right}) out of range")
        diff[left - 1] += 1
        diff[right] -= 1
    coverage = list(accumulate(diff[:n]))
    return sum(v * c for v, c in zip(sorted(values), sorted(coverage)))


def _first_balanced(steps: Sequence[int], indices: Iterable[int]) -> int | None:
    """First index at which the running sum of ``steps`` becomes non-negative."""
    balance = 0
    for i in indices:
        balance += steps[i]
        if balance >= 0:
            return i
    return None


def has_median_split(values: Sequence[int], k: int) -> bool:
    """Whether the array splits into three parts, two of them with median <= k."""
    n = len(values)
    steps = [1 if v <= k else -1 for v in values]

    forward = False
    count = balance = 0
    i = 0
    while i < n:
        balance += steps[i]
        if balance >= 0:
            if i + 1 < n - 1 and values[i + 1] > k and (i + 1) % 2:
                i += 1
            count += 1
            balance = 0
        if count >= 2 and i < n - 1:
            forward = True
            break
        i += 1

    backward = False
    count = balance = 0
    i = n - 1
    while i >= 0:
        balance += steps[i]
        if balance >= 0:
            if i - 1 >= 1 and values[i - 1] > k and (n - i) % 2:
                i -= 1
            count += 1
            balance = 0
        if count >= 2 and i >= 0:
            backward = True
            break
        i -= 1

    prefix_end = _first_balanced(steps, range(n))
    suffix_start = _first_balanced(steps, range(n - 1, -1, -1))
    ends = (
        prefix_end is not None
        and suffix_start is not None
        and prefix_end < suffix_start
    )
    return forward or backward or ends


class NameRegistry:
    """Registers user names, suggesting name1, name2, ... for taken ones."""

    def __init__(self) -> None:
        self._registered: set[str] = set()
        self._next_suffix: dict[str, int] = {}

    def register(self, name: str) -> str:
        """Register ``name``; return "OK" or the numbered name actually used."""
        if name not in self._registered:
            self._registered.add(name)
            return "OK"
        suffix = self._next_suffix.get(name, 1)
        new_name = f"{name}{suffix}"
        self._registered.add(new_name)
        self._next_suffix[name] = suffix + 1
        return new_name


def max_felled_trees(trees: Sequence[tuple[int, int]]) -> int:
    """Most trees that can be felled left or right without overlapping.

    Trees are (position, height) pairs in increasing order of position.
    """
    if not trees:
        return 0
    if len(trees) == 1:
        return 1
    felled = 1
    occupied = trees[0][0]
    for (x, h), (next_x, _) in zip(trees[1:-1], trees[2:]):
        if x - h > occupied:
            felled += 1
            occupied = x
        elif x + h < next_x:
            felled += 1
            occupied = x + h
        else:
            occupied = x
    return felled + 1