"""Scans over short integer sequences and simple star patterns."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import pairwise


def min_max(values: Iterable[int]) -> tuple[int, int]:
    """Return (smallest, largest) of the values."""
    items = list(values)
    if not items:
        raise ValueError("min_max() needs at least one value")
    return min(items), max(items)


def less_than(values: Iterable[int], limit: int) -> list[int]:
    """Return the values below limit, in their original order."""
    return [value for value in values if value < limit]


def max_with_position(values: Iterable[int]) -> tuple[int, int]:
    """Return the largest value and its 1-based position (first one wins).

    Only values above zero count; with none, (0, 0) is returned.
    """
    best_value, best_position = 0, 0
    for position, value in enumerate(values, start=1):
        if value > best_value:
            best_value, best_position = value, position
    return best_value, best_position


def digit_counts(a: int, b: int, c: int) -> list[int]:
    """Return how often each digit 0..9 appears in a * b * c."""
    product = a * b * c
    if product < 0:
        raise ValueError("the product must not be negative")
    counts = Counter(str(product))
    return [counts[str(digit)] for digit in range(10)]


def distinct_remainders(values: Iterable[int]) -> int:
    """Return the number of distinct remainders modulo 42."""
    return len({value % 42 for value in values})


def scale_kind(notes: Iterable[int]) -> str:
    """Return 'ascending', 'descending' or 'mixed' for a run of notes."""
    ascending = descending = True
    for left, right in pairwise(notes):
        if left < right:
            descending = False
        elif left > right:
            ascending = False
    if ascending:
        return "ascending"
    if descending:
        return "descending"
    return "mixed"


def stairs(n: int) -> list[str]:
    """Return n lines, the i-th holding i stars."""
    return ["*" * i for i in range(1, n + 1)]


def right_aligned_stairs(n: int) -> list[str]:
    """Return n lines of stars padded on the left to width n."""
    return [" " * (n - i) + "*" * i for i in range(1, n + 1)]