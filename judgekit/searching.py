"""Lookup tasks: counting cards, membership checks and parametric search."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter
from collections.abc import Iterable, Sequence


def card_counts(cards: Iterable[int], queries: Iterable[int]) -> list[int]:
    """Return, for each query, how many cards carry that number."""
    counts = Counter(cards)
    return [counts[query] for query in queries]


def binary_search(sorted_values: Sequence[int], target: int) -> bool:
    """Return True if target occurs in the ascending sequence."""
    index = bisect_left(sorted_values, target)
    return index < len(sorted_values) and sorted_values[index] == target


def membership(values: Iterable[int], queries: Iterable[int]) -> list[bool]:
    """Return, for each query, whether it occurs among values."""
    ordered = sorted(values)
    return [binary_search(ordered, query) for query in queries]


def max_cable_length(cables: Iterable[int], needed: int) -> int:
    """Return the longest whole length that cuts at least needed pieces.

    Returns 0 when no positive length gives enough pieces.
    """
    lengths = list(cables)
    low, high = 1, max(lengths, default=0)
    answer = 0
    while low <= high:
        middle = (low + high) // 2
        pieces = sum(length // middle for length in lengths)
        if pieces >= needed:
            answer = middle
            low = middle + 1
        else:
            high = middle - 1
    return answer