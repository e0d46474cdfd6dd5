"""Sorting tasks: stable keys, counting sort and de-duplicated word ordering."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from operator import itemgetter

_COUNTING_MIN = 1
_COUNTING_MAX = 10_000


def sort_members(members: Iterable[tuple[int, str]]) -> list[tuple[int, str]]:
    """Order (age, name) pairs by age; equal ages keep their sign-up order."""
    return sorted(members, key=itemgetter(0))


def counting_sort(numbers: Iterable[int]) -> list[int]:
    """Sort integers in 1..10000 ascending by counting occurrences.

    Raises ValueError for a number outside that range.
    """
    counts: Counter[int] = Counter()
    for number in numbers:
        if not _COUNTING_MIN <= number <= _COUNTING_MAX:
            raise ValueError(
                f"{number} is outside {_COUNTING_MIN}..{_COUNTING_MAX}"
            )
        counts[number] += 1
    result: list[int] = []
    for value in range(_COUNTING_MIN, _COUNTING_MAX + 1):
        result.extend([value] * counts[value])
    return result


def sort_points(points: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Order points by x, then by y."""
    return sorted(points, key=lambda point: (point[0], point[1]))


def sort_points_by_y(points: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Order points by y, then by x."""
    return sorted(points, key=lambda point: (point[1], point[0]))


def sort_words(words: Iterable[str]) -> list[str]:
    """Return the distinct words, shortest first, ties in dictionary order."""
    return sorted(set(words), key=lambda word: (len(word), word))


def sort_numbers(numbers: Iterable[int]) -> list[int]:
    """Return the numbers in ascending order."""
    return sorted(numbers)