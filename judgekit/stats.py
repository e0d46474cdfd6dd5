"""Rounded statistics: trimmed difficulty averages and summary figures."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

_TRIM_RATIO = 0.15


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves going away from zero."""
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def solved_ac_difficulty(opinions: Iterable[int]) -> int:
    """Return the 15%-trimmed mean of the opinions, rounded; 0 with none."""
    ordered = sorted(opinions)
    count = len(ordered)
    if count == 0:
        return 0
    cut = round_half_away(count * _TRIM_RATIO)
    kept = ordered[cut:count - cut]
    return round_half_away(sum(kept) / len(kept))


def summary_statistics(numbers: Iterable[int]) -> tuple[int, int, int, int]:
    """Return (rounded mean, median, mode, range) of the numbers.

    When several values share the highest frequency, the second smallest
    of them is the mode. Raises ValueError for no numbers.
    """
    ordered = sorted(numbers)
    if not ordered:
        raise ValueError("summary_statistics() needs at least one number")
    count = len(ordered)
    mean = round_half_away(sum(ordered) / count)
    median = ordered[count // 2]
    frequencies = Counter(ordered)
    top = max(frequencies.values())
    modes = sorted(value for value, seen in frequencies.items() if seen == top)
    mode = modes[1] if len(modes) > 1 else modes[0]
    return mean, median, mode, ordered[-1] - ordered[0]