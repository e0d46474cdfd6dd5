"""Everyday arithmetic puzzles: averages, bags, snails, kits and triangles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def adjusted_average(scores: Sequence[float]) -> float:
    """Rescale every score to score / best * 100 and return their mean."""
    if not scores:
        raise ValueError("adjusted_average() needs at least one score")
    best = max(scores)
    if best <= 0:
        raise ValueError("at least one score must be above zero")
    return sum(score / best * 100.0 for score in scores) / len(scores)


def sugar_bags(weight: int) -> int:
    """Return the fewest 3 kg and 5 kg bags that hold weight exactly, or -1."""
    if weight < 0:
        raise ValueError("weight must not be negative")
    threes = 0
    while weight >= 0:
        if weight % 5 == 0:
            return threes + weight // 5
        weight -= 3
        threes += 1
    return -1


def snail_days(climb: int, slip: int, height: int) -> int:
    """Return the days a snail needs to reach height, climbing by day, slipping by night."""
    if climb <= slip:
        raise ValueError("the snail must climb more than it slips")
    if height <= climb:
        return 1
    remaining = height - climb
    daily = climb - slip
    return -(-remaining // daily) + 1


def next_number(number_text: str, continuations: Iterable[str]) -> str:
    """Return number_text advanced by one or two when that many continuations follow.

    Empty continuation lines are ignored; with any other count the text is
    returned unchanged.
    """
    count = sum(1 for line in continuations if line)
    if count in (1, 2):
        return str(int(number_text) + count)
    return number_text


def welcome_kit(
    participants: int,
    sizes: Sequence[int],
    shirt_bundle: int,
    pen_bundle: int,
) -> tuple[int, int, int]:
    """Return (shirt bundles, pen bundles, single pens) to equip every participant."""
    if shirt_bundle < 1 or pen_bundle < 1:
        raise ValueError("bundle sizes must be positive")
    shirts = sum(-(-wanted // shirt_bundle) for wanted in sizes)
    pens, singles = divmod(participants, pen_bundle)
    return shirts, pens, singles


def is_right_triangle(a: int, b: int, c: int) -> bool:
    """Return True if the three sides form a right triangle."""
    short, middle, longest = sorted((a, b, c))
    return short * short + middle * middle == longest * longest