import random

import pytest

from judgekit.searching import (
    binary_search,
    card_counts,
    max_cable_length,
    membership,
)


def test_card_counts_sample():
    cards = [6, 3, 2, 10, 10, 10, -10, -10, 7, 3]
    queries = [10, 9, -5, 2, 3, 4, 5, -10]
    assert card_counts(cards, queries) == [3, 0, 0, 1, 2, 0, 0, 2]


def test_card_counts_over_distinct_values_adds_up_to_deck_size():
    rng = random.Random(5)
    cards = [rng.randint(-20, 20) for _ in range(300)]
    assert sum(card_counts(cards, set(cards))) == len(cards)


def test_card_counts_no_queries():
    assert card_counts([1, 2], []) == []


def test_binary_search_finds_present_and_missing():
    values = [1, 2, 3, 4, 5]
    assert binary_search(values, 3) is True
    assert binary_search(values, 6) is False
    assert binary_search(values, 0) is False


def test_binary_search_empty():
    assert binary_search([], 1) is False


def test_membership_sample():
    assert membership([4, 1, 5, 2, 3], [1, 3, 7, 9, 5]) == [
        True, True, False, False, True,
    ]


def test_membership_agrees_with_set_lookup():
    rng = random.Random(9)
    values = [rng.randint(-(2**31), 2**31 - 1) for _ in range(100)]
    queries = values[:20] + [rng.randint(-50, 50) for _ in range(20)]
    present = set(values)
    assert membership(values, queries) == [q in present for q in queries]


def test_max_cable_length_sample():
    assert max_cable_length([802, 743, 457, 539], 11) == 200


@pytest.mark.parametrize("seed", range(5))
def test_max_cable_length_is_the_largest_feasible(seed):
    rng = random.Random(seed)
    cables = [rng.randint(1, 10_000) for _ in range(10)]
    needed = rng.randint(1, 50)
    length = max_cable_length(cables, needed)
    assert length >= 1
    assert sum(c // length for c in cables) >= needed
    assert sum(c // (length + 1) for c in cables) < needed


def test_max_cable_length_huge_cable():
    assert max_cable_length([2**31 - 1], 1) == 2**31 - 1


def test_max_cable_length_impossible_and_empty():
    assert max_cable_length([1, 1], 3) == 0
    assert max_cable_length([], 1) == 0