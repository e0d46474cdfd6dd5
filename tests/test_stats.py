import pytest

from judgekit.stats import round_half_away, solved_ac_difficulty, summary_statistics


@pytest.mark.parametrize("k", [-7, -1, 0, 1, 12, 4000])
def test_round_half_away_keeps_integers(k):
    assert round_half_away(float(k)) == k


@pytest.mark.parametrize("k", [0, 1, 2, 9, 100])
def test_round_half_away_halves_go_up_in_magnitude(k):
    assert round_half_away(k + 0.5) == k + 1
    assert round_half_away(-(k + 0.5)) == -(k + 1)


@pytest.mark.parametrize("value", [0.2, 1.49, 3.7, 12.5001, 0.49999999999999994])
def test_round_half_away_is_odd_symmetric(value):
    assert round_half_away(-value) == -round_half_away(value)


def test_round_half_away_just_below_half_stays_down():
    assert round_half_away(0.49999999999999994) == round_half_away(0.0)


def test_solved_ac_no_opinions():
    assert solved_ac_difficulty([]) == 0


def test_solved_ac_samples():
    assert solved_ac_difficulty([1, 5, 5, 7, 8]) == 6
    assert solved_ac_difficulty([1, 13, 12, 15, 3, 16, 13, 12, 14, 15]) == 13


@pytest.mark.parametrize("n", [1, 2, 7, 20])
def test_solved_ac_uniform_opinions(n):
    assert solved_ac_difficulty([17] * n) == 17


def test_solved_ac_trims_outliers():
    opinions = [30] + [10] * 18 + [1]
    assert solved_ac_difficulty(opinions) == 10


def test_summary_statistics_sample():
    assert summary_statistics([1, 3, 8, -2, 2]) == (2, 2, 1, 10)


def test_summary_statistics_single_value():
    mean, median, mode, spread = summary_statistics([4000])
    assert (mean, median, mode) == (4000, 4000, 4000)
    assert spread == 4000 - 4000


def test_summary_statistics_tied_modes_take_second_smallest():
    assert summary_statistics([3, 1, 2])[2] == 2


def test_summary_statistics_unique_mode():
    mean, median, mode, spread = summary_statistics([-1, -1, 5])
    assert mode == -1
    assert median == -1
    assert spread == 5 - (-1)


def test_summary_statistics_rejects_empty():
    with pytest.raises(ValueError):
        summary_statistics([])