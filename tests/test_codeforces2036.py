import random
from functools import reduce
from operator import xor

import pytest

from algokit.codeforces2036 import (
    PatternTracker,
    RegionIndex,
    count_layer_occurrences,
    is_perfect_melody,
    max_shelf_profit,
    range_xor,
    xor_excluding,
)


@pytest.mark.parametrize("notes", [[114, 109], [17, 10], [76, 83, 88], [63]])
def test_melody_with_fifths_and_sevenths(notes):
    assert is_perfect_melody(notes) is True


@pytest.mark.parametrize("notes", [[38, 45, 38, 80], [10, 16], [5, 5]])
def test_melody_with_other_interval(notes):
    assert is_perfect_melody(notes) is False


def test_profit_when_every_brand_fits():
    bottles = [(2, 6), (2, 7), (1, 15)]
    assert max_shelf_profit(3, bottles) == sum(cost for _, cost in bottles)


def test_profit_single_shelf_takes_richest_brand():
    assert max_shelf_profit(1, [(1, 7), (2, 5)]) == 7


def test_profit_grows_with_shelves_up_to_total():
    bottles = [(1, 3), (2, 6), (2, 7), (1, 15), (3, 1), (4, 9)]
    profits = [max_shelf_profit(n, bottles) for n in range(1, 7)]
    assert profits == sorted(profits)
    assert profits[-1] == sum(cost for _, cost in bottles)


def test_profit_rejects_negative_shelves():
    with pytest.raises(ValueError):
        max_shelf_profit(-1, [(1, 1)])


def test_tracker_short_text_never_matches():
    tracker = PatternTracker("100")
    assert tracker.update(0, "1") is False
    assert tracker.text == "100"


def test_tracker_follows_edits():
    tracker = PatternTracker("1100000")
    assert tracker.update(6, "1") is True
    assert tracker.update(1, "0") is False
    assert tracker.update(1, "1") is True


def test_tracker_creates_pattern():
    tracker = PatternTracker("1000")
    assert tracker.found is False
    assert tracker.update(1, "1") is True
    assert tracker.text == "1100"


def test_tracker_agrees_with_substring_search():
    rng = random.Random(7)
    tracker = PatternTracker("".join(rng.choice("01") for _ in range(12)))
    for _ in range(200):
        found = tracker.update(rng.randrange(12), rng.choice("01"))
        assert found == ("1100" in tracker.text)


def test_tracker_rejects_bad_input():
    with pytest.raises(ValueError):
        PatternTracker("1201")
    tracker = PatternTracker("1100")
    with pytest.raises(ValueError):
        tracker.update(0, "2")
    with pytest.raises(IndexError):
        tracker.update(4, "1")


def test_layer_pattern_wraps_around_corner():
    straight = count_layer_occurrences(["1543", "7777"])
    wrapped = count_layer_occurrences(["15", "34"])
    assert straight > 0
    assert straight == wrapped


def test_layer_without_pattern():
    assert count_layer_occurrences(["7777", "7777", "7777", "7777"]) == 0


@pytest.mark.parametrize(
    "grid",
    [
        ["1543", "7777"],
        ["154315", "345143", "431545", "154315"],
        ["5431", "1345", "3154", "4315"],
    ],
)
def test_layer_count_survives_rotation(grid):
    rotated = ["".join(row) for row in zip(*grid[::-1])]
    assert count_layer_occurrences(rotated) == count_layer_occurrences(grid)


def test_layer_rejects_ragged_grid():
    with pytest.raises(ValueError):
        count_layer_occurrences(["1543", "77"])


@pytest.fixture
def regions():
    return RegionIndex([[1, 3, 5, 9], [4, 6, 5, 3], [2, 1, 2, 7]])


def test_region_queries(regions):
    assert regions.query([(1, ">", 4), (2, "<", 8), (1, "<", 6)]) == 2
    assert regions.query([(1, "<", 8), (2, ">", 8)]) == -1
    assert regions.query([(3, ">", 5)]) == 3


def test_region_without_requirements_is_first(regions):
    assert regions.query([]) == 1


def test_region_rejects_bad_requirement(regions):
    with pytest.raises(ValueError):
        regions.query([(1, "=", 4)])
    with pytest.raises(IndexError):
        regions.query([(5, ">", 4)])


@pytest.mark.parametrize("n", range(12))
def test_range_xor_from_zero(n):
    assert range_xor(0, n) == reduce(xor, range(n + 1))


@pytest.mark.parametrize("l,r", [(1, 1), (3, 9), (5, 6), (7, 20), (16, 31)])
def test_range_xor_matches_direct_fold(l, r):
    assert range_xor(l, r) == reduce(xor, range(l, r + 1))


def test_range_xor_rejects_inverted_range():
    with pytest.raises(ValueError):
        range_xor(5, 4)


@pytest.mark.parametrize(
    "l,r,i,k",
    [(1, 3, 1, 0), (2, 28, 3, 7), (15, 43, 1, 0), (57, 200, 1, 0), (101, 199, 2, 2), (4, 5, 3, 7)],
)
def test_xor_excluding_matches_direct_fold(l, r, i, k):
    kept = [x for x in range(l, r + 1) if x % (1 << i) != k]
    assert xor_excluding(l, r, i, k) == reduce(xor, kept, 0)


def test_xor_excluding_rejects_large_k():
    with pytest.raises(ValueError):
        xor_excluding(1, 10, 2, 4)