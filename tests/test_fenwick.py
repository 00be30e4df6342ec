import pytest

from algokit.fenwick import FenwickTree

VALUES = [5, -2, 7, 0, 3, 11, -4, 8, 1]


def test_range_sums_match_slices():
    tree = FenwickTree(VALUES)
    for l in range(len(VALUES)):
        for r in range(l, len(VALUES)):
            assert tree.range_sum(l, r) == sum(VALUES[l : r + 1])


def test_prefix_sums_match_slices():
    tree = FenwickTree(VALUES)
    for r in range(len(VALUES)):
        assert tree.prefix_sum(r) == sum(VALUES[: r + 1])


def test_sized_tree_starts_empty_and_accumulates():
    tree = FenwickTree(6)
    assert len(tree) == 6
    assert tree.prefix_sum(5) == 0
    values = [0] * 6
    for index, delta in [(0, 4), (3, 9), (5, -1), (3, 2)]:
        tree.add(index, delta)
        values[index] += delta
    for l in range(6):
        for r in range(l, 6):
            assert tree.range_sum(l, r) == sum(values[l : r + 1])


def test_add_after_build():
    tree = FenwickTree(VALUES)
    values = list(VALUES)
    tree.add(4, 10)
    values[4] += 10
    assert [tree.prefix_sum(r) for r in range(len(values))] == [
        sum(values[: r + 1]) for r in range(len(values))
    ]


def test_out_of_range_raises():
    tree = FenwickTree(3)
    with pytest.raises(IndexError):
        tree.prefix_sum(3)
    with pytest.raises(IndexError):
        tree.add(-1, 1)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        FenwickTree(-1)