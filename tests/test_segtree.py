import random

import pytest

from cpkit.segtree import (
    INF,
    MinCount,
    SegmentTree,
    flip,
    min_count_tree,
    min_tree,
    ones_tree,
    sum_tree,
)


def _all_ranges(n):
    return [(left, right) for left in range(n) for right in range(left, n)]


def test_sum_tree_matches_slices():
    values = [5, 4, 2, 3, 5]
    tree = sum_tree(values)
    for left, right in _all_ranges(len(values)):
        assert tree.query(left, right) == sum(values[left : right + 1])


def test_sum_tree_worked_example():
    tree = sum_tree([5, 4, 2, 3, 5])
    assert tree.query(0, 2) == 11
    tree.set(0, 3)
    assert tree.query(0, 2) == 9


def test_sum_tree_random_updates():
    rng = random.Random(7)
    values = [rng.randint(-50, 50) for _ in range(37)]
    tree = sum_tree(values)
    for _ in range(200):
        index = rng.randrange(len(values))
        values[index] = rng.randint(-50, 50)
        tree.set(index, values[index])
        left = rng.randrange(len(values))
        right = rng.randrange(left, len(values))
        assert tree.query(left, right) == sum(values[left : right + 1])


def test_len_reports_element_count():
    assert len(sum_tree([1, 2, 3, 4, 5, 6, 7])) == 7


def test_empty_range_returns_identity():
    assert sum_tree([1, 2, 3]).query(2, 1) == 0
    assert min_tree([1, 2, 3]).query(2, 1) == INF
    assert min_count_tree([1, 2]).query(1, 0) == MinCount(INF, 0)


def test_min_tree_matches_slices():
    values = [5, 4, 2, 3, 5]
    tree = min_tree(values)
    for left, right in _all_ranges(len(values)):
        assert tree.query(left, right) == min(values[left : right + 1])


def test_min_tree_after_updates():
    rng = random.Random(3)
    values = [rng.randint(0, 100) for _ in range(20)]
    tree = min_tree(values)
    for _ in range(100):
        index = rng.randrange(len(values))
        values[index] = rng.randint(0, 100)
        tree.set(index, values[index])
        left = rng.randrange(len(values))
        right = rng.randrange(left, len(values))
        assert tree.query(left, right) == min(values[left : right + 1])


def test_min_count_tree_counts_occurrences():
    values = [3, 4, 3, 5, 2, 2, 3]
    tree = min_count_tree(values)
    for left, right in _all_ranges(len(values)):
        part = values[left : right + 1]
        result = tree.query(left, right)
        assert result.value == min(part)
        assert result.count == part.count(min(part))


def test_min_count_tree_update_changes_count():
    values = [1, 1, 1, 4]
    tree = min_count_tree(values)
    tree.set(1, 7)
    assert tree.query(0, 3) == MinCount(1, values.count(1) - 1)
    tree.set(3, 0)
    assert tree.query(0, 3) == MinCount(0, 1)


def test_ones_tree_flip_toggles_count():
    bits = [1, 1, 0, 1, 0]
    tree = ones_tree(bits)
    assert tree.query(0, len(bits) - 1) == sum(bits)
    flip(tree, 2)
    bits[2] = 1
    assert tree.query(0, len(bits) - 1) == sum(bits)
    flip(tree, 0)
    bits[0] = 0
    assert tree.query(0, len(bits) - 1) == sum(bits)


def test_double_flip_is_identity():
    bits = [0, 1, 1, 0, 1, 0, 0, 1]
    tree = ones_tree(bits)
    for index in range(len(bits)):
        flip(tree, index)
        flip(tree, index)
    for left, right in _all_ranges(len(bits)):
        assert tree.query(left, right) == sum(bits[left : right + 1])


def test_update_applies_function_to_leaf():
    values = [2, 5, 9]
    tree = sum_tree(values)
    tree.update(1, lambda node: node * 10)
    assert tree.query(1, 1) == values[1] * 10
    assert tree.query(0, 2) == values[0] + values[1] * 10 + values[2]


def test_non_commutative_combine_preserves_order():
    letters = list("segment")
    tree = SegmentTree(letters, str, lambda a, b: a + b, "")
    for left, right in _all_ranges(len(letters)):
        assert tree.query(left, right) == "".join(letters[left : right + 1])
    tree.set(0, "S")
    assert tree.query(0, len(letters) - 1) == "Segment"


def test_single_element_tree():
    tree = min_count_tree([42])
    assert tree.query(0, 0) == MinCount(42, 1)


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_update_out_of_range_raises(index):
    tree = sum_tree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.set(index, 5)


def test_empty_values_rejected():
    with pytest.raises(ValueError):
        sum_tree([])