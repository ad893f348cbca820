from itertools import accumulate

import pytest

from algolab.tree_problems import (
    build_tree,
    distinct_parities,
    enlarge,
    find_target,
    great_ancestor,
    in_range,
    kth_smallest,
    largest_diff,
    level_alter_traverse,
    longest_path_sum,
    lowest_ancestor,
    range_count,
    single_child,
    subtree_with_range,
    sum_digit_path,
)

BST_LEVELS = [4, 2, 6, 1, 3, 5, 7]
FULL = [1, 2, 3, 4, 5, 6, 7]


def _in_order(node):
    if node is None:
        return []
    return _in_order(node.left) + [node.val] + _in_order(node.right)


def test_build_tree_places_children():
    root = build_tree([1, 2, 3, None, 4])
    assert root.val == 1
    assert root.left.val == 2
    assert root.right.val == 3
    assert root.left.left is None
    assert root.left.right.val == 4
    assert root.right.left is None


def test_build_tree_empty():
    assert build_tree([]) is None


@pytest.mark.parametrize("a,b,expected", [(4, 5, 2), (4, 7, 1), (2, 4, 2), (6, 7, 3)])
def test_lowest_ancestor(a, b, expected):
    assert lowest_ancestor(build_tree(FULL), a, b) == expected


def test_lowest_ancestor_missing_value():
    assert lowest_ancestor(build_tree(FULL), 4, 42) == -1


def test_distinct_parities():
    assert distinct_parities(build_tree([1, 2, 3])) == 1
    assert distinct_parities(build_tree([1, 2, 4])) == 0
    assert distinct_parities(None) == 0


def test_enlarge_gives_suffix_sums():
    root = build_tree(BST_LEVELS)
    original = _in_order(root)
    expected = list(accumulate(reversed(original)))[::-1]
    assert _in_order(enlarge(root)) == expected
    assert root.right.right.val == max(BST_LEVELS)


def test_great_ancestor_decreasing_chain_counts_all():
    values = [5, 4, None, 3]
    assert great_ancestor(build_tree(values)) == 3


def test_great_ancestor_increasing_chain_counts_only_leaf():
    root = build_tree([1, None, 2, None, 3])
    assert great_ancestor(root) == 1


def test_longest_path_sum_picks_largest_among_deepest():
    root = build_tree([1, 2, 3, None, None, 4, 5])
    assert longest_path_sum(root) == 1 + 3 + 5
    assert longest_path_sum(None) == 0


def test_sum_digit_path():
    assert sum_digit_path(build_tree([1, 2, 3])) == 12 + 13
    assert sum_digit_path(None) == 0


def test_sum_digit_path_wraps_modulus():
    root = build_tree([9, None, 9, None, 9, None, 9, None, 9, None, 9, None, 9, None, 9, None, 9, None, 9])
    assert sum_digit_path(root) == 9999999999 % 27022001


def test_largest_diff():
    root = build_tree([8, 3, 10, 1, 6, None, 14])
    assert largest_diff(root) == 8 - 1


def test_largest_diff_without_inner_nodes():
    assert largest_diff(build_tree([5])) == -99999
    assert largest_diff(None) == -99999


@pytest.mark.parametrize("lo,hi", [(2, 5), (0, 10), (3, 3), (8, 9)])
def test_range_count_and_in_range_agree(lo, hi):
    root = build_tree(BST_LEVELS)
    expected = len([v for v in BST_LEVELS if lo <= v <= hi])
    assert range_count(root, lo, hi) == expected
    assert in_range(root, lo, hi) == expected


def test_level_alter_traverse():
    assert level_alter_traverse(build_tree(FULL)) == [1, 3, 2, 4, 5, 6, 7]
    assert level_alter_traverse(None) == []


@pytest.mark.parametrize("k", range(1, len(BST_LEVELS) + 1))
def test_kth_smallest_matches_sorted(k):
    assert kth_smallest(build_tree(BST_LEVELS), k) == sorted(BST_LEVELS)[k - 1]


@pytest.mark.parametrize("k", [0, len(BST_LEVELS) + 1])
def test_kth_smallest_out_of_range(k):
    assert kth_smallest(build_tree(BST_LEVELS), k) == -1


def test_find_target():
    root = build_tree([5, 3, 6, 2, 4, None, 7])
    assert find_target(root, 2 + 7) is True
    assert find_target(root, 4) is False
    assert find_target(None, 0) is False


def test_single_child():
    assert single_child(build_tree([1, None, 2, None, 3])) == 2
    assert single_child(build_tree(FULL)) == 0


def test_subtree_with_range_keeps_only_range():
    root = subtree_with_range(build_tree(BST_LEVELS), 2, 5)
    assert _in_order(root) == [v for v in sorted(BST_LEVELS) if 2 <= v <= 5]


def test_subtree_with_range_can_replace_root():
    root = subtree_with_range(build_tree(BST_LEVELS), 5, 7)
    assert root.val == 6
    assert _in_order(root) == [5, 6, 7]


def test_subtree_with_range_empty_result():
    assert subtree_with_range(build_tree(BST_LEVELS), 100, 200) is None