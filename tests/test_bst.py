import pytest

from algolab.bst import BinarySearchTree


def _tree(*values):
    tree = BinarySearchTree()
    for value in values:
        tree.add(value)
    return tree


VALUES = [50, 30, 70, 20, 40, 60, 80, 35, 65]


def test_in_order_is_sorted():
    tree = _tree(*VALUES)
    assert list(tree) == sorted(VALUES)
    assert list(tree.in_order()) == sorted(VALUES)


def test_duplicates_are_kept():
    tree = _tree(5, 5, 3)
    assert list(tree) == [3, 5, 5]
    tree.delete(5)
    assert list(tree) == [3, 5]


def test_traversal_orders():
    tree = _tree(5, 3, 8, 1, 4)
    assert list(tree.pre_order()) == [5, 3, 1, 4, 8]
    assert list(tree.post_order()) == [1, 4, 3, 8, 5]
    assert list(tree.level_order()) == [5, 3, 8, 1, 4]


def test_empty_tree():
    tree = BinarySearchTree()
    assert list(tree) == []
    assert list(tree.level_order()) == []
    assert list(tree.pre_order()) == []
    assert tree.height() == 0
    assert tree.get_min() is None
    assert tree.get_max() is None
    assert tree.sum_range(0, 100) == 0
    assert tree.find(1) is False


@pytest.mark.parametrize("victim", VALUES)
def test_delete_each_value(victim):
    tree = _tree(*VALUES)
    tree.delete(victim)
    expected = sorted(VALUES)
    expected.remove(victim)
    assert list(tree) == expected
    assert not tree.find(victim)


def test_delete_missing_value_changes_nothing():
    tree = _tree(*VALUES)
    tree.delete(999)
    assert list(tree) == sorted(VALUES)


def test_delete_root_with_two_children_uses_successor():
    tree = _tree(50, 30, 70, 60, 80)
    tree.delete(50)
    assert next(tree.pre_order()) == 60


def test_find():
    tree = _tree(*VALUES)
    assert all(tree.find(v) for v in VALUES)
    assert not tree.find(45)


@pytest.mark.parametrize("lo,hi", [(0, 100), (30, 60), (36, 39), (65, 65)])
def test_sum_range_matches_filtered_sum(lo, hi):
    tree = _tree(*VALUES)
    assert tree.sum_range(lo, hi) == sum(v for v in VALUES if lo <= v <= hi)


def test_min_and_max():
    tree = _tree(*VALUES)
    assert tree.get_min() == min(VALUES)
    assert tree.get_max() == max(VALUES)


def test_height_of_chain_equals_size():
    values = [1, 2, 3, 4, 5]
    assert _tree(*values).height() == len(values)


def test_height_of_balanced_insertion():
    tree = _tree(4, 2, 6, 1, 3, 5, 7)
    assert tree.height() == 3