import pytest

from algolab.binary_tree import BinaryTree, TreeNode


@pytest.fixture
def small_tree():
    tree = BinaryTree()
    tree.add_node("", 2, 4)
    tree.add_node("L", 3, 6)
    tree.add_node("R", 5, 9)
    return tree


@pytest.fixture
def deeper_tree():
    tree = BinaryTree()
    tree.add_node("", 1, 1)
    tree.add_node("L", 2, 2)
    tree.add_node("R", 3, 3)
    tree.add_node("LL", 4, 4)
    tree.add_node("LR", 5, 5)
    tree.add_node("RR", 6, 6)
    tree.add_node("LRL", 7, 7)
    return tree


def test_empty_tree():
    tree = BinaryTree()
    assert tree.height() == 0
    assert tree.bfs() == ""
    assert tree.pre_order() == ""
    assert list(tree) == []
    assert tree.count_two_children_node() == 0
    assert tree.sum_of_leafs() == 0


def test_small_tree_height_and_bfs(small_tree):
    assert small_tree.height() == 2
    assert small_tree.bfs() == "4 6 9 "


def test_small_tree_traversals(small_tree):
    assert small_tree.pre_order() == "4 6 9 "
    assert small_tree.in_order() == "6 4 9 "
    assert small_tree.post_order() == "6 9 4 "


def test_iter_matches_in_order(deeper_tree):
    values = [node.value for node in deeper_tree]
    assert " ".join(map(str, values)) + " " == deeper_tree.in_order()


def test_level_order_yields_nodes(deeper_tree):
    keys = [node.key for node in deeper_tree.level_order()]
    assert keys == [1, 2, 3, 4, 5, 6, 7]
    assert all(isinstance(node, TreeNode) for node in deeper_tree.level_order())


def test_traversals_are_permutations(deeper_tree):
    expected = sorted(deeper_tree.bfs().split())
    for text in (deeper_tree.pre_order(), deeper_tree.in_order(), deeper_tree.post_order()):
        assert sorted(text.split()) == expected


def test_height_deeper(deeper_tree):
    assert deeper_tree.height() == 4


def test_count_two_children(deeper_tree):
    assert deeper_tree.count_two_children_node() == 2


def test_sum_of_leafs(deeper_tree):
    leaf_values = {4, 7, 6}
    assert deeper_tree.sum_of_leafs() == sum(leaf_values)


def test_add_node_off_tree_is_ignored(small_tree):
    before = small_tree.pre_order()
    small_tree.add_node("LLL", 8, 8)
    assert small_tree.pre_order() == before


def test_add_node_replaces_existing_child(small_tree):
    small_tree.add_node("L", 7, 70)
    assert small_tree.root.left.value == 70
    assert small_tree.bfs() == "4 70 9 "


def test_add_node_empty_path_replaces_root(small_tree):
    small_tree.add_node("", 1, 1)
    assert small_tree.height() == 1
    assert small_tree.root.left is None


def test_add_node_to_empty_tree_with_path_is_ignored():
    tree = BinaryTree()
    tree.add_node("L", 1, 1)
    assert tree.root is None


def test_delete_node_replaces_with_rightmost(deeper_tree):
    deeper_tree.delete_node(2)
    keys = [node.key for node in deeper_tree.level_order()]
    assert 2 not in keys
    assert 6 in keys
    assert deeper_tree.root.left.key == 6
    assert deeper_tree.root.right.right is None


def test_delete_missing_key_is_noop(deeper_tree):
    before = deeper_tree.bfs()
    deeper_tree.delete_node(99)
    assert deeper_tree.bfs() == before


def test_delete_on_empty_tree():
    tree = BinaryTree()
    tree.delete_node(1)
    assert tree.root is None


def test_delete_when_root_is_rightmost():
    tree = BinaryTree()
    tree.add_node("", 1, 1)
    tree.add_node("L", 2, 2)
    tree.delete_node(2)
    assert tree.root is None
    assert tree.height() == 0