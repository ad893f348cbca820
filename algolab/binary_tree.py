"""A key/value binary tree whose nodes are placed by an explicit L/R path."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A node holding a key, a value and two optional children."""

    key: Any
    value: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _values_line(values) -> str:
    return "".join(f"{value} " for value in values)


class BinaryTree:
    """Binary tree built by paths such as "", "L", "LR" from the root."""

    def __init__(self):
        self.root: Optional[TreeNode] = None

    def add_node(self, pos_from_root, key, value):
        """Place a new node at the given path.

        An empty path replaces the root. Every character but the last steps
        left ('L') or right ('R'); the last one chooses the side the node is
        attached to, replacing whatever was there. If the path runs off the
        tree, nothing is added.
        """
        if pos_from_root == "":
            self.root = TreeNode(key, value)
            return
        walker = self.root
        for step in pos_from_root[:-1]:
            if walker is None:
                return
            if step == "L":
                walker = walker.left
            elif step == "R":
                walker = walker.right
        if walker is None:
            return
        side = pos_from_root[-1]
        if side == "L":
            walker.left = TreeNode(key, value)
        elif side == "R":
            walker.right = TreeNode(key, value)

    def height(self) -> int:
        """Number of levels in the tree; 0 when it is empty."""

        def measure(node: Optional[TreeNode]) -> int:
            if node is None:
                return 0
            return max(measure(node.left), measure(node.right)) + 1

        return measure(self.root)

    def level_order(self) -> Iterator[TreeNode]:
        """Yield nodes level by level, left to right."""
        if self.root is None:
            return
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            yield node
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def bfs(self) -> str:
        """Values in breadth-first order, each followed by a space."""
        return _values_line(node.value for node in self.level_order())

    def _pre(self, node: Optional[TreeNode]) -> Iterator[Any]:
        if node is not None:
            yield node.value
            yield from self._pre(node.left)
            yield from self._pre(node.right)

    def _in(self, node: Optional[TreeNode]) -> Iterator[Any]:
        if node is not None:
            yield from self._in(node.left)
            yield node.value
            yield from self._in(node.right)

    def _post(self, node: Optional[TreeNode]) -> Iterator[Any]:
        if node is not None:
            yield from self._post(node.left)
            yield from self._post(node.right)
            yield node.value

    def pre_order(self) -> str:
        """Values in pre-order, each followed by a space."""
        return _values_line(self._pre(self.root))

    def in_order(self) -> str:
        """Values in in-order, each followed by a space."""
        return _values_line(self._in(self.root))

    def post_order(self) -> str:
        """Values in post-order, each followed by a space."""
        return _values_line(self._post(self.root))

    def __iter__(self) -> Iterator[TreeNode]:
        """Yield nodes in in-order, using an explicit stack."""
        stack: list[TreeNode] = []

        def push_left(node: Optional[TreeNode]) -> None:
            while node is not None:
                stack.append(node)
                node = node.left

        push_left(self.root)
        while stack:
            node = stack.pop()
            push_left(node.right)
            yield node

    def count_two_children_node(self) -> int:
        """Number of nodes that have both a left and a right child."""
        return sum(
            1
            for node in self.level_order()
            if node.left is not None and node.right is not None
        )

    def sum_of_leafs(self) -> int:
        """Sum of the values stored in leaf nodes."""
        return sum(node.value for node in self.level_order() if node.is_leaf)

    def delete_node(self, key) -> None:
        """Remove a key by overwriting it with the rightmost node.

        The last node in level order carrying the key takes the key and value
        of the node reached by walking right from the root; that rightmost node
        is then detached together with its left subtree. Nothing happens when
        the key is absent.
        """
        if self.root is None:
            return
        key_node = None
        for node in self.level_order():
            if node.key == key:
                key_node = node
        if key_node is None:
            return

        parent = None
        curr = self.root
        while curr.right is not None:
            parent = curr
            curr = curr.right
        key_node.key = curr.key
        key_node.value = curr.value

        if parent is None:
            self.root = None
        elif parent.right is curr:
            parent.right = curr.right
        else:
            parent.left = curr.right