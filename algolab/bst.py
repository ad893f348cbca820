"""An unbalanced binary search tree with the usual queries and traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """Binary search tree; equal values are stored in the right subtree."""

    def __init__(self):
        self.root: Optional[_Node] = None

    @classmethod
    def _add(cls, node: Optional[_Node], value) -> _Node:
        if node is None:
            return _Node(value)
        if value < node.value:
            node.left = cls._add(node.left, value)
        else:
            node.right = cls._add(node.right, value)
        return node

    def add(self, value) -> None:
        """Insert a value; duplicates go to the right."""
        self.root = self._add(self.root, value)

    @staticmethod
    def _min_node(node: _Node) -> _Node:
        while node.left is not None:
            node = node.left
        return node

    @classmethod
    def _delete(cls, node: Optional[_Node], value) -> Optional[_Node]:
        if node is None:
            return None
        if value < node.value:
            node.left = cls._delete(node.left, value)
        elif value > node.value:
            node.right = cls._delete(node.right, value)
        else:
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left
            successor = cls._min_node(node.right)
            node.value = successor.value
            node.right = cls._delete(node.right, successor.value)
        return node

    def delete(self, value) -> None:
        """Remove one occurrence of a value; absent values are ignored."""
        self.root = self._delete(self.root, value)

    def find(self, value) -> bool:
        """Whether the value is stored in the tree."""
        node = self.root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def sum_range(self, lo, hi):
        """Sum of the stored values v with lo <= v <= hi."""

        def total(node: Optional[_Node]):
            if node is None:
                return 0
            if node.value < lo:
                return total(node.right)
            if node.value > hi:
                return total(node.left)
            return node.value + total(node.left) + total(node.right)

        return total(self.root)

    def get_min(self):
        """Smallest value, or None for an empty tree."""
        if self.root is None:
            return None
        return self._min_node(self.root).value

    def get_max(self):
        """Largest value, or None for an empty tree."""
        node = self.root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node.value

    def height(self) -> int:
        """Number of levels; 0 when the tree is empty."""

        def measure(node: Optional[_Node]) -> int:
            if node is None:
                return 0
            return max(measure(node.left), measure(node.right)) + 1

        return measure(self.root)

    def __iter__(self) -> Iterator[Any]:
        """Yield values in ascending order using an explicit stack."""
        stack: list[_Node] = []

        def push_left(node: Optional[_Node]) -> None:
            while node is not None:
                stack.append(node)
                node = node.left

        push_left(self.root)
        while stack:
            node = stack.pop()
            push_left(node.right)
            yield node.value

    def level_order(self) -> Iterator[Any]:
        """Yield values level by level, left to right."""
        if self.root is None:
            return
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            yield node.value
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def pre_order(self) -> Iterator[Any]:
        """Yield values in pre-order."""
        if self.root is None:
            return
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def in_order(self) -> Iterator[Any]:
        """Yield values in in-order (ascending)."""
        yield from self

    def post_order(self) -> Iterator[Any]:
        """Yield values in post-order."""

        def walk(node: Optional[_Node]) -> Iterator[Any]:
            if node is not None:
                yield from walk(node.left)
                yield from walk(node.right)
                yield node.value

        yield from walk(self.root)