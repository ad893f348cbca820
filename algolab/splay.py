"""A splay tree of integers with parent links."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class _SplayNode:
    value: Any
    left: Optional["_SplayNode"] = None
    right: Optional["_SplayNode"] = None
    parent: Optional["_SplayNode"] = None


class SplayTree:
    """Splay tree; every access moves the touched node to the root."""

    def __init__(self):
        self.root: Optional[_SplayNode] = None

    @staticmethod
    def _replace_in_parent(node: _SplayNode, new: _SplayNode) -> None:
        parent = node.parent
        if parent is not None:
            if parent.right is node:
                parent.right = new
            else:
                parent.left = new
        new.parent = parent

    def _rotate_right(self, node: _SplayNode) -> None:
        pivot = node.left
        inner = pivot.right
        self._replace_in_parent(node, pivot)
        if inner is not None:
            inner.parent = node
        pivot.right = node
        node.parent = pivot
        node.left = inner

    def _rotate_left(self, node: _SplayNode) -> None:
        pivot = node.right
        inner = pivot.left
        self._replace_in_parent(node, pivot)
        if inner is not None:
            inner.parent = node
        pivot.left = node
        node.parent = pivot
        node.right = inner

    def _rotate_up(self, node: _SplayNode) -> None:
        parent = node.parent
        if node is parent.left:
            self._rotate_right(parent)
        else:
            self._rotate_left(parent)

    def _splay(self, node: _SplayNode) -> None:
        while node.parent is not None:
            parent = node.parent
            grandparent = parent.parent
            if grandparent is None:
                self._rotate_up(node)
            elif (node is parent.left) == (parent is grandparent.left):
                self._rotate_up(parent)
                self._rotate_up(node)
            else:
                self._rotate_up(node)
                self._rotate_up(node)
        self.root = node

    def insert(self, value) -> None:
        """Insert a value (duplicates go right) and splay it to the root."""
        if self.root is None:
            self.root = _SplayNode(value)
            return
        current = self.root
        parent = None
        while current is not None:
            parent = current
            current = current.left if value < current.value else current.right
        node = _SplayNode(value, parent=parent)
        if value < parent.value:
            parent.left = node
        else:
            parent.right = node
        self._splay(node)

    def search(self, value) -> bool:
        """Look a value up, splaying it or the last node visited to the root."""
        node = self.root
        last = None
        while node is not None:
            if value < node.value:
                last, node = node, node.left
            elif value > node.value:
                last, node = node, node.right
            else:
                self._splay(node)
                return True
        if last is not None:
            self._splay(last)
        return False

    def remove(self, value):
        """Remove one occurrence of a value; return it, or None if absent."""
        if self.root is None:
            return None
        self.search(value)
        root = self.root
        if root.value != value:
            return None
        if root.left is None:
            self.root = root.right
            if self.root is not None:
                self.root.parent = None
            root.right = None
            return root.value
        left_tree = root.left
        right_tree = root.right
        left_tree.parent = None
        root.left = root.right = None
        largest = left_tree
        while largest.right is not None:
            largest = largest.right
        self._splay(largest)
        largest.right = right_tree
        if right_tree is not None:
            right_tree.parent = largest
        return root.value

    def pre_order(self) -> list:
        """Values in pre-order."""

        def walk(node: Optional[_SplayNode]) -> Iterator[Any]:
            if node is not None:
                yield node.value
                yield from walk(node.left)
                yield from walk(node.right)

        return list(walk(self.root))