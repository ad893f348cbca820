"""A self-balancing AVL tree of distinct keys."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class _AVLNode:
    key: Any
    left: Optional["_AVLNode"] = None
    right: Optional["_AVLNode"] = None
    height: int = 1


def _height(node: Optional[_AVLNode]) -> int:
    return 0 if node is None else node.height


def _update(node: _AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance_of(node: Optional[_AVLNode]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(node: _AVLNode) -> _AVLNode:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: _AVLNode) -> _AVLNode:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


class AVLTree:
    """AVL tree; inserting a key that is already present does nothing."""

    def __init__(self):
        self.root: Optional[_AVLNode] = None

    @classmethod
    def _insert(cls, node: Optional[_AVLNode], key) -> _AVLNode:
        if node is None:
            return _AVLNode(key)
        if key < node.key:
            node.left = cls._insert(node.left, key)
        elif key > node.key:
            node.right = cls._insert(node.right, key)
        else:
            return node

        _update(node)
        balance = _balance_of(node)
        if balance > 1 and key < node.left.key:
            return _rotate_right(node)
        if balance < -1 and key > node.right.key:
            return _rotate_left(node)
        if balance > 1 and key > node.left.key:
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balance < -1 and key < node.right.key:
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def insert(self, value) -> None:
        """Insert a key, rebalancing on the way back up."""
        self.root = self._insert(self.root, value)

    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""
        return _height(self.root)

    def balance(self) -> int:
        """Height of the left subtree of the root minus that of the right."""
        return _balance_of(self.root)

    def pre_order(self) -> list:
        """Keys in pre-order."""

        def walk(node: Optional[_AVLNode]) -> Iterator[Any]:
            if node is not None:
                yield node.key
                yield from walk(node.left)
                yield from walk(node.right)

        return list(walk(self.root))

    def tree_structure(self) -> str:
        """Text drawing of the tree, one line per level."""
        if self.root is None:
            return "NULL\n"
        height = self.height()
        out: list[str] = []

        def pad(n: int) -> None:
            out.append(" " * max(n - 1, 0))

        space = 2**height
        pad(space // 2)
        queue: deque[Optional[_AVLNode]] = deque([self.root])
        count = 0
        max_nodes = 1
        level = 0
        while queue:
            node = queue.popleft()
            if node is None:
                out.append(" ")
                queue.extend((None, None))
            else:
                out.append(str(node.key))
                queue.extend((node.left, node.right))
            pad(space)
            count += 1
            if count == max_nodes:
                out.append("\n")
                count = 0
                max_nodes *= 2
                level += 1
                space //= 2
                pad(space // 2)
            if level == height:
                break
        return "".join(out)