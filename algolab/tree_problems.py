"""Assorted problems on plain integer binary trees."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional

_NULL_MAX = -99999
_NULL_MIN = 99999
_DIGIT_PATH_MOD = 27022001


@dataclass(eq=False)
class BTNode:
    """A binary tree node holding an integer."""

    val: int = 0
    left: Optional["BTNode"] = None
    right: Optional["BTNode"] = None


def build_tree(values: Iterable[Optional[int]]) -> Optional[BTNode]:
    """Build a tree from level-order values; None marks a missing child.

    Children are given only for nodes that exist, so a missing node's
    children are not listed.
    """
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = BTNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = BTNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def _c_rem2(number: int) -> int:
    """Remainder of division by 2 with the sign of the dividend."""
    rem = abs(number) % 2
    return rem if number >= 0 else -rem


def lowest_ancestor(root: Optional[BTNode], a: int, b: int) -> int:
    """Value of the deepest common ancestor of a and b, or -1 if either is absent."""

    def find_path(node: Optional[BTNode], target: int, path: list[int]) -> bool:
        if node is None:
            return False
        path.append(node.val)
        if node.val == target:
            return True
        if find_path(node.left, target, path) or find_path(node.right, target, path):
            return True
        path.pop()
        return False

    path_a: list[int] = []
    path_b: list[int] = []
    if not find_path(root, a, path_a) or not find_path(root, b, path_b):
        return -1
    common = path_a[0]
    for x, y in zip(path_a, path_b):
        if x != y:
            break
        common = x
    return common


def distinct_parities(root: Optional[BTNode]) -> int:
    """Count nodes with two children whose subtree sums have different parity."""
    count = 0

    def subtree_sum(node: Optional[BTNode]) -> int:
        nonlocal count
        if node is None:
            return 0
        left = subtree_sum(node.left)
        right = subtree_sum(node.right)
        if node.left is not None and node.right is not None:
            lp, rp = _c_rem2(left), _c_rem2(right)
            if (lp == 0 and rp == 1) or (lp == 1 and rp == 0):
                count += 1
        return node.val + left + right

    subtree_sum(root)
    return count


def enlarge(root: Optional[BTNode]) -> Optional[BTNode]:
    """Add to every node of a BST the sum of all larger values, in place."""

    def walk(node: Optional[BTNode], carried: int) -> int:
        if node is None:
            return carried
        carried = walk(node.right, carried)
        node.val += carried
        return walk(node.left, node.val)

    walk(root, 0)
    return root


def great_ancestor(root: Optional[BTNode]) -> int:
    """Count nodes whose value is at least every value below them."""
    count = 0

    def subtree_max(node: Optional[BTNode]) -> int:
        nonlocal count
        if node is None:
            return _NULL_MAX
        left = subtree_max(node.left)
        right = subtree_max(node.right)
        if node.val >= left and node.val >= right:
            count += 1
        return max(node.val, left, right)

    subtree_max(root)
    return count


def longest_path_sum(root: Optional[BTNode]) -> int:
    """Largest sum among the longest root-to-leaf paths; 0 for an empty tree."""
    best_len = 0
    best_sum = 0

    def walk(node: Optional[BTNode], length: int, total: int) -> None:
        nonlocal best_len, best_sum
        if node is None:
            if length > best_len:
                best_len, best_sum = length, total
            elif length == best_len:
                best_sum = max(best_sum, total)
            return
        walk(node.left, length + 1, total + node.val)
        walk(node.right, length + 1, total + node.val)

    walk(root, 0, 0)
    return best_sum


def sum_digit_path(root: Optional[BTNode]) -> int:
    """Sum of the numbers spelled by root-to-leaf digit paths, mod 27022001."""

    def walk(node: Optional[BTNode], prefix: int) -> int:
        if node is None:
            return 0
        current = (prefix * 10 + node.val) % _DIGIT_PATH_MOD
        if node.left is None and node.right is None:
            return current
        return (walk(node.left, current) + walk(node.right, current)) % _DIGIT_PATH_MOD

    return walk(root, 0)


def largest_diff(root: Optional[BTNode]) -> int:
    """Largest difference between an inner node and a smaller value below it.

    Returns -99999 when the tree has no inner node.
    """
    max_diff = _NULL_MAX

    def lowest(node: Optional[BTNode]) -> int:
        nonlocal max_diff
        if node is None:
            return _NULL_MIN
        if node.left is None and node.right is None:
            return node.val
        below = min(lowest(node.left), lowest(node.right))
        max_diff = max(max_diff, node.val - below)
        return min(below, node.val)

    lowest(root)
    return max_diff


def range_count(root: Optional[BTNode], lo: int, hi: int) -> int:
    """Number of nodes anywhere in the tree with lo <= value <= hi."""
    if root is None:
        return 0
    within = 1 if lo <= root.val <= hi else 0
    return range_count(root.left, lo, hi) + within + range_count(root.right, lo, hi)


def level_alter_traverse(root: Optional[BTNode]) -> list[int]:
    """Values level by level, alternating left-to-right and right-to-left."""
    result: list[int] = []
    level = [root] if root is not None else []
    left_to_right = True
    while level:
        values = [node.val for node in level]
        result.extend(values if left_to_right else reversed(values))
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
        left_to_right = not left_to_right
    return result


def kth_smallest(root: Optional[BTNode], k: int) -> int:
    """The k-th smallest value of a BST (1-based), or -1 if there is none."""
    if k < 1:
        return -1
    stack: list[BTNode] = []
    node = root
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        k -= 1
        if k == 0:
            return node.val
        node = node.right
    return -1


def find_target(root: Optional[BTNode], k: int) -> bool:
    """Whether two distinct nodes hold values summing to k."""
    seen: set[int] = set()
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if k - node.val in seen:
            return True
        seen.add(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return False


def in_range(root: Optional[BTNode], lo: int, hi: int) -> int:
    """Number of BST values within [lo, hi], skipping subtrees out of range."""
    count = 0
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if lo <= node.val <= hi:
            count += 1
        if node.val > lo and node.left is not None:
            stack.append(node.left)
        if node.val < hi and node.right is not None:
            stack.append(node.right)
    return count


def single_child(root: Optional[BTNode]) -> int:
    """Number of nodes that have exactly one child."""
    if root is None:
        return 0
    own = 1 if (root.left is None) != (root.right is None) else 0
    return own + single_child(root.left) + single_child(root.right)


def subtree_with_range(root: Optional[BTNode], lo: int, hi: int) -> Optional[BTNode]:
    """Prune a BST in place to the values within [lo, hi]; return the new root."""
    if root is None:
        return None
    if root.val < lo:
        return subtree_with_range(root.right, lo, hi)
    if root.val > hi:
        return subtree_with_range(root.left, lo, hi)
    root.left = subtree_with_range(root.left, lo, hi)
    root.right = subtree_with_range(root.right, lo, hi)
    return root