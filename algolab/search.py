"""Searching in sorted sequences, and finding two pairs with equal sums."""

from __future__ import annotations

import math
from typing import NamedTuple, Optional, Sequence

NOT_FOUND = -1


def binary_search(arr: Sequence, x) -> int:
    """Index of ``x`` in the sorted sequence, or -1 when it is absent."""
    left, right = 0, len(arr) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if arr[mid] == x:
            return mid
        if arr[mid] > x:
            right = mid - 1
        else:
            left = mid + 1
    return NOT_FOUND


def interpolation_search(arr: Sequence[int], x: int) -> int:
    """Index of ``x`` in a sorted integer sequence by interpolation, or -1."""
    left, right = 0, len(arr) - 1
    while left <= right and arr[left] <= x <= arr[right]:
        span = arr[right] - arr[left]
        if span == 0:
            pos = left
        else:
            pos = int(left + (right - left) / span * (x - arr[left]))
        if arr[pos] == x:
            return pos
        if arr[pos] < x:
            left = pos + 1
        else:
            right = pos - 1
    return NOT_FOUND


class JumpSearchResult(NamedTuple):
    """Where a jump search ended and which indexes it looked at, in order."""

    index: int
    visited: list


def jump_search(arr: Sequence, x) -> JumpSearchResult:
    """Jump through a sorted sequence in steps of sqrt(n), then scan a block."""
    n = len(arr)
    step = math.isqrt(n)
    visited: list[int] = []
    prev = 0
    i = 0
    while i < n:
        if arr[i] <= x:
            prev = i
        visited.append(i)
        if arr[i] == x:
            return JumpSearchResult(i, visited)
        if arr[i] > x:
            break
        i += step
    if prev > n - 1:
        return JumpSearchResult(NOT_FOUND, visited)
    for j in range(prev, min(i, n)):
        if arr[j] == x:
            visited.append(j)
            return JumpSearchResult(j, visited)
        if j != prev:
            visited.append(j)
        if arr[j] > x:
            break
    return JumpSearchResult(NOT_FOUND, visited)


def find_pairs(arr: Sequence[int]) -> Optional[tuple[tuple[int, int], tuple[int, int]]]:
    """Two pairs of elements (at distinct index pairs) with the same sum.

    Returns the first pair found for that sum and the later pair, or None.
    """
    seen: dict[int, tuple[int, int]] = {}
    for i, a in enumerate(arr):
        for j in range(i + 1, len(arr)):
            b = arr[j]
            total = a + b
            if total in seen:
                p, q = seen[total]
                return (arr[p], arr[q]), (a, b)
            seen[total] = (i, j)
    return None