"""A binary max-heap, heap helpers, heap sort and two heap-based utilities."""

from __future__ import annotations

import heapq
from itertools import count as _counter
from typing import Any, Iterable, MutableSequence

NO_FILE_MESSAGE = "No file to print"


def reheap_down(elements: MutableSequence, count: int, node: int) -> None:
    """Sift ``elements[node]`` down within the first ``count`` items of a max-heap."""
    last_used = count - 1
    while True:
        left = node * 2 + 1
        if left > last_used:
            return
        largest = left
        right = left + 1
        if right <= last_used and elements[largest] < elements[right]:
            largest = right
        if not elements[node] < elements[largest]:
            return
        elements[node], elements[largest] = elements[largest], elements[node]
        node = largest


def reheap_up(elements: MutableSequence, count: int, position: int) -> None:
    """Sift ``elements[position]`` up towards the root of a max-heap.

    ``count`` is the number of items in use; it is accepted for symmetry with
    :func:`reheap_down` and bounds the position that may be given.
    """
    if position >= count:
        raise IndexError("position outside the heap")
    while position > 0:
        parent = (position - 1) // 2
        if not elements[position] > elements[parent]:
            return
        elements[position], elements[parent] = elements[parent], elements[position]
        position = parent


def heap_sort(items: Iterable) -> list:
    """Return the items in ascending order, sorted with a max-heap."""
    arr = list(items)
    size = len(arr)
    for index in range(size // 2 - 1, -1, -1):
        reheap_down(arr, size, index)
    for end in range(size - 1, 0, -1):
        arr[0], arr[end] = arr[end], arr[0]
        reheap_down(arr, end, 0)
    return arr


class MaxHeap:
    """Max-heap stored in a list; the largest item sits at the front."""

    def __init__(self):
        self._items: list = []

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item) -> bool:
        return item in self._items

    def __iter__(self):
        """Items in storage (level) order."""
        return iter(list(self._items))

    def is_empty(self) -> bool:
        return not self._items

    def peek(self) -> Any:
        """The largest item; raises IndexError when the heap is empty."""
        if not self._items:
            raise IndexError("peek from an empty heap")
        return self._items[0]

    def push(self, item) -> None:
        self._items.append(item)
        reheap_up(self._items, len(self._items), len(self._items) - 1)

    def pop(self) -> Any:
        """Remove and return the largest item; raises IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            reheap_down(self._items, len(self._items), 0)
        return top

    def index_of(self, item) -> int:
        """Storage index of the first item equal to ``item``; ValueError if absent."""
        try:
            return self._items.index(item)
        except ValueError:
            raise ValueError(f"{item!r} is not in the heap") from None

    def remove(self, item) -> None:
        """Remove one item equal to ``item``; absent items are ignored."""
        if item not in self._items:
            return
        index = self._items.index(item)
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last
            reheap_down(self._items, len(self._items), index)
            reheap_up(self._items, len(self._items), index)

    def clear(self) -> None:
        self._items.clear()


class PrinterQueue:
    """Print requests served by highest priority, then by arrival order."""

    def __init__(self):
        self._queue: list = []
        self._clock = _counter()

    def add_new_request(self, priority: int, file_name: str) -> None:
        heapq.heappush(self._queue, (-priority, next(self._clock), file_name))

    def print_next(self) -> str:
        """Take the next request and return its file name.

        Returns ``"No file to print"`` when the queue is empty.
        """
        if not self._queue:
            return NO_FILE_MESSAGE
        return heapq.heappop(self._queue)[2]

    def __len__(self) -> int:
        return len(self._queue)


def least_after(nums: Iterable[int], k: int) -> int:
    """Double the smallest number ``k`` times and return the smallest left."""
    pool = list(nums)
    if not pool:
        raise ValueError("nums must not be empty")
    heapq.heapify(pool)
    for _ in range(k):
        heapq.heapreplace(pool, pool[0] * 2)
    return pool[0]