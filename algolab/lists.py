"""A growable array list, a singly linked list, a stack and a sample record type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

INITIAL_CAPACITY = 10


class ArrayList:
    """List backed by a fixed-capacity block that doubles when it fills up."""

    def __init__(self, capacity: Optional[int] = None):
        if capacity is None:
            capacity = INITIAL_CAPACITY
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: list = []

    @property
    def capacity(self) -> int:
        """Number of items the list can hold before it grows."""
        return self._capacity

    def _grow_if_full(self) -> None:
        if len(self._items) == self._capacity:
            self._capacity *= 2

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("Index out of range")

    def insert_head(self, element) -> None:
        """Put an element in front of all others."""
        self._grow_if_full()
        self._items.insert(0, element)

    def insert_tail(self, element) -> None:
        """Append an element after all others."""
        self._grow_if_full()
        self._items.append(element)

    def insert(self, index: int, element) -> None:
        """Insert at ``index``; negative goes to the head, past the end to the tail."""
        if index < 0:
            self.insert_head(element)
            return
        index = min(index, len(self._items))
        self._grow_if_full()
        self._items.insert(index, element)

    def remove_at(self, index: int) -> None:
        """Remove the element at ``index``; raises IndexError when out of range."""
        self._check_index(index)
        del self._items[index]

    def remove_item(self, item) -> bool:
        """Remove the first element equal to ``item``; report whether one was found."""
        try:
            self._items.remove(item)
        except ValueError:
            return False
        return True

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int):
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, element) -> None:
        self._check_index(index)
        self._items[index] = element

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __contains__(self, item) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def index_of(self, item) -> int:
        """Index of the first element equal to ``item``; ValueError if absent."""
        try:
            return self._items.index(item)
        except ValueError:
            raise ValueError(f"{item!r} is not in the list") from None

    def clear(self) -> None:
        """Drop every element and return to the initial capacity."""
        self._items = []
        self._capacity = INITIAL_CAPACITY


@dataclass(eq=False)
class _Link:
    data: Any
    next: Optional["_Link"] = None


class LinkedList:
    """Singly linked list with head and tail references."""

    def __init__(self):
        self._head: Optional[_Link] = None
        self._tail: Optional[_Link] = None
        self._count = 0

    def _links(self) -> Iterator[_Link]:
        link = self._head
        while link is not None:
            yield link
            link = link.next

    def _link_at(self, index: int) -> _Link:
        if not 0 <= index < self._count:
            raise IndexError("Index out of range")
        link = self._head
        for _ in range(index):
            link = link.next
        return link

    def insert_head(self, element) -> None:
        """Put an element in front of all others."""
        self._head = _Link(element, self._head)
        if self._tail is None:
            self._tail = self._head
        self._count += 1

    def insert_tail(self, element) -> None:
        """Append an element after all others."""
        link = _Link(element)
        if self._tail is None:
            self._head = self._tail = link
        else:
            self._tail.next = link
            self._tail = link
        self._count += 1

    def insert(self, index: int, element) -> None:
        """Insert at ``index``; at or past the end goes to the tail, at or below 0 to the head."""
        if index >= self._count:
            self.insert_tail(element)
            return
        if index <= 0:
            self.insert_head(element)
            return
        prev = self._link_at(index - 1)
        prev.next = _Link(element, prev.next)
        self._count += 1

    def remove_at(self, index: int) -> None:
        """Remove the element at ``index``; raises IndexError when out of range."""
        if not 0 <= index < self._count:
            raise IndexError("Index out of range")
        if index == 0:
            removed = self._head
            self._head = removed.next
            if self._head is None:
                self._tail = None
        else:
            prev = self._link_at(index - 1)
            removed = prev.next
            prev.next = removed.next
            if removed is self._tail:
                self._tail = prev
        self._count -= 1

    def remove_item(self, item) -> bool:
        """Remove the first element equal to ``item``; report whether one was found."""
        try:
            index = self.index_of(item)
        except ValueError:
            return False
        self.remove_at(index)
        return True

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, index: int):
        return self._link_at(index).data

    def __setitem__(self, index: int, element) -> None:
        self._link_at(index).data = element

    def __iter__(self) -> Iterator[Any]:
        for link in self._links():
            yield link.data

    def __contains__(self, item) -> bool:
        return any(data == item for data in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def index_of(self, item) -> int:
        """Index of the first element equal to ``item``; ValueError if absent."""
        for index, data in enumerate(self):
            if data == item:
                return index
        raise ValueError(f"{item!r} is not in the list")

    def clear(self) -> None:
        """Drop every element."""
        self._head = self._tail = None
        self._count = 0

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every element in order.

        When ``func`` returns something other than None, that result replaces
        the element.
        """
        for link in self._links():
            result = func(link.data)
            if result is not None:
                link.data = result


class Stack(ArrayList):
    """Last-in, first-out stack on top of an array list."""

    def push(self, element) -> None:
        self.insert_tail(element)

    def pop(self):
        """Remove and return the top element; raises IndexError when empty."""
        if not len(self):
            raise IndexError("pop from an empty stack")
        top = self[len(self) - 1]
        self.remove_at(len(self) - 1)
        return top

    def top(self):
        """The top element; raises IndexError when empty."""
        if not len(self):
            raise IndexError("top of an empty stack")
        return self[len(self) - 1]

    def is_empty(self) -> bool:
        return len(self) == 0


@dataclass
class Person:
    """A sample record: name, age and sex."""

    name: str = ""
    age: int = 0
    sex: str = "N/A"

    def __str__(self) -> str:
        return f"{self.age} {self.name} {self.sex}"