"""A singly linked list that keeps track of its head, tail and size."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, TextIO


@dataclass(slots=True, eq=False)
class _Node:
    value: Any
    next: Optional["_Node"] = None


class SinglyLinkedList:
    """A sequence of values joined by forward links."""

    def __init__(self, iterable: Iterable[Any] | None = None) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        if iterable is not None:
            for value in iterable:
                self.push_back(value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first element."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"insert position {index} is outside 0..{self._size}")
        if index == 0:
            self.push_front(value)
        elif index == self._size:
            self.push_back(value)
        else:
            previous = self._node_at(index - 1)
            previous.next = _Node(value, previous.next)
            self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("pop_front from an empty list")
        return self._unlink_at(0)

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if self._tail is None:
            raise IndexError("pop_back from an empty list")
        return self._unlink_at(self._size - 1)

    def remove_at(self, index: int) -> Any:
        """Remove and return the element at ``index``."""
        self._check_index(index)
        return self._unlink_at(index)

    def remove_value(self, value: Any) -> int:
        """Remove every element equal to ``value`` and return how many went."""
        removed = 0
        previous: _Node | None = None
        node = self._head
        while node is not None:
            following = node.next
            if node.value == value:
                if previous is None:
                    self._head = following
                else:
                    previous.next = following
                if node is self._tail:
                    self._tail = previous
                self._size -= 1
                removed += 1
            else:
                previous = node
            node = following
        return removed

    def get_at(self, index: int) -> Any:
        """Return the element at ``index``."""
        self._check_index(index)
        return self._node_at(index).value

    def find(self, value: Any) -> int:
        """Return the position of the first element equal to ``value``."""
        for index, item in enumerate(self):
            if item == value:
                return index
        raise ValueError(f"{value!r} is not in the list")

    def is_empty(self) -> bool:
        return self._head is None

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._tail = None
        self._size = 0

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        previous: _Node | None = None
        current = self._head
        self._tail = current
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self._head = previous

    def copy(self) -> "SinglyLinkedList":
        """Return a new list holding the same values in the same order."""
        return type(self)(self)

    def print(self, file: TextIO | None = None) -> None:
        """Write every element, one per line, from first to last."""
        out = file if file is not None else sys.stdout
        for value in self:
            print(value, file=out)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} is outside the list of {self._size} elements")

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def _unlink_at(self, index: int) -> Any:
        if index == 0:
            node = self._head
            self._head = node.next
        else:
            previous = self._node_at(index - 1)
            node = previous.next
            previous.next = node.next
            if node is self._tail:
                self._tail = previous
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value