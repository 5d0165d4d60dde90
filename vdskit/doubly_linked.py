"""A doubly linked list that can be walked in both directions."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, TextIO


@dataclass(slots=True, eq=False)
class _DoubleNode:
    value: Any
    prev: Optional["_DoubleNode"] = None
    next: Optional["_DoubleNode"] = None


class DoublyLinkedList:
    """A sequence of values joined by forward and backward links."""

    def __init__(self, iterable: Iterable[Any] | None = None) -> None:
        self._head: _DoubleNode | None = None
        self._tail: _DoubleNode | None = None
        self._size = 0
        if iterable is not None:
            for value in iterable:
                self.push_back(value)

    def push_front(self, value: Any) -> None:
        """Put ``value`` ahead of every other element."""
        node = _DoubleNode(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Put ``value`` behind every other element."""
        node = _DoubleNode(value, self._tail, None)
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
            after = self._node_at(index)
            before = after.prev
            node = _DoubleNode(value, before, after)
            before.next = node
            after.prev = node
            self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("pop_front from an empty list")
        return self._unlink(self._head)

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if self._tail is None:
            raise IndexError("pop_back from an empty list")
        return self._unlink(self._tail)

    def remove_at(self, index: int) -> Any:
        """Remove and return the element at ``index``."""
        self._check_index(index)
        return self._unlink(self._node_at(index))

    def remove_value(self, value: Any) -> int:
        """Drop every element equal to ``value``; return the number dropped."""
        count = 0
        node = self._head
        while node is not None:
            following = node.next
            if node.value == value:
                self._unlink(node)
                count += 1
            node = following
        return count

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
        """Swap the direction of every link in place."""
        node = self._head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self._head, self._tail = self._tail, self._head

    def copy(self) -> "DoublyLinkedList":
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

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} is outside the list of {self._size} elements")

    def _node_at(self, index: int) -> _DoubleNode:
        if index < self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next
            return node
        node = self._tail
        for _ in range(self._size - 1 - index):
            node = node.prev
        return node

    def _unlink(self, node: _DoubleNode) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value