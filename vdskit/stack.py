"""Last-in, first-out stacks: an unbounded linked one and a bounded one."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

DEFAULT_STATIC_CAPACITY = 100


class StackEmptyError(IndexError):
    """Raised when a value is taken from an empty stack."""


class StackFullError(Exception):
    """Raised when a value is pushed onto a stack that has no room left."""


@dataclass(slots=True)
class _Node:
    value: Any
    below: Optional["_Node"]


class DynamicStack:
    """An unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackEmptyError("pop from an empty stack")
        node = self._top
        self._top = node.below
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackEmptyError("peek at an empty stack")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from top to bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.below

    def __repr__(self) -> str:
        return f"DynamicStack({list(self)!r})"


class StaticStack:
    """A stack that holds at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_STATIC_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise StackFullError(f"stack already holds {self.capacity} values")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackEmptyError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackEmptyError("peek at an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from top to bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"StaticStack(capacity={self.capacity}, items={list(self)!r})"