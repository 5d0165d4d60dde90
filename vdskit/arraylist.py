"""A fixed-capacity list of strings stored in numbered slots."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

DEFAULT_CAPACITY = 100
DEFAULT_NAME_SIZE = 50


class ListFullError(Exception):
    """Raised when an item is added to a list whose slots are all taken."""


class ArrayList:
    """A list of strings with a fixed number of slots.

    Items go into the first free slot. Removing an item frees its slot
    without moving the others, so indices stay stable.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, name_size: int = DEFAULT_NAME_SIZE) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        if name_size < 0:
            raise ValueError("name_size must not be negative")
        self.capacity = capacity
        self.name_size = name_size
        self._slots: list[str | None] = [None] * capacity
        self._quantity = 0

    def add(self, item: str) -> int:
        """Store ``item`` in the first free slot and return that slot's index."""
        if len(item) > self.name_size:
            raise ValueError(
                f"item is {len(item)} characters long; the limit is {self.name_size}"
            )
        if self._quantity >= self.capacity:
            raise ListFullError(f"all {self.capacity} slots are in use")
        index = self._slots.index(None)
        self._slots[index] = item
        self._quantity += 1
        return index

    def remove(self, item: str, index: int) -> None:
        """Free slot ``index``, but only if it holds ``item``."""
        self._check_index(index)
        if self._slots[index] != item:
            raise ValueError(f"{item!r} is not at index {index}")
        self._slots[index] = None
        self._quantity -= 1

    def remove_last(self) -> str:
        """Free the highest occupied slot and return the item it held."""
        for index in reversed(range(self.capacity)):
            item = self._slots[index]
            if item is not None:
                self._slots[index] = None
                self._quantity -= 1
                return item
        raise IndexError("remove_last from an empty list")

    def get(self, index: int) -> str:
        """Return the item in slot ``index``."""
        self._check_index(index)
        item = self._slots[index]
        if item is None:
            raise IndexError(f"slot {index} is empty")
        return item

    def indices_of(self, item: str) -> list[int]:
        """Return the indices of every slot holding ``item``."""
        return [index for index, value in enumerate(self._slots) if value == item]

    def print_item(self, item: str, file: TextIO | None = None) -> None:
        """Write one line for every slot that holds ``item``."""
        out = file if file is not None else sys.stdout
        for index in self.indices_of(item):
            print(f"{item} at index {index}", file=out)

    def print_index(self, index: int, file: TextIO | None = None) -> None:
        """Write the item in slot ``index``."""
        out = file if file is not None else sys.stdout
        print(self.get(index), file=out)

    def print_all(self, file: TextIO | None = None) -> None:
        """Write every stored item, one per line, in slot order."""
        out = file if file is not None else sys.stdout
        for item in self:
            print(item, file=out)

    def __len__(self) -> int:
        return self._quantity

    def __iter__(self) -> Iterator[str]:
        return (item for item in self._slots if item is not None)

    def __repr__(self) -> str:
        return f"ArrayList(capacity={self.capacity}, name_size={self.name_size}, items={list(self)!r})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.capacity:
            raise IndexError(f"index {index} is outside 0..{self.capacity - 1}")