"""A binary min-heap of integers with value-based removal and counting."""

from __future__ import annotations

import weakref
from collections.abc import Iterator
from typing import ClassVar


class HeapEmptyError(IndexError):
    """Raised when the minimum is requested from an empty heap."""

    def __init__(self, message: str = "Heap empty") -> None:
        super().__init__(message)


class BinaryMinHeap:
    """Array-backed binary min-heap.

    Iteration and the string form follow the internal array order, not
    sorted order.
    """

    _live: ClassVar[weakref.WeakSet[BinaryMinHeap]] = weakref.WeakSet()

    def __init__(self) -> None:
        self._items: list[int] = []
        BinaryMinHeap._live.add(self)

    # -- internal helpers -------------------------------------------------

    def _sift_down(self, pos: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = pos
            left, right = 2 * pos + 1, 2 * pos + 2
            if left < size and items[left] < items[smallest]:
                smallest = left
            if right < size and items[right] < items[smallest]:
                smallest = right
            if smallest == pos:
                return
            items[pos], items[smallest] = items[smallest], items[pos]
            pos = smallest

    def _sift_up(self, pos: int) -> None:
        items = self._items
        while pos > 0:
            parent = (pos - 1) // 2
            if items[parent] <= items[pos]:
                return
            items[parent], items[pos] = items[pos], items[parent]
            pos = parent

    # -- heap operations --------------------------------------------------

    def insert(self, value: int) -> None:
        """Add a value to the heap."""
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def extract_min(self) -> int:
        """Remove and return the smallest value."""
        items = self._items
        if not items:
            raise HeapEmptyError()
        root = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return root

    def get_min(self) -> int:
        """Return the smallest value without removing it."""
        if not self._items:
            raise HeapEmptyError()
        return self._items[0]

    def remove(self, value: int) -> bool:
        """Remove the first occurrence of value; return whether one was found."""
        items = self._items
        try:
            pos = items.index(value)
        except ValueError:
            return False
        items[pos], items[-1] = items[-1], items[pos]
        items.pop()
        if pos < len(items):
            self._sift_down(pos)
            self._sift_up(pos)
        return True

    def remove_all(self, value: int) -> None:
        """Remove every occurrence of value."""
        while self.remove(value):
            pass

    def clear(self) -> None:
        """Remove all values."""
        self._items.clear()

    def is_empty(self) -> bool:
        """Return True when the heap holds no values."""
        return not self._items

    def count(self, value: int) -> int:
        """Return how many times value occurs in the heap."""
        return self._items.count(value)

    def copy(self) -> BinaryMinHeap:
        """Return an independent heap holding the same values."""
        clone = BinaryMinHeap()
        clone._items = list(self._items)
        return clone

    def __copy__(self) -> BinaryMinHeap:
        return self.copy()

    # -- protocols --------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __iadd__(self, value: int) -> BinaryMinHeap:
        self.insert(value)
        return self

    def __isub__(self, value: int) -> BinaryMinHeap:
        self.remove(value)
        return self

    def __str__(self) -> str:
        return " ".join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    @classmethod
    def instance_count(cls) -> int:
        """Return the number of heap objects currently alive."""
        return len(BinaryMinHeap._live)