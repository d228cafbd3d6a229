"""A growable vector with a tracked capacity, plus in-place sorting helpers."""

from __future__ import annotations

from bisect import bisect_left
from typing import Any, Callable, Iterator, MutableSequence, Optional

__all__ = [
    "DuplicateItemError",
    "Vector",
    "find_min_index",
    "selection_sort",
    "bubble_sort",
    "insertion_sort",
]

KeyFunc = Optional[Callable[[Any], Any]]

_DEFAULT_CAPACITY = 8


class DuplicateItemError(ValueError):
    """Raised when an ordered insert finds an item with the same key."""


def _keyed(item: Any, key: KeyFunc) -> Any:
    """The item's sort key, or the item itself when no key function is given."""
    return item if key is None else key(item)


def find_min_index(items: MutableSequence[Any], start: int = 0, key: KeyFunc = None) -> int:
    """Index of the first smallest item at or after ``start``."""
    if not 0 <= start < len(items):
        raise ValueError("empty range")
    return min(range(start, len(items)), key=lambda i: _keyed(items[i], key))


def selection_sort(items: MutableSequence[Any], key: KeyFunc = None) -> None:
    """Sort in place by repeatedly swapping the smallest remaining item forward."""
    for i in range(len(items) - 1):
        smallest = find_min_index(items, i, key)
        items[i], items[smallest] = items[smallest], items[i]


def bubble_sort(items: MutableSequence[Any], key: KeyFunc = None) -> None:
    """Sort in place by swapping adjacent out-of-order items."""
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if _keyed(items[j], key) > _keyed(items[j + 1], key):
                items[j], items[j + 1] = items[j + 1], items[j]


def insertion_sort(items: MutableSequence[Any], key: KeyFunc = None) -> None:
    """Sort in place, shifting larger items right; stable."""
    for i in range(1, len(items)):
        current = items[i]
        current_key = _keyed(current, key)
        j = i - 1
        while j >= 0 and _keyed(items[j], key) > current_key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current


class Vector:
    """Sequence with an explicit capacity that doubles when full and halves
    when a removal leaves it at most a third used."""

    def __init__(self, capacity: int = _DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._items: list[Any] = []
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    def resize(self, capacity: int) -> None:
        """Set the capacity; it may not drop below the current length or 1."""
        if capacity < max(1, len(self._items)):
            raise ValueError("capacity too small for the stored items")
        self._capacity = capacity

    def _grow_if_full(self) -> None:
        if len(self._items) == self._capacity:
            self.resize(self._capacity * 2)

    def _locate(self, item: Any, key: KeyFunc) -> tuple[int, bool]:
        wanted = _keyed(item, key)
        pos = bisect_left(self._items, wanted, key=key)
        found = pos < len(self._items) and _keyed(self._items[pos], key) == wanted
        return pos, found

    def append(self, item: Any) -> None:
        self._grow_if_full()
        self._items.append(item)

    def insert_sorted(self, item: Any, key: KeyFunc = None) -> None:
        """Insert into the ascending vector; an item with an equal key is refused."""
        self._grow_if_full()
        pos, found = self._locate(item, key)
        if found:
            raise DuplicateItemError(f"duplicate item: {item!r}")
        self._items.insert(pos, item)

    def remove_sorted(self, item: Any, key: KeyFunc = None) -> Any:
        """Remove and return the stored item whose key equals the item's."""
        pos, found = self._locate(item, key)
        if not found:
            raise ValueError(f"{item!r} not in vector")
        removed = self._items.pop(pos)
        if len(self._items) * 3 <= self._capacity:
            self._capacity = max(1, self._capacity // 2)
        return removed

    def find_sorted(self, item: Any, key: KeyFunc = None) -> Any:
        """Return the stored item whose key equals the item's."""
        pos, found = self._locate(item, key)
        if not found:
            raise ValueError(f"{item!r} not in vector")
        return self._items[pos]

    def sort(self, key: KeyFunc = None) -> None:
        selection_sort(self._items, key)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self._capacity})"