"""A singly linked list of arbitrary items with ordered-insert helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

KeyFunc = Optional[Callable[[Any], Any]]
MergeFunc = Optional[Callable[[Any, Any], Any]]


def _keyed(item: Any, key: KeyFunc) -> Any:
    """The item's sort key, or the item itself when no key function is given."""
    return item if key is None else key(item)


class EmptyListError(IndexError):
    """Raised when reading from an empty list."""


class DuplicateItemError(ValueError):
    """Raised when an ordered insert finds an item with the same key."""


class ItemNotFoundError(ValueError):
    """Raised when no item with the requested key is in the list."""


@dataclass(slots=True, eq=False)
class _Node:
    item: Any
    next: Optional["_Node"] = None


class LinkedList:
    """Singly linked list; ordered operations compare items by a key function."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head = _Node(None)
        self._size = 0
        tail = self._head
        for item in items:
            tail.next = _Node(item)
            tail = tail.next
            self._size += 1

    def _nodes(self) -> Iterator[_Node]:
        node = self._head.next
        while node is not None:
            yield node
            node = node.next

    def _last_node(self) -> _Node:
        node = self._head
        while node.next is not None:
            node = node.next
        return node

    def _link_after(self, prev: _Node, item: Any) -> None:
        prev.next = _Node(item, prev.next)
        self._size += 1

    def _unlink_after(self, prev: _Node) -> Any:
        node = prev.next
        prev.next = node.next
        self._size -= 1
        return node.item

    def _sorted_slot(self, wanted: Any, key: KeyFunc) -> _Node:
        prev = self._head
        while prev.next is not None and _keyed(prev.next.item, key) < wanted:
            prev = prev.next
        return prev

    def _require_items(self, action: str) -> None:
        if self._head.next is None:
            raise EmptyListError(f"{action} on an empty list")

    def is_empty(self) -> bool:
        return self._head.next is None

    def clear(self) -> int:
        """Remove every item and return how many there were."""
        count = self._size
        self._head.next = None
        self._size = 0
        return count

    def drain(self) -> list[Any]:
        """Empty the list, returning its items from first to last."""
        items = list(self)
        self.clear()
        return items

    def drain_reversed(self) -> list[Any]:
        """Empty the list, returning its items from last to first."""
        items = list(reversed(self))
        self.clear()
        return items

    def first(self) -> Any:
        self._require_items("first")
        return self._head.next.item

    def last(self) -> Any:
        self._require_items("last")
        return self._last_node().item

    def pop_first(self) -> Any:
        """Remove and return the first item."""
        self._require_items("pop_first")
        return self._unlink_after(self._head)

    def pop_last(self) -> Any:
        """Remove and return the last item."""
        self._require_items("pop_last")
        prev = self._head
        while prev.next.next is not None:
            prev = prev.next
        return self._unlink_after(prev)

    def push_front(self, item: Any) -> None:
        self._link_after(self._head, item)

    def push_back(self, item: Any) -> None:
        self._link_after(self._last_node(), item)

    def insert_at(self, pos: int, item: Any) -> None:
        """Insert so that the item ends up at index ``pos`` (0..len)."""
        if pos < 0:
            raise IndexError("position must not be negative")
        prev = self._head
        for _ in range(pos):
            if prev.next is None:
                raise IndexError("position past the end of the list")
            prev = prev.next
        self._link_after(prev, item)

    def insert_sorted(self, item: Any, key: KeyFunc = None) -> None:
        """Insert into an ascending list; an item with an equal key is refused."""
        wanted = _keyed(item, key)
        prev = self._sorted_slot(wanted, key)
        if prev.next is not None and _keyed(prev.next.item, key) == wanted:
            raise DuplicateItemError(f"duplicate key: {wanted!r}")
        self._link_after(prev, item)

    def insert_sorted_allow_duplicates(self, item: Any, key: KeyFunc = None) -> None:
        """Insert into an ascending list, ahead of any items with an equal key."""
        self._link_after(self._sorted_slot(_keyed(item, key), key), item)

    def remove(self, item: Any, key: KeyFunc = None) -> Any:
        """Remove and return the first stored item whose key equals the item's."""
        wanted = _keyed(item, key)
        prev = self._head
        while prev.next is not None and _keyed(prev.next.item, key) != wanted:
            prev = prev.next
        if prev.next is None:
            raise ItemNotFoundError(f"no item with key {wanted!r}")
        return self._unlink_after(prev)

    def remove_sorted(self, item: Any, key: KeyFunc = None) -> Any:
        """Like :meth:`remove`, but stops searching once past where the key would be."""
        wanted = _keyed(item, key)
        prev = self._sorted_slot(wanted, key)
        if prev.next is None or _keyed(prev.next.item, key) != wanted:
            raise ItemNotFoundError(f"no item with key {wanted!r}")
        return self._unlink_after(prev)

    def sort(self, key: KeyFunc = None) -> None:
        """Sort the nodes in place, keeping equal items in their order."""
        nodes = sorted(self._nodes(), key=lambda node: _keyed(node.item, key))
        prev = self._head
        for node in nodes:
            prev.next = node
            prev = node
        prev.next = None

    def dedupe_sorted(self, key: KeyFunc = None, merge: MergeFunc = None) -> int:
        """Collapse runs of equal keys into their first item.

        ``merge(kept, dropped)`` returns the item that replaces the kept one.
        Returns how many items were dropped.
        """
        removed = 0
        node = self._head.next
        while node is not None:
            while node.next is not None and _keyed(node.item, key) == _keyed(
                node.next.item, key
            ):
                dropped = node.next.item
                node.next = node.next.next
                self._size -= 1
                removed += 1
                if merge is not None:
                    node.item = merge(node.item, dropped)
            node = node.next
        return removed

    def reverse(self) -> None:
        """Reverse the list in place."""
        prev: Optional[_Node] = None
        node = self._head.next
        while node is not None:
            following = node.next
            node.next = prev
            prev = node
            node = following
        self._head.next = prev

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.item

    def __reversed__(self) -> Iterator[Any]:
        return reversed(list(self))

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"