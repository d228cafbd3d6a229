"""FIFO queues: a circular linked queue, a head/tail linked queue and a
bounded byte queue kept in a fixed-size ring buffer.

The container bases defined here are shared with the stacks module.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

_HEADER_SIZE = 8
_DEFAULT_CAPACITY = 300


class QueueEmptyError(IndexError):
    """Raised when reading from an empty queue."""


class QueueFullError(OverflowError):
    """Raised when an item does not fit in a bounded queue."""


@dataclass(slots=True, eq=False)
class _Node:
    item: Any
    next: Optional["_Node"] = None


class _Container:
    """Size bookkeeping and empty checks common to every container."""

    _empty_error: type[Exception] = QueueEmptyError
    _full_error: type[Exception] = QueueFullError
    _noun = "queue"
    _size = 0

    def is_empty(self) -> bool:
        return self._size == 0

    def _ensure_items(self, verb: str) -> None:
        if self.is_empty():
            raise self._empty_error(f"{verb} an empty {self._noun}")

    def __len__(self) -> int:
        return self._size


class _CircularChain(_Container):
    """Circular singly linked list reached through one anchor node.

    Items leave from the node after the anchor.
    """

    def __init__(self) -> None:
        self._anchor: Optional[_Node] = None
        self._size = 0

    def _link(self, item: Any, *, advance: bool) -> None:
        node = _Node(item)
        if self._anchor is None:
            node.next = node
            self._anchor = node
        else:
            node.next = self._anchor.next
            self._anchor.next = node
            if advance:
                self._anchor = node
        self._size += 1

    def _unlink(self, verb: str) -> Any:
        self._ensure_items(verb)
        anchor = self._anchor
        first = anchor.next
        if first is anchor:
            self._anchor = None
        else:
            anchor.next = first.next
        first.next = None
        self._size -= 1
        return first.item

    def peek(self) -> Any:
        """Return the next item out without removing it."""
        self._ensure_items("peek at")
        return self._anchor.next.item

    def clear(self) -> None:
        """Remove every item."""
        if self._anchor is not None:
            self._anchor.next = None
        self._anchor = None
        self._size = 0


class _LinkedChain(_Container):
    """Singly linked list whose head is the next item out."""

    def __init__(self) -> None:
        self._first: Optional[_Node] = None
        self._size = 0

    def _unlink(self, verb: str) -> Any:
        self._ensure_items(verb)
        node = self._first
        self._first = node.next
        self._size -= 1
        return node.item

    def peek(self) -> Any:
        """Return the next item out without removing it."""
        self._ensure_items("peek at")
        return self._first.item

    def clear(self) -> None:
        """Remove every item."""
        self._first = None
        self._size = 0


class _ByteBuffer(_Container):
    """Byte records, each an 8-byte length header plus data, in a fixed buffer."""

    def __init__(self, capacity: int, minimum: int) -> None:
        if capacity < minimum:
            raise ValueError(f"capacity must be at least {minimum}")
        self._capacity = capacity
        self._buffer = bytearray(capacity)
        self._available = capacity
        self._front = 0
        self._size = 0

    def _store(self, data: bytes) -> None:
        payload = bytes(data)
        if self.is_full(len(payload)):
            raise self._full_error(f"not enough room in the {self._noun}")
        self._write_record(payload)
        self._available -= _HEADER_SIZE + len(payload)
        self._size += 1

    def _take(self, size: Optional[int], verb: str, *, remove: bool) -> bytes:
        if size is not None and size < 0:
            raise ValueError("size must not be negative")
        self._ensure_items(verb)
        data, after = self._read_record()
        if remove:
            self._available += _HEADER_SIZE + len(data)
            self._front = after
            self._size -= 1
        return data if size is None else data[:size]

    def peek(self, size: Optional[int] = None) -> bytes:
        """Return at most ``size`` bytes of the next record without removing it."""
        return self._take(size, "peek at", remove=False)

    def is_empty(self) -> bool:
        return self._available == self._capacity

    def is_full(self, size: int) -> bool:
        """Whether a record of ``size`` bytes would not fit."""
        return self._available < size + _HEADER_SIZE

    def clear(self) -> None:
        """Remove every record."""
        self._available = self._capacity
        self._size = 0


class CircularQueue(_CircularChain):
    """Queue on a circular singly linked list that keeps only its last node."""

    def __init__(self) -> None:
        super().__init__()

    def put(self, item: Any) -> None:
        """Append an item at the back."""
        self._link(item, advance=True)

    def get(self) -> Any:
        """Remove and return the item at the front."""
        return self._unlink("get from")

    def peek(self) -> Any:
        """Return the item at the front without removing it."""
        return super().peek()

    def is_empty(self) -> bool:
        """Whether the queue holds no items."""
        return super().is_empty()

    def clear(self) -> None:
        """Remove every item."""
        super().clear()

    def __len__(self) -> int:
        return super().__len__()


class LinkedQueue(_LinkedChain):
    """Queue on a singly linked list with head and tail references."""

    def __init__(self) -> None:
        super().__init__()
        self._last: Optional[_Node] = None

    def put(self, item: Any) -> None:
        """Append an item at the back."""
        node = _Node(item)
        if self._last is not None:
            self._last.next = node
        else:
            self._first = node
        self._last = node
        self._size += 1

    def get(self) -> Any:
        """Remove and return the item at the front."""
        item = self._unlink("get from")
        if self._first is None:
            self._last = None
        return item

    def peek(self) -> Any:
        """Return the item at the front without removing it."""
        return super().peek()

    def is_empty(self) -> bool:
        """Whether the queue holds no items."""
        return super().is_empty()

    def clear(self) -> None:
        """Remove every item."""
        super().clear()
        self._last = None

    def __len__(self) -> int:
        return super().__len__()


class BoundedQueue(_ByteBuffer):
    """Queue of byte strings packed into a fixed-size ring buffer.

    Records may wrap around the end of the buffer.
    """

    def __init__(self, capacity: int = _DEFAULT_CAPACITY) -> None:
        super().__init__(capacity, minimum=1)
        self._last = 0

    def _write(self, pos: int, data: bytes) -> int:
        head = min(len(data), self._capacity - pos)
        self._buffer[pos:pos + head] = data[:head]
        self._buffer[:len(data) - head] = data[head:]
        return (pos + len(data)) % self._capacity

    def _read(self, pos: int, length: int) -> tuple[bytes, int]:
        head = min(length, self._capacity - pos)
        data = bytes(self._buffer[pos:pos + head]) + bytes(self._buffer[:length - head])
        return data, (pos + length) % self._capacity

    def _write_record(self, payload: bytes) -> None:
        pos = self._write(self._last, len(payload).to_bytes(_HEADER_SIZE, "little"))
        self._last = self._write(pos, payload)

    def _read_record(self) -> tuple[bytes, int]:
        header, pos = self._read(self._front, _HEADER_SIZE)
        return self._read(pos, int.from_bytes(header, "little"))

    def put(self, data: bytes) -> None:
        """Append a byte string at the back."""
        self._store(data)

    def get(self, size: Optional[int] = None) -> bytes:
        """Remove the front record and return at most ``size`` bytes of it."""
        return self._take(size, "get from", remove=True)

    def peek(self, size: Optional[int] = None) -> bytes:
        """Return at most ``size`` bytes of the front record without removing it."""
        return super().peek(size)

    def is_empty(self) -> bool:
        """Whether the queue holds no records."""
        return super().is_empty()

    def is_full(self, size: int) -> bool:
        """Whether a record of ``size`` bytes would not fit."""
        return super().is_full(size)

    def clear(self) -> None:
        """Remove every record."""
        super().clear()
        self._last = self._front

    def __len__(self) -> int:
        return super().__len__()