"""A binary search tree of arbitrary items ordered by a key function."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, Optional, Union

KeyFunc = Optional[Callable[[Any], Any]]


def _identity(value: Any) -> Any:
    return value


class DuplicateKeyError(ValueError):
    """Raised when inserting an item whose key is already in the tree."""


class EmptyTreeError(LookupError):
    """Raised when reading from an empty tree."""


class TreeNotEmptyError(RuntimeError):
    """Raised when bulk-loading into a tree that already holds items."""


@dataclass(slots=True, eq=False)
class _Node:
    item: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _height(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return max(_height(node.left), _height(node.right)) + 1


def _count(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return _count(node.left) + _count(node.right) + 1


def _count_to_level(node: Optional[_Node], level: int) -> int:
    if node is None:
        return 0
    if level == 0:
        return 1
    return _count_to_level(node.left, level - 1) + _count_to_level(node.right, level - 1) + 1


def _complete_to_level(node: Optional[_Node], level: int) -> bool:
    if node is None:
        return level < 0
    if level == 0:
        return True
    return _complete_to_level(node.left, level - 1) and _complete_to_level(node.right, level - 1)


def _avl_height(node: Optional[_Node]) -> int:
    """Height of the subtree, or -1 if some node in it is out of balance."""
    if node is None:
        return 0
    left = _avl_height(node.left)
    right = _avl_height(node.right)
    if left < 0 or right < 0 or abs(left - right) > 1:
        return -1
    return max(left, right) + 1


def _detach_max(node: _Node) -> tuple[Optional[_Node], _Node]:
    """Unlink the rightmost node; return the new subtree root and that node."""
    if node.right is None:
        return node.left, node
    parent = node
    while parent.right.right is not None:
        parent = parent.right
    found = parent.right
    parent.right = found.left
    return node, found


def _detach_min(node: _Node) -> tuple[Optional[_Node], _Node]:
    """Unlink the leftmost node; return the new subtree root and that node."""
    if node.left is None:
        return node.right, node
    parent = node
    while parent.left.left is not None:
        parent = parent.left
    found = parent.left
    parent.left = found.right
    return node, found


def _remove_subtree_root(node: _Node) -> Optional[_Node]:
    """Remove the item at ``node``; return what takes the node's place."""
    if node.left is None and node.right is None:
        return None
    if _height(node.left) > _height(node.right):
        node.left, replacement = _detach_max(node.left)
    else:
        node.right, replacement = _detach_min(node.right)
    node.item = replacement.item
    return node


class BinarySearchTree:
    """Binary search tree with unique keys; ``key(item)`` gives the order."""

    def __init__(self, key: KeyFunc = None) -> None:
        self._key = key or _identity
        self._root: Optional[_Node] = None

    # insertion

    def insert(self, item: Any) -> None:
        """Insert an item; an item with an equal key is refused."""
        wanted = self._key(item)
        if self._root is None:
            self._root = _Node(item)
            return
        node = self._root
        while True:
            current = self._key(node.item)
            if wanted < current:
                if node.left is None:
                    node.left = _Node(item)
                    return
                node = node.left
            elif current < wanted:
                if node.right is None:
                    node.right = _Node(item)
                    return
                node = node.right
            else:
                raise DuplicateKeyError(f"duplicate key: {wanted!r}")

    def insert_recursive(self, item: Any) -> None:
        """Insert an item by descending recursively; duplicates are refused."""
        wanted = self._key(item)

        def descend(node: Optional[_Node]) -> _Node:
            if node is None:
                return _Node(item)
            current = self._key(node.item)
            if wanted < current:
                node.left = descend(node.left)
            elif current < wanted:
                node.right = descend(node.right)
            else:
                raise DuplicateKeyError(f"duplicate key: {wanted!r}")
            return node

        self._root = descend(self._root)

    # traversals

    def in_order(self) -> Iterator[tuple[Any, int]]:
        """Yield ``(item, depth)`` pairs in ascending key order."""

        def walk(node: Optional[_Node], depth: int) -> Iterator[tuple[Any, int]]:
            if node is None:
                return
            yield from walk(node.left, depth + 1)
            yield node.item, depth
            yield from walk(node.right, depth + 1)

        return walk(self._root, 0)

    def reverse_order(self) -> Iterator[tuple[Any, int]]:
        """Yield ``(item, depth)`` pairs in descending key order."""

        def walk(node: Optional[_Node], depth: int) -> Iterator[tuple[Any, int]]:
            if node is None:
                return
            yield from walk(node.right, depth + 1)
            yield node.item, depth
            yield from walk(node.left, depth + 1)

        return walk(self._root, 0)

    def pre_order(self) -> Iterator[tuple[Any, int]]:
        """Yield ``(item, depth)`` pairs, each node before its subtrees."""

        def walk(node: Optional[_Node], depth: int) -> Iterator[tuple[Any, int]]:
            if node is None:
                return
            yield node.item, depth
            yield from walk(node.left, depth + 1)
            yield from walk(node.right, depth + 1)

        return walk(self._root, 0)

    def post_order(self) -> Iterator[tuple[Any, int]]:
        """Yield ``(item, depth)`` pairs, each node after its subtrees."""

        def walk(node: Optional[_Node], depth: int) -> Iterator[tuple[Any, int]]:
            if node is None:
                return
            yield from walk(node.left, depth + 1)
            yield from walk(node.right, depth + 1)
            yield node.item, depth

        return walk(self._root, 0)

    # removal and lookup

    def remove_root(self) -> Any:
        """Remove and return the root item.

        The root is replaced by the largest item of the left subtree when that
        subtree is taller, otherwise by the smallest item of the right one.
        """
        if self._root is None:
            raise EmptyTreeError("remove_root on an empty tree")
        item = self._root.item
        self._root = _remove_subtree_root(self._root)
        return item

    def _find_node(self, item: Any) -> tuple[Optional[_Node], Optional[_Node]]:
        wanted = self._key(item)
        parent: Optional[_Node] = None
        node = self._root
        while node is not None:
            current = self._key(node.item)
            if wanted < current:
                parent, node = node, node.left
            elif current < wanted:
                parent, node = node, node.right
            else:
                return parent, node
        raise KeyError(wanted)

    def remove(self, item: Any) -> Any:
        """Remove and return the stored item whose key equals the item's."""
        parent, node = self._find_node(item)
        stored = node.item
        replacement = _remove_subtree_root(node)
        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        return stored

    def find(self, item: Any) -> Any:
        """Return the stored item whose key equals the item's."""
        _, node = self._find_node(item)
        return node.item

    # bulk loading

    def load_sorted(self, items: Iterable[Any]) -> None:
        """Build a height-balanced tree from items already in ascending order."""
        if self._root is not None:
            raise TreeNotEmptyError("load_sorted needs an empty tree")
        records = list(items)

        def build(low: int, high: int) -> Optional[_Node]:
            if low > high:
                return None
            middle = (low + high) // 2
            node = _Node(records[middle])
            node.left = build(low, middle - 1)
            node.right = build(middle + 1, high)
            return node

        self._root = build(0, len(records) - 1)

    def load_sorted_file(
        self,
        path: Union[str, Path],
        record_size: int,
        decode: Optional[Callable[[bytes], Any]] = None,
    ) -> None:
        """Load a file of fixed-size records in ascending order.

        A trailing partial record is ignored. ``decode`` turns each record's
        bytes into an item; without it the raw bytes are stored.
        """
        if self._root is not None:
            raise TreeNotEmptyError("load_sorted_file needs an empty tree")
        if record_size < 1:
            raise ValueError("record_size must be positive")
        data = Path(path).read_bytes()
        decode = decode or bytes
        count = len(data) // record_size
        self.load_sorted(
            decode(data[i * record_size:(i + 1) * record_size]) for i in range(count)
        )

    # searches that ignore the tree's order

    def _pre_order_items(self) -> Iterator[Any]:
        return (item for item, _ in self.pre_order())

    def max_by(self, key: Callable[[Any], Any]) -> Any:
        """The item with the largest ``key(item)``, first in pre-order on ties."""
        if self._root is None:
            raise EmptyTreeError("max_by on an empty tree")
        best = self._root.item
        for item in self._pre_order_items():
            if key(item) > key(best):
                best = item
        return best

    def min_by(self, key: Callable[[Any], Any]) -> Any:
        """The item with the smallest ``key(item)``, first in pre-order on ties."""
        if self._root is None:
            raise EmptyTreeError("min_by on an empty tree")
        best = self._root.item
        for item in self._pre_order_items():
            if key(item) < key(best):
                best = item
        return best

    def find_where(self, predicate: Callable[[Any], bool]) -> Any:
        """The first item in pre-order for which ``predicate`` holds."""
        for item in self._pre_order_items():
            if predicate(item):
                return item
        raise KeyError("no item matches the predicate")

    def remove_where(self, predicate: Callable[[Any], bool]) -> int:
        """Remove every item for which ``predicate`` holds; return how many."""
        removed = 0

        def prune(node: Optional[_Node]) -> Optional[_Node]:
            nonlocal removed
            if node is None:
                return None
            node.left = prune(node.left)
            node.right = prune(node.right)
            if predicate(node.item):
                removed += 1
                return _remove_subtree_root(node)
            return node

        self._root = prune(self._root)
        return removed

    # shape

    def height(self) -> int:
        return _height(self._root)

    def count_to_level(self, level: int) -> int:
        """Number of nodes at depth ``level`` or above (the root is depth 0)."""
        if level < 0:
            raise ValueError("level must not be negative")
        return _count_to_level(self._root, level)

    def max(self) -> Any:
        """The item with the largest key."""
        node = self._root
        if node is None:
            raise EmptyTreeError("max of an empty tree")
        while node.right is not None:
            node = node.right
        return node.item

    def min(self) -> Any:
        """The item with the smallest key."""
        node = self._root
        if node is None:
            raise EmptyTreeError("min of an empty tree")
        while node.left is not None:
            node = node.left
        return node.item

    def is_complete(self) -> bool:
        """Whether every level is full."""
        return _complete_to_level(self._root, self.height() - 1)

    def is_balanced(self) -> bool:
        """Whether every level but the deepest is full."""
        return _complete_to_level(self._root, self.height() - 2)

    def is_avl(self) -> bool:
        """Whether subtree heights differ by at most one at every node."""
        return _avl_height(self._root) >= 0

    def clear(self) -> None:
        self._root = None

    def __iter__(self) -> Iterator[Any]:
        return (item for item, _ in self.in_order())

    def __len__(self) -> int:
        return _count(self._root)

    def __contains__(self, item: Any) -> bool:
        try:
            self._find_node(item)
        except KeyError:
            return False
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"