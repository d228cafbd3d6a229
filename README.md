# genstructs

Classic data structures in plain Python: FIFO queues (two linked ones and a
fixed-size byte ring buffer), a singly linked list, a vector with an explicit
capacity plus in-place sorting helpers, and a binary search tree. No
third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `genstructs.queues`

- `CircularQueue`: queue on a circular singly linked list that keeps only a
  reference to its last node.
- `LinkedQueue`: queue on a singly linked list with head and tail references.
- `BoundedQueue(capacity=300)`: queue of byte strings packed into a fixed-size
  ring buffer. Each record takes an 8-byte length header plus its data, and
  records may wrap around the end of the buffer. `get(size=None)` and
  `peek(size=None)` return at most `size` bytes of the front record;
  `is_full(size)` tells whether a record of `size` bytes would not fit.

All three have `put`, `get`, `peek`, `is_empty`, `clear` and `len()`. Reading
from an empty queue raises `QueueEmptyError` (an `IndexError`); a record that
does not fit in a `BoundedQueue` raises `QueueFullError` (an `OverflowError`).

### `genstructs.linked_list`

`LinkedList(items=())` holds any objects. It offers:

- `push_front`, `push_back`, `insert_at(pos, item)` (`IndexError` if `pos` is
  negative or past the end);
- `first`, `last`, `pop_first`, `pop_last` (`EmptyListError` when empty);
- `insert_sorted(item, key=None)`, which refuses an equal key with
  `DuplicateItemError`, and `insert_sorted_allow_duplicates`, which places the
  item ahead of equal ones;
- `remove(item, key=None)` and `remove_sorted(item, key=None)`, which return the
  stored item or raise `ItemNotFoundError`;
- `sort(key=None)` (stable, relinks the nodes), `reverse()`,
  `dedupe_sorted(key=None, merge=None)` which collapses runs of equal keys and
  returns how many items were dropped;
- `clear()` (returns how many items there were), `drain()` and
  `drain_reversed()` (empty the list and return its items), iteration in both
  directions and `len()`.

### `genstructs.vector`

`Vector(capacity=8)` is a sequence with a tracked `capacity` that doubles when an
insert finds it full and halves when a removal leaves it at most a third used.
It has `append`, `resize`, `insert_sorted` (raises `DuplicateItemError` on an
equal key), `remove_sorted` and `find_sorted` (raise `ValueError` if absent;
both expect the vector to be in ascending order), `sort` (selection sort),
indexing, iteration and `len()`.

The module also provides in-place sorts for any mutable sequence, each taking an
optional `key`: `selection_sort`, `bubble_sort`, `insertion_sort` (stable), and
`find_min_index(items, start=0, key=None)`.

### `genstructs.binary_tree`

`BinarySearchTree(key=None)` keeps unique keys ordered by `key(item)`.

- Insertion: `insert` and `insert_recursive` (`DuplicateKeyError` on an equal key).
- Traversals yielding `(item, depth)` pairs: `in_order`, `reverse_order`,
  `pre_order`, `post_order`. Iterating the tree gives items in ascending order.
- Lookup and removal: `find`, `remove` (`KeyError` if absent), `in`,
  `remove_root`, `min`, `max` (`EmptyTreeError` when empty).
- Searches that ignore the tree's order: `max_by(key)`, `min_by(key)`,
  `find_where(predicate)`, `remove_where(predicate)`.
- Bulk loading into an empty tree (`TreeNotEmptyError` otherwise), building a
  height-balanced tree: `load_sorted(items)` and
  `load_sorted_file(path, record_size, decode=None)`, which reads a file of
  fixed-size records, ignores a trailing partial record and stores raw bytes
  unless `decode` is given.
- Shape: `height`, `count_to_level(level)`, `is_complete`, `is_balanced`,
  `is_avl`, `clear`, `len()`.

## Example

```python
from genstructs.queues import BoundedQueue, LinkedQueue
from genstructs.linked_list import LinkedList
from genstructs.binary_tree import BinarySearchTree

q = LinkedQueue()
q.put("a")
q.put("b")
assert q.get() == "a"

bq = BoundedQueue(capacity=32)
bq.put(b"hello")
assert bq.get(3) == b"hel"

items = LinkedList([3, 1, 2])
items.sort()
assert list(items) == [1, 2, 3]

tree = BinarySearchTree()
for n in (5, 3, 8, 1):
    tree.insert(n)
assert list(tree) == [1, 3, 5, 8]
assert tree.height() == 3
```

## Not included

There are no dedicated stack types. A `LinkedList` used with `push_front`,
`first` and `pop_first` serves as an unbounded LIFO stack.