from operator import itemgetter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from genstructs.linked_list import (
    DuplicateItemError,
    EmptyListError,
    ItemNotFoundError,
    LinkedList,
)


def test_construct_and_iterate():
    lst = LinkedList([3, 1, 2])
    assert list(lst) == [3, 1, 2]
    assert len(lst) == 3
    assert not lst.is_empty()


def test_empty_list_reads_raise():
    lst = LinkedList()
    assert lst.is_empty()
    for action in (lst.first, lst.last, lst.pop_first, lst.pop_last):
        with pytest.raises(EmptyListError):
            action()


def test_push_front_and_back():
    lst = LinkedList()
    lst.push_back("b")
    lst.push_front("a")
    lst.push_back("c")
    assert list(lst) == ["a", "b", "c"]
    assert lst.first() == "a"
    assert lst.last() == "c"


def test_pop_first_and_last():
    lst = LinkedList(["a", "b", "c"])
    assert lst.pop_last() == "c"
    assert lst.pop_first() == "a"
    assert list(lst) == ["b"]
    assert lst.pop_last() == "b"
    assert lst.is_empty()
    assert len(lst) == 0


def test_insert_at_positions():
    lst = LinkedList(["a", "c"])
    lst.insert_at(1, "b")
    lst.insert_at(0, "start")
    lst.insert_at(len(lst), "end")
    assert list(lst) == ["start", "a", "b", "c", "end"]


def test_insert_at_invalid_position():
    lst = LinkedList(["a"])
    with pytest.raises(IndexError):
        lst.insert_at(2, "x")
    with pytest.raises(IndexError):
        lst.insert_at(-1, "x")
    assert list(lst) == ["a"]


@given(st.sets(st.integers()))
def test_insert_sorted_keeps_order(values):
    lst = LinkedList()
    for value in values:
        lst.insert_sorted(value)
    assert list(lst) == sorted(values)
    assert len(lst) == len(values)


def test_insert_sorted_refuses_duplicate():
    lst = LinkedList([1, 5, 9])
    with pytest.raises(DuplicateItemError):
        lst.insert_sorted(5)
    assert list(lst) == [1, 5, 9]


def test_insert_sorted_with_key_refuses_equal_key():
    lst = LinkedList()
    lst.insert_sorted(("b", 1), key=itemgetter(0))
    lst.insert_sorted(("a", 2), key=itemgetter(0))
    with pytest.raises(DuplicateItemError):
        lst.insert_sorted(("a", 3), key=itemgetter(0))
    assert list(lst) == [("a", 2), ("b", 1)]


def test_insert_sorted_allow_duplicates_goes_before_equals():
    lst = LinkedList()
    lst.insert_sorted_allow_duplicates(("a", 1), key=itemgetter(0))
    lst.insert_sorted_allow_duplicates(("b", 0), key=itemgetter(0))
    lst.insert_sorted_allow_duplicates(("a", 2), key=itemgetter(0))
    assert list(lst) == [("a", 2), ("a", 1), ("b", 0)]


@given(st.lists(st.integers()))
def test_insert_sorted_allow_duplicates_matches_sorted(values):
    lst = LinkedList()
    for value in values:
        lst.insert_sorted_allow_duplicates(value)
    assert list(lst) == sorted(values)


def test_remove_returns_stored_item():
    lst = LinkedList([("x", 1), ("y", 2), ("x", 3)])
    assert lst.remove(("x", None), key=itemgetter(0)) == ("x", 1)
    assert list(lst) == [("y", 2), ("x", 3)]


def test_remove_missing_raises():
    lst = LinkedList([1, 2])
    with pytest.raises(ItemNotFoundError):
        lst.remove(7)
    assert list(lst) == [1, 2]


def test_remove_sorted_stops_early():
    lst = LinkedList([1, 5, 3])
    with pytest.raises(ItemNotFoundError):
        lst.remove_sorted(3)
    assert lst.remove(3) == 3
    assert list(lst) == [1, 5]


def test_remove_sorted_finds_item():
    lst = LinkedList([1, 3, 5])
    assert lst.remove_sorted(3) == 3
    assert list(lst) == [1, 5]
    with pytest.raises(ItemNotFoundError):
        lst.remove_sorted(9)


@given(st.lists(st.integers()))
def test_sort_matches_sorted(values):
    lst = LinkedList(values)
    lst.sort()
    assert list(lst) == sorted(values)
    assert len(lst) == len(values)


@given(st.lists(st.tuples(st.integers(0, 3), st.integers())))
def test_sort_is_stable(pairs):
    lst = LinkedList(pairs)
    lst.sort(key=itemgetter(0))
    assert list(lst) == sorted(pairs, key=itemgetter(0))


def test_dedupe_sorted_merges_runs():
    lst = LinkedList([("a", 1), ("a", 2), ("b", 3)])
    dropped = []

    def merge(kept, other):
        dropped.append(other)
        return kept

    removed = lst.dedupe_sorted(key=itemgetter(0), merge=merge)
    assert removed == len(dropped)
    assert dropped == [("a", 2)]
    assert list(lst) == [("a", 1), ("b", 3)]


@given(st.lists(st.integers(0, 5)))
def test_dedupe_sorted_without_merge(values):
    lst = LinkedList(sorted(values))
    removed = lst.dedupe_sorted()
    assert list(lst) == sorted(set(values))
    assert removed == len(values) - len(set(values))
    assert len(lst) == len(set(values))


@given(st.lists(st.integers()))
def test_reverse_and_reversed(values):
    lst = LinkedList(values)
    assert list(reversed(lst)) == values[::-1]
    lst.reverse()
    assert list(lst) == values[::-1]


def test_clear_returns_count():
    lst = LinkedList("abcd")
    assert lst.clear() == 4
    assert lst.is_empty()
    assert list(lst) == []


def test_drain_and_drain_reversed():
    lst = LinkedList(["a", "b", "c"])
    assert lst.drain() == ["a", "b", "c"]
    assert lst.is_empty()
    lst = LinkedList(["a", "b", "c"])
    assert lst.drain_reversed() == ["c", "b", "a"]
    assert len(lst) == 0