from operator import itemgetter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from genstructs.vector import (
    DuplicateItemError,
    Vector,
    bubble_sort,
    find_min_index,
    insertion_sort,
    selection_sort,
)


def test_invalid_capacity():
    with pytest.raises(ValueError):
        Vector(0)


def test_append_doubles_capacity():
    vec = Vector(2)
    vec.append("a")
    vec.append("b")
    assert vec.capacity == 2
    vec.append("c")
    assert vec.capacity == 4
    assert list(vec) == ["a", "b", "c"]
    assert vec[2] == "c"
    assert len(vec) == 3


def test_resize_below_length_refused():
    vec = Vector(4)
    for item in "abc":
        vec.append(item)
    with pytest.raises(ValueError):
        vec.resize(2)
    vec.resize(10)
    assert vec.capacity == 10
    assert list(vec) == ["a", "b", "c"]


@given(st.sets(st.integers()))
def test_insert_sorted_keeps_order(values):
    vec = Vector(1)
    for value in values:
        vec.insert_sorted(value)
    assert list(vec) == sorted(values)
    assert vec.capacity >= len(vec)


def test_insert_sorted_refuses_duplicate():
    vec = Vector()
    vec.insert_sorted(3)
    vec.insert_sorted(1)
    with pytest.raises(DuplicateItemError):
        vec.insert_sorted(3)
    assert list(vec) == [1, 3]


def test_find_sorted_with_key():
    vec = Vector()
    vec.insert_sorted(("b", 2), key=itemgetter(0))
    vec.insert_sorted(("a", 1), key=itemgetter(0))
    assert vec.find_sorted(("b", None), key=itemgetter(0)) == ("b", 2)
    with pytest.raises(ValueError):
        vec.find_sorted(("c", None), key=itemgetter(0))


def test_remove_sorted_shrinks_capacity():
    vec = Vector(8)
    for value in (1, 2, 3):
        vec.insert_sorted(value)
    assert vec.remove_sorted(2) == 2
    assert list(vec) == [1, 3]
    assert vec.capacity == 4


def test_remove_sorted_missing_raises():
    vec = Vector()
    vec.insert_sorted(1)
    with pytest.raises(ValueError):
        vec.remove_sorted(5)
    assert list(vec) == [1]


@given(st.sets(st.integers(), min_size=1))
def test_remove_all_leaves_empty(values):
    vec = Vector(1)
    for value in values:
        vec.insert_sorted(value)
    for value in values:
        assert vec.remove_sorted(value) == value
    assert len(vec) == 0
    assert vec.capacity >= 1


@given(st.lists(st.integers()))
def test_vector_sort(values):
    vec = Vector()
    for value in values:
        vec.append(value)
    vec.sort()
    assert list(vec) == sorted(values)


@given(st.lists(st.integers(), min_size=1), st.data())
def test_find_min_index_first_minimum(values, data):
    start = data.draw(st.integers(0, len(values) - 1))
    index = find_min_index(values, start)
    assert values[index] == min(values[start:])
    assert index == values.index(min(values[start:]), start)


def test_find_min_index_empty_range():
    with pytest.raises(ValueError):
        find_min_index([], 0)
    with pytest.raises(ValueError):
        find_min_index([1, 2], 2)


@pytest.mark.parametrize("sorter", [selection_sort, bubble_sort, insertion_sort])
@given(values=st.lists(st.integers()))
def test_sorters_match_sorted(sorter, values):
    items = list(values)
    sorter(items)
    assert items == sorted(values)


@pytest.mark.parametrize("sorter", [bubble_sort, insertion_sort])
@given(pairs=st.lists(st.tuples(st.integers(0, 3), st.integers())))
def test_stable_sorters_keep_equal_order(sorter, pairs):
    items = list(pairs)
    sorter(items, key=itemgetter(0))
    assert items == sorted(pairs, key=itemgetter(0))


@given(st.lists(st.tuples(st.integers(0, 3), st.integers())))
def test_selection_sort_with_key_orders_keys(pairs):
    items = list(pairs)
    selection_sort(items, key=itemgetter(0))
    assert [p[0] for p in items] == sorted(p[0] for p in pairs)
    assert sorted(items) == sorted(pairs)