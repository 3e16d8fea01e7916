import pytest
from hypothesis import given
from hypothesis import strategies as st

from klib.linkedlist import LinkedList, ListElem


def by_key(a, b):
    return a[0] < b[0]


def test_push_and_iterate_order():
    lst = LinkedList()
    lst.push_back(2)
    lst.push_back(3)
    lst.push_front(1)
    assert lst.values() == [1, 2, 3]
    assert [e.value for e in reversed(lst)] == [3, 2, 1]
    assert len(lst) == 3


def test_empty_list_is_falsy_and_front_raises():
    lst = LinkedList()
    assert not lst
    assert len(lst) == 0
    with pytest.raises(IndexError):
        lst.front()
    with pytest.raises(IndexError):
        lst.pop_back()


def test_pop_front_and_back_return_elements():
    lst = LinkedList(["a", "b", "c"])
    assert lst.pop_front().value == "a"
    assert lst.pop_back().value == "c"
    assert lst.values() == ["b"]
    assert lst.front() is lst.back()


def test_push_accepts_existing_elem_and_returns_it():
    lst = LinkedList()
    elem = ListElem("x")
    assert lst.push_back(elem) is elem
    assert elem.linked
    assert lst.front() is elem


def test_insert_already_linked_element_raises():
    lst = LinkedList()
    elem = lst.push_back(1)
    with pytest.raises(ValueError):
        LinkedList().push_back(elem)


def test_insert_before_element():
    lst = LinkedList([1, 3])
    third = lst.back()
    lst.insert(third, 2)
    assert lst.values() == [1, 2, 3]
    lst.insert(None, 4)
    assert lst.values() == [1, 2, 3, 4]


def test_insert_before_unlinked_raises():
    lst = LinkedList([1])
    with pytest.raises(ValueError):
        lst.insert(ListElem(9), 2)


def test_remove_returns_following_element():
    lst = LinkedList([1, 2, 3])
    first = lst.front()
    following = lst.remove(first)
    assert following is lst.front()
    assert not first.linked
    assert lst.remove(lst.back()) is None
    assert lst.values() == [2]


def test_remove_twice_raises():
    lst = LinkedList([1])
    elem = lst.front()
    lst.remove(elem)
    with pytest.raises(ValueError):
        lst.remove(elem)


def test_next_and_prev_stop_at_ends():
    lst = LinkedList([1, 2])
    first, second = list(lst)
    assert first.next is second
    assert second.prev is first
    assert first.prev is None
    assert second.next is None


def test_splice_within_list():
    lst = LinkedList([1, 2, 3, 4, 5])
    elems = list(lst)
    lst.splice(elems[0], elems[3], None)
    assert lst.values() == [4, 5, 1, 2, 3]


def test_splice_between_lists():
    src = LinkedList(["a", "b", "c", "d"])
    dst = LinkedList([1, 2])
    s = list(src)
    dst.splice(dst.back(), s[1], s[3])
    assert dst.values() == [1, "b", "c", 2]
    assert src.values() == ["a", "d"]


def test_splice_empty_range_is_noop():
    src = LinkedList(["a", "b"])
    dst = LinkedList([1])
    dst.splice(None, src.front(), src.front())
    assert src.values() == ["a", "b"]
    assert dst.values() == [1]


@given(st.lists(st.integers()))
def test_reverse_matches_reversed_values(values):
    lst = LinkedList(values)
    lst.reverse()
    assert lst.values() == values[::-1]
    assert [e.value for e in reversed(lst)] == values


@given(st.lists(st.integers()))
def test_sort_orders_values(values):
    lst = LinkedList(values)
    lst.sort()
    assert lst.values() == sorted(values)
    assert len(lst) == len(values)


@given(st.lists(st.tuples(st.integers(0, 5), st.integers())))
def test_sort_is_stable(pairs):
    lst = LinkedList(pairs)
    lst.sort(by_key)
    assert lst.values() == sorted(pairs, key=lambda p: p[0])


def test_sort_keeps_element_identity():
    lst = LinkedList([3, 1, 2])
    elems = {e.value: e for e in lst}
    lst.sort()
    assert list(lst) == [elems[1], elems[2], elems[3]]


@given(st.lists(st.integers()), st.integers())
def test_insert_ordered_keeps_sorted(values, extra):
    lst = LinkedList(sorted(values))
    lst.insert_ordered(extra)
    assert lst.values() == sorted(values + [extra])


def test_insert_ordered_goes_after_equals():
    lst = LinkedList([(1, "a"), (2, "b")])
    lst.insert_ordered((1, "z"), by_key)
    assert lst.values() == [(1, "a"), (1, "z"), (2, "b")]


def test_unique_collects_duplicates():
    lst = LinkedList([1, 1, 2, 3, 3, 3, 1])
    dups = LinkedList()
    lst.unique(dups)
    assert lst.values() == [1, 2, 3, 1]
    assert dups.values() == [1, 3, 3]


@given(st.lists(st.integers(0, 3)))
def test_unique_without_duplicates_list(values):
    lst = LinkedList(values)
    lst.unique()
    result = lst.values()
    assert all(a != b for a, b in zip(result, result[1:]))
    assert set(result) == set(values)


def test_max_and_min_prefer_earliest():
    lst = LinkedList([(3, "b"), (1, "a"), (3, "c"), (1, "d")])
    assert lst.max(by_key).value == (3, "b")
    assert lst.min(by_key).value == (1, "a")


def test_max_min_of_empty_list():
    lst = LinkedList()
    assert lst.max() is None
    assert lst.min() is None


@given(st.lists(st.integers(), min_size=1))
def test_max_min_match_builtins(values):
    lst = LinkedList(values)
    assert lst.max().value == max(values)
    assert lst.min().value == min(values)