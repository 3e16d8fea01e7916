"""Doubly linked list with head and tail sentinels and in-place algorithms."""

import operator
from typing import Any, Callable, Iterable, Iterator, List, Optional

Less = Callable[[Any, Any], bool]


class ListElem:
    """A node that can be linked into at most one LinkedList at a time."""

    __slots__ = ("value", "_prev", "_next", "_sentinel")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self._prev: Optional["ListElem"] = None
        self._next: Optional["ListElem"] = None
        self._sentinel = False

    @property
    def linked(self) -> bool:
        """True while the element is an interior element of some list."""
        return _is_interior(self)

    @property
    def next(self) -> Optional["ListElem"]:
        """The following element, or None at the end of the list."""
        node = self._next
        return None if node is None or node._sentinel else node

    @property
    def prev(self) -> Optional["ListElem"]:
        """The preceding element, or None at the front of the list."""
        node = self._prev
        return None if node is None or node._sentinel else node

    def __repr__(self) -> str:
        return f"ListElem({self.value!r})"


def _make_sentinel() -> ListElem:
    node = ListElem()
    node._sentinel = True
    return node


def _is_interior(elem: Optional[ListElem]) -> bool:
    return elem is not None and elem._prev is not None and elem._next is not None


def _is_tail(elem: Optional[ListElem]) -> bool:
    return elem is not None and elem._prev is not None and elem._next is None


def _link_before(before: ListElem, elem: ListElem) -> None:
    elem._prev = before._prev
    elem._next = before
    before._prev._next = elem
    before._prev = elem


def _splice(before: ListElem, first: ListElem, last: ListElem) -> None:
    """Move FIRST up to LAST (exclusive) to just before BEFORE."""
    if first is last:
        return
    last = last._prev
    first._prev._next = last._next
    last._next._prev = first._prev
    first._prev = before._prev
    last._next = before
    before._prev._next = first
    before._prev = last


class LinkedList:
    """A doubly linked list of ListElem nodes.

    Methods that add an element accept either a ListElem or a plain
    value, which is wrapped in a new ListElem, and return the element.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head = _make_sentinel()
        self._tail = _make_sentinel()
        self._head._next = self._tail
        self._tail._prev = self._head
        for value in values:
            self.push_back(value)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[ListElem]:
        node = self._head._next
        while node is not self._tail:
            following = node._next
            yield node
            node = following

    def __reversed__(self) -> Iterator[ListElem]:
        node = self._tail._prev
        while node is not self._head:
            preceding = node._prev
            yield node
            node = preceding

    def __bool__(self) -> bool:
        return self._head._next is not self._tail

    def __repr__(self) -> str:
        return f"LinkedList({self.values()!r})"

    @staticmethod
    def _wrap(elem: Any) -> ListElem:
        if isinstance(elem, ListElem):
            if elem._sentinel:
                raise ValueError("cannot insert a list sentinel")
            if elem._prev is not None or elem._next is not None:
                raise ValueError("element is already in a list")
            return elem
        return ListElem(elem)

    def _target(self, before: Optional[ListElem]) -> ListElem:
        target = self._tail if before is None else before
        if not (_is_interior(target) or _is_tail(target)):
            raise ValueError("insertion point is not an element of a list")
        return target

    def insert(self, before: Optional[ListElem], elem: Any) -> ListElem:
        """Insert ELEM just before BEFORE; None for BEFORE means the end."""
        target = self._target(before)
        node = self._wrap(elem)
        _link_before(target, node)
        return node

    def splice(
        self, before: Optional[ListElem], first: ListElem, last: Optional[ListElem]
    ) -> None:
        """Move FIRST through LAST (exclusive) from their list to before BEFORE.

        BEFORE of None means the end of this list; LAST of None means the
        end of FIRST's list.
        """
        target = self._target(before)
        if last is None:
            if not _is_interior(first):
                raise ValueError("first is not an element of a list")
            last = first
            while last._next is not None:
                last = last._next
        if first is last:
            return
        if not (_is_interior(last) or _is_tail(last)):
            raise ValueError("last is not an element or end of a list")
        if not _is_interior(first) or not _is_interior(last._prev):
            raise ValueError("range to splice is not part of a list")
        _splice(target, first, last)

    def push_front(self, elem: Any) -> ListElem:
        """Insert ELEM at the front of the list."""
        return self.insert(self._head._next, elem)

    def push_back(self, elem: Any) -> ListElem:
        """Insert ELEM at the back of the list."""
        return self.insert(None, elem)

    def remove(self, elem: ListElem) -> Optional[ListElem]:
        """Unlink ELEM from its list and return the element that followed it."""
        if not _is_interior(elem):
            raise ValueError("element is not in a list")
        following = elem._next
        elem._prev._next = following
        following._prev = elem._prev
        elem._prev = elem._next = None
        return None if following._sentinel else following

    def pop_front(self) -> ListElem:
        """Remove and return the front element."""
        front = self.front()
        self.remove(front)
        return front

    def pop_back(self) -> ListElem:
        """Remove and return the back element."""
        back = self.back()
        self.remove(back)
        return back

    def front(self) -> ListElem:
        """Return the front element; IndexError if the list is empty."""
        if not self:
            raise IndexError("front of empty list")
        return self._head._next

    def back(self) -> ListElem:
        """Return the back element; IndexError if the list is empty."""
        if not self:
            raise IndexError("back of empty list")
        return self._tail._prev

    def values(self) -> List[Any]:
        """Return the values of the elements, front to back."""
        return [elem.value for elem in self]

    def reverse(self) -> None:
        """Reverse the order of the list in place."""
        if not self:
            return
        node = self._head._next
        while node is not self._tail:
            node._prev, node._next = node._next, node._prev
            node = node._prev
        head, tail = self._head, self._tail
        head._next, tail._prev = tail._prev, head._next
        head._next._prev, tail._prev._next = tail._prev._next, head._next._prev

    def _end_of_run(self, start: ListElem, lt: Callable[[ListElem, ListElem], bool]) -> ListElem:
        node = start._next
        while node is not self._tail and not lt(node, node._prev):
            node = node._next
        return node

    @staticmethod
    def _merge(
        a0: ListElem, a1b0: ListElem, b1: ListElem, lt: Callable[[ListElem, ListElem], bool]
    ) -> None:
        while a0 is not a1b0 and a1b0 is not b1:
            if not lt(a1b0, a0):
                a0 = a0._next
            else:
                a1b0 = a1b0._next
                _splice(a0, a1b0._prev, a1b0)

    def sort(self, less: Less = operator.lt) -> None:
        """Stable natural merge sort by LESS on element values, in place."""

        def lt(a: ListElem, b: ListElem) -> bool:
            return bool(less(a.value, b.value))

        while True:
            runs = 0
            a0 = self._head._next
            while a0 is not self._tail:
                runs += 1
                a1b0 = self._end_of_run(a0, lt)
                if a1b0 is self._tail:
                    break
                b1 = self._end_of_run(a1b0, lt)
                self._merge(a0, a1b0, b1, lt)
                a0 = b1
            if runs <= 1:
                return

    def insert_ordered(self, elem: Any, less: Less = operator.lt) -> ListElem:
        """Insert ELEM into this list, kept sorted by LESS, after any equals."""
        node = self._wrap(elem)
        before = next((e for e in self if less(node.value, e.value)), None)
        return self.insert(before, node)

    def unique(self, duplicates: Optional["LinkedList"] = None, less: Less = operator.lt) -> None:
        """Drop all but the first of each run of adjacent equal elements.

        Removed elements are appended to DUPLICATES when it is given.
        """
        if not self:
            return
        elem = self._head._next
        while (following := elem._next) is not self._tail:
            if not less(elem.value, following.value) and not less(following.value, elem.value):
                self.remove(following)
                if duplicates is not None:
                    duplicates.push_back(following)
            else:
                elem = following

    def max(self, less: Less = operator.lt) -> Optional[ListElem]:
        """Return the earliest largest element by LESS, or None if empty."""
        best: Optional[ListElem] = None
        for elem in self:
            if best is None or less(best.value, elem.value):
                best = elem
        return best

    def min(self, less: Less = operator.lt) -> Optional[ListElem]:
        """Return the earliest smallest element by LESS, or None if empty."""
        best: Optional[ListElem] = None
        for elem in self:
            if best is None or less(elem.value, best.value):
                best = elem
        return best