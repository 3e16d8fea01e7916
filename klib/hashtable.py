"""Chained hash table with power-of-two bucket counts, and FNV-1 hash helpers."""

import operator
from collections import deque
from typing import Any, Callable, Deque, Iterator, List, Optional, Union

from klib.arithmetic import INT_MAX, INT_MIN, to_unsigned

HashFunc = Callable[[Any], int]
Less = Callable[[Any, Any], bool]
Action = Callable[[Any], None]

FNV_32_PRIME = 16777619
FNV_32_BASIS = 2166136261

MIN_BUCKETS = 4
BEST_ELEMS_PER_BUCKET = 2

_UINT32_MASK = 0xFFFFFFFF


def _fnv(data: bytes) -> int:
    value = FNV_32_BASIS
    for byte in data:
        value = ((value * FNV_32_PRIME) & _UINT32_MASK) ^ byte
    return value


def hash_bytes(data: Union[bytes, bytearray, memoryview]) -> int:
    """Return the 32-bit Fowler-Noll-Vo hash of DATA."""
    return _fnv(bytes(data))


def hash_string(s: str) -> int:
    """Return the hash of the UTF-8 bytes of S, up to its first NUL character."""
    return _fnv(s.split("\0", 1)[0].encode("utf-8"))


def hash_int(i: int) -> int:
    """Return the hash of the 32-bit int I, hashed as its little-endian bytes."""
    if not INT_MIN <= i <= INT_MAX:
        raise ValueError(f"i out of range [{INT_MIN}, {INT_MAX}]: {i}")
    return _fnv(to_unsigned(i, 32).to_bytes(4, "little"))


def _turn_off_least_1bit(x: int) -> int:
    return x & (x - 1)


def _is_power_of_2(x: int) -> bool:
    return x != 0 and _turn_off_least_1bit(x) == 0


class HashTable:
    """A set of elements located by HASH_FUNC and compared with LESS.

    Two elements are equal when neither is less than the other.
    """

    def __init__(self, hash_func: HashFunc, less: Less = operator.lt) -> None:
        self._hash = hash_func
        self._less = less
        self._elem_cnt = 0
        self._buckets: List[Deque[Any]] = [deque() for _ in range(MIN_BUCKETS)]

    def __len__(self) -> int:
        return self._elem_cnt

    def __iter__(self) -> Iterator[Any]:
        for bucket in self._buckets:
            yield from bucket

    def __repr__(self) -> str:
        return f"HashTable({list(self)!r})"

    def bucket_count(self) -> int:
        """Return the current number of buckets, always a power of two."""
        return len(self._buckets)

    def _bucket_for(self, elem: Any, buckets: List[Deque[Any]]) -> Deque[Any]:
        idx = to_unsigned(self._hash(elem), 32) & (len(buckets) - 1)
        return buckets[idx]

    def _find_in(self, bucket: Deque[Any], elem: Any) -> Optional[int]:
        for pos, candidate in enumerate(bucket):
            if not self._less(candidate, elem) and not self._less(elem, candidate):
                return pos
        return None

    def _rehash(self) -> None:
        new_cnt = max(self._elem_cnt // BEST_ELEMS_PER_BUCKET, MIN_BUCKETS)
        while not _is_power_of_2(new_cnt):
            new_cnt = _turn_off_least_1bit(new_cnt)
        if new_cnt == len(self._buckets):
            return
        new_buckets: List[Deque[Any]] = [deque() for _ in range(new_cnt)]
        for bucket in self._buckets:
            for elem in bucket:
                self._bucket_for(elem, new_buckets).appendleft(elem)
        self._buckets = new_buckets

    def clear(self, destructor: Optional[Action] = None) -> None:
        """Remove every element, calling DESTRUCTOR on each if it is given."""
        for bucket in self._buckets:
            if destructor is not None:
                while bucket:
                    destructor(bucket.popleft())
            bucket.clear()
        self._elem_cnt = 0

    def insert(self, elem: Any) -> Optional[Any]:
        """Insert ELEM unless an equal element is present.

        Returns the equal element already in the table, or None if ELEM
        was inserted.
        """
        bucket = self._bucket_for(elem, self._buckets)
        pos = self._find_in(bucket, elem)
        old = None
        if pos is None:
            bucket.appendleft(elem)
            self._elem_cnt += 1
        else:
            old = bucket[pos]
        self._rehash()
        return old

    def replace(self, elem: Any) -> Optional[Any]:
        """Insert ELEM, replacing and returning any equal element (else None)."""
        bucket = self._bucket_for(elem, self._buckets)
        pos = self._find_in(bucket, elem)
        old = None
        if pos is not None:
            old = bucket[pos]
            del bucket[pos]
            self._elem_cnt -= 1
        bucket.appendleft(elem)
        self._elem_cnt += 1
        self._rehash()
        return old

    def find(self, elem: Any) -> Optional[Any]:
        """Return the element equal to ELEM, or None."""
        bucket = self._bucket_for(elem, self._buckets)
        pos = self._find_in(bucket, elem)
        return None if pos is None else bucket[pos]

    def delete(self, elem: Any) -> Optional[Any]:
        """Remove and return the element equal to ELEM, or None if absent."""
        bucket = self._bucket_for(elem, self._buckets)
        pos = self._find_in(bucket, elem)
        if pos is None:
            return None
        found = bucket[pos]
        del bucket[pos]
        self._elem_cnt -= 1
        self._rehash()
        return found

    def apply(self, action: Action) -> None:
        """Call ACTION on every element, in arbitrary order."""
        if action is None:
            raise ValueError("action is required")
        for bucket in self._buckets:
            for elem in list(bucket):
                action(elem)