"""Integer parsing, in-place heap sort and binary search."""

from itertools import dropwhile, takewhile
from typing import Any, Callable, MutableSequence, Optional, Sequence

from klib.arithmetic import to_signed
from klib.ctype import isdigit, isspace

Compare = Callable[[Any, Any], int]


def atoi(s: str) -> int:
    """Parse a signed decimal integer at the start of S, as a 32-bit int.

    Leading white space is skipped, an optional sign is accepted, and
    parsing stops at the first non-digit.  Values outside the int
    range wrap around.
    """
    rest = "".join(dropwhile(isspace, s))
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = "".join(takewhile(isdigit, rest))
    value = int(digits) if digits else 0
    return to_signed(-value if negative else value, 32)


def _heapify(array: MutableSequence[Any], i: int, cnt: int, compare: Compare) -> None:
    # Indexes are 1-based, as in the classic heap layout.
    while True:
        left, right = 2 * i, 2 * i + 1
        largest = i
        if left <= cnt and compare(array[left - 1], array[largest - 1]) > 0:
            largest = left
        if right <= cnt and compare(array[right - 1], array[largest - 1]) > 0:
            largest = right
        if largest == i:
            return
        array[i - 1], array[largest - 1] = array[largest - 1], array[i - 1]
        i = largest


def sort(array: MutableSequence[Any], compare: Compare) -> None:
    """Heap-sort ARRAY in place using a strcmp-style COMPARE.

    Runs in O(n log n) time and O(1) extra space; not stable.
    """
    cnt = len(array)
    for i in range(cnt // 2, 0, -1):
        _heapify(array, i, cnt, compare)
    for i in range(cnt, 1, -1):
        array[0], array[i - 1] = array[i - 1], array[0]
        _heapify(array, 1, i - 1, compare)


def binary_search(key: Any, array: Sequence[Any], compare: Compare) -> Optional[int]:
    """Find KEY in ARRAY, sorted according to COMPARE.

    COMPARE is called as compare(key, element).  Returns the index of a
    matching element (any one, if there are several) or None.
    """
    first, last = 0, len(array)
    while first < last:
        middle = first + (last - first) // 2
        cmp = compare(key, array[middle])
        if cmp < 0:
            last = middle
        elif cmp > 0:
            first = middle + 1
        else:
            return middle
    return None