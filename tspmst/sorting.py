"""In-place comparison sorts driven by a three-way compare function.

Each function sorts a mutable sequence in place.
``compare(x, y)`` returns a negative number, zero or a positive number
when ``x`` is less than, equal to or greater than ``y``.
"""

from __future__ import annotations

import math
from collections.abc import Callable, MutableSequence
from typing import Any, TypeVar

T = TypeVar("T")
Compare = Callable[[Any, Any], int]

_SMALL_RANGE = 16


def _insertion_range(items: MutableSequence[T], lo: int, hi: int, compare: Compare) -> None:
    for i in range(lo + 1, hi + 1):
        key = items[i]
        j = i - 1
        while j >= lo and compare(items[j], key) > 0:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key


def _sift_down(items: MutableSequence[T], lo: int, root: int, end: int, compare: Compare) -> None:
    """Restore the max-heap below ``root``; offsets are relative to ``lo``, ``end`` inclusive."""
    while 2 * root + 1 <= end:
        child = 2 * root + 1
        if child + 1 <= end and not compare(items[lo + child], items[lo + child + 1]) > 0:
            child += 1
        if compare(items[lo + root], items[lo + child]) > 0:
            return
        items[lo + root], items[lo + child] = items[lo + child], items[lo + root]
        root = child


def _heap_range(items: MutableSequence[T], lo: int, hi: int, compare: Compare) -> None:
    n = hi - lo + 1
    for start in range((n - 2) // 2, -1, -1):
        _sift_down(items, lo, start, n - 1, compare)
    for end in range(n - 1, 0, -1):
        items[lo], items[lo + end] = items[lo + end], items[lo]
        _sift_down(items, lo, 0, end - 1, compare)


def _partition(items: MutableSequence[T], lo: int, hi: int, compare: Compare) -> int:
    """Partition around the last element and return the pivot's final position."""
    pivot = items[hi]
    store = lo
    for j in range(lo, hi):
        if compare(items[j], pivot) <= 0:
            items[store], items[j] = items[j], items[store]
            store += 1
    items[hi], items[store] = items[store], items[hi]
    return store


def insertion_sort(items: MutableSequence[T], compare: Compare) -> None:
    """Sort ``items`` in place by insertion."""
    _insertion_range(items, 0, len(items) - 1, compare)


def heap_sort(items: MutableSequence[T], compare: Compare) -> None:
    """Sort ``items`` in place with a max-heap."""
    _heap_range(items, 0, len(items) - 1, compare)


def quick_sort(items: MutableSequence[T], compare: Compare) -> None:
    """Sort ``items`` in place by quicksort with the last element as pivot."""
    pending = [(0, len(items) - 1)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        mid = _partition(items, lo, hi, compare)
        left, right = (lo, mid - 1), (mid + 1, hi)
        # Handle the smaller side first to keep the stack shallow.
        if left[1] - left[0] < right[1] - right[0]:
            pending.extend((right, left))
        else:
            pending.extend((left, right))


def intro_sort(items: MutableSequence[T], compare: Compare) -> None:
    """Sort ``items`` in place: quicksort, falling back to heap sort when
    partitioning goes too deep and to insertion sort on short ranges."""
    n = len(items)
    if n < 2:
        return
    depth_limit = 2 * int(math.floor(math.log2(n)))
    pending = [(0, n - 1, depth_limit)]
    while pending:
        lo, hi, depth = pending.pop()
        if lo >= hi:
            continue
        if hi - lo + 1 < _SMALL_RANGE:
            _insertion_range(items, lo, hi, compare)
        elif depth == 0:
            _heap_range(items, lo, hi, compare)
        else:
            mid = _partition(items, lo, hi, compare)
            pending.append((lo, mid - 1, depth - 1))
            pending.append((mid + 1, hi, depth - 1))