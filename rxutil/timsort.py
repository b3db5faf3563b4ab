"""Stable hybrid merge sort (timsort) over mutable sequences.

Short inputs are sorted by binary insertion.  Longer ones are cut into
natural runs, extended to a minimum length by binary insertion, and merged
with the galloping merge in :mod:`rxutil.merging`.  The comparison is a
strict "less than" predicate, and equal elements keep their order.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from typing import Any

from rxutil.merging import MergeState

__all__ = [
    "MIN_MERGE",
    "min_run_length",
    "count_run_and_make_ascending",
    "binary_sort",
    "timsort",
]

MIN_MERGE = 32

Less = Callable[[Any, Any], bool]


def min_run_length(n: int) -> int:
    """Minimum run length for a sequence of ``n`` elements.

    Below ``2 * MIN_MERGE`` this is ``n`` itself; otherwise a value in
    ``[MIN_MERGE, 2 * MIN_MERGE]`` such that ``n / result`` is close to, but no
    more than, a power of two.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    r = 0
    while n >= 2 * MIN_MERGE:
        r |= n & 1
        n >>= 1
    return n + r


def count_run_and_make_ascending(
    items: MutableSequence[Any], lo: int, hi: int, less: Less = operator.lt
) -> int:
    """Length of the run starting at ``lo``; a strictly descending run is reversed.

    The run ends before ``hi``.  Reversing only strictly descending runs keeps
    the sort stable.
    """
    if not lo < hi:
        raise ValueError("the range must hold at least one element")
    run_hi = lo + 1
    if run_hi == hi:
        return 1
    if less(items[run_hi], items[lo]):
        run_hi += 1
        while run_hi < hi and less(items[run_hi], items[run_hi - 1]):
            run_hi += 1
        items[lo:run_hi] = items[lo:run_hi][::-1]
    else:
        run_hi += 1
        while run_hi < hi and not less(items[run_hi], items[run_hi - 1]):
            run_hi += 1
    return run_hi - lo


def binary_sort(
    items: MutableSequence[Any], lo: int, hi: int, start: int, less: Less = operator.lt
) -> None:
    """Sort ``items[lo:hi]`` in place, given that ``items[lo:start]`` is already sorted.

    Each remaining element is inserted after any equal elements, which keeps
    the sort stable.
    """
    if not lo <= start <= hi:
        raise ValueError("start must satisfy lo <= start <= hi")
    if start == lo:
        start += 1
    for current in range(start, hi):
        pivot = items[current]
        left, right = lo, current
        while left < right:
            mid = (left + right) // 2
            if less(pivot, items[mid]):
                right = mid
            else:
                left = mid + 1
        items[left + 1 : current + 1] = items[left:current]
        items[left] = pivot


def _projected(less: Less | None, key: Callable[[Any], Any] | None) -> Less:
    compare = less if less is not None else operator.lt
    if key is None:
        return compare
    return lambda left, right: compare(key(left), key(right))


def timsort(
    items: MutableSequence[Any],
    less: Less | None = None,
    key: Callable[[Any], Any] | None = None,
) -> None:
    """Stably sort ``items`` in place.

    ``less`` is a strict ordering predicate (``operator.lt`` by default) and
    ``key`` an optional projection applied to both operands before comparing.
    """
    compare = _projected(less, key)
    n = len(items)
    if n < 2:
        return

    if n < MIN_MERGE:
        initial = count_run_and_make_ascending(items, 0, n, compare)
        binary_sort(items, 0, n, initial, compare)
        return

    state = MergeState(items, compare)
    min_run = min_run_length(n)
    cur = 0
    remaining = n
    while remaining:
        run_len = count_run_and_make_ascending(items, cur, n, compare)
        if run_len < min_run:
            force = min(remaining, min_run)
            binary_sort(items, cur, cur + force, cur + run_len, compare)
            run_len = force
        state.push_run(cur, run_len)
        state.merge_collapse()
        cur += run_len
        remaining -= run_len

    state.merge_force_collapse()