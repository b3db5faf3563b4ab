"""Stable in-place merging of adjacent sorted runs using galloping search.

The comparison is a strict "less than" predicate ``less(a, b)``.  Equal
elements keep their relative order, so every merge here is stable.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence, Sequence
from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "Run",
    "MergeState",
    "gallop_left",
    "gallop_right",
    "timmerge",
]

MIN_GALLOP = 7

Less = Callable[[Any, Any], bool]


def _check_gallop_args(length: int, hint: int) -> None:
    if length <= 0:
        raise ValueError("length must be positive")
    if not 0 <= hint < length:
        raise ValueError("hint must satisfy 0 <= hint < length")


def gallop_left(
    key: Any, seq: Sequence[Any], base: int, length: int, hint: int, less: Less
) -> int:
    """Leftmost insertion offset of ``key`` in ``seq[base:base + length]``.

    The slice must be sorted.  The search starts near ``hint`` and widens
    exponentially before a final binary search.  The offset is relative to
    ``base``.
    """
    _check_gallop_args(length, hint)
    last_ofs = 0
    ofs = 1
    if less(seq[base + hint], key):
        max_ofs = length - hint
        while ofs < max_ofs and less(seq[base + hint + ofs], key):
            last_ofs = ofs
            ofs = (ofs << 1) + 1
        ofs = min(ofs, max_ofs)
        last_ofs += hint
        ofs += hint
    else:
        max_ofs = hint + 1
        while ofs < max_ofs and not less(seq[base + hint - ofs], key):
            last_ofs = ofs
            ofs = (ofs << 1) + 1
        ofs = min(ofs, max_ofs)
        last_ofs, ofs = hint - ofs, hint - last_ofs

    lo, hi = last_ofs + 1, ofs
    while lo < hi:
        mid = (lo + hi) // 2
        if less(seq[base + mid], key):
            lo = mid + 1
        else:
            hi = mid
    return lo


def gallop_right(
    key: Any, seq: Sequence[Any], base: int, length: int, hint: int, less: Less
) -> int:
    """Rightmost insertion offset of ``key`` in ``seq[base:base + length]``.

    Like :func:`gallop_left`, but equal elements end up before the offset.
    """
    _check_gallop_args(length, hint)
    ofs = 1
    last_ofs = 0
    if less(key, seq[base + hint]):
        max_ofs = hint + 1
        while ofs < max_ofs and less(key, seq[base + hint - ofs]):
            last_ofs = ofs
            ofs = (ofs << 1) + 1
        ofs = min(ofs, max_ofs)
        last_ofs, ofs = hint - ofs, hint - last_ofs
    else:
        max_ofs = length - hint
        while ofs < max_ofs and not less(key, seq[base + hint + ofs]):
            last_ofs = ofs
            ofs = (ofs << 1) + 1
        ofs = min(ofs, max_ofs)
        last_ofs += hint
        ofs += hint

    lo, hi = last_ofs + 1, ofs
    while lo < hi:
        mid = (lo + hi) // 2
        if less(key, seq[base + mid]):
            hi = mid
        else:
            lo = mid + 1
    return lo


@dataclass(frozen=True)
class Run:
    """A sorted stretch ``items[base:base + length]`` awaiting a merge."""

    base: int
    length: int


def _contract_violation() -> ValueError:
    return ValueError("comparison function violates its general contract")


@dataclass
class MergeState:
    """Stack of pending sorted runs over ``items`` and the merge machinery."""

    items: MutableSequence[Any]
    less: Less = operator.lt
    min_gallop: int = MIN_GALLOP
    pending: list[Run] = field(default_factory=list)

    def push_run(self, base: int, length: int) -> None:
        """Record a sorted run starting at ``base``."""
        self.pending.append(Run(base, length))

    def merge_at(self, i: int) -> None:
        """Merge the runs at stack positions ``i`` and ``i + 1``."""
        size = len(self.pending)
        if size < 2 or i not in (size - 2, size - 3):
            raise ValueError("can only merge one of the two topmost run pairs")
        first, second = self.pending[i], self.pending[i + 1]
        self.pending[i] = Run(first.base, first.length + second.length)
        if i == size - 3:
            self.pending[i + 1] = self.pending[i + 2]
        self.pending.pop()
        self.merge_consecutive_runs(first.base, first.length, second.base, second.length)

    def merge_collapse(self) -> None:
        """Merge runs until the stack lengths satisfy the run-length invariants."""
        p = self.pending
        while len(p) > 1:
            n = len(p) - 2
            if (n > 0 and p[n - 1].length <= p[n].length + p[n + 1].length) or (
                n > 1 and p[n - 2].length <= p[n - 1].length + p[n].length
            ):
                if p[n - 1].length < p[n + 1].length:
                    n -= 1
                self.merge_at(n)
            elif p[n].length <= p[n + 1].length:
                self.merge_at(n)
            else:
                break

    def merge_force_collapse(self) -> None:
        """Merge every pending run until only one remains."""
        p = self.pending
        while len(p) > 1:
            n = len(p) - 2
            if n > 0 and p[n - 1].length < p[n + 1].length:
                n -= 1
            self.merge_at(n)

    def merge_consecutive_runs(self, base1: int, len1: int, base2: int, len2: int) -> None:
        """Stably merge two adjacent sorted runs in place."""
        if len1 <= 0 or len2 <= 0:
            raise ValueError("runs must not be empty")
        if base1 + len1 != base2:
            raise ValueError("runs must be adjacent")
        a, less = self.items, self.less

        k = gallop_right(a[base2], a, base1, len1, 0, less)
        base1 += k
        len1 -= k
        if len1 == 0:
            return

        len2 = gallop_left(a[base1 + len1 - 1], a, base2, len2, len2 - 1, less)
        if len2 == 0:
            return

        if len1 <= len2:
            self._merge_lo(base1, len1, base2, len2)
        else:
            self._merge_hi(base1, len1, base2, len2)

    def _rotate_left(self, first: int, last: int) -> None:
        a = self.items
        a[first:last] = list(a[first + 1 : last]) + [a[first]]

    def _rotate_right(self, first: int, last: int) -> None:
        a = self.items
        a[first:last] = [a[last - 1]] + list(a[first : last - 1])

    def _merge_lo(self, base1: int, len1: int, base2: int, len2: int) -> None:
        if len1 == 1:
            self._rotate_left(base1, base2 + len2)
            return
        if len2 == 1:
            self._rotate_right(base1, base2 + len2)
            return

        a, less = self.items, self.less
        tmp = list(a[base1 : base1 + len1])
        c1, c2, dest = 0, base2, base1

        a[dest] = a[c2]
        dest += 1
        c2 += 1
        len2 -= 1

        min_gallop = self.min_gallop
        while True:
            count1 = count2 = 0
            while True:
                if less(a[c2], tmp[c1]):
                    a[dest] = a[c2]
                    dest += 1
                    c2 += 1
                    count2 += 1
                    count1 = 0
                    len2 -= 1
                    if len2 == 0:
                        break
                else:
                    a[dest] = tmp[c1]
                    dest += 1
                    c1 += 1
                    count1 += 1
                    count2 = 0
                    len1 -= 1
                    if len1 == 1:
                        break
                if (count1 | count2) >= min_gallop:
                    break
            if len1 <= 1 or len2 == 0:
                break

            while True:
                count1 = gallop_right(a[c2], tmp, c1, len1, 0, less)
                if count1:
                    a[dest : dest + count1] = tmp[c1 : c1 + count1]
                    dest += count1
                    c1 += count1
                    len1 -= count1
                    if len1 <= 1:
                        break
                a[dest] = a[c2]
                dest += 1
                c2 += 1
                len2 -= 1
                if len2 == 0:
                    break

                count2 = gallop_left(tmp[c1], a, c2, len2, 0, less)
                if count2:
                    a[dest : dest + count2] = a[c2 : c2 + count2]
                    dest += count2
                    c2 += count2
                    len2 -= count2
                    if len2 == 0:
                        break
                a[dest] = tmp[c1]
                dest += 1
                c1 += 1
                len1 -= 1
                if len1 == 1:
                    break

                min_gallop -= 1
                if not (count1 >= MIN_GALLOP or count2 >= MIN_GALLOP):
                    break
            if len1 <= 1 or len2 == 0:
                break
            min_gallop = max(min_gallop, 0) + 2

        self.min_gallop = min(min_gallop, 1)

        if len1 == 1:
            a[dest : dest + len2] = a[c2 : c2 + len2]
            a[dest + len2] = tmp[c1]
        elif len1 == 0:
            raise _contract_violation()
        else:
            a[dest : dest + len1] = tmp[c1 : c1 + len1]

    def _merge_hi(self, base1: int, len1: int, base2: int, len2: int) -> None:
        if len1 == 1:
            self._rotate_left(base1, base2 + len2)
            return
        if len2 == 1:
            self._rotate_right(base1, base2 + len2)
            return

        a, less = self.items, self.less
        tmp = list(a[base2 : base2 + len2])

        # The last unmerged element of run 1 sits at base1 + len1 - 1, the last
        # of run 2 at tmp[len2 - 1], and the next free slot at base1 + len1 + len2 - 1.
        a[base1 + len1 + len2 - 1] = a[base1 + len1 - 1]
        len1 -= 1

        min_gallop = self.min_gallop
        while True:
            count1 = count2 = 0
            while True:
                dest = base1 + len1 + len2 - 1
                if less(tmp[len2 - 1], a[base1 + len1 - 1]):
                    a[dest] = a[base1 + len1 - 1]
                    count1 += 1
                    count2 = 0
                    len1 -= 1
                    if len1 == 0:
                        break
                else:
                    a[dest] = tmp[len2 - 1]
                    count2 += 1
                    count1 = 0
                    len2 -= 1
                    if len2 == 1:
                        break
                if (count1 | count2) >= min_gallop:
                    break
            if len1 == 0 or len2 <= 1:
                break

            while True:
                count1 = len1 - gallop_right(tmp[len2 - 1], a, base1, len1, len1 - 1, less)
                if count1:
                    start = base1 + len1 - count1
                    a[start + len2 : start + len2 + count1] = a[start : start + count1]
                    len1 -= count1
                    if len1 == 0:
                        break
                a[base1 + len1 + len2 - 1] = tmp[len2 - 1]
                len2 -= 1
                if len2 == 1:
                    break

                count2 = len2 - gallop_left(a[base1 + len1 - 1], tmp, 0, len2, len2 - 1, less)
                if count2:
                    end = base1 + len1 + len2
                    a[end - count2 : end] = tmp[len2 - count2 : len2]
                    len2 -= count2
                    if len2 <= 1:
                        break
                a[base1 + len1 + len2 - 1] = a[base1 + len1 - 1]
                len1 -= 1
                if len1 == 0:
                    break

                min_gallop -= 1
                if not (count1 >= MIN_GALLOP or count2 >= MIN_GALLOP):
                    break
            if len1 == 0 or len2 <= 1:
                break
            min_gallop = max(min_gallop, 0) + 2

        self.min_gallop = min(min_gallop, 1)

        if len2 == 1:
            a[base1 + 1 : base1 + 1 + len1] = a[base1 : base1 + len1]
            a[base1] = tmp[0]
        elif len2 == 0:
            raise _contract_violation()
        else:
            a[base1 : base1 + len2] = tmp[:len2]


def _projected(less: Less | None, key: Callable[[Any], Any] | None) -> Less:
    compare = less if less is not None else operator.lt
    if key is None:
        return compare
    return lambda left, right: compare(key(left), key(right))


def timmerge(
    items: MutableSequence[Any],
    middle: int,
    less: Less | None = None,
    key: Callable[[Any], Any] | None = None,
) -> None:
    """Stably merge the sorted ranges ``items[:middle]`` and ``items[middle:]`` in place.

    ``less`` is a strict ordering predicate (``operator.lt`` by default) and
    ``key`` an optional projection applied to both operands before comparing.
    """
    if not 0 <= middle <= len(items):
        raise ValueError("middle must lie within the sequence")
    if middle == 0 or middle == len(items):
        return
    state = MergeState(items, _projected(less, key))
    state.merge_consecutive_runs(0, middle, middle, len(items) - middle)