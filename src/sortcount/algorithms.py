# src/sortcount/algorithms.py
from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List

from .compare import Comparator

SortFunc = Callable[[List[int], Comparator], List[int]]


# ----------------------
# Library sort
# ----------------------
def _less_or_equal_key(compare: Comparator):
    class Key:
        __slots__ = ("value",)

        def __init__(self, value: int):
            self.value = value

        def __lt__(self, other: "Key") -> bool:
            return compare(self.value, other.value) <= 0

    return Key


def library_sort(ns: List[int], compare: Comparator) -> List[int]:
    """
    Sort in place with the built-in sort. The sort asks "a before b?" as
    `compare(a, b) <= 0`, one comparator call per question.
    """
    ns.sort(key=_less_or_equal_key(compare))
    return ns


# ----------------------
# Merge sort
# ----------------------
def _merge(left: List[int], right: List[int], compare: Comparator) -> List[int]:
    merged: List[int] = []
    i = 0
    j = 0
    while i < len(left) and j < len(right):
        # ties go to the left half
        if compare(left[i], right[j]) <= 0:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1

    if i < len(left):
        merged.extend(left[i:])
    if j < len(right):
        merged.extend(right[j:])
    return merged


def merge_sort(ns: List[int], compare: Comparator) -> List[int]:
    """
    Top-down merge sort. Returns a new list; the input is left untouched
    (sequences of length <= 1 are returned as-is).
    """
    if len(ns) <= 1:
        return ns

    mid = len(ns) // 2
    return _merge(merge_sort(ns[:mid], compare), merge_sort(ns[mid:], compare), compare)


# ----------------------
# Insertion sort
# ----------------------
def insertion_sort(ns: List[int], compare: Comparator) -> List[int]:
    for i in range(1, len(ns)):
        key = ns[i]
        j = i - 1
        while j >= 0 and compare(ns[j], key) > 0:
            ns[j + 1] = ns[j]
            j -= 1
        ns[j + 1] = key
    return ns


# ----------------------
# Quicksort (midpoint pivot)
# ----------------------
def midpoint_pivot(lo: int, hi: int) -> int:
    """
    Middle of the inclusive range [lo, hi]. A weak choice: there are inputs
    that make every pivot the largest element of its range, which costs
    O(n^2) comparisons.
    """
    return hi - (hi - lo) // 2


def partition(ns: List[int], lo: int, hi: int, pivot: int, compare: Comparator) -> int:
    """Partition ns[lo..hi] around ns[pivot]; return the pivot's final index."""
    pivot_val = ns[pivot]
    ns[pivot], ns[hi] = ns[hi], ns[pivot]

    boundary = lo
    for i in range(lo, hi):
        if compare(ns[i], pivot_val) < 0:
            ns[i], ns[boundary] = ns[boundary], ns[i]
            boundary += 1

    ns[hi], ns[boundary] = ns[boundary], ns[hi]
    return boundary


def quick_sort(ns: List[int], compare: Comparator) -> List[int]:
    def qs(lo: int, hi: int) -> None:
        # recurse into the smaller side, loop on the larger: stack depth stays O(log n)
        while lo < hi:
            p = partition(ns, lo, hi, midpoint_pivot(lo, hi), compare)
            if p - lo < hi - p:
                qs(lo, p - 1)
                lo = p + 1
            else:
                qs(p + 1, hi)
                hi = p - 1

    qs(0, len(ns) - 1)
    return ns


class Algorithm(Enum):
    LIBRARY = "library"
    MERGE = "merge"
    INSERTION = "insertion"
    QUICK = "quick"

    @property
    def func(self) -> SortFunc:
        return _SORTS[self]

    def sort(self, ns: List[int], compare: Comparator) -> List[int]:
        """Run this algorithm. Callers must use the returned list: some variants sort in place, merge sort does not."""
        return self.func(ns, compare)

    @classmethod
    def parse(cls, name: str) -> "Algorithm":
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(a.value for a in cls)
            raise ValueError(f"unknown algorithm {name!r}; expected one of: {choices}") from None


_SORTS: Dict[Algorithm, SortFunc] = {
    Algorithm.LIBRARY: library_sort,
    Algorithm.MERGE: merge_sort,
    Algorithm.INSERTION: insertion_sort,
    Algorithm.QUICK: quick_sort,
}
