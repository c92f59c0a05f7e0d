# src/sortcount/sequences.py
from __future__ import annotations

import time
from typing import List, Optional

import numpy as np

from .algorithms import midpoint_pivot


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Random source for trials. Without an explicit seed it is seeded from the
    wall clock, so successive runs draw different sequences.
    """
    if seed is None:
        seed = time.time_ns()
    return np.random.default_rng(seed)


def random_sequence(n: int, rng: np.random.Generator) -> List[int]:
    """n integers drawn independently and uniformly from [0, n)."""
    if n <= 0:
        return []
    return [int(x) for x in rng.integers(0, n, size=n)]


def sorted_sequence(n: int) -> List[int]:
    return list(range(n))


def reversed_sequence(n: int) -> List[int]:
    return list(range(n - 1, -1, -1))


def quicksort_killer(n: int) -> List[int]:
    """
    A permutation of range(n) on which the midpoint-pivot quicksort picks the
    largest remaining element as pivot at every step, so it performs exactly
    n*(n-1)/2 comparisons.

    Replays the partition moves on slot labels: with every element below the
    pivot, a partition of [0, hi] only swaps the midpoint into `hi`.
    """
    slots = list(range(n))
    out = [0] * n
    for hi in range(n - 1, 0, -1):
        mid = midpoint_pivot(0, hi)
        out[slots[mid]] = hi
        slots[mid], slots[hi] = slots[hi], slots[mid]
    if n:
        out[slots[0]] = 0
    return out
