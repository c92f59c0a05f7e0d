# src/sortcount/runner.py
from __future__ import annotations

from typing import Callable, List, Optional

import numpy as np

from .algorithms import Algorithm, SortFunc
from .compare import ComparisonCounter, assert_sorted
from .sequences import make_rng, random_sequence


def run_trial(
    counter: ComparisonCounter,
    algorithm: Algorithm | SortFunc,
    n: int,
    rng: Optional[np.random.Generator] = None,
    sequence_builder: Optional[Callable[[int, np.random.Generator], List[int]]] = None,
) -> int:
    """
    One trial: build a sequence of n integers, sort it, verify the result and
    return the number of comparisons the sort made.

    The counter is zeroed on entry and again on every exit path. Verification
    runs with counting suspended, so only the sort's comparisons are returned.
    A result that is not non-decreasing raises NotSortedError.
    """
    if rng is None:
        rng = make_rng()
    build = sequence_builder or random_sequence
    sort = algorithm.sort if isinstance(algorithm, Algorithm) else algorithm

    counter.reset()
    try:
        ns = build(n, rng)
        result = sort(ns, counter.compare)
        count = counter.count
        assert_sorted(result, counter)
        return count
    finally:
        counter.reset()
