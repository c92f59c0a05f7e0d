# src/sortcount/compare.py
from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, Sequence

Comparator = Callable[[int, int], int]


class NotSortedError(AssertionError):
    """Raised when a sort returns a sequence that is not non-decreasing."""

    def __init__(self, index: int, left: int, right: int):
        super().__init__(f"not sorted at index {index}: {left} > {right}")
        self.index = index
        self.left = left
        self.right = right


class ComparisonCounter:
    """
    Instrumentation context for a single flow of trials.

    Every element comparison made by an algorithm goes through `compare`,
    which bumps `count` while `enabled` is set. One counter belongs to one
    experiment; it is never shared between experiments.
    """

    def __init__(self) -> None:
        self.count = 0
        self.enabled = True

    def compare(self, a: int, b: int) -> int:
        # negative: a < b, zero: a == b, positive: a > b
        if self.enabled:
            self.count += 1
        return a - b

    def reset(self) -> None:
        self.count = 0

    @contextmanager
    def verifying(self) -> Iterator["ComparisonCounter"]:
        """Suspend counting for the duration of the block, restoring the previous state on exit."""
        previous = self.enabled
        self.enabled = False
        try:
            yield self
        finally:
            self.enabled = previous


def assert_sorted(ns: Sequence[int], counter: ComparisonCounter) -> None:
    """
    Check `ns` is non-decreasing using the counter's comparator with counting
    suspended. Raises NotSortedError at the first descending pair.
    """
    with counter.verifying():
        for i in range(len(ns) - 1):
            if counter.compare(ns[i], ns[i + 1]) > 0:
                raise NotSortedError(i, ns[i], ns[i + 1])
