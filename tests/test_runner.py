from __future__ import annotations

import numpy as np
import pytest

from sortcount import Algorithm, ComparisonCounter, NotSortedError, run_trial
from sortcount.sequences import make_rng, quicksort_killer, random_sequence


def test_random_sequence_shape_and_range():
    rng = np.random.default_rng(1)
    ns = random_sequence(103, rng)
    assert len(ns) == 103
    assert all(isinstance(x, int) for x in ns)
    assert all(0 <= x < 103 for x in ns)
    assert random_sequence(0, rng) == []


def test_make_rng_seeded_is_reproducible():
    assert random_sequence(20, make_rng(3)) == random_sequence(20, make_rng(3))


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_run_trial_returns_count_and_resets(algorithm):
    counter = ComparisonCounter()
    count = run_trial(counter, algorithm, 103, np.random.default_rng(0))
    assert count > 0
    assert counter.count == 0
    assert counter.enabled is True


def test_run_trial_counts_only_the_sort():
    counter = ComparisonCounter()
    counter.count = 99
    count = run_trial(
        counter,
        Algorithm.QUICK,
        60,
        np.random.default_rng(0),
        sequence_builder=lambda n, rng: quicksort_killer(n),
    )
    assert count == 60 * 59 // 2


def test_run_trial_trivial_lengths():
    counter = ComparisonCounter()
    for n in (0, 1):
        assert run_trial(counter, Algorithm.MERGE, n, np.random.default_rng(0)) == 0


def _broken_sort(ns, compare):
    # makes some comparisons, then returns a descending list
    for i in range(len(ns) - 1):
        compare(ns[i], ns[i + 1])
    return sorted(ns, reverse=True)


def test_broken_sort_aborts_and_restores_flag():
    counter = ComparisonCounter()
    seen = []

    def spying_builder(n, rng):
        seen.append(counter.enabled)
        return [3, 1, 2, 5, 4]

    with pytest.raises(NotSortedError):
        run_trial(counter, _broken_sort, 5, np.random.default_rng(0), sequence_builder=spying_builder)

    assert seen == [True]
    assert counter.enabled is True
    assert counter.count == 0


class RecordingCounter(ComparisonCounter):
    def __init__(self):
        super().__init__()
        self.calls = []

    def compare(self, a, b):
        result = super().compare(a, b)
        self.calls.append((self.enabled, self.count))
        return result


def test_broken_sort_failing_scan_is_not_counted():
    counter = RecordingCounter()

    def swapping_sort(ns, compare):
        compare(ns[0], ns[1])
        return [2, 1]

    with pytest.raises(NotSortedError) as excinfo:
        run_trial(counter, swapping_sort, 2, np.random.default_rng(0),
                  sequence_builder=lambda n, rng: [1, 2])

    # one counted compare from the sort, one uncounted from the failing scan
    assert counter.calls == [(True, 1), (False, 1)]
    assert (excinfo.value.left, excinfo.value.right) == (2, 1)
    assert counter.enabled is True
    assert counter.count == 0
