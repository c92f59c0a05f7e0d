from __future__ import annotations

import math
import sys

import pytest

from sortcount import TrialStatistics, estimate
from sortcount.stats import count_interval


def test_running_average_uses_incremental_integer_formula():
    s = TrialStatistics()
    averages = [s.record(c) for c in (5, 7, 3)]
    assert averages == [5, 6, 5]
    assert (s.minimum, s.average, s.maximum) == (3, 5, 7)
    assert s.trials == 3
    assert s.counts == [5, 7, 3]


def test_running_average_truncates_each_step():
    s = TrialStatistics()
    for c in (1, 2, 2):
        s.record(c)
    # (0+1)//1 = 1, (1+2)//2 = 1, (2+2)//3 = 1; a float mean would give 1.67
    assert s.average == 1


def test_initial_sentinels():
    s = TrialStatistics()
    assert s.minimum == sys.maxsize
    assert s.maximum == -1
    assert s.trials == 0


def test_estimate():
    assert estimate(1) == 0.0
    assert estimate(2) == pytest.approx(2.0)
    assert estimate(103) == pytest.approx(103 * math.log2(103))
    assert f"{estimate(103):0.0f}" == "689"


def test_confidence_interval_brackets_mean():
    ci = count_interval([10, 12, 14, 16])
    assert ci.mean == pytest.approx(13.0)
    assert ci.lower < ci.mean < ci.upper
    assert ci.trials == 4


def test_confidence_interval_degenerate():
    ci = count_interval([7])
    assert ci.lower == ci.upper == ci.mean == 7.0
    assert ci.std == 0.0


def test_confidence_interval_of_recorded_counts():
    s = TrialStatistics()
    for c in (600, 640, 620, 660, 580):
        s.record(c)
    ci = s.confidence_interval()
    assert ci.trials == 5
    assert ci.mean == pytest.approx(620.0)
    assert ci.lower < 620.0 < ci.upper
    assert s.confidence_interval(0.99).upper > ci.upper


def test_confidence_interval_rejects_bad_level():
    with pytest.raises(ValueError):
        count_interval([1, 2, 3], confidence=1.0)
