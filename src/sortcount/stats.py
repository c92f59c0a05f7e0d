# src/sortcount/stats.py
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from statistics import NormalDist
from typing import List, Sequence

import numpy as np


@dataclass
class CountInterval:
    """Mean comparison count with a normal-approximation confidence band."""
    mean: float
    std: float
    trials: int
    lower: float
    upper: float


def count_interval(counts: Sequence[int], confidence: float = 0.95) -> CountInterval:
    """
    Confidence band for the mean of the per-trial counts. With the usual
    hundreds of trials the normal quantile is close enough to Student's t.
    """
    if not 0.0 < confidence < 1.0:
        raise ValueError("confidence must lie strictly between 0 and 1.")
    arr = np.asarray(counts, dtype=float)
    if arr.size == 0:
        return CountInterval(float("nan"), 0.0, 0, float("nan"), float("nan"))
    mean = float(arr.mean())
    if arr.size == 1:
        return CountInterval(mean, 0.0, 1, mean, mean)
    std = float(arr.std(ddof=1))
    half = float(NormalDist().inv_cdf(0.5 + confidence / 2.0) * std / np.sqrt(arr.size))
    return CountInterval(mean, std, int(arr.size), mean - half, mean + half)


def estimate(n: int) -> float:
    """Rough expected comparison count for a comparison sort: n * log2(n)."""
    if n <= 1:
        return 0.0
    return float(n * np.log2(n))


@dataclass
class TrialStatistics:
    """
    Min / max / running average over the trials recorded so far.

    The average is updated incrementally with integer arithmetic,
    avg = (i*avg + count) // (i+1), and is never recomputed from `counts`.
    """
    minimum: int = sys.maxsize
    maximum: int = -1
    average: int = 0
    trials: int = 0
    counts: List[int] = field(default_factory=list)

    def record(self, count: int) -> int:
        i = self.trials
        if count < self.minimum:
            self.minimum = count
        if count > self.maximum:
            self.maximum = count
        self.average = (i * self.average + count) // (i + 1)
        self.trials += 1
        self.counts.append(count)
        return self.average

    def confidence_interval(self, confidence: float = 0.95) -> CountInterval:
        return count_interval(self.counts, confidence)
