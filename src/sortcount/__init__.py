# src/sortcount/__init__.py
from __future__ import annotations

from .algorithms import Algorithm, insertion_sort, library_sort, merge_sort, quick_sort
from .compare import ComparisonCounter, NotSortedError, assert_sorted
from .experiment import (
    DEFAULT_N,
    DEFAULT_REPEATS,
    ExperimentConfig,
    ExperimentResult,
    compare_algorithms,
    run_experiment,
)
from .report import build_report_html
from .runner import run_trial
from .stats import TrialStatistics, estimate

__all__ = [
    "Algorithm",
    "ComparisonCounter",
    "DEFAULT_N",
    "DEFAULT_REPEATS",
    "ExperimentConfig",
    "ExperimentResult",
    "NotSortedError",
    "TrialStatistics",
    "assert_sorted",
    "build_report_html",
    "compare_algorithms",
    "estimate",
    "insertion_sort",
    "library_sort",
    "merge_sort",
    "quick_sort",
    "run_experiment",
    "run_trial",
]
