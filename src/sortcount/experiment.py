# src/sortcount/experiment.py
from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np

from .algorithms import Algorithm
from .compare import ComparisonCounter
from .runner import run_trial
from .sequences import make_rng
from .stats import CountInterval, TrialStatistics, estimate

DEFAULT_N = 103
DEFAULT_REPEATS = 200


def _is_count(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclass(frozen=True)
class ExperimentConfig:
    n: int = DEFAULT_N
    repeats: int = DEFAULT_REPEATS
    algorithm: Algorithm = Algorithm.LIBRARY

    def validate(self) -> None:
        if not isinstance(self.algorithm, Algorithm):
            raise TypeError("algorithm must be an Algorithm member.")
        if not _is_count(self.n) or self.n < 1:
            raise ValueError("n must be a positive integer.")
        if not _is_count(self.repeats) or self.repeats < 1:
            raise ValueError("repeats must be a positive integer.")


@dataclass
class ExperimentResult:
    config: ExperimentConfig
    estimate: float
    stats: TrialStatistics = field(default_factory=TrialStatistics)

    @property
    def label(self) -> str:
        return self.config.algorithm.value

    @property
    def ci(self) -> CountInterval:
        return self.stats.confidence_interval()

    def to_html(self, title: Optional[str] = None) -> str:
        from .report import build_report_html

        return build_report_html([self], title=title or f"Comparison counts: {self.label} sort")

    def _repr_html_(self) -> str:  # Jupyter-friendly
        return self.to_html()


def run_experiment(
    config: Optional[ExperimentConfig] = None,
    rng: Optional[np.random.Generator] = None,
    verbose: bool = True,
) -> ExperimentResult:
    """
    Run `config.repeats` trials of `config.algorithm` on random sequences of
    length `config.n` and aggregate their comparison counts.

    With verbose=True the estimate, every trial's count (ten per line) and
    the final `min<TAB>average<TAB>max` line are printed as they are produced.
    NotSortedError from a trial aborts the whole run.
    """
    config = config or ExperimentConfig()
    config.validate()
    if rng is None:
        rng = make_rng()

    counter = ComparisonCounter()
    result = ExperimentResult(config=config, estimate=estimate(config.n))

    if verbose:
        print(f"~ {result.estimate:0.0f}")

    for i in range(config.repeats):
        count = run_trial(counter, config.algorithm, config.n, rng)
        result.stats.record(count)

        if verbose:
            if i % 10 == 0:
                print()
            print(f"{count}\t", end="")

    if verbose:
        print()
        s = result.stats
        print(f"\n{s.minimum}\t{s.average}\t{s.maximum}")

    return result


def compare_algorithms(
    algorithms: Sequence[Algorithm] = tuple(Algorithm),
    n: int = DEFAULT_N,
    repeats: int = DEFAULT_REPEATS,
    rng: Optional[np.random.Generator] = None,
    verbose: bool = False,
) -> List[ExperimentResult]:
    """Run one experiment per algorithm with the same n, repeats and random source."""
    if not algorithms:
        raise ValueError("algorithms must be a non-empty sequence.")
    if rng is None:
        rng = make_rng()
    results: List[ExperimentResult] = []
    for algorithm in algorithms:
        config = ExperimentConfig(n=n, repeats=repeats, algorithm=algorithm)
        if verbose:
            print(f"# {algorithm.value}")
        results.append(run_experiment(config, rng=rng, verbose=verbose))
    return results
