# src/sortcount/__main__.py
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .algorithms import Algorithm
from .compare import NotSortedError
from .experiment import ExperimentConfig, run_experiment


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sortcount",
        description="Count the comparisons a sorting algorithm makes on random integer sequences.",
    )
    parser.add_argument(
        "--algorithm",
        choices=[a.value for a in Algorithm],
        default=Algorithm.LIBRARY.value,
        help="sorting algorithm to measure (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    config = ExperimentConfig(algorithm=Algorithm.parse(args.algorithm))
    try:
        run_experiment(config)
    except NotSortedError as e:
        print(f"{config.algorithm.value} sort failed verification: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
