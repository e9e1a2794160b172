"""
Cross-algorithm comparisons built on `benchmark()`.

Public API (stable):
    QUADRATIC_THRESHOLD = 1000
    SCALING_ALGORITHMS = ("recursive", "mergesort", "heapsort", "native")
    benchmark_algorithm(a, algorithm_id) -> BenchmarkResult
    select_algorithms(n, quadratic_threshold) -> list[AlgorithmInfo]
    compare_all(a, quadratic_threshold=QUADRATIC_THRESHOLD) -> list[BenchmarkResult]
    summarize(results) -> ComparisonSummary
    scaling(sizes, kind="random", seed=None, algorithm_ids=SCALING_ALGORITHMS)
        -> dict[int, dict[str, float]]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence

from sortcompare.algorithms import ALGORITHMS, AlgorithmInfo, get_algorithm
from sortcompare.datasets import generate

from .measure import BenchmarkResult, benchmark

__all__ = [
    "QUADRATIC_THRESHOLD",
    "SCALING_ALGORITHMS",
    "ComparisonSummary",
    "benchmark_algorithm",
    "select_algorithms",
    "compare_all",
    "summarize",
    "scaling",
]

logger = logging.getLogger(__name__)

QUADRATIC_THRESHOLD = 1000
SCALING_ALGORITHMS = ("recursive", "mergesort", "heapsort", "native")


@dataclass(frozen=True)
class ComparisonSummary:
    fastest: BenchmarkResult
    slowest: BenchmarkResult
    average_ms: float
    speedup: Optional[float]  # None when the fastest run measured 0 ms

    def as_dict(self) -> Dict[str, Any]:
        return {
            "fastest": {"algorithm": self.fastest.algorithm, "time": self.fastest.elapsed_ms},
            "slowest": {"algorithm": self.slowest.algorithm, "time": self.slowest.elapsed_ms},
            "average": self.average_ms,
            "speedup": self.speedup,
        }


def benchmark_algorithm(a: Sequence, algorithm_id: str) -> BenchmarkResult:
    info = get_algorithm(algorithm_id)
    return benchmark(info.func, a, info.name)


def select_algorithms(n: int, quadratic_threshold: int = QUADRATIC_THRESHOLD) -> List[AlgorithmInfo]:
    """Algorithms worth running on an input of size `n`, in registry order."""
    return [
        info for info in ALGORITHMS.values()
        if not (info.quadratic and n > quadratic_threshold)
    ]


def compare_all(a: Sequence, quadratic_threshold: int = QUADRATIC_THRESHOLD) -> List[BenchmarkResult]:
    """
    Benchmark every applicable algorithm on `a`, fastest first.

    O(n^2) baselines are skipped when len(a) > quadratic_threshold.
    """
    algos = select_algorithms(len(a), quadratic_threshold)
    skipped = len(ALGORITHMS) - len(algos)
    if skipped:
        logger.info("n=%d above %d: skipping %d quadratic algorithms", len(a), quadratic_threshold, skipped)
    results = [benchmark(info.func, a, info.name) for info in algos]
    results.sort(key=lambda r: r.elapsed_ms)
    return results


def summarize(results: Sequence[BenchmarkResult]) -> ComparisonSummary:
    """Fastest/slowest/average of an ordered result list (as from compare_all)."""
    if not results:
        raise ValueError("cannot summarize an empty result list")
    ordered = sorted(results, key=lambda r: r.elapsed_ms)
    fastest, slowest = ordered[0], ordered[-1]
    average = sum(r.elapsed_ms for r in ordered) / len(ordered)
    speedup = slowest.elapsed_ms / fastest.elapsed_ms if fastest.elapsed_ms > 0 else None
    return ComparisonSummary(fastest=fastest, slowest=slowest, average_ms=average, speedup=speedup)


def scaling(
    sizes: Iterable[int],
    kind: str = "random",
    seed: Optional[int] = None,
    algorithm_ids: Sequence[str] = SCALING_ALGORITHMS,
) -> Dict[int, Dict[str, float]]:
    """
    Time each algorithm on one generated dataset per size.

    Returns {size: {algorithm_id: elapsed_ms}}.
    """
    infos = [get_algorithm(a) for a in algorithm_ids]
    table: Dict[int, Dict[str, float]] = {}
    for n in sizes:
        data = generate(kind, int(n), seed=seed)
        table[int(n)] = {info.id: benchmark(info.func, data, info.name).elapsed_ms for info in infos}
    return table
