"""
Benchmarking public API.

Re-exports:
    BenchmarkResult, benchmark, timed_sort, time_sort_call (measure)
    benchmark_algorithm, compare_all, summarize, scaling (compare)
"""

from .compare import (
    QUADRATIC_THRESHOLD,
    ComparisonSummary,
    benchmark_algorithm,
    compare_all,
    scaling,
    select_algorithms,
    summarize,
)
from .measure import BenchmarkResult, benchmark, time_sort_call, timed_sort

__all__ = [
    "BenchmarkResult",
    "benchmark",
    "timed_sort",
    "time_sort_call",
    "QUADRATIC_THRESHOLD",
    "ComparisonSummary",
    "benchmark_algorithm",
    "select_algorithms",
    "compare_all",
    "summarize",
    "scaling",
]
