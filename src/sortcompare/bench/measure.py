"""
Timing harness for sorting algorithms.

Entry points:

    timed_sort(sort_fn, a, name) -> (BenchmarkResult, sorted list)
    benchmark(sort_fn, a, name) -> BenchmarkResult
        One timed call on a private copy of `a`, plus a sortedness check.
        `timed_sort` also returns the output of that call, which is what
        `/api/sort` answers with; `benchmark` drops it for the ranking.

    time_sort_call(...) -> dict
        Repeated samples with optional warmup and GC control; used by the
        experiment runner. Returned dict schema:
        {
            "algo": str,
            "repeats": int,
            "samples_ns": list[int],            # elapsed ns per successful sample
            "status": "ok" | "timeout" | "error",
            "error": str | None,                # populated if status == "error"
            "timed_out_on_repeat": int | None,  # 0-based repeat index if timeout occurred
            "sorted_ok": bool | None,           # sortedness of the last output
        }

Both use `time.perf_counter_ns`; copying happens outside the timed block.
"""

from __future__ import annotations

import gc
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence, Tuple

from sortcompare.validate.properties import is_sorted

__all__ = ["BenchmarkResult", "benchmark", "timed_sort", "time_sort_call"]

logger = logging.getLogger(__name__)

SortFn = Callable[[List], Sequence]


@dataclass(frozen=True)
class BenchmarkResult:
    """Outcome of one timed sort. `elapsed_ms` is wall time in milliseconds."""
    algorithm: str
    elapsed_ms: float
    input_size: int
    is_sorted: bool

    def as_dict(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "elapsedTime": self.elapsed_ms,
            "inputSize": self.input_size,
            "isSorted": self.is_sorted,
        }


def timed_sort(sort_fn: SortFn, a: Sequence, name: str) -> Tuple[BenchmarkResult, List]:
    """
    Time one call of `sort_fn` on a copy of `a` and keep what it produced.

    Returns the result record and the sorted list from that same timed call.
    The caller's sequence is never handed to `sort_fn`. Exceptions raised by
    `sort_fn` propagate unchanged.
    """
    arg = list(a)
    t0 = time.perf_counter_ns()
    out = sort_fn(arg)
    t1 = time.perf_counter_ns()

    result = BenchmarkResult(
        algorithm=name,
        elapsed_ms=(t1 - t0) / 1e6,
        input_size=len(a),
        is_sorted=is_sorted(out),
    )
    logger.debug("%s: n=%d %.4f ms sorted=%s", name, result.input_size, result.elapsed_ms, result.is_sorted)
    return result, list(out)


def benchmark(sort_fn: SortFn, a: Sequence, name: str) -> BenchmarkResult:
    """Time one call of `sort_fn` on a copy of `a`; see `timed_sort`."""
    return timed_sort(sort_fn, a, name)[0]


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: SortFn,
    a: List,
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
) -> Dict[str, Any]:
    """
    Time repeated calls to `algo_fn(copy_of_a)`.

    Parameters
    ----------
    algo_name : str
        Logical name of the algorithm (for logs/records).
    algo_fn : Callable[[list], list]
        Sorting callable; may sort in place, its argument is always a fresh copy.
    a : list
        Input array. Never passed to `algo_fn` directly.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, make one untimed call before timing.
    disable_gc : bool
        If True, collect and disable the GC during the timed loop; restore afterward.
    timeout_seconds : float
        Per-sample threshold. A sample exceeding it sets status="timeout" and
        stops further sampling.

    Returns
    -------
    dict
        See module docstring for exact schema.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    result: Dict[str, Any] = {
        "algo": algo_name,
        "repeats": repeats,
        "samples_ns": [],
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
        "sorted_ok": None,
    }

    if warmup and repeats > 0:
        try:
            algo_fn(list(a))
        except Exception as e:
            logger.exception("warmup failed for %s", algo_name)
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            arg = list(a)
            try:
                t0 = time.perf_counter_ns()
                out = algo_fn(arg)
                t1 = time.perf_counter_ns()
            except Exception as e:
                logger.exception("%s failed at repeat %d", algo_name, r)
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            result["samples_ns"].append(int(elapsed))
            result["sorted_ok"] = is_sorted(out)

            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        # Leave the GC disabled if the caller had it disabled
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result
