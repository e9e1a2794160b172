"""Benchmark wrapper, repeated timing, and compare-all ranking."""

from __future__ import annotations

import dataclasses
import gc
import time

import pytest

from sortcompare.algorithms import ALGORITHMS
from sortcompare.bench import (
    BenchmarkResult,
    benchmark,
    benchmark_algorithm,
    compare_all,
    scaling,
    select_algorithms,
    summarize,
    time_sort_call,
    timed_sort,
)
from sortcompare.errors import UnsupportedAlgorithm

QUADRATIC = {a for a, info in ALGORITHMS.items() if info.quadratic}


# ------------------------- benchmark() ------------------------- #

@pytest.mark.parametrize("algo_id", list(ALGORITHMS))
def test_benchmark_result_fields(algo_id: str) -> None:
    a = [3, 6, 8, 10, 1, 2, 1]
    before = list(a)
    info = ALGORITHMS[algo_id]
    res = benchmark(info.func, a, info.name)
    assert res.algorithm == info.name
    assert res.is_sorted is True
    assert res.input_size == len(a)
    assert res.elapsed_ms >= 0
    assert a == before


def test_benchmark_flags_unsorted_output() -> None:
    res = benchmark(lambda xs: xs, [2, 1], "identity")
    assert res.is_sorted is False


def test_benchmark_propagates_sort_errors() -> None:
    def boom(xs):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        benchmark(boom, [1], "boom")


def test_timed_sort_hands_back_the_timed_output() -> None:
    a = [3, 1, 2]
    calls = []

    def recording_sort(xs):
        calls.append(xs)
        xs.sort()
        return xs

    res, out = timed_sort(recording_sort, a, "recording")
    assert len(calls) == 1
    assert out == calls[0] == [1, 2, 3]
    assert res.is_sorted is True and res.input_size == 3
    assert a == [3, 1, 2]


def test_benchmark_result_is_immutable_and_serialises() -> None:
    res = BenchmarkResult(algorithm="X", elapsed_ms=1.5, input_size=3, is_sorted=True)
    with pytest.raises(dataclasses.FrozenInstanceError):
        res.elapsed_ms = 2.0  # type: ignore[misc]
    assert res.as_dict() == {"algorithm": "X", "elapsedTime": 1.5, "inputSize": 3, "isSorted": True}


def test_benchmark_algorithm_by_id() -> None:
    res = benchmark_algorithm([5, 4, 3, 2, 1], "HeapSort")
    assert res.algorithm == "HeapSort" and res.is_sorted and res.input_size == 5
    with pytest.raises(UnsupportedAlgorithm):
        benchmark_algorithm([1], "bogosort")


# ------------------------- compare_all / summarize ------------------------- #

def test_compare_all_small_input_runs_everything_fastest_first() -> None:
    results = compare_all(list(range(50, 0, -1)))
    assert len(results) == len(ALGORITHMS)
    times = [r.elapsed_ms for r in results]
    assert times == sorted(times)
    assert all(r.is_sorted and r.input_size == 50 for r in results)


def test_compare_all_drops_quadratic_above_threshold() -> None:
    results = compare_all(list(range(20)), quadratic_threshold=10)
    names = {r.algorithm for r in results}
    assert len(results) == len(ALGORITHMS) - len(QUADRATIC)
    assert not names & {ALGORITHMS[a].name for a in QUADRATIC}


def test_select_algorithms_threshold_is_inclusive() -> None:
    assert len(select_algorithms(1000)) == len(ALGORITHMS)
    assert len(select_algorithms(1001)) == len(ALGORITHMS) - len(QUADRATIC)


def test_summarize() -> None:
    results = [
        BenchmarkResult("B", 4.0, 10, True),
        BenchmarkResult("A", 1.0, 10, True),
        BenchmarkResult("C", 7.0, 10, True),
    ]
    s = summarize(results)
    assert s.fastest.algorithm == "A"
    assert s.slowest.algorithm == "C"
    assert s.average_ms == pytest.approx(4.0)
    assert s.speedup == pytest.approx(7.0)
    assert s.as_dict()["fastest"] == {"algorithm": "A", "time": 1.0}


def test_summarize_zero_time_has_no_speedup() -> None:
    s = summarize([BenchmarkResult("A", 0.0, 1, True)])
    assert s.speedup is None


def test_summarize_rejects_empty() -> None:
    with pytest.raises(ValueError):
        summarize([])


def test_scaling_table_shape() -> None:
    table = scaling([10, 20], kind="reversed", algorithm_ids=("iterative", "native"))
    assert list(table) == [10, 20]
    assert set(table[10]) == {"iterative", "native"}
    assert all(ms >= 0 for row in table.values() for ms in row.values())


# ------------------------- time_sort_call ------------------------- #

def _call(fn, **kw):
    params = dict(algo_name="x", algo_fn=fn, a=[3, 1, 2], repeats=3, warmup=True, disable_gc=False, timeout_seconds=5.0)
    params.update(kw)
    return time_sort_call(**params)


def test_time_sort_call_ok() -> None:
    res = _call(ALGORITHMS["recursive"].func)
    assert res["status"] == "ok"
    assert len(res["samples_ns"]) == 3
    assert res["sorted_ok"] is True


def test_time_sort_call_never_hands_over_the_input() -> None:
    a = [3, 1, 2]
    _call(ALGORITHMS["bubblesort"].func, a=a)
    assert a == [3, 1, 2]


def test_time_sort_call_timeout_stops_sampling() -> None:
    def slow(xs):
        time.sleep(0.01)
        return sorted(xs)

    res = _call(slow, warmup=False, timeout_seconds=0.001)
    assert res["status"] == "timeout"
    assert res["timed_out_on_repeat"] == 0
    assert len(res["samples_ns"]) == 1


def test_time_sort_call_error_in_warmup() -> None:
    def boom(xs):
        raise RuntimeError("nope")

    res = _call(boom)
    assert res["status"] == "error"
    assert "warmup failed" in res["error"]


def test_time_sort_call_restores_gc() -> None:
    assert gc.isenabled()
    _call(sorted, disable_gc=True)
    assert gc.isenabled()


@pytest.mark.parametrize("kw", [{"repeats": -1}, {"timeout_seconds": 0}])
def test_time_sort_call_rejects_bad_arguments(kw) -> None:
    with pytest.raises(ValueError):
        _call(sorted, **kw)
