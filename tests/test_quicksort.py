"""
QuickSort family: partition invariants, in-place contracts, and the
recursion-depth handling of the recursive drivers.
"""

from __future__ import annotations

import random
import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from sortcompare.algorithms import (
    partition,
    partition_3way,
    partition_randomized,
    quick_sort,
    quick_sort_3way,
    quick_sort_iterative,
    quick_sort_optimized,
    quick_sort_recursive,
    sort,
)
from sortcompare.errors import UnsupportedAlgorithm

IN_PLACE = [quick_sort_recursive, quick_sort_iterative, quick_sort_optimized, quick_sort_3way]

nonempty_lists = st.lists(st.integers(min_value=-50, max_value=50), min_size=1, max_size=120)


# ------------------------- partition schemes ------------------------- #

def test_lomuto_partition_example() -> None:
    a = [3, 6, 8, 10, 1, 2, 1]
    p = partition(a, 0, len(a) - 1)
    # pivot 1 is the minimum: nothing is strictly smaller
    assert p == 0
    assert a[p] == 1
    assert sorted(a) == [1, 1, 2, 3, 6, 8, 10]


def test_lomuto_partition_places_pivot_at_rank() -> None:
    a = [9, 2, 7, 4, 5]
    p = partition(a, 0, 4)
    assert p == 2 and a[p] == 5
    assert all(x < 5 for x in a[:p])
    assert all(x >= 5 for x in a[p + 1:])


@settings(deadline=None, max_examples=150)
@given(a=nonempty_lists)
def test_property_lomuto_partition_invariant(a: List[int]) -> None:
    before = sorted(a)
    p = partition(a, 0, len(a) - 1)
    assert all(x <= a[p] for x in a[:p])
    assert all(x >= a[p] for x in a[p + 1:])
    assert sorted(a) == before


@settings(deadline=None, max_examples=150)
@given(a=nonempty_lists, seed=st.integers(min_value=0, max_value=2**32 - 1))
def test_property_randomized_partition_invariant(a: List[int], seed: int) -> None:
    p = partition_randomized(a, 0, len(a) - 1, random.Random(seed))
    assert all(x <= a[p] for x in a[:p])
    assert all(x >= a[p] for x in a[p + 1:])


@settings(deadline=None, max_examples=150)
@given(a=nonempty_lists)
def test_property_3way_partition_bands(a: List[int]) -> None:
    pivot = a[0]
    lt, gt = partition_3way(a, 0, len(a) - 1)
    assert all(x < pivot for x in a[:lt])
    assert all(x == pivot for x in a[lt:gt + 1])
    assert all(x > pivot for x in a[gt + 1:])


def test_3way_partition_all_equal_spans_whole_range() -> None:
    a = [5, 5, 5, 5, 5]
    assert partition_3way(a, 0, 4) == (0, 4)
    assert a == [5, 5, 5, 5, 5]


def test_partition_on_subrange_leaves_rest_alone() -> None:
    a = [100, 3, 1, 2, -100]
    p = partition(a, 1, 3)
    assert a[0] == 100 and a[4] == -100
    assert a[1:4] == [1, 2, 3]
    assert p == 2


# ------------------------- drivers ------------------------- #

@pytest.mark.parametrize("fn", IN_PLACE)
def test_drivers_sort_in_place_and_return_same_list(fn) -> None:
    a = [4, 1, 3, 1, 2]
    out = fn(a)
    assert out is a
    assert a == [1, 1, 2, 3, 4]


@pytest.mark.parametrize("fn", IN_PLACE)
@pytest.mark.parametrize("a", [[], [7]])
def test_drivers_noop_on_trivial_input(fn, a: List[int]) -> None:
    expected = list(a)
    assert fn(a) == expected


def test_recursive_sorts_subrange_only() -> None:
    a = [9, 5, 4, 3, 0]
    quick_sort_recursive(a, 1, 3)
    assert a == [9, 3, 4, 5, 0]


def test_iterative_matches_recursive_exactly() -> None:
    rng = random.Random(11)
    data = [rng.randint(0, 100) for _ in range(500)]
    assert quick_sort_iterative(list(data)) == quick_sort_recursive(list(data))


def test_optimized_with_seeded_rng_is_reproducible() -> None:
    data = [5, 4, 3, 2, 1] * 20
    out1 = quick_sort_optimized(list(data), rng=random.Random(3))
    out2 = quick_sort_optimized(list(data), rng=random.Random(3))
    assert out1 == out2 == sorted(data)


def test_optimized_terminates_on_reversed_input() -> None:
    assert quick_sort_optimized([5, 4, 3, 2, 1]) == [1, 2, 3, 4, 5]


def test_recursive_deep_input_restores_recursion_limit() -> None:
    limit = sys.getrecursionlimit()
    n = limit + 500
    a = list(range(n))
    quick_sort_recursive(a)
    assert a == list(range(n))
    assert sys.getrecursionlimit() == limit


def test_recursive_drivers_run_deep_sorts_concurrently() -> None:
    limit = sys.getrecursionlimit()
    jobs = [("recursive", limit + 500), ("3way", limit + 1500), ("recursive", limit + 1000), ("3way", limit + 2000)]
    start = threading.Barrier(len(jobs))

    def run(job):
        algo_id, n = job
        start.wait()
        return sort(list(range(n, 0, -1)), algo_id)

    with ThreadPoolExecutor(max_workers=len(jobs)) as pool:
        outputs = list(pool.map(run, jobs))

    for (_, n), out in zip(jobs, outputs):
        assert out == list(range(1, n + 1))
    assert sys.getrecursionlimit() == limit


# ------------------------- copy-returning wrapper ------------------------- #

@pytest.mark.parametrize("variant", ["recursive", "iterative", "optimized", "3way", "ITERATIVE"])
def test_quick_sort_wrapper_returns_copy(variant: str) -> None:
    a = [3, 6, 8, 10, 1, 2, 1]
    out = quick_sort(a, variant)
    assert out == [1, 1, 2, 3, 6, 8, 10]
    assert a == [3, 6, 8, 10, 1, 2, 1]
    assert out is not a


def test_quick_sort_wrapper_defaults_to_recursive() -> None:
    assert quick_sort([2, 1]) == [1, 2]


def test_quick_sort_wrapper_rejects_unknown_variant() -> None:
    with pytest.raises(UnsupportedAlgorithm):
        quick_sort([2, 1], "hoare")
