"""
Algorithm registry: the single place that maps an algorithm id to its
implementation and metadata.

Public API (stable):
    ALGORITHMS: dict[str, AlgorithmInfo]      # keyed by id, insertion-ordered
    DEFAULT_ALGORITHM: str                    # "iterative"
    get_algorithm(algorithm_id) -> AlgorithmInfo
    sort(a, algorithm_id=DEFAULT_ALGORITHM) -> list
    complexity_table() -> dict[str, dict]

`sort()` always works on a private copy, so callers never observe in-place
mutation regardless of which convention the underlying algorithm uses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence

from sortcompare.errors import UnsupportedAlgorithm

from .baseline import bubble_sort, insertion_sort, native_sort
from .heap_sort import heap_sort
from .merge_sort import merge_sort
from .quicksort import (
    quick_sort_3way,
    quick_sort_iterative,
    quick_sort_optimized,
    quick_sort_recursive,
)

__all__ = [
    "Complexity",
    "AlgorithmInfo",
    "ALGORITHMS",
    "DEFAULT_ALGORITHM",
    "get_algorithm",
    "sort",
    "complexity_table",
]


@dataclass(frozen=True)
class Complexity:
    best: str
    average: str
    worst: str
    space: str
    stable: bool
    description: str

    def as_dict(self) -> Dict[str, Any]:
        return {
            "timeComplexity": {"best": self.best, "average": self.average, "worst": self.worst},
            "spaceComplexity": self.space,
            "stable": self.stable,
            "description": self.description,
        }


@dataclass(frozen=True)
class AlgorithmInfo:
    """
    One registered algorithm.

    in_place : bool
        True if `func` rearranges the list it receives (and returns it);
        False if it leaves its argument alone and returns a new list.
    quadratic : bool
        True for O(n^2) baselines; comparisons drop these on large inputs.
    """
    id: str
    name: str
    func: Callable[[List], List]
    in_place: bool
    quadratic: bool
    complexity: Complexity

    def run(self, a: Sequence) -> List:
        """Sort a private copy of `a` and return the result."""
        return self.func(list(a))


_QUICK = Complexity(
    best="O(n log n)",
    average="O(n log n)",
    worst="O(n²)",
    space="O(log n)",
    stable=False,
    description="Efficient divide-and-conquer algorithm. Fast in practice but can degrade to O(n²).",
)

ALGORITHMS: Dict[str, AlgorithmInfo] = {
    info.id: info
    for info in (
        AlgorithmInfo("recursive", "QuickSort (Recursive)", quick_sort_recursive, True, False, _QUICK),
        AlgorithmInfo("iterative", "QuickSort (Iterative)", quick_sort_iterative, True, False, _QUICK),
        AlgorithmInfo(
            "optimized",
            "QuickSort (Optimized/Random Pivot)",
            quick_sort_optimized,
            True,
            False,
            Complexity(
                best="O(n log n)",
                average="O(n log n)",
                worst="O(n²)",
                space="O(log n)",
                stable=False,
                description="Random pivot makes the O(n²) case vanishingly unlikely on sorted input.",
            ),
        ),
        AlgorithmInfo(
            "3way",
            "QuickSort (3-Way Partitioning)",
            quick_sort_3way,
            True,
            False,
            Complexity(
                best="O(n)",
                average="O(n log n)",
                worst="O(n²)",
                space="O(log n)",
                stable=False,
                description="Groups keys equal to the pivot; linear time when there are few distinct values.",
            ),
        ),
        AlgorithmInfo(
            "mergesort",
            "MergeSort",
            merge_sort,
            False,
            False,
            Complexity(
                best="O(n log n)",
                average="O(n log n)",
                worst="O(n log n)",
                space="O(n)",
                stable=True,
                description="Consistent O(n log n) performance but requires additional space.",
            ),
        ),
        AlgorithmInfo(
            "heapsort",
            "HeapSort",
            heap_sort,
            False,
            False,
            Complexity(
                best="O(n log n)",
                average="O(n log n)",
                worst="O(n log n)",
                space="O(1)",
                stable=False,
                description="Consistent performance with in-place heap operations. Not stable.",
            ),
        ),
        AlgorithmInfo(
            "bubblesort",
            "BubbleSort",
            bubble_sort,
            True,
            True,
            Complexity(
                best="O(n)",
                average="O(n²)",
                worst="O(n²)",
                space="O(1)",
                stable=True,
                description="Simple but inefficient for large datasets. Good for educational purposes.",
            ),
        ),
        AlgorithmInfo(
            "insertionsort",
            "InsertionSort",
            insertion_sort,
            True,
            True,
            Complexity(
                best="O(n)",
                average="O(n²)",
                worst="O(n²)",
                space="O(1)",
                stable=True,
                description="Efficient for small datasets and nearly sorted arrays.",
            ),
        ),
        AlgorithmInfo(
            "native",
            "Python Native Sort (Timsort)",
            native_sort,
            False,
            False,
            Complexity(
                best="O(n)",
                average="O(n log n)",
                worst="O(n log n)",
                space="O(n)",
                stable=True,
                description="Hybrid of merge sort and insertion sort. Highly optimized C implementation.",
            ),
        ),
    )
}

DEFAULT_ALGORITHM = "iterative"


def get_algorithm(algorithm_id: str) -> AlgorithmInfo:
    """Look up an algorithm by id (case-insensitive)."""
    key = algorithm_id.strip().lower() if isinstance(algorithm_id, str) else None
    if key not in ALGORITHMS:
        raise UnsupportedAlgorithm(algorithm_id, ALGORITHMS.keys())
    return ALGORITHMS[key]


def sort(a: Sequence, algorithm_id: str = DEFAULT_ALGORITHM) -> List:
    """Return a sorted copy of `a` using the algorithm registered as `algorithm_id`."""
    return get_algorithm(algorithm_id).run(a)


def complexity_table() -> Dict[str, Dict[str, Any]]:
    return {
        info.id: {"name": info.name, "inPlace": info.in_place, **info.complexity.as_dict()}
        for info in ALGORITHMS.values()
    }
