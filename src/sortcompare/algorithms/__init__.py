"""
Sorting algorithms public API.

Re-exports:
    - Registry:
        ALGORITHMS, DEFAULT_ALGORITHM, AlgorithmInfo, get_algorithm, sort,
        complexity_table

    - In-place (return the list they were given):
        quick_sort_recursive, quick_sort_iterative, quick_sort_optimized,
        quick_sort_3way, bubble_sort, insertion_sort

    - Copy-returning (never mutate their argument):
        quick_sort, merge_sort, heap_sort, native_sort

    - Helpers:
        partition, partition_randomized, partition_3way, merge, heapify
"""

from .baseline import bubble_sort, insertion_sort, native_sort
from .heap_sort import heap_sort, heapify
from .merge_sort import merge, merge_sort
from .quicksort import (
    partition,
    partition_3way,
    partition_randomized,
    quick_sort,
    quick_sort_3way,
    quick_sort_iterative,
    quick_sort_optimized,
    quick_sort_recursive,
)
from .registry import (
    ALGORITHMS,
    DEFAULT_ALGORITHM,
    AlgorithmInfo,
    complexity_table,
    get_algorithm,
    sort,
)

__all__ = [
    "ALGORITHMS",
    "DEFAULT_ALGORITHM",
    "AlgorithmInfo",
    "get_algorithm",
    "sort",
    "complexity_table",
    "quick_sort",
    "quick_sort_recursive",
    "quick_sort_iterative",
    "quick_sort_optimized",
    "quick_sort_3way",
    "partition",
    "partition_randomized",
    "partition_3way",
    "merge",
    "merge_sort",
    "heapify",
    "heap_sort",
    "bubble_sort",
    "insertion_sort",
    "native_sort",
]
