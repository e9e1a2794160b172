"""
Reference baselines: BubbleSort, InsertionSort and the interpreter's own sort.

`bubble_sort` and `insertion_sort` sort **in place** and return the list they
were given. `native_sort` returns a new list (built-in `sorted`, Timsort).
"""

from __future__ import annotations

from typing import List, MutableSequence, Sequence

__all__ = ["bubble_sort", "insertion_sort", "native_sort"]


def bubble_sort(arr: MutableSequence) -> MutableSequence:
    """In-place BubbleSort with early exit; O(n) on already-sorted input."""
    n = len(arr)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
        if not swapped:
            break
    return arr


def insertion_sort(arr: MutableSequence) -> MutableSequence:
    """In-place InsertionSort; O(n) on nearly-sorted input."""
    for i in range(1, len(arr)):
        key = arr[i]
        j = i - 1
        while j >= 0 and arr[j] > key:
            arr[j + 1] = arr[j]
            j -= 1
        arr[j + 1] = key
    return arr


def native_sort(a: Sequence) -> List:
    return sorted(a)
