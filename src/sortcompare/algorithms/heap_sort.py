"""
HeapSort over a binary max-heap.

Copy-returning: works on an internal copy, the caller's list is untouched.
O(n log n) time, O(1) auxiliary space beyond the copy, not stable.
"""

from __future__ import annotations

from typing import List, MutableSequence, Sequence

__all__ = ["heapify", "heap_sort"]


def heapify(arr: MutableSequence, heap_size: int, root: int) -> None:
    """Sift arr[root] down until the subtree rooted there is a max-heap."""
    largest = root
    left = 2 * root + 1
    right = 2 * root + 2

    if left < heap_size and arr[left] > arr[largest]:
        largest = left
    if right < heap_size and arr[right] > arr[largest]:
        largest = right

    if largest != root:
        arr[root], arr[largest] = arr[largest], arr[root]
        heapify(arr, heap_size, largest)


def heap_sort(a: Sequence) -> List:
    """Return a new list with the elements of `a` in nondecreasing order."""
    arr = list(a)
    n = len(arr)

    # Build max-heap
    for i in range(n // 2 - 1, -1, -1):
        heapify(arr, n, i)

    # Move the current maximum behind the shrinking heap
    for i in range(n - 1, 0, -1):
        arr[0], arr[i] = arr[i], arr[0]
        heapify(arr, i, 0)

    return arr
