"""
Top-down MergeSort.

Copy-returning: `merge_sort(a)` never mutates `a` and always returns a new
list. Stable, O(n log n) time, O(n) auxiliary space.
"""

from __future__ import annotations

from typing import List, Sequence

__all__ = ["merge", "merge_sort"]


def merge(left: Sequence, right: Sequence) -> List:
    """
    Merge two sorted sequences into a new sorted list.

    On ties the head of `left` is taken first, which keeps the merge stable.
    """
    out: List = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            out.append(left[i])
            i += 1
        else:
            out.append(right[j])
            j += 1
    out.extend(left[i:])
    out.extend(right[j:])
    return out


def merge_sort(a: Sequence) -> List:
    """Return a new list with the elements of `a` in nondecreasing order."""
    if len(a) <= 1:
        return list(a)
    mid = len(a) // 2
    return merge(merge_sort(a[:mid]), merge_sort(a[mid:]))
