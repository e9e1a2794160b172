"""
QuickSort family: Lomuto and 3-way partitioning, four drivers.

All drivers sort **in place** and return the same list object they were
given, so `quick_sort_iterative(a) is a`. `quick_sort(a, variant)` is the
copy-returning wrapper: it never mutates `a`.

Variants:
    recursive  -- Lomuto partition, pivot = last element, recursion on both sides
    iterative  -- same partition, explicit stack of (low, high) ranges
    optimized  -- recursive with a uniformly random pivot swapped into `high`
    3way       -- Dutch National Flag partition around seq[low]; the band of
                  pivot-equal values is final and never revisited

Complexity: O(n log n) expected, O(n^2) worst case (sorted/reversed input for
the deterministic pivot). 3way is O(n) when there are O(1) distinct values.
"""

from __future__ import annotations

import random
import sys
import threading
from collections import Counter
from contextlib import contextmanager
from typing import Iterator, List, MutableSequence, Optional, Tuple

from sortcompare.errors import UnsupportedAlgorithm

__all__ = [
    "VARIANTS",
    "partition",
    "partition_randomized",
    "partition_3way",
    "quick_sort_recursive",
    "quick_sort_iterative",
    "quick_sort_optimized",
    "quick_sort_3way",
    "quick_sort",
]

VARIANTS = ("recursive", "iterative", "optimized", "3way")

# Frames kept free above the worst-case partition depth.
_RECURSION_MARGIN = 200

# The recursion limit is interpreter-wide. Concurrent sorts register the depth
# they need; the limit only grows while any of them is active and goes back
# to the value seen on first entry once the last one leaves.
_limit_lock = threading.Lock()
_active_needs: Counter = Counter()
_base_limit = 0


@contextmanager
def _recursion_headroom(depth: int) -> Iterator[None]:
    """Allow at least `depth` nested calls while the block runs."""
    global _base_limit
    needed = depth + _RECURSION_MARGIN
    with _limit_lock:
        if not _active_needs:
            _base_limit = sys.getrecursionlimit()
        _active_needs[needed] += 1
        if needed > sys.getrecursionlimit():
            sys.setrecursionlimit(needed)
    try:
        yield
    finally:
        with _limit_lock:
            _active_needs[needed] -= 1
            if not _active_needs[needed]:
                del _active_needs[needed]
            if not _active_needs:
                sys.setrecursionlimit(_base_limit)


# ------------------------- partition schemes ------------------------- #

def partition(seq: MutableSequence, low: int, high: int) -> int:
    """
    Lomuto partition of seq[low..high] around the pivot seq[high].

    Returns the pivot's final index p. Afterwards seq[low..p-1] < pivot and
    seq[p+1..high] >= pivot.
    """
    pivot = seq[high]
    i = low - 1
    for j in range(low, high):
        if seq[j] < pivot:
            i += 1
            seq[i], seq[j] = seq[j], seq[i]
    seq[i + 1], seq[high] = seq[high], seq[i + 1]
    return i + 1


def partition_randomized(
    seq: MutableSequence, low: int, high: int, rng: Optional[random.Random] = None
) -> int:
    """Swap a uniformly random index of [low, high] into `high`, then Lomuto."""
    r = (rng or random).randint(low, high)
    seq[r], seq[high] = seq[high], seq[r]
    return partition(seq, low, high)


def partition_3way(seq: MutableSequence, low: int, high: int) -> Tuple[int, int]:
    """
    Dutch National Flag partition of seq[low..high] around pivot seq[low].

    Returns (lt, gt) such that:
        seq[low..lt-1]  < pivot
        seq[lt..gt]    == pivot
        seq[gt+1..high] > pivot
    """
    pivot = seq[low]
    lt = low
    i = low + 1
    gt = high
    while i <= gt:
        if seq[i] < pivot:
            seq[lt], seq[i] = seq[i], seq[lt]
            lt += 1
            i += 1
        elif seq[i] > pivot:
            seq[i], seq[gt] = seq[gt], seq[i]
            gt -= 1
        else:
            i += 1
    return lt, gt


# ------------------------- drivers (in place) ------------------------- #

def _recursive(seq: MutableSequence, low: int, high: int) -> None:
    if low < high:
        p = partition(seq, low, high)
        _recursive(seq, low, p - 1)
        _recursive(seq, p + 1, high)


def quick_sort_recursive(
    seq: MutableSequence, low: int = 0, high: Optional[int] = None
) -> MutableSequence:
    """Sort seq[low..high] in place with recursive Lomuto QuickSort."""
    if high is None:
        high = len(seq) - 1
    with _recursion_headroom(high - low + 1):
        _recursive(seq, low, high)
    return seq


def quick_sort_iterative(seq: MutableSequence) -> MutableSequence:
    """
    Sort `seq` in place using an explicit stack of (low, high) ranges.

    Uses the same partition as the recursive variant, so the output (and the
    sequence of swaps) is identical; only the call stack stays flat.
    """
    n = len(seq)
    if n < 2:
        return seq
    stack: List[Tuple[int, int]] = [(0, n - 1)]
    while stack:
        low, high = stack.pop()
        p = partition(seq, low, high)
        # Push only sub-ranges holding at least two elements
        if p - 1 > low:
            stack.append((low, p - 1))
        if p + 1 < high:
            stack.append((p + 1, high))
    return seq


def _optimized(seq: MutableSequence, low: int, high: int, rng: Optional[random.Random]) -> None:
    if low < high:
        p = partition_randomized(seq, low, high, rng)
        _optimized(seq, low, p - 1, rng)
        _optimized(seq, p + 1, high, rng)


def quick_sort_optimized(
    seq: MutableSequence, rng: Optional[random.Random] = None
) -> MutableSequence:
    """
    Sort `seq` in place with a randomized pivot.

    Pass a seeded `random.Random` for a reproducible sequence of pivots;
    by default the module-level generator is used.
    """
    n = len(seq)
    # Expected depth is O(log n); the headroom only matters for all-equal input.
    with _recursion_headroom(n):
        _optimized(seq, 0, n - 1, rng)
    return seq


def _three_way(seq: MutableSequence, low: int, high: int) -> None:
    if low < high:
        lt, gt = partition_3way(seq, low, high)
        _three_way(seq, low, lt - 1)
        _three_way(seq, gt + 1, high)


def quick_sort_3way(seq: MutableSequence) -> MutableSequence:
    """Sort `seq` in place with 3-way (Dutch National Flag) QuickSort."""
    n = len(seq)
    with _recursion_headroom(n):
        _three_way(seq, 0, n - 1)
    return seq


# ------------------------- copy-returning wrapper ------------------------- #

def quick_sort(a: List, variant: str = "recursive") -> List:
    """
    Return a new sorted list using the requested QuickSort variant.

    Raises
    ------
    UnsupportedAlgorithm
        If `variant` is not one of VARIANTS.
    """
    key = variant.lower() if isinstance(variant, str) else variant
    if key not in VARIANTS:
        raise UnsupportedAlgorithm(variant, VARIANTS)

    out = list(a)
    if len(out) <= 1:
        return out
    if key == "iterative":
        return quick_sort_iterative(out)
    if key == "optimized":
        return quick_sort_optimized(out)
    if key == "3way":
        return quick_sort_3way(out)
    return quick_sort_recursive(out)
