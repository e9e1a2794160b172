"""
Property helpers for validating sorting results.

Used by the benchmark wrapper (sortedness flag on every result), the
experiment runner and the test suite.

Public API (stable):
    is_sorted(xs: Sequence[Number]) -> bool
    first_inversion_index(xs: Sequence[Number]) -> int | None
    is_permutation(a: Sequence[Number], b: Sequence[Number]) -> bool
    permutation_counter_diff(a, b) -> dict[Number, int]
    assert_no_mutation(before, after) -> None

Notes
-----
- Stability is *not* checked here: equal numbers are indistinguishable by
  value. Stability tests tag items with tie-breaker ids instead.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Sequence, Union

Number = Union[int, float]

__all__ = [
    "is_sorted",
    "first_inversion_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_no_mutation",
]


def is_sorted(xs: Sequence[Number]) -> bool:
    """Return True iff xs[i] <= xs[i+1] for all i (vacuously True for len <= 1)."""
    return first_inversion_index(xs) is None


def first_inversion_index(xs: Sequence[Number]) -> int | None:
    """
    Return the first index i where xs[i] > xs[i+1], or None if sorted.

    Useful for precise error messages:
        i = first_inversion_index(out)
        assert i is None, f"inversion at i={i}: {out[i]} > {out[i+1]}"
    """
    for i in range(len(xs) - 1):
        if xs[i] > xs[i + 1]:
            return i
    return None


def is_permutation(a: Sequence[Number], b: Sequence[Number]) -> bool:
    """Return True iff `a` and `b` hold exactly the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Number], b: Sequence[Number]) -> Dict[Number, int]:
    """
    Return value -> (count in a - count in b), omitting zero differences.

    Empty dict means identical multiplicities.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}


def assert_no_mutation(before: Sequence[Number], after: Sequence[Number]) -> None:
    """
    Assert that `after` is element-wise equal to `before`.

    Raises AssertionError naming the first differing index.
    """
    if len(before) != len(after):
        raise AssertionError(
            f"Input mutated: length changed from {len(before)} to {len(after)}"
        )
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(f"Input mutated at index {i}: before={x}, after={y}")
