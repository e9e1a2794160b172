"""
Oracle for sorting correctness.

Python's built-in `sorted()` is the ground truth: correct total order on
finite ints and floats, deterministic, never mutates its input.

Public API (stable):
    oracle_sort(a) -> list
    equals_oracle(a, out) -> bool
    disagreements(a) -> dict[str, list]
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from sortcompare.algorithms import ALGORITHMS

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle", "disagreements"]


def oracle_sort(a: Sequence) -> List:
    """Return a new list with the elements of `a` in nondecreasing order."""
    return sorted(a)


def equals_oracle(a: Sequence, out: Sequence) -> bool:
    """True iff `out` is exactly `oracle_sort(a)` (value order)."""
    return list(out) == oracle_sort(a)


def disagreements(a: Sequence) -> Dict[str, List]:
    """
    Run every registered algorithm on `a` and return those whose output
    differs from the oracle, keyed by algorithm id.

    An empty dict means all algorithms agree.
    """
    expected = oracle_sort(a)
    bad: Dict[str, List] = {}
    for algo_id, info in ALGORITHMS.items():
        out = info.run(a)
        if out != expected:
            bad[algo_id] = out
    return bad
