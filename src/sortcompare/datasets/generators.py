"""
Dataset generators for sorting comparisons and benchmarks.

Currently implemented:
- dist == "random":
    Integers drawn uniformly from an inclusive range (default [0, 10000]).

- dist == "sorted":
    Deterministic ascending order [1, 2, ..., n].

- dist == "reversed":
    Deterministic descending order [n, n-1, ..., 1]. Adversarial for
    last-element-pivot QuickSort.

- dist == "duplicates":
    Integers drawn uniformly from [0, unique_values), default 10 distinct
    values. Favours 3-way QuickSort.

- dist == "nearly_sorted":
    Start from [1..n] then perform ceil(swap_frac * n) random index swaps
    (default swap_frac 0.1).

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]
    generate(kind: str, n: int, seed: int | None = None) -> list[int]

Conventions:
- Returns a Python `list[int]`; algorithms stay NumPy-agnostic.
- The caller supplies the RNG; deterministic kinds ignore it.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import numpy as np

SUPPORTED_DISTS = (
    "random",
    "sorted",
    "reversed",
    "duplicates",
    "nearly_sorted",
)
__all__ = ["SUPPORTED_DISTS", "make_dataset", "generate"]

DEFAULT_RANGE: Tuple[int, int] = (0, 10_000)
DEFAULT_UNIQUE_VALUES = 10
DEFAULT_SWAP_FRAC = 0.1


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate an integer dataset according to `spec`, using the provided RNG.

    Parameters
    ----------
    n : int
        Number of elements to generate. Must be >= 0.
    spec : dict
        Distribution specification, e.g.

            {"dist": "random", "params": {"range": [0, 10000]}}
            {"dist": "duplicates", "params": {"unique_values": 10}}
            {"dist": "nearly_sorted", "params": {"swap_frac": 0.1}}
            {"dist": "sorted"}
            {"dist": "reversed"}

    rng : numpy.random.Generator
        Random number generator owned by the caller (seeded upstream).

    Returns
    -------
    list[int]

    Raises
    ------
    ValueError
        If inputs are invalid or the distribution is unsupported.
    """
    _validate_n(n)

    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {list(SUPPORTED_DISTS)}"
        )
    params = spec.get("params") or {}

    if dist == "sorted":
        return list(range(1, n + 1))

    if dist == "reversed":
        return list(range(n, 0, -1))

    if dist == "random":
        lo, hi = _parse_range(params)
        # Generator.integers is half-open; +1 makes `hi` inclusive
        return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()

    if dist == "duplicates":
        k = _parse_unique_values(params)
        return rng.integers(0, k, size=n, dtype=np.int64).tolist()

    # nearly_sorted
    swap_frac = _parse_swap_frac(params)
    arr = list(range(1, n + 1))
    num_swaps = int(np.ceil(swap_frac * n))
    if n == 0 or num_swaps == 0:
        return arr
    idxs = rng.integers(0, n, size=2 * num_swaps)
    for k in range(num_swaps):
        i = int(idxs[2 * k])
        j = int(idxs[2 * k + 1])
        arr[i], arr[j] = arr[j], arr[i]
    return arr


def generate(kind: str, n: int, seed: Optional[int] = None) -> List[int]:
    """Shorthand for `make_dataset(n, {"dist": kind}, default_rng(seed))`."""
    return make_dataset(n, {"dist": kind}, np.random.default_rng(seed))


# ------------------------- helpers ------------------------- #


def _validate_n(n: int) -> None:
    if not isinstance(n, (int, np.integer)) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _parse_range(params: Dict[str, Any]) -> Tuple[int, int]:
    """Parse optional inclusive params["range"] == [min_int, max_int]."""
    if "range" not in params:
        return DEFAULT_RANGE
    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError("params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError("params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_unique_values(params: Dict[str, Any]) -> int:
    k = params.get("unique_values", DEFAULT_UNIQUE_VALUES)
    if not _is_int_like(k) or k < 1:
        raise ValueError(f"duplicates.params.unique_values must be an integer >= 1; got {k!r}")
    return int(k)


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    val = params.get("swap_frac", DEFAULT_SWAP_FRAC)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}"
        ) from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}")
    return x


def _is_int_like(x: Any) -> bool:
    # Accept Python ints and NumPy integer types, but not bools
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
