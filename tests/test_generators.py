"""Dataset generators."""

from __future__ import annotations

from collections import Counter

import numpy as np
import pytest

from sortcompare.datasets import SUPPORTED_DISTS, generate, make_dataset


def _rng(seed: int = 0) -> np.random.Generator:
    return np.random.default_rng(seed)


@pytest.mark.parametrize("dist", SUPPORTED_DISTS)
def test_length_and_type(dist: str) -> None:
    out = make_dataset(100, {"dist": dist}, _rng())
    assert len(out) == 100
    assert all(type(x) is int for x in out)


@pytest.mark.parametrize("dist", SUPPORTED_DISTS)
def test_empty(dist: str) -> None:
    assert make_dataset(0, {"dist": dist}, _rng()) == []


def test_deterministic_kinds() -> None:
    assert make_dataset(5, {"dist": "sorted"}, _rng()) == [1, 2, 3, 4, 5]
    assert make_dataset(5, {"dist": "reversed"}, _rng()) == [5, 4, 3, 2, 1]


def test_random_respects_inclusive_range() -> None:
    out = make_dataset(2000, {"dist": "random", "params": {"range": [3, 5]}}, _rng())
    assert set(out) == {3, 4, 5}


def test_random_default_range() -> None:
    out = make_dataset(2000, {"dist": "random"}, _rng())
    assert 0 <= min(out) and max(out) <= 10_000


def test_duplicates_unique_values() -> None:
    out = make_dataset(1000, {"dist": "duplicates", "params": {"unique_values": 4}}, _rng())
    assert set(out) <= {0, 1, 2, 3}
    assert len(set(make_dataset(1000, {"dist": "duplicates"}, _rng()))) <= 10


def test_nearly_sorted_is_a_permutation_close_to_sorted() -> None:
    n = 1000
    out = make_dataset(n, {"dist": "nearly_sorted", "params": {"swap_frac": 0.01}}, _rng())
    assert Counter(out) == Counter(range(1, n + 1))
    displaced = sum(1 for i, x in enumerate(out) if x != i + 1)
    assert displaced <= 2 * 10


def test_nearly_sorted_zero_swaps_is_sorted() -> None:
    assert make_dataset(10, {"dist": "nearly_sorted", "params": {"swap_frac": 0.0}}, _rng()) == list(range(1, 11))


def test_same_seed_same_data() -> None:
    assert generate("random", 50, seed=9) == generate("random", 50, seed=9)


@pytest.mark.parametrize(
    "n, spec",
    [
        (-1, {"dist": "random"}),
        (10, {"dist": "zigzag"}),
        (10, "random"),
        (10, {"dist": "random", "params": {"range": [5, 1]}}),
        (10, {"dist": "random", "params": {"range": [0]}}),
        (10, {"dist": "duplicates", "params": {"unique_values": 0}}),
        (10, {"dist": "nearly_sorted", "params": {"swap_frac": 2}}),
        (10, {"dist": "nearly_sorted", "params": {"swap_frac": "lots"}}),
    ],
)
def test_invalid_specs(n, spec) -> None:
    with pytest.raises(ValueError):
        make_dataset(n, spec, _rng())
