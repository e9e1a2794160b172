"""
Error taxonomy shared by the boundary layers (API, CLI, experiment runner).

The sorting core itself never raises these for a valid numeric sequence;
they are produced while validating caller input before the core is invoked.
"""

from __future__ import annotations

from typing import Iterable, Tuple

__all__ = ["SortCompareError", "InvalidInput", "UnsupportedAlgorithm"]


class SortCompareError(Exception):
    """Base class for all errors raised by sortcompare."""


class InvalidInput(SortCompareError, ValueError):
    """Input is not a list of finite numbers (or is empty after filtering)."""


class UnsupportedAlgorithm(SortCompareError, ValueError):
    """Algorithm identifier is not one of the registered ids."""

    def __init__(self, algorithm_id: object, supported: Iterable[str] = ()) -> None:
        self.algorithm_id = algorithm_id
        self.supported: Tuple[str, ...] = tuple(supported)
        msg = f"Unsupported algorithm: {algorithm_id!r}"
        if self.supported:
            msg += f". Supported algorithms: {', '.join(self.supported)}"
        super().__init__(msg)
