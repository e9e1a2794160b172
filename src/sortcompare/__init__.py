"""sortcompare: textbook comparison sorts with timing, verification and ranking."""

from sortcompare.algorithms import ALGORITHMS, DEFAULT_ALGORITHM, sort
from sortcompare.errors import InvalidInput, SortCompareError, UnsupportedAlgorithm

__version__ = "1.0.0"

__all__ = [
    "ALGORITHMS",
    "DEFAULT_ALGORITHM",
    "sort",
    "SortCompareError",
    "InvalidInput",
    "UnsupportedAlgorithm",
    "__version__",
]
