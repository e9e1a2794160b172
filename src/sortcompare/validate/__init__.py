"""
Validation utilities public API.

Re-exports:
    - Oracle:
        ORACLE_NAME
        oracle_sort
        equals_oracle
        disagreements

    - Property checks:
        is_sorted
        first_inversion_index
        is_permutation
        permutation_counter_diff
        assert_no_mutation

    - Boundary input checks:
        validate_sequence
        parse_number_list
"""

from .inputs import parse_number_list, validate_sequence
from .oracle import ORACLE_NAME, disagreements, equals_oracle, oracle_sort
from .properties import (
    assert_no_mutation,
    first_inversion_index,
    is_permutation,
    is_sorted,
    permutation_counter_diff,
)

__all__ = [
    "ORACLE_NAME",
    "oracle_sort",
    "equals_oracle",
    "disagreements",
    "is_sorted",
    "first_inversion_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_no_mutation",
    "validate_sequence",
    "parse_number_list",
]
