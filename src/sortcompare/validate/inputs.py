"""
Boundary-layer input validation.

Everything here runs *before* the sorting core is invoked; the core assumes
a list of finite ints/floats and never re-checks.

Public API (stable):
    validate_sequence(value, *, max_size=None) -> list[int | float]
    parse_number_list(text) -> list[int | float]
"""

from __future__ import annotations

import math
from typing import Any, List, Optional, Union

from sortcompare.errors import InvalidInput

Number = Union[int, float]

__all__ = ["validate_sequence", "parse_number_list"]


def _is_number(x: Any) -> bool:
    # bool is an int subclass but never a valid element
    if isinstance(x, bool):
        return False
    if isinstance(x, int):
        return True
    return isinstance(x, float) and math.isfinite(x)


def validate_sequence(value: Any, *, max_size: Optional[int] = None) -> List[Number]:
    """
    Check that `value` is a list/tuple of finite numbers and return it as a new list.

    Raises
    ------
    InvalidInput
        If `value` is not a list/tuple, holds a non-numeric or non-finite
        element, or exceeds `max_size`.
    """
    if not isinstance(value, (list, tuple)):
        raise InvalidInput("Array must be provided and must be an array")
    if max_size is not None and len(value) > max_size:
        raise InvalidInput(f"Array too large: {len(value)} elements (limit {max_size})")
    for i, x in enumerate(value):
        if not _is_number(x):
            raise InvalidInput(
                f"All array elements must be finite numbers (index {i}: {x!r})"
            )
    return list(value)


def _parse_token(token: str) -> Optional[Number]:
    try:
        return int(token)
    except ValueError:
        pass
    try:
        x = float(token)
    except ValueError:
        return None
    return x if math.isfinite(x) else None


def parse_number_list(text: Any) -> List[Number]:
    """
    Parse comma-separated text such as "3, 6, 8.5, x, 1" into numbers.

    Tokens that do not parse as a finite number are dropped. Integer-looking
    tokens stay ints.

    Raises
    ------
    InvalidInput
        If `text` is not a string, is blank, or contains no valid number.
    """
    if not isinstance(text, str) or not text.strip():
        raise InvalidInput("Please enter some numbers")
    out = []
    for token in text.split(","):
        x = _parse_token(token.strip())
        if x is not None:
            out.append(x)
    if not out:
        raise InvalidInput("No valid numbers found")
    return out
