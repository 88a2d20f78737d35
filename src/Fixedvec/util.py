"""
Useful general functions.
"""

from __future__ import annotations

import logging
import operator

import numpy as np

from ._typing import Array, Scalar
from .errors import DivideByZeroError, VectorIndexError

logger = logging.getLogger(__name__)


def normalize_index(index: int, dimension: int) -> int:
    """Map a possibly negative index to a position in ``[0, dimension)``.

    Raises
    ------
    VectorIndexError
        If the normalized index is out of range.
    """
    index = operator.index(index)
    idx = dimension + index if index < 0 else index
    if idx < 0 or idx >= dimension:
        raise VectorIndexError(index, dimension)
    return idx


def truncating_divide(a: Array, b: Array) -> Array:
    """Integer division rounding toward zero.

    Both arrays must share an integer dtype, which is kept in the result.

    Raises
    ------
    DivideByZeroError
        If any element of `b` is zero.
    """
    if np.any(b == 0):
        logger.debug("Rejecting integer division of %s by %s", a, b)
        raise DivideByZeroError("integer division by zero")

    # the minimum divided by -1 wraps like any other integer overflow
    with np.errstate(over="ignore"):
        q = np.floor_divide(a, b)
        # floor and truncation differ on inexact quotients of opposite sign
        adjust = (np.remainder(a, b) != 0) & ((a < 0) != (b < 0))
        q[adjust] += 1
    return q


def parse_number(value: str) -> Scalar:
    value = value.strip()
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return complex(value)
