"""
Element types and the promotion rule.

An element type is a numpy numeric dtype. When two element types meet in an
arithmetic operation, the result uses their common arithmetic type as given
by numpy's promotion table. The rule only looks at types, never at values.
"""

from __future__ import annotations

import functools
from typing import Any

import numpy as np

from ._typing import DTypeLike

_PYTHON_SCALARS: dict[type, np.dtype] = {
    int: np.dtype(np.int64),
    float: np.dtype(np.float64),
    complex: np.dtype(np.complex128),
}


def as_dtype(t: DTypeLike) -> np.dtype:
    """Resolve an element type designator to a numeric numpy dtype.

    Parameters
    ----------
    t: numpy dtype, type or str
        Anything accepted by ``np.dtype``, e.g. ``np.int32``, ``float`` or
        ``"complex128"``.

    Returns
    -------
    numpy dtype

    Raises
    ------
    TypeError
        If the designator does not resolve to a numeric dtype
        (bool, str, object and datetime dtypes are rejected).
    """
    dt = np.dtype(t)
    if not np.issubdtype(dt, np.number):
        raise TypeError(f"{dt} is not a numeric element type")
    return dt


def scalar_dtype(value: Any) -> np.dtype:
    """Element type of a single number.

    numpy scalars report their dtype. Python ``int`` (and therefore
    ``bool``) maps to int64, ``float`` to float64 and ``complex`` to
    complex128. Vectors, arrays, strings and anything else raise
    `TypeError`.
    """
    if isinstance(value, np.generic):
        return as_dtype(value.dtype)

    for py_type, dt in _PYTHON_SCALARS.items():
        if isinstance(value, py_type):
            return dt

    raise TypeError(f"Cannot interpret value of type {type(value)} as a number")


def scalar_array(value: Any) -> np.ndarray:
    """Zero-dimensional array holding `value` in its `scalar_dtype`.

    Raises
    ------
    OverflowError
        If a Python int does not fit in int64.
    """
    return np.array(value, dtype=scalar_dtype(value))


def dtype_of(value: Any) -> np.dtype:
    """Element type of an operand: a vector or a single number."""
    if isinstance(value, np.generic) or isinstance(value, np.ndarray):
        return scalar_dtype(value)
    dtype = getattr(value, "dtype", None)
    if isinstance(dtype, np.dtype):
        return as_dtype(dtype)
    return scalar_dtype(value)


@functools.cache
def _promote(a: np.dtype, b: np.dtype) -> np.dtype:
    return np.promote_types(a, b)


def promote(a: DTypeLike, b: DTypeLike) -> np.dtype:
    """Common arithmetic type of two element types.

    The result can represent both operands without loss of range for
    ordinary arithmetic, e.g. ``promote(np.int32, np.float32)`` is float64
    and ``promote(np.int64, np.uint64)`` is float64.
    """
    return _promote(as_dtype(a), as_dtype(b))


def promote_all(*types: DTypeLike) -> np.dtype:
    """Left fold of `promote` over one or more element types."""
    if not types:
        raise TypeError("promote_all() requires at least one type")
    return functools.reduce(promote, types[1:], as_dtype(types[0]))


def is_integer(dtype: DTypeLike) -> bool:
    """Whether arithmetic in `dtype` follows the integer division policy."""
    return np.issubdtype(as_dtype(dtype), np.integer)
