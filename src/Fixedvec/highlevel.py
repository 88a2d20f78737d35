"""
Functions combining and building vectors.
"""

from __future__ import annotations

import logging

import numpy as np

from . import promotion
from ._typing import DTypeLike, Scalar
from .errors import DimensionMismatchError
from .vector import FixedVector, vector_type

logger = logging.getLogger(__name__)


def weighted_sum(
    v1: FixedVector, alpha: Scalar, v2: FixedVector, beta: Scalar
) -> FixedVector:
    """Calculate ``alpha * v1 + beta * v2`` elementwise.

    The computation happens in the common type of all four operands,
    folded as ``promote(promote(T1, U1), promote(T2, U2))``.

    Parameters
    ----------
    v1, v2: FixedVector
        Vectors of equal dimension, element types may differ.
    alpha, beta: scalar
        Weights of `v1` and `v2`.

    Returns
    -------
    FixedVector
        A vector with the dimension of the inputs.

    Raises
    ------
    DimensionMismatchError
        If the vectors have different dimensions.
    TypeError
        If a weight is not a single number.
    """
    if v1.dimension != v2.dimension:
        raise DimensionMismatchError(v1.dimension, v2.dimension, "weighted_sum")

    a = promotion.scalar_array(alpha)
    b = promotion.scalar_array(beta)
    dtype = promotion.promote(
        promotion.promote(v1.dtype, a.dtype),
        promotion.promote(v2.dtype, b.dtype),
    )
    a = a.astype(dtype)
    b = b.astype(dtype)
    data = a * v1.to_numpy().astype(dtype) + b * v2.to_numpy().astype(dtype)

    logger.debug("weighted_sum of dimension %d in %s", v1.dimension, dtype)
    return vector_type(dtype, v1.dimension)(data)


def concat(
    v1: FixedVector, v2: FixedVector, *rest: FixedVector
) -> FixedVector:
    """Join two or more vectors end to end.

    The dimension of the result is the sum of all dimensions and its
    element type is the promotion of all element types, folded left to right.
    """
    vectors = (v1, v2) + rest
    for v in vectors:
        if not isinstance(v, FixedVector):
            raise TypeError(f"concat() expects vectors, got {type(v)}")

    dtype = promotion.promote_all(*(v.dtype for v in vectors))
    data = np.concatenate([v.to_numpy().astype(dtype) for v in vectors])

    logger.debug(
        "concat of %d vectors into %s of dimension %d", len(vectors), dtype, len(data)
    )
    return vector_type(dtype, len(data))(data)


def make_vector(dtype: DTypeLike, *args: Scalar) -> FixedVector:
    """Build a vector from `args`, each converted to `dtype`."""
    return vector_type(dtype, len(args))(args)


def build_vector(*args: Scalar) -> FixedVector:
    """Build a vector from `args`, with the common type of all of them."""
    if not args:
        raise TypeError("build_vector() requires at least one value")
    dtype = promotion.promote_all(*(promotion.scalar_dtype(a) for a in args))
    return make_vector(dtype, *args)
