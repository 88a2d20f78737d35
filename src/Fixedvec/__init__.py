"""
Fixedvec
~~~~~~~~

Fixed-size numeric vectors with elementwise arithmetic and
type promotion across mixed numeric types.


"""

from . import promotion
from .errors import DimensionMismatchError, DivideByZeroError, VectorIndexError
from .highlevel import build_vector, concat, make_vector, weighted_sum
from .vector import FixedVector, vector_type

__all__ = [
    "promotion",
    "FixedVector",
    "vector_type",
    "weighted_sum",
    "concat",
    "make_vector",
    "build_vector",
    "VectorIndexError",
    "DivideByZeroError",
    "DimensionMismatchError",
]
