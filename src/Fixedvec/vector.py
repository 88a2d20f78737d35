"""
The fixed-size numeric vector.

``FixedVector`` is generic over an element type and a dimension. Subscripting
it returns a specialized class, cached so that equal parameters always give
the same class:

    >>> V3 = FixedVector[np.int64, 3]
    >>> V3 is FixedVector["int64", 3]
    True
    >>> V3([1, 2, 3]) + V3([4, 5, 6])
    FixedVector[int64, 3]([5, 7, 9])
"""

from __future__ import annotations

import functools
import logging
from collections import abc
from typing import Any, Callable, ClassVar, Iterator, Self

import numpy as np

from . import promotion
from ._typing import Array, DTypeLike, Scalar
from .errors import DimensionMismatchError
from .util import normalize_index, truncating_divide

logger = logging.getLogger(__name__)


@functools.cache
def _specialize(dtype: np.dtype, dimension: int) -> type[FixedVector]:
    name = f"FixedVector[{dtype.name}, {dimension}]"
    logger.debug("Specializing %s", name)
    return type(
        name,
        (FixedVector,),
        dict(
            __slots__=(),
            __module__=__name__,
            __qualname__=name,
            dtype=dtype,
            dimension=dimension,
        ),
    )


def vector_type(dtype: DTypeLike, dimension: int) -> type[FixedVector]:
    """The specialized vector class for an element type and a dimension."""
    if isinstance(dimension, bool) or not isinstance(dimension, (int, np.integer)):
        raise TypeError(f"Dimension must be an integer, not {type(dimension)}")
    if dimension < 0:
        raise ValueError(f"Dimension must be non-negative, got {dimension}")
    return _specialize(promotion.as_dtype(dtype), int(dimension))


def _divide(a: Array, b: Array) -> Array:
    if promotion.is_integer(a.dtype):
        return truncating_divide(a, b)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.true_divide(a, b)


class FixedVector:
    """Ordered sequence of a fixed number of values of a single numeric type.

    Parameters
    ----------
    values: scalar, FixedVector or iterable of scalars, optional
        - not given: every element is zero.
        - scalar: every element is set to this value.
        - FixedVector: elements are converted to this element type.
          Its dimension must match.
        - iterable: the elements, its length must match.

    Attributes
    ----------
    dtype: numpy dtype
        Element type, fixed by the specialization.
    dimension: int
        Number of elements, fixed by the specialization.
    """

    __slots__ = ("_data",)

    dtype: ClassVar[np.dtype | None] = None
    dimension: ClassVar[int | None] = None

    # numpy scalars on the left must defer to the reflected operators.
    __array_ufunc__ = None

    def __class_getitem__(cls, params: tuple[DTypeLike, int]) -> type[FixedVector]:
        if cls.dimension is not None:
            raise TypeError(f"{cls.__name__} is already specialized")
        if not isinstance(params, tuple) or len(params) != 2:
            raise TypeError("FixedVector takes two parameters: FixedVector[dtype, dimension]")
        return vector_type(*params)

    def __init__(self, values: Scalar | FixedVector | abc.Iterable[Scalar] | None = None):
        cls = self.__class__
        if cls.dimension is None:
            raise TypeError(
                "FixedVector must be specialized before use, e.g. FixedVector[np.float64, 3]"
            )

        if values is None:
            data = np.zeros(cls.dimension, dtype=cls.dtype)
        elif isinstance(values, FixedVector):
            if values.dimension != cls.dimension:
                raise DimensionMismatchError(cls.dimension, values.dimension, "conversion")
            data = values._data.astype(cls.dtype)
        elif isinstance(values, abc.Iterable) and not isinstance(values, str):
            if isinstance(values, np.ndarray):
                promotion.as_dtype(values.dtype)
            else:
                values = list(values)
                for x in values:
                    promotion.scalar_dtype(x)
            data = np.asarray(values)
            if data.ndim != 1 or len(data) != cls.dimension:
                raise DimensionMismatchError(cls.dimension, len(data), "construction")
            data = data.astype(cls.dtype)
        else:
            promotion.scalar_dtype(values)
            data = np.full(cls.dimension, values, dtype=cls.dtype)

        self._data = data

    @classmethod
    def _wrap(cls, data: Array) -> FixedVector:
        """Vector owning `data`, specialized after its dtype and length."""
        obj = object.__new__(_specialize(data.dtype, len(data)))
        obj._data = data
        return obj

    @classmethod
    def zeros(cls) -> Self:
        return cls()

    @classmethod
    def full(cls, value: Scalar) -> Self:
        return cls(value)

    def copy(self) -> Self:
        """An independent copy of this vector."""
        return self._wrap(self._data.copy())

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self.copy()

    # Indexing

    def get(self, index: int) -> np.number:
        """Element at `index`, negative values count from the end."""
        return self._data[normalize_index(index, len(self._data))]

    def set(self, index: int, value: Scalar) -> None:
        """Assign `value`, converted to the element type, at `index`."""
        promotion.scalar_dtype(value)
        self._data[normalize_index(index, len(self._data))] = value

    def __getitem__(self, key: int | slice) -> Any:
        if isinstance(key, slice):
            return self._wrap(self._data[key].copy())
        return self.get(key)

    def __setitem__(self, index: int, value: Scalar) -> None:
        self.set(index, value)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[np.number]:
        return iter(self._data.copy())

    # Arithmetic

    def _apply(self, other: Any, op: Callable[[Array, Array], Array], reflected: bool = False):
        if isinstance(other, FixedVector):
            if other.dimension != self.dimension:
                raise DimensionMismatchError(
                    self.dimension, other.dimension, op.__name__.lstrip("_")
                )
            rhs_dtype = other.dtype
            rhs = other._data
        else:
            try:
                rhs = promotion.scalar_array(other)
            except TypeError:
                return NotImplemented
            rhs_dtype = rhs.dtype

        dtype = promotion.promote(self.dtype, rhs_dtype)
        lhs = self._data.astype(dtype)
        rhs = rhs.astype(dtype)
        if reflected:
            lhs, rhs = rhs, lhs
        return self._wrap(op(lhs, rhs))

    def __add__(self, other):
        return self._apply(other, np.add)

    def __sub__(self, other):
        return self._apply(other, np.subtract)

    def __mul__(self, other):
        return self._apply(other, np.multiply)

    def __truediv__(self, other):
        return self._apply(other, _divide)

    def __radd__(self, other):
        return self._apply(other, np.add, reflected=True)

    def __rsub__(self, other):
        return self._apply(other, np.subtract, reflected=True)

    def __rmul__(self, other):
        return self._apply(other, np.multiply, reflected=True)

    def __rtruediv__(self, other):
        return self._apply(other, _divide, reflected=True)

    # Shape and type changes

    def resize(self, dimension: int) -> FixedVector:
        """Truncate or zero-pad to `dimension`, keeping the leading elements."""
        out = vector_type(self.dtype, dimension)()
        n = min(dimension, len(self._data))
        out._data[:n] = self._data[:n]
        return out

    def convert(self, dtype: DTypeLike) -> FixedVector:
        """Same elements, cast to `dtype`."""
        return vector_type(dtype, self.dimension)(self)

    def slice(self, start: int, end: int) -> FixedVector:
        """Elements from `start` to `end`, both included.

        Endpoints are normalized like indices. When `start` is greater than
        `end` the elements are returned in reverse order.

        Raises
        ------
        VectorIndexError
            If either normalized endpoint is out of range.
        """
        n = len(self._data)
        s = normalize_index(start, n)
        e = normalize_index(end, n)
        if s <= e:
            data = self._data[s : e + 1]
        else:
            data = self._data[e : s + 1][::-1]
        return self._wrap(data.copy())

    # Conversion and display

    def tolist(self) -> list[Scalar]:
        return self._data.tolist()

    def to_numpy(self) -> Array:
        """A copy of the elements as a numpy array."""
        return self._data.copy()

    def __array__(self, dtype: np.dtype | None = None, copy: bool | None = None) -> Array:
        if copy is False:
            raise ValueError("FixedVector does not share its storage, a copy is required")
        return np.array(self._data, dtype=dtype, copy=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedVector):
            return NotImplemented
        return self.dimension == other.dimension and bool(
            np.array_equal(self._data, other._data)
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self):
        return "[" + ", ".join(str(x) for x in self.tolist()) + "]"

    def __repr__(self):
        return f"{self.__class__.__name__}({self.tolist()})"

