"""
Exceptions raised by vector operations.

Each one derives from the closest builtin exception, so callers may catch
either the specific class or the builtin.
"""

from __future__ import annotations


class VectorIndexError(IndexError):
    """Raised when a normalized index falls outside ``[0, dimension)``."""

    def __init__(self, index: int, dimension: int):
        self.index = index
        self.dimension = dimension
        super().__init__(
            f"Index {index} out of range for vector of dimension {dimension}"
        )


class DivideByZeroError(ZeroDivisionError):
    """Raised by integer division when a divisor is zero."""


class DimensionMismatchError(ValueError):
    """Raised when two operands must share a dimension but do not."""

    def __init__(self, left: int, right: int, operation: str = ""):
        self.left = left
        self.right = right
        prefix = f"{operation}: " if operation else ""
        super().__init__(f"{prefix}dimensions do not match ({left} vs {right})")
