"""
Fixed-size square matrices.

One generic implementation parameterised by the class attribute ``size``;
``Matrix2``, ``Matrix3`` and ``Matrix4`` only pin the dimension. Determinant
and inverse use cofactor expansion along row 0, recursing through
``submatrix`` until the 2x2 base case:

    det(M) = sum_j M[0, j] * cofactor(0, j)
    cofactor(r, c) = (-1)^(r + c) * det(submatrix(r, c))
    inverse(M)[c, r] = cofactor(r, c) / det(M)

Elements are stored in a float64 numpy array that never leaves the value.
Apart from ``set``, every operation returns a new matrix.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Type, TypeVar, Union

import numpy as np

from raytracer.core.errors import IndexOutOfRange, NotInvertible, UnsupportedOperation
from raytracer.core.tolerance import almost_same
from raytracer.core.tuples import Tuple


M = TypeVar("M", bound="SquareMatrix")


class SquareMatrix:
    """Square matrix of dimension ``size``; use the sized subclasses."""

    size: int = 0

    def __init__(self, *values: float) -> None:
        n = self.size
        if n < 2:
            raise TypeError("SquareMatrix has no dimension; use Matrix2, Matrix3 or Matrix4")
        if len(values) != n * n:
            raise ValueError(f"{type(self).__name__} requires {n * n} values, got {len(values)}")
        self._m = np.array(values, dtype=float).reshape(n, n)

    @classmethod
    def _wrap(cls: Type[M], arr: np.ndarray) -> M:
        # Takes ownership of arr; callers must pass a fresh array.
        m = cls.__new__(cls)
        m._m = arr
        return m

    @classmethod
    def from_array(cls: Type[M], arr: Union[np.ndarray, Sequence[Sequence[float]]]) -> M:
        a = np.array(arr, dtype=float)
        if a.shape != (cls.size, cls.size):
            raise ValueError(f"{cls.__name__} expects shape ({cls.size}, {cls.size}), got {a.shape}")
        return cls._wrap(a)

    @classmethod
    def from_rows(cls: Type[M], rows: Iterable[Iterable[float]]) -> M:
        return cls.from_array([list(r) for r in rows])

    @classmethod
    def zero(cls: Type[M]) -> M:
        return cls._wrap(np.zeros((cls.size, cls.size), dtype=float))

    @classmethod
    def identity(cls: Type[M]) -> M:
        return cls._wrap(np.eye(cls.size, dtype=float))

    # -- element access -----------------------------------------------------

    def _check_index(self, row: int, col: int) -> None:
        n = self.size
        if not (0 <= row < n and 0 <= col < n):
            raise IndexOutOfRange(f"{type(self).__name__} index ({row}, {col}) outside [0, {n})")

    def at(self, row: int, col: int) -> float:
        self._check_index(row, col)
        return float(self._m[row, col])

    def __getitem__(self, index: tuple) -> float:
        row, col = index
        return self.at(row, col)

    def set(self, value: float, row: int, col: int) -> None:
        """Overwrite one element in place. This is the only mutating operation."""
        self._check_index(row, col)
        self._m[row, col] = float(value)

    def rows(self) -> List[List[float]]:
        return self._m.tolist()

    def to_array(self) -> np.ndarray:
        return self._m.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        if other.size != self.size:
            return False
        return all(
            almost_same(float(a), float(b))
            for a, b in zip(self._m.ravel(), other._m.ravel())
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        values = ", ".join(f"{v:g}" for v in self._m.ravel())
        return f"{type(self).__name__}({values})"

    # -- algebra ------------------------------------------------------------

    def transpose(self: M) -> M:
        return self._wrap(self._m.T.copy())

    def multiply(self, other: Union['SquareMatrix', Tuple]) -> Union['SquareMatrix', Tuple]:
        """
        Matrix product with a matrix of the same size, or Matrix4 x Tuple.

        result[i][j] = sum_k self[i][k] * other[k][j]
        """
        if isinstance(other, Tuple):
            if self.size != 4:
                raise UnsupportedOperation(f"{type(self).__name__} cannot multiply a Tuple; only Matrix4 can")
            return Tuple.from_array(self._m @ other.to_array())
        if isinstance(other, SquareMatrix):
            if other.size != self.size:
                raise UnsupportedOperation(
                    f"Cannot multiply {type(self).__name__} by {type(other).__name__}"
                )
            return self._wrap(self._m @ other._m)
        raise UnsupportedOperation(f"Cannot multiply {type(self).__name__} by {type(other).__name__}")

    def __mul__(self, other: object):
        if isinstance(other, (SquareMatrix, Tuple)):
            return self.multiply(other)
        return NotImplemented

    def submatrix(self, row: int, col: int) -> 'SquareMatrix':
        """Copy of this matrix with ``row`` and ``col`` removed, one size smaller."""
        if self.size <= 2:
            raise UnsupportedOperation(f"{type(self).__name__} has no submatrix")
        self._check_index(row, col)
        arr = np.delete(np.delete(self._m, row, axis=0), col, axis=1)
        return _MATRIX_TYPES[self.size - 1]._wrap(arr)

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        m = self.minor(row, col)
        return -m if (row + col) % 2 else m

    def determinant(self) -> float:
        m = self._m
        if self.size == 2:
            return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])
        det = 0.0
        for col in range(self.size):
            det += float(m[0, col]) * self.cofactor(0, col)
        return det

    def is_invertible(self) -> bool:
        return not almost_same(self.determinant(), 0.0)

    def inverse(self: M) -> M:
        """
        Inverse by the adjugate method.

        Raises NotInvertible when the determinant is approximately zero.
        """
        det = self.determinant()
        if almost_same(det, 0.0):
            raise NotInvertible(f"{type(self).__name__} is singular (determinant {det:g})")
        n = self.size
        out = np.empty((n, n), dtype=float)
        if n == 2:
            m = self._m
            out[0, 0] = m[1, 1] / det
            out[0, 1] = -m[0, 1] / det
            out[1, 0] = -m[1, 0] / det
            out[1, 1] = m[0, 0] / det
            return self._wrap(out)
        for row in range(n):
            for col in range(n):
                # Writing at [col, row] transposes the cofactor matrix.
                out[col, row] = self.cofactor(row, col) / det
        return self._wrap(out)


class Matrix2(SquareMatrix):
    size = 2


class Matrix3(SquareMatrix):
    size = 3


class Matrix4(SquareMatrix):
    size = 4


_MATRIX_TYPES: Dict[int, Type[SquareMatrix]] = {2: Matrix2, 3: Matrix3, 4: Matrix4}
