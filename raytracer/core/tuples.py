"""
Homogeneous 4-component tuples.

A tuple with ``w == 1`` is a point (a location), one with ``w == 0`` is a
vector (a direction or displacement). Arithmetic is plain component-wise
arithmetic on all four components, so the usual rules fall out of it:

- point - point -> vector
- point + vector -> point
- vector + vector -> vector

Nothing stops a caller from building a tuple with any other ``w``.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from raytracer.core.errors import DivisionByZero, IndexOutOfRange
from raytracer.core.tolerance import almost_same


@dataclass(frozen=True, eq=False)
class Tuple:
    """Point or vector in homogeneous coordinates."""
    x: float
    y: float
    z: float
    w: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (
            almost_same(self.x, other.x)
            and almost_same(self.y, other.y)
            and almost_same(self.z, other.z)
            and almost_same(self.w, other.w)
        )

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        if index == 2:
            return self.z
        if index == 3:
            return self.w
        raise IndexOutOfRange(f"Tuple index out of range: {index}")

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def __len__(self) -> int:
        return 4

    def __add__(self, other: 'Tuple') -> 'Tuple':
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: 'Tuple') -> 'Tuple':
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> 'Tuple':
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> 'Tuple':
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __rmul__(self, scalar: float) -> 'Tuple':
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> 'Tuple':
        if scalar == 0.0:
            raise DivisionByZero("Cannot divide a tuple by zero")
        return self * (1.0 / scalar)

    def is_vector(self) -> bool:
        return self.w == 0.0

    def is_point(self) -> bool:
        return self.w == 1.0

    def dot(self, other: 'Tuple') -> float:
        """Dot product over all four components (w included)."""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: 'Tuple') -> 'Tuple':
        """3D cross product of the xyz parts; always returns a vector."""
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def norm2(self) -> float:
        return self.dot(self)

    def norm(self) -> float:
        return math.sqrt(self.norm2())

    def normalised(self) -> 'Tuple':
        """
        Return this tuple scaled to unit length.

        Raises DivisionByZero for a zero-length tuple instead of producing
        NaN components. Any non-zero length is accepted, however small.
        """
        # hypot does not underflow where sqrt(norm2()) would for tiny components.
        n = math.hypot(self.x, self.y, self.z, self.w)
        if n == 0.0:
            raise DivisionByZero(f"Cannot normalise zero-length tuple {self!r}")
        return Tuple(self.x / n, self.y / n, self.z / n, self.w / n)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z, self.w], dtype=float)

    @staticmethod
    def from_array(arr: np.ndarray) -> 'Tuple':
        a = np.asarray(arr, dtype=float)
        if a.shape != (4,):
            raise ValueError(f"Tuple.from_array expects shape (4,), got {a.shape}")
        return Tuple(float(a[0]), float(a[1]), float(a[2]), float(a[3]))


def vector(x: float, y: float, z: float) -> Tuple:
    return Tuple(float(x), float(y), float(z), 0.0)


def point(x: float, y: float, z: float) -> Tuple:
    return Tuple(float(x), float(y), float(z), 1.0)
