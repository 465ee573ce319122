"""
Raytracer core: tolerance-aware tuples, colours and square matrices.
"""

from raytracer.core.colour import BLACK, WHITE, Colour
from raytracer.core.errors import (
    DivisionByZero,
    IndexOutOfRange,
    NotInvertible,
    RaytracerError,
    UnsupportedOperation,
)
from raytracer.core.matrix import Matrix2, Matrix3, Matrix4, SquareMatrix
from raytracer.core.tolerance import EPSILON, almost_same
from raytracer.core.tuples import Tuple, point, vector

__all__ = [
    "BLACK",
    "WHITE",
    "Colour",
    "DivisionByZero",
    "IndexOutOfRange",
    "NotInvertible",
    "RaytracerError",
    "UnsupportedOperation",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "SquareMatrix",
    "EPSILON",
    "almost_same",
    "Tuple",
    "point",
    "vector",
]
