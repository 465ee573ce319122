from __future__ import annotations


class RaytracerError(Exception):
    """Base class for errors raised by the raytracer core."""


class IndexOutOfRange(RaytracerError, IndexError):
    pass


class DivisionByZero(RaytracerError, ZeroDivisionError):
    pass


class NotInvertible(RaytracerError, ValueError):
    """Raised by ``inverse()`` when the determinant is approximately zero."""


class UnsupportedOperation(RaytracerError, TypeError):
    """An operation that is not defined for the operand sizes, e.g. a 2x2 submatrix."""
