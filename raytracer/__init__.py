"""
Raytracer

Linear-algebra core for a ray tracer (points, vectors, colours and square
matrices) plus a pixel canvas that can be saved as a 24-bit BMP.
"""

__version__ = "0.1.0"

from loguru import logger

from raytracer.canvas import Canvas, encode_bmp, write_bmp
from raytracer.core import (
    BLACK,
    WHITE,
    Colour,
    DivisionByZero,
    EPSILON,
    IndexOutOfRange,
    Matrix2,
    Matrix3,
    Matrix4,
    NotInvertible,
    RaytracerError,
    SquareMatrix,
    Tuple,
    UnsupportedOperation,
    almost_same,
    point,
    vector,
)

__all__ = [
    "Canvas",
    "encode_bmp",
    "write_bmp",
    "BLACK",
    "WHITE",
    "Colour",
    "DivisionByZero",
    "EPSILON",
    "IndexOutOfRange",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "NotInvertible",
    "RaytracerError",
    "SquareMatrix",
    "Tuple",
    "UnsupportedOperation",
    "almost_same",
    "point",
    "vector",
]

# Library messages are opt-in; applications call logger.enable("raytracer").
logger.disable("raytracer")
