from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np

from raytracer.core.colour import Colour
from raytracer.core.errors import IndexOutOfRange


class Canvas:
    """
    Rectangular pixel buffer addressed by (x, y), origin at the top-left.

    Pixels are stored as float channels in a (height, width, 3) array and
    start out black.
    """

    def __init__(self, width: int, height: int) -> None:
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError(f"Canvas dimensions must be > 0, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self._pixels = np.zeros((self.height, self.width, 3), dtype=float)

    def _check_xy(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexOutOfRange(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")

    def pixel_at(self, x: int, y: int) -> Colour:
        self._check_xy(x, y)
        r, g, b = self._pixels[y, x]
        return Colour(float(r), float(g), float(b))

    def write_pixel(self, x: int, y: int, colour: Colour) -> None:
        self._check_xy(x, y)
        self._pixels[y, x] = (colour.red, colour.green, colour.blue)

    def fill_rect(self, colour: Colour, x0: int, y0: int, x1: int, y1: int) -> None:
        """Paint the half-open rectangle [x0, x1) x [y0, y1)."""
        if not (0 <= x0 <= x1 <= self.width and 0 <= y0 <= y1 <= self.height):
            raise IndexOutOfRange(
                f"Rectangle ({x0}, {y0})-({x1}, {y1}) outside {self.width}x{self.height} canvas"
            )
        self._pixels[y0:y1, x0:x1] = (colour.red, colour.green, colour.blue)

    def to_rgb8_array(self) -> np.ndarray:
        """
        Channel bytes as a (height, width, 3) uint8 array.

        Each channel is scaled by 255, truncated toward zero and then clamped
        into 0..255.
        """
        scaled = np.trunc(self._pixels * 255.0)
        return np.clip(scaled, 0, 255).astype(np.uint8)

    def to_bmp(self, path: Union[str, Path]) -> Path:
        from raytracer.canvas.bmp import write_bmp

        return write_bmp(self, path)
