from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Tuple, Union

from raytracer.core.tolerance import almost_same


@dataclass(frozen=True, eq=False)
class Colour:
    """
    RGB colour with unbounded float channels.

    Channels are nominally 0-1 but are never clamped during arithmetic;
    clamping happens only where a colour leaves the core (packed value,
    bitmap bytes).
    """
    red: float
    green: float
    blue: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Colour):
            return NotImplemented
        return (
            almost_same(self.red, other.red)
            and almost_same(self.green, other.green)
            and almost_same(self.blue, other.blue)
        )

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: 'Colour') -> 'Colour':
        return Colour(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: 'Colour') -> 'Colour':
        return Colour(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: Union['Colour', float]) -> 'Colour':
        # Colour * Colour is the Hadamard product used for light/surface blending.
        if isinstance(other, Colour):
            return Colour(self.red * other.red, self.green * other.green, self.blue * other.blue)
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Colour(self.red * other, self.green * other, self.blue * other)

    def __rmul__(self, scalar: float) -> 'Colour':
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Colour(self.red * scalar, self.green * scalar, self.blue * scalar)

    def to_rgb8(self) -> Tuple[int, int, int]:
        """
        Scale each channel by 255 and truncate toward zero.

        No clamping is done here: channels outside 0-1 produce values
        outside 0-255.
        """
        return (int(self.red * 255), int(self.green * 255), int(self.blue * 255))

    def to_packed(self) -> int:
        """Pack as 0xAARRGGBB with a fixed alpha of 255."""
        r, g, b = (max(0, min(255, c)) for c in self.to_rgb8())
        return (255 << 24) | (r << 16) | (g << 8) | b


BLACK = Colour(0.0, 0.0, 0.0)
WHITE = Colour(1.0, 1.0, 1.0)
