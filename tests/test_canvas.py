from __future__ import annotations

import numpy as np
import pytest

from raytracer.canvas import Canvas
from raytracer.core import BLACK, Colour, IndexOutOfRange


def test_new_canvas_is_black() -> None:
    c = Canvas(10, 20)
    assert c.width == 10
    assert c.height == 20
    assert all(c.pixel_at(x, y) == BLACK for x in range(10) for y in range(20))


def test_write_and_read_pixel() -> None:
    c = Canvas(640, 480)
    c.write_pixel(55, 190, Colour(1.0, 0.5, 0.5))
    assert c.pixel_at(55, 190) == Colour(1.0, 0.5, 0.5)
    assert c.pixel_at(54, 190) == BLACK
    assert c.pixel_at(639, 479) == BLACK


def test_pixels_keep_out_of_range_channels() -> None:
    c = Canvas(2, 2)
    c.write_pixel(1, 1, Colour(1.5, -0.25, 0.0))
    assert c.pixel_at(1, 1) == Colour(1.5, -0.25, 0.0)


@pytest.mark.parametrize("x, y", [(10, 0), (0, 5), (-1, 0), (0, -1), (10, 5)])
def test_out_of_bounds_access(x: int, y: int) -> None:
    c = Canvas(10, 5)
    with pytest.raises(IndexOutOfRange):
        c.pixel_at(x, y)
    with pytest.raises(IndexOutOfRange):
        c.write_pixel(x, y, BLACK)


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-3, 2)])
def test_invalid_dimensions(width: int, height: int) -> None:
    with pytest.raises(ValueError, match="dimensions"):
        Canvas(width, height)


def test_fill_rect_is_half_open() -> None:
    red = Colour(1.0, 0.0, 0.0)
    c = Canvas(8, 8)
    c.fill_rect(red, 2, 3, 5, 6)
    painted = {(x, y) for x in range(8) for y in range(8) if c.pixel_at(x, y) == red}
    assert painted == {(x, y) for x in range(2, 5) for y in range(3, 6)}


def test_fill_rect_rejects_rectangles_off_canvas() -> None:
    c = Canvas(8, 8)
    with pytest.raises(IndexOutOfRange):
        c.fill_rect(BLACK, 0, 0, 9, 8)
    with pytest.raises(IndexOutOfRange):
        c.fill_rect(BLACK, 5, 0, 4, 8)


def test_to_rgb8_array_truncates_and_clamps() -> None:
    c = Canvas(3, 1)
    c.write_pixel(0, 0, Colour(1.0, 0.5, 0.0))
    c.write_pixel(1, 0, Colour(0.999, 0.2, 0.001))
    c.write_pixel(2, 0, Colour(1.2, -0.1, 0.5))
    arr = c.to_rgb8_array()
    assert arr.dtype == np.uint8
    assert arr.shape == (1, 3, 3)
    assert arr[0, 0].tolist() == [255, 127, 0]
    assert arr[0, 1].tolist() == [254, 51, 0]
    assert arr[0, 2].tolist() == [255, 0, 127]
