"""
24-bit uncompressed BMP writer.

Layout (all fields little-endian):

- 14-byte file header: ``BM``, file size, two reserved zeros, pixel offset
- 40-byte BITMAPINFOHEADER: size, width, height, planes, bit count,
  compression, image size, x/y resolution, colours used, important colours
- pixel rows, 3 bytes per pixel in blue, green, red order, each row
  zero-padded to a multiple of 4 bytes

Rows are written in canvas order, row y = 0 first, with a positive height.
Standard readers treat a positive height as bottom-up, so they show the
canvas flipped vertically.
"""

from __future__ import annotations

import struct
from pathlib import Path
from typing import TYPE_CHECKING, Union

import numpy as np
from loguru import logger

if TYPE_CHECKING:
    from raytracer.canvas.canvas import Canvas


FILE_HEADER_SIZE = 14
DIB_HEADER_SIZE = 40
PIXEL_DATA_OFFSET = FILE_HEADER_SIZE + DIB_HEADER_SIZE
BITS_PER_PIXEL = 24
BI_RGB = 0
# 72 DPI
PIXELS_PER_METRE = 2835


def row_padding(width: int) -> int:
    return (4 - (width * 3) % 4) % 4


def encode_bmp(canvas: "Canvas") -> bytes:
    width, height = canvas.width, canvas.height
    row_size = width * 3 + row_padding(width)
    image_size = row_size * height
    file_size = PIXEL_DATA_OFFSET + image_size

    file_header = struct.pack("<2sIHHI", b"BM", file_size, 0, 0, PIXEL_DATA_OFFSET)
    dib_header = struct.pack(
        "<IiiHHIIiiII",
        DIB_HEADER_SIZE,
        width,
        height,
        1,
        BITS_PER_PIXEL,
        BI_RGB,
        image_size,
        PIXELS_PER_METRE,
        PIXELS_PER_METRE,
        0,
        0,
    )

    rgb = canvas.to_rgb8_array()
    bgr = rgb[:, :, ::-1]
    rows = np.zeros((height, row_size), dtype=np.uint8)
    rows[:, : width * 3] = bgr.reshape(height, width * 3)
    return file_header + dib_header + rows.tobytes()


def write_bmp(canvas: "Canvas", path: Union[str, Path]) -> Path:
    out = Path(path).expanduser()
    out.parent.mkdir(parents=True, exist_ok=True)
    data = encode_bmp(canvas)
    out.write_bytes(data)
    logger.debug("Wrote {}x{} bitmap ({} bytes) to {}", canvas.width, canvas.height, len(data), out)
    return out
