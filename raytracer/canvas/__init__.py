from raytracer.canvas.bmp import encode_bmp, write_bmp
from raytracer.canvas.canvas import Canvas

__all__ = ["Canvas", "encode_bmp", "write_bmp"]
