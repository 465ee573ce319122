from __future__ import annotations

import argparse
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Tuple

from loguru import logger

from raytracer.canvas import Canvas, write_bmp
from raytracer.core import Colour


# Test pattern laid out on a 512x512 reference canvas: (colour, x0, y0, x1, y1).
_REFERENCE_SIZE = 512
_TEST_PATTERN: List[Tuple[Colour, int, int, int, int]] = [
    (Colour(0.0, 0.0, 1.0), 0, 0, 128, 128),
    (Colour(1.0, 0.0, 0.0), 384, 384, 512, 512),
    (Colour(0.0, 0.0, 1.0), 450, 0, 512, 62),
]
_MIN_SIZE = 8


@dataclass(frozen=True)
class PaintJob:
    out: Path
    size: int = _REFERENCE_SIZE


def paint_test_pattern(job: PaintJob) -> Canvas:
    canvas = Canvas(job.size, job.size)
    for colour, x0, y0, x1, y1 in _TEST_PATTERN:
        canvas.fill_rect(
            colour,
            x0 * job.size // _REFERENCE_SIZE,
            y0 * job.size // _REFERENCE_SIZE,
            x1 * job.size // _REFERENCE_SIZE,
            y1 * job.size // _REFERENCE_SIZE,
        )
    return canvas


@contextmanager
def _package_logging(enabled: bool) -> Iterator[None]:
    # Only toggles the package's own messages; sinks stay with the caller.
    if not enabled:
        yield
        return
    logger.enable("raytracer")
    try:
        yield
    finally:
        logger.disable("raytracer")


def _cmd_paint(args: argparse.Namespace) -> int:
    if args.size < _MIN_SIZE:
        print(f"[ERROR] Canvas size must be at least {_MIN_SIZE}, got {args.size}")
        return 2

    job = PaintJob(out=Path(args.out).expanduser().resolve(), size=int(args.size))
    canvas = paint_test_pattern(job)
    with _package_logging(bool(args.verbose)):
        path = write_bmp(canvas, job.out)

    print("Raytracer Paint")
    print(f"  Canvas: {canvas.width}x{canvas.height}")
    print(f"  Saved: {path}")
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="raytracer")
    sub = p.add_subparsers(dest="cmd", required=True)

    paint = sub.add_parser("paint", help="Paint the test rectangles and save them as a 24-bit BMP.")
    paint.add_argument("--out", default="tst.bmp", help="Output .bmp path (default: tst.bmp)")
    paint.add_argument("--size", type=int, default=_REFERENCE_SIZE, help="Canvas width and height in pixels")
    paint.add_argument("--verbose", action="store_true", help="Emit debug log messages")
    paint.set_defaults(func=_cmd_paint)

    args = p.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
