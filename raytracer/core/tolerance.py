from __future__ import annotations

# Absolute epsilon for every float comparison in the core.
EPSILON = 1e-10


def almost_same(a: float, b: float) -> bool:
    return abs(a - b) < EPSILON
