from __future__ import annotations

import re
from pathlib import Path

from raytracer.core import tolerance
from raytracer.core.tolerance import EPSILON, almost_same


def test_epsilon_value() -> None:
    assert EPSILON == 1e-10


def test_almost_same_is_strictly_below_epsilon() -> None:
    assert almost_same(1.0, 1.0)
    assert almost_same(0.1 + 0.2, 0.3)
    assert almost_same(1.0, 1.0 + EPSILON / 2)
    assert not almost_same(0.0, 2 * EPSILON)
    assert not almost_same(1.0, 1.0001)


def test_almost_same_is_symmetric() -> None:
    assert almost_same(-3.0, -3.0 + 1e-12) == almost_same(-3.0 + 1e-12, -3.0)


def test_core_has_no_inline_epsilon_literals() -> None:
    root = Path(tolerance.__file__).resolve().parent
    pattern = re.compile(r"\b1e-\d+\b")
    offenders: list[str] = []
    for p in sorted(root.rglob("*.py")):
        if p.name == "tolerance.py":
            continue
        if pattern.search(p.read_text(encoding="utf-8")):
            offenders.append(p.name)
    assert offenders == []
