"""Named constants and the squaring helper shared by arithmetic and geometry."""

from __future__ import annotations

from typing import TypeVar

PI: float = 3.14159265358979323846

_N = TypeVar("_N", int, float)


def squared(x: _N) -> _N:
    """Return x * x. Keeps the input type, so squared(5) == 25."""
    return x * x
