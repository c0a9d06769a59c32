"""Vector and geometry utility functions."""

import math
from typing import Sequence, Tuple

from .errors import DegenerateGeometry

Point2 = Tuple[float, float]

_EPS = 1e-9


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between 2D points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value to range [lo, hi]."""
    return max(lo, min(hi, v))


def clamp01(v: float) -> float:
    return clamp(v, 0.0, 1.0)


def midpoint(a: Sequence[float], b: Sequence[float]) -> Point2:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


def mean_point(points: Sequence[Sequence[float]]) -> Point2:
    """Average of 2D points."""
    n = len(points)
    return (sum(p[0] for p in points) / n, sum(p[1] for p in points) / n)


def angle_between(a1: Sequence[float], a2: Sequence[float],
                  b1: Sequence[float], b2: Sequence[float],
                  strict: bool = False) -> float:
    """
    Angle in radians between the directions a1->a2 and b1->b2.

    A zero-length direction yields 0.0, or raises DegenerateGeometry when
    ``strict`` is set.
    """
    ux, uy = a2[0] - a1[0], a2[1] - a1[1]
    vx, vy = b2[0] - b1[0], b2[1] - b1[1]
    norms = math.hypot(ux, uy) * math.hypot(vx, vy)
    if norms < _EPS:
        if strict:
            raise DegenerateGeometry("zero-length direction vector")
        return 0.0
    cos_ang = clamp((ux * vx + uy * vy) / norms, -1.0, 1.0)
    return math.acos(cos_ang)
