"""2D vector helpers.

``Vector2`` is an immutable value type; all helpers return new vectors.
"""

from __future__ import annotations

import math
from typing import NamedTuple

from fountain.rng_service import RNGService

# A zero draw needs both components to land on exactly 0.0, so a handful
# of redraws is plenty.
_MAX_REDRAWS = 16


class Vector2(NamedTuple):
    x: float
    y: float


def length(v: Vector2) -> float:
    return math.sqrt(v.x * v.x + v.y * v.y)


def normalize(v: Vector2) -> Vector2:
    """Return ``v`` scaled to unit length.

    Raises:
        ZeroDivisionError: if ``v`` has zero length.
    """
    n = length(v)
    return Vector2(v.x / n, v.y / n)


def scale(scalar: float, v: Vector2) -> Vector2:
    return Vector2(scalar * v.x, scalar * v.y)


def add(a: Vector2, b: Vector2) -> Vector2:
    return Vector2(a.x + b.x, a.y + b.y)


def random_unit_vector(x_range: float = 2, y_range: float = 2, rng: RNGService | None = None) -> Vector2:
    """Return a random unit vector.

    The components are drawn uniformly from ``[-x_range/2, x_range/2)`` and
    ``[-y_range/2, y_range/2)`` before normalizing, so the ranges bias the
    direction. A zero-length draw is discarded and redrawn.

    Raises:
        ValueError: if both ranges are zero (every draw would be zero).
    """
    if x_range == 0 and y_range == 0:
        raise ValueError("random_unit_vector needs a non-zero x_range or y_range")
    rng = rng or RNGService.get()
    for _ in range(_MAX_REDRAWS):
        x = -(x_range / 2) + rng.random() * x_range
        y = -(y_range / 2) + rng.random() * y_range
        if x != 0 or y != 0:
            return normalize(Vector2(x, y))
    # Practically unreachable; fall back to the axis with the larger spread.
    return Vector2(1.0, 0.0) if abs(x_range) >= abs(y_range) else Vector2(0.0, -1.0)


__all__ = ["Vector2", "length", "normalize", "scale", "add", "random_unit_vector"]
