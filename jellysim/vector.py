"""Two-dimensional vector arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass

MIN_DIF = 0.0001
"""Magnitudes below this are treated as zero."""


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def distance_to(self, other: Vec2) -> float:
        """Euclidean distance between two points."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def magnitude(self) -> float:
        """Length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; (1, 0) for a near-zero vector."""
        mag = self.magnitude()
        if mag < MIN_DIF:
            return Vec2(1.0, 0.0)
        return Vec2(self.x / mag, self.y / mag)

    def dot(self, other: Vec2) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y