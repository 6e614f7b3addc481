"""Geometry helpers for the hole simulation.

Pure functions plus a small Vector2 used for agent positions and velocities.
Nothing in here keeps state or raises for finite inputs.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

Point = Tuple[float, float]


class Vector2:
    """A 2D vector class for positions, velocities and polygon offsets."""

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x: float = float(x)
        self.y: float = float(y)

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> "Vector2":
        """Return a unit vector, or (1, 0) for the zero vector."""
        length = math.hypot(self.x, self.y)
        if length == 0:
            return Vector2(1.0, 0.0)
        return Vector2(self.x / length, self.y / length)

    def scale_to_length(self, new_length: float) -> "Vector2":
        return self.normalize() * new_length

    def update(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def copy(self) -> "Vector2":
        return Vector2(self.x, self.y)

    def as_tuple(self) -> Point:
        return (self.x, self.y)

    def __eq__(self, other: object) -> bool:
        if other.__class__ is not Vector2:
            return False
        return abs(self.x - other.x) < 1e-9 and abs(self.y - other.y) < 1e-9

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __repr__(self) -> str:
        return f"Vector2({self.x}, {self.y})"


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation; ``t`` is not clamped."""
    return start + (end - start) * t


def polygon_area(points: Sequence[Point]) -> float:
    """Unsigned polygon area using the shoelace formula.

    Args:
        points: Vertices in order (either winding)

    Returns:
        The absolute enclosed area; 0.0 for fewer than three points
    """
    count = len(points)
    if count < 3:
        return 0.0
    twice_area = 0.0
    for i in range(count):
        x1, y1 = points[i]
        x2, y2 = points[(i + 1) % count]
        twice_area += x1 * y2 - x2 * y1
    return abs(twice_area) / 2.0


def point_in_polygon(x: float, y: float, points: Sequence[Point]) -> bool:
    """Ray-casting containment test.

    Works for convex and non-convex simple polygons. Points exactly on an
    edge may land on either side.
    """
    inside = False
    count = len(points)
    if count < 3:
        return False
    j = count - 1
    for i in range(count):
        xi, yi = points[i]
        xj, yj = points[j]
        if (yi > y) != (yj > y):
            x_cross = (xj - xi) * (y - yi) / (yj - yi) + xi
            if x < x_cross:
                inside = not inside
        j = i
    return inside


__all__ = [
    "Point",
    "Vector2",
    "distance",
    "lerp",
    "point_in_polygon",
    "polygon_area",
]
