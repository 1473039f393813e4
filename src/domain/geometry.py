"""
Geometry helpers - 2D points and Euclidean distance.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float
    y: float

    def distance_from_origin(self) -> float:
        return distance_from_origin(self)

    def distance_to(self, other: Point) -> float:
        return distance(self, other)


ORIGIN = Point(0.0, 0.0)


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)


def distance_from_origin(point: Point) -> float:
    return distance(point, ORIGIN)
