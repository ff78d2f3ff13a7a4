"""
Geometric Primitives Module
===========================

Pure geometric value types - NO state, NO side effects.

Design:
- Immutable primitives (frozen dataclass pattern)
- Integer pixel coordinates
- Implicit line form (a*x + b*y + c = 0) for determinant-based
  intersection and point-to-line distance
"""

import math
import numbers
from dataclasses import dataclass
from typing import Optional, Tuple


def det(a: float, b: float, c: float, d: float) -> float:
    """2x2 determinant | a b ; c d |."""
    return a * d - b * c


def require_integer(name: str, value) -> int:
    """Return value as int, or raise TypeError for non-integers (bools included)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    return int(value)


@dataclass(frozen=True)
class Point:
    """
    Immutable integer pixel coordinate.

    Attributes:
        x: Column (pixels)
        y: Row (pixels)
    """

    x: int
    y: int

    def __post_init__(self):
        object.__setattr__(self, 'x', require_integer("x", self.x))
        object.__setattr__(self, 'y', require_integer("y", self.y))

    def to_tuple(self) -> Tuple[int, int]:
        return self.x, self.y


@dataclass(frozen=True)
class Segment:
    """
    Directed segment between two points.

    Direction matters: polygon edges chain end -> start.

    Attributes:
        start: First endpoint
        end: Second endpoint
    """

    start: Point
    end: Point

    def contains_point(self, x: float, y: float) -> bool:
        """
        Check if (x, y) lies on the closed segment.

        Uses the cross product for colinearity and a bounding-box check
        for the span.
        """
        dx = self.end.x - self.start.x
        dy = self.end.y - self.start.y
        cross = dx * (y - self.start.y) - dy * (x - self.start.x)
        if cross != 0:
            return False

        return (
            min(self.start.x, self.end.x) <= x <= max(self.start.x, self.end.x)
            and min(self.start.y, self.end.y) <= y <= max(self.start.y, self.end.y)
        )


@dataclass(frozen=True)
class Line:
    """
    Immutable line in implicit form a*x + b*y + c = 0.

    Coefficients are not normalized: a line built from two points scales
    with their separation. Equality is coefficient-wise, so two
    proportional coefficient triples describing the same geometric line
    are NOT equal.

    Attributes:
        a: x coefficient
        b: y coefficient
        c: constant term
    """

    a: int
    b: int
    c: int

    @classmethod
    def from_points(cls, p1: Point, p2: Point) -> "Line":
        """
        Line through two points.

        Args:
            p1: First point
            p2: Second point

        Returns:
            Line with a = y1 - y2, b = x2 - x1, c = -x1*a - y1*b
        """
        a = p1.y - p2.y
        b = p2.x - p1.x
        c = -p1.x * a - p1.y * b
        return cls(a=a, b=b, c=c)

    @classmethod
    def from_coefficients(cls, a: int, b: int, c: int) -> "Line":
        return cls(a=a, b=b, c=c)

    @classmethod
    def horizontal(cls, y: int) -> "Line":
        """Line y = y0, as (0, 1, -y0)."""
        return cls.from_coefficients(0, 1, -y)

    def distance_to(self, x: float, y: float) -> float:
        """
        Perpendicular distance from (x, y) to this infinite line.

        Returns:
            |a*x + b*y + c| / sqrt(a^2 + b^2), or inf for a degenerate
            line (a == b == 0)
        """
        norm = math.hypot(self.a, self.b)
        if norm == 0:
            return math.inf
        return abs(self.a * x + self.b * y + self.c) / norm

    def intersection(self, other: "Line") -> Optional[Tuple[float, float]]:
        """
        Intersection point with another line (Cramer's rule).

        Args:
            other: Second line

        Returns:
            (x, y) intersection, or None when the lines are parallel
        """
        zn = det(self.a, self.b, other.a, other.b)
        # Integer coefficients: exact zero test
        if zn == 0:
            return None

        x = -det(self.c, self.b, other.c, other.b) / zn
        y = -det(self.a, self.c, other.a, other.c) / zn
        return x, y
