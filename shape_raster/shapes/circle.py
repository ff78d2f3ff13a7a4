"""
Circle Module
=============

Scan rasterization of a circle using squared-distance thresholds.

Design:
- Integer arithmetic only (no sqrt)
- Classification relative to the center:
    d^2 > r^2               -> outside
    d^2 <= (r - w)^2        -> fill   (only while r - w >= 0)
    otherwise               -> border
"""

from dataclasses import dataclass

from shape_raster.geometry.primitives import Point, require_integer
from shape_raster.shapes.base import BoundingBox, PixelKind, Shape


@dataclass(frozen=True)
class Circle(Shape):
    """
    Immutable filled circle with a border ring.

    Attributes:
        center: Center pixel
        radius: Radius in pixels (>= 0; zero renders only the center
            pixel)

    Example:
        >>> circle = Circle(
        ...     fill_color=Color(255, 0, 0),
        ...     border_color=Color(255, 255, 255),
        ...     border_width=2,
        ...     canvas_wh=(64, 64),
        ...     center=Point(32, 32),
        ...     radius=10,
        ... )
        >>> stats = circle.render(sink)
    """

    center: Point
    radius: int

    def _validate(self) -> None:
        if not isinstance(self.center, Point):
            raise TypeError(f"center must be Point, got {type(self.center)}")
        radius = require_integer("radius", self.radius)
        if radius < 0:
            raise ValueError(f"radius must be >= 0, got {radius}")
        object.__setattr__(self, 'radius', radius)

    def _compute_bounding_box(self) -> BoundingBox:
        return BoundingBox.clamped(
            x_start=self.center.x - self.radius,
            x_end=self.center.x + self.radius,
            y_start=self.center.y - self.radius,
            y_end=self.center.y + self.radius,
            canvas_wh=self.canvas_wh,
        )

    @property
    def inner_radius(self) -> int:
        """Radius of the filled interior (negative: border only)."""
        return self.radius - self.border_width

    def classify(self, x: int, y: int) -> PixelKind:
        dx = x - self.center.x
        dy = y - self.center.y
        dist_sq = dx * dx + dy * dy

        if dist_sq > self.radius * self.radius:
            return PixelKind.OUTSIDE

        inner = self.inner_radius
        if inner >= 0 and dist_sq <= inner * inner:
            return PixelKind.FILL

        return PixelKind.BORDER
