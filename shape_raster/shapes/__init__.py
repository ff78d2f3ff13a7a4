"""
Shapes Layer
============

Bounded Context: Rasterizable shapes.

Responsibilities:
- Shape validation (fail-fast at construction)
- Bounding box computation (once, clamped to the canvas)
- Per-pixel classification: outside / fill / border
- Emitting pixels into a sink

Design Philosophy:
- Immutable shapes, idempotent rendering
- Closed set of variants (Circle, Polygon) behind one render contract
"""

from shape_raster.shapes.base import BoundingBox, PixelKind, RenderStats, Shape
from shape_raster.shapes.circle import Circle
from shape_raster.shapes.polygon import Polygon

__all__ = [
    "Shape",
    "BoundingBox",
    "PixelKind",
    "RenderStats",
    "Circle",
    "Polygon",
]
