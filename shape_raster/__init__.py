"""
Shape Raster
============

Bounded Context: Scan rasterization of simple 2D shapes.

Design Philosophy:
- Separation of Concerns: Geometry, Shapes, Rendering separated
- Immutable shapes: everything computed at construction, rendering is
  idempotent
- Fail-fast: invalid colors and open polygons never construct

Architecture:

    shape_raster/
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   └── primitives.py  # Point, Segment, Line
    │
    ├── shapes/            # Rasterizable shapes
    │   ├── base.py        # Shape, BoundingBox, RenderStats
    │   ├── circle.py      # Circle
    │   └── polygon.py     # Polygon (ray casting, border distance)
    │
    ├── rendering/         # Pixel output
    │   ├── sinks.py       # PixelSink, FrameSink, RecordingSink
    │   └── renderer.py    # SceneRenderer
    │
    ├── color.py           # Color
    ├── config.py          # SceneConfig (YAML)
    ├── errors.py          # InvalidColorError, InvalidPolygonError
    └── logging/           # Structured JSON logging

Usage:

    # 1. Create shapes (immutable, validated)
    from shape_raster import Color, Point, Circle, Polygon

    square = Polygon.from_vertices(
        [(0, 0), (10, 0), (10, 10), (0, 10)],
        fill_color=Color(0, 120, 255),
        border_color=Color(255, 255, 255),
        border_width=1,
        canvas_wh=(64, 64),
    )

    # 2. Render into any sink with set_pixel(x, y, (r, g, b))
    from shape_raster import RecordingSink

    sink = RecordingSink()
    stats = square.render(sink)

    # 3. Or render a scene onto a numpy frame
    from shape_raster import SceneRenderer

    frame = SceneRenderer().render([square], canvas_wh=(64, 64))
"""

from shape_raster.color import Color, COLOR_MIN_VALUE, COLOR_MAX_VALUE
from shape_raster.errors import ShapeRasterError, InvalidColorError, InvalidPolygonError
from shape_raster.geometry.primitives import Point, Segment, Line

from shape_raster.shapes import Shape, BoundingBox, PixelKind, RenderStats, Circle, Polygon

from shape_raster.rendering import PixelSink, FrameSink, RecordingSink, SceneRenderer

from shape_raster.config import SceneConfig, ShapeConfig

__all__ = [
    # Values
    "Color",
    "COLOR_MIN_VALUE",
    "COLOR_MAX_VALUE",
    # Errors
    "ShapeRasterError",
    "InvalidColorError",
    "InvalidPolygonError",
    # Geometry
    "Point",
    "Segment",
    "Line",
    # Shapes
    "Shape",
    "BoundingBox",
    "PixelKind",
    "RenderStats",
    "Circle",
    "Polygon",
    # Rendering
    "PixelSink",
    "FrameSink",
    "RecordingSink",
    "SceneRenderer",
    # Config
    "SceneConfig",
    "ShapeConfig",
]

__version__ = "1.0.0"
