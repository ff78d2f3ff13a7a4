"""
Geometry Layer
==============

Bounded Context: Pure geometric primitives.

Responsibilities:
- Point / segment representation (immutable)
- Implicit line form, intersection, point-to-line distance
- NO colors, NO rendering

Design Philosophy:
- Pure functions where possible
- Immutable data structures
"""

from shape_raster.geometry.primitives import Point, Segment, Line, det

__all__ = [
    "Point",
    "Segment",
    "Line",
    "det",
]
