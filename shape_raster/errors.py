"""
Shape Raster Errors
===================

Validation failures raised at construction time (fail-fast, no partial
objects). Rendering itself never raises.
"""


class ShapeRasterError(Exception):
    """Base class for shape_raster validation errors"""
    pass


class InvalidColorError(ShapeRasterError, ValueError):
    """Raised when a color channel is outside the allowed range"""
    pass


class InvalidPolygonError(ShapeRasterError, ValueError):
    """Raised when polygon edges do not form a closed, chained loop"""
    pass
