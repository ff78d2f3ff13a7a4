"""
Polygon Module
==============

Scan rasterization of convex and non-convex polygons.

Design:
- Edges are directed segments chained into a closed loop
- Membership by ray casting (even-odd rule) with a horizontal ray
  cast rightward from the pixel
- Border by perpendicular distance to each edge's infinite line
- Edge lines precomputed once per shape (implicit form)

Ray casting details:
- Pixels lying exactly on an edge are inside
- Edges whose line equals the ray, or is parallel to it, never count
- Hits are accepted on the closed x-span and half-open y-span
  [y_min, y_max) of the edge, so a ray through a shared vertex is
  counted once
"""

from dataclasses import dataclass
from functools import cached_property
from typing import Iterable, Sequence, Tuple, Union

from shape_raster.color import Color
from shape_raster.errors import InvalidPolygonError
from shape_raster.geometry.primitives import Line, Point, Segment
from shape_raster.shapes.base import BoundingBox, PixelKind, Shape

VertexLike = Union[Point, Tuple[int, int], Sequence[int]]


@dataclass(frozen=True)
class Polygon(Shape):
    """
    Immutable filled polygon with a border band.

    Attributes:
        edges: Directed segments; edges[i].end must equal
            edges[(i + 1) % n].start

    Invariants:
        - at least one edge
        - edges chain end-to-start cyclically (winding direction is
          not enforced, see is_clockwise())
    """

    edges: Tuple[Segment, ...]

    @classmethod
    def from_vertices(
        cls,
        vertices: Iterable[VertexLike],
        fill_color: Color,
        border_color: Color,
        border_width: int,
        canvas_wh: Tuple[int, int],
    ) -> "Polygon":
        """
        Build a polygon by closing a vertex list into an edge loop.

        Args:
            vertices: Points or (x, y) pairs, in traversal order
            fill_color: Interior color
            border_color: Border color
            border_width: Border thickness in pixels
            canvas_wh: (width, height) of the target surface

        Returns:
            Polygon whose edges connect consecutive vertices and the
            last vertex back to the first

        Raises:
            InvalidPolygonError: If a vertex is not an (x, y) pair
            TypeError: If a coordinate is not an integer
        """
        points = [_as_point(i, v) for i, v in enumerate(vertices)]
        edges = tuple(
            Segment(start=points[i], end=points[(i + 1) % len(points)])
            for i in range(len(points))
        )
        return cls(
            fill_color=fill_color,
            border_color=border_color,
            border_width=border_width,
            canvas_wh=canvas_wh,
            edges=edges,
        )

    def _validate(self) -> None:
        edges = tuple(self.edges)
        object.__setattr__(self, 'edges', edges)

        if not edges:
            raise InvalidPolygonError("Polygon must have at least one edge")

        for i, edge in enumerate(edges):
            if not isinstance(edge, Segment):
                raise TypeError(f"edges[{i}] must be Segment, got {type(edge)}")

        for i, edge in enumerate(edges):
            following = edges[(i + 1) % len(edges)]
            if edge.end != following.start:
                raise InvalidPolygonError(
                    f"Polygon is not closed: edges[{i}] ends at "
                    f"{edge.end.to_tuple()} but edges[{(i + 1) % len(edges)}] "
                    f"starts at {following.start.to_tuple()}"
                )

    def _compute_bounding_box(self) -> BoundingBox:
        xs = [edge.start.x for edge in self.edges]
        ys = [edge.start.y for edge in self.edges]
        return BoundingBox.clamped(
            x_start=min(xs),
            x_end=max(xs),
            y_start=min(ys),
            y_end=max(ys),
            canvas_wh=self.canvas_wh,
        )

    @cached_property
    def edge_lines(self) -> Tuple[Line, ...]:
        return tuple(Line.from_points(edge.start, edge.end) for edge in self.edges)

    @property
    def vertices(self) -> Tuple[Point, ...]:
        return tuple(edge.start for edge in self.edges)

    def signed_area(self) -> float:
        """
        Shoelace area over the edge loop.

        Positive when the loop runs clockwise on screen (y axis pointing
        down), negative when counter-clockwise.
        """
        total = 0
        for edge in self.edges:
            total += edge.start.x * edge.end.y - edge.end.x * edge.start.y
        return total / 2

    def is_clockwise(self) -> bool:
        return self.signed_area() > 0

    def _ray_hits_edge(self, x: int, y: int, ray: Line, edge: Segment, edge_line: Line) -> bool:
        # Ray coincides with the edge's line
        if edge_line == ray:
            return False

        hit = ray.intersection(edge_line)
        if hit is None:
            return False
        hit_x, hit_y = hit

        if not min(edge.start.x, edge.end.x) <= hit_x <= max(edge.start.x, edge.end.x):
            return False
        if not min(edge.start.y, edge.end.y) <= hit_y < max(edge.start.y, edge.end.y):
            return False

        return hit_x > x

    def contains(self, x: int, y: int) -> bool:
        """
        Point-in-polygon test (boundary inclusive).

        Args:
            x: Pixel column
            y: Pixel row

        Returns:
            True if (x, y) lies on an edge or the rightward ray from it
            crosses the edges an odd number of times
        """
        if any(edge.contains_point(x, y) for edge in self.edges):
            return True

        ray = Line.horizontal(y)
        crossings = sum(
            1
            for edge, edge_line in zip(self.edges, self.edge_lines)
            if self._ray_hits_edge(x, y, ray, edge, edge_line)
        )
        return crossings % 2 == 1

    def is_border(self, x: int, y: int) -> bool:
        """
        True if (x, y) is within border_width of any edge's infinite line.

        Distance is to the line, not the segment: a pixel on the
        extension of a short edge is flagged too.
        """
        return any(
            edge_line.distance_to(x, y) <= self.border_width
            for edge_line in self.edge_lines
        )

    def classify(self, x: int, y: int) -> PixelKind:
        if not self.contains(x, y):
            return PixelKind.OUTSIDE
        if self.is_border(x, y):
            return PixelKind.BORDER
        return PixelKind.FILL


def _as_point(index: int, vertex: VertexLike) -> Point:
    if isinstance(vertex, Point):
        return vertex
    if isinstance(vertex, (str, bytes)) or not isinstance(vertex, Sequence) or len(vertex) != 2:
        raise InvalidPolygonError(
            f"vertices[{index}] must be an (x, y) pair, got {vertex!r}"
        )
    return Point(vertex[0], vertex[1])
