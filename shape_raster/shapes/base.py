"""
Shape Base Module
=================

Common state and the render contract shared by every shape.

Design:
- Immutable shapes (frozen dataclass pattern)
- Bounding box computed once at construction, never recomputed
- Per-pixel classification (outside / fill / border) is the only
  per-shape logic; the scan loop lives here
- Rendering is idempotent (no state mutates during render)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterator, Optional, Tuple

import supervision as sv

from shape_raster.color import Color
from shape_raster.geometry.primitives import require_integer
from shape_raster.logging import LogEvent, create_logger

if TYPE_CHECKING:
    from shape_raster.rendering.sinks import PixelSink

logger = create_logger("shapes")


class PixelKind(str, Enum):
    """Classification of a pixel relative to a shape."""

    OUTSIDE = "outside"
    FILL = "fill"
    BORDER = "border"


@dataclass(frozen=True)
class BoundingBox:
    """
    Immutable inclusive pixel rectangle.

    An empty box (x_start > x_end or y_start > y_end) scans no pixels;
    this happens when a shape lies entirely off-canvas.

    Attributes:
        x_start: First column (inclusive)
        x_end: Last column (inclusive)
        y_start: First row (inclusive)
        y_end: Last row (inclusive)
    """

    x_start: int
    x_end: int
    y_start: int
    y_end: int

    @classmethod
    def clamped(
        cls,
        x_start: int,
        x_end: int,
        y_start: int,
        y_end: int,
        canvas_wh: Tuple[int, int],
    ) -> "BoundingBox":
        """Clamp raw extents into [0, width-1] x [0, height-1]."""
        width, height = canvas_wh
        return cls(
            x_start=max(x_start, 0),
            x_end=min(x_end, width - 1),
            y_start=max(y_start, 0),
            y_end=min(y_end, height - 1),
        )

    @property
    def is_empty(self) -> bool:
        return self.x_start > self.x_end or self.y_start > self.y_end

    @property
    def width(self) -> int:
        return max(self.x_end - self.x_start + 1, 0)

    @property
    def height(self) -> int:
        return max(self.y_end - self.y_start + 1, 0)

    def contains(self, x: int, y: int) -> bool:
        return self.x_start <= x <= self.x_end and self.y_start <= y <= self.y_end

    def pixels(self) -> Iterator[Tuple[int, int]]:
        """Scan order: column by column, top to bottom within a column."""
        for x in range(self.x_start, self.x_end + 1):
            for y in range(self.y_start, self.y_end + 1):
                yield x, y

    def as_sv_rect(self) -> sv.Rect:
        return sv.Rect(x=self.x_start, y=self.y_start, width=self.width, height=self.height)


@dataclass(frozen=True)
class RenderStats:
    """
    Immutable summary of one render pass.

    Attributes:
        fill_pixels: Pixels emitted with the fill color
        border_pixels: Pixels emitted with the border color
    """

    fill_pixels: int = 0
    border_pixels: int = 0

    @property
    def total_pixels(self) -> int:
        return self.fill_pixels + self.border_pixels

    def __str__(self) -> str:
        return f"fill={self.fill_pixels}, border={self.border_pixels}"


@dataclass(frozen=True)
class Shape(ABC):
    """
    Abstract rasterizable shape.

    Attributes:
        fill_color: Color of interior pixels
        border_color: Color of pixels within border_width of the outline
        border_width: Outline thickness in pixels (>= 0)
        canvas_wh: (width, height) of the target surface

    Subclasses implement _compute_bounding_box() and classify(); they may
    override _validate() to add their own construction checks.
    """

    fill_color: Color
    border_color: Color
    border_width: int
    canvas_wh: Tuple[int, int]

    def __post_init__(self):
        """Validate inputs and compute the bounding box."""
        try:
            self._validate_common()
            self._validate()
        except (TypeError, ValueError) as e:
            logger.warning(
                event=LogEvent.SHAPE_REJECTED,
                message=f"Rejected {type(self).__name__}",
                metadata={'shape': type(self).__name__},
                exc_info=e,
            )
            raise

        object.__setattr__(self, '_bounding_box', self._compute_bounding_box())

        logger.debug(
            event=LogEvent.SHAPE_CREATED,
            message=f"Created {type(self).__name__}",
            metadata={
                'shape': type(self).__name__,
                'bounding_box': [
                    self.bounding_box.x_start,
                    self.bounding_box.x_end,
                    self.bounding_box.y_start,
                    self.bounding_box.y_end,
                ],
            },
        )

    def _validate_common(self) -> None:
        if not isinstance(self.fill_color, Color):
            raise TypeError(f"fill_color must be Color, got {type(self.fill_color)}")
        if not isinstance(self.border_color, Color):
            raise TypeError(f"border_color must be Color, got {type(self.border_color)}")
        border_width = require_integer("border_width", self.border_width)
        if border_width < 0:
            raise ValueError(f"border_width must be >= 0, got {border_width}")
        object.__setattr__(self, 'border_width', border_width)

        width, height = self.canvas_wh
        width = require_integer("canvas width", width)
        height = require_integer("canvas height", height)
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas_wh must be positive, got {self.canvas_wh}")
        object.__setattr__(self, 'canvas_wh', (width, height))

    def _validate(self) -> None:
        """Shape-specific validation hook."""

    @abstractmethod
    def _compute_bounding_box(self) -> BoundingBox:
        ...

    @abstractmethod
    def classify(self, x: int, y: int) -> PixelKind:
        """Classify pixel (x, y) as outside, fill or border."""
        ...

    @property
    def bounding_box(self) -> BoundingBox:
        return self._bounding_box

    def color_for(self, kind: PixelKind) -> Optional[Color]:
        if kind is PixelKind.FILL:
            return self.fill_color
        if kind is PixelKind.BORDER:
            return self.border_color
        return None

    def _scan(self) -> Iterator[Tuple[int, int, PixelKind]]:
        for x, y in self.bounding_box.pixels():
            kind = self.classify(x, y)
            if kind is not PixelKind.OUTSIDE:
                yield x, y, kind

    def pixels(self) -> Iterator[Tuple[int, int, Color]]:
        """
        Scan the bounding box and yield every colored pixel.

        Yields:
            (x, y, color) for each pixel inside the shape, at most once
            per pixel, never outside the bounding box
        """
        for x, y, kind in self._scan():
            yield x, y, self.color_for(kind)

    def render(self, sink: "PixelSink") -> RenderStats:
        """
        Emit this shape's pixels into a sink.

        Args:
            sink: Pixel output (set_pixel(x, y, (r, g, b)))

        Returns:
            Counts of fill and border pixels emitted
        """
        fill_pixels = 0
        border_pixels = 0

        for x, y, kind in self._scan():
            sink.set_pixel(x, y, self.color_for(kind).components())
            if kind is PixelKind.BORDER:
                border_pixels += 1
            else:
                fill_pixels += 1

        stats = RenderStats(fill_pixels=fill_pixels, border_pixels=border_pixels)
        logger.debug(
            event=LogEvent.SHAPE_RENDERED,
            message=f"Rendered {type(self).__name__}",
            metadata={
                'shape': type(self).__name__,
                'fill_pixels': stats.fill_pixels,
                'border_pixels': stats.border_pixels,
            },
        )
        return stats
