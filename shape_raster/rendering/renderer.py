"""
Scene Renderer Module
=====================

Renders a list of shapes onto a numpy frame.

Design:
- Shapes render themselves; this layer only orders them and owns the
  frame
- Sequential rendering in list order (later shapes overwrite earlier)
- Optional debug overlay of bounding boxes via supervision

Dependencies:
- supervision (draw utilities, Color)
- numpy (frames)
"""

from typing import List, Sequence, Tuple

import numpy as np
import supervision as sv

from shape_raster.color import Color
from shape_raster.logging import LogEvent, create_logger
from shape_raster.rendering.sinks import FrameSink
from shape_raster.shapes.base import RenderStats, Shape

logger = create_logger("renderer")


class SceneRenderer:
    """
    Renders shapes onto frames.

    Usage:
        renderer = SceneRenderer(background=Color(0, 0, 0))

        frame = renderer.render(shapes, canvas_wh=(320, 240))

        # Debug overlay
        frame = renderer.draw_bounding_boxes(frame, shapes)
    """

    def __init__(
        self,
        background: Color = Color(0, 0, 0),
        bounds_color: sv.Color = sv.Color(r=255, g=0, b=255),
        bounds_thickness: int = 1,
    ):
        """
        Args:
            background: Fill color of new frames
            bounds_color: Outline color for bounding-box overlay
            bounds_thickness: Outline thickness for bounding-box overlay
        """
        self.background = background
        self.bounds_color = bounds_color
        self.bounds_thickness = bounds_thickness

    def new_frame(self, canvas_wh: Tuple[int, int]) -> np.ndarray:
        return FrameSink.blank_frame(canvas_wh, self.background)

    def render_onto(self, frame: np.ndarray, shapes: Sequence[Shape]) -> List[RenderStats]:
        """
        Render shapes into an existing frame (mutated in place).

        Args:
            frame: Target BGR frame
            shapes: Shapes in drawing order

        Returns:
            Per-shape render stats, in the same order

        Raises:
            ValueError: If a shape was built for a canvas larger than
                the frame
        """
        sink = FrameSink(frame)
        frame_w, frame_h = sink.size_wh
        for i, shape in enumerate(shapes):
            shape_w, shape_h = shape.canvas_wh
            if shape_w > frame_w or shape_h > frame_h:
                raise ValueError(
                    f"shapes[{i}] canvas {shape.canvas_wh} does not fit "
                    f"frame {sink.size_wh}"
                )

        stats = [shape.render(sink) for shape in shapes]

        logger.info(
            event=LogEvent.SCENE_RENDERED,
            message=f"Rendered {len(shapes)} shapes",
            metadata={
                'frame_wh': list(sink.size_wh),
                'shape_count': len(shapes),
                'fill_pixels': sum(s.fill_pixels for s in stats),
                'border_pixels': sum(s.border_pixels for s in stats),
            },
        )
        return stats

    def render(self, shapes: Sequence[Shape], canvas_wh: Tuple[int, int]) -> np.ndarray:
        """
        Render shapes onto a fresh background frame.

        Returns:
            New (height, width, 3) uint8 BGR frame
        """
        frame = self.new_frame(canvas_wh)
        self.render_onto(frame, shapes)
        return frame

    def draw_bounding_boxes(self, frame: np.ndarray, shapes: Sequence[Shape]) -> np.ndarray:
        """
        Outline each shape's bounding box (empty boxes are skipped).

        Returns:
            Copy of the frame with outlines drawn
        """
        frame = frame.copy()
        for shape in shapes:
            if shape.bounding_box.is_empty:
                continue
            frame = sv.draw_rectangle(
                scene=frame,
                rect=shape.bounding_box.as_sv_rect(),
                color=self.bounds_color,
                thickness=self.bounds_thickness,
            )
        return frame
