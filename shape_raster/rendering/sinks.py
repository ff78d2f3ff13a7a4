"""
Pixel Sinks Module
==================

Pixel output targets for shape rendering.

Design:
- PixelSink protocol: the single operation every shape needs
- FrameSink writes into a numpy frame (BGR, the OpenCV/supervision
  convention)
- RecordingSink keeps the call sequence (diffing, inspection)
"""

from typing import Dict, List, Protocol, Tuple

import numpy as np

from shape_raster.color import Color

RGB = Tuple[int, int, int]


class PixelSink(Protocol):
    """Protocol for pixel outputs (interface)."""

    def set_pixel(self, x: int, y: int, color: RGB) -> None:
        """Write color (r, g, b) at pixel (x, y)."""
        ...


class FrameSink:
    """
    Writes pixels into an (H, W, 3) uint8 frame in BGR order.

    The frame is mutated in place.

    Usage:
        frame = FrameSink.blank_frame((320, 240))
        sink = FrameSink(frame)
        circle.render(sink)
        cv2.imwrite("out.png", frame)
    """

    def __init__(self, frame: np.ndarray):
        """
        Args:
            frame: Target frame, shape (height, width, 3), dtype uint8
        """
        if not isinstance(frame, np.ndarray):
            raise TypeError(f"frame must be np.ndarray, got {type(frame)}")
        if frame.ndim != 3 or frame.shape[2] != 3:
            raise ValueError(f"frame must be HxWx3, got shape {frame.shape}")
        if frame.dtype != np.uint8:
            raise ValueError(f"frame must be uint8, got {frame.dtype}")

        self.frame = frame

    @staticmethod
    def blank_frame(
        canvas_wh: Tuple[int, int],
        background: Color = Color(0, 0, 0),
    ) -> np.ndarray:
        """Create a frame of the given size filled with a background color."""
        width, height = canvas_wh
        frame = np.empty((height, width, 3), dtype=np.uint8)
        frame[:, :] = background.as_bgr()
        return frame

    @property
    def size_wh(self) -> Tuple[int, int]:
        return self.frame.shape[1], self.frame.shape[0]

    def set_pixel(self, x: int, y: int, color: RGB) -> None:
        width, height = self.size_wh
        # Negative indices would wrap silently in numpy
        if not (0 <= x < width and 0 <= y < height):
            raise IndexError(f"Pixel ({x}, {y}) outside frame {width}x{height}")

        r, g, b = color
        self.frame[y, x] = (b, g, r)


class RecordingSink:
    """
    Records every set_pixel call in order.

    Attributes:
        calls: List of (x, y, (r, g, b)) in emission order
    """

    def __init__(self):
        self.calls: List[Tuple[int, int, RGB]] = []

    def set_pixel(self, x: int, y: int, color: RGB) -> None:
        self.calls.append((x, y, tuple(color)))

    def pixel_map(self) -> Dict[Tuple[int, int], RGB]:
        """Final color per pixel (later calls overwrite earlier ones)."""
        return {(x, y): color for x, y, color in self.calls}

    def __len__(self) -> int:
        return len(self.calls)
