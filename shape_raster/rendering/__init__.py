"""
Rendering Layer
===============

Bounded Context: Pixel output.

Responsibilities:
- Pixel sinks (numpy frame, recording)
- Scene rendering in drawing order
- Bounding-box debug overlay

Non-responsibilities:
- Pixel classification (handled by shapes)
- Scene loading (handled by config)
"""

from shape_raster.rendering.sinks import PixelSink, FrameSink, RecordingSink
from shape_raster.rendering.renderer import SceneRenderer

__all__ = [
    "PixelSink",
    "FrameSink",
    "RecordingSink",
    "SceneRenderer",
]
