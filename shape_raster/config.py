"""
Configuration schema for scene rendering.

This module defines the scene description: canvas size, background and
the list of shapes to rasterize, loaded from YAML and validated at
startup.
"""

import numbers
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Tuple
import yaml

from shape_raster.color import Color
from shape_raster.geometry.primitives import Point
from shape_raster.logging import LogEvent, create_logger
from shape_raster.shapes import Circle, Polygon, Shape

logger = create_logger("config")


def _is_integer(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _int_tuple(name: str, value: Any, length: int) -> Tuple[int, ...]:
    """Validate a YAML list of integers with a fixed length."""
    if not isinstance(value, (list, tuple)) or len(value) != length:
        raise ValueError(f"{name} must be a list of {length} integers, got {value!r}")
    if not all(_is_integer(v) for v in value):
        raise ValueError(f"{name} must contain only integers, got {value!r}")
    return tuple(int(v) for v in value)


@dataclass(frozen=True)
class ShapeConfig:
    """Single shape configuration (circle or polygon)."""

    shape_type: str  # "circle" or "polygon"
    fill_color: Tuple[int, int, int]
    border_color: Tuple[int, int, int]
    border_width: int = 1
    center: Optional[Tuple[int, int]] = None  # circle
    radius: Optional[int] = None  # circle
    vertices: List[Tuple[int, int]] = field(default_factory=list)  # polygon

    def __post_init__(self):
        """Validate shape configuration."""
        object.__setattr__(self, 'fill_color', _int_tuple("fill_color", self.fill_color, 3))
        object.__setattr__(self, 'border_color', _int_tuple("border_color", self.border_color, 3))

        if not _is_integer(self.border_width) or self.border_width < 0:
            raise ValueError(
                f"border_width must be an integer >= 0, got {self.border_width!r}"
            )

        if self.shape_type == "circle":
            if self.center is None:
                raise ValueError("Circle needs a center [x, y]")
            object.__setattr__(self, 'center', _int_tuple("center", self.center, 2))
            if not _is_integer(self.radius) or self.radius < 0:
                raise ValueError(
                    f"Circle needs an integer radius >= 0, got {self.radius!r}"
                )
        elif self.shape_type == "polygon":
            if not isinstance(self.vertices, (list, tuple)) or len(self.vertices) < 3:
                raise ValueError(
                    f"Polygon must have a list of at least 3 vertices, "
                    f"got {self.vertices!r}"
                )
            object.__setattr__(self, 'vertices', [
                _int_tuple(f"vertices[{i}]", v, 2)
                for i, v in enumerate(self.vertices)
            ])
        else:
            raise ValueError(
                f"Invalid shape_type: {self.shape_type}. "
                f"Must be 'circle' or 'polygon'"
            )

    @classmethod
    def from_dict(cls, data: dict) -> "ShapeConfig":
        if not isinstance(data, dict):
            raise ValueError(f"Shape entry must be a mapping, got {data!r}")
        try:
            return cls(
                shape_type=data["shape_type"],
                fill_color=data["fill_color"],
                border_color=data["border_color"],
                border_width=data.get("border_width", 1),
                center=data.get("center"),
                radius=data.get("radius"),
                vertices=data.get("vertices", []),
            )
        except KeyError as e:
            raise ValueError(f"Missing required shape field: {e}")
        except (TypeError, IndexError) as e:
            raise ValueError(f"Malformed shape entry: {e}")

    def build(self, canvas_wh: Tuple[int, int]) -> Shape:
        """
        Build the shape this config describes.

        Raises:
            InvalidColorError: If a color channel is out of range
        """
        fill_color = Color.from_sequence(self.fill_color)
        border_color = Color.from_sequence(self.border_color)

        if self.shape_type == "circle":
            return Circle(
                fill_color=fill_color,
                border_color=border_color,
                border_width=self.border_width,
                canvas_wh=canvas_wh,
                center=Point(*self.center),
                radius=self.radius,
            )

        return Polygon.from_vertices(
            self.vertices,
            fill_color=fill_color,
            border_color=border_color,
            border_width=self.border_width,
            canvas_wh=canvas_wh,
        )


@dataclass(frozen=True)
class SceneConfig:
    """
    Scene description.

    Immutable after construction (frozen dataclass).
    """

    canvas_wh: Tuple[int, int] = (320, 240)  # (width, height)
    background: Tuple[int, int, int] = (0, 0, 0)
    shapes: List[ShapeConfig] = field(default_factory=list)

    def __post_init__(self):
        """Validate scene configuration."""
        canvas_wh = _int_tuple("canvas_wh", self.canvas_wh, 2)
        width, height = canvas_wh
        if width <= 0 or height <= 0:
            raise ValueError(
                f"canvas_wh must have positive dimensions, got {self.canvas_wh}"
            )
        if width > 8192 or height > 8192:
            raise ValueError(
                f"canvas_wh dimensions too large (max 8192x8192), got {self.canvas_wh}"
            )
        object.__setattr__(self, 'canvas_wh', canvas_wh)
        object.__setattr__(self, 'background', _int_tuple("background", self.background, 3))

    def background_color(self) -> Color:
        return Color.from_sequence(self.background)

    def build_shapes(self) -> List[Shape]:
        """Build every configured shape, in drawing order."""
        return [shape.build(self.canvas_wh) for shape in self.shapes]

    @classmethod
    def from_dict(cls, data: dict) -> "SceneConfig":
        if not isinstance(data, dict):
            raise ValueError(
                f"Scene config must be a mapping, got {type(data).__name__}"
            )
        shapes = data.get("shapes", [])
        if not isinstance(shapes, list):
            raise ValueError(f"shapes must be a list, got {type(shapes).__name__}")
        return cls(
            canvas_wh=data.get("canvas_wh", [320, 240]),
            background=data.get("background", [0, 0, 0]),
            shapes=[ShapeConfig.from_dict(s) for s in shapes],
        )

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "SceneConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            canvas_wh: [320, 240]  # [width, height]
            background: [0, 0, 0]

            shapes:
              - shape_type: "circle"
                center: [80, 80]
                radius: 40
                fill_color: [255, 200, 0]
                border_color: [255, 255, 255]
                border_width: 3

              - shape_type: "polygon"
                vertices: [[150, 40], [300, 40], [300, 200], [150, 200]]
                fill_color: [0, 120, 255]
                border_color: [255, 255, 255]
                border_width: 2

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If YAML is invalid or a value fails validation
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Scene config not found: {yaml_path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
            config = cls.from_dict(data)
        except (yaml.YAMLError, ValueError) as e:
            logger.error(
                event=LogEvent.CONFIG_ERROR,
                message=f"Invalid scene config: {path}",
                metadata={'path': str(path)},
                exc_info=e,
            )
            if isinstance(e, yaml.YAMLError):
                raise ValueError(f"Invalid YAML in {yaml_path}: {e}")
            raise

        logger.info(
            event=LogEvent.SCENE_LOADED,
            message=f"Loaded scene with {len(config.shapes)} shapes",
            metadata={'path': str(path), 'canvas_wh': list(config.canvas_wh)},
        )
        return config
