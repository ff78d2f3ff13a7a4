"""
Color Value Module
==================

Validated, immutable RGB triple.

Design:
- Frozen dataclass (immutable after construction)
- Fail-fast validation in __post_init__
- Interop with supervision's Color for drawing overlays
"""

import numbers
from dataclasses import dataclass
from typing import Sequence, Tuple

import supervision as sv

from shape_raster.errors import InvalidColorError

COLOR_MIN_VALUE = 0
COLOR_MAX_VALUE = 255


@dataclass(frozen=True)
class Color:
    """
    Immutable RGB color.

    Attributes:
        r: Red channel
        g: Green channel
        b: Blue channel

    Invariants:
        - every channel is an integer in [COLOR_MIN_VALUE, COLOR_MAX_VALUE]

    Example:
        >>> Color(255, 128, 0).components()
        (255, 128, 0)
    """

    r: int
    g: int
    b: int

    def __post_init__(self):
        """Validate channels."""
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidColorError(
                    f"Color channel {name} must be an integer, got {value!r}"
                )
            if not COLOR_MIN_VALUE <= value <= COLOR_MAX_VALUE:
                raise InvalidColorError(
                    f"Color channel {name} must be in "
                    f"[{COLOR_MIN_VALUE}, {COLOR_MAX_VALUE}], got {value}"
                )
            object.__setattr__(self, name, int(value))

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "Color":
        """
        Build a color from an [r, g, b] sequence (e.g. parsed YAML).

        Raises:
            InvalidColorError: If the sequence is not 3 long or a channel
                is out of range
        """
        if not isinstance(values, Sequence) or isinstance(values, str) or len(values) != 3:
            raise InvalidColorError(
                f"Color needs exactly 3 channels, got {values!r}"
            )
        r, g, b = values
        return cls(r=r, g=g, b=b)

    def components(self) -> Tuple[int, int, int]:
        """The validated (r, g, b) triple."""
        return self.r, self.g, self.b

    def as_bgr(self) -> Tuple[int, int, int]:
        return self.b, self.g, self.r

    def as_sv_color(self) -> sv.Color:
        return sv.Color(r=self.r, g=self.g, b=self.b)
