"""Color model: an opaque 0-255 integer RGB triplet."""

from __future__ import annotations

import math
from dataclasses import dataclass


def clamp_byte(n: float) -> int:
    """Round half-up and clamp to the 0..255 channel range.

    Infinities clamp to the nearest bound.  NaN has no channel value and
    raises ``ValueError``; parsers reject it before getting here.
    """
    if math.isinf(n):
        return 255 if n > 0 else 0
    return max(0, min(255, math.floor(n + 0.5)))


def format_alpha(alpha: float) -> str:
    """Render an alpha the way CSS authors write it: ``0.5``, ``1``, ``0``."""
    if float(alpha).is_integer():
        return str(int(alpha))
    return repr(float(alpha))


@dataclass(frozen=True)
class Color:
    """A solid sRGB color with integer channels clamped to [0, 255]."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in ("r", "g", "b"):
            value = getattr(self, channel)
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {channel} out of range: {value}")

    @classmethod
    def from_floats(cls, r: float, g: float, b: float) -> Color:
        return cls(clamp_byte(r), clamp_byte(g), clamp_byte(b))

    def triplet(self) -> str:
        """Return the channels as ``"r, g, b"`` for a triplet custom property."""
        return f"{self.r}, {self.g}, {self.b}"

    def rgba(self, alpha: float) -> str:
        """Return a literal ``rgba()`` expression at the given alpha."""
        return f"rgba({self.triplet()}, {format_alpha(alpha)})"
