"""RGBA colours with float channels."""

from __future__ import annotations

from dataclasses import astuple, dataclass


@dataclass
class ColorRGBA:
    """A colour with red, green, blue and alpha channels, normally in [0, 1]."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0
    alpha: float = 1.0

    def as_tuple(self) -> tuple[float, float, float, float]:
        """The channels as (red, green, blue, alpha)."""
        return astuple(self)


CORNFLOWER_BLUE = ColorRGBA(100.0 / 255.0, 149.0 / 255.0, 237.0 / 255.0, 1.0)