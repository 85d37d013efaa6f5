"""Light sources: a homogeneous position with a colour and a kind."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .color import ColorRGBA


class LightSourceType(Enum):
    POINT = 0
    DIRECTIONAL = 1


@dataclass
class LightSource:
    """A light at (x, y, z, w) with a colour."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0
    color: ColorRGBA = field(default_factory=lambda: ColorRGBA(1.0, 1.0, 1.0, 1.0))
    kind: LightSourceType = LightSourceType.POINT

    @property
    def position(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    def set_color(self, red: float, green: float, blue: float, alpha: float = 1.0) -> None:
        self.color = ColorRGBA(red, green, blue, alpha)