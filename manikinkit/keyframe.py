"""Keyframes: the pose of an object at one frame of an animation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple

Vec3 = Tuple[float, float, float]


def _vec3(values: Iterable[float], name: str) -> Vec3:
    items = tuple(float(v) for v in values)
    if len(items) != 3:
        raise ValueError(f"{name} needs exactly three components, got {len(items)}")
    return items  # type: ignore[return-value]


@dataclass
class Keyframe:
    """Position, scale and rotation of an object at one frame."""

    position: Vec3 = (0.0, 0.0, 0.0)
    scale: Vec3 = (1.0, 1.0, 1.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)
    recursive_scale: bool = field(default=False)

    def __post_init__(self) -> None:
        self.position = _vec3(self.position, "position")
        self.scale = _vec3(self.scale, "scale")
        self.rotation = _vec3(self.rotation, "rotation")

    def __setattr__(self, name: str, value: object) -> None:
        if name in ("position", "scale", "rotation"):
            value = _vec3(value, name)  # type: ignore[arg-type]
        super().__setattr__(name, value)