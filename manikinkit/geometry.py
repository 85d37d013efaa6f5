"""Simple 2D shapes and points used by image effects and input handling."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """Axis-aligned rectangle given by a corner and a (possibly negative) size."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def is_zero_dimensional(self) -> bool:
        """True when every coordinate and dimension is zero."""
        return self.x == 0 and self.y == 0 and self.width == 0 and self.height == 0

    @property
    def x1(self) -> int:
        return self.x

    @x1.setter
    def x1(self, value: int) -> None:
        self.x = value

    @property
    def y1(self) -> int:
        return self.y

    @y1.setter
    def y1(self, value: int) -> None:
        self.y = value

    @property
    def x2(self) -> int:
        return self.x + self.width

    @x2.setter
    def x2(self, value: int) -> None:
        self.width = value - self.x

    @property
    def y2(self) -> int:
        return self.y + self.height

    @y2.setter
    def y2(self, value: int) -> None:
        self.height = value - self.y

    def __str__(self) -> str:
        return (
            "Rectangle:\n"
            f"\tx1:\t{self.x:5d}\n"
            f"\ty1:\t{self.y:5d}\n"
            f"\tx2:\t{self.x2:5d}\n"
            f"\ty2:\t{self.y2:5d}\n"
            f"\twidth:\t{self.width:5d}\n"
            f"\theight:\t{self.height:5d}\n"
        )


@dataclass
class Circle:
    """Circle given by an integer centre and a radius."""

    x: int = 0
    y: int = 0
    radius: float = 0.0

    def is_zero_dimensional(self) -> bool:
        """True when the centre is the origin and the radius is zero."""
        return self.x == 0 and self.y == 0 and self.radius == 0.0

    @property
    def diameter(self) -> float:
        return self.radius * 2.0

    @diameter.setter
    def diameter(self, value: float) -> None:
        self.radius = value / 2.0

    def __str__(self) -> str:
        return (
            "Circle:\n"
            f"\tCenter x1:\t{self.x:8d}\n"
            f"\tCenter y1:\t{self.y:8d}\n"
            f"\tradius:\t{self.radius:8f}\n"
        )


@dataclass
class Point2D:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Point3D:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Point4D:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0