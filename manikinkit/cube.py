"""Vertex data for a unit cube centred on the origin."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from .color import ColorRGBA

Vec3 = Tuple[float, float, float]
Vec4 = Tuple[float, float, float, float]

_H = 0.5

# Each face: outward normal and its four corners, counter-clockwise seen from outside.
_FACES: tuple[tuple[Vec3, tuple[Vec3, Vec3, Vec3, Vec3]], ...] = (
    ((0.0, 0.0, 1.0), ((-_H, -_H, _H), (_H, -_H, _H), (_H, _H, _H), (-_H, _H, _H))),
    ((0.0, 0.0, -1.0), ((_H, -_H, -_H), (-_H, -_H, -_H), (-_H, _H, -_H), (_H, _H, -_H))),
    ((-1.0, 0.0, 0.0), ((-_H, -_H, -_H), (-_H, -_H, _H), (-_H, _H, _H), (-_H, _H, -_H))),
    ((1.0, 0.0, 0.0), ((_H, -_H, _H), (_H, -_H, -_H), (_H, _H, -_H), (_H, _H, _H))),
    ((0.0, 1.0, 0.0), ((-_H, _H, _H), (_H, _H, _H), (_H, _H, -_H), (-_H, _H, -_H))),
    ((0.0, -1.0, 0.0), ((-_H, -_H, -_H), (_H, -_H, -_H), (_H, -_H, _H), (-_H, -_H, _H))),
)

_TRIANGLE_CORNERS = (0, 1, 2, 0, 2, 3)


@dataclass(frozen=True)
class CubeVertex:
    """A cube vertex: homogeneous position, colour and normal."""

    position: Vec4
    color: ColorRGBA
    normal: Vec3


def cube_vertices(face_colors: Sequence[ColorRGBA]) -> list[CubeVertex]:
    """The 36 vertices (12 triangles) of a unit cube, one colour per face.

    Faces come in the order front (+z), back (-z), left (-x), right (+x),
    top (+y), bottom (-y).
    """
    if len(face_colors) != len(_FACES):
        raise ValueError(f"a cube needs {len(_FACES)} face colours, got {len(face_colors)}")
    return [
        CubeVertex((*corners[c], 1.0), color, normal)
        for (normal, corners), color in zip(_FACES, face_colors)
        for c in _TRIANGLE_CORNERS
    ]


def solid_cube_vertices(color: ColorRGBA) -> list[CubeVertex]:
    """The 36 vertices of a unit cube in a single colour."""
    return cube_vertices([color] * len(_FACES))