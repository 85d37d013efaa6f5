"""Pixel effects and channel operations on images."""

from __future__ import annotations

import math
from enum import Enum, IntEnum
from typing import Iterator

from .geometry import Circle, Rectangle
from .image import Image


class GrayscaleType(Enum):
    MIN = "min"
    MED = "med"
    MAX = "max"
    LIGHTNESS = "lightness"
    AVG = "avg"
    LUMINOSITY = "luminosity"


class Channel(IntEnum):
    RED = 0
    GREEN = 1
    BLUE = 2
    ALPHA = 3


class SeparationType(Enum):
    LIGHT = "light"
    DARK = "dark"


def _bounds(image: Image, area: Circle) -> tuple[int, int, int, int]:
    reach = int(area.radius)
    x1 = max(area.x - reach, 0)
    y1 = max(area.y - reach, 0)
    x2 = min(area.x + reach, image.width - 1)
    y2 = min(area.y + reach, image.height - 1)
    return x1, y1, x2, y2


def _circle_points(
    bounds: tuple[int, int, int, int], area: Circle
) -> Iterator[tuple[int, int, float, float, float]]:
    """Yield (x, y, dx, dy, distance) for pixels of the bounds inside the circle."""
    x1, y1, x2, y2 = bounds
    for i in range(y1, y2):
        for j in range(x1, x2):
            dx = float(j - area.x)
            dy = float(i - area.y)
            distance = math.sqrt(dx * dx + dy * dy)
            if distance <= area.radius:
                yield j, i, dx, dy, distance


def _pulled_toward_centre(area: Circle, dx: float, dy: float, distance: float) -> tuple[float, float]:
    scale = area.radius / distance if distance else math.inf
    return area.x + dx / scale, area.y + dy / scale


def black_hole_effect(image: Image, area: Circle) -> None:
    """Squeeze the pixels inside the circle toward its centre, in place.

    Pixels left empty by the squeeze are filled with the average of their
    already filled neighbours, or zero when there are none.
    """
    bounds = _bounds(image, area)
    x1, _, x2, y2 = bounds
    temp = image.copy()
    filled = [[False] * image.width for _ in range(image.height)]

    for j, i, dx, dy, distance in _circle_points(bounds, area):
        x_prime, y_prime = _pulled_toward_centre(area, dx, dy, distance)
        tx, ty = int(x_prime), int(y_prime)
        image.set_pixel_at(tx, ty, temp.pixel_at(j, i))
        filled[ty][tx] = True

    for j, i, _dx, _dy, _distance in _circle_points(bounds, area):
        if filled[i][j]:
            continue
        neighbours = []
        if i < y2 - 1 and filled[i + 1][j]:
            neighbours.append(image.pixel_at(j, i + 1))
        # The upper neighbour is bounded by the left edge of the area, not the top.
        if i > x1 and filled[i - 1][j]:
            neighbours.append(image.pixel_at(j, i - 1))
        if j < x2 - 1 and filled[i][j + 1]:
            neighbours.append(image.pixel_at(j + 1, i))
        if j > x1 and filled[i][j - 1]:
            neighbours.append(image.pixel_at(j - 1, i))
        if neighbours:
            count = len(neighbours)
            pixel = bytes(int(sum(values) / count) % 256 for values in zip(*neighbours))
        else:
            pixel = bytes(image.channels)
        image.set_pixel_at(j, i, pixel)
        filled[i][j] = True


def expand_effect(image: Image, area: Circle) -> None:
    """Magnify the centre of the circle outward, in place, with bilinear sampling."""
    bounds = _bounds(image, area)
    temp = image.copy()
    for j, i, dx, dy, distance in _circle_points(bounds, area):
        x_prime, y_prime = _pulled_toward_centre(area, dx, dy, distance)
        image.set_pixel_at(j, i, bilerp_pixels(temp, x_prime, y_prime))


def swirl_effect(image: Image, area: Circle, twists: int) -> None:
    """Twist the pixels inside the circle around its centre, in place.

    Samples that land outside the affected area become zero pixels.
    """
    if area.radius == 0:
        return
    bounds = _bounds(image, area)
    x1, y1, x2, y2 = bounds
    angle = (twists * 2.0 * math.pi) / area.radius
    temp = image.copy()
    for j, i, dx, dy, distance in _circle_points(bounds, area):
        theta = math.atan2(dy, dx) + angle * distance
        x_prime = area.x + int(math.cos(theta) * distance)
        y_prime = area.y + int(math.sin(theta) * distance)
        if x_prime >= x2 or x_prime < x1 or y_prime >= y2 or y_prime < y1:
            pixel = bytes(temp.channels)
        else:
            pixel = temp.pixel_at(x_prime, y_prime)
        image.set_pixel_at(j, i, pixel)


def copy_from_image(src: Image, selection: Rectangle) -> Image:
    """Return a new image holding the selected area of `src`.

    The selection may have a negative width or height.
    """
    x = min(selection.x1, selection.x2)
    y = min(selection.y1, selection.y2)
    width = abs(selection.width)
    height = abs(selection.height)
    data = bytearray()
    for row in range(height):
        for col in range(width):
            data += src.pixel_at(x + col, y + row)
    return Image(bytes(data), width, height, src.channels)


def paste_to_image(src: Image, dest: Image, x: int, y: int) -> None:
    """Copy `src` into `dest` with its corner at (x, y), clipped at the right and bottom."""
    width = min(dest.width - x, src.width)
    height = min(dest.height - y, src.height)
    for row in range(height):
        for col in range(width):
            dest.set_pixel_at(x + col, y + row, src.pixel_at(col, row))


def _median(r: int, g: int, b: int) -> int:
    hi, lo = max(r, g, b), min(r, g, b)
    for value in (r, g, b):
        if value != hi and value != lo:
            return value
    return r


_GRAY = {
    GrayscaleType.MIN: lambda r, g, b: min(r, g, b),
    GrayscaleType.MED: _median,
    GrayscaleType.MAX: lambda r, g, b: max(r, g, b),
    GrayscaleType.LIGHTNESS: lambda r, g, b: (max(r, g, b) + min(r, g, b)) // 2,
    GrayscaleType.AVG: lambda r, g, b: (r + g + b) // 3,
    GrayscaleType.LUMINOSITY: lambda r, g, b: (int(0.21 * r) + int(0.72 * g) + int(0.07 * b)) % 256,
}


def grayscale_image(src: Image, kind: GrayscaleType) -> Image:
    """Return a grey copy of `src`; channels past the third are kept."""
    channels = src.channels
    data = bytearray(src.data)
    if not data:
        return Image(b"", src.width, src.height, channels)
    if channels < 3:
        raise ValueError("grayscale conversion needs at least three channels")
    to_gray = _GRAY[GrayscaleType(kind)]
    for offset in range(0, len(data), channels):
        r, g, b = data[offset:offset + 3]
        gray = to_gray(r, g, b)
        data[offset:offset + 3] = bytes((gray, gray, gray))
    return Image(bytes(data), src.width, src.height, channels)


def _fill_channels(src: Image, targets: list[Channel], separation: SeparationType) -> Image:
    channels = src.channels
    data = bytearray(src.data)
    value = 255 if SeparationType(separation) is SeparationType.LIGHT else 0
    if channels:
        for channel in targets:
            index = int(channel)
            if index < channels:
                count = len(range(index, len(data), channels))
                data[index::channels] = bytes([value]) * count
    return Image(bytes(data), src.width, src.height, channels)


def separate_channel(src: Image, channel: Channel, separation: SeparationType) -> Image:
    """Return a copy keeping only `channel`; the others become full (light) or empty (dark)."""
    keep = Channel(channel)
    return _fill_channels(src, [c for c in Channel if c != keep], separation)


def subtract_channel(src: Image, channel: Channel, separation: SeparationType) -> Image:
    """Return a copy with `channel` made full (light) or empty (dark)."""
    return _fill_channels(src, [Channel(channel)], separation)


def lerp_pixels(a: bytes, b: bytes, t: float) -> bytes:
    """Interpolate two pixels channel by channel, truncating the results."""
    return bytes(int(pa + (pb - pa) * t) % 256 for pa, pb in zip(a, b))


def bilerp_pixels(image: Image, x: float, y: float) -> bytes:
    """Sample `image` at a fractional position with bilinear interpolation."""
    x_floor, x_ceil = math.floor(x), math.ceil(x)
    y_floor, y_ceil = math.floor(y), math.ceil(y)
    x_rem = x - x_floor
    y_rem = y - y_floor
    y_fractional = y != y_floor

    if x != x_floor:
        bottom = lerp_pixels(image.pixel_at(x_floor, y_floor), image.pixel_at(x_ceil, y_floor), x_rem)
        top = (
            lerp_pixels(image.pixel_at(x_floor, y_ceil), image.pixel_at(x_ceil, y_ceil), x_rem)
            if y_fractional
            else None
        )
    else:
        bottom = image.pixel_at(x_floor, y_floor)
        top = image.pixel_at(x_floor, y_ceil) if y_fractional else None

    if top is not None:
        return lerp_pixels(bottom, top, y_rem)
    return bottom