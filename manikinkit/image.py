"""In-memory images stored as interleaved 8-bit channels."""

from __future__ import annotations

import os

from PIL import Image as _PILImage

_NEGATE = bytes(range(255, -1, -1))


class Image:
    """A width x height image with `channels` bytes per pixel, row by row."""

    def __init__(self, data: bytes = b"", width: int = 0, height: int = 0, channels: int = 0):
        self.width = 0
        self.height = 0
        self.channels = 0
        self._data = bytearray()
        self.set_image(data, width, height, channels)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> Image:
        """Load an image file, converted to RGBA."""
        with _PILImage.open(path) as img:
            rgba = img.convert("RGBA")
            return cls(rgba.tobytes(), rgba.width, rgba.height, 4)

    def copy(self) -> Image:
        return Image(self._data, self.width, self.height, self.channels)

    @property
    def data(self) -> bytes:
        """A copy of the pixel bytes."""
        return bytes(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            (self.width, self.height, self.channels) == (other.width, other.height, other.channels)
            and self._data == other._data
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height}, channels={self.channels})"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return (y * self.width + x) * self.channels

    def pixel_at(self, x: int, y: int) -> bytes:
        """The channel bytes of the pixel at (x, y)."""
        offset = self._offset(x, y)
        return bytes(self._data[offset:offset + self.channels])

    def set_pixel_at(self, x: int, y: int, value: bytes) -> None:
        """Overwrite as many channels of pixel (x, y) as both sides have."""
        offset = self._offset(x, y)
        count = min(self.channels, len(value))
        self._data[offset:offset + count] = bytes(value[:count])

    def set_image(self, data: bytes, width: int, height: int, channels: int) -> None:
        """Replace the whole image with a copy of `data`."""
        if width < 0 or height < 0 or channels < 0:
            raise ValueError("image dimensions must not be negative")
        size = width * height * channels
        if len(data) < size:
            raise ValueError(f"need {size} bytes of image data, got {len(data)}")
        self.width = width
        self.height = height
        self.channels = channels
        self._data = bytearray(data[:size])

    def _rows(self) -> list[bytearray]:
        stride = self.width * self.channels
        return [self._data[start:start + stride] for start in range(0, stride * self.height, stride)]

    def flip_horizontal(self) -> None:
        """Mirror every row left to right."""
        if self.channels == 0:
            return
        ch = self.channels
        flipped = bytearray()
        for row in self._rows():
            pixels = [row[i:i + ch] for i in range(0, len(row), ch)]
            for pixel in reversed(pixels):
                flipped += pixel
        self._data = flipped

    def flip_vertical(self) -> None:
        """Mirror the rows top to bottom."""
        if self.channels == 0 or self.width == 0:
            return
        self._data = bytearray().join(reversed(self._rows()))

    def negative(self) -> None:
        """Invert every channel value."""
        self._data = bytearray(self._data.translate(_NEGATE))