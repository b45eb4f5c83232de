"""RGBA images held as raw bytes, read from and written to PNG."""

from __future__ import annotations

import os
from typing import Optional, Union

from PIL import Image as _PILImage

__all__ = ["Image"]

_PathLike = Union[str, "os.PathLike[str]"]


class Image:
    """An image of ``width`` by ``height`` pixels, four bytes (RGBA) per pixel.

    Rows are stored top to bottom. ``pixels`` is ``None`` for an image that
    holds no data, which makes it invalid.
    """

    def __init__(self, width: int, height: int, pixels: Optional[bytes] = None):
        if width < 0 or height < 0:
            raise ValueError("image dimensions cannot be negative")
        data: Optional[bytearray] = None
        if pixels is not None:
            data = bytearray(pixels)
            if len(data) != width * height * 4:
                raise ValueError(
                    f"expected {width * height * 4} bytes of pixels, got {len(data)}"
                )
        self.width = width
        self.height = height
        self.pixels = data

    @classmethod
    def from_png(cls, path: _PathLike) -> "Image":
        """Read a PNG file and convert it to 8-bit RGBA.

        Raises OSError if the file cannot be opened or is not an image.
        """
        with _PILImage.open(path) as source:
            rgba = source.convert("RGBA")
            return cls(rgba.width, rgba.height, rgba.tobytes())

    @classmethod
    def sheet(cls, width: int, height: int) -> "Image":
        """Return a fully transparent black image of the given size."""
        return cls(width, height, bytes(width * height * 4))

    @classmethod
    def empty(cls) -> "Image":
        """Return a zero-sized image with no pixel data."""
        return cls(0, 0, None)

    def _data(self) -> bytearray:
        if self.pixels is None:
            raise ValueError("image has no pixel data")
        return self.pixels

    def resize(self, width: int, height: int) -> None:
        """Replace the pixel data with a cleared buffer of the new size."""
        if width < 0 or height < 0:
            raise ValueError("image dimensions cannot be negative")
        self.pixels = bytearray(width * height * 4)
        self.width = width
        self.height = height

    def write(self, path: _PathLike) -> None:
        """Save the image as an 8-bit RGBA PNG."""
        data = self._data()
        picture = _PILImage.frombytes("RGBA", (self.width, self.height), bytes(data))
        picture.save(path, format="PNG")

    def is_valid(self) -> bool:
        """Return whether the image holds pixel data."""
        return self.pixels is not None

    def invalidate(self) -> None:
        """Drop the pixel data."""
        self.pixels = None

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return (y * self.width + x) * 4

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at ``(x, y)`` packed as ``0xRRGGBBAA``."""
        data = self._data()
        offset = self._offset(x, y)
        return int.from_bytes(data[offset:offset + 4], "big")

    def set_pixel(self, x: int, y: int, value: int) -> None:
        """Set the pixel at ``(x, y)`` from a packed ``0xRRGGBBAA`` value."""
        data = self._data()
        offset = self._offset(x, y)
        data[offset:offset + 4] = (value & 0xFFFFFFFF).to_bytes(4, "big")