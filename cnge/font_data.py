"""Metrics for a bitmap font laid out as a grid of glyph tiles."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union

__all__ = ["FontDataError", "FontData"]

# Four little-endian int32 sizes, the first character code, then 256 glyph widths.
_LAYOUT = struct.Struct("<iiiiB256s")


class FontDataError(ValueError):
    """Raised when font metrics data is too short."""


@dataclass(frozen=True)
class FontData:
    """Image and tile sizes, the first character, and each glyph's width."""

    image_width: int
    image_height: int
    tile_width: int
    tile_height: int
    start_character: int
    character_widths: Tuple[int, ...]

    @classmethod
    def from_bytes(cls, data: bytes) -> "FontData":
        """Parse font metrics; trailing bytes are ignored."""
        if len(data) < _LAYOUT.size:
            raise FontDataError(
                f"font data needs {_LAYOUT.size} bytes, got {len(data)}"
            )
        image_width, image_height, tile_width, tile_height, start, widths = (
            _LAYOUT.unpack_from(data)
        )
        return cls(image_width, image_height, tile_width, tile_height, start, tuple(widths))

    @classmethod
    def from_file(cls, path: Union[str, "os.PathLike[str]"]) -> "FontData":
        """Read font metrics from a file."""
        return cls.from_bytes(Path(path).read_bytes())