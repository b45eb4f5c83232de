"""Texture sampling parameters and tile lookups for sprite sheets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Iterable, Optional, Sequence, Tuple

__all__ = [
    "CLAMP_TO_EDGE",
    "REPEAT",
    "LINEAR",
    "NEAREST",
    "DEFAULT_TILE_VALUES",
    "TextureParams",
    "TileGrid",
    "TileSheet",
]

CLAMP_TO_EDGE = 0x812F
REPEAT = 0x2901
LINEAR = 0x2601
NEAREST = 0x2600

# Tile values are (width, height, x, y) as fractions of the texture.
TileValues = Tuple[float, float, float, float]
DEFAULT_TILE_VALUES: TileValues = (1.0, 1.0, 0.0, 0.0)


@dataclass
class TextureParams:
    """Wrap and filter modes for a texture.

    Fields left as ``None`` take the current class-wide defaults.
    """

    _defaults: ClassVar[Dict[str, int]] = {
        "horz_wrap": CLAMP_TO_EDGE,
        "vert_wrap": CLAMP_TO_EDGE,
        "min_filter": LINEAR,
        "mag_filter": NEAREST,
    }

    horz_wrap: Optional[int] = None
    vert_wrap: Optional[int] = None
    min_filter: Optional[int] = None
    mag_filter: Optional[int] = None

    def __post_init__(self):
        for name, value in self._defaults.items():
            if getattr(self, name) is None:
                setattr(self, name, value)

    @classmethod
    def uniform(cls, wrap: int, filter: int) -> "TextureParams":
        """Use one wrap mode for both axes and one filter for both directions."""
        return cls(wrap, wrap, filter, filter)

    @classmethod
    def set_defaults(
        cls,
        *,
        horz_wrap: Optional[int] = None,
        vert_wrap: Optional[int] = None,
        min_filter: Optional[int] = None,
        mag_filter: Optional[int] = None,
    ) -> None:
        """Change the defaults for parameters created afterwards."""
        given = {
            "horz_wrap": horz_wrap,
            "vert_wrap": vert_wrap,
            "min_filter": min_filter,
            "mag_filter": mag_filter,
        }
        cls._defaults.update({k: v for k, v in given.items() if v is not None})

    def set_wrap(self, wrap: int) -> "TextureParams":
        self.horz_wrap = wrap
        self.vert_wrap = wrap
        return self

    def set_filter(self, filter: int) -> "TextureParams":
        self.min_filter = filter
        self.mag_filter = filter
        return self


class TileGrid:
    """A texture split into an even grid of tiles with gaps between them."""

    def __init__(self, width: int, height: int, tiles_wide: int, tiles_tall: int = 1, gap: int = 0):
        if tiles_wide <= 0 or tiles_tall <= 0:
            raise ValueError("a tile grid needs at least one tile each way")
        if width <= 0 or height <= 0:
            raise ValueError("texture dimensions must be positive")
        if gap < 0:
            raise ValueError("gap cannot be negative")
        self.width = width
        self.height = height
        self.tiles_wide = tiles_wide
        self.tiles_tall = tiles_tall
        self.gap = gap

    def _tile_width(self) -> int:
        return (self.width - self.gap * (self.tiles_wide - 1)) // self.tiles_wide

    def _tile_height(self) -> int:
        return (self.height - self.gap * (self.tiles_tall - 1)) // self.tiles_tall

    def sheet(self, x: int, y: int) -> TileValues:
        """Return the tile at column ``x`` and row ``y``."""
        tile_width = self._tile_width()
        tile_height = self._tile_height()
        return (
            tile_width / self.width,
            tile_height / self.height,
            x * (tile_width + self.gap) / self.width,
            y * (tile_height + self.gap) / self.height,
        )

    def strip(self, x: int) -> TileValues:
        """Return tile ``x`` of a single row spanning the full height."""
        tile_width = self._tile_width()
        return (
            tile_width / self.width,
            1.0,
            x * (tile_width + self.gap) / self.width,
            0.0,
        )


class TileSheet:
    """A texture whose tiles are listed as pixel rectangles.

    Each position is ``(width, height, x, y)`` in pixels.
    """

    def __init__(self, width: int, height: int, positions: Iterable[Sequence[int]]):
        if width <= 0 or height <= 0:
            raise ValueError("texture dimensions must be positive")
        self.width = width
        self.height = height
        tiles = []
        for position in positions:
            if len(position) != 4:
                raise ValueError("each tile position needs four values")
            w, h, x, y = position
            tiles.append((w / width, h / height, x / width, y / height))
        self._tiles: Tuple[TileValues, ...] = tuple(tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def sheet(self, tile: int) -> TileValues:
        """Return the values for tile number ``tile``."""
        if not 0 <= tile < len(self._tiles):
            raise IndexError(f"tile {tile} is out of range")
        return self._tiles[tile]