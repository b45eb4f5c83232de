"""Bitmap fonts: a glyph image plus metrics, rendered one character at a time."""

from __future__ import annotations

import os
from typing import Callable, Optional, Union

from .font_data import FontData, FontDataError
from .image import Image
from .resource import Resource
from .tiles import TextureParams, TileGrid, TileValues

__all__ = ["Font"]

_PathLike = Union[str, "os.PathLike[str]"]

CharCallback = Callable[[float, float, float, float, TileValues], None]


class Font(Resource):
    """A font whose glyphs are tiles in a PNG image, described by a metrics file.

    Gathering reads both files; loading lays the image out as a tile grid.
    The metrics stay available after the image data is discarded.
    """

    def __init__(
        self,
        image_path: _PathLike,
        data_path: _PathLike,
        texture_params: Optional[TextureParams] = None,
    ):
        super().__init__(True)
        self.image_path = image_path
        self.data_path = data_path
        self.texture_params = texture_params if texture_params is not None else TextureParams()
        self.image: Optional[Image] = None
        self.font_data: Optional[FontData] = None
        self._tile_grid: Optional[TileGrid] = None

    def custom_gather(self) -> bool:
        try:
            self.font_data = FontData.from_file(self.data_path)
        except (OSError, FontDataError):
            self.font_data = None
        try:
            self.image = Image.from_png(self.image_path)
        except OSError:
            self.image = None
        return self.image is not None and self.font_data is not None

    def custom_discard(self) -> None:
        self.image = None

    def custom_load(self) -> None:
        if self.image is None or self.font_data is None:
            raise RuntimeError("font has not been gathered")
        data = self.font_data
        self._tile_grid = TileGrid(
            self.image.width,
            self.image.height,
            data.image_width // data.tile_width,
            data.image_height // data.tile_height,
            0,
        )

    def custom_unload(self) -> None:
        self._tile_grid = None

    def tile_grid(self) -> Optional[TileGrid]:
        """Return the glyph grid, or None while the font is not loaded."""
        return self._tile_grid

    def render(
        self,
        x: float,
        y: float,
        height: float,
        spacing: float,
        text: Union[str, bytes],
        on_char: CharCallback,
    ) -> float:
        """Lay out ``text`` from ``(x, y)`` with glyphs ``height`` tall.

        ``on_char`` receives each glyph's position, size and tile values.
        Returns the x position after the last glyph.
        """
        grid = self._tile_grid
        data = self.font_data
        if grid is None or data is None:
            raise RuntimeError("font is not loaded")

        codes = text.encode("latin-1") if isinstance(text, str) else bytes(text)
        width = (data.tile_width / data.tile_height) * height

        for code in codes:
            index = code - data.start_character
            if index < 0:
                raise ValueError(f"character {code} comes before the font's first character")
            on_char(x, y, width, height, grid.sheet(index % grid.tiles_wide, index // grid.tiles_wide))
            x += (data.character_widths[code] / data.tile_width) * width + spacing

        return x