"""RGBA colours with channels in the range 0 to 1."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

__all__ = ["Color"]


@dataclass
class Color:
    """A colour whose channels are floats from 0 to 1."""

    DEFAULT_ALPHA: ClassVar[float] = 1.0

    r: float
    g: float
    b: float
    a: float = DEFAULT_ALPHA

    @classmethod
    def from_hex(cls, rgb: int) -> "Color":
        """Build a colour from packed hex.

        Values up to ``0xffffff`` are read as ``0xRRGGBB`` with full alpha;
        larger ones as ``0xRRGGBBAA``.
        """
        if not 0 <= rgb <= 0xFFFFFFFF:
            raise ValueError(f"colour value out of range: {rgb:#x}")
        if rgb <= 0xFFFFFF:
            return cls(
                (rgb >> 16) / 255,
                ((rgb >> 8) & 0xFF) / 255,
                (rgb & 0xFF) / 255,
                cls.DEFAULT_ALPHA,
            )
        return cls(
            (rgb >> 24) / 255,
            ((rgb >> 16) & 0xFF) / 255,
            ((rgb >> 8) & 0xFF) / 255,
            (rgb & 0xFF) / 255,
        )

    @classmethod
    def from_bytes(cls, r: int, g: int, b: int, a: int = 255) -> "Color":
        """Build a colour from channels given as 0 to 255."""
        return cls(r / 255, g / 255, b / 255, a / 255)

    def invert(self) -> "Color":
        """Return the colour with its red, green and blue flipped."""
        return Color(1 - self.r, 1 - self.g, 1 - self.b, self.a)