"""Helpers for packed ``0xRRGGBBAA`` pixels and simple image filters."""

from __future__ import annotations

import math
import struct
from typing import List, NamedTuple, Sequence

from .image import Image

__all__ = [
    "MAX_LUMINANCE",
    "Channels",
    "red",
    "green",
    "blue",
    "alpha",
    "pix",
    "channels",
    "pos",
    "difference",
    "difference_rgb",
    "mod",
    "mix",
    "conform_to_range",
    "add_noise",
    "add_noise_rgb",
    "luminance",
    "interp",
    "small_bound",
    "large_bound",
    "match_size",
    "mode",
    "copy",
    "sample_at",
    "sample_nearest",
    "sample_bilinear",
]

MAX_LUMINANCE = 0xFF * 3


class Channels(NamedTuple):
    """The four channels of a packed pixel."""

    red: int
    green: int
    blue: int
    alpha: int


def red(pixel: int) -> int:
    return (pixel >> 24) & 0xFF


def green(pixel: int) -> int:
    return (pixel >> 16) & 0xFF


def blue(pixel: int) -> int:
    return (pixel >> 8) & 0xFF


def alpha(pixel: int) -> int:
    return pixel & 0xFF


def pix(red: int, green: int, blue: int, alpha: int = 0xFF) -> int:
    """Pack channels into ``0xRRGGBBAA``; alpha defaults to opaque."""
    return ((red & 0xFF) << 24) | ((green & 0xFF) << 16) | ((blue & 0xFF) << 8) | (alpha & 0xFF)


def channels(pixel: int) -> Channels:
    """Split a packed pixel into its channels."""
    return Channels(red(pixel), green(pixel), blue(pixel), alpha(pixel))


def pos(x: int, y: int, width: int) -> int:
    """Return the index of ``(x, y)`` in a row-major buffer."""
    return y * width + x


def difference(pixel0: int, pixel1: int) -> int:
    """Return the summed absolute difference of the colour channels."""
    return difference_rgb(red(pixel0), green(pixel0), blue(pixel0), pixel1)


def difference_rgb(red: int, green: int, blue: int, pixel: int) -> int:
    """Return the summed absolute difference between a colour and a pixel."""
    other = channels(pixel)
    return abs(other.red - red) + abs(other.green - green) + abs(other.blue - blue)


def mod(a: int, b: int) -> int:
    """Wrap ``a`` by a positive ``b``.

    Negative values are shifted up by ``b`` after a truncating remainder, so a
    negative multiple of ``b`` gives ``b`` rather than zero.
    """
    if b <= 0:
        raise ValueError("modulus must be positive")
    remainder = abs(a) % b
    if a < 0:
        remainder = b - remainder
    return remainder


def mix(color0: int, color1: int, distribution: float) -> int:
    """Blend two pixels channel by channel; 0 gives ``color0``, 1 gives ``color1``."""
    keep = 1.0 - distribution

    def blend(a: int, b: int) -> int:
        return int(a * keep + b * distribution) & 0xFF

    return pix(
        blend(red(color0), red(color1)),
        blend(green(color0), green(color1)),
        blend(blue(color0), blue(color1)),
        blend(alpha(color0), alpha(color1)),
    )


def conform_to_range(val: int, low: int, high: int) -> int:
    """Clamp ``val`` into ``[low, high]``."""
    if val < low:
        return low
    if val > high:
        return high
    return val


def add_noise(pixel: int, amount: int) -> int:
    """Add ``amount`` to each colour channel, clamped, keeping alpha."""
    return add_noise_rgb(pixel, amount, amount, amount)


def add_noise_rgb(pixel: int, amount_r: int, amount_g: int, amount_b: int) -> int:
    """Add separate amounts to each colour channel, clamped, keeping alpha."""
    return pix(
        conform_to_range(red(pixel) + amount_r, 0x00, 0xFF),
        conform_to_range(green(pixel) + amount_g, 0x00, 0xFF),
        conform_to_range(blue(pixel) + amount_b, 0x00, 0xFF),
        alpha(pixel),
    )


def luminance(pixel: int) -> int:
    """Return the sum of the colour channels, up to ``MAX_LUMINANCE``."""
    return red(pixel) + green(pixel) + blue(pixel)


def interp(low: float, high: float, along: float) -> float:
    return (high - low) * along + low


def small_bound(x: int) -> int:
    """Clamp ``x`` to be no less than zero."""
    return max(x, 0)


def large_bound(x: int, width: int) -> int:
    """Clamp ``x`` to be no more than ``width``."""
    return min(x, width)


def match_size(image_from: Image, image_to: Image) -> None:
    """Resize ``image_to`` to the dimensions of ``image_from``."""
    image_to.resize(image_from.width, image_from.height)


def _packed(image: Image) -> List[int]:
    if image.pixels is None:
        raise ValueError("image has no pixel data")
    return [value for (value,) in struct.iter_unpack(">I", image.pixels)]


def mode(image_from: Image, image_to: Image, colors: Sequence[int], radius: int) -> None:
    """Replace each pixel with the most common palette colour around it.

    The upper 24 bits of each pixel in ``image_from`` are an index into
    ``colors``. Each output pixel takes the colour whose index occurs most
    often within ``radius`` of it, keeping the source pixel's alpha.
    """
    width, height = image_from.width, image_from.height
    source = _packed(image_from)

    for i in range(width):
        for j in range(height):
            counts = [0] * len(colors)
            for k in range(small_bound(i - radius), large_bound(i + radius + 1, width)):
                for row in range(small_bound(j - radius), large_bound(j + radius + 1, height)):
                    counts[source[pos(k, row, width)] >> 8] += 1

            index, highest = 0, 0
            for k, count in enumerate(counts):
                if count > highest:
                    highest, index = count, k

            image_to.set_pixel(
                i, j, (colors[index] & 0xFFFFFF00) | alpha(source[pos(i, j, width)])
            )


def copy(source: Image, target: Image) -> None:
    """Copy the pixels of ``source`` into ``target`` of the same size."""
    if (source.width, source.height) != (target.width, target.height):
        raise ValueError("images differ in size")
    if source.pixels is None or target.pixels is None:
        raise ValueError("image has no pixel data")
    target.pixels[:] = source.pixels


def sample_at(src: Sequence[int], x: int, y: int, width: int, height: int, fallback: int) -> int:
    """Return the pixel at ``(x, y)``, or ``fallback`` outside the buffer."""
    if x < 0 or y < 0 or x >= width or y >= height:
        return fallback
    return src[pos(x, y, width)]


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def sample_nearest(src: Sequence[int], x: float, y: float, width: int, height: int, fallback: int) -> int:
    """Sample the pixel nearest to ``(x, y)``."""
    return sample_at(src, _round_half_away(x), _round_half_away(y), width, height, fallback)


def sample_bilinear(src: Sequence[int], x: float, y: float, width: int, height: int, fallback: int) -> int:
    """Blend the four pixels around ``(x, y)`` by their distances."""
    x0, x1 = math.floor(x), math.ceil(x)
    y0, y1 = math.floor(y), math.ceil(y)
    color0 = sample_at(src, x0, y0, width, height, fallback)
    color1 = sample_at(src, x1, y0, width, height, fallback)
    color2 = sample_at(src, x0, y1, width, height, fallback)
    color3 = sample_at(src, x1, y1, width, height, fallback)

    horizontal = x - x0
    vertical = y - y0
    return mix(mix(color0, color1, horizontal), mix(color2, color3, horizontal), vertical)