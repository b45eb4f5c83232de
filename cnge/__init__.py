"""Core pieces of a small 2D game framework: math, images, timing, input, loading and scenes."""

__version__ = "0.1.0"