"""Small numeric helpers: wrapping modulo, sign, interpolation and range checks."""

from __future__ import annotations

import math

__all__ = [
    "mod",
    "sign",
    "interp",
    "interp_squared",
    "inv_interp",
    "inclusive_range",
    "exclusive_range",
]


def mod(a, b):
    """Return ``a`` wrapped into the range of ``b``, taking the sign of ``b``.

    Integers use exact arithmetic; anything else goes through ``math.fmod``
    the same way a floating point wrap would.
    """
    if isinstance(a, int) and isinstance(b, int):
        # For integers the wrap-then-wrap-again form reduces to Python's floored modulo.
        return a % b
    if b == 0:
        raise ZeroDivisionError("modulo by zero")
    return math.fmod(b + math.fmod(a, b), b)


def sign(val) -> int:
    """Return 1 for values at or above zero, -1 otherwise (NaN included)."""
    if val >= 0:
        return 1
    return -1


def interp(start, end, along):
    """Linearly interpolate from ``start`` to ``end`` by ``along``."""
    return (end - start) * along + start


def interp_squared(start, end, along):
    """Interpolate from ``start`` to ``end`` by the square of ``along``."""
    return (end - start) * (along * along) + start


def inv_interp(start, end, value):
    """Return how far ``value`` lies between ``start`` and ``end``."""
    return (value - start) / (end - start)


def inclusive_range(low, value, high) -> bool:
    """Return whether ``low <= value <= high``."""
    return low <= value <= high


def exclusive_range(low, value, high) -> bool:
    """Return whether ``low < value < high``."""
    return low < value < high