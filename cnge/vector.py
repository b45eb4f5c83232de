"""Fixed-length numeric vectors with component-wise arithmetic."""

from __future__ import annotations

import math
from enum import IntEnum
from numbers import Number
from typing import Iterator

__all__ = [
    "Dimension",
    "Vector",
    "dot",
    "angle_between",
    "with_length",
    "normalized",
    "negated",
    "projected",
    "translated",
    "scaled",
]


class Dimension(IntEnum):
    """Named component indices, usable directly as vector subscripts."""

    X = 0
    Y = 1
    Z = 2
    W = 3


class Vector:
    """A mutable vector of one or more numeric components.

    Methods that change the vector in place return it, so calls can be chained;
    the module-level functions return new vectors instead.
    """

    __slots__ = ("_v",)

    def __init__(self, *args):
        if len(args) == 1 and not isinstance(args[0], Number):
            components = list(args[0])
        else:
            components = list(args)
        if not components:
            raise ValueError("a vector needs at least one component")
        self._v = components

    @classmethod
    def zeros(cls, n: int) -> "Vector":
        """Return a vector of ``n`` zeros."""
        return cls.filled(n, 0)

    @classmethod
    def filled(cls, n: int, value) -> "Vector":
        """Return a vector of ``n`` components all equal to ``value``."""
        if n <= 0:
            raise ValueError("vector dimensions must be greater than 0")
        return cls([value] * n)

    def __len__(self) -> int:
        return len(self._v)

    def __iter__(self) -> Iterator:
        return iter(self._v)

    def __getitem__(self, index):
        return self._v[index]

    def __setitem__(self, index, value) -> None:
        self._v[index] = value

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self._v == other._v

    __hash__ = None

    def _same_size(self, other: "Vector") -> None:
        if len(self._v) != len(other._v):
            raise ValueError(
                f"vector sizes differ: {len(self._v)} and {len(other._v)}"
            )

    def _zip(self, other: "Vector"):
        self._same_size(other)
        return zip(self._v, other._v)

    def __neg__(self) -> "Vector":
        return Vector([-a for a in self._v])

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector([a + b for a, b in self._zip(other)])

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector([a - b for a, b in self._zip(other)])

    def __mul__(self, other):
        if isinstance(other, Vector):
            return Vector([a * b for a, b in self._zip(other)])
        if isinstance(other, Number):
            return Vector([a * other for a in self._v])
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Number):
            return Vector([other * a for a in self._v])
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vector):
            return Vector([a / b for a, b in self._zip(other)])
        if isinstance(other, Number):
            return Vector([a / other for a in self._v])
        return NotImplemented

    def __or__(self, other):
        """Concatenate with another vector or append a scalar."""
        if isinstance(other, Vector):
            return Vector(self._v + other._v)
        if isinstance(other, Number):
            return Vector(self._v + [other])
        return NotImplemented

    def __ror__(self, other):
        """Prepend a scalar."""
        if isinstance(other, Number):
            return Vector([other] + self._v)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Vector({', '.join(repr(a) for a in self._v)})"

    def __str__(self) -> str:
        return f"<{', '.join(str(a) for a in self._v)}>"

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.length_squared())

    def length_squared(self):
        """Return the sum of the squared components."""
        return sum(a * a for a in self._v)

    def set_length(self, length) -> "Vector":
        """Scale in place so that the length becomes ``length``."""
        factor = length / self.length()
        self._v = [a * factor for a in self._v]
        return self

    def normalize(self) -> "Vector":
        """Scale in place to unit length."""
        factor = 1 / self.length()
        self._v = [a * factor for a in self._v]
        return self

    def negate(self) -> "Vector":
        """Flip every component in place."""
        self._v = [-a for a in self._v]
        return self

    def project(self, onto: "Vector") -> "Vector":
        """Replace this vector with its projection onto ``onto``."""
        factor = dot(self, onto) / onto.length_squared()
        self._v = [factor * b for b in onto._v]
        return self

    def translate(self, offset: "Vector") -> "Vector":
        """Add ``offset`` in place."""
        self._v = [a + b for a, b in self._zip(offset)]
        return self

    def scale(self, factor) -> "Vector":
        """Multiply in place by a scalar or, component-wise, by a vector."""
        if isinstance(factor, Vector):
            self._v = [a * b for a, b in self._zip(factor)]
        else:
            self._v = [a * factor for a in self._v]
        return self


def dot(left: Vector, right: Vector):
    """Return the dot product of two vectors of equal size."""
    return sum(a * b for a, b in left._zip(right))


def angle_between(first: Vector, second: Vector) -> float:
    """Return the angle in radians between two vectors."""
    cosine = dot(first, second) / (first.length() * second.length())
    return math.acos(max(-1.0, min(1.0, cosine)))


def with_length(vector: Vector, length) -> Vector:
    """Return a copy of ``vector`` scaled to ``length``."""
    return Vector(vector).set_length(length)


def normalized(vector: Vector) -> Vector:
    """Return a unit-length copy of ``vector``."""
    return Vector(vector).normalize()


def negated(vector: Vector) -> Vector:
    """Return a copy of ``vector`` with every component flipped."""
    return -vector


def projected(vector: Vector, onto: Vector) -> Vector:
    """Return the projection of ``vector`` onto ``onto``."""
    return Vector(vector).project(onto)


def translated(vector: Vector, offset: Vector) -> Vector:
    """Return ``vector + offset``."""
    return vector + offset


def scaled(vector: Vector, factor) -> Vector:
    """Return a copy of ``vector`` multiplied by a scalar or a vector."""
    return Vector(vector).scale(factor)