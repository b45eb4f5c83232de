"""Column-major numeric matrices with arithmetic and determinants."""

from __future__ import annotations

from itertools import islice
from typing import Iterable, Iterator, List, Optional

from .vector import Vector

__all__ = ["Matrix", "det"]


class Matrix:
    """A matrix of ``columns`` by ``rows`` numbers, stored column by column.

    ``values`` holds the entries in column-major order, the layout that
    shaders expect for uniform matrices.
    """

    __slots__ = ("columns", "rows", "values")

    def __init__(self, columns: int, rows: int, values: Optional[Iterable] = None):
        if columns <= 0 or rows <= 0:
            raise ValueError("matrix dimensions must be greater than 0")
        self.columns = columns
        self.rows = rows
        if values is None:
            self.values: List = [0] * (columns * rows)
        else:
            data = list(values)
            if len(data) != columns * rows:
                raise ValueError(
                    f"expected {columns * rows} values, got {len(data)}"
                )
            self.values = data

    @classmethod
    def from_rows(cls, columns: int, rows: int, values: Iterable) -> "Matrix":
        """Build a matrix from values listed row by row.

        Extra values are ignored; missing ones are left at zero.
        """
        matrix = cls(columns, rows)
        for i, value in enumerate(islice(values, columns * rows)):
            row, col = divmod(i, columns)
            matrix.values[col * rows + row] = value
        return matrix

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        """Return the ``n`` by ``n`` identity matrix."""
        return cls(n, n).set_identity()

    @property
    def is_square(self) -> bool:
        return self.columns == self.rows

    def _column_values(self, index: int) -> List:
        col = range(self.columns)[index]
        return self.values[col * self.rows:(col + 1) * self.rows]

    def _row_values(self, index: int) -> List:
        row = range(self.rows)[index]
        return self.values[row::self.rows]

    def _iter_rows(self) -> Iterator[List]:
        return (self.values[row::self.rows] for row in range(self.rows))

    def column(self, index: int) -> Vector:
        """Return a copy of column ``index`` as a vector."""
        return Vector(self._column_values(index))

    def __getitem__(self, index):
        """``m[col]`` gives a column vector; ``m[col, row]`` gives one entry."""
        if isinstance(index, tuple):
            col, row = index
            col = range(self.columns)[col]
            row = range(self.rows)[row]
            return self.values[col * self.rows + row]
        return self.column(index)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.columns == other.columns
            and self.rows == other.rows
            and self.values == other.values
        )

    __hash__ = None

    def _same_shape(self, other: "Matrix") -> None:
        if (self.columns, self.rows) != (other.columns, other.rows):
            raise ValueError(
                f"matrix shapes differ: {self.columns}x{self.rows} "
                f"and {other.columns}x{other.rows}"
            )

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._same_shape(other)
        return Matrix(
            self.columns, self.rows, [a + b for a, b in zip(self.values, other.values)]
        )

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._same_shape(other)
        return Matrix(
            self.columns, self.rows, [a - b for a, b in zip(self.values, other.values)]
        )

    def __iadd__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._same_shape(other)
        self.values = [a + b for a, b in zip(self.values, other.values)]
        return self

    def __isub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._same_shape(other)
        self.values = [a - b for a, b in zip(self.values, other.values)]
        return self

    def __mul__(self, other):
        if isinstance(other, Matrix):
            if other.rows != self.columns:
                raise ValueError(
                    f"cannot multiply {self.columns}x{self.rows} "
                    f"by {other.columns}x{other.rows}"
                )
            rows = list(self._iter_rows())
            product = [
                sum(a * b for a, b in zip(row, other._column_values(j)))
                for j in range(other.columns)
                for row in rows
            ]
            return Matrix(other.columns, self.rows, product)
        if isinstance(other, Vector):
            if len(other) != self.columns:
                raise ValueError(
                    f"cannot multiply {self.columns}x{self.rows} matrix "
                    f"by vector of size {len(other)}"
                )
            return Vector(
                [sum(a * b for a, b in zip(row, other)) for row in self._iter_rows()]
            )
        return NotImplemented

    def __repr__(self) -> str:
        return f"Matrix({self.columns}, {self.rows}, {self.values!r})"

    def __str__(self) -> str:
        return "".join(
            f"[{', '.join(str(value) for value in row)}]\n" for row in self._iter_rows()
        )

    def set_identity(self) -> "Matrix":
        """Overwrite this square matrix with the identity, in place."""
        if not self.is_square:
            raise ValueError("only a square matrix can be an identity")
        n = self.columns
        self.values = [1 if i % n == i // n else 0 for i in range(n * n)]
        return self


def det(matrix: Matrix):
    """Return the determinant of a square matrix."""
    if not matrix.is_square:
        raise ValueError("the determinant needs a square matrix")
    n = matrix.columns
    m = matrix.values
    if n == 1:
        return m[0]
    if n == 2:
        return m[0] * m[3] - m[2] * m[1]
    total = 0
    sign = 1
    for i in range(n):
        minor_values = [
            value
            for col in range(n)
            if col != i
            for value in m[col * n + 1:(col + 1) * n]
        ]
        total += sign * m[i * n] * det(Matrix(n - 1, n - 1, minor_values))
        sign = -sign
    return total