"""Dense real matrices with the usual arithmetic, determinant and inverse."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from numbers import Real

EPSILON = 1e-7


class MatrixError(ValueError):
    """Base class for matrix errors."""


class InvalidMatrixError(MatrixError):
    """Raised when a matrix cannot be built from the given shape or data."""


class CalculationError(MatrixError):
    """Raised when an operation is undefined for the given operands."""


class Matrix:
    """A rows x columns matrix of floats, initially filled with zeros."""

    __slots__ = ("_rows", "_columns", "_data")

    def __init__(self, rows: int, columns: int) -> None:
        if not isinstance(rows, int) or not isinstance(columns, int):
            raise InvalidMatrixError("matrix dimensions must be integers")
        if rows <= 0 or columns <= 0:
            raise InvalidMatrixError(
                f"matrix dimensions must be positive, got {rows}x{columns}"
            )
        self._rows = rows
        self._columns = columns
        self._data = [[0.0] * columns for _ in range(rows)]

    @classmethod
    def from_rows(cls, data: Iterable[Iterable[float]]) -> Matrix:
        """Build a matrix from an iterable of equally long rows."""
        rows = [[float(value) for value in row] for row in data]
        if not rows or not rows[0]:
            raise InvalidMatrixError("matrix must have at least one row and column")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise InvalidMatrixError("all rows must have the same length")
        return cls._wrap(rows)

    @classmethod
    def _wrap(cls, rows: list[list[float]]) -> Matrix:
        matrix = cls.__new__(cls)
        matrix._rows = len(rows)
        matrix._columns = len(rows[0])
        matrix._data = rows
        return matrix

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def is_square(self) -> bool:
        return self._rows == self._columns

    def __getitem__(self, index):
        if isinstance(index, tuple):
            i, j = index
            return self._data[i][j]
        return tuple(self._data[index])

    def __setitem__(self, index, value) -> None:
        if not isinstance(index, tuple):
            raise TypeError("matrix cells are addressed as matrix[row, column]")
        i, j = index
        self._data[i][j] = float(value)

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return (tuple(row) for row in self._data)

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self.to_lists()!r})"

    def to_lists(self) -> list[list[float]]:
        """Return a copy of the contents as a list of row lists."""
        return [list(row) for row in self._data]

    def _same_shape(self, other: Matrix) -> bool:
        return self._rows == other._rows and self._columns == other._columns

    def equals(self, other: object) -> bool:
        """True if both matrices have the same shape and cells within 1e-7."""
        if not isinstance(other, Matrix) or not self._same_shape(other):
            return False
        return all(
            abs(a - b) < EPSILON
            for row_a, row_b in zip(self._data, other._data)
            for a, b in zip(row_a, row_b)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def _elementwise(self, other: Matrix, op) -> Matrix:
        if not self._same_shape(other):
            raise CalculationError(
                f"shapes differ: {self._rows}x{self._columns} "
                f"and {other._rows}x{other._columns}"
            )
        return Matrix._wrap(
            [
                [op(a, b) for a, b in zip(row_a, row_b)]
                for row_a, row_b in zip(self._data, other._data)
            ]
        )

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, lambda a, b: a + b)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, lambda a, b: a - b)

    def __mul__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            return self.mult_matrix(other)
        if isinstance(other, Real):
            return self.mult_number(other)
        return NotImplemented

    def __rmul__(self, other: object) -> Matrix:
        if isinstance(other, Real):
            return self.mult_number(other)
        return NotImplemented

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.mult_matrix(other)

    def mult_number(self, number: float) -> Matrix:
        """Multiply every cell by a finite number."""
        number = float(number)
        if math.isinf(number) or math.isnan(number):
            raise CalculationError("cannot multiply by an infinite or NaN number")
        return Matrix._wrap([[value * number for value in row] for row in self._data])

    def mult_matrix(self, other: Matrix) -> Matrix:
        """Matrix product; the column count must equal the other's row count."""
        if not isinstance(other, Matrix):
            raise InvalidMatrixError("operand is not a matrix")
        if self._columns != other._rows:
            raise CalculationError(
                f"cannot multiply {self._rows}x{self._columns} "
                f"by {other._rows}x{other._columns}"
            )
        other_columns = list(zip(*other._data))
        result = []
        for row in self._data:
            out_row = []
            for column in other_columns:
                total = 0.0
                for a, b in zip(row, column):
                    total += a * b
                out_row.append(total)
            result.append(out_row)
        return Matrix._wrap(result)

    def transpose(self) -> Matrix:
        """Return the transposed matrix."""
        return Matrix._wrap([list(column) for column in zip(*self._data)])

    def _require_square(self) -> None:
        if not self.is_square:
            raise CalculationError(
                f"matrix must be square, got {self._rows}x{self._columns}"
            )

    def _minor(self, skip_row: int, skip_column: int) -> Matrix:
        return Matrix._wrap(
            [
                [value for j, value in enumerate(row) if j != skip_column]
                for i, row in enumerate(self._data)
                if i != skip_row
            ]
        )

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        self._require_square()
        return _determinant(self)

    def calc_complements(self) -> Matrix:
        """Matrix of algebraic complements (cofactors).

        A 1x1 matrix yields a copy of itself.
        """
        self._require_square()
        if self._rows == 1:
            return Matrix._wrap([[self._data[0][0]]])
        return Matrix._wrap(
            [
                [
                    (-1.0) ** (i + j) * _determinant(self._minor(i, j))
                    for j in range(self._columns)
                ]
                for i in range(self._rows)
            ]
        )

    def inverse(self) -> Matrix:
        """Inverse via the adjugate; raises CalculationError if singular."""
        self._require_square()
        det = _determinant(self)
        if det == 0:
            raise CalculationError("matrix is singular")
        return self.calc_complements().transpose().mult_number(1 / det)


def _determinant(matrix: Matrix) -> float:
    data: Sequence[Sequence[float]] = matrix._data
    size = matrix.rows
    if size == 1:
        return data[0][0]
    if size == 2:
        return data[0][0] * data[1][1] - data[0][1] * data[1][0]
    result = 0.0
    for i, value in enumerate(data[0]):
        result += (-1.0) ** i * value * _determinant(matrix._minor(0, i))
    return result