# densematrix

A small, pure-Python dense matrix of floats. It supports element-wise
addition and subtraction, scaling by a number, matrix multiplication,
transposition, the determinant, the matrix of algebraic complements
(cofactors) and the inverse. It has no dependencies outside the standard
library.

## Installation

```
pip install .
```

## Usage

Everything lives in the `densematrix.matrix` module.

```python
from densematrix import matrix

m = matrix.Matrix.from_rows([
    [2, 5, 7],
    [6, 3, 4],
    [5, -2, -3],
])

print(m.rows, m.columns)     # 3 3
print(m.is_square)           # True
print(m.determinant())       # -1.0
print(m.inverse().to_lists())
# [[1.0, -1.0, 1.0], [-38.0, 41.0, -34.0], [27.0, -29.0, 24.0]]

z = matrix.Matrix(2, 3)      # a 2x3 matrix filled with zeros
z[0, 1] = 4.5                # set one cell
print(z[0, 1])               # 4.5
print(z[0])                  # (0.0, 4.5, 0.0) - a row as a tuple
t = z.transpose()            # 3x2

for row in m:                # iterating yields rows as tuples
    print(row)

s = m + m
d = m - m
scaled = 2 * m               # or m * 2, or m.mult_number(2)
product = m @ m              # or m * m, or m.mult_matrix(m)
cof = m.calc_complements()
```

### Notes

- `Matrix(rows, columns)` creates a zero-filled matrix; both dimensions
  must be positive integers.
- `Matrix.from_rows(data)` takes an iterable of equally long rows and
  converts every value to `float`.
- `to_lists()` returns a copy of the contents as a list of row lists;
  `repr()` shows the matrix as a `Matrix.from_rows(...)` expression.
- Two matrices compare equal (`==` or `equals`) when they have the same
  shape and each pair of elements differs by less than `1e-7`. `equals`
  returns `False` for anything that is not a `Matrix`. Matrices are not
  hashable.
- `determinant()` uses cofactor expansion along the first row, so it is
  meant for small matrices.
- `calc_complements()` of a 1x1 matrix returns a copy of that matrix.
- `inverse()` is computed as the transposed cofactor matrix scaled by
  `1 / determinant`.
- All operations return new matrices; the operands are left unchanged.

## Errors

All errors derive from `matrix.MatrixError`, itself a `ValueError`:

- `matrix.InvalidMatrixError` – the requested dimensions are not positive
  integers, the data given to `from_rows` is empty or has rows of
  different lengths, or `mult_matrix` was given something that is not a
  matrix.
- `matrix.CalculationError` – the operation does not apply: shapes do not
  match for addition, subtraction or multiplication, the matrix is not
  square (determinant, cofactors, inverse), the scale factor is infinite
  or NaN, or the matrix is singular and has no inverse.

Assigning to a cell with a single index (`m[0] = ...`) raises `TypeError`;
cells are addressed as `m[row, column]`.

## Running the tests

```
pip install .[test]
pytest
```