"""Dense matrices stored row by row, with LU decomposition."""

from __future__ import annotations

from numbers import Number
from typing import Iterable


class Matrix:
    """A rows by cols matrix of numbers."""

    __slots__ = ("rows", "cols", "_data")

    def __init__(self, rows: int, cols: int, data: Iterable[Number] | None = None) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        self.rows = rows
        self.cols = cols
        values = [0] * (rows * cols) if data is None else list(data)
        if len(values) != rows * cols:
            raise ValueError("data length does not match matrix dimensions")
        self._data = values

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        return cls(rows, cols, [0] * (rows * cols))

    @classmethod
    def ones(cls, rows: int, cols: int) -> Matrix:
        return cls(rows, cols, [1] * (rows * cols))

    @classmethod
    def fill(cls, rows: int, cols: int, value: Number) -> Matrix:
        return cls(rows, cols, [value] * (rows * cols))

    @classmethod
    def identity(cls, dims: int) -> Matrix:
        return cls(dims, dims, (1 if i == j else 0 for i in range(dims) for j in range(dims)))

    @classmethod
    def from_list(cls, rows: int, cols: int, data: Iterable[Number]) -> Matrix:
        """Build a matrix from row-major data of exactly rows*cols values."""
        return cls(rows, cols, data)

    @property
    def data(self) -> list:
        return list(self._data)

    def transpose(self) -> Matrix:
        return Matrix(
            self.cols,
            self.rows,
            (self[i, j] for j in range(self.cols) for i in range(self.rows)),
        )

    def dims(self) -> tuple[int, int]:
        return self.rows, self.cols

    def _check_same_dims(self, other: Matrix) -> None:
        if self.dims() != other.dims():
            raise ValueError(f"cannot combine {self.dims()} and {other.dims()} matrices")

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_dims(other)
        return Matrix(self.rows, self.cols, (a + b for a, b in zip(self._data, other._data)))

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_dims(other)
        return Matrix(self.rows, self.cols, (a - b for a, b in zip(self._data, other._data)))

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.cols != other.rows:
            raise ValueError(f"cannot multiply {self.dims()} by {other.dims()} matrices")
        self_rows = [self._data[r * self.cols:(r + 1) * self.cols] for r in range(self.rows)]
        other_cols = [other._data[c::other.cols] for c in range(other.cols)]
        return Matrix(
            self.rows,
            other.cols,
            (sum((a * b for a, b in zip(row, col)), 0) for row in self_rows for col in other_cols),
        )

    def _offset(self, ij: tuple[int, int]) -> int:
        i, j = ij
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"index {ij} out of range for a {self.rows}x{self.cols} matrix")
        return i * self.cols + j

    def __getitem__(self, ij: tuple[int, int]) -> Number:
        return self._data[self._offset(ij)]

    def __setitem__(self, ij: tuple[int, int], value: Number) -> None:
        self._data[self._offset(ij)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.dims() == other.dims() and self._data == other._data

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return "".join(
            "".join(f" {self[i, j]!r} " for j in range(self.cols)) + "\n"
            for i in range(self.rows)
        )

    def __repr__(self) -> str:
        return f"Matrix({self.rows}, {self.cols}, {self._data!r})"


class AugmentedMatrix:
    """A square system matrix A paired with a right-hand column vector b."""

    __slots__ = ("a", "b")

    def __init__(self, a: Matrix, b: Matrix) -> None:
        if a.rows != a.cols:
            raise ValueError("the system matrix must be square")
        if b.dims() != (a.rows, 1):
            raise ValueError("the right-hand side must be a column vector matching the system")
        self.a = Matrix(a.rows, a.cols, a.data)
        self.b = Matrix(b.rows, b.cols, b.data)

    def lu_decomposition(self) -> tuple[Matrix, Matrix]:
        """Return (L, U) with A = L @ U, by elimination without pivoting."""
        n = self.a.rows
        lower = Matrix.identity(n)
        upper = Matrix(n, n, self.a.data)
        for i in range(n):
            for j in range(i + 1, n):
                factor = upper[j, i] / upper[i, i]
                lower[j, i] = factor
                for k in range(i, n):
                    upper[j, k] = upper[j, k] - factor * upper[i, k]
        return lower, upper