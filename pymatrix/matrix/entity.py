"""
Matrix entity.

A Matrix owns a rectangular grid of scalars with value semantics: every
transforming operation returns a new Matrix and cloning produces an
independent deep copy. The only in-place mutation is set() (and its
``m[r, c] = v`` sugar).

The scalar type is generic. Each Matrix records the callable it uses to
produce its identities, ``scalar_type(0)`` and ``scalar_type(1)``, so the
same code serves exact (int, Fraction) and approximate (float) domains.
"""

from __future__ import annotations

from typing import Any, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.protocols import Scalar, ScalarType
from pymatrix.core.tolerances import EXACT, EXACT_TYPES, ToleranceTier, select_tolerance
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_dimensions,
    check_flat_length,
    check_index,
    check_inner_dimensions,
    check_perfect_square,
    check_rectangular,
    check_same_shape,
)


class Matrix:
    """
    Dense matrix over a generic scalar type, zero-indexed.

    Construction:
        Matrix(2, 3)                                  # 2x3 zero matrix (float)
        Matrix.identity_matrix(3, scalar_type=Fraction)
        Matrix.from_nested_list([[1, 2], [3, 4]])     # scalar type inferred: int
        Matrix.from_flat_list([1, 2, 3, 4, 5, 6], 2, 3)
        Matrix.square_from_flat_list([1, 2, 3, 4])
        Matrix.from_array(np.eye(3))

    Access:
        m.get(r, c), m.set(r, c, v), m[r, c], m[r, c] = v
        m[r]  -> row r as a tuple
    """

    __slots__ = ('_grid', '_rows', '_columns', '_scalar_type')

    # Mutable through set(), so not hashable
    __hash__ = None  # type: ignore[assignment]

    # NumPy scalars defer to the reflected operators instead of broadcasting
    __array_ufunc__ = None

    def __init__(self, rows: int, columns: int, *, scalar_type: ScalarType = float):
        """Create a zero-filled rows x columns matrix."""
        check_dimensions(rows, columns, 'Matrix')
        zero = scalar_type(0)
        self._grid: list[list[Any]] = [[zero] * columns for _ in range(rows)]
        self._rows = rows
        self._columns = columns
        self._scalar_type = scalar_type

    @classmethod
    def _from_grid(cls, grid: list[list[Any]], scalar_type: ScalarType) -> Matrix:
        """Wrap an already-validated grid without copying."""
        matrix = cls.__new__(cls)
        matrix._grid = grid
        matrix._rows = len(grid)
        matrix._columns = len(grid[0])
        matrix._scalar_type = scalar_type
        return matrix

    # === Constructors ===

    @classmethod
    def square_matrix(cls, size: int, *, scalar_type: ScalarType = float) -> Matrix:
        """Create a zero-filled size x size matrix."""
        return cls(size, size, scalar_type=scalar_type)

    @classmethod
    def identity_matrix(cls, size: int, *, scalar_type: ScalarType = float) -> Matrix:
        """Create the size x size identity matrix."""
        matrix = cls(size, size, scalar_type=scalar_type)
        one = scalar_type(1)
        for i in range(size):
            matrix._grid[i][i] = one
        return matrix

    @classmethod
    def from_nested_list(
        cls,
        rows: Sequence[Sequence[Any]],
        *,
        scalar_type: ScalarType | None = None,
    ) -> Matrix:
        """
        Build a matrix from a row-major nested sequence.

        Args:
            rows: Sequence of equal-length rows
            scalar_type: Coerce every entry through this callable. If None,
                entries are stored as given and the type of rows[0][0]
                supplies the identities.

        Raises:
            ShapeError: If rows is empty or ragged
        """
        check_rectangular(rows, 'rows')
        scalar_type, convert = _resolve_scalar_type(rows[0][0], scalar_type)
        grid = [[convert(value) for value in row] for row in rows]
        return cls._from_grid(grid, scalar_type)

    @classmethod
    def from_flat_list(
        cls,
        values: Sequence[Any],
        rows: int,
        columns: int,
        *,
        scalar_type: ScalarType | None = None,
    ) -> Matrix:
        """
        Build a rows x columns matrix from a flat row-major sequence.

        Raises:
            ShapeError: If len(values) != rows * columns
        """
        check_flat_length(values, rows, columns, 'values')
        scalar_type, convert = _resolve_scalar_type(values[0], scalar_type)
        grid = [
            [convert(values[r * columns + c]) for c in range(columns)]
            for r in range(rows)
        ]
        return cls._from_grid(grid, scalar_type)

    @classmethod
    def square_from_flat_list(
        cls,
        values: Sequence[Any],
        *,
        scalar_type: ScalarType | None = None,
    ) -> Matrix:
        """
        Build a square matrix from a flat row-major sequence.

        Raises:
            ShapeError: If len(values) is not a positive perfect square
        """
        size = check_perfect_square(len(values), 'values')
        return cls.from_flat_list(values, size, size, scalar_type=scalar_type)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build a float matrix from any 2-D numeric array-like.

        Raises:
            ValidationError: If the input is not numeric
            ShapeError: If the input is not 2-D or has an empty dimension
        """
        arr = check_array(array, 'array')
        check_2d(arr, 'array')
        check_dimensions(arr.shape[0], arr.shape[1], 'array')
        return cls._from_grid(arr.astype(np.float64).tolist(), float)

    # === Properties ===

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._columns)

    @property
    def is_square(self) -> bool:
        return self._rows == self._columns

    @property
    def scalar_type(self) -> ScalarType:
        return self._scalar_type

    @property
    def zero(self) -> Any:
        """Additive identity of this matrix's scalar type."""
        return self._scalar_type(0)

    @property
    def one(self) -> Any:
        """Multiplicative identity of this matrix's scalar type."""
        return self._scalar_type(1)

    # === Element access ===

    def get(self, row: int, column: int) -> Any:
        """Value at (row, column). Raises IndexError when out of range."""
        check_index(row, self._rows, 'row')
        check_index(column, self._columns, 'column')
        return self._grid[row][column]

    def set(self, row: int, column: int, value: Any) -> None:
        """Overwrite the value at (row, column). Raises IndexError when out of range."""
        check_index(row, self._rows, 'row')
        check_index(column, self._columns, 'column')
        self._grid[row][column] = value

    def __getitem__(self, key: int | tuple[int, int]) -> Any:
        if isinstance(key, tuple):
            row, column = key
            return self.get(row, column)
        check_index(key, self._rows, 'row')
        return tuple(self._grid[key])

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        if not isinstance(key, tuple):
            raise TypeError("Matrix rows are read-only; assign with m[row, column] = value")
        row, column = key
        self.set(row, column, value)

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        for row in self._grid:
            yield tuple(row)

    def __len__(self) -> int:
        return self._rows

    # === Copies and conversion ===

    def clone(self) -> Matrix:
        """Independent deep copy sharing no storage with this matrix."""
        return Matrix._from_grid([list(row) for row in self._grid], self._scalar_type)

    def __copy__(self) -> Matrix:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self.clone()

    def to_list(self) -> list[list[Any]]:
        """Nested list copy of the grid."""
        return [list(row) for row in self._grid]

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Float64 NumPy copy of the grid."""
        return np.array(self._grid, dtype=np.float64)

    # === Arithmetic ===

    def transpose(self) -> Matrix:
        grid = [
            [self._grid[r][c] for r in range(self._rows)]
            for c in range(self._columns)
        ]
        return Matrix._from_grid(grid, self._scalar_type)

    def add(self, other: Matrix) -> Matrix:
        """Cellwise sum. Raises ShapeError if shapes differ."""
        check_same_shape(self, other, ('left', 'right'))
        grid = [
            [a + b for a, b in zip(left_row, right_row)]
            for left_row, right_row in zip(self._grid, other._grid)
        ]
        return Matrix._from_grid(grid, self._scalar_type)

    def subtract(self, other: Matrix) -> Matrix:
        """Cellwise difference. Raises ShapeError if shapes differ."""
        check_same_shape(self, other, ('left', 'right'))
        grid = [
            [a - b for a, b in zip(left_row, right_row)]
            for left_row, right_row in zip(self._grid, other._grid)
        ]
        return Matrix._from_grid(grid, self._scalar_type)

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product self · other.

        Raises:
            ShapeError: If self.columns != other.rows
        """
        check_inner_dimensions(self, other, ('left', 'right'))
        zero = self.zero
        other_columns = list(zip(*other._grid))
        grid = []
        for row in self._grid:
            out_row = []
            for column in other_columns:
                total = zero
                for a, b in zip(row, column):
                    total = total + a * b
                out_row.append(total)
            grid.append(out_row)
        return Matrix._from_grid(grid, self._scalar_type)

    def scale(self, factor: Any) -> Matrix:
        """Multiply every entry by a scalar."""
        grid = [[value * factor for value in row] for row in self._grid]
        return Matrix._from_grid(grid, self._scalar_type)

    def negate(self) -> Matrix:
        grid = [[-value for value in row] for row in self._grid]
        return Matrix._from_grid(grid, self._scalar_type)

    # === Comparison ===

    def equals(self, other: Matrix, delta: Any = None) -> bool:
        """
        Cellwise comparison within an absolute tolerance.

        Args:
            other: Matrix to compare against
            delta: Largest allowed |a - b| per cell. Defaults to zero,
                which is exact structural equality.

        Returns:
            False if shapes differ, else True when every cell satisfies
            |a - b| <= delta
        """
        if self.shape != other.shape:
            return False
        if delta is None:
            delta = self.zero
        for left_row, right_row in zip(self._grid, other._grid):
            for a, b in zip(left_row, right_row):
                if not abs(a - b) <= delta:
                    return False
        return True

    def approx_equals(self, other: Matrix, tier: ToleranceTier | None = None) -> bool:
        """
        equals() with a tolerance tier chosen from the stored entries.

        The tier follows the first inexact entry of either operand, so an
        int matrix whose entries were promoted to float by division still
        compares with a floating tolerance.
        """
        if tier is None:
            tier = _entry_tolerance(self, other)
        return self.equals(other, tier.delta)

    # === Block operations and linear algebra ===

    def partition(
        self,
        row_start: int,
        row_end: int,
        column_start: int,
        column_end: int,
    ) -> Matrix:
        """Sub-block [row_start:row_end, column_start:column_end]."""
        from pymatrix.matrix.blocks import partition
        return partition(self, row_start, row_end, column_start, column_end)

    def combine(self, other: Matrix) -> Matrix:
        """[self | other], side by side."""
        from pymatrix.matrix.blocks import combine
        return combine(self, other)

    def reduced_echelon_form(self) -> Matrix:
        from pymatrix.linalg.solvers import reduced_echelon_form
        return reduced_echelon_form(self)

    def determinant(self) -> Any:
        from pymatrix.linalg.solvers import determinant
        return determinant(self)

    def rank(self) -> int:
        from pymatrix.linalg.solvers import rank
        return rank(self)

    def inverse(self) -> Matrix:
        from pymatrix.linalg.solvers import inverse
        return inverse(self)

    def solve(self, b: Sequence[Any]) -> list[Any]:
        from pymatrix.linalg.solvers import solve
        return solve(self, b)

    def least_squares_solution(self, b: Sequence[Any]) -> list[Any]:
        from pymatrix.linalg.solvers import least_squares_solution
        return least_squares_solution(self, b)

    # === Operator sugar ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Matrix:
        return self.negate()

    def __mul__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            return self.multiply(other)
        if _is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: object) -> Matrix:
        if _is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __repr__(self) -> str:
        name = getattr(self._scalar_type, '__name__', repr(self._scalar_type))
        return f"Matrix({self.to_list()!r}, scalar_type={name})"


def _is_scalar(value: object) -> bool:
    # ndarrays satisfy the Scalar protocol structurally but are not scalars
    return isinstance(value, Scalar) and not isinstance(value, (np.ndarray, Matrix))


def _resolve_scalar_type(
    first: Any,
    scalar_type: ScalarType | None,
) -> tuple[ScalarType, Any]:
    """Return (scalar_type, per-entry converter)."""
    if scalar_type is None:
        return type(first), _identity
    return scalar_type, scalar_type


def _identity(value: Any) -> Any:
    return value


def _entry_tolerance(left: Matrix, right: Matrix) -> ToleranceTier:
    for matrix in (left, right):
        for row in matrix._grid:
            for value in row:
                if not isinstance(value, EXACT_TYPES):
                    return select_tolerance(type(value))
    return EXACT
