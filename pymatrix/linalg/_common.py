"""
Shared helpers for the augmented-system solvers.

solve() and least_squares_solution() both reduce an augmented matrix
[A | b], reject contradictory rows, and read the answer off the last
column.
"""

from typing import Any, Sequence

from pymatrix.core.exceptions import InconsistentSystemError
from pymatrix.matrix.blocks import combine
from pymatrix.matrix.entity import Matrix


def column_matrix(values: Sequence[Any], scalar_type: Any) -> Matrix:
    """Single-column matrix holding values, stored as given."""
    return Matrix._from_grid([[value] for value in values], scalar_type)


def augment(matrix: Matrix, b: Sequence[Any]) -> Matrix:
    """[matrix | b] with b as one extra column."""
    return combine(matrix, column_matrix(b, matrix.scalar_type))


def find_inconsistent_row(reduced: Matrix) -> int | None:
    """
    Index of the first row reading 0 = c with c != 0, or None.
    
    A row is contradictory when its augmented entry is nonzero and every
    coefficient entry is zero.
    """
    zero = reduced.zero
    last = reduced.columns - 1
    for index, row in enumerate(reduced):
        if row[last] == zero:
            continue
        if all(value == zero for value in row[:last]):
            return index
    return None


def check_consistency(reduced: Matrix, message: str) -> None:
    """
    Raises:
        InconsistentSystemError: If the reduced augmented matrix has a 0 = c row
    """
    row = find_inconsistent_row(reduced)
    if row is not None:
        raise InconsistentSystemError(f"{message} (row {row} reads 0 = c)", row=row)


def extract_solution(reduced: Matrix) -> list[Any]:
    """
    Read x off a consistent reduced augmented matrix [R | c].
    
    Walks the coefficient columns left to right with a separate row cursor.
    A column whose entry at the cursor row equals one is a pivot column: its
    component is that row's augmented value and the cursor advances. Every
    other column is free and its component defaults to zero.
    
    Returns:
        One value per coefficient column
    """
    zero = reduced.zero
    one = reduced.one
    last = reduced.columns - 1
    
    solution = []
    row = 0
    for column in range(last):
        if row < reduced.rows and reduced.get(row, column) == one:
            solution.append(reduced.get(row, last))
            row += 1
        else:
            solution.append(zero)
    return solution
