"""
Block operations.

partition() extracts a sub-rectangle and combine() places two matrices
side by side. Together they build and split the augmented systems used
by inverse() and solve().
"""

from pymatrix.core.validation import check_block_bounds, check_same_rows
from pymatrix.matrix.entity import Matrix


def partition(
    matrix: Matrix,
    row_start: int,
    row_end: int,
    column_start: int,
    column_end: int,
) -> Matrix:
    """
    Copy of the sub-block [row_start, row_end) x [column_start, column_end).
    
    The result is re-indexed from zero, so
    ``partition(m, 0, m.rows, 0, m.columns) == m``.
    
    Raises:
        ShapeError: If either range is empty or falls outside the matrix
    """
    check_block_bounds(row_start, row_end, matrix.rows, 'rows')
    check_block_bounds(column_start, column_end, matrix.columns, 'columns')
    grid = [
        list(matrix[row][column_start:column_end])
        for row in range(row_start, row_end)
    ]
    return Matrix._from_grid(grid, matrix.scalar_type)


def combine(left: Matrix, right: Matrix) -> Matrix:
    """
    Concatenate two matrices horizontally, left's columns first.
    
    Raises:
        ShapeError: If left.rows != right.rows
    """
    check_same_rows(left, right, ('left', 'right'))
    grid = [list(left_row) + list(right_row) for left_row, right_row in zip(left, right)]
    return Matrix._from_grid(grid, left.scalar_type)
