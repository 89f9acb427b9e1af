"""
Gauss-Jordan elimination kernel.

Operates in place on a raw row-major grid (list of lists). Callers own the
copy: the public solvers always hand in a fresh grid from Matrix.to_list().

Pivoting is first-nonzero: columns are scanned left to right and, within a
column, rows top to bottom. No magnitude comparison is made, so on floating
scalars this is plain Gaussian elimination without stabilization.
"""

from typing import Any


def find_pivot(
    grid: list[list[Any]],
    pivot_row: int,
    pivot_column: int,
    zero: Any,
) -> tuple[int, int] | None:
    """First nonzero (row, column) in the sub-grid below and right of the cursor."""
    for column in range(pivot_column, len(grid[0])):
        for row in range(pivot_row, len(grid)):
            if grid[row][column] != zero:
                return row, column
    return None


def gauss_jordan(
    grid: list[list[Any]],
    zero: Any,
    one: Any,
) -> tuple[list[int], int, Any]:
    """
    Reduce grid to reduced row echelon form in place.
    
    Algorithm:
        1. Find the next pivot; swap it into the pivot row, negating the
           determinant accumulator on each exchange
        2. Divide the pivot row by the pivot value, multiplying the
           accumulator by it
        3. Subtract multiples of the pivot row from every other row with
           a nonzero entry in the pivot column
        4. Advance the cursor diagonally; stop when no pivot remains
    
    Args:
        grid: Row-major grid, mutated in place
        zero: Additive identity
        one: Multiplicative identity
        
    Returns:
        (pivot_columns, row_swaps, determinant accumulator). The accumulator
        is only meaningful for square grids of full rank.
    """
    n_rows = len(grid)
    n_columns = len(grid[0])
    
    pivot_row = 0
    pivot_column = 0
    determinant = one
    pivot_columns: list[int] = []
    row_swaps = 0
    
    while pivot_row < n_rows and pivot_column < n_columns:
        found = find_pivot(grid, pivot_row, pivot_column, zero)
        if found is None:
            # Remaining rows are all zero
            break
        
        row, pivot_column = found
        if row != pivot_row:
            grid[row], grid[pivot_row] = grid[pivot_row], grid[row]
            determinant = -determinant
            row_swaps += 1
        
        # Normalize the pivot to one
        pivot = grid[pivot_row]
        factor = pivot[pivot_column]
        for column in range(pivot_column, n_columns):
            pivot[column] = pivot[column] / factor
        determinant = determinant * factor
        
        # Clear the pivot column above and below
        for index, current in enumerate(grid):
            if index == pivot_row:
                continue
            multiplier = current[pivot_column]
            if multiplier == zero:
                continue
            for column in range(pivot_column, n_columns):
                current[column] = current[column] - pivot[column] * multiplier
        
        pivot_columns.append(pivot_column)
        pivot_row += 1
        pivot_column += 1
    
    return pivot_columns, row_swaps, determinant


def has_unit_diagonal(grid: list[list[Any]], one: Any) -> bool:
    """True when every main-diagonal entry of a square grid equals one."""
    return all(grid[i][i] == one for i in range(len(grid)))
