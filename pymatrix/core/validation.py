"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages

Matrix arguments are duck-typed on their ``rows``/``columns`` attributes
so this module does not depend on the matrix package.
"""

from __future__ import annotations

import math
from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import NotSquareError, ShapeError, ValidationError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.
    
    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        
    Returns:
        numpy.ndarray with floating dtype
        
    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.
    
    Raises:
        ShapeError: If array is not 2D
    """
    if array.ndim != 2:
        raise ShapeError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_dimensions(rows: int, columns: int, name: str) -> None:
    """
    Verify a requested matrix shape has at least one row and one column.
    
    Raises:
        ShapeError: If either dimension is smaller than 1
    """
    if rows < 1 or columns < 1:
        raise ShapeError(
            f"{name}: dimensions must be at least 1x1, got {rows}x{columns}"
        )


def check_rectangular(rows: Sequence[Sequence[Any]], name: str) -> tuple[int, int]:
    """
    Verify a nested sequence is non-empty and every row has the first row's length.
    
    Args:
        rows: Nested row-major sequence
        name: Parameter name for error messages
        
    Returns:
        (n_rows, n_columns)
        
    Raises:
        ShapeError: If the nested sequence is empty or ragged
    """
    if len(rows) == 0:
        raise ShapeError(f"{name}: expected at least one row, got none")
    
    n_columns = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != n_columns:
            raise ShapeError(
                f"{name}: row {index} has {len(row)} elements, expected {n_columns} "
                f"(length of row 0)"
            )
    
    check_dimensions(len(rows), n_columns, name)
    return len(rows), n_columns


def check_flat_length(
    values: Sequence[Any],
    rows: int,
    columns: int,
    name: str,
) -> None:
    """
    Verify a flat row-major list fills exactly a rows x columns grid.
    
    Raises:
        ShapeError: If len(values) != rows * columns
    """
    check_dimensions(rows, columns, name)
    if len(values) != rows * columns:
        raise ShapeError(
            f"{name}: length {len(values)} does not match dimensions "
            f"{rows}x{columns} (expected {rows * columns})"
        )


def check_perfect_square(length: int, name: str) -> int:
    """
    Verify a length is a positive perfect square.
    
    Returns:
        The integer square root
        
    Raises:
        ShapeError: If length is zero or not a perfect square
    """
    size = math.isqrt(length)
    if length == 0 or size * size != length:
        raise ShapeError(f"{name}: length {length} is not a positive perfect square")
    return size


def check_same_rows(left: Any, right: Any, names: tuple[str, str]) -> None:
    """
    Verify two matrices have the same number of rows.
    
    Raises:
        ShapeError: If row counts differ
    """
    if left.rows != right.rows:
        raise ShapeError(
            f"Inconsistent row counts: {names[0]}={left.rows}, {names[1]}={right.rows}"
        )


def check_same_shape(left: Any, right: Any, names: tuple[str, str]) -> None:
    """
    Verify two matrices have identical shapes.
    
    Raises:
        ShapeError: If shapes differ
    """
    if (left.rows, left.columns) != (right.rows, right.columns):
        raise ShapeError(
            f"Shape mismatch: {names[0]} is {left.rows}x{left.columns}, "
            f"{names[1]} is {right.rows}x{right.columns}"
        )


def check_inner_dimensions(left: Any, right: Any, names: tuple[str, str]) -> None:
    """
    Verify left.columns == right.rows for a matrix product.
    
    Raises:
        ShapeError: If the inner dimensions differ
    """
    if left.columns != right.rows:
        raise ShapeError(
            f"Cannot multiply {names[0]} ({left.rows}x{left.columns}) by "
            f"{names[1]} ({right.rows}x{right.columns}): "
            f"{names[0]} columns must equal {names[1]} rows"
        )


def check_vector_length(vector: Sequence[Any], expected: int, name: str) -> None:
    """
    Verify a right-hand-side vector has one entry per matrix row.
    
    Raises:
        ShapeError: If len(vector) != expected
    """
    if len(vector) != expected:
        raise ShapeError(
            f"{name}: length {len(vector)} does not match matrix rows ({expected})"
        )


def check_square(matrix: Any, name: str) -> None:
    """
    Verify a matrix is square.
    
    This is a domain check, not a programmer error: a non-square matrix
    is a valid matrix that simply has no determinant or inverse.
    
    Raises:
        NotSquareError: If rows != columns
    """
    if matrix.rows != matrix.columns:
        raise NotSquareError(
            f"{name}: expected a square matrix, got {matrix.rows}x{matrix.columns}",
            shape=(matrix.rows, matrix.columns),
        )


def check_index(index: int, bound: int, name: str) -> None:
    """
    Verify 0 <= index < bound.
    
    Raises:
        IndexError: If index is out of range (negative indices included)
    """
    if not 0 <= index < bound:
        raise IndexError(f"{name} index {index} out of range [0, {bound})")


def check_block_bounds(
    start: int,
    end: int,
    bound: int,
    name: str,
) -> None:
    """
    Verify a half-open block range [start, end) is non-empty and lies within [0, bound].
    
    Raises:
        ShapeError: If the range is empty, reversed, or out of bounds
    """
    if not 0 <= start < end <= bound:
        raise ShapeError(
            f"{name}: range [{start}, {end}) must be non-empty and within [0, {bound}]"
        )
