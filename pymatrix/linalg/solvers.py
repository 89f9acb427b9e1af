"""
Elimination-based linear algebra.

Every operation here reduces a freshly copied grid with the Gauss-Jordan
kernel and interprets the result:

    reduced_echelon_and_determinant(A) -> Result[EchelonParams]
    reduced_echelon_form(A)            -> Matrix
    determinant(A)                     -> scalar
    rank(A)                            -> int
    inverse(A)                         -> Matrix       (reduce [A | I], split)
    solve(A, b)                        -> list         (reduce [A | b], extract)
    least_squares_solution(A, b)       -> list         (solve AᵗA x = Aᵗb)

Shape problems raise ShapeError immediately. NotSquareError,
NotInvertibleError and InconsistentSystemError are the outcomes callers
are expected to handle.
"""

import warnings
from typing import Any, Sequence

from pymatrix.core.exceptions import NotInvertibleError
from pymatrix.core.result import Result
from pymatrix.core.timing import Timer
from pymatrix.core.validation import check_square, check_vector_length
from pymatrix.linalg._common import augment, check_consistency, column_matrix, extract_solution
from pymatrix.linalg._elimination import gauss_jordan, has_unit_diagonal
from pymatrix.linalg.solution import EchelonParams
from pymatrix.matrix.blocks import combine, partition
from pymatrix.matrix.entity import Matrix

BACKEND_NAME = 'python_gauss_jordan'


def reduced_echelon_and_determinant(matrix: Matrix) -> Result[EchelonParams]:
    """
    Reduce a matrix to RREF, collecting its determinant along the way.
    
    The determinant is only defined for square input. For a square matrix
    whose reduced form is not the identity (rank-deficient), it is zero;
    otherwise it is the product of the pivot factors with one sign flip per
    row exchange.
    
    Args:
        matrix: Any matrix; it is copied, never modified
        
    Returns:
        Result containing EchelonParams. ``params.determinant`` raises
        NotSquareError for non-square input.
        
    Example:
        >>> result = reduced_echelon_and_determinant(Matrix.from_nested_list([[2, 0], [0, 2]]))
        >>> result.params.determinant
        4.0
    """
    timer = Timer()
    timer.start()
    
    grid = matrix.to_list()
    zero, one = matrix.zero, matrix.one
    
    with timer.section('elimination'):
        pivot_columns, row_swaps, accumulated = gauss_jordan(grid, zero, one)
    
    with timer.section('determinant'):
        det = None
        if matrix.is_square:
            det = accumulated if has_unit_diagonal(grid, one) else zero
    
    timer.stop()
    
    notes = []
    if len(pivot_columns) < min(matrix.shape):
        notes.append(
            f"rank-deficient: rank {len(pivot_columns)} < {min(matrix.shape)}"
        )
    
    params = EchelonParams(
        rref=Matrix._from_grid(grid, matrix.scalar_type),
        pivot_columns=tuple(pivot_columns),
        row_swaps=row_swaps,
        shape=matrix.shape,
        _determinant=det,
    )
    
    return Result(
        params=params,
        info={
            'method': 'gauss_jordan',
            'pivoting': 'first_nonzero',
            'rank': params.rank,
            'shape': matrix.shape,
        },
        timing=timer.result(),
        backend_name=BACKEND_NAME,
        warnings=tuple(notes),
    )


def reduced_echelon_form(matrix: Matrix) -> Matrix:
    """Reduced row echelon form of matrix, as a new Matrix."""
    return reduced_echelon_and_determinant(matrix).params.rref


def determinant(matrix: Matrix) -> Any:
    """
    Determinant of a square matrix.
    
    Raises:
        NotSquareError: If matrix is not square
    """
    check_square(matrix, 'matrix')
    return reduced_echelon_and_determinant(matrix).params.determinant


def rank(matrix: Matrix) -> int:
    """Number of pivots in the reduced row echelon form."""
    return reduced_echelon_and_determinant(matrix).params.rank


def inverse(matrix: Matrix) -> Matrix:
    """
    Inverse of a square matrix via Gauss-Jordan on [A | I].
    
    Raises:
        NotSquareError: If matrix is not square
        NotInvertibleError: If the left block of the reduced [A | I] is not
            exactly the identity
    """
    check_square(matrix, 'matrix')
    size = matrix.rows
    identity = Matrix.identity_matrix(size, scalar_type=matrix.scalar_type)
    
    echelon = reduced_echelon_and_determinant(combine(matrix, identity)).params
    reduced = echelon.rref
    
    if partition(reduced, 0, size, 0, size) != identity:
        matrix_rank = sum(1 for column in echelon.pivot_columns if column < size)
        raise NotInvertibleError(
            f"Matrix is singular (rank {matrix_rank} < {size})",
            size=size,
            rank=matrix_rank,
        )
    
    return partition(reduced, 0, size, size, 2 * size)


def solve(matrix: Matrix, b: Sequence[Any]) -> list[Any]:
    """
    Solve A x = b by reducing [A | b].
    
    Free variables default to zero rather than being parameterized, so an
    underdetermined consistent system yields one particular solution.
    
    Args:
        matrix: Coefficient matrix A (m x n)
        b: Right-hand side, one entry per row of A
        
    Returns:
        x, one value per column of A
        
    Raises:
        ShapeError: If len(b) != matrix.rows
        InconsistentSystemError: If the system has no solution
    """
    check_vector_length(b, matrix.rows, 'b')
    reduced = reduced_echelon_form(augment(matrix, b))
    check_consistency(reduced, "The system is inconsistent and has no solution")
    return extract_solution(reduced)


def least_squares_solution(matrix: Matrix, b: Sequence[Any]) -> list[Any]:
    """
    Least-squares solution of A x ≈ b via the normal equations AᵗA x = Aᵗb.
    
    Squaring A squares its condition number, so on floating scalars this
    loses roughly twice the digits a QR-based solver would. When AᵗA is
    rank-deficient the minimizer is not unique; a RuntimeWarning is issued
    and free variables default to zero.
    
    Args:
        matrix: Design matrix A (m x n)
        b: Observations, one entry per row of A
        
    Returns:
        x, one value per column of A
        
    Raises:
        ShapeError: If len(b) != matrix.rows
        InconsistentSystemError: If the reduced normal equations contain a
            0 = c row. The normal equations are always consistent in exact
            arithmetic, so this signals floating-point round-off.
    """
    check_vector_length(b, matrix.rows, 'b')
    
    transposed = matrix.transpose()
    normal = transposed.multiply(matrix)
    rhs = transposed.multiply(column_matrix(b, matrix.scalar_type))
    
    echelon = reduced_echelon_and_determinant(combine(normal, rhs)).params
    normal_rank = sum(1 for column in echelon.pivot_columns if column < normal.columns)
    if normal_rank < normal.columns:
        warnings.warn(
            f"AᵗA is rank-deficient (rank {normal_rank} < {normal.columns}); "
            f"the least-squares solution is not unique and free variables are set to zero",
            RuntimeWarning,
            stacklevel=2,
        )
    
    check_consistency(
        echelon.rref,
        "The normal equations are inconsistent, which indicates an arithmetic "
        "problem such as floating-point round-off",
    )
    return extract_solution(echelon.rref)
