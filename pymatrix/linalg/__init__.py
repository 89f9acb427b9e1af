"""
Row reduction and the solvers built on it.

Public API:
    reduced_echelon_and_determinant(A) -> Result[EchelonParams]
    reduced_echelon_form(A) -> Matrix
    determinant(A), rank(A), inverse(A)
    solve(A, b), least_squares_solution(A, b) -> list
    extract_solution(reduced) -> list

Example:
    >>> from pymatrix import Matrix
    >>> from pymatrix.linalg import solve
    >>> solve(Matrix.from_nested_list([[1, 1], [0, 1]]), [3, 1])
    [2.0, 1.0]
"""

from pymatrix.linalg.solution import EchelonParams
from pymatrix.linalg._common import extract_solution
from pymatrix.linalg.solvers import (
    reduced_echelon_and_determinant,
    reduced_echelon_form,
    determinant,
    rank,
    inverse,
    solve,
    least_squares_solution,
)

__all__ = [
    "EchelonParams",
    "reduced_echelon_and_determinant",
    "reduced_echelon_form",
    "determinant",
    "rank",
    "inverse",
    "solve",
    "least_squares_solution",
    "extract_solution",
]
