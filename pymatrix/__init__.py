"""
PyMatrix: dense matrix algebra over a generic scalar type.

Row reduction (RREF) is the single engine behind determinant, inverse,
linear solve and normal-equation least squares. Scalars may be any type
supporting field arithmetic: int, float, fractions.Fraction,
decimal.Decimal, NumPy scalars.

Submodules:
    matrix: Matrix entity and block operations
    linalg: Elimination engine and derived solvers
    core: Exceptions, validation, protocols, result envelope, tolerances
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    ShapeError,
    NumericalError,
    NotSquareError,
    NotInvertibleError,
    InconsistentSystemError,
)
from pymatrix.matrix import Matrix, partition, combine
from pymatrix.linalg import (
    EchelonParams,
    reduced_echelon_and_determinant,
    reduced_echelon_form,
    determinant,
    rank,
    inverse,
    solve,
    least_squares_solution,
    extract_solution,
)

__all__ = [
    "__version__",
    "Matrix",
    "partition",
    "combine",
    "EchelonParams",
    "reduced_echelon_and_determinant",
    "reduced_echelon_form",
    "determinant",
    "rank",
    "inverse",
    "solve",
    "least_squares_solution",
    "extract_solution",
    "PyMatrixError",
    "ValidationError",
    "ShapeError",
    "NumericalError",
    "NotSquareError",
    "NotInvertibleError",
    "InconsistentSystemError",
]
