"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the
matrix and linalg subpackages.

Key components:
    protocols: Scalar, ScalarType protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Tolerance tiers for approximate comparison
    timing: Section timing
"""

from pymatrix.core.protocols import Scalar, ScalarType
from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    ShapeError,
    NumericalError,
    NotSquareError,
    NotInvertibleError,
    InconsistentSystemError,
)

__all__ = [
    # Protocols
    "Scalar",
    "ScalarType",
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "ShapeError",
    "NumericalError",
    "NotSquareError",
    "NotInvertibleError",
    "InconsistentSystemError",
]
