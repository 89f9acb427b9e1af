"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. The hierarchy is split in two tiers:

    ValidationError: programmer errors (malformed shapes). These are raised
        immediately and are not meant to be caught in normal control flow.
    NumericalError: mathematically meaningful outcomes (non-square input,
        singular matrix, inconsistent system). Calling code is expected to
        branch on these.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class ShapeError(ValidationError):
    """
    Matrix or vector dimensions are incorrect or inconsistent.
    
    Raised for ragged nested lists, flat lists whose length does not match
    the requested dimensions, and operand pairs whose shapes are
    incompatible for the requested operation.
    """
    pass


class NumericalError(PyMatrixError):
    """
    A well-formed input has no answer for the requested operation.
    
    Base class for the recoverable, domain-level failures.
    """
    pass


class NotSquareError(NumericalError):
    """
    Operation is only defined for square matrices.
    
    Attributes:
        shape: (rows, columns) of the offending matrix
    """
    
    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class NotInvertibleError(NumericalError):
    """
    Matrix is singular.
    
    Raised when the left block of the reduced [A | I] is not the identity.
    
    Attributes:
        size: Order of the square matrix
        rank: Number of pivots found during elimination, if computed
    """
    
    def __init__(
        self,
        message: str,
        size: int | None = None,
        rank: int | None = None,
    ):
        super().__init__(message)
        self.size = size
        self.rank = rank


class InconsistentSystemError(NumericalError):
    """
    Linear system has no solution.
    
    Raised when the reduced augmented matrix contains a row of the
    form 0 = c with c != 0.
    
    Attributes:
        row: Index of the first contradictory row in the reduced system
    """
    
    def __init__(self, message: str, row: int | None = None):
        super().__init__(message)
        self.row = row
