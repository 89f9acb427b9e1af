"""
Matrix entity and block operations.

Public API:
    Matrix: dense matrix over a generic scalar type
    partition(matrix, row_start, row_end, column_start, column_end) -> Matrix
    combine(left, right) -> Matrix
"""

from pymatrix.matrix.entity import Matrix
from pymatrix.matrix.blocks import partition, combine

__all__ = [
    "Matrix",
    "partition",
    "combine",
]
