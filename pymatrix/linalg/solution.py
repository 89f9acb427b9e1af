"""
Elimination payload.

EchelonParams is the immutable data produced by the Gauss-Jordan kernel
and carried in a Result envelope.
"""

from dataclasses import dataclass
from typing import Any

from pymatrix.core.exceptions import NotSquareError
from pymatrix.matrix.entity import Matrix


@dataclass(frozen=True)
class EchelonParams:
    """
    Reduced row echelon form plus the determinant gathered on the way.
    
    Attributes:
        rref: The reduced matrix (a new object; the input is never touched)
        pivot_columns: Column index of each pivot, in row order
        row_swaps: Number of row exchanges performed
        shape: (rows, columns) of the input
    """
    rref: Matrix
    pivot_columns: tuple[int, ...]
    row_swaps: int
    shape: tuple[int, int]
    _determinant: Any = None
    
    @property
    def rank(self) -> int:
        return len(self.pivot_columns)
    
    @property
    def is_square(self) -> bool:
        return self.shape[0] == self.shape[1]
    
    @property
    def determinant(self) -> Any:
        """
        Determinant of the input.
        
        Zero when the input is rank-deficient, otherwise the signed product
        of the pivot normalization factors.
        
        Raises:
            NotSquareError: If the input was not square
        """
        if not self.is_square:
            raise NotSquareError(
                f"Determinant is undefined for a {self.shape[0]}x{self.shape[1]} matrix",
                shape=self.shape,
            )
        return self._determinant
