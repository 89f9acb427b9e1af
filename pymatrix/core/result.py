"""
Result envelope for elimination.

Row reduction is the one expensive step in the library, so its output is
wrapped with how it was produced: the kernel name, a timing breakdown,
structural metadata (rank, shape) and notes about degenerate input.

Design decisions:
    - Generic over parameter payload P
    - timing is always present; every reduction is timed section by section
    - notes are plain strings, never emitted as Python warnings
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable envelope around a reduction payload.

    Attributes:
        params: The payload (EchelonParams for the Gauss-Jordan kernel)
        timing: Seconds per section plus 'total_seconds'
        backend_name: Identifier of the kernel that produced the payload
        info: Structural metadata ('method', 'pivoting', 'rank', 'shape')
        warnings: Notes about degenerate input, e.g. rank deficiency
    """
    params: P
    timing: dict[str, float]
    backend_name: str
    info: dict[str, Any] = field(default_factory=dict)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def total_seconds(self) -> float:
        return self.timing['total_seconds']

    def has_warning(self, substring: str) -> bool:
        """True if any note mentions substring (e.g. 'rank-deficient')."""
        return any(substring in note for note in self.warnings)
