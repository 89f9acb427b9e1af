"""
Tolerance tiers for approximate matrix comparison.

Exact scalar domains (int, Fraction) compare with delta = 0. Floating
domains accumulate round-off through elimination, so comparisons of
derived results (A @ inverse(A) against the identity, A @ x against b)
need a non-zero delta.

Used by Matrix.approx_equals and by the test suite.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Any


@dataclass(frozen=True)
class ToleranceTier:
    """Absolute cellwise tolerance for Matrix.equals."""
    delta: float
    name: str
    description: str


# Exact arithmetic: structural equality
EXACT = ToleranceTier(
    delta=0,
    name='exact',
    description='Exact scalar domains (int, Fraction): cellwise equality',
)

# Double precision, well-conditioned input
FP64 = ToleranceTier(
    delta=1e-10,
    name='fp64',
    description='Double precision, well-conditioned matrices',
)

# Double precision, ill-conditioned input or normal equations
# (cond(AᵗA) = cond(A)²)
FP64_LOOSE = ToleranceTier(
    delta=1e-6,
    name='fp64_loose',
    description='Double precision, ill-conditioned or normal-equation results',
)

# Single precision (numpy.float32 entries)
FP32 = ToleranceTier(
    delta=1e-4,
    name='fp32',
    description='Single precision scalars',
)

EXACT_TYPES = (int, Fraction)


def select_tolerance(scalar_type: Any, ill_conditioned: bool = False) -> ToleranceTier:
    """Select appropriate tolerance tier for a given scalar type."""
    if isinstance(scalar_type, type) and issubclass(scalar_type, EXACT_TYPES):
        return EXACT
    if getattr(scalar_type, '__name__', '') == 'float32':
        return FP32
    if ill_conditioned:
        return FP64_LOOSE
    return FP64
