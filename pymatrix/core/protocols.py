"""
Core protocols for PyMatrix.

These define the structural interface a scalar type must satisfy to be
stored in a Matrix. We use Protocol (structural typing) rather than ABC
(nominal typing) so that builtin numbers, fractions.Fraction,
decimal.Decimal and NumPy scalars all qualify without registration.

Design Principles:
    - Minimal contracts: prescribe only what the elimination engine uses
    - Identities come from the scalar type itself: T(0) and T(1)
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Scalar(Protocol):
    """
    Arithmetic capabilities required of every matrix entry.
    
    Addition, subtraction, multiplication and division build the
    elimination and product kernels; negation flips the determinant sign;
    ``abs`` and ``<=`` implement tolerance comparison.
    """
    
    def __add__(self, other: Any) -> Any: ...
    
    def __sub__(self, other: Any) -> Any: ...
    
    def __mul__(self, other: Any) -> Any: ...
    
    def __truediv__(self, other: Any) -> Any: ...
    
    def __neg__(self) -> Any: ...
    
    def __abs__(self) -> Any: ...
    
    def __eq__(self, other: object) -> bool: ...
    
    def __le__(self, other: Any) -> bool: ...


class ScalarType(Protocol):
    """
    A callable producing scalars from integers.
    
    ``scalar_type(0)`` is the additive identity and ``scalar_type(1)`` the
    multiplicative identity. ``int``, ``float``, ``fractions.Fraction``,
    ``decimal.Decimal`` and ``numpy.float64`` all satisfy this.
    """
    
    def __call__(self, value: Any, /) -> Any: ...
