"""
pytest configuration and shared fixtures.
"""

from fractions import Fraction

import numpy as np
import pytest

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def well_conditioned(rng):
    """Random 4x4 float matrix, diagonally dominant so it is safely invertible."""
    A = rng.standard_normal((4, 4)) + 8.0 * np.eye(4)
    return Matrix.from_array(A)


@pytest.fixture
def regression_data(rng):
    """Overdetermined system: 30 observations, intercept plus two predictors."""
    n = 30
    X = np.column_stack([np.ones(n), rng.standard_normal(n), rng.standard_normal(n)])
    beta_true = np.array([1.0, -2.0, 0.5])
    y = X @ beta_true + rng.standard_normal(n) * 0.1
    return X, y, beta_true


@pytest.fixture
def exact_matrix():
    """3x3 Fraction matrix with determinant -1."""
    return Matrix.from_nested_list(
        [[2, 1, 1], [1, 3, 2], [1, 0, 0]],
        scalar_type=Fraction,
    )
