"""
Tests for the Gauss-Jordan engine: RREF, determinant, rank.
"""

from fractions import Fraction

import numpy as np
import pytest
from scipy import linalg as sp_linalg

from pymatrix import (
    Matrix,
    NotSquareError,
    determinant,
    rank,
    reduced_echelon_and_determinant,
    reduced_echelon_form,
)


def frac_matrix(rows):
    return Matrix.from_nested_list(rows, scalar_type=Fraction)


# ═══════════════════════════════════════════════════════════════════════
# Reduced row echelon form
# ═══════════════════════════════════════════════════════════════════════


class TestReducedEchelonForm:

    def test_invertible_reduces_to_identity(self, exact_matrix):
        assert reduced_echelon_form(exact_matrix) == Matrix.identity_matrix(3, scalar_type=Fraction)

    def test_rank_deficient(self):
        m = frac_matrix([[1, 2, 3], [2, 4, 6], [1, 1, 1]])
        expected = frac_matrix([[1, 0, -1], [0, 1, 2], [0, 0, 0]])
        assert reduced_echelon_form(m) == expected

    def test_wide_matrix_skips_zero_column(self):
        m = frac_matrix([[0, 2, 4, 2], [0, 1, 3, 2]])
        expected = frac_matrix([[0, 1, 0, -1], [0, 0, 1, 1]])
        assert reduced_echelon_form(m) == expected

    def test_tall_matrix(self):
        m = frac_matrix([[1, 2], [3, 4], [5, 6]])
        expected = frac_matrix([[1, 0], [0, 1], [0, 0]])
        assert reduced_echelon_form(m) == expected

    def test_zero_matrix(self):
        m = Matrix(2, 3)
        assert reduced_echelon_form(m) == m

    def test_input_not_mutated(self, exact_matrix):
        before = exact_matrix.to_list()
        reduced_echelon_form(exact_matrix)
        assert exact_matrix.to_list() == before

    def test_idempotent(self, rng):
        m = Matrix.from_array(rng.integers(-5, 6, size=(4, 6)).astype(float))
        once = reduced_echelon_form(m)
        assert reduced_echelon_form(once) == once

    def test_idempotent_exact(self):
        m = frac_matrix([[2, 4, 1, 3], [1, 2, 0, 1], [3, 6, 1, 4]])
        once = reduced_echelon_form(m)
        assert reduced_echelon_form(once) == once

    def test_method_form(self, exact_matrix):
        assert exact_matrix.reduced_echelon_form() == reduced_echelon_form(exact_matrix)

    def test_pivots_are_exactly_one(self, rng):
        m = Matrix.from_array(rng.standard_normal((3, 5)))
        result = reduced_echelon_and_determinant(m).params
        for row, column in enumerate(result.pivot_columns):
            assert result.rref.get(row, column) == 1.0


# ═══════════════════════════════════════════════════════════════════════
# Result envelope
# ═══════════════════════════════════════════════════════════════════════


class TestEchelonResult:

    def test_info_and_timing(self, exact_matrix):
        result = reduced_echelon_and_determinant(exact_matrix)
        assert result.backend_name == "python_gauss_jordan"
        assert result.info["method"] == "gauss_jordan"
        assert result.info["pivoting"] == "first_nonzero"
        assert result.info["rank"] == 3
        assert result.info["shape"] == (3, 3)
        assert {"total_seconds", "elimination", "determinant"} <= set(result.timing)
        assert result.total_seconds >= 0.0

    def test_rank_deficiency_noted(self):
        singular = reduced_echelon_and_determinant(frac_matrix([[1, 2], [2, 4]]))
        assert singular.has_warning("rank 1 < 2")
        full = reduced_echelon_and_determinant(frac_matrix([[1, 2], [3, 4]]))
        assert full.warnings == ()

    def test_pivot_columns_and_swaps(self):
        m = frac_matrix([[0, 1], [1, 0]])
        params = reduced_echelon_and_determinant(m).params
        assert params.pivot_columns == (0, 1)
        assert params.row_swaps == 1
        assert params.rank == 2

    def test_non_square_determinant_raises(self):
        params = reduced_echelon_and_determinant(Matrix(2, 3)).params
        assert not params.is_square
        with pytest.raises(NotSquareError) as exc_info:
            params.determinant
        assert exc_info.value.shape == (2, 3)

    def test_rref_available_for_non_square(self):
        params = reduced_echelon_and_determinant(frac_matrix([[2, 4, 6]])).params
        assert params.rref == frac_matrix([[1, 2, 3]])


# ═══════════════════════════════════════════════════════════════════════
# Determinant
# ═══════════════════════════════════════════════════════════════════════


class TestDeterminant:

    def test_diagonal(self):
        assert determinant(Matrix.from_nested_list([[2, 0], [0, 2]])) == 4

    def test_exact(self, exact_matrix):
        assert determinant(exact_matrix) == Fraction(-1)

    def test_identity(self):
        assert determinant(Matrix.identity_matrix(4)) == 1.0

    def test_singular_is_zero(self):
        assert determinant(Matrix.from_nested_list([[1, 2], [2, 4]])) == 0

    def test_zero_matrix(self):
        assert determinant(Matrix(3, 3)) == 0.0

    def test_not_square(self):
        with pytest.raises(NotSquareError):
            determinant(Matrix(2, 3))

    def test_row_swap_flips_sign(self, exact_matrix):
        rows = exact_matrix.to_list()
        swapped = Matrix.from_nested_list([rows[1], rows[0], rows[2]])
        assert determinant(swapped) == -determinant(exact_matrix)

    def test_row_scaling_is_linear(self, exact_matrix):
        rows = exact_matrix.to_list()
        scaled = Matrix.from_nested_list([[5 * v for v in rows[0]], rows[1], rows[2]])
        assert determinant(scaled) == 5 * determinant(exact_matrix)

    def test_matches_scipy(self, rng):
        A = rng.standard_normal((5, 5))
        assert determinant(Matrix.from_array(A)) == pytest.approx(sp_linalg.det(A), rel=1e-8)

    def test_method_form(self, exact_matrix):
        assert exact_matrix.determinant() == Fraction(-1)


# ═══════════════════════════════════════════════════════════════════════
# Rank
# ═══════════════════════════════════════════════════════════════════════


class TestRank:

    @pytest.mark.parametrize(
        "rows, expected",
        [
            ([[1, 2], [3, 4]], 2),
            ([[1, 2], [2, 4]], 1),
            ([[0, 0], [0, 0]], 0),
            ([[1, 2, 3]], 1),
            ([[1, 0], [0, 1], [1, 1]], 2),
        ],
    )
    def test_rank(self, rows, expected):
        m = frac_matrix(rows)
        assert rank(m) == expected
        assert m.rank() == expected

    def test_matches_numpy(self, rng):
        A = rng.integers(-3, 4, size=(4, 3)) @ rng.integers(-3, 4, size=(3, 5))
        m = Matrix.from_nested_list(A.tolist(), scalar_type=Fraction)
        assert rank(m) == np.linalg.matrix_rank(A)
