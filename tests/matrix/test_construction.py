"""
Tests for Matrix construction and element access.
"""

import copy
from fractions import Fraction

import numpy as np
import pytest

from pymatrix import Matrix, ShapeError, ValidationError


# ═══════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════


class TestConstructors:

    def test_zero_matrix(self):
        m = Matrix(2, 3)
        assert m.shape == (2, 3)
        assert m.to_list() == [[0.0] * 3, [0.0] * 3]
        assert m.scalar_type is float

    def test_zero_matrix_rows_are_independent(self):
        m = Matrix(2, 2)
        m.set(0, 0, 5.0)
        assert m.get(1, 0) == 0.0

    @pytest.mark.parametrize("rows, columns", [(0, 1), (1, 0)])
    def test_empty_shape_rejected(self, rows, columns):
        with pytest.raises(ShapeError):
            Matrix(rows, columns)

    def test_square_matrix(self):
        assert Matrix.square_matrix(3).shape == (3, 3)

    def test_identity(self):
        m = Matrix.identity_matrix(3, scalar_type=Fraction)
        assert m.to_list() == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
        assert all(isinstance(v, Fraction) for row in m for v in row)

    def test_from_nested_list_infers_type(self):
        m = Matrix.from_nested_list([[1, 2], [3, 4]])
        assert m.scalar_type is int
        assert m.zero == 0 and m.one == 1

    def test_from_nested_list_coerces_with_explicit_type(self):
        m = Matrix.from_nested_list([[1, 2], [3, 4]], scalar_type=Fraction)
        assert isinstance(m.get(1, 1), Fraction)

    def test_from_nested_list_copies_input(self):
        rows = [[1, 2], [3, 4]]
        m = Matrix.from_nested_list(rows)
        rows[0][0] = 99
        assert m.get(0, 0) == 1

    def test_ragged_nested_list(self):
        with pytest.raises(ShapeError, match="row 1"):
            Matrix.from_nested_list([[1, 2, 3], [4, 5]])

    def test_from_flat_list_row_major(self):
        m = Matrix.from_flat_list([1, 2, 3, 4, 5, 6], 2, 3)
        assert m.to_list() == [[1, 2, 3], [4, 5, 6]]

    def test_from_flat_list_wrong_length(self):
        with pytest.raises(ShapeError, match="5"):
            Matrix.from_flat_list([1, 2, 3, 4, 5], rows=2, columns=3)

    def test_square_from_flat_list(self):
        m = Matrix.square_from_flat_list([1, 2, 3, 4, 5, 6, 7, 8, 9])
        assert m.shape == (3, 3)
        assert m[2] == (7, 8, 9)

    def test_square_from_flat_list_not_square(self):
        with pytest.raises(ShapeError, match="perfect square"):
            Matrix.square_from_flat_list([1, 2, 3])

    def test_from_array(self):
        m = Matrix.from_array(np.arange(6).reshape(2, 3))
        assert m.scalar_type is float
        assert m.to_list() == [[0.0, 1.0, 2.0], [3.0, 4.0, 5.0]]

    def test_from_array_rejects_vector(self):
        with pytest.raises(ShapeError):
            Matrix.from_array(np.ones(3))

    def test_from_array_rejects_strings(self):
        with pytest.raises(ValidationError):
            Matrix.from_array([["a"]])

    def test_to_array_round_trip(self, rng):
        A = rng.standard_normal((3, 2))
        np.testing.assert_array_equal(Matrix.from_array(A).to_array(), A)


# ═══════════════════════════════════════════════════════════════════════
# Access
# ═══════════════════════════════════════════════════════════════════════


class TestAccess:

    def test_get_set(self):
        m = Matrix(2, 2)
        m.set(1, 0, 3.5)
        assert m.get(1, 0) == 3.5
        assert m[1, 0] == 3.5

    def test_tuple_setitem(self):
        m = Matrix(2, 2)
        m[0, 1] = 7.0
        assert m.get(0, 1) == 7.0

    def test_row_index_returns_tuple(self):
        m = Matrix.from_nested_list([[1, 2], [3, 4]])
        assert m[1] == (3, 4)
        assert m[1][0] == 3

    def test_row_assignment_rejected(self):
        m = Matrix(2, 2)
        with pytest.raises(TypeError):
            m[0] = [1.0, 2.0]

    @pytest.mark.parametrize("row, column", [(2, 0), (0, 2), (-1, 0), (0, -1)])
    def test_out_of_range(self, row, column):
        m = Matrix(2, 2)
        with pytest.raises(IndexError):
            m.get(row, column)
        with pytest.raises(IndexError):
            m.set(row, column, 1.0)

    def test_row_index_out_of_range(self):
        with pytest.raises(IndexError):
            Matrix(2, 2)[2]

    def test_iteration_and_len(self):
        m = Matrix.from_nested_list([[1, 2], [3, 4], [5, 6]])
        assert len(m) == 3
        assert list(m) == [(1, 2), (3, 4), (5, 6)]


# ═══════════════════════════════════════════════════════════════════════
# Value semantics
# ═══════════════════════════════════════════════════════════════════════


class TestValueSemantics:

    def test_clone_is_independent(self):
        m = Matrix.from_nested_list([[1, 2], [3, 4]])
        c = m.clone()
        c.set(0, 0, 100)
        assert m.get(0, 0) == 1
        assert c.get(0, 0) == 100

    @pytest.mark.parametrize("copier", [copy.copy, copy.deepcopy])
    def test_copy_module(self, copier):
        m = Matrix.from_nested_list([[1, 2], [3, 4]])
        c = copier(m)
        c.set(1, 1, 0)
        assert m.get(1, 1) == 4

    def test_to_list_is_a_copy(self):
        m = Matrix.from_nested_list([[1, 2]])
        grid = m.to_list()
        grid[0][0] = 50
        assert m.get(0, 0) == 1

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Matrix(1, 1))

    def test_repr(self):
        assert repr(Matrix.from_nested_list([[1, 2]])) == "Matrix([[1, 2]], scalar_type=int)"
