"""
Tests for copy, row, column, reshape, transposed, to_numpy and allclose.
"""

import numpy as np
import pytest

from densemat import (
    ElementCountMismatchError,
    InvalidDimensionsError,
    Matrix,
    ValidationError,
)
from densemat.core.compute.tolerances import CPU_FP64, EXACT


class TestCopy:
    """copy() returns an independent matrix."""

    def test_copy_is_independent(self, m23):
        c = m23.copy()
        m23.data[:] = 0.0
        assert c.shape == (2, 3)
        np.testing.assert_array_equal(c.data, [1, 2, 3, 4, 5, 6])

    def test_mutating_copy_leaves_original(self, m23):
        c = m23.copy()
        c.set(0, 0, 100.0)
        assert m23.at(0, 0) == 1.0

    def test_copy_of_reshaped_keeps_shape(self, m23):
        m23.reshape(3, 2)
        assert m23.copy().shape == (3, 2)


class TestRowColumn:
    """row(i) and column(j) return new 1 x n and n x 1 matrices."""

    def test_rows(self, m23):
        r0 = m23.row(0)
        assert r0.shape == (1, 3)
        np.testing.assert_array_equal(r0.data, [1, 2, 3])
        r1 = m23.row(1)
        assert r1.shape == (1, 3)
        np.testing.assert_array_equal(r1.data, [4, 5, 6])

    def test_columns(self, m23):
        expected = [[1, 4], [2, 5], [3, 6]]
        for x in range(3):
            c = m23.column(x)
            assert c.shape == (2, 1)
            np.testing.assert_array_equal(c.data, expected[x])

    def test_row_is_copy(self, m23):
        r = m23.row(0)
        r.set(0, 0, -1.0)
        assert m23.at(0, 0) == 1.0

    def test_column_is_copy(self, m23):
        c = m23.column(1)
        c.set(0, 0, -1.0)
        assert m23.at(0, 1) == 2.0
        assert c.data.flags['C_CONTIGUOUS']


class TestReshape:
    """reshape() reinterprets the buffer in place when counts match."""

    def test_reshape_preserves_data_order(self, m23):
        m23.reshape(1, 6)
        assert m23.shape == (1, 6)
        np.testing.assert_array_equal(m23.data, [1, 2, 3, 4, 5, 6])

        m23.reshape(3, 2)
        assert m23.row_count == 3
        assert m23.column_count == 2
        np.testing.assert_array_equal(m23.data, [1, 2, 3, 4, 5, 6])
        assert m23.at(1, 0) == 3.0
        assert m23.at(2, 1) == 6.0

    def test_reshape_returns_none(self, m23):
        assert m23.reshape(6, 1) is None

    def test_reshape_does_not_reallocate(self, m23):
        buffer = m23.data
        m23.reshape(3, 2)
        assert m23.data is buffer

    def test_incompatible_count_leaves_shape(self, m23):
        with pytest.raises(ElementCountMismatchError) as exc_info:
            m23.reshape(7, 1)
        assert exc_info.value.shape == (2, 3)
        assert exc_info.value.requested == (7, 1)
        assert m23.shape == (2, 3)

    def test_non_positive_factors_rejected(self, m23):
        """(-2) * (-3) == 6 but would break the positive-shape invariant."""
        with pytest.raises(InvalidDimensionsError):
            m23.reshape(-2, -3)
        assert m23.shape == (2, 3)

    def test_non_integer_rejected(self, m23):
        with pytest.raises(ValidationError):
            m23.reshape(1.5, 4)
        assert m23.shape == (2, 3)


class TestTransposed:
    """transposed() swaps rows and columns into a new matrix."""

    def test_transposed(self, m23):
        t = m23.transposed()
        assert t.shape == (3, 2)
        np.testing.assert_array_equal(t.data, [1, 4, 2, 5, 3, 6])

    def test_row_vector(self):
        t = Matrix(1, 3, [1, 2, 3]).transposed()
        assert t.shape == (3, 1)
        np.testing.assert_array_equal(t.data, [1, 2, 3])

    def test_element_relation(self, rng):
        m = Matrix.from_numpy(rng.standard_normal((4, 6)))
        t = m.transposed()
        for y in range(t.row_count):
            for x in range(t.column_count):
                assert t.at(y, x) == m.at(x, y)

    def test_involution(self, rng):
        for shape in [(1, 1), (1, 5), (5, 1), (3, 7)]:
            m = Matrix.from_numpy(rng.standard_normal(shape))
            assert m.transposed().transposed() == m

    def test_independent_buffer(self, m23):
        t = m23.transposed()
        t.set(0, 1, 0.0)
        assert m23.at(1, 0) == 4.0

    def test_matches_numpy(self, rng):
        A = rng.standard_normal((3, 5))
        np.testing.assert_array_equal(Matrix.from_numpy(A).transposed().to_numpy(), A.T)


class TestInterop:
    """to_numpy() returns an independent 2-D array."""

    def test_to_numpy(self, m23):
        A = m23.to_numpy()
        assert A.shape == (2, 3)
        np.testing.assert_array_equal(A, [[1, 2, 3], [4, 5, 6]])

    def test_to_numpy_is_copy(self, m23):
        A = m23.to_numpy()
        A[0, 0] = 42.0
        assert m23.at(0, 0) == 1.0

    def test_round_trip_after_reshape(self, m23):
        m23.reshape(3, 2)
        np.testing.assert_array_equal(m23.to_numpy(), [[1, 2], [3, 4], [5, 6]])


class TestAllclose:
    """allclose() compares element-wise within a tolerance tier."""

    def test_within_tolerance(self):
        a = Matrix(1, 2, [1.0, 2.0])
        b = Matrix(1, 2, [1.0 + 1e-13, 2.0])
        assert a.allclose(b, CPU_FP64)
        assert not a.allclose(b, EXACT)

    def test_shape_mismatch_is_false(self):
        assert not Matrix(1, 2, [1, 2]).allclose(Matrix(2, 1, [1, 2]))

    def test_non_matrix_rejected(self):
        with pytest.raises(ValidationError):
            Matrix(1, 1, [1]).allclose(np.ones((1, 1)))
