"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, float64 promotion, non-numeric rejection
    - check_ndim / check_1d / check_2d: dimensionality checks
    - check_integer: integer counts, bool rejection
    - check_dimensions: positive (rows, columns) pairs
"""

import numpy as np
import pytest

from densemat.core.exceptions import (
    DimensionError,
    InvalidDimensionsError,
    ValidationError,
)
from densemat.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_dimensions,
    check_integer,
    check_ndim,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "data")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_promoted_to_float64(self):
        result = check_array(np.array([1.5, 2.5], dtype=np.float32), "data")
        assert result.dtype == np.float64

    def test_float64_passthrough(self):
        arr = np.array([1.0, 2.0])
        result = check_array(arr, "data")
        assert result.dtype == np.float64

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "rows")
        assert result.shape == (2, 2)

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "data")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "data")

    def test_rejects_bool(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([True, False], "data")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j, 3.0], "data")

    def test_rejects_ragged(self):
        with pytest.raises(ValidationError):
            check_array([[1, 2], [3]], "rows")

    def test_non_finite_accepted(self):
        result = check_array([np.nan, np.inf], "data")
        assert np.isnan(result[0])
        assert np.isinf(result[1])

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a"], "my_var")


# ═══════════════════════════════════════════════════════════════════════
# check_ndim / check_1d / check_2d
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNdim:
    """check_ndim, check_1d, check_2d enforce dimensionality."""

    def test_wrong_ndim_raises(self):
        with pytest.raises(DimensionError, match="expected 1D.*got 2D"):
            check_ndim(np.array([[1.0, 2.0]]), 1, "data")

    def test_error_includes_shape(self):
        with pytest.raises(DimensionError, match=r"shape \(3, 2\)"):
            check_ndim(np.ones((3, 2)), 1, "data")

    def test_check_1d_passes(self):
        check_1d(np.array([1.0, 2.0, 3.0]), "data")

    def test_check_1d_rejects_2d(self):
        with pytest.raises(DimensionError):
            check_1d(np.ones((2, 2)), "data")

    def test_check_2d_passes(self):
        check_2d(np.ones((2, 3)), "rows")

    def test_check_2d_rejects_1d(self):
        with pytest.raises(DimensionError):
            check_2d(np.ones(3), "rows")


# ═══════════════════════════════════════════════════════════════════════
# check_integer / check_dimensions
# ═══════════════════════════════════════════════════════════════════════


class TestCheckInteger:
    """check_integer accepts integral types and rejects bool and floats."""

    def test_python_int(self):
        assert check_integer(3, "rows") == 3

    def test_numpy_int(self):
        value = check_integer(np.int64(4), "rows")
        assert value == 4
        assert type(value) is int

    def test_rejects_float(self):
        with pytest.raises(ValidationError, match="expected an integer"):
            check_integer(2.0, "rows")

    def test_rejects_bool(self):
        with pytest.raises(ValidationError):
            check_integer(True, "rows")

    def test_rejects_string(self):
        with pytest.raises(ValidationError, match="rows"):
            check_integer("2", "rows")


class TestCheckDimensions:
    """check_dimensions requires both counts to be positive."""

    def test_positive_passes(self):
        assert check_dimensions(2, 3, "Matrix") == (2, 3)

    @pytest.mark.parametrize("rows, columns", [(0, 3), (3, 0), (-1, 2), (0, 0)])
    def test_non_positive_rejected(self, rows, columns):
        with pytest.raises(InvalidDimensionsError) as exc_info:
            check_dimensions(rows, columns, "Matrix")
        assert exc_info.value.rows == rows
        assert exc_info.value.columns == columns

    def test_message_has_context_and_shape(self):
        with pytest.raises(InvalidDimensionsError, match=r"Matrix\.reshape.*0x5"):
            check_dimensions(0, 5, "Matrix.reshape")

    def test_type_checked_before_sign(self):
        with pytest.raises(ValidationError) as exc_info:
            check_dimensions(-1.5, 2, "Matrix")
        assert not isinstance(exc_info.value, InvalidDimensionsError)
