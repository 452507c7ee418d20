"""
Shared fixtures for matrix tests.
"""

import numpy as np
import pytest

from densemat import Matrix


@pytest.fixture
def m23():
    """2x3 matrix [[1, 2, 3], [4, 5, 6]]."""
    return Matrix(2, 3, [1, 2, 3, 4, 5, 6])


@pytest.fixture
def m34():
    """3x4 matrix [[3, 4, 5, 6], [4, 5, 6, 7], [5, 6, 7, 8]]."""
    return Matrix(3, 4, [3, 4, 5, 6, 4, 5, 6, 7, 5, 6, 7, 8])


@pytest.fixture
def well_conditioned(rng):
    """Random 5x5 matrix made diagonally dominant (safely invertible)."""
    A = rng.standard_normal((5, 5)) + 10.0 * np.eye(5)
    return Matrix.from_numpy(A)
