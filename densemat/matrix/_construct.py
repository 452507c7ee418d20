"""
Constructors that build a Matrix without a caller-supplied buffer.
"""

from __future__ import annotations

import numpy as np

from densemat.core.exceptions import InvalidDimensionsError
from densemat.core.validation import check_integer
from densemat.matrix.matrix import Matrix


def identity(dimension: int) -> Matrix:
    """
    Square identity matrix: 1.0 on the main diagonal, 0.0 elsewhere.

    Raises:
        InvalidDimensionsError: If dimension <= 0
        ValidationError: If dimension is not an integer
    """
    dimension = check_integer(dimension, 'identity: dimension')
    if dimension <= 0:
        raise InvalidDimensionsError(
            f"identity: dimension must be greater than zero, got {dimension}",
            rows=dimension,
            columns=dimension,
        )
    return Matrix._wrap(dimension, dimension, np.eye(dimension, dtype=np.float64).ravel())
