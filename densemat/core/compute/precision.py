"""
Closeness checks used by Matrix.allclose(), and the condition number
reported by invert().
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


# Default tolerance for numerical comparisons (relative)
DEFAULT_RTOL: float = 1e-12

# Default tolerance for considering values as zero (absolute)
DEFAULT_ATOL: float = 1e-14


def is_close(
    a: float | NDArray[np.floating[Any]],
    b: float | NDArray[np.floating[Any]],
    rtol: float = DEFAULT_RTOL,
    atol: float = DEFAULT_ATOL
) -> bool | NDArray[np.bool_]:
    """
    Check if values are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|

    Returns:
        Boolean or boolean array indicating closeness
    """
    return np.abs(a - b) <= atol + rtol * np.abs(b)


def condition_number(A: NDArray[np.floating[Any]]) -> float:
    """
    Compute the 2-norm condition number of a square matrix using SVD.

    Args:
        A: Input matrix (n x n)

    Returns:
        Ratio of largest to smallest singular value.
        Returns inf if the matrix is singular or contains non-finite values.
    """
    if not np.all(np.isfinite(A)):
        return float(np.inf)
    s = np.linalg.svd(A, compute_uv=False)
    if s[-1] == 0:
        return float(np.inf)
    return float(s[0] / s[-1])
