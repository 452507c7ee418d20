"""
Matrix product with a fixed accumulation order.

BLAS-backed ``A @ B`` is free to reorder (and block, and fuse) the inner
sums, so its results can differ in the last bit between machines. The
kernel here accumulates every output element from 0.0 over the shared
dimension in increasing index order, which makes products reproducible
bit-for-bit across implementations fed the same inputs.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray


def matmul_ordered(
    A: NDArray[np.floating[Any]],
    B: NDArray[np.floating[Any]],
) -> NDArray[np.float64]:
    """
    Multiply A (m x k) by B (k x n) with in-order accumulation.

    Each step adds the rank-1 outer product of column j of A and row j of B,
    so element (y, x) receives A[y, j] * B[j, x] for j = 0, 1, ..., k-1 in
    that order, starting from 0.0.

    Args:
        A: Left operand (m x k)
        B: Right operand (k x n); shapes are assumed compatible

    Returns:
        Product array (m x n), freshly allocated
    """
    m, k = A.shape
    n = B.shape[1]
    product = np.zeros((m, n), dtype=np.float64)
    for j in range(k):
        product += np.multiply.outer(A[:, j], B[j, :])
    return product
