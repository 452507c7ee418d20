"""
Linear algebra kernels for densemat.

Array-level implementations of the two non-trivial algorithms. They take
and return NumPy arrays; the Matrix type in densemat.matrix wraps them.

All functions follow these conventions:
    - Inputs are 2D float64 arrays and are never modified
    - Outputs are freshly allocated
    - Errors are raised immediately with clear messages

Submodules:
    matmul: Matrix product with fixed accumulation order
    gauss_jordan: Inversion by Gauss-Jordan elimination
"""

from densemat.core.compute.linalg.matmul import matmul_ordered
from densemat.core.compute.linalg.gauss_jordan import (
    GaussJordanResult,
    first_nonzero_row,
    gauss_jordan_inverse,
)

__all__ = [
    # Product
    "matmul_ordered",
    # Inversion
    "GaussJordanResult",
    "first_nonzero_row",
    "gauss_jordan_inverse",
]
