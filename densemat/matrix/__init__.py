"""
Dense matrix module.

Provides the Matrix value type and the operations built on it.

Public API:
    Matrix(rows, columns, data)  - Construction from a flat row-major buffer
    identity(dimension)          - Square identity matrix
    multiply(m1, m2, *rest)      - Left-associative (chained) product
    invert(matrix)               - Inverse with diagnostics
"""

from densemat.matrix.matrix import Matrix
from densemat.matrix._construct import identity
from densemat.matrix._multiply import multiply
from densemat.matrix.solution import InverseParams, InverseSolution
from densemat.matrix.solvers import invert

__all__ = [
    "Matrix",
    "identity",
    "multiply",
    "invert",
    "InverseParams",
    "InverseSolution",
]
