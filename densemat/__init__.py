"""
densemat: small dense float64 matrices.

Row-major matrices with exact, reproducible multiplication and
Gauss-Jordan inversion, for callers that need general-purpose numeric
matrices without a full linear algebra stack.

Submodules:
    matrix: Matrix type, identity, multiply, invert
    core: Exceptions, validation, result envelope and compute kernels
"""

__version__ = "0.1.0"

from densemat.matrix import (
    Matrix,
    identity,
    multiply,
    invert,
    InverseSolution,
)
from densemat.core.exceptions import (
    DenseMatError,
    ValidationError,
    DimensionError,
    InvalidDimensionsError,
    DataLengthMismatchError,
    ElementCountMismatchError,
    DimensionMismatchError,
    NotSquareError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    "__version__",
    # Matrix
    "Matrix",
    "identity",
    "multiply",
    "invert",
    "InverseSolution",
    # Exceptions
    "DenseMatError",
    "ValidationError",
    "DimensionError",
    "InvalidDimensionsError",
    "DataLengthMismatchError",
    "ElementCountMismatchError",
    "DimensionMismatchError",
    "NotSquareError",
    "NumericalError",
    "SingularMatrixError",
]
