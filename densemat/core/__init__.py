"""
Core infrastructure for densemat.

Shared abstractions and utilities used by the matrix module.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    result: Generic Result[P] envelope
    compute: Timing, precision, tolerances and linear algebra kernels
"""

from densemat.core.result import Result
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
    # Result
    "Result",
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
