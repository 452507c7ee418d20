"""
Exception hierarchy for densemat.

All exceptions inherit from DenseMatError to allow catching any
library-specific error. Shape problems are ValidationErrors, raised before
any computation starts; arithmetic breakdowns are NumericalErrors.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class DenseMatError(Exception):
    """Base exception for all densemat errors."""
    pass


class ValidationError(DenseMatError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Base class for every shape-related failure.
    """
    pass


class InvalidDimensionsError(DimensionError):
    """
    A non-positive row or column count was requested.

    Attributes:
        rows: Requested row count
        columns: Requested column count
    """

    def __init__(
        self,
        message: str,
        rows: int | None = None,
        columns: int | None = None
    ):
        super().__init__(message)
        self.rows = rows
        self.columns = columns


class DataLengthMismatchError(DimensionError):
    """
    The supplied buffer length disagrees with the requested shape.

    Attributes:
        expected: rows * columns
        actual: Length of the supplied buffer
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ElementCountMismatchError(DimensionError):
    """
    A reshape was requested with a different total element count.

    Attributes:
        shape: Shape of the matrix before the reshape
        requested: Shape that was asked for
    """

    def __init__(
        self,
        message: str,
        shape: tuple[int, int] | None = None,
        requested: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.shape = shape
        self.requested = requested


class DimensionMismatchError(DimensionError):
    """
    Multiplication operands have incompatible inner dimensions.

    Attributes:
        left_shape: Shape of the accumulated left operand
        right_shape: Shape of the offending right operand
        operand_index: 1-based position of the right operand in the chain
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
        operand_index: int | None = None
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape
        self.operand_index = operand_index


class NotSquareError(DimensionError):
    """
    An operation that needs a square matrix received a rectangular one.

    Attributes:
        shape: Shape of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class NumericalError(DenseMatError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when inversion meets a pivot (or 2x2 determinant) that is
    exactly 0.0. No tolerance is applied; nearly singular matrices invert.

    Attributes:
        pivot_index: Elimination column whose pivot vanished, if applicable
        determinant: Determinant value that was tested, if applicable
    """

    def __init__(
        self,
        message: str,
        pivot_index: int | None = None,
        determinant: float | None = None
    ):
        super().__init__(message)
        self.pivot_index = pivot_index
        self.determinant = determinant
