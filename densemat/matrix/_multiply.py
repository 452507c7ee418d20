"""
Matrix multiplication, including chained products.

multiply(m1, m2, m3, ..., mk) is multiply(multiply(m1, m2), m3, ..., mk):
strictly left-associative, stopping at the first incompatible pair.
"""

from __future__ import annotations

from densemat.core.compute.linalg.matmul import matmul_ordered
from densemat.core.exceptions import DimensionMismatchError, ValidationError
from densemat.matrix.matrix import Matrix


def _product(left: Matrix, right: Matrix, operand_index: int) -> Matrix:
    if left.column_count != right.row_count:
        raise DimensionMismatchError(
            f"multiply: first matrix column count must match second matrix "
            f"row count (operand {operand_index}: "
            f"{left.row_count}x{left.column_count} times "
            f"{right.row_count}x{right.column_count})",
            left_shape=left.shape,
            right_shape=right.shape,
            operand_index=operand_index,
        )
    product = matmul_ordered(left.to_numpy(), right.to_numpy())
    return Matrix._wrap(left.row_count, right.column_count, product.ravel())


def multiply(m1: Matrix, m2: Matrix, *rest: Matrix) -> Matrix:
    """
    Matrix product of two or more matrices.

    Each element of a pairwise product is accumulated from 0.0 over the
    shared dimension in increasing order, so results are reproducible
    bit-for-bit.

    Args:
        m1: Leftmost operand
        m2: Second operand
        *rest: Further operands, applied left to right

    Returns:
        New matrix of shape m1.row_count x (last operand).column_count

    Raises:
        DimensionMismatchError: At the first operand whose row count differs
            from the column count of the product accumulated so far
        ValidationError: If an operand is not a Matrix
    """
    operands = (m1, m2) + rest
    for index, operand in enumerate(operands):
        if not isinstance(operand, Matrix):
            raise ValidationError(
                f"multiply: operand {index} must be a Matrix, "
                f"got {type(operand).__name__}"
            )

    p = _product(m1, m2, 1)
    for index, operand in enumerate(rest, start=2):
        p = _product(p, operand, index)
    return p
