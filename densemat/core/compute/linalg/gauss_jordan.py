"""
Matrix inversion by Gauss-Jordan elimination with row pivoting.

Three paths, chosen by dimension:
    1x1: the matrix is returned as its own inverse (scalar identity
         convention; no zero check)
    2x2: closed form through the determinant a*d - b*c
    NxN: Gauss-Jordan elimination on the augmented pair (left, right),
         where left starts as a copy of the input and right as the
         identity; the row operations that reduce left to I turn right
         into the inverse

Every singularity test compares against exactly 0.0. Nearly singular
matrices with tiny non-zero pivots are inverted anyway and can come back
with large rounding errors; use the condition number reported by invert()
to judge such results. Conversely, a 2x2 determinant that underflows to 0.0
(e.g. diag(1e-200, 1e-200)) is reported as singular even though the exact
determinant is not zero.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from densemat.core.exceptions import NotSquareError, SingularMatrixError


@dataclass(frozen=True)
class GaussJordanResult:
    """
    Result of an inversion.

    Attributes:
        inverse: Inverse matrix (n x n), freshly allocated
        method: 'scalar', 'closed_form' or 'gauss_jordan'
        pivots: Pivot values before scaling, one per column (NxN path only)
        swaps: Number of row swaps that exchanged two distinct rows
        determinant: Determinant of the input as a by-product of the method
    """
    inverse: NDArray[np.float64]
    method: str
    pivots: tuple[float, ...]
    swaps: int
    determinant: float


def first_nonzero_row(left: NDArray[np.floating[Any]], x: int) -> int:
    """
    Index of the first row at or below x whose column-x entry is non-zero.

    Returns x itself when every candidate is zero, so the caller's pivot
    test is what reports the singularity.
    """
    n = left.shape[0]
    for y in range(x, n):
        if left[y, x] != 0.0:
            return y
    return x


def gauss_jordan_inverse(
    A: NDArray[np.floating[Any]],
    name: str = 'A',
) -> GaussJordanResult:
    """
    Invert a square matrix.

    Args:
        A: Matrix to invert (n x n); not modified
        name: Operation or matrix name used in error messages

    Returns:
        GaussJordanResult with the inverse and elimination diagnostics

    Raises:
        NotSquareError: If A is not square
        SingularMatrixError: If a pivot (or the 2x2 determinant) is exactly 0.0
    """
    rows, columns = A.shape
    if rows != columns:
        raise NotSquareError(
            f"{name}: matrix is not invertible, it is not square "
            f"(got {rows}x{columns})",
            shape=(rows, columns),
        )

    n = rows

    if n == 1:
        return GaussJordanResult(
            inverse=np.array(A, dtype=np.float64),
            method='scalar',
            pivots=(),
            swaps=0,
            determinant=float(A[0, 0]),
        )

    if n == 2:
        a, b = float(A[0, 0]), float(A[0, 1])
        c, d = float(A[1, 0]), float(A[1, 1])
        det = a * d - b * c
        if det == 0.0:
            raise SingularMatrixError(
                f"{name}: matrix is not invertible, determinant is zero",
                determinant=det,
            )
        scale = 1.0 / det
        inverse = np.array(
            [[scale * d, -scale * b],
             [-scale * c, scale * a]],
            dtype=np.float64,
        )
        return GaussJordanResult(
            inverse=inverse,
            method='closed_form',
            pivots=(),
            swaps=0,
            determinant=det,
        )

    left = np.array(A, dtype=np.float64)
    right = np.eye(n, dtype=np.float64)
    pivots: list[float] = []
    swaps = 0

    # === Forward elimination ===
    for i in range(n):
        k = first_nonzero_row(left, i)
        if k != i:
            left[[i, k]] = left[[k, i]]
            right[[i, k]] = right[[k, i]]
            swaps += 1

        pivot = float(left[i, i])
        if pivot == 0.0:
            raise SingularMatrixError(
                f"{name}: matrix is not invertible, pivot in column {i} is zero",
                pivot_index=i,
                determinant=0.0,
            )
        pivots.append(pivot)

        f = 1.0 / pivot
        left[i] *= f
        right[i] *= f

        for y in range(i + 1, n):
            scale = -left[y, i]
            left[y] += scale * left[i]
            right[y] += scale * right[i]

    # === Back substitution ===
    for i in range(n - 1, -1, -1):
        for y in range(i):
            scale = -left[y, i]
            left[y] += scale * left[i]
            right[y] += scale * right[i]

    determinant = -1.0 if swaps % 2 else 1.0
    for pivot in pivots:
        determinant *= pivot

    return GaussJordanResult(
        inverse=right,
        method='gauss_jordan',
        pivots=tuple(pivots),
        swaps=swaps,
        determinant=determinant,
    )
