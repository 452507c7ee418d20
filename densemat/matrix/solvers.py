"""
Diagnostic inversion entry point.

invert() runs exactly the algorithm behind Matrix.inverse() and wraps the
result with timing, the condition number of the input and elimination
diagnostics.
"""

from __future__ import annotations

import warnings

from densemat.core.compute.linalg.gauss_jordan import gauss_jordan_inverse
from densemat.core.compute.precision import condition_number
from densemat.core.compute.timing import Timer
from densemat.core.compute.tolerances import (
    CONDITION_WARNING_THRESHOLD,
    ILL_CONDITIONED_THRESHOLD,
)
from densemat.core.exceptions import ValidationError
from densemat.core.result import Result
from densemat.matrix.matrix import Matrix
from densemat.matrix.solution import InverseParams, InverseSolution


BACKEND_NAME = 'cpu_gauss_jordan'


def invert(matrix: Matrix) -> InverseSolution:
    """
    Invert a square matrix and report diagnostics.

    The inverse is identical to matrix.inverse(). Singularity is still
    decided by exact comparison with 0.0; a large condition number only
    produces a warning, never an error.

    Parameters
    ----------
    matrix : Matrix
        Square matrix to invert.

    Returns
    -------
    InverseSolution with the inverse, pivots, determinant, condition
    number and timing populated.

    Raises
    ------
    NotSquareError
        If the matrix is not square.
    SingularMatrixError
        If a pivot or the 2x2 determinant is exactly 0.0.
    """
    if not isinstance(matrix, Matrix):
        raise ValidationError(
            f"invert: expected Matrix, got {type(matrix).__name__}"
        )

    timer = Timer()
    timer.start()

    A = matrix.to_numpy()

    with timer.section('elimination'):
        gj = gauss_jordan_inverse(A, name='invert')

    with timer.section('condition'):
        cond = condition_number(A)

    timer.stop()

    n = matrix.row_count
    notes: list[str] = []
    if cond >= CONDITION_WARNING_THRESHOLD:
        notes.append(
            f"Matrix is nearly singular (condition number {cond:.3g}); "
            f"the inverse may be inaccurate"
        )
        warnings.warn(notes[-1], RuntimeWarning, stacklevel=2)

    params = InverseParams(
        inverse=Matrix._wrap(n, n, gj.inverse.ravel()),
        pivots=gj.pivots,
        pivot_swaps=gj.swaps,
        determinant=gj.determinant,
        condition_number=cond,
        is_ill_conditioned=cond > ILL_CONDITIONED_THRESHOLD,
    )

    result = Result(
        params=params,
        info={
            'method': gj.method,
            'n': n,
            'pivot_swaps': gj.swaps,
        },
        timing=timer.result(),
        backend_name=BACKEND_NAME,
        warnings=tuple(notes),
    )

    return InverseSolution(_result=result, _matrix=matrix.copy())
