"""
Matrix: dense 2D float64 container over a flat row-major buffer.

Element (row, col) lives at offset row * column_count + col of ``data``.
That layout is part of the public contract: ``data`` is the live buffer,
not a copy, so it can be handed to code expecting row-major storage.

Every transform returns a new Matrix with its own buffer. Only at/set,
reshape and writes through ``data`` change an existing matrix.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from densemat.core.compute.linalg.gauss_jordan import gauss_jordan_inverse
from densemat.core.compute.precision import is_close
from densemat.core.compute.tolerances import CPU_FP64, ToleranceTier
from densemat.core.exceptions import (
    DataLengthMismatchError,
    ElementCountMismatchError,
    InvalidDimensionsError,
    ValidationError,
)
from densemat.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_dimensions,
    check_integer,
)


class Matrix:
    """
    Dense float64 matrix stored row-major in a single buffer.

    Construction:
        Matrix(rows, columns, data)
        Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        Matrix.from_numpy(array)

    The constructor copies ``data``; the new matrix never aliases the
    caller's sequence or array.
    """

    __slots__ = ('_row_count', '_column_count', '_data')

    def __init__(self, rows: int, columns: int, data: ArrayLike):
        """
        Build a rows x columns matrix from a flat row-major buffer.

        Args:
            rows: Row count, >= 1
            columns: Column count, >= 1
            data: Flat numeric sequence of length rows * columns

        Raises:
            InvalidDimensionsError: If rows < 1 or columns < 1
            DataLengthMismatchError: If len(data) != rows * columns
            ValidationError: If counts are not integers or data is non-numeric
            DimensionError: If data is not flat
        """
        rows, columns = check_dimensions(rows, columns, 'Matrix')
        buffer = check_array(data, 'Matrix: data')
        check_1d(buffer, 'Matrix: data')
        if buffer.shape[0] != rows * columns:
            raise DataLengthMismatchError(
                f"Matrix: len(data) must be rows * columns "
                f"({rows} * {columns} = {rows * columns}), got {buffer.shape[0]}",
                expected=rows * columns,
                actual=int(buffer.shape[0]),
            )
        self._row_count = rows
        self._column_count = columns
        self._data = np.array(buffer, dtype=np.float64, copy=True)

    @classmethod
    def _wrap(cls, rows: int, columns: int, buffer: NDArray[np.float64]) -> Matrix:
        """Internal builder: adopt an already validated, owned buffer."""
        m = cls.__new__(cls)
        m._row_count = rows
        m._column_count = columns
        m._data = buffer
        return m

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> Matrix:
        """
        Build a Matrix from a nested sequence of equal-length rows.

        Raises:
            ValidationError: If rows are ragged or non-numeric
            DimensionError: If input is not 2D
            InvalidDimensionsError: If there are no rows or no columns
        """
        array = check_array(rows, 'Matrix.from_rows: rows')
        check_2d(array, 'Matrix.from_rows: rows')
        return cls(array.shape[0], array.shape[1], array.ravel())

    @classmethod
    def from_numpy(cls, array: NDArray[Any]) -> Matrix:
        """
        Build a Matrix from a 2D NumPy array, copying into row-major order.

        Fortran-ordered or strided input is accepted; the copy is always
        C-contiguous.
        """
        values = check_array(array, 'Matrix.from_numpy: array')
        check_2d(values, 'Matrix.from_numpy: array')
        rows, columns = values.shape
        if rows < 1 or columns < 1:
            raise InvalidDimensionsError(
                f"Matrix.from_numpy: matrix dimensions must be > 0, "
                f"got {rows}x{columns}",
                rows=rows,
                columns=columns,
            )
        return cls._wrap(rows, columns, np.ascontiguousarray(values).ravel().copy())

    # --- Shape and storage ---

    @property
    def row_count(self) -> int:
        """Number of rows."""
        return self._row_count

    @property
    def column_count(self) -> int:
        """Number of columns."""
        return self._column_count

    @property
    def shape(self) -> tuple[int, int]:
        """(row_count, column_count)."""
        return (self._row_count, self._column_count)

    @property
    def data(self) -> NDArray[np.float64]:
        """The live row-major buffer, length row_count * column_count."""
        return self._data

    def is_square(self) -> bool:
        return self._row_count == self._column_count

    # --- Access ---

    def at(self, row: int, col: int) -> float:
        """Element at (row, col). Indices are not bounds-checked."""
        return float(self._data[row * self._column_count + col])

    def set(self, row: int, col: int, value: float) -> None:
        """Overwrite element (row, col). Indices are not bounds-checked."""
        self._data[row * self._column_count + col] = value

    # --- Structural transforms ---

    def copy(self) -> Matrix:
        return Matrix._wrap(self._row_count, self._column_count, self._data.copy())

    def row(self, y: int) -> Matrix:
        """Row y as a new 1 x column_count matrix."""
        start = y * self._column_count
        return Matrix._wrap(
            1, self._column_count,
            self._data[start:start + self._column_count].copy(),
        )

    def column(self, x: int) -> Matrix:
        """Column x as a new row_count x 1 matrix."""
        return Matrix._wrap(
            self._row_count, 1,
            self._data[x::self._column_count].copy(),
        )

    def reshape(self, rows: int, columns: int) -> None:
        """
        Reinterpret the buffer under a new shape, in place.

        The buffer is untouched; only the shape fields change. Nothing is
        modified when validation fails.

        Raises:
            ElementCountMismatchError: If rows * columns differs from the
                current element count
            InvalidDimensionsError: If either new count is < 1
        """
        rows = check_integer(rows, 'Matrix.reshape: rows')
        columns = check_integer(columns, 'Matrix.reshape: columns')
        if rows * columns != self._row_count * self._column_count:
            raise ElementCountMismatchError(
                f"Matrix.reshape: new shape must have the same number of "
                f"elements as old shape ({self._row_count}x{self._column_count} "
                f"-> {rows}x{columns})",
                shape=self.shape,
                requested=(rows, columns),
            )
        check_dimensions(rows, columns, 'Matrix.reshape')
        self._row_count = rows
        self._column_count = columns

    def transposed(self) -> Matrix:
        """New column_count x row_count matrix with t(y, x) == self(x, y)."""
        t = Matrix._wrap(
            self._column_count, self._row_count,
            np.empty(self._data.shape[0], dtype=np.float64),
        )
        for y in range(t._row_count):
            for x in range(t._column_count):
                t.set(y, x, self.at(x, y))
        return t

    def inverse(self) -> Matrix:
        """
        Inverse via Gauss-Jordan elimination (closed form for 2x2).

        A 1x1 matrix is returned as a copy of itself. Singularity is
        detected by exact comparison with 0.0 only; see densemat.invert()
        for the condition number and other diagnostics.

        Raises:
            NotSquareError: If the matrix is not square
            SingularMatrixError: If a pivot or the 2x2 determinant is 0.0
        """
        result = gauss_jordan_inverse(self.to_numpy(), name='Matrix.inverse')
        n = self._row_count
        return Matrix._wrap(n, n, result.inverse.ravel())

    # --- Interop and comparison ---

    def to_numpy(self) -> NDArray[np.float64]:
        """2D row-major copy of the matrix."""
        return self._data.reshape(self._row_count, self._column_count).copy()

    def allclose(self, other: Matrix, tolerance: ToleranceTier = CPU_FP64) -> bool:
        """
        True if other has the same shape and every element is within tolerance.

        Uses |self - other| <= atol + rtol * |other| element-wise.
        """
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"Matrix.allclose: expected Matrix, got {type(other).__name__}"
            )
        if self.shape != other.shape:
            return False
        return bool(np.all(
            is_close(self._data, other._data, rtol=tolerance.rtol, atol=tolerance.atol)
        ))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from densemat.matrix._multiply import multiply
        return multiply(self, other)

    def __repr__(self) -> str:
        rows = self.to_numpy().tolist()
        return f"Matrix({self._row_count}x{self._column_count}, {rows})"
