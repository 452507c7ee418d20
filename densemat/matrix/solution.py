"""
Inversion solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from densemat.core.compute.tolerances import ToleranceTier, select_tolerance
from densemat.core.result import Result
from densemat.matrix.matrix import Matrix


@dataclass(frozen=True)
class InverseParams:
    """
    Parameter payload for an inversion.

    pivots is empty for the 1x1 and 2x2 paths, which do not eliminate.
    """
    inverse: Matrix
    pivots: tuple[float, ...]
    pivot_swaps: int
    determinant: float
    condition_number: float
    is_ill_conditioned: bool


@dataclass
class InverseSolution:
    """
    User-facing inversion result.

    Wraps Result[InverseParams] and provides convenient accessors.
    """
    _result: Result[InverseParams]
    _matrix: Matrix

    @property
    def matrix(self) -> Matrix:
        """Snapshot of the matrix that was inverted."""
        return self._matrix

    @property
    def inverse(self) -> Matrix:
        """The inverse matrix."""
        return self._result.params.inverse

    @property
    def pivots(self) -> tuple[float, ...]:
        """Pivot values before scaling, in elimination order."""
        return self._result.params.pivots

    @property
    def pivot_swaps(self) -> int:
        """Number of row swaps between distinct rows."""
        return self._result.params.pivot_swaps

    @property
    def determinant(self) -> float:
        """Determinant of the input, obtained as a by-product."""
        return self._result.params.determinant

    @property
    def condition_number(self) -> float:
        """2-norm condition number of the input (inf if singular)."""
        return self._result.params.condition_number

    @property
    def is_ill_conditioned(self) -> bool:
        return self._result.params.is_ill_conditioned

    @property
    def tolerance(self) -> ToleranceTier:
        """Tolerance tier appropriate for checking this inverse."""
        return select_tolerance(self.is_ill_conditioned)

    @property
    def method(self) -> str:
        return self._result.info['method']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Plain-text diagnostic summary."""
        n = self._matrix.row_count
        lines = [
            "Matrix Inverse",
            "=" * 50,
            f"  Dimension:        {n}x{n}",
            f"  Method:           {self.method}",
            f"  Determinant:      {self.determinant:.6g}",
            f"  Condition number: {self.condition_number:.6g}",
            f"  Row swaps:        {self.pivot_swaps}",
        ]
        if self.pivots:
            smallest = min(abs(p) for p in self.pivots)
            lines.append(f"  Smallest |pivot|: {smallest:.6g}")
        if self.timing is not None:
            lines.append(f"  Time:             {self.timing['total_seconds']:.6f}s")
        for w in self.warnings:
            lines.append(f"  Warning: {w}")
        return '\n'.join(lines)

    def __repr__(self) -> str:
        n = self._matrix.row_count
        return (
            f"InverseSolution(n={n}, method={self.method!r}, "
            f"condition_number={self.condition_number:.3g})"
        )
