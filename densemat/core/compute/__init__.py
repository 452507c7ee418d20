"""
Shared compute infrastructure for densemat.

Submodules:
    timing: Execution timing utilities
    precision: Numerical precision constants and utilities
    tolerances: Tolerance tiers for comparing results
    linalg: Linear algebra kernels (ordered product, Gauss-Jordan inverse)
"""

from densemat.core.compute.timing import Timer
from densemat.core.compute.precision import (
    condition_number,
    is_close,
)
from densemat.core.compute.tolerances import (
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    EXACT,
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Precision
    "condition_number",
    "is_close",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
    "select_tolerance",
]
