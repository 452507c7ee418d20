"""
Tolerance tiers for numerical validation.

Defines precision expectations when comparing computed matrices:
- EXACT: bit-for-bit equality
- CPU FP64: well-conditioned float64 results
- CPU FP64 ill-conditioned: relaxed for cond > ILL_CONDITIONED_THRESHOLD

Used by Matrix.allclose(), by InverseSolution.tolerance and by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Bit-exact comparison
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact equality, no rounding allowed',
)

# Double precision, well-conditioned input
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision',
)

# Double precision, ill-conditioned input (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)

# Above this condition number CPU_FP64 is no longer a fair expectation.
ILL_CONDITIONED_THRESHOLD = 1e4

# At cond(A) = 1e12 roughly four significant digits of an inverse survive;
# invert() warns from here on.
CONDITION_WARNING_THRESHOLD = 1e12


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select appropriate tolerance tier for a float64 result."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
