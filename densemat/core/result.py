"""
Result envelope for diagnostic entry points.

invert() returns its payload wrapped in a Result so that timing, kernel
name and non-fatal warnings travel with the numbers. The envelope is frozen;
the user-facing InverseSolution reads from it and never rebuilds it.
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # payload type, e.g. InverseParams


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Frozen envelope around a payload of type P.

    Attributes:
        params: Payload (for invert(), an InverseParams)
        info: Method name, dimension and pivot swap count
        timing: Timer.result() output, or None when not measured
        backend_name: Kernel that produced the payload
        warnings: Messages for conditions that did not stop the computation
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
