"""
Shared compute infrastructure for PySLR.

IMPORTANT: This is NOT where backends live. Those go in
regression/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    precision: Floating-point precision selection
    tolerances: Comparison tolerances per precision
"""

from pyslr.core.compute.timing import Timer
from pyslr.core.compute.precision import PrecisionChoice, resolve_dtype
from pyslr.core.compute.tolerances import ToleranceTier, select_tolerance

__all__ = [
    "Timer",
    "PrecisionChoice",
    "resolve_dtype",
    "ToleranceTier",
    "select_tolerance",
]
