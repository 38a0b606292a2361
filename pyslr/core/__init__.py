"""
Core infrastructure for PySLR.

Shared abstractions and utilities used by the regression module.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, precision and tolerance utilities
"""

from pyslr.core.result import Result
from pyslr.core.exceptions import (
    PySLRError,
    ValidationError,
    DimensionError,
    EmptyInputError,
    NumericalError,
    DegeneratePredictorError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PySLRError",
    "ValidationError",
    "DimensionError",
    "EmptyInputError",
    "NumericalError",
    "DegeneratePredictorError",
]
