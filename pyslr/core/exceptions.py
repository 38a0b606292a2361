"""
Exception hierarchy for PySLR.

All exceptions inherit from PySLRError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PySLRError(Exception):
    """Base exception for all PySLR errors."""
    pass


class ValidationError(PySLRError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when x and y have inconsistent lengths.
    """
    pass


class EmptyInputError(ValidationError):
    """
    An operation would leave a model with zero observations.

    Every statistic divides by the observation count, so an empty
    observation set has no defined fit.

    Attributes:
        operation: The operation that was refused ('new', 'update', 'add', 'fit')
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation


class NumericalError(PySLRError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegeneratePredictorError(NumericalError):
    """
    The predictor has no spread, so the slope is undefined.

    Raised when Sxx = Σ(xᵢ - x̄)² is exactly zero: every x is identical,
    which includes the single-observation case.

    Attributes:
        sxx: The computed sum of squares of x about its mean
        n: Number of observations
    """

    def __init__(
        self,
        message: str,
        sxx: float | None = None,
        n: int | None = None,
    ):
        super().__init__(message)
        self.sxx = sxx
        self.n = n
