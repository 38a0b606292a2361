"""
PySLR: simple linear regression for Python.

Ordinary least-squares fitting of one response on one predictor, with a
model that stays consistent as its observations are replaced or extended.

Submodules:
    regression: SLRModel, fit() and summary formatting
    core: Exceptions, validation, result envelope, precision utilities
"""

__version__ = "0.1.0"

from pyslr import regression
from pyslr.regression import SLRModel, Observation, fit, format_summary, print_summary
from pyslr.core.exceptions import EmptyInputError

__all__ = [
    "__version__",
    "regression",
    "SLRModel",
    "Observation",
    "fit",
    "format_summary",
    "print_summary",
    "EmptyInputError",
]
