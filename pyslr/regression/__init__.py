"""
Simple linear regression.

Public API:
    SLRModel(observations, ...) -> SLRModel
    fit(x, y, ...) -> SLRModel
    format_summary(model) -> str

SLRModel keeps its statistics in step with its observations:
    - update(observations) replaces them
    - add(observations) appends to them
Each mutation refits from scratch.

Example:
    >>> from pyslr.regression import SLRModel, format_summary
    >>> model = SLRModel([(1, 3), (2, 5), (3, 7), (4, 9)])
    >>> print(format_summary(model))
"""

from pyslr.regression.design import Observation, ObservationDesign
from pyslr.regression.solution import SLRParams
from pyslr.regression.model import SLRModel
from pyslr.regression.solvers import fit
from pyslr.regression.summary import format_summary, print_summary

__all__ = [
    "fit",
    "SLRModel",
    "Observation",
    "ObservationDesign",
    "SLRParams",
    "format_summary",
    "print_summary",
]
