"""
Array-oriented entry point for simple linear regression.

This module provides the fit() function (public API).
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pyslr.core.compute.precision import PrecisionChoice
from pyslr.regression.design import ObservationDesign, ObservationsLike
from pyslr.regression.model import SLRModel


def fit(
    x: ArrayLike | ObservationsLike,
    y: ArrayLike | None = None,
    *,
    dtype: PrecisionChoice = 'float64',
    check_finite: bool = False,
) -> SLRModel:
    """
    Fit a simple linear regression model.

    Solves the ordinary least squares problem:
        min_(a, b) Σ(yᵢ - (a + b·xᵢ))²

    Accepts either two parallel vectors or a single sequence of
    observations. All input validation happens here.

    Args:
        x: Predictor vector (n,). If y is None, the observations instead:
            Observation instances, (x, y) pairs, or an (n, 2) array.
        y: Response vector (n,), or None.
        dtype: 'float64' (default) or 'float32'.
        check_finite: Reject NaN/Inf instead of propagating them.

    Returns:
        SLRModel, which can be further updated or extended

    Raises:
        EmptyInputError: If there are no observations
        DimensionError: If x and y have inconsistent lengths or shapes
        ValidationError: If inputs are non-numeric
        DegeneratePredictorError: If every x is identical

    Example:
        >>> from pyslr.regression import fit
        >>> model = fit([1, 2, 3, 4], [3, 5, 7, 9])
        >>> model.line_of_best_fit
        (1.0, 2.0)
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    if y is None:
        design = ObservationDesign.from_observations(
            x, dtype=dtype, check_finite_values=check_finite, operation='fit',
        )
    else:
        design = ObservationDesign.from_arrays(
            x, y, dtype=dtype, check_finite_values=check_finite, operation='fit',
        )

    return SLRModel._from_design(design, check_finite=check_finite, stacklevel=4)
