"""
Regression solution types.

Contains the parameter payload produced by backends.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class SLRParams:
    """
    Parameter payload for simple linear regression.

    This is the immutable statistic bundle computed by backends. Scalars
    are Python floats holding the exact value computed at the design's
    precision.
    """
    n: int
    x_mean: float
    y_mean: float
    sxx: float
    sxy: float
    slope: float
    intercept: float
    sum_squared_errors: float
    total_sum_of_squares: float
    r_squared: float
    fitted_values: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
