"""
Simple linear regression model.

SLRModel owns a set of (x, y) observations and the statistic bundle
fitted to them. Construction, update() and add() each rebuild the
design and re-solve from scratch, then swap design and result in
together. A failed mutation leaves the previous state in place.
"""

from __future__ import annotations

import warnings
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyslr.core.compute.precision import PrecisionChoice
from pyslr.core.result import Result
from pyslr.regression.design import Observation, ObservationDesign, ObservationsLike
from pyslr.regression.solution import SLRParams
from pyslr.regression.backends.cpu import CPUOLSBackend


class SLRModel:
    """
    Ordinary least-squares fit of y = intercept + slope·x.

    Args:
        observations: Observation instances, (x, y) pairs, or an (n, 2) array.
            Must not be empty.
        dtype: 'float64' (default) or 'float32'. All arithmetic for the
            lifetime of the model uses this precision.
        check_finite: Reject NaN/Inf observations with ValidationError.
            By default they are accepted and propagate into the statistics
            with a RuntimeWarning.

    Raises:
        EmptyInputError: If observations is empty
        DegeneratePredictorError: If every x is identical
        ValidationError: If observations are malformed

    Example:
        >>> model = SLRModel([(1, 3), (2, 5), (3, 7), (4, 9)])
        >>> model.line_of_best_fit
        (1.0, 2.0)
        >>> model.add([(5, 11)])
        >>> model.x_mean
        3.0
    """

    def __init__(
        self,
        observations: ObservationsLike,
        *,
        dtype: PrecisionChoice = 'float64',
        check_finite: bool = False,
    ):
        self._check_finite = check_finite
        self._backend = CPUOLSBackend()
        design = ObservationDesign.from_observations(
            observations,
            dtype=dtype,
            check_finite_values=check_finite,
            operation='new',
        )
        self._commit(design)

    @classmethod
    def new(
        cls,
        observations: ObservationsLike,
        *,
        dtype: PrecisionChoice = 'float64',
        check_finite: bool = False,
    ) -> SLRModel:
        """Alternate constructor, same as SLRModel(observations, ...)."""
        design = ObservationDesign.from_observations(
            observations,
            dtype=dtype,
            check_finite_values=check_finite,
            operation='new',
        )
        return cls._from_design(design, check_finite=check_finite, stacklevel=4)

    @classmethod
    def _from_design(
        cls,
        design: ObservationDesign,
        *,
        check_finite: bool,
        stacklevel: int = 4,
    ) -> SLRModel:
        # Warnings are attributed to the code calling the public entry point
        model = cls.__new__(cls)
        model._check_finite = check_finite
        model._backend = CPUOLSBackend()
        model._commit(design, stacklevel=stacklevel)
        return model

    # === Mutation ===

    def update(self, observations: ObservationsLike) -> None:
        """
        Replace every observation and refit.

        The previous observations have no influence on the new statistics.

        Raises:
            EmptyInputError: If observations is empty
            DegeneratePredictorError: If every new x is identical
        """
        design = ObservationDesign.from_observations(
            observations,
            dtype=self._design.dtype,
            check_finite_values=self._check_finite,
            operation='update',
        )
        self._commit(design)

    def add(self, observations: ObservationsLike) -> None:
        """
        Append observations after the existing ones and refit.

        Adding nothing is allowed and refits the same data.

        Raises:
            DegeneratePredictorError: If the combined x values are all identical
        """
        design = self._design.extended(
            observations,
            check_finite_values=self._check_finite,
            operation='add',
        )
        self._commit(design)

    def _commit(self, design: ObservationDesign, stacklevel: int = 3) -> None:
        # Solve before touching state so a failure keeps the old fit
        result = self._backend.solve(design)
        for message in result.warnings:
            warnings.warn(message, RuntimeWarning, stacklevel=stacklevel)
        self._design = design
        self._result = result

    # === Readouts ===

    @property
    def _params(self) -> SLRParams:
        return self._result.params

    @property
    def x_mean(self) -> float:
        """Arithmetic mean of the x values."""
        return self._params.x_mean

    @property
    def y_mean(self) -> float:
        """Arithmetic mean of the y values."""
        return self._params.y_mean

    @property
    def slope(self) -> float:
        return self._params.slope

    @property
    def intercept(self) -> float:
        return self._params.intercept

    @property
    def line_of_best_fit(self) -> tuple[float, float]:
        """(intercept, slope) of the fitted line y = intercept + slope·x."""
        return (self._params.intercept, self._params.slope)

    @property
    def sum_squared_errors(self) -> float:
        """Σ(yᵢ - (intercept + slope·xᵢ))²."""
        return self._params.sum_squared_errors

    @property
    def total_sum_of_squares(self) -> float:
        """Σ(yᵢ - ȳ)²."""
        return self._params.total_sum_of_squares

    @property
    def r_squared(self) -> float:
        """
        Coefficient of determination, 1 - SSE/TSS.

        When every y is identical TSS is zero; R² is then 1.0 for a
        zero-error fit and 0.0 otherwise.
        """
        return self._params.r_squared

    @property
    def observations(self) -> list[Observation]:
        """Current observations in insertion order. Each call returns a new list."""
        return self._design.observations()

    @property
    def n_observations(self) -> int:
        return self._design.n

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        """Predicted y at each observed x (copy)."""
        return self._params.fitted_values.copy()

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        """Observed minus predicted y (copy)."""
        return self._params.residuals.copy()

    @property
    def dtype(self) -> np.dtype:
        return self._design.dtype

    @property
    def info(self) -> dict[str, Any]:
        return dict(self._result.info)

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def result(self) -> Result[SLRParams]:
        """The immutable result envelope of the latest fit."""
        return self._result

    def predict(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Evaluate the fitted line at `x`.

        Args:
            x: Scalar or array-like of predictor values

        Returns:
            intercept + slope·x at the model's precision
        """
        dt = self._design.dtype
        x_arr = np.asarray(x, dtype=dt)
        return dt.type(self._params.intercept) + dt.type(self._params.slope) * x_arr

    def __repr__(self) -> str:
        return (
            f"SLRModel(n={self.n_observations}, intercept={self.intercept:.4g}, "
            f"slope={self.slope:.4g}, r_squared={self.r_squared:.4f})"
        )
