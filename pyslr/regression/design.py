"""
Observation Design.

Design holds the x (predictor) and y (response) arrays of a simple
regression at one fixed precision. It knows the data are paired
observations; the backend only sees two validated vectors.

A Design is immutable. Replacing or extending the observations of a
model builds a new Design rather than editing the old one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Union
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyslr.core.compute.precision import PrecisionChoice, resolve_dtype
from pyslr.core.validation import (
    check_array, check_finite, check_1d, check_pairs,
    check_consistent_length, check_not_empty,
)


@dataclass(frozen=True)
class Observation:
    """One (x, y) sample: predictor value x and response value y."""
    x: float
    y: float

    def __iter__(self):
        # Lets an Observation unpack as `x, y = obs`
        yield self.x
        yield self.y


ObservationsLike = Union[Iterable[Observation], Iterable[tuple[float, float]], ArrayLike]


@dataclass(frozen=True)
class ObservationDesign:
    """
    Paired-observation design for simple linear regression.

    Wraps the x and y vectors (owned, read-only copies) and the precision
    they were converted to. Immutable after construction.

    Construction:
        ObservationDesign.from_observations([Observation(1, 3), ...])
        ObservationDesign.from_observations([(1, 3), (2, 5)])
        ObservationDesign.from_observations(np.array([[1, 3], [2, 5]]))
        ObservationDesign.from_arrays(x, y)
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _dtype: np.dtype

    @classmethod
    def from_observations(
        cls,
        observations: ObservationsLike,
        *,
        dtype: PrecisionChoice = 'float64',
        check_finite_values: bool = False,
        operation: str | None = None,
    ) -> ObservationDesign:
        """
        Build Design from a sequence of observations.

        Args:
            observations: Observation instances, (x, y) pairs, or an (n, 2) array
            dtype: Precision of all downstream arithmetic
            check_finite_values: Reject NaN/Inf instead of propagating them
            operation: Name of the calling operation, used in error messages

        Returns:
            Design ready for regression

        Raises:
            EmptyInputError: If there are no observations
            DimensionError: If the input is not a table of pairs
            ValidationError: If the input is non-numeric (or non-finite when checked)
        """
        dt = resolve_dtype(dtype)
        x, y = observations_to_arrays(observations, dt)
        return cls._build(x, y, dt, check_finite_values, operation)

    @classmethod
    def from_arrays(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        dtype: PrecisionChoice = 'float64',
        check_finite_values: bool = False,
        operation: str | None = None,
    ) -> ObservationDesign:
        """Build Design directly from separate x and y vectors."""
        dt = resolve_dtype(dtype)
        x_arr = check_array(x, 'x', dt)
        y_arr = check_array(y, 'y', dt)
        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        return cls._build(x_arr, y_arr, dt, check_finite_values, operation)

    @classmethod
    def _build(
        cls,
        x: NDArray,
        y: NDArray,
        dtype: np.dtype,
        check_finite_values: bool,
        operation: str | None,
    ) -> ObservationDesign:
        """Internal builder with validation."""
        check_consistent_length(x, y, names=('x', 'y'))
        check_not_empty(x, 'observations', operation)

        if check_finite_values:
            check_finite(x, 'x')
            check_finite(y, 'y')

        x = np.array(x, dtype=dtype)
        y = np.array(y, dtype=dtype)
        x.setflags(write=False)
        y.setflags(write=False)

        return cls(_x=x, _y=y, _n=x.shape[0], _dtype=dtype)

    def extended(
        self,
        observations: ObservationsLike,
        *,
        check_finite_values: bool = False,
        operation: str | None = 'add',
    ) -> ObservationDesign:
        """
        New Design with `observations` appended after the current ones.

        Existing observations keep their order and come first.
        An empty `observations` yields a Design with the same data.
        """
        x_extra, y_extra = observations_to_arrays(observations, self._dtype)
        x = np.concatenate([self._x, x_extra])
        y = np.concatenate([self._y, y_extra])
        return self._build(x, y, self._dtype, check_finite_values, operation)

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Predictor vector (n,), read-only."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,), read-only."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def dtype(self) -> np.dtype:
        """Floating precision of the design."""
        return self._dtype

    @property
    def has_non_finite(self) -> bool:
        """Whether any x or y is NaN or Inf."""
        return not (np.all(np.isfinite(self._x)) and np.all(np.isfinite(self._y)))

    def observations(self) -> list[Observation]:
        """Observations in insertion order, as a new list."""
        return [
            Observation(float(xi), float(yi))
            for xi, yi in zip(self._x, self._y)
        ]

    def __repr__(self) -> str:
        return f"ObservationDesign(n={self._n}, dtype={self._dtype.name})"


def observations_to_arrays(
    observations: ObservationsLike,
    dtype: np.dtype,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Split observations into separate x and y vectors of `dtype`.

    Empty input gives two empty vectors; callers decide whether that is valid.
    """
    if isinstance(observations, np.ndarray):
        rows = observations
    else:
        rows = [
            (obs.x, obs.y) if isinstance(obs, Observation) else obs
            for obs in observations
        ]

    pairs = check_array(rows, 'observations', dtype)
    if pairs.size == 0:
        empty = np.empty(0, dtype=dtype)
        return empty, empty.copy()

    check_pairs(pairs, 'observations')
    return pairs[:, 0].copy(), pairs[:, 1].copy()
