"""
Tests for regression fit().

fit() is the array-oriented entry point; it must agree exactly with
constructing an SLRModel from the same observations.
"""

import pytest
import numpy as np

from pyslr.regression import fit, SLRModel, Observation
from pyslr.core.exceptions import DimensionError, EmptyInputError, ValidationError


class TestFitBasic:
    """Basic fit() functionality tests."""

    def test_fit_from_vectors(self):
        model = fit([1, 2, 3, 4], [3, 5, 7, 9])
        assert isinstance(model, SLRModel)
        assert model.line_of_best_fit == (1.0, 2.0)

    def test_fit_from_observations(self, perfect_line_observations):
        model = fit(perfect_line_observations)
        assert model.line_of_best_fit == (1.0, 2.0)

    def test_fit_matches_model(self, noisy_data):
        x, y = noisy_data
        from_vectors = fit(x, y)
        from_pairs = SLRModel([Observation(a, b) for a, b in zip(x, y)])
        assert from_vectors.line_of_best_fit == from_pairs.line_of_best_fit
        assert from_vectors.r_squared == from_pairs.r_squared

    def test_fitted_model_is_mutable(self):
        model = fit([1, 2, 3, 4], [3, 5, 7, 9])
        model.add([(5, 11)])
        assert model.x_mean == 3.0
        assert model.y_mean == 7.0


class TestFitValidation:
    """Boundary validation in fit()."""

    def test_empty_vectors(self):
        with pytest.raises(EmptyInputError) as exc_info:
            fit([], [])
        assert exc_info.value.operation == 'fit'

    def test_length_mismatch(self):
        with pytest.raises(DimensionError, match="Inconsistent lengths"):
            fit([1, 2, 3], [1, 2])

    def test_2d_x_rejected(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            fit([[1, 2], [3, 4]], [1, 2])

    def test_unknown_dtype(self):
        with pytest.raises(ValidationError, match="unsupported precision"):
            fit([1, 2, 3], [1, 2, 3], dtype='int32')

    def test_check_finite(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            fit([1, 2, np.nan], [1, 2, 3], check_finite=True)
