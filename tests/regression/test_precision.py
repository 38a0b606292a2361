"""
Tests for single-precision models.

A float32 model performs every step in float32 and must agree with the
float64 reference to the FP32 tolerance tier.
"""

import numpy as np
import pytest

from pyslr.regression import SLRModel, fit
from pyslr.core.compute.tolerances import CPU_FP32, select_tolerance


class TestFloat32:

    def test_dtype_recorded(self, perfect_line_observations):
        model = SLRModel(perfect_line_observations, dtype='float32')
        assert model.dtype == np.float32
        assert model.info['dtype'] == 'float32'

    def test_worked_examples_exact(self, perfect_line_observations,
                                   through_origin_observations):
        model = SLRModel(perfect_line_observations, dtype='float32')
        assert model.line_of_best_fit == (1.0, 2.0)
        assert model.r_squared == 1.0

        model.update(through_origin_observations)
        assert model.line_of_best_fit == (0.0, 2.0)
        assert model.y_mean == 5.0

        model.add([(5, 10)])
        assert model.x_mean == 3.0
        assert model.y_mean == 6.0

    def test_precision_preserved_across_mutation(self, perfect_line_observations):
        model = SLRModel(perfect_line_observations, dtype='float32')
        model.update([(1, 1), (2, 3)])
        model.add([(3, 5)])
        assert model.dtype == np.float32
        assert model.residuals.dtype == np.float32
        assert model.predict([1.0]).dtype == np.float32

    def test_agrees_with_float64(self, price_demand_data):
        x, y = price_demand_data
        single = fit(x, y, dtype='float32')
        double = fit(x, y, dtype='float64')
        tol = select_tolerance(single.dtype)
        assert tol is CPU_FP32
        for attr in ('x_mean', 'y_mean', 'slope', 'intercept', 'r_squared'):
            np.testing.assert_allclose(
                getattr(single, attr), getattr(double, attr),
                rtol=tol.rtol, atol=tol.atol,
            )

    def test_numpy_dtype_accepted(self, perfect_line_observations):
        model = SLRModel(perfect_line_observations, dtype=np.float32)
        assert model.dtype == np.float32
