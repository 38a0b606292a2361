"""
CPU reference backend for simple linear regression.

Computes the closed-form least-squares fit from centered sums:

    slope     = Sxy / Sxx
    intercept = ȳ - slope·x̄

The whole statistic bundle is recomputed from the design on every call;
nothing is carried over from a previous solve.
"""

from typing import Any
import numpy as np

from pyslr.core.result import Result
from pyslr.core.compute.timing import Timer
from pyslr.core.exceptions import DegeneratePredictorError
from pyslr.regression.design import ObservationDesign
from pyslr.regression.solution import SLRParams


class CPUOLSBackend:
    """
    CPU backend using the textbook centered-sum formulas.

    Stateless. All arithmetic is done in the design's dtype, so a float32
    design is fitted entirely in single precision.
    """

    @property
    def name(self) -> str:
        return 'cpu_ols'

    def solve(self, design: ObservationDesign) -> Result[SLRParams]:
        """
        Fit the least-squares line.

        Algorithm:
            1. x̄, ȳ
            2. Sxx = Σ(xᵢ-x̄)², Sxy = Σ(xᵢ-x̄)(yᵢ-ȳ)
            3. slope = Sxy/Sxx, intercept = ȳ - slope·x̄
            4. SSE = Σ(yᵢ - ŷᵢ)², TSS = Σ(yᵢ-ȳ)², R² = 1 - SSE/TSS

        Args:
            design: Validated, non-empty observation design

        Returns:
            Result containing SLRParams

        Raises:
            DegeneratePredictorError: If Sxx is exactly zero
        """
        timer = Timer()
        timer.start()

        x = design.x
        y = design.y
        n = design.n
        warnings_list: list[str] = []

        if design.has_non_finite:
            warnings_list.append(
                "Observations contain NaN or Inf values; "
                "statistics will not be finite"
            )

        # === Means ===
        with timer.section('means'):
            # Constancy is read off the data: the mean of identical values
            # need not round back to that value. ptp is never 0 with NaN/Inf.
            constant_x = bool(np.ptp(x) == 0)
            constant_y = bool(np.ptp(y) == 0)
            x_mean = np.mean(x)
            y_mean = y[0] if constant_y else np.mean(y)
            dx = x - x_mean
            dy = y - y_mean

        # === Line of Best Fit ===
        with timer.section('coefficients'):
            sxx = dx @ dx
            sxy = dx @ dy
            if constant_x or sxx == 0:
                raise DegeneratePredictorError(
                    f"Slope is undefined: all {n} x values equal {float(x[0])!r} "
                    f"(Sxx = 0)",
                    sxx=float(sxx),
                    n=n,
                )
            slope = sxy / sxx
            intercept = y_mean - slope * x_mean

        # === Sums of Squares ===
        with timer.section('sums_of_squares'):
            fitted_values = intercept + slope * x
            residuals = y - fitted_values
            sse = residuals @ residuals
            tss = dy @ dy
            if constant_y:
                # Horizontal line through every point: zero error, R² = 1
                r_squared = 1.0
            elif tss == 0:
                r_squared = 1.0 if sse == 0 else 0.0
            else:
                r_squared = float(1 - sse / tss)

        timer.stop()

        params = SLRParams(
            n=n,
            x_mean=float(x_mean),
            y_mean=float(y_mean),
            sxx=float(sxx),
            sxy=float(sxy),
            slope=float(slope),
            intercept=float(intercept),
            sum_squared_errors=float(sse),
            total_sum_of_squares=float(tss),
            r_squared=r_squared,
            fitted_values=fitted_values,
            residuals=residuals,
        )

        info: dict[str, Any] = {
            'method': 'ols',
            'dtype': design.dtype.name,
            'n': n,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
