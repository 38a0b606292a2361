"""
Tolerance tiers for numerical validation.

Defines precision expectations for the two compute paths:
- FP64 (reference): agrees with independent implementations to near
  machine precision
- FP32: relaxed for single-precision arithmetic

Used by the test suite to compare models across precisions.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision reference
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, reference results',
)

# Single precision
CPU_FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='cpu_fp32',
    description='CPU single precision, statistically equivalent',
)


def select_tolerance(dtype: np.dtype | str) -> ToleranceTier:
    """Select the tolerance tier matching a model's precision."""
    if np.dtype(dtype) == np.float32:
        return CPU_FP32
    return CPU_FP64
