"""
Floating-point precision selection.

A model computes everything at one precision. This module maps the
user-facing precision names onto numpy dtypes.
"""

from typing import Literal
import numpy as np

from pyslr.core.exceptions import ValidationError


PrecisionChoice = Literal['float64', 'float32']

SUPPORTED_DTYPES: dict[str, np.dtype] = {
    'float64': np.dtype(np.float64),
    'float32': np.dtype(np.float32),
}


def resolve_dtype(dtype: PrecisionChoice | np.dtype | type) -> np.dtype:
    """
    Resolve a precision choice to a numpy floating dtype.

    Args:
        dtype: 'float64', 'float32', or the equivalent numpy dtype/type

    Returns:
        numpy dtype

    Raises:
        ValidationError: If the precision is not one of the supported floats
    """
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"dtype: cannot interpret {dtype!r}: {e}") from e

    if resolved.name not in SUPPORTED_DTYPES:
        raise ValidationError(
            f"dtype: unsupported precision {resolved.name!r}, "
            f"expected one of {sorted(SUPPORTED_DTYPES)}"
        )
    return SUPPORTED_DTYPES[resolved.name]
