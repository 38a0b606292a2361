"""
Text rendering of a fitted model.

Only the model's public readouts are used; nothing is computed here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyslr.regression.model import SLRModel


def format_line(model: SLRModel) -> str:
    """The fitted line and its R², one per line."""
    intercept, slope = model.line_of_best_fit
    return (
        f"Line of best fit: y = {intercept} + {slope}x\n"
        f"R-squared: {model.r_squared}"
    )


def format_summary(model: SLRModel) -> str:
    """
    Render a fixed-format summary under a labeled heading.

    Output:
        SLR Model
        ---------
        Line of best fit: y = 1.0 + 2.0x
        R-squared: 1.0
    """
    lines = [
        "SLR Model",
        "-" * 9,
        format_line(model),
    ]
    return "\n".join(lines)


def print_summary(model: SLRModel) -> None:
    """Write format_summary(model) to stdout."""
    print(format_summary(model))
