"""
Result envelope returned by backends.

A backend solve produces one Result: the fitted statistics plus how they
were obtained. SLRModel stores it whole and replaces it whole on every
update() or add(), so statistics and metadata never come from different
fits.
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Frozen bundle of a backend's output.

    Attributes:
        params: Statistic payload, e.g. SLRParams
        info: Method metadata such as {'method': 'ols', 'dtype': 'float64', 'n': 4}
        timing: Seconds per backend section, or None when not measured
        backend_name: Which backend produced the fit, e.g. 'cpu_ols'
        warnings: Messages about non-fatal problems in the input
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """True if any warning message contains `substring`."""
        return any(substring in w for w in self.warnings)
