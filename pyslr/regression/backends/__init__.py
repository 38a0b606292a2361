"""
Regression backends.

Available backends:
    CPUOLSBackend: CPU reference implementation using centered sums
"""

from pyslr.regression.backends.cpu import CPUOLSBackend

__all__ = [
    "CPUOLSBackend",
]
