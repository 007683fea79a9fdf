"""
Parameter Comparators Package.

This package contains the comparison of two RDS parameter sets into a
four-way classification report.
"""

from .base import compare_parameters

__all__ = [
    "compare_parameters",
]
