"""
RDS Parameter Group Comparator Package.

This package compares the configuration of two AWS RDS parameter groups,
instance-level or cluster-level, and reports how they differ.

The comparison process:
1. Lists the DB parameter groups and DB cluster parameter groups in the account
2. Picks two groups by name or from an interactive menu
3. Fetches every parameter of both groups, following pagination markers
4. Classifies each parameter as matching, non-matching or exclusive to one group
5. Renders the result as a text, HTML or JSON report
"""

from .comparators import compare_parameters
from .core import compare_parameter_groups, run_comparison

__all__ = ["compare_parameters", "compare_parameter_groups", "run_comparison"]
