"""
Shared helpers for the report renderers.
"""

from typing import Tuple

from ..types import ComparisonReport, ParameterValue


def display_value(value: ParameterValue) -> str:
    """Value as shown in text and HTML reports; a missing value shows blank."""
    return value if value is not None else ""


def column_labels(report: ComparisonReport) -> Tuple[str, str]:
    """
    Labels identifying the two groups in report headings and columns.

    Group names are used on their own unless both groups share a name, in
    which case the kind is appended so the two columns stay distinct.
    """
    if report.group_a.name == report.group_b.name:
        return report.group_a.label, report.group_b.label
    return report.group_a.name, report.group_b.name
