"""
Plain-text rendering of a parameter group comparison report.
"""

from typing import List

from ..types import ComparisonReport
from .utils import column_labels, display_value

UNDERLINE = "=" * 63


def render_text(report: ComparisonReport) -> str:
    """
    Render a comparison report as plain text.

    The report has a title line followed by four numbered sections, one line
    per parameter. Sections with no parameters are left empty.

    Args:
        report: Comparison report to render

    Returns:
        Report text
    """
    label_a, label_b = column_labels(report)
    lines: List[str] = [
        f"Comparison between RDS Parameter Groups: {label_a} and {label_b}",
        UNDERLINE,
        "",
        "1. Matching Parameters:",
    ]
    lines.extend(f"{p.name}: {display_value(p.value)}" for p in report.matching)

    lines.extend(["", "2. Non-Matching Parameters:"])
    lines.extend(
        f"{p.name}: {label_a}: {display_value(p.value_a)}, "
        f"{label_b}: {display_value(p.value_b)}"
        for p in report.non_matching
    )

    lines.extend(["", f"3. Exclusive to {label_a}:"])
    lines.extend(f"{p.name}: {display_value(p.value)}" for p in report.exclusive_to_a)

    lines.extend(["", f"4. Exclusive to {label_b}:"])
    lines.extend(f"{p.name}: {display_value(p.value)}" for p in report.exclusive_to_b)

    return "\n".join(lines) + "\n"
