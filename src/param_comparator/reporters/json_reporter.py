"""
JSON rendering of a parameter group comparison report.

Missing values stay null here; the blank display fallback applies to the
text and HTML reports only.
"""

import json

from ..types import ComparisonReport


def render_json(report: ComparisonReport) -> str:
    """Render a comparison report as indented JSON."""
    return json.dumps(report.to_dict(), indent=2) + "\n"
