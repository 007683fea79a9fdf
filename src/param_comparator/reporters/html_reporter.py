"""
HTML rendering of a parameter group comparison report.

The report is a standalone HTML5 page with one table per category. Every
piece of text taken from AWS is escaped before it is placed in the page.
"""

from html import escape
from typing import List, Sequence

from ..types import ComparisonReport
from .utils import column_labels, display_value

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>RDS Parameter Group Comparison</title>
  <style>
    body {{ font-family: Arial, sans-serif; }}
    table {{ width: 100%; border-collapse: collapse; }}
    th, td {{ padding: 8px; text-align: left; }}
    th {{ background-color: #f2f2f2; }}
  </style>
</head>
<body>
  <h1>Comparison between RDS Parameter Groups: {label_a} and {label_b}</h1>
{tables}
</body>
</html>
"""


def _table(title: str, columns: Sequence[str], rows: List[Sequence[str]]) -> str:
    header = "".join(f"<th>{escape(col)}</th>" for col in columns)
    body = "\n".join(
        "      <tr>" + "".join(f"<td>{escape(cell)}</td>" for cell in row) + "</tr>"
        for row in rows
    )
    return (
        f"  <h2>{escape(title)}</h2>\n"
        f'  <table border="1" cellpadding="5" cellspacing="0">\n'
        f"    <thead>\n      <tr>{header}</tr>\n    </thead>\n"
        f"    <tbody>\n{body}\n    </tbody>\n"
        f"  </table>"
    )


def render_html(report: ComparisonReport) -> str:
    """
    Render a comparison report as an HTML page.

    Args:
        report: Comparison report to render

    Returns:
        HTML document
    """
    label_a, label_b = column_labels(report)
    tables = [
        _table(
            "Matching Parameters",
            ["name", "value"],
            [[p.name, display_value(p.value)] for p in report.matching],
        ),
        _table(
            "Non-Matching Parameters",
            ["name", label_a, label_b],
            [
                [p.name, display_value(p.value_a), display_value(p.value_b)]
                for p in report.non_matching
            ],
        ),
        _table(
            f"Exclusive to {label_a}",
            ["name", "value"],
            [[p.name, display_value(p.value)] for p in report.exclusive_to_a],
        ),
        _table(
            f"Exclusive to {label_b}",
            ["name", "value"],
            [[p.name, display_value(p.value)] for p in report.exclusive_to_b],
        ),
    ]
    return PAGE_TEMPLATE.format(
        label_a=escape(label_a),
        label_b=escape(label_b),
        tables="\n".join(tables),
    )
