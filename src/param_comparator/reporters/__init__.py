"""
Report Renderers Package.

This package renders a comparison report as plain text, HTML or JSON.
"""

from .base import render_report, report_filename
from .html_reporter import render_html
from .json_reporter import render_json
from .text_reporter import render_text

__all__ = [
    "render_report",
    "report_filename",
    "render_html",
    "render_json",
    "render_text",
]
