"""
Base Report Rendering Module.

This module routes a comparison report to the renderer for the requested
output format and names the report file.
"""

import re
from typing import Callable, Dict

from ..types import ComparisonReport
from .html_reporter import render_html
from .json_reporter import render_json
from .text_reporter import render_text

RENDERERS: Dict[str, Callable[[ComparisonReport], str]] = {
    "html": render_html,
    "text": render_text,
    "json": render_json,
}

FILE_EXTENSIONS = {
    "html": "html",
    "text": "txt",
    "json": "json",
}


def render_report(report: ComparisonReport, output_format: str) -> str:
    """
    Render a comparison report in the requested format.

    Args:
        report: Comparison report to render
        output_format: One of "html", "text" or "json"

    Returns:
        Rendered report content

    Raises:
        ValueError: If the output format is not supported
    """
    try:
        renderer = RENDERERS[output_format]
    except KeyError:
        raise ValueError(
            f"Unsupported output format '{output_format}'. "
            f"Choose one of: {', '.join(RENDERERS)}"
        )
    return renderer(report)


def _safe_filename_part(name: str) -> str:
    return re.sub(r"[^A-Za-z0-9._-]", "_", name)


def report_filename(report: ComparisonReport, output_format: str) -> str:
    """
    File name for a rendered report.

    Example: rds-parameter-comparison-default-mysql8-vs-custom-mysql8.html
    """
    if output_format not in FILE_EXTENSIONS:
        raise ValueError(f"Unsupported output format '{output_format}'")
    return (
        f"rds-parameter-comparison-{_safe_filename_part(report.group_a.name)}"
        f"-vs-{_safe_filename_part(report.group_b.name)}"
        f".{FILE_EXTENSIONS[output_format]}"
    )
