"""
Unit tests for report rendering.
"""

import json
import unittest

from src.param_comparator.comparators import compare_parameters
from src.param_comparator.reporters import (
    render_html,
    render_json,
    render_report,
    render_text,
    report_filename,
)
from src.param_comparator.types import (
    DB_CLUSTER_PARAMETER_GROUP,
    DB_PARAMETER_GROUP,
    ParameterGroup,
)


class TestReporters(unittest.TestCase):
    """Test text, HTML and JSON rendering of a comparison report."""

    def setUp(self) -> None:
        self.report = compare_parameters(
            {"max_connections": "100", "timezone": "UTC", "autocommit": "1",
             "sql_mode": None},
            {"max_connections": "200", "log_level": "debug", "autocommit": "1",
             "sql_mode": ""},
            ParameterGroup("group-one"),
            ParameterGroup("group-two", DB_CLUSTER_PARAMETER_GROUP),
        )

    def test_render_text(self) -> None:
        """Test the section layout of the text report."""
        text = render_text(self.report)
        lines = text.splitlines()
        self.assertEqual(
            lines[0], "Comparison between RDS Parameter Groups: group-one and group-two"
        )
        self.assertTrue(lines[1].startswith("====="))
        self.assertIn("1. Matching Parameters:\nautocommit: 1\n", text)
        self.assertIn(
            "2. Non-Matching Parameters:\n"
            "max_connections: group-one: 100, group-two: 200\n"
            "sql_mode: group-one: , group-two: \n",
            text,
        )
        self.assertIn("3. Exclusive to group-one:\ntimezone: UTC\n", text)
        self.assertIn("4. Exclusive to group-two:\nlog_level: debug\n", text)

    def test_render_html(self) -> None:
        """Test that the HTML report has one table per category."""
        html = render_html(self.report)
        self.assertTrue(html.startswith("<!DOCTYPE html>"))
        self.assertEqual(html.count("<table"), 4)
        self.assertIn("<h2>Exclusive to group-one</h2>", html)
        self.assertIn("<th>name</th><th>group-one</th><th>group-two</th>", html)
        self.assertIn("<td>max_connections</td><td>100</td><td>200</td>", html)
        # A missing value renders as an empty cell
        self.assertIn("<td>sql_mode</td><td></td><td></td>", html)

    def test_render_html_escapes_values(self) -> None:
        """Test that values from AWS are HTML-escaped."""
        report = compare_parameters(
            {"init_connect": "<script>alert('x')</script>"}, {},
            ParameterGroup("a&b"), ParameterGroup("c"),
        )
        html = render_html(report)
        self.assertNotIn("<script>", html)
        self.assertIn("&lt;script&gt;", html)
        self.assertIn("Exclusive to a&amp;b", html)

    def test_render_json_keeps_null(self) -> None:
        """Test that JSON output keeps missing values as null."""
        data = json.loads(render_json(self.report))
        self.assertEqual(
            data["non_matching"][1], {"name": "sql_mode", "value_a": None, "value_b": ""}
        )
        self.assertEqual(data["summary"]["total"], 5)

    def test_same_name_groups_use_kind_labels(self) -> None:
        """Test that groups sharing a name are labelled with their kinds."""
        report = compare_parameters(
            {"x": "1"}, {"x": "2"},
            ParameterGroup("shared", DB_PARAMETER_GROUP),
            ParameterGroup("shared", DB_CLUSTER_PARAMETER_GROUP),
        )
        text = render_text(report)
        self.assertIn(
            "x: shared (db-parameter-group): 1, shared (db-cluster-parameter-group): 2",
            text,
        )

    def test_empty_report(self) -> None:
        """Test that an empty report still renders every section."""
        report = compare_parameters({}, {}, ParameterGroup("a"), ParameterGroup("b"))
        text = render_text(report)
        for heading in ("1. Matching", "2. Non-Matching", "3. Exclusive to a",
                        "4. Exclusive to b"):
            self.assertIn(heading, text)
        self.assertEqual(render_html(report).count("<tr><td>"), 0)

    def test_render_report_dispatch(self) -> None:
        """Test format dispatch and rejection of unknown formats."""
        self.assertEqual(render_report(self.report, "text"), render_text(self.report))
        self.assertEqual(render_report(self.report, "html"), render_html(self.report))
        with self.assertRaises(ValueError):
            render_report(self.report, "pdf")

    def test_report_filename(self) -> None:
        """Test report file naming per format."""
        self.assertEqual(
            report_filename(self.report, "html"),
            "rds-parameter-comparison-group-one-vs-group-two.html",
        )
        self.assertEqual(
            report_filename(self.report, "text"),
            "rds-parameter-comparison-group-one-vs-group-two.txt",
        )
        report = compare_parameters({}, {}, ParameterGroup("a/b c"), ParameterGroup("d"))
        self.assertEqual(
            report_filename(report, "json"), "rds-parameter-comparison-a_b_c-vs-d.json"
        )


if __name__ == "__main__":
    unittest.main()
