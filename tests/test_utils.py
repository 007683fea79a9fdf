"""
Tests for utility functions.
"""

import logging
import os
import tempfile
import unittest
from unittest.mock import MagicMock, patch

from src.utils import create_rds_client, setup_logging, write_report_file


class TestUtils(unittest.TestCase):
    """Test logging setup, client creation and report writing."""

    def test_setup_logging_single_handler(self) -> None:
        """Test that repeated setup does not add duplicate handlers."""
        logger = setup_logging("DEBUG")
        handler_count = len(logger.handlers)
        logger = setup_logging("WARNING")
        self.assertEqual(len(logger.handlers), handler_count)
        self.assertEqual(logger.level, logging.WARNING)
        self.assertEqual(logger.name, "rds_param_compare")

    @patch("src.utils.boto3.Session")
    def test_create_rds_client_with_profile(self, mock_session: MagicMock) -> None:
        """Test that a named profile and retry settings reach boto3."""
        create_rds_client("eu-west-2", "prod", max_retries=5, timeout_seconds=10)

        mock_session.assert_called_once_with(profile_name="prod", region_name="eu-west-2")
        client_call = mock_session.return_value.client.call_args
        self.assertEqual(client_call.args, ("rds",))
        boto_config = client_call.kwargs["config"]
        self.assertEqual(boto_config.retries, {"max_attempts": 5, "mode": "standard"})
        self.assertEqual(boto_config.connect_timeout, 10)
        self.assertEqual(boto_config.read_timeout, 10)

    @patch("src.utils.boto3.Session")
    def test_create_rds_client_default_session(self, mock_session: MagicMock) -> None:
        """Test that no profile uses the default credential chain."""
        create_rds_client()
        mock_session.assert_called_once_with(region_name=None)

    def test_write_report_file(self) -> None:
        """Test that the report is written into a created output directory."""
        with tempfile.TemporaryDirectory() as tmpdir:
            output_dir = os.path.join(tmpdir, "reports")
            path = write_report_file("content\n", "report.txt", output_dir)
            self.assertEqual(path, os.path.join(output_dir, "report.txt"))
            with open(path, "r", encoding="utf-8") as f:
                self.assertEqual(f.read(), "content\n")


if __name__ == "__main__":
    unittest.main()
