"""
Tests for configuration module.
"""

import unittest
from unittest.mock import patch

from src.config import Config, load_config


class TestConfig(unittest.TestCase):
    """Test configuration loading and validation."""

    @patch.dict("os.environ", {}, clear=True)
    def test_load_config_defaults(self) -> None:
        """Test configuration loading with nothing set."""
        config = load_config()
        self.assertIsInstance(config, Config)
        self.assertIsNone(config.aws_region)
        self.assertEqual(config.log_level, "INFO")
        self.assertEqual(config.max_retries, 3)
        self.assertEqual(config.timeout_seconds, 30)
        self.assertEqual(config.output_format, "html")
        self.assertEqual(config.output_dir, ".")
        self.assertIsNone(config.group_a)

    @patch.dict(
        "os.environ",
        {
            "AWS_REGION": "eu-west-2",
            "LOG_LEVEL": "debug",
            "MAX_RETRIES": "5",
            "TIMEOUT_SECONDS": "60",
            "REPORT_FORMAT": "TEXT",
            "REPORT_OUTPUT_DIR": "/tmp/reports",
            "PARAMETER_GROUP_A": "default.mysql8.0",
            "PARAMETER_GROUP_B": "aurora-prod",
            "PARAMETER_GROUP_B_KIND": "db-cluster-parameter-group",
        },
        clear=True,
    )
    def test_load_config_with_optional_values(self) -> None:
        """Test configuration loading with optional values."""
        config = load_config()
        self.assertEqual(config.aws_region, "eu-west-2")
        self.assertEqual(config.log_level, "DEBUG")
        self.assertEqual(config.max_retries, 5)
        self.assertEqual(config.timeout_seconds, 60)
        self.assertEqual(config.output_format, "text")
        self.assertEqual(config.output_dir, "/tmp/reports")
        self.assertEqual(config.group_a, "default.mysql8.0")
        self.assertIsNone(config.group_a_kind)
        self.assertEqual(config.group_b_kind, "db-cluster-parameter-group")

    @patch.dict("os.environ", {"REPORT_FORMAT": "pdf"}, clear=True)
    def test_load_config_invalid_format(self) -> None:
        """Test that an unsupported report format raises ValueError."""
        with self.assertRaises(ValueError) as context:
            load_config()
        self.assertIn("REPORT_FORMAT", str(context.exception))

    @patch.dict("os.environ", {"MAX_RETRIES": "lots"}, clear=True)
    def test_load_config_non_integer(self) -> None:
        """Test that a non-integer retry count raises ValueError."""
        with self.assertRaises(ValueError) as context:
            load_config()
        self.assertIn("MAX_RETRIES", str(context.exception))

    @patch.dict("os.environ", {"TIMEOUT_SECONDS": "-1"}, clear=True)
    def test_load_config_negative(self) -> None:
        """Test that a negative timeout raises ValueError."""
        with self.assertRaises(ValueError):
            load_config()

    @patch.dict("os.environ", {"LOG_LEVEL": "VERBOSE"}, clear=True)
    def test_load_config_invalid_log_level(self) -> None:
        """Test that an unknown log level raises ValueError."""
        with self.assertRaises(ValueError):
            load_config()

    @patch.dict("os.environ", {"PARAMETER_GROUP_A_KIND": "option-group"}, clear=True)
    def test_load_config_invalid_kind(self) -> None:
        """Test that an unknown group kind raises ValueError."""
        with self.assertRaises(ValueError) as context:
            load_config()
        self.assertIn("PARAMETER_GROUP_A_KIND", str(context.exception))


if __name__ == "__main__":
    unittest.main()
