"""
Configuration loader for the RDS Parameter Group Comparator.
"""

import os
from dataclasses import dataclass
from typing import Optional

VALID_OUTPUT_FORMATS = ("html", "text", "json")
VALID_GROUP_KINDS = ("db-parameter-group", "db-cluster-parameter-group")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class Config:
    """Configuration class for the parameter group comparator."""

    aws_region: Optional[str] = None
    aws_profile: Optional[str] = None
    log_level: str = "INFO"
    max_retries: int = 3
    timeout_seconds: int = 30
    output_format: str = "html"
    output_dir: str = "."
    group_a: Optional[str] = None
    group_b: Optional[str] = None
    group_a_kind: Optional[str] = None
    group_b_kind: Optional[str] = None


def _read_int(name: str, default: str) -> int:
    raw = os.environ.get(name, default)
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _read_kind(name: str) -> Optional[str]:
    kind = os.environ.get(name) or None
    if kind is not None and kind not in VALID_GROUP_KINDS:
        raise ValueError(
            f"{name} must be one of {', '.join(VALID_GROUP_KINDS)}, got '{kind}'"
        )
    return kind


def load_config() -> Config:
    """
    Loads and validates configuration from the environment.

    Returns:
        Config object with validated settings

    Raises:
        ValueError: If any configured value is invalid
    """
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    if log_level not in VALID_LOG_LEVELS:
        raise ValueError(
            f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, got '{log_level}'"
        )

    output_format = os.environ.get("REPORT_FORMAT", "html").lower()
    if output_format not in VALID_OUTPUT_FORMATS:
        raise ValueError(
            f"REPORT_FORMAT must be one of {', '.join(VALID_OUTPUT_FORMATS)}, "
            f"got '{output_format}'"
        )

    return Config(
        aws_region=os.environ.get("AWS_REGION") or None,
        aws_profile=os.environ.get("AWS_PROFILE") or None,
        log_level=log_level,
        max_retries=_read_int("MAX_RETRIES", "3"),
        timeout_seconds=_read_int("TIMEOUT_SECONDS", "30"),
        output_format=output_format,
        output_dir=os.environ.get("REPORT_OUTPUT_DIR", "."),
        group_a=os.environ.get("PARAMETER_GROUP_A") or None,
        group_b=os.environ.get("PARAMETER_GROUP_B") or None,
        group_a_kind=_read_kind("PARAMETER_GROUP_A_KIND"),
        group_b_kind=_read_kind("PARAMETER_GROUP_B_KIND"),
    )
