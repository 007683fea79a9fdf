"""
Utility functions for the RDS Parameter Group Comparator.
"""

import functools
import logging
import os
from typing import Any, Callable, Optional, TypeVar, cast

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError, ClientError

from .exceptions import ParameterFetchError, ParameterGroupNotFoundError

# Error codes RDS returns for a parameter group that does not exist
NOT_FOUND_ERROR_CODES = {
    "DBParameterGroupNotFound",
    "DBParameterGroupNotFoundFault",
    "DBClusterParameterGroupNotFound",
    "DBClusterParameterGroupNotFoundFault",
}


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """
    Sets up logging configuration for the comparator.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("rds_param_compare")
    logger.setLevel(getattr(logging, log_level.upper()))

    # Prevent duplicate handlers
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


F = TypeVar("F", bound=Callable[..., Any])


def aws_error_handler(func: F) -> F:
    """
    Decorator for consistent error handling and logging in RDS fetchers.

    A ClientError whose code means the parameter group does not exist becomes
    ParameterGroupNotFoundError. Any other ClientError or BotoCoreError is
    logged and re-raised as ParameterFetchError, chained to the original.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = logging.getLogger("rds_param_compare")
        try:
            return func(*args, **kwargs)
        except ClientError as e:
            error = e.response.get("Error", {})
            code = error.get("Code", "")
            if code in NOT_FOUND_ERROR_CODES:
                name = kwargs.get("group_name") or (args[1] if len(args) > 1 else "")
                logger.error(f"Parameter group not found in {func.__name__}: {name}")
                raise ParameterGroupNotFoundError(str(name)) from e
            logger.error(f"AWS ClientError in {func.__name__}: {e}")
            raise ParameterFetchError(f"{func.__name__} failed: {e}") from e
        except BotoCoreError as e:
            logger.error(f"AWS client error in {func.__name__}: {e}")
            raise ParameterFetchError(f"{func.__name__} failed: {e}") from e

    return cast(F, wrapper)


def create_rds_client(
    region: Optional[str] = None,
    profile: Optional[str] = None,
    max_retries: int = 3,
    timeout_seconds: int = 30,
) -> Any:
    """
    Creates the RDS client shared by every fetcher in a run.

    Args:
        region: AWS region; falls back to the session default when None
        profile: Named AWS profile to use, if any
        max_retries: Retries botocore makes after the first attempt of a call
        timeout_seconds: Connect and read timeout for API calls

    Returns:
        boto3 RDS client
    """
    boto_config = BotoConfig(
        retries={"max_attempts": max_retries, "mode": "standard"},
        connect_timeout=timeout_seconds,
        read_timeout=timeout_seconds,
    )
    if profile:
        session = boto3.Session(profile_name=profile, region_name=region)
    else:
        session = boto3.Session(region_name=region)
    return session.client("rds", config=boto_config)


def write_report_file(
    content: str, filename: str, output_dir: str = ".",
    logger: Optional[logging.Logger] = None,
) -> str:
    """
    Writes a rendered report to disk.

    Args:
        content: Rendered report content
        filename: Report file name
        output_dir: Directory to write into, created if missing
        logger: Logger instance for progress logging

    Returns:
        Path of the written file
    """
    if logger is None:
        logger = setup_logging()

    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, filename)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    logger.info(f"Report generated: {path}")
    return path
