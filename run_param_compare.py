#!/usr/bin/env python3
"""
Command-line interface for comparing two RDS parameter groups.

This script compares two DB parameter groups or DB cluster parameter groups and
writes a report file. It requires AWS credentials to be configured (via AWS
CLI, environment variables, or IAM roles).

Usage:
    python run_param_compare.py
    python run_param_compare.py --group-a default.mysql8.0 --group-b prod-mysql8
    python run_param_compare.py --group-a aurora-pg --kind-a db-cluster-parameter-group \\
        --group-b aurora-pg --kind-b db-parameter-group --output-format text
    python run_param_compare.py --list-groups --region us-east-1
"""

import argparse
import sys
from dataclasses import replace
from typing import List, Optional

from src.config import VALID_GROUP_KINDS, VALID_LOG_LEVELS, VALID_OUTPUT_FORMATS, load_config
from src.param_comparator import run_comparison
from src.param_comparator.fetchers import list_parameter_groups
from src.param_comparator.selection import format_group_choice, prompt_for_group
from src.param_comparator.types import ComparisonReport
from src.utils import create_rds_client, setup_logging


def non_negative_int(value: str) -> int:
    """argparse type for counts and timeouts, matching the env var checks."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"must be an integer, got '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the command-line comparator."""
    parser = argparse.ArgumentParser(
        description="Compare two AWS RDS parameter groups and write a report",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_param_compare.py
  python run_param_compare.py --group-a default.postgres15 --group-b app-postgres15
  python run_param_compare.py --group-a a --group-b b --output-format json --fail-on-difference

Groups not given on the command line are chosen from an interactive menu.
        """
    )

    parser.add_argument("--group-a", help="Name of the first parameter group")
    parser.add_argument("--group-b", help="Name of the second parameter group")

    parser.add_argument(
        "--kind-a",
        choices=VALID_GROUP_KINDS,
        help="Kind of the first group, needed when its name exists as both kinds"
    )

    parser.add_argument(
        "--kind-b",
        choices=VALID_GROUP_KINDS,
        help="Kind of the second group, needed when its name exists as both kinds"
    )

    parser.add_argument("--region", help="AWS region for API calls")
    parser.add_argument("--profile", help="Named AWS profile to use")

    parser.add_argument(
        "--log-level",
        choices=VALID_LOG_LEVELS,
        help="Logging level (default: INFO)"
    )

    parser.add_argument(
        "--max-retries",
        type=non_negative_int,
        help="Maximum number of retries for AWS API calls (default: 3)"
    )

    parser.add_argument(
        "--timeout-seconds",
        type=non_negative_int,
        help="Timeout for AWS API calls in seconds (default: 30)"
    )

    parser.add_argument(
        "--output-format",
        choices=VALID_OUTPUT_FORMATS,
        help="Report format (default: html)"
    )

    parser.add_argument("--output-dir", help="Directory for the report file (default: .)")

    parser.add_argument(
        "--list-groups",
        action="store_true",
        help="List the available parameter groups and exit"
    )

    parser.add_argument(
        "--fail-on-difference",
        action="store_true",
        help="Exit with code 1 when the groups differ"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the command-line comparator."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config()
    except ValueError as e:
        print(f"ERROR: {str(e)}", file=sys.stderr)
        sys.exit(1)

    # Command-line flags override environment configuration
    overrides = {
        "aws_region": args.region,
        "aws_profile": args.profile,
        "log_level": args.log_level,
        "max_retries": args.max_retries,
        "timeout_seconds": args.timeout_seconds,
        "output_format": args.output_format,
        "output_dir": args.output_dir,
        "group_a": args.group_a,
        "group_b": args.group_b,
        "group_a_kind": args.kind_a,
        "group_b_kind": args.kind_b,
    }
    config = replace(config, **{k: v for k, v in overrides.items() if v is not None})

    # Set up logging
    logger = setup_logging(config.log_level)
    logger.info("Starting RDS parameter group comparison from command line")

    try:
        rds_client = create_rds_client(
            config.aws_region, config.aws_profile,
            config.max_retries, config.timeout_seconds,
        )

        if args.list_groups:
            for group in list_parameter_groups(rds_client):
                print(format_group_choice(group))
            sys.exit(0)

        report, path = run_comparison(config, rds_client, selector=prompt_for_group)
        print_summary(report, path)

        # Exit with appropriate code
        if args.fail_on_difference and report.has_differences:
            logger.warning("Parameter groups differ! Exiting with code 1")
            sys.exit(1)
        logger.info("Comparison finished. Exiting with code 0")
        sys.exit(0)

    except (KeyboardInterrupt, EOFError):
        print("\nAborted.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error running parameter group comparison: {str(e)}")
        print(f"ERROR: {str(e)}", file=sys.stderr)
        sys.exit(1)


def print_summary(report: ComparisonReport, path: str) -> None:
    """Print a short human-readable summary of the comparison."""
    summary = report.summary()
    print("\n" + "="*60)
    print("RDS PARAMETER GROUP COMPARISON")
    print("="*60)
    print(f"Group A: {report.group_a.label}")
    print(f"Group B: {report.group_b.label}")
    print(f"\nMatching parameters:        {summary['matching']}")
    print(f"Non-matching parameters:    {summary['non_matching']}")
    print(f"Exclusive to {report.group_a.name}: {summary['exclusive_to_a']}")
    print(f"Exclusive to {report.group_b.name}: {summary['exclusive_to_b']}")
    print(f"\nReport written to: {path}")
    print("="*60)


if __name__ == "__main__":
    main()
