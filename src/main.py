"""
AWS Lambda entry point for the RDS Parameter Group Comparator.
"""

import json
from dataclasses import replace

from .config import load_config
from .exceptions import NotEnoughParameterGroupsError
from .param_comparator import compare_parameter_groups
from .param_comparator.core import select_parameter_groups
from .utils import create_rds_client, setup_logging

logger = setup_logging()


def _response(status_code: int, body: dict) -> dict:
    return {
        'statusCode': status_code,
        'body': json.dumps(body),
        'headers': {
            'Content-Type': 'application/json'
        }
    }


def lambda_handler(event: dict, context: object) -> dict:
    """
    AWS Lambda handler function.

    The groups to compare come from the event keys group_a, group_b,
    group_a_kind and group_b_kind, falling back to the PARAMETER_GROUP_*
    environment variables.

    Args:
        event: Lambda event data
        context: Lambda context

    Returns:
        Dictionary with statusCode and body containing the comparison report
    """
    try:
        # Load and validate configuration
        config = load_config()
        event = event or {}
        config = replace(
            config,
            group_a=event.get('group_a') or config.group_a,
            group_b=event.get('group_b') or config.group_b,
            group_a_kind=event.get('group_a_kind') or config.group_a_kind,
            group_b_kind=event.get('group_b_kind') or config.group_b_kind,
        )

        setup_logging(config.log_level)
        logger.info("Starting RDS parameter group comparison")

        if not config.group_a or not config.group_b:
            raise ValueError(
                "Both group_a and group_b are required "
                "(event keys or PARAMETER_GROUP_A / PARAMETER_GROUP_B)"
            )

        rds_client = create_rds_client(
            config.aws_region, config.aws_profile,
            config.max_retries, config.timeout_seconds,
        )
        group_a, group_b = select_parameter_groups(rds_client, config)

        report = compare_parameter_groups(rds_client, group_a, group_b)

        logger.info(
            f"Comparison completed. "
            f"Differences found: {report.has_differences}"
        )
        return _response(200, report.to_dict())

    except (ValueError, NotEnoughParameterGroupsError) as e:
        # Configuration, validation or lookup errors
        logger.error(f"Configuration error: {str(e)}")
        return _response(400, {
            'error': 'Configuration error',
            'message': str(e)
        })

    except Exception as e:
        # Unexpected errors
        logger.error(f"Unexpected error: {str(e)}")
        return _response(500, {
            'error': 'Internal server error',
            'message': str(e)
        })
