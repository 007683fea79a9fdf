"""
Core comparison orchestration logic.

This module contains the main entry points for comparing two RDS parameter
groups and coordinates retrieval, selection, comparison and report output.
"""

from typing import Callable, List, Optional, Sequence, Tuple

from ..config import Config
from ..exceptions import NotEnoughParameterGroupsError
from ..utils import setup_logging, write_report_file
from .comparators import compare_parameters
from .fetchers import fetch_parameters, list_parameter_groups
from .reporters import render_report, report_filename
from .selection import resolve_group
from .types import ComparisonReport, ParameterGroup, RDSClient

logger = setup_logging()

GroupSelector = Callable[[Sequence[ParameterGroup], str], ParameterGroup]


def compare_parameter_groups(
    rds_client: RDSClient, group_a: ParameterGroup, group_b: ParameterGroup
) -> ComparisonReport:
    """
    Fetches the parameters of two groups and compares them.

    Args:
        rds_client: Boto3 RDS client
        group_a: First parameter group
        group_b: Second parameter group

    Returns:
        ComparisonReport for group_a against group_b
    """
    params_a = fetch_parameters(rds_client, group_a)
    logger.info(f"Fetched {len(params_a)} parameters from {group_a.label}")
    params_b = fetch_parameters(rds_client, group_b)
    logger.info(f"Fetched {len(params_b)} parameters from {group_b.label}")

    report = compare_parameters(params_a, params_b, group_a, group_b)
    summary = report.summary()
    logger.info(
        f"Comparison complete: {summary['matching']} matching, "
        f"{summary['non_matching']} non-matching, "
        f"{summary['exclusive_to_a']} exclusive to {group_a.name}, "
        f"{summary['exclusive_to_b']} exclusive to {group_b.name}"
    )
    return report


def _choose_group(
    groups: List[ParameterGroup],
    name: Optional[str],
    kind: Optional[str],
    selector: Optional[GroupSelector],
    message: str,
) -> ParameterGroup:
    if name:
        return resolve_group(groups, name, kind)
    if selector is None:
        raise ValueError("A parameter group name is required when no selector is given")
    return selector(groups, message)


def select_parameter_groups(
    rds_client: RDSClient,
    config: Config,
    selector: Optional[GroupSelector] = None,
) -> Tuple[ParameterGroup, ParameterGroup]:
    """
    Lists the available parameter groups and picks the two to compare.

    Groups named in the config are looked up directly; otherwise the
    selector is asked to choose one from the full list.

    Raises:
        NotEnoughParameterGroupsError: If fewer than two groups exist
    """
    groups = list_parameter_groups(rds_client)
    logger.info(f"Found {len(groups)} parameter groups")
    if len(groups) < 2:
        raise NotEnoughParameterGroupsError(len(groups))

    group_a = _choose_group(
        groups, config.group_a, config.group_a_kind, selector,
        "Select the first parameter group to compare:",
    )
    group_b = _choose_group(
        groups, config.group_b, config.group_b_kind, selector,
        "Select the second parameter group to compare:",
    )
    return group_a, group_b


def run_comparison(
    config: Config,
    rds_client: RDSClient,
    selector: Optional[GroupSelector] = None,
) -> Tuple[ComparisonReport, str]:
    """
    Main entry point for a comparison run. Orchestrates the whole process.

    This function:
    - Lists the available instance and cluster parameter groups
    - Picks the two groups to compare (by name or through the selector)
    - Fetches and compares their parameters
    - Renders the report and writes it to the output directory

    Args:
        config: Run configuration
        rds_client: Boto3 RDS client shared by every API call of the run
        selector: Chooses a group when the config does not name one

    Returns:
        Tuple of the comparison report and the path of the written report file
    """
    group_a, group_b = select_parameter_groups(rds_client, config, selector)
    logger.info(f"Comparing {group_a.label} with {group_b.label}")

    report = compare_parameter_groups(rds_client, group_a, group_b)

    content = render_report(report, config.output_format)
    path = write_report_file(
        content, report_filename(report, config.output_format), config.output_dir,
        logger,
    )
    return report, path
