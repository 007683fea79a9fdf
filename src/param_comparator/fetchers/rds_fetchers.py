"""
RDS Parameter Group Fetchers Module.

This module contains functions for fetching DB parameter groups, DB cluster
parameter groups and their parameters from AWS. Every RDS describe call is
paged with a Marker token; each fetcher follows the marker until RDS stops
returning one and hands back a fully materialised result.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional

from ...utils import aws_error_handler, setup_logging
from ..types import (
    DB_CLUSTER_PARAMETER_GROUP,
    DB_PARAMETER_GROUP,
    ParameterGroup,
    ParameterSet,
    RDSClient,
)

logger = setup_logging()


def _paginate(
    operation: Callable[..., Dict[str, Any]], result_key: str, **kwargs: Any
) -> Iterator[Dict[str, Any]]:
    """
    Yield every item of a Marker-paged RDS describe operation.

    Args:
        operation: Bound boto3 client method, e.g. rds_client.describe_db_parameters
        result_key: Response key holding the page's items
        **kwargs: Request parameters passed on every call

    Yields:
        Items from each page in the order RDS returned them
    """
    marker: Optional[str] = None
    while True:
        params = dict(kwargs)
        if marker:
            params["Marker"] = marker
        response = operation(**params)
        for item in response.get(result_key, []):
            yield item
        marker = response.get("Marker")
        if not marker:
            break


def _to_parameter_set(parameters: Iterator[Dict[str, Any]]) -> ParameterSet:
    # A repeated name keeps its last value; RDS omits ParameterValue when unset
    parameter_set: ParameterSet = {}
    for param in parameters:
        parameter_set[param["ParameterName"]] = param.get("ParameterValue")
    return parameter_set


@aws_error_handler
def list_db_parameter_groups(rds_client: RDSClient) -> List[ParameterGroup]:
    """
    Fetch all DB (instance-level) parameter groups.

    Args:
        rds_client: Boto3 RDS client

    Returns:
        List of parameter groups in the order RDS returned them
    """
    groups = [
        ParameterGroup(name=group["DBParameterGroupName"], kind=DB_PARAMETER_GROUP)
        for group in _paginate(
            rds_client.describe_db_parameter_groups, "DBParameterGroups"
        )
    ]
    logger.debug(f"[RDS] Found {len(groups)} DB parameter groups")
    return groups


@aws_error_handler
def list_db_cluster_parameter_groups(rds_client: RDSClient) -> List[ParameterGroup]:
    """
    Fetch all DB cluster parameter groups.

    Args:
        rds_client: Boto3 RDS client

    Returns:
        List of cluster parameter groups in the order RDS returned them
    """
    groups = [
        ParameterGroup(
            name=group["DBClusterParameterGroupName"], kind=DB_CLUSTER_PARAMETER_GROUP
        )
        for group in _paginate(
            rds_client.describe_db_cluster_parameter_groups, "DBClusterParameterGroups"
        )
    ]
    logger.debug(f"[RDS] Found {len(groups)} DB cluster parameter groups")
    return groups


@aws_error_handler
def fetch_db_parameters(rds_client: RDSClient, group_name: str) -> ParameterSet:
    """
    Fetch every parameter of a DB parameter group.

    Args:
        rds_client: Boto3 RDS client
        group_name: Name of the DB parameter group

    Returns:
        Mapping of parameter name to value
    """
    logger.info(f"[RDS] Fetching parameters for DB parameter group: {group_name}")
    return _to_parameter_set(
        _paginate(
            rds_client.describe_db_parameters,
            "Parameters",
            DBParameterGroupName=group_name,
        )
    )


@aws_error_handler
def fetch_db_cluster_parameters(rds_client: RDSClient, group_name: str) -> ParameterSet:
    """
    Fetch every parameter of a DB cluster parameter group.

    Args:
        rds_client: Boto3 RDS client
        group_name: Name of the DB cluster parameter group

    Returns:
        Mapping of parameter name to value
    """
    logger.info(
        f"[RDS] Fetching parameters for DB cluster parameter group: {group_name}"
    )
    return _to_parameter_set(
        _paginate(
            rds_client.describe_db_cluster_parameters,
            "Parameters",
            DBClusterParameterGroupName=group_name,
        )
    )
