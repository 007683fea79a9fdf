"""
Base RDS Fetchers Module.

This module routes retrieval requests to the instance-level or cluster-level
fetcher depending on the kind of parameter group involved.
"""

from typing import List

from ...exceptions import ParameterGroupNotFoundError
from ..types import (
    DB_CLUSTER_PARAMETER_GROUP,
    DB_PARAMETER_GROUP,
    ParameterGroup,
    ParameterSet,
    RDSClient,
)
from .rds_fetchers import (
    fetch_db_cluster_parameters,
    fetch_db_parameters,
    list_db_cluster_parameter_groups,
    list_db_parameter_groups,
)


def list_parameter_groups(rds_client: RDSClient) -> List[ParameterGroup]:
    """
    List every parameter group available to compare.

    Instance-level groups come first, followed by cluster-level groups.

    Args:
        rds_client: Boto3 RDS client

    Returns:
        Combined list of parameter groups
    """
    return list_db_parameter_groups(rds_client) + list_db_cluster_parameter_groups(
        rds_client
    )


def fetch_parameters(rds_client: RDSClient, group: ParameterGroup) -> ParameterSet:
    """
    Fetch the parameter set of a parameter group of either kind.

    Args:
        rds_client: Boto3 RDS client
        group: Parameter group to fetch

    Returns:
        Mapping of parameter name to value

    Raises:
        ValueError: If the group kind is not recognised
        ParameterGroupNotFoundError: If the group does not exist
    """
    try:
        if group.kind == DB_PARAMETER_GROUP:
            return fetch_db_parameters(rds_client, group.name)
        if group.kind == DB_CLUSTER_PARAMETER_GROUP:
            return fetch_db_cluster_parameters(rds_client, group.name)
    except ParameterGroupNotFoundError as e:
        raise ParameterGroupNotFoundError(group.name, group.kind) from e.__cause__
    raise ValueError(f"Unknown parameter group kind: {group.kind!r}")
