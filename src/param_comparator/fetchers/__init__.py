"""
RDS Fetchers Package.

This package contains the modules that fetch parameter groups and their
parameters from AWS RDS, following Marker pagination to completion.
"""

from .base import fetch_parameters, list_parameter_groups
from .rds_fetchers import (
    fetch_db_cluster_parameters,
    fetch_db_parameters,
    list_db_cluster_parameter_groups,
    list_db_parameter_groups,
)

__all__ = [
    "fetch_parameters",
    "list_parameter_groups",
    "fetch_db_parameters",
    "fetch_db_cluster_parameters",
    "list_db_parameter_groups",
    "list_db_cluster_parameter_groups",
]
