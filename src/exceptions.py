"""
Exceptions raised while retrieving and comparing RDS parameter groups.
"""


class ParameterComparisonError(Exception):
    """Base class for all comparator errors."""


class ParameterGroupNotFoundError(ParameterComparisonError, ValueError):
    """Raised when a named parameter group does not exist."""

    def __init__(self, name: str, kind: str = "") -> None:
        self.name = name
        self.kind = kind
        label = f"{name} ({kind})" if kind else name
        super().__init__(f"Parameter group not found: {label}")


class ParameterFetchError(ParameterComparisonError):
    """Raised when an RDS API call fails for any other reason."""


class NotEnoughParameterGroupsError(ParameterComparisonError):
    """Raised when fewer than two parameter groups are available to compare."""

    def __init__(self, available: int) -> None:
        self.available = available
        super().__init__(
            f"Not enough parameter groups found to compare (found {available}, need 2)."
        )
