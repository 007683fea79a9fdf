"""
Type definitions for the RDS Parameter Group Comparator.

This module holds the parameter group identity, the parameter set alias and the
records that make up a comparison report.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

# boto3 does not ship static stubs for service clients
RDSClient = Any

DB_PARAMETER_GROUP = "db-parameter-group"
DB_CLUSTER_PARAMETER_GROUP = "db-cluster-parameter-group"
GROUP_KINDS = (DB_PARAMETER_GROUP, DB_CLUSTER_PARAMETER_GROUP)

# A parameter value is None when RDS returns no ParameterValue for it
ParameterValue = Optional[str]
ParameterSet = Dict[str, ParameterValue]


@dataclass(frozen=True)
class ParameterGroup:
    """An instance-level or cluster-level parameter group."""

    name: str
    kind: str = DB_PARAMETER_GROUP

    @property
    def label(self) -> str:
        return f"{self.name} ({self.kind})"


@dataclass(frozen=True)
class ParameterMatch:
    """A parameter present in both groups with the same value."""

    name: str
    value: ParameterValue


@dataclass(frozen=True)
class ParameterMismatch:
    """A parameter present in both groups with differing values."""

    name: str
    value_a: ParameterValue
    value_b: ParameterValue


@dataclass(frozen=True)
class ExclusiveParameter:
    """A parameter present in only one of the groups."""

    name: str
    value: ParameterValue


@dataclass(frozen=True)
class ComparisonReport:
    """
    Result of comparing two parameter sets.

    The four sequences partition the union of parameter names of both sets,
    each in the iteration order of the set it was taken from.
    """

    group_a: ParameterGroup
    group_b: ParameterGroup
    matching: Tuple[ParameterMatch, ...] = field(default_factory=tuple)
    non_matching: Tuple[ParameterMismatch, ...] = field(default_factory=tuple)
    exclusive_to_a: Tuple[ExclusiveParameter, ...] = field(default_factory=tuple)
    exclusive_to_b: Tuple[ExclusiveParameter, ...] = field(default_factory=tuple)

    @property
    def has_differences(self) -> bool:
        return bool(self.non_matching or self.exclusive_to_a or self.exclusive_to_b)

    @property
    def total_parameters(self) -> int:
        return (
            len(self.matching)
            + len(self.non_matching)
            + len(self.exclusive_to_a)
            + len(self.exclusive_to_b)
        )

    def summary(self) -> Dict[str, int]:
        """Counts per category plus the total number of distinct parameters."""
        return {
            "matching": len(self.matching),
            "non_matching": len(self.non_matching),
            "exclusive_to_a": len(self.exclusive_to_a),
            "exclusive_to_b": len(self.exclusive_to_b),
            "total": self.total_parameters,
        }

    def swapped(self) -> "ComparisonReport":
        """
        Swap the two sides of the report.

        Groups, exclusive sequences and the two values of each mismatch trade
        places; every sequence keeps its current order. This equals comparing
        B against A up to the order of matching and non-matching records.
        """
        return ComparisonReport(
            group_a=self.group_b,
            group_b=self.group_a,
            matching=self.matching,
            non_matching=tuple(
                ParameterMismatch(m.name, m.value_b, m.value_a) for m in self.non_matching
            ),
            exclusive_to_a=self.exclusive_to_b,
            exclusive_to_b=self.exclusive_to_a,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the report to a JSON-serialisable dictionary."""
        return {
            "group_a": {"name": self.group_a.name, "kind": self.group_a.kind},
            "group_b": {"name": self.group_b.name, "kind": self.group_b.kind},
            "has_differences": self.has_differences,
            "summary": self.summary(),
            "matching": [{"name": p.name, "value": p.value} for p in self.matching],
            "non_matching": [
                {"name": p.name, "value_a": p.value_a, "value_b": p.value_b}
                for p in self.non_matching
            ],
            "exclusive_to_a": [
                {"name": p.name, "value": p.value} for p in self.exclusive_to_a
            ],
            "exclusive_to_b": [
                {"name": p.name, "value": p.value} for p in self.exclusive_to_b
            ],
        }
