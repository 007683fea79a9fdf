"""
Parameter Set Comparator Module.

This module contains the comparison of two RDS parameter sets. Every parameter
name found in either set is classified into exactly one of four categories:
matching, non-matching, exclusive to the first set, or exclusive to the second.
"""

from typing import List, Mapping, Optional

from ..types import (
    ComparisonReport,
    ExclusiveParameter,
    ParameterGroup,
    ParameterMatch,
    ParameterMismatch,
    ParameterValue,
)


def compare_parameters(
    set_a: Mapping[str, ParameterValue],
    set_b: Mapping[str, ParameterValue],
    group_a: Optional[ParameterGroup] = None,
    group_b: Optional[ParameterGroup] = None,
) -> ComparisonReport:
    """
    Compares two parameter sets and classifies every parameter name.

    Values are compared with strict equality, so a parameter with no value
    (None) never matches an empty string. Each output sequence
    keeps the iteration order of the set its names were taken from.

    Args:
        set_a: Parameters of the first group, name to value
        set_b: Parameters of the second group, name to value
        group_a: Identity of the first group, recorded in the report
        group_b: Identity of the second group, recorded in the report

    Returns:
        ComparisonReport holding the four classified sequences
    """
    matching: List[ParameterMatch] = []
    non_matching: List[ParameterMismatch] = []
    exclusive_to_a: List[ExclusiveParameter] = []
    exclusive_to_b: List[ExclusiveParameter] = []

    for name, value in set_a.items():
        if name in set_b:
            other_value = set_b[name]
            if other_value == value:
                matching.append(ParameterMatch(name=name, value=value))
            else:
                non_matching.append(
                    ParameterMismatch(name=name, value_a=value, value_b=other_value)
                )
        else:
            exclusive_to_a.append(ExclusiveParameter(name=name, value=value))

    # Names shared with set_a were classified above
    for name, value in set_b.items():
        if name not in set_a:
            exclusive_to_b.append(ExclusiveParameter(name=name, value=value))

    return ComparisonReport(
        group_a=group_a or ParameterGroup(name="group-a"),
        group_b=group_b or ParameterGroup(name="group-b"),
        matching=tuple(matching),
        non_matching=tuple(non_matching),
        exclusive_to_a=tuple(exclusive_to_a),
        exclusive_to_b=tuple(exclusive_to_b),
    )
