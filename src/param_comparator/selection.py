"""
Parameter group selection.

Groups are chosen either by name (from command-line flags, environment or a
Lambda event) or interactively from a numbered menu of every available group.
"""

from typing import Callable, List, Optional, Sequence

from ..exceptions import ParameterGroupNotFoundError
from .types import GROUP_KINDS, ParameterGroup


def format_group_choice(group: ParameterGroup) -> str:
    """Menu label for a group, e.g. 'default.mysql8.0 (db-parameter-group)'."""
    return group.label


def parse_group_choice(choice: str) -> ParameterGroup:
    """
    Parse a menu label back into a parameter group.

    Args:
        choice: Label in the form "<name> (<kind>)"

    Returns:
        ParameterGroup the label describes

    Raises:
        ValueError: If the label is malformed or names an unknown kind
    """
    name, sep, rest = choice.rpartition(" (")
    if not sep or not rest.endswith(")") or not name:
        raise ValueError(f"Invalid parameter group choice: {choice!r}")
    kind = rest[:-1]
    if kind not in GROUP_KINDS:
        raise ValueError(f"Unknown parameter group kind in choice: {choice!r}")
    return ParameterGroup(name=name, kind=kind)


def resolve_group(
    groups: Sequence[ParameterGroup], name: str, kind: Optional[str] = None
) -> ParameterGroup:
    """
    Find an available parameter group by name, and kind when given.

    Args:
        groups: Available parameter groups
        name: Group name to look for
        kind: Optional group kind to narrow the match

    Returns:
        The matching parameter group

    Raises:
        ParameterGroupNotFoundError: If no available group matches
        ValueError: If the name exists as both kinds and no kind was given
    """
    candidates = [
        group for group in groups
        if group.name == name and (kind is None or group.kind == kind)
    ]
    if not candidates:
        raise ParameterGroupNotFoundError(name, kind or "")
    kinds = {group.kind for group in candidates}
    if len(kinds) > 1:
        raise ValueError(
            f"Parameter group '{name}' exists as both an instance and a cluster "
            f"parameter group; specify its kind ({', '.join(GROUP_KINDS)})"
        )
    return candidates[0]


def prompt_for_group(
    groups: Sequence[ParameterGroup],
    message: str,
    input_func: Callable[[str], str] = input,
    output_func: Callable[[str], None] = print,
) -> ParameterGroup:
    """
    Ask the user to pick a parameter group from a numbered menu.

    Invalid answers are reported and the question is asked again.

    Args:
        groups: Available parameter groups
        message: Question shown above the menu
        input_func: Reads one answer line
        output_func: Writes one line of the menu

    Returns:
        The chosen parameter group
    """
    if not groups:
        raise ValueError("No parameter groups to choose from")

    choices: List[str] = [format_group_choice(group) for group in groups]
    output_func(message)
    for number, choice in enumerate(choices, 1):
        output_func(f"  {number}. {choice}")

    while True:
        answer = input_func(f"Enter a number (1-{len(choices)}): ").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(choices):
            return groups[int(answer) - 1]
        output_func(f"Invalid selection: {answer!r}")
