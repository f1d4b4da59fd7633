"""Predicate compiler: flat selections -> nested AND/OR structure.

group -> category -> values. Groups are ANDed, categories within a group
are ANDed, values within a category are ORed.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from demofilter.domain.model.option import DemographicOption
    from demofilter.domain.model.predicate import GroupedPredicate

AND = "AND"
OR = "OR"

_WORD_START = re.compile(r"\b\w")


def group_selections(selections: Iterable[DemographicOption]) -> GroupedPredicate:
    """Bucket selections by group, then by category.

    Buckets are created on first encounter and values appended in
    selection order. Nothing is sorted or de-duplicated.

    Args:
        selections: Flat selection list.

    Returns:
        Fresh nested mapping.
    """
    grouped: GroupedPredicate = {}
    for option in selections:
        grouped.setdefault(option.group, {}).setdefault(option.category, []).append(option.value)
    return grouped


def format_label(name: str) -> str:
    """Display label: underscores to spaces, first letter of each word upper-cased.

    Word starts follow regex word boundaries, so "non-binary" becomes
    "Non-Binary". Other characters keep their case. Display only, never
    used in matching.
    """
    return _WORD_START.sub(lambda m: m.group().upper(), name.replace("_", " "))


def describe_group(group: str, categories: dict[str, list[str]]) -> str:
    """One group's clause: "gender: Options (Female OR Male)"."""
    clauses = [
        f"{format_label(category)} ({f' {OR} '.join(values)})"
        for category, values in categories.items()
    ]
    return f"{group}: {f' {AND} '.join(clauses)}"


def describe(selections: Iterable[DemographicOption]) -> str:
    """Human-readable one-line summary of the applied filters.

    Example:
        "age_group: Options (18-24 OR 25-34) AND gender: Options (Female)"

    Returns:
        Summary text, empty string when nothing is selected.
    """
    grouped = group_selections(selections)
    return f" {AND} ".join(describe_group(group, cats) for group, cats in grouped.items())
