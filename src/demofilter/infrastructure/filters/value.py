"""Field value filters.

Both filters read one candidate field and fail when it has no value
(None, absent or empty), whatever the wanted values are.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from demofilter.domain.model.candidate import CandidateRecord, candidate_value

if TYPE_CHECKING:
    from demofilter.infrastructure.filters.types import CandidateFilter


def field_equals(field_name: str, *wanted: str) -> CandidateFilter:
    """Create filter matching a field exactly against any wanted value.

    Args:
        field_name: Candidate field to read.
        *wanted: Accepted values (OR).

    Returns:
        Filter that returns True if the field equals any wanted value.
    """
    wanted_set = frozenset(wanted)

    def _filter(candidate: CandidateRecord) -> bool:
        value = candidate_value(candidate, field_name)
        if value is None:
            return False
        return value in wanted_set

    return _filter


def field_overlaps(field_name: str, *wanted: str) -> CandidateFilter:
    """Create filter matching a field by case-insensitive containment.

    A wanted value matches when either string contains the other,
    so "female" matches "Female, Non-binary" and "Non" matches "non-binary".

    Args:
        field_name: Candidate field to read.
        *wanted: Accepted values (OR).

    Returns:
        Filter that returns True if the field overlaps any wanted value.
    """
    wanted_lower = tuple(w.lower() for w in wanted)

    def _filter(candidate: CandidateRecord) -> bool:
        value = candidate_value(candidate, field_name)
        if value is None:
            return False
        value = value.lower()
        return any(w in value or value in w for w in wanted_lower)

    return _filter
