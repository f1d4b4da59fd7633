"""Composite filters: AND, OR composition."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from demofilter.domain.model.candidate import CandidateRecord
    from demofilter.infrastructure.filters.types import CandidateFilter


def all_of(*filters: CandidateFilter) -> CandidateFilter:
    """Create filter that requires ALL filters to pass (AND).

    Args:
        *filters: Filters to compose.

    Returns:
        Filter that returns True only if all filters return True.
        Empty filters = always True. Stops at the first failure.
    """

    def _filter(candidate: CandidateRecord) -> bool:
        return all(f(candidate) for f in filters)

    return _filter


def any_of(*filters: CandidateFilter) -> CandidateFilter:
    """Create filter that requires ANY filter to pass (OR).

    Args:
        *filters: Filters to compose.

    Returns:
        Filter that returns True if any filter returns True.
        Empty filters = always False.
    """

    def _filter(candidate: CandidateRecord) -> bool:
        return any(f(candidate) for f in filters)

    return _filter
