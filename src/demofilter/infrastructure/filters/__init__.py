"""Infrastructure layer: stateless candidate filter functions.

Filters are pure functions: CandidateFilter = Callable[[CandidateRecord], bool]
True = keep candidate, False = drop candidate.

Usage:
    from demofilter.infrastructure.filters import all_of, field_equals, field_overlaps

    flt = all_of(field_equals("age_group", "18-24"), field_overlaps("gender", "female"))
    kept = [c for c in candidates if flt(c)]
"""

from demofilter.infrastructure.filters.composite import all_of, any_of
from demofilter.infrastructure.filters.types import CandidateFilter
from demofilter.infrastructure.filters.value import field_equals, field_overlaps

__all__ = [
    "CandidateFilter",
    "all_of",
    "any_of",
    "field_equals",
    "field_overlaps",
]
