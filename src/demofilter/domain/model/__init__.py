"""Domain model: immutable value objects."""

from demofilter.domain.model.candidate import CandidateRecord, candidate_value
from demofilter.domain.model.config import DEFAULT_FIELD_MAPPINGS, FilterConfig
from demofilter.domain.model.group import DemographicGroup
from demofilter.domain.model.match_result import MatchResult
from demofilter.domain.model.option import DemographicOption
from demofilter.domain.model.predicate import GroupedPredicate
from demofilter.domain.model.preset import FilterPreset
from demofilter.domain.model.toggle import ToggleOutcome

__all__ = [
    "DEFAULT_FIELD_MAPPINGS",
    "CandidateRecord",
    "DemographicGroup",
    "DemographicOption",
    "FilterConfig",
    "FilterPreset",
    "MatchResult",
    "GroupedPredicate",
    "ToggleOutcome",
    "candidate_value",
]
