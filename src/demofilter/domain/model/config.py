"""Filter configuration.

None = feature disabled, value = feature enabled with that config.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# (group, category) -> candidate field for undivided groups
DEFAULT_FIELD_MAPPINGS: Mapping[tuple[str, str], str] = MappingProxyType(
    {
        ("age_group", "options"): "age_group",
        ("gender", "options"): "gender",
        ("race", "options"): "race",
        ("education", "options"): "education",
        ("income", "options"): "income",
    }
)

DEFAULT_EXACT_MATCH_FIELDS: frozenset[str] = frozenset({"age_group"})


@dataclass(frozen=True, slots=True)
class FilterConfig:
    """Demographic filter configuration.

    Immutable configuration object with FAIL-FIRST validation.
    Passed explicitly to each call site; there is no global instance.

    Attributes:
        data_source: Reference table holding demographic options.
        max_selections: Max selections in a store. None = unlimited.
        field_mappings: Extra (group, category) -> field entries, merged
            over DEFAULT_FIELD_MAPPINGS.
        exact_match_fields: Candidate fields compared by exact equality.
            All other fields use case-insensitive substring matching.
        strict_field_mapping: Raise on unmapped "options" categories
            instead of using the category name verbatim.
        enable_caching: Cache fetched reference groups.
        cache_ttl: Cache time-to-live in seconds.
        enable_presets: Allow saving and applying named presets.
    """

    data_source: str = "demo_prelim"
    max_selections: int | None = None
    field_mappings: Mapping[tuple[str, str], str] = field(default_factory=dict)
    exact_match_fields: frozenset[str] = DEFAULT_EXACT_MATCH_FIELDS
    strict_field_mapping: bool = False
    enable_caching: bool = True
    cache_ttl: float = 300.0
    enable_presets: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.data_source:
            raise ValueError("data_source must not be empty")

        if self.max_selections is not None and self.max_selections < 1:
            raise ValueError(f"max_selections must be >= 1, got {self.max_selections}")

        if self.cache_ttl <= 0:
            raise ValueError(f"cache_ttl must be > 0, got {self.cache_ttl}")

    @property
    def merged_field_mappings(self) -> Mapping[tuple[str, str], str]:
        """Default mappings overridden by configured ones."""
        return {**DEFAULT_FIELD_MAPPINGS, **self.field_mappings}
