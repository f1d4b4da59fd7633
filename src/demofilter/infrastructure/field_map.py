"""Field map: (group, category) -> candidate field name.

Undivided groups select under the generic "options" category, which
names no real field. Those pairs must be mapped explicitly. Any other
category already equals the candidate field and resolves verbatim.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from demofilter.domain.exceptions import FieldMappingError, UnmappedFieldError
from demofilter.domain.model.config import DEFAULT_FIELD_MAPPINGS

if TYPE_CHECKING:
    from demofilter.domain.model.config import FilterConfig
    from demofilter.domain.model.group import DemographicGroup

GENERIC_CATEGORY = "options"


@dataclass(frozen=True, slots=True)
class FieldMap:
    """Enumerated field-name resolution table.

    Validated on construction: malformed entries raise FieldMappingError
    immediately rather than surfacing as silent non-matches later.

    Attributes:
        mappings: (group, category) -> candidate field name.
        strict: Raise UnmappedFieldError for unmapped generic categories.
    """

    mappings: Mapping[tuple[str, str], str] = field(default_factory=lambda: DEFAULT_FIELD_MAPPINGS)
    strict: bool = False

    def __post_init__(self) -> None:
        """Validate entries. FAIL-FIRST."""
        for key, field_name in self.mappings.items():
            if not isinstance(key, tuple) or len(key) != 2:
                raise FieldMappingError(f"mapping key must be (group, category), got {key!r}")
            group, category = key
            if not group or not category:
                raise FieldMappingError(f"mapping key has empty part: {key!r}")
            if not isinstance(field_name, str) or not field_name:
                raise FieldMappingError(f"mapping for {key!r} must be non-empty str")
        object.__setattr__(self, "mappings", MappingProxyType(dict(self.mappings)))

    @classmethod
    def from_config(cls, config: FilterConfig) -> FieldMap:
        """Build from configuration (defaults merged with overrides)."""
        return cls(mappings=config.merged_field_mappings, strict=config.strict_field_mapping)

    def is_mapped(self, group: str, category: str) -> bool:
        """True if the pair resolves without the verbatim fallback."""
        return (group, category) in self.mappings or category != GENERIC_CATEGORY

    def resolve(self, group: str, category: str) -> str:
        """Resolve a selection's category to the candidate field name.

        Args:
            group: Demographic group name.
            category: Category within the group.

        Returns:
            Mapped field, or the category itself when it is not generic.

        Raises:
            UnmappedFieldError: Generic category with no mapping in strict mode.
        """
        mapped = self.mappings.get((group, category))
        if mapped is not None:
            return mapped
        if category == GENERIC_CATEGORY and self.strict:
            raise UnmappedFieldError(group=group, category=category)
        return category

    def unmapped(self, groups: Iterable[DemographicGroup]) -> tuple[tuple[str, str], ...]:
        """Reference (group, category) pairs that would fall back to verbatim.

        Args:
            groups: Reference groups to check.

        Returns:
            Unmapped pairs in input order.
        """
        return tuple(
            (g.group, category)
            for g in groups
            for category in g.categories
            if not self.is_mapped(g.group, category)
        )

    def check(self, groups: Iterable[DemographicGroup]) -> None:
        """Fail if any reference pair is unmapped.

        Raises:
            UnmappedFieldError: For the first unmapped pair.
        """
        missing = self.unmapped(groups)
        if missing:
            group, category = missing[0]
            raise UnmappedFieldError(group=group, category=category)
