"""Reference demographic group."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class DemographicGroup:
    """Available values for one demographic group.

    Values per category are normalized on construction: stringified,
    de-duplicated and sorted lexicographically.

    Attributes:
        group: Group name.
        options: Category name -> sorted distinct values.
    """

    group: str
    options: Mapping[str, tuple[str, ...]]

    def __post_init__(self) -> None:
        """Validate and normalize. FAIL-FIRST."""
        if not self.group:
            raise ValueError("group must not be empty")
        normalized = {
            category: tuple(sorted({str(v) for v in values}))
            for category, values in self.options.items()
        }
        object.__setattr__(self, "options", MappingProxyType(normalized))

    @property
    def categories(self) -> tuple[str, ...]:
        """Category names in insertion order."""
        return tuple(self.options)

    def values_for(self, category: str) -> tuple[str, ...]:
        """Available values of a category, empty if unknown."""
        return self.options.get(category, ())
