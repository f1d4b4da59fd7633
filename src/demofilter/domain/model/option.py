"""Demographic selection value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from demofilter.domain.exceptions import InvalidSelectionError

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class DemographicOption:
    """One selected value within a category of a demographic group.

    Identity is the full (category, value, group) triple: the same
    category/value under two groups are two distinct selections.

    Attributes:
        category: Sub-field within the group ("options" when undivided).
        value: Selected value (e.g. "18-24").
        group: Demographic group name (e.g. "age_group").
    """

    category: str
    value: str
    group: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in ("category", "value", "group"):
            if not isinstance(getattr(self, name), str):
                raise InvalidSelectionError(
                    f"{name} must be str, got {type(getattr(self, name)).__name__}"
                )
        if not self.category:
            raise InvalidSelectionError("category must not be empty")
        if not self.group:
            raise InvalidSelectionError("group must not be empty")

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> DemographicOption:
        """Build from a stored filter entry.

        Stored entries name the group "demo"; "group" is accepted too.

        Raises:
            InvalidSelectionError: If a key is missing.
        """
        group = data.get("group", data.get("demo"))
        category = data.get("category")
        value = data.get("value")
        if group is None or category is None or value is None:
            raise InvalidSelectionError(f"selection needs category, value and group: {dict(data)}")
        return cls(category=category, value=value, group=group)  # type: ignore[arg-type]

    def to_dict(self) -> dict[str, str]:
        """Serialize in the stored filter shape."""
        return {"category": self.category, "value": self.value, "demo": self.group}
