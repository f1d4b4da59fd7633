"""Saved filter preset."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from demofilter.domain.model.option import DemographicOption


@dataclass(frozen=True, slots=True)
class FilterPreset:
    """Named, reusable selection set.

    Attributes:
        id: Unique preset identifier.
        name: Display name.
        filters: Selections in order.
        created_at: Creation time.
        description: Optional longer text.
        created_by: Optional author id.
    """

    id: str
    name: str
    filters: tuple[DemographicOption, ...]
    created_at: datetime
    description: str | None = None
    created_by: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.id:
            raise ValueError("id must not be empty")
        if not self.name:
            raise ValueError("name must not be empty")
        if len(set(self.filters)) != len(self.filters):
            raise ValueError("filters must not contain duplicate selections")
