"""Result of applying selections to a candidate pool."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from demofilter.domain.model.option import DemographicOption


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Selections applied and which candidates passed.

    Attributes:
        selections: Selections applied, in order.
        candidate_count: Number of candidates tested.
        matched_ids: Ids of passing candidates, in input order.
    """

    selections: tuple[DemographicOption, ...]
    candidate_count: int
    matched_ids: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.candidate_count < 0:
            raise ValueError(f"candidate_count must be >= 0, got {self.candidate_count}")
        if len(self.matched_ids) > self.candidate_count:
            raise ValueError(
                f"matched_ids ({len(self.matched_ids)}) exceeds"
                f" candidate_count ({self.candidate_count})"
            )

    @property
    def matched_count(self) -> int:
        """Number of passing candidates."""
        return len(self.matched_ids)

    @property
    def unfiltered(self) -> bool:
        """True if no selections were applied (everyone passes)."""
        return not self.selections
