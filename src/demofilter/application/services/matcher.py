"""Demographic matcher: decides whether a candidate satisfies the selections.

Evaluation rule over the grouped selections:
    every group        AND
    every category     AND   (within a group)
    any value          OR    (within a category)

A category resolves to a candidate field through the FieldMap. A candidate
with no value for that field fails the category. Fields listed as exact
match compare by equality; all others by case-insensitive containment in
either direction.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from demofilter.application.compiler import group_selections
from demofilter.domain.model.candidate import candidate_value
from demofilter.domain.model.config import DEFAULT_EXACT_MATCH_FIELDS
from demofilter.domain.model.match_result import MatchResult
from demofilter.infrastructure.field_map import FieldMap
from demofilter.infrastructure.filters import all_of, any_of, field_equals, field_overlaps

if TYPE_CHECKING:
    from demofilter.domain.model.candidate import CandidateRecord
    from demofilter.domain.model.config import FilterConfig
    from demofilter.domain.model.option import DemographicOption
    from demofilter.infrastructure.filters import CandidateFilter

logger = logging.getLogger(__name__)


def _match_all(candidate: CandidateRecord) -> bool:
    return True


def _value_filter(field_name: str, values: Sequence[str], *, exact: bool) -> CandidateFilter:
    """One category: any selected value passes (OR)."""
    make = field_equals if exact else field_overlaps
    return any_of(*(make(field_name, value) for value in values))


@dataclass(frozen=True, slots=True)
class CategoryCheck:
    """Outcome of one category against one candidate.

    Attributes:
        group: Demographic group.
        category: Category within the group.
        field: Candidate field the category resolved to.
        wanted: Selected values (OR).
        actual: Candidate value, None if missing.
        exact: True if compared by equality.
        matched: Category satisfied.
    """

    group: str
    category: str
    field: str
    wanted: tuple[str, ...]
    actual: str | None
    exact: bool
    matched: bool


class DemographicMatcher:
    """Stateless evaluator of selections against candidate records.

    Holds only resolution settings; selections are passed per call.
    """

    def __init__(
        self,
        field_map: FieldMap | None = None,
        exact_match_fields: frozenset[str] = DEFAULT_EXACT_MATCH_FIELDS,
    ) -> None:
        """Initialize matcher.

        Args:
            field_map: Category -> field resolution. Defaults to FieldMap().
            exact_match_fields: Fields compared by exact equality.
        """
        self._field_map = field_map if field_map is not None else FieldMap()
        self._exact_match_fields = frozenset(exact_match_fields)

    @classmethod
    def from_config(cls, config: FilterConfig) -> DemographicMatcher:
        """Build matcher from configuration."""
        return cls(
            field_map=FieldMap.from_config(config),
            exact_match_fields=config.exact_match_fields,
        )

    @property
    def field_map(self) -> FieldMap:
        """Field resolution table in use."""
        return self._field_map

    def is_exact(self, category: str, field_name: str) -> bool:
        """True if the category compares by exact equality."""
        return category in self._exact_match_fields or field_name in self._exact_match_fields

    def resolve(self, group: str, category: str) -> str:
        """Resolve a category to a candidate field, warning on fallback.

        Raises:
            UnmappedFieldError: Unmapped generic category in strict mode.
        """
        field_name = self._field_map.resolve(group, category)
        if not self._field_map.is_mapped(group, category):
            logger.warning(
                "No field mapping for group %r category %r; using %r verbatim",
                group,
                category,
                field_name,
            )
        return field_name

    def compile(self, selections: Iterable[DemographicOption]) -> CandidateFilter:
        """Compile selections into one candidate filter.

        Args:
            selections: Flat selection list.

        Returns:
            Filter; matches everything when there are no selections.

        Raises:
            UnmappedFieldError: Unmapped generic category in strict mode.
        """
        grouped = group_selections(selections)
        if not grouped:
            return _match_all

        group_filters: list[CandidateFilter] = []
        for group, categories in grouped.items():
            category_filters: list[CandidateFilter] = []
            for category, values in categories.items():
                field_name = self.resolve(group, category)
                exact = self.is_exact(category, field_name)
                category_filters.append(_value_filter(field_name, values, exact=exact))
            group_filters.append(all_of(*category_filters))
        return all_of(*group_filters)

    def matches(
        self,
        candidate: CandidateRecord,
        selections: Iterable[DemographicOption],
    ) -> bool:
        """Check one candidate against the selections.

        Args:
            candidate: Record to test.
            selections: Flat selection list.

        Returns:
            True if every group is satisfied (always True when empty).
        """
        return self.compile(selections)(candidate)

    def filter[C: CandidateRecord](
        self,
        candidates: Iterable[C],
        selections: Iterable[DemographicOption],
    ) -> list[C]:
        """Keep candidates that match, preserving their order.

        Args:
            candidates: Records to test.
            selections: Flat selection list.

        Returns:
            Matching candidates in input order.
        """
        selections = tuple(selections)
        flt = self.compile(selections)
        pool = list(candidates)
        kept = [c for c in pool if flt(c)]
        if selections:
            logger.info("Filtered %d of %d candidates", len(kept), len(pool))
        return kept

    def run(
        self,
        candidates: Iterable[CandidateRecord],
        selections: Iterable[DemographicOption],
        *,
        id_field: str = "id",
    ) -> MatchResult:
        """Filter candidates and summarize the outcome for reporting.

        Args:
            candidates: Records to test.
            selections: Flat selection list.
            id_field: Candidate field holding its id.

        Returns:
            MatchResult with ids of passing candidates in input order.
        """
        selections = tuple(selections)
        pool = list(candidates)
        kept = self.filter(pool, selections)
        return MatchResult(
            selections=selections,
            candidate_count=len(pool),
            matched_ids=tuple(str(c.get(id_field, "")) for c in kept),
        )

    def explain(
        self,
        candidate: CandidateRecord,
        selections: Iterable[DemographicOption],
    ) -> tuple[CategoryCheck, ...]:
        """Evaluate every category separately, without short-circuiting.

        The candidate matches when all returned checks matched.

        Args:
            candidate: Record to test.
            selections: Flat selection list.

        Returns:
            One check per (group, category) bucket, in selection order.
        """
        checks: list[CategoryCheck] = []
        for group, categories in group_selections(selections).items():
            for category, values in categories.items():
                field_name = self.resolve(group, category)
                exact = self.is_exact(category, field_name)
                flt = _value_filter(field_name, values, exact=exact)
                check = CategoryCheck(
                    group=group,
                    category=category,
                    field=field_name,
                    wanted=tuple(values),
                    actual=candidate_value(candidate, field_name),
                    exact=exact,
                    matched=flt(candidate),
                )
                logger.debug(
                    "%s/%s -> %s: candidate has %r, wanted %s, matched=%s",
                    group,
                    category,
                    field_name,
                    check.actual,
                    list(values),
                    check.matched,
                )
                checks.append(check)
        return tuple(checks)
