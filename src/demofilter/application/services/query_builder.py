"""Query restriction builder.

Turns selections into SQL-style conditions for a data store that
filters rows itself. Same AND/OR shape and field resolution as the
in-memory matcher, but always exact membership (``= ANY``).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from demofilter.application.compiler import AND, group_selections
from demofilter.infrastructure.field_map import FieldMap

if TYPE_CHECKING:
    from demofilter.domain.model.option import DemographicOption


@dataclass(frozen=True, slots=True)
class QueryRestriction:
    """Conditions and bound parameters for a filtered query.

    Attributes:
        filters: Selections the restriction was built from.
        sql_conditions: One parenthesized condition per group (ANDed).
        query_params: Parameter name -> list of accepted values.
    """

    filters: tuple[DemographicOption, ...]
    sql_conditions: tuple[str, ...]
    query_params: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze parameters."""
        object.__setattr__(self, "query_params", MappingProxyType(dict(self.query_params)))

    @property
    def is_empty(self) -> bool:
        """True if nothing restricts the query."""
        return not self.sql_conditions

    def where_clause(self) -> str:
        """All conditions joined with AND, empty string if unrestricted."""
        return f" {AND} ".join(self.sql_conditions)


def build_query(
    selections: Iterable[DemographicOption],
    field_map: FieldMap | None = None,
) -> QueryRestriction:
    """Build a query restriction from selections.

    Parameter names are "<field>_<n>" with n counting from 1 across the
    whole restriction, so output is deterministic for a given input.

    Args:
        selections: Flat selection list.
        field_map: Category -> column resolution. Defaults to FieldMap().

    Returns:
        Restriction with one condition per group.

    Raises:
        UnmappedFieldError: Unmapped generic category in strict mode.
    """
    field_map = field_map if field_map is not None else FieldMap()
    selections = tuple(selections)

    conditions: list[str] = []
    params: dict[str, tuple[str, ...]] = {}
    counter = 0

    for group, categories in group_selections(selections).items():
        category_conditions: list[str] = []
        for category, values in categories.items():
            column = field_map.resolve(group, category)
            counter += 1
            param = f"{column}_{counter}"
            category_conditions.append(f"{column} = ANY(:{param})")
            params[param] = tuple(values)
        conditions.append(f"({f' {AND} '.join(category_conditions)})")

    return QueryRestriction(
        filters=selections,
        sql_conditions=tuple(conditions),
        query_params=params,
    )
