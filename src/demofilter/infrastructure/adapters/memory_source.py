"""In-memory group source adapter."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from demofilter.domain.ports.group_source import GroupSourcePort


@dataclass
class InMemoryGroupSource(GroupSourcePort):
    """Rows held in memory, keyed by data source name.

    Counts fetches so callers can observe caching.

    Attributes:
        tables: Data source -> raw rows
        fetch_count: Number of fetch_rows() calls so far
    """

    tables: dict[str, list[Mapping[str, object]]] = field(default_factory=dict)
    fetch_count: int = 0

    def fetch_rows(self, data_source: str) -> Sequence[Mapping[str, object]]:
        """Return rows with non-null options.

        Raises:
            KeyError: If data_source is unknown
        """
        self.fetch_count += 1
        rows = self.tables[data_source]
        return [row for row in rows if row.get("demo_options") is not None]
