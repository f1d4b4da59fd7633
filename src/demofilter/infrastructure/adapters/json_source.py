"""JSON file group source adapter."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from demofilter.domain.ports.group_source import GroupSourcePort


@dataclass(frozen=True, slots=True)
class JsonFileGroupSource(GroupSourcePort):
    """Reads reference rows from a JSON file.

    The file holds either a list of rows (any data source name)
    or an object mapping data source name -> list of rows.

    Attributes:
        path: JSON file path
    """

    path: Path

    def fetch_rows(self, data_source: str) -> Sequence[Mapping[str, object]]:
        """Load rows with non-null options.

        Raises:
            OSError: If the file cannot be read
            ValueError: If the file is not valid JSON or has no such data source
        """
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if isinstance(data, dict):
            if data_source not in data:
                raise ValueError(f"{self.path}: no data source '{data_source}'")
            data = data[data_source]
        if not isinstance(data, list):
            raise ValueError(f"{self.path}: expected a list of rows")
        return [
            row for row in data if isinstance(row, dict) and row.get("demo_options") is not None
        ]
