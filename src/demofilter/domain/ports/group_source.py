"""Group source port (interface)."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence


class GroupSourcePort(ABC):
    """Port for fetching raw demographic reference rows.

    Infrastructure layer must provide implementation.
    Rows carry a "demo" group name and a "demo_options" payload.
    """

    @abstractmethod
    def fetch_rows(self, data_source: str) -> Sequence[Mapping[str, object]]:
        """Fetch raw rows with non-null options.

        Args:
            data_source: Table or collection name

        Returns:
            Raw rows, unvalidated
        """
        ...
