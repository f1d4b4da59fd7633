"""Selection store: the ordered list of user selections.

Owned by one caller session. Holds no I/O and no persistence.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from demofilter.domain.model.option import DemographicOption
from demofilter.domain.model.toggle import ToggleOutcome

logger = logging.getLogger(__name__)


class SelectionStore:
    """Ordered, duplicate-free list of DemographicOption selections.

    Duplicates are judged by the full (category, value, group) triple.
    An optional cap limits how many selections can be held.
    """

    def __init__(
        self,
        max_selections: int | None = None,
        selections: Iterable[DemographicOption] = (),
    ) -> None:
        """Initialize store.

        Args:
            max_selections: Cap on selection count. None = unlimited.
            selections: Initial selections (duplicates dropped).

        Raises:
            ValueError: If max_selections < 1
        """
        if max_selections is not None and max_selections < 1:
            raise ValueError(f"max_selections must be >= 1, got {max_selections}")
        self._max_selections = max_selections
        self._selections: list[DemographicOption] = []
        self.replace(selections)

    def toggle(self, category: str, value: str, group: str) -> ToggleOutcome:
        """Remove the triple if selected, otherwise append it.

        Args:
            category: Category within the group.
            value: Selected value.
            group: Demographic group name.

        Returns:
            REMOVED or ADDED, or REJECTED_AT_CAP when adding would
            exceed the cap (list left untouched).
        """
        option = DemographicOption(category=category, value=value, group=group)
        if option in self._selections:
            self._selections.remove(option)
            logger.debug("Removed selection %s", option)
            return ToggleOutcome.REMOVED

        if self.at_cap:
            logger.info(
                "Selection %s rejected: cap of %d reached", option, self._max_selections
            )
            return ToggleOutcome.REJECTED_AT_CAP

        self._selections.append(option)
        logger.debug("Added selection %s", option)
        return ToggleOutcome.ADDED

    def clear(self) -> None:
        """Remove all selections."""
        self._selections.clear()

    def replace(self, selections: Iterable[DemographicOption]) -> None:
        """Replace all selections, keeping first occurrence of each triple.

        The cap is not applied here; a caller restoring a saved list
        decides how to handle one that is too long.
        """
        seen: set[DemographicOption] = set()
        kept: list[DemographicOption] = []
        for option in selections:
            if option not in seen:
                seen.add(option)
                kept.append(option)
        self._selections = kept

    def is_selected(self, category: str, value: str) -> bool:
        """True if any group has this category/value selected.

        Group-agnostic: a value selected under one group also reports
        as selected when checked while rendering another group.
        """
        return any(o.category == category and o.value == value for o in self._selections)

    def count_for_category(self, category: str) -> int:
        """Number of selections with this category, across all groups."""
        return sum(1 for o in self._selections if o.category == category)

    @property
    def selections(self) -> tuple[DemographicOption, ...]:
        """Current selections in order."""
        return tuple(self._selections)

    @property
    def max_selections(self) -> int | None:
        """Configured cap, None if unlimited."""
        return self._max_selections

    @property
    def at_cap(self) -> bool:
        """True if no further selection can be added."""
        return self._max_selections is not None and len(self._selections) >= self._max_selections

    def __len__(self) -> int:
        return len(self._selections)

    def __iter__(self) -> Iterator[DemographicOption]:
        return iter(tuple(self._selections))

    def __bool__(self) -> bool:
        return bool(self._selections)
