"""Outcome of a selection toggle."""

from enum import Enum


class ToggleOutcome(Enum):
    """What a toggle did to the selection list."""

    ADDED = "added"
    REMOVED = "removed"
    REJECTED_AT_CAP = "rejected_at_cap"  # list unchanged, cap reached

    @property
    def changed(self) -> bool:
        """True if the selection list was modified."""
        return self is not ToggleOutcome.REJECTED_AT_CAP
