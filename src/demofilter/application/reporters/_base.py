"""Base reporter class for output formatting.

Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from demofilter.domain.model.match_result import MatchResult


class BaseReporter(ABC):
    """Base class for match reporters.

    demofilter provides PlainTextReporter, JSONReporter and ConsoleReporter.

    Example:
        class CountReporter(BaseReporter):
            def report(self, result: MatchResult) -> None:
                print(f"{result.matched_count}/{result.candidate_count}")
    """

    @abstractmethod
    def report(self, result: MatchResult) -> None:
        """Report a match result.

        Implementation decides output format and destination.

        Args:
            result: Applied selections and passing candidates
        """
