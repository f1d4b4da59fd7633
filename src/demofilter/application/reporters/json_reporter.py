"""JSON reporter for machine-readable output."""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from demofilter.application.compiler import describe, group_selections
from demofilter.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from demofilter.domain.model.match_result import MatchResult


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Filters are written in their stored shape ({category, value, demo}).
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: MatchResult) -> None:
        """Report match result as JSON.

        Args:
            result: Match result
        """
        json.dump(self._result_to_dict(result), self._output, indent=self._indent)
        self._output.write("\n")

    def _result_to_dict(self, result: MatchResult) -> dict[str, object]:
        """Convert MatchResult to JSON-serializable dict."""
        return {
            "filters": [option.to_dict() for option in result.selections],
            "grouped": group_selections(result.selections),
            "summary": describe(result.selections),
            "candidate_count": result.candidate_count,
            "matched_count": result.matched_count,
            "matched_ids": list(result.matched_ids),
        }
