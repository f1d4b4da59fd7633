"""Plain text reporter using print()."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from demofilter.application.compiler import AND, OR, format_label, group_selections
from demofilter.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from demofilter.domain.model.match_result import MatchResult


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, result: MatchResult) -> None:
        """Report applied filters and match counts as plain text.

        Args:
            result: Match result
        """
        self._write("=" * 70)
        self._write("Demographic Filter Results")
        self._write("=" * 70)
        self._write()
        self._report_filters(result)
        self._write()
        self._write(f"Matched: {result.matched_count} of {result.candidate_count}")
        for candidate_id in result.matched_ids:
            self._write(f"  {candidate_id}")

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)

    def _report_filters(self, result: MatchResult) -> None:
        """Print applied filters, one group per block."""
        if result.unfiltered:
            self._write("Applied filters: none (all candidates match)")
            return

        self._write("Applied filters:")
        for i, (group, categories) in enumerate(group_selections(result.selections).items()):
            if i > 0:
                self._write(AND)
            self._write(f"{group}:")
            for j, (category, values) in enumerate(categories.items()):
                prefix = f"{AND} " if j > 0 else ""
                self._write(f"  {prefix}{format_label(category)}: {f' {OR} '.join(values)}")
