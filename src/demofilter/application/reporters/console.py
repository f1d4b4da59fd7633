"""Console reporter: MatchResult -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from demofilter.application.compiler import AND, OR, format_label, group_selections

if TYPE_CHECKING:
    from demofilter.domain.model.match_result import MatchResult


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_ids: List ids of matching candidates.
        max_ids: Max ids to list. None = unlimited.
        width: Console width in characters.
        color: Emit ANSI styles. False = plain text.
    """

    show_ids: bool = True
    max_ids: int | None = None
    width: int = 100
    color: bool = True


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: MatchResult) -> str:
        """Format match result as rich formatted string.

        Args:
            result: Match result to format.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        console.print()
        console.rule("[bold]DEMOGRAPHIC FILTER[/bold]")
        console.print()

        self._render_filters(console, result)
        self._render_matches(console, result)

        return output.getvalue()

    def _render_filters(self, console: Console, result: MatchResult) -> None:
        """Render applied filters as a group/category/values table."""
        if result.unfiltered:
            console.print("[dim]No filters applied: all candidates match.[/dim]")
            console.print()
            return

        table = Table(title="Applied filters", show_lines=False)
        table.add_column("", style="dim")
        table.add_column("Group", style="bold")
        table.add_column("Category", style="cyan")
        table.add_column("Values")

        for i, (group, categories) in enumerate(group_selections(result.selections).items()):
            for j, (category, values) in enumerate(categories.items()):
                joiner = AND if i > 0 or j > 0 else ""
                table.add_row(
                    joiner,
                    escape(group) if j == 0 else "",
                    escape(format_label(category)),
                    f" [dim]{OR}[/dim] ".join(escape(v) for v in values),
                )

        console.print(table)
        console.print()

    def _render_matches(self, console: Console, result: MatchResult) -> None:
        """Render match counts and optionally ids."""
        console.print(
            f"[bold]Matched:[/bold] [green]{result.matched_count}[/green]"
            f" of {result.candidate_count}"
        )

        if not self._config.show_ids or not result.matched_ids:
            return

        ids = result.matched_ids
        if self._config.max_ids is not None:
            ids = ids[: self._config.max_ids]
        for candidate_id in ids:
            console.print(f"  {escape(candidate_id)}")
        hidden = result.matched_count - len(ids)
        if hidden:
            console.print(f"  [dim]... {hidden} more[/dim]")
        console.print()
