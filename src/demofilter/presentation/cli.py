"""Command line interface.

Usage:
    demofilter groups --source rows.json
    demofilter summary --selections selections.json
    demofilter match --selections selections.json --candidates profiles.json [--format json]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from demofilter import __version__
from demofilter.application.compiler import describe, format_label
from demofilter.application.reporters.console import ConsoleConfig, ConsoleReporter
from demofilter.application.reporters.json_reporter import JSONReporter
from demofilter.application.reporters.plain_text import PlainTextReporter
from demofilter.application.selection_store import SelectionStore
from demofilter.application.services.group_service import DemographicGroupService
from demofilter.application.services.matcher import DemographicMatcher
from demofilter.domain.exceptions import DemoFilterError, InvalidSelectionError
from demofilter.domain.model.config import FilterConfig
from demofilter.domain.model.option import DemographicOption
from demofilter.domain.model.toggle import ToggleOutcome
from demofilter.infrastructure.adapters.json_source import JsonFileGroupSource

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def _read_json_list(path: Path, what: str) -> list[object]:
    """Read a JSON file holding a list.

    Raises:
        InvalidSelectionError: If the file does not hold a list
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise InvalidSelectionError(f"{path}: {what} file must hold a JSON list")
    return data


def load_selections(path: Path, max_selections: int | None = None) -> SelectionStore:
    """Load stored selections into a store, toggling each in order.

    Repeated entries are kept once. Entries beyond the cap are logged and dropped.
    """
    store = SelectionStore(max_selections=max_selections)
    for entry in _read_json_list(path, "selections"):
        if not isinstance(entry, dict):
            raise InvalidSelectionError(f"{path}: selection must be an object, got {entry!r}")
        option = DemographicOption.from_mapping(entry)
        if option in store.selections:
            continue
        outcome = store.toggle(option.category, option.value, option.group)
        if outcome is ToggleOutcome.REJECTED_AT_CAP:
            logger.warning("Dropped %s: selection cap of %d reached", option, max_selections)
    return store


def _cmd_groups(args: argparse.Namespace, console: Console) -> int:
    config = FilterConfig(data_source=args.data_source)
    service = DemographicGroupService(JsonFileGroupSource(args.source), config)
    groups = service.fetch_groups()

    table = Table(title=f"Demographic groups ({config.data_source})")
    table.add_column("Group", style="bold")
    table.add_column("Category", style="cyan")
    table.add_column("Values")
    for group in groups:
        for i, category in enumerate(group.categories):
            table.add_row(
                escape(group.group) if i == 0 else "",
                escape(format_label(category)),
                escape(", ".join(group.values_for(category))),
            )
    console.print(table)
    return 0


def _cmd_summary(args: argparse.Namespace, console: Console) -> int:
    store = load_selections(args.selections, args.max_selections)
    summary = describe(store.selections)
    console.print(escape(summary) if summary else "[dim]No filters applied.[/dim]")
    return 0


def _cmd_match(args: argparse.Namespace, console: Console) -> int:
    config = FilterConfig(
        max_selections=args.max_selections,
        strict_field_mapping=args.strict,
    )
    store = load_selections(args.selections, config.max_selections)
    candidates = [c for c in _read_json_list(args.candidates, "candidates") if isinstance(c, dict)]

    matcher = DemographicMatcher.from_config(config)
    result = matcher.run(candidates, store.selections, id_field=args.id_field)

    match args.format:
        case "json":
            JSONReporter(sys.stdout).report(result)
        case "text":
            PlainTextReporter(sys.stdout).report(result)
        case _:
            console_config = ConsoleConfig(color=console.is_terminal, width=console.width)
            sys.stdout.write(ConsoleReporter(console_config).report(result))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="demofilter",
        description="Match participant records against demographic filters",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    groups = sub.add_parser("groups", help="List available demographic options")
    groups.add_argument("--source", type=Path, required=True, help="JSON file of reference rows")
    groups.add_argument("--data-source", default="demo_prelim", help="Data source name in the file")
    groups.set_defaults(handler=_cmd_groups)

    summary = sub.add_parser("summary", help="Describe applied filters")
    summary.add_argument("--selections", type=Path, required=True, help="JSON file of selections")
    summary.add_argument("--max-selections", type=int, default=None, help="Selection cap")
    summary.set_defaults(handler=_cmd_summary)

    match = sub.add_parser("match", help="Filter candidate records")
    match.add_argument("--selections", type=Path, required=True, help="JSON file of selections")
    match.add_argument(
        "--candidates", type=Path, required=True, help="JSON file of candidate records"
    )
    match.add_argument("--id-field", default="id", help="Candidate id field (default: id)")
    match.add_argument("--max-selections", type=int, default=None, help="Selection cap")
    match.add_argument("--strict", action="store_true", help="Fail on unmapped option categories")
    match.add_argument(
        "--format", choices=("rich", "text", "json"), default="rich", help="Output format"
    )
    match.set_defaults(handler=_cmd_match)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        Process exit code: 0 on success, 1 on library or input errors.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    console = Console()
    try:
        return args.handler(args, console)
    except (DemoFilterError, OSError, json.JSONDecodeError) as e:
        Console(stderr=True).print(f"[bold red]error:[/bold red] {escape(str(e))}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
