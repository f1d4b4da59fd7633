"""Reference row coercion: raw rows -> DemographicGroup.

Payload shapes accepted for "demo_options":
- JSON string: parsed, then handled as below
- list: every item goes into the generic "options" category (none when empty)
- object: one category per key; list values extended, truthy scalars added
Anything else is skipped, never raised.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping

from demofilter.domain.model.group import DemographicGroup
from demofilter.infrastructure.field_map import GENERIC_CATEGORY

logger = logging.getLogger(__name__)


def load_groups(rows: Iterable[Mapping[str, object]]) -> tuple[DemographicGroup, ...]:
    """Convert raw reference rows to groups, in row order.

    Args:
        rows: Rows with "demo" and "demo_options" keys.

    Returns:
        One group per usable row.
    """
    groups: list[DemographicGroup] = []
    for row in rows:
        group = _load_row(row)
        if group is not None:
            groups.append(group)
    return tuple(groups)


def _load_row(row: Mapping[str, object]) -> DemographicGroup | None:
    name = row.get("demo")
    payload = row.get("demo_options")
    if not name or payload is None:
        return None

    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError:
            logger.debug("Skipping %s: demo_options is not valid JSON", name)
            return None

    options = _coerce_options(payload)
    if options is None:
        logger.debug("Skipping %s: unsupported demo_options type %s", name, type(payload).__name__)
        return None
    return DemographicGroup(group=str(name), options=options)


def _coerce_options(payload: object) -> dict[str, list[str]] | None:
    if isinstance(payload, list):
        return {GENERIC_CATEGORY: [str(v) for v in payload]} if payload else {}

    if isinstance(payload, Mapping):
        options: dict[str, list[str]] = {}
        for category, values in payload.items():
            bucket = options.setdefault(str(category), [])
            if isinstance(values, list):
                bucket.extend(str(v) for v in values)
            elif values:
                bucket.append(str(values))
        return options

    return None
