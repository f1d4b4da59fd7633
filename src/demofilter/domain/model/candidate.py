"""Candidate record: the entity tested against a filter."""

from __future__ import annotations

from collections.abc import Mapping

type CandidateRecord = Mapping[str, object]


def candidate_value(candidate: CandidateRecord, field_name: str) -> str | None:
    """Look up a field and coerce it to a string.

    None, absent and empty-string values are all reported as None,
    so callers treat them uniformly as "no value".

    Args:
        candidate: Record to read.
        field_name: Field to look up.

    Returns:
        String form of the value, or None if it has no usable value.
    """
    raw = candidate.get(field_name)
    if raw is None:
        return None
    value = raw if isinstance(raw, str) else str(raw)
    return value or None
