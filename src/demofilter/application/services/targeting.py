"""Call sites: alert targeting and bulk access-code assignment.

Both go through DemographicMatcher so every caller applies the same
AND/OR rule. Bulk assignment issues one independent request per
candidate; there is no transaction across the batch and a failure for
one candidate does not stop the others.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from demofilter.domain.exceptions import InvalidSelectionError
from demofilter.domain.model.option import DemographicOption

if TYPE_CHECKING:
    from demofilter.application.services.matcher import DemographicMatcher
    from demofilter.domain.model.candidate import CandidateRecord
    from demofilter.domain.ports.access_code_issuer import AccessCodeIssuerPort

logger = logging.getLogger(__name__)


def parse_alert_filter(raw: object) -> tuple[DemographicOption, ...]:
    """Read an alert's stored "filter" column.

    None or an empty list means the alert targets everyone.

    Raises:
        InvalidSelectionError: If the value is not a list of selection objects
    """
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise InvalidSelectionError(f"alert filter must be a list, got {type(raw).__name__}")
    options: list[DemographicOption] = []
    for entry in raw:
        if not isinstance(entry, Mapping):
            raise InvalidSelectionError(f"alert filter entry must be an object, got {entry!r}")
        options.append(DemographicOption.from_mapping(entry))
    return tuple(options)


def alert_applies(
    alert: Mapping[str, object],
    candidate: CandidateRecord,
    matcher: DemographicMatcher,
) -> bool:
    """Decide whether an alert is shown to a candidate.

    Args:
        alert: Alert row with an optional "filter" column.
        candidate: Profile being shown alerts.
        matcher: Matcher to apply.

    Returns:
        True if the alert has no filter or the candidate matches it.
    """
    return matcher.matches(candidate, parse_alert_filter(alert.get("filter")))


def target_alerts[A: Mapping[str, object]](
    alerts: Iterable[A],
    candidate: CandidateRecord,
    matcher: DemographicMatcher,
) -> list[A]:
    """Alerts shown to a candidate, in input order."""
    return [alert for alert in alerts if alert_applies(alert, candidate, matcher)]


@dataclass(frozen=True, slots=True)
class BulkAssignmentResult:
    """Per-candidate outcome of a bulk assignment.

    Attributes:
        assigned: candidate id -> issued code, in issue order.
        failed: candidate id -> error message, in issue order. Candidates
            with no id are keyed "#<n>" and repeated ids "<id>#<n>", n being
            the position among matching candidates.
    """

    assigned: Mapping[str, str]
    failed: Mapping[str, str]

    @property
    def attempted(self) -> int:
        """Number of candidates an issue was attempted for."""
        return len(self.assigned) + len(self.failed)

    @property
    def complete(self) -> bool:
        """True if no issue failed."""
        return not self.failed


def assign_access_codes(
    candidates: Iterable[CandidateRecord],
    selections: Sequence[DemographicOption],
    matcher: DemographicMatcher,
    issuer: AccessCodeIssuerPort,
    *,
    id_field: str = "id",
) -> BulkAssignmentResult:
    """Issue an access code to every candidate matching the selections.

    Args:
        candidates: Profiles still without an access code.
        selections: Demographic selections; empty = all candidates.
        matcher: Matcher to apply.
        issuer: Issues one code per call.
        id_field: Candidate field holding its id.

    Returns:
        Which candidates got codes and which failed. Every matching
        candidate lands in exactly one of the two.
    """
    assigned: dict[str, str] = {}
    failed: dict[str, str] = {}

    for index, candidate in enumerate(matcher.filter(candidates, selections)):
        raw_id = candidate.get(id_field)
        if raw_id is None:
            key = f"#{index}"
            logger.warning("Candidate %s has no '%s' field; skipped", key, id_field)
            failed[key] = f"missing '{id_field}' field"
            continue
        candidate_id = str(raw_id)
        if candidate_id in assigned or candidate_id in failed:
            key = f"{candidate_id}#{index}"
            logger.warning("Candidate %s repeats id %s; skipped", key, candidate_id)
            failed[key] = f"duplicate id '{candidate_id}'"
            continue
        try:
            assigned[candidate_id] = issuer.issue(candidate_id)
        except Exception as e:
            logger.warning("Failed to assign access code to %s: %s", candidate_id, e)
            failed[candidate_id] = str(e) or type(e).__name__

    logger.info("Assigned %d access codes, %d failed", len(assigned), len(failed))
    return BulkAssignmentResult(assigned=assigned, failed=failed)
