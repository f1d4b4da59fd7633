"""Application services."""

from demofilter.application.services.group_service import DemographicGroupService
from demofilter.application.services.matcher import CategoryCheck, DemographicMatcher
from demofilter.application.services.query_builder import QueryRestriction, build_query
from demofilter.application.services.targeting import (
    BulkAssignmentResult,
    alert_applies,
    assign_access_codes,
    target_alerts,
)

__all__ = [
    "BulkAssignmentResult",
    "CategoryCheck",
    "DemographicGroupService",
    "DemographicMatcher",
    "QueryRestriction",
    "alert_applies",
    "assign_access_codes",
    "build_query",
    "target_alerts",
]
