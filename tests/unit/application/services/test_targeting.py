"""Tests for application/services/targeting.py."""

import logging

import pytest

from demofilter.application.services.matcher import DemographicMatcher
from demofilter.application.services.targeting import (
    alert_applies,
    assign_access_codes,
    parse_alert_filter,
    target_alerts,
)
from demofilter.domain.exceptions import InvalidSelectionError
from tests.factories import FakeIssuer, age, gender, make_candidate


@pytest.fixture
def matcher() -> DemographicMatcher:
    return DemographicMatcher()


class TestParseAlertFilter:
    """Tests for reading stored alert filters."""

    def test_none_is_empty(self) -> None:
        assert parse_alert_filter(None) == ()

    def test_stored_entries(self) -> None:
        raw = [{"category": "options", "value": "18-24", "demo": "age_group"}]
        assert parse_alert_filter(raw) == (age("18-24"),)

    def test_not_a_list_raises(self) -> None:
        with pytest.raises(InvalidSelectionError, match="must be a list"):
            parse_alert_filter({"category": "options"})

    def test_bad_entry_raises(self) -> None:
        with pytest.raises(InvalidSelectionError, match="must be an object"):
            parse_alert_filter(["18-24"])


class TestAlertTargeting:
    """Alerts apply the same matcher as every other call site."""

    def test_unfiltered_alert_targets_everyone(self, matcher: DemographicMatcher) -> None:
        assert alert_applies({"message": "hi", "filter": None}, make_candidate(), matcher) is True
        assert alert_applies({"message": "hi", "filter": []}, make_candidate(), matcher) is True
        assert alert_applies({"message": "hi"}, make_candidate(), matcher) is True

    def test_filtered_alert_checks_fields(self, matcher: DemographicMatcher) -> None:
        alert = {"filter": [{"category": "options", "value": "Female", "demo": "gender"}]}
        assert alert_applies(alert, make_candidate(gender="Female"), matcher) is True
        assert alert_applies(alert, make_candidate(gender="Non-binary"), matcher) is False

    def test_target_alerts_keeps_order(self, matcher: DemographicMatcher) -> None:
        alerts = [
            {"id": 1, "filter": None},
            {"id": 2, "filter": [gender("Non-binary").to_dict()]},
            {"id": 3, "filter": [age("18-24").to_dict()]},
        ]
        shown = target_alerts(alerts, make_candidate(age_group="18-24", gender="Female"), matcher)
        assert [a["id"] for a in shown] == [1, 3]


class TestAssignAccessCodes:
    """Bulk assignment issues codes independently per candidate."""

    def test_only_matching_candidates(self, matcher: DemographicMatcher) -> None:
        issuer = FakeIssuer()
        candidates = [
            make_candidate("a", age_group="18-24"),
            make_candidate("b", age_group="25-34"),
            make_candidate("c", age_group="18-24"),
        ]
        result = assign_access_codes(candidates, [age("18-24")], matcher, issuer)

        assert dict(result.assigned) == {"a": "CODE-a", "c": "CODE-c"}
        assert result.complete
        assert issuer.issued == ["a", "c"]

    def test_failure_does_not_stop_batch(
        self, matcher: DemographicMatcher, caplog: pytest.LogCaptureFixture
    ) -> None:
        issuer = FakeIssuer(fail_for=frozenset({"b"}))
        candidates = [make_candidate("a"), make_candidate("b"), make_candidate("c")]

        with caplog.at_level(logging.WARNING):
            result = assign_access_codes(candidates, [], matcher, issuer)

        assert list(result.assigned) == ["a", "c"]
        assert dict(result.failed) == {"b": "rpc failed for b"}
        assert result.attempted == 3
        assert not result.complete
        assert "Failed to assign access code to b" in caplog.text

    def test_custom_id_field(self, matcher: DemographicMatcher) -> None:
        issuer = FakeIssuer()
        result = assign_access_codes([{"user_id": 7}], [], matcher, issuer, id_field="user_id")
        assert dict(result.assigned) == {"7": "CODE-7"}

    def test_missing_id_recorded_and_batch_continues(
        self, matcher: DemographicMatcher, caplog: pytest.LogCaptureFixture
    ) -> None:
        issuer = FakeIssuer()
        candidates = [{"id": "a"}, {"first_name": "no id"}, {"id": "c"}]

        with caplog.at_level(logging.WARNING):
            result = assign_access_codes(candidates, [], matcher, issuer)

        assert issuer.issued == ["a", "c"]
        assert list(result.assigned) == ["a", "c"]
        assert dict(result.failed) == {"#1": "missing 'id' field"}
        assert result.attempted == 3
        assert "has no 'id' field" in caplog.text

    def test_repeated_id_issued_once(self, matcher: DemographicMatcher) -> None:
        issuer = FakeIssuer()
        candidates = [make_candidate("a"), make_candidate("b"), make_candidate("a")]

        result = assign_access_codes(candidates, [], matcher, issuer)

        assert issuer.issued == ["a", "b"]
        assert dict(result.failed) == {"a#2": "duplicate id 'a'"}
        assert result.attempted == 3
