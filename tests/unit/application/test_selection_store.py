"""Tests for application/selection_store.py."""

import logging

import pytest

from demofilter.application.selection_store import SelectionStore
from demofilter.domain.model.toggle import ToggleOutcome
from tests.factories import age, gender, make_option


class TestToggle:
    """Tests for SelectionStore.toggle."""

    def test_add(self) -> None:
        store = SelectionStore()
        assert store.toggle("options", "18-24", "age_group") is ToggleOutcome.ADDED
        assert store.selections == (age("18-24"),)

    def test_remove(self) -> None:
        store = SelectionStore(selections=[age("18-24")])
        assert store.toggle("options", "18-24", "age_group") is ToggleOutcome.REMOVED
        assert store.selections == ()

    def test_toggle_twice_restores_list(self) -> None:
        store = SelectionStore(selections=[age("18-24"), gender("Female"), age("25-34")])
        before = store.selections
        store.toggle("options", "Male", "gender")
        store.toggle("options", "Male", "gender")
        assert store.selections == before

    def test_removing_middle_keeps_order(self) -> None:
        store = SelectionStore(selections=[age("18-24"), gender("Female"), age("25-34")])
        store.toggle("options", "Female", "gender")
        assert store.selections == (age("18-24"), age("25-34"))

    def test_same_value_other_group_is_distinct(self) -> None:
        store = SelectionStore(selections=[make_option("Other", group="gender")])
        assert store.toggle("options", "Other", "race") is ToggleOutcome.ADDED
        assert len(store) == 2


class TestCap:
    """Tests for the selection cap."""

    def test_third_add_rejected(self) -> None:
        store = SelectionStore(max_selections=2)
        store.toggle("options", "18-24", "age_group")
        store.toggle("options", "Female", "gender")
        before = store.selections

        outcome = store.toggle("options", "25-34", "age_group")

        assert outcome is ToggleOutcome.REJECTED_AT_CAP
        assert outcome.changed is False
        assert store.selections == before

    def test_remove_allowed_at_cap(self) -> None:
        store = SelectionStore(max_selections=1, selections=[age("18-24")])
        assert store.at_cap
        assert store.toggle("options", "18-24", "age_group") is ToggleOutcome.REMOVED
        assert not store.at_cap

    def test_rejection_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        store = SelectionStore(max_selections=1, selections=[age("18-24")])
        with caplog.at_level(logging.INFO, logger="demofilter.application.selection_store"):
            store.toggle("options", "Male", "gender")
        assert "cap of 1 reached" in caplog.text

    def test_invalid_cap_raises(self) -> None:
        with pytest.raises(ValueError, match="max_selections"):
            SelectionStore(max_selections=0)


class TestQueries:
    """Tests for read-only queries."""

    def test_is_selected_is_group_agnostic(self) -> None:
        store = SelectionStore(selections=[make_option("Other", group="gender")])
        assert store.is_selected("options", "Other") is True
        assert store.is_selected("options", "Female") is False

    def test_count_for_category_spans_groups(self) -> None:
        store = SelectionStore(
            selections=[
                age("18-24"),
                gender("Male"),
                make_option("TX", group="location", category="state"),
            ]
        )
        assert store.count_for_category("options") == 2
        assert store.count_for_category("state") == 1
        assert store.count_for_category("region") == 0

    def test_clear(self) -> None:
        store = SelectionStore(selections=[age("18-24"), gender("Male")])
        store.clear()
        assert not store
        assert len(store) == 0


class TestReplace:
    """Tests for SelectionStore.replace."""

    def test_drops_repeated_triples(self) -> None:
        store = SelectionStore()
        store.replace([age("18-24"), gender("Male"), age("18-24")])
        assert store.selections == (age("18-24"), gender("Male"))

    def test_iteration_is_snapshot(self) -> None:
        store = SelectionStore(selections=[age("18-24"), gender("Male")])
        for option in store:
            store.toggle(option.category, option.value, option.group)
        assert len(store) == 0
