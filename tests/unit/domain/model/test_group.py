"""Tests for domain/model/group.py."""

import pytest

from demofilter.domain.model.group import DemographicGroup


class TestDemographicGroup:
    """Tests for DemographicGroup normalization."""

    def test_values_sorted_and_deduplicated(self) -> None:
        options = {"options": ["25-34", "18-24", "18-24"]}
        group = DemographicGroup(group="age_group", options=options)
        assert group.values_for("options") == ("18-24", "25-34")

    def test_values_stringified(self) -> None:
        options = {"options": [3, 1, "2"]}
        group = DemographicGroup(group="income", options=options)  # type: ignore[arg-type]
        assert group.values_for("options") == ("1", "2", "3")

    def test_categories_keep_order(self) -> None:
        group = DemographicGroup(group="location", options={"state": ["TX"], "region": ["South"]})
        assert group.categories == ("state", "region")

    def test_unknown_category_is_empty(self) -> None:
        group = DemographicGroup(group="gender", options={"options": ["Male"]})
        assert group.values_for("missing") == ()

    def test_options_read_only(self) -> None:
        group = DemographicGroup(group="gender", options={"options": ["Male"]})
        with pytest.raises(TypeError):
            group.options["extra"] = ("x",)  # type: ignore[index]

    def test_empty_group_raises(self) -> None:
        with pytest.raises(ValueError, match="group"):
            DemographicGroup(group="", options={})
