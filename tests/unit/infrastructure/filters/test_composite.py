"""Tests for composite filters.

Tests:
- all_of: AND composition
- any_of: OR composition
"""

from demofilter.infrastructure.filters.composite import all_of, any_of
from demofilter.infrastructure.filters.value import field_equals, field_overlaps
from tests.factories import make_candidate


class TestAllOf:
    """Tests for all_of (AND) filter composition."""

    def test_all_of_all_pass(self) -> None:
        flt = all_of(field_equals("age_group", "18-24"), field_overlaps("gender", "female"))
        assert flt(make_candidate(age_group="18-24", gender="Female")) is True

    def test_all_of_one_fails(self) -> None:
        flt = all_of(field_equals("age_group", "18-24"), field_overlaps("gender", "female"))
        assert flt(make_candidate(age_group="25-34", gender="Female")) is False
        assert flt(make_candidate(age_group="18-24", gender="Non-binary")) is False

    def test_all_of_empty(self) -> None:
        """all_of with no filters passes everything."""
        assert all_of()(make_candidate()) is True

    def test_all_of_short_circuits(self) -> None:
        calls: list[str] = []

        def failing(candidate: object) -> bool:
            calls.append("first")
            return False

        def never(candidate: object) -> bool:
            calls.append("second")
            return True

        assert all_of(failing, never)(make_candidate()) is False
        assert calls == ["first"]


class TestAnyOf:
    """Tests for any_of (OR) filter composition."""

    def test_any_of_one_passes(self) -> None:
        flt = any_of(field_equals("race", "Asian"), field_equals("race", "White"))
        assert flt(make_candidate(race="White")) is True

    def test_any_of_none_pass(self) -> None:
        flt = any_of(field_equals("race", "Asian"), field_equals("race", "White"))
        assert flt(make_candidate(race="Black")) is False

    def test_any_of_empty(self) -> None:
        """any_of with no filters fails everything."""
        assert any_of()(make_candidate()) is False


class TestComposition:
    """Tests for nested compositions."""

    def test_and_of_ors(self) -> None:
        flt = all_of(
            any_of(field_equals("age_group", "18-24"), field_equals("age_group", "25-34")),
            field_overlaps("gender", "male"),
        )
        assert flt(make_candidate(age_group="25-34", gender="Male")) is True
        assert flt(make_candidate(age_group="35-44", gender="Male")) is False
