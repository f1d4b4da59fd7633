"""Tests for domain/model/config.py."""

import pytest

from demofilter.domain.model.config import DEFAULT_FIELD_MAPPINGS, FilterConfig


class TestFilterConfigDefaults:
    """Tests for default configuration."""

    def test_defaults(self) -> None:
        config = FilterConfig()
        assert config.data_source == "demo_prelim"
        assert config.max_selections is None
        assert config.exact_match_fields == frozenset({"age_group"})
        assert config.enable_caching is True
        assert config.cache_ttl == 300.0
        assert config.enable_presets is False

    def test_default_mappings_cover_undivided_groups(self) -> None:
        assert dict(DEFAULT_FIELD_MAPPINGS) == {
            ("age_group", "options"): "age_group",
            ("gender", "options"): "gender",
            ("race", "options"): "race",
            ("education", "options"): "education",
            ("income", "options"): "income",
        }

    def test_merged_mappings_override_defaults(self) -> None:
        config = FilterConfig(
            field_mappings={
                ("gender", "options"): "gender_identity",
                ("religion", "options"): "religion",
            }
        )
        merged = config.merged_field_mappings
        assert merged[("gender", "options")] == "gender_identity"
        assert merged[("religion", "options")] == "religion"
        assert merged[("race", "options")] == "race"


class TestFilterConfigFailFirst:
    """Tests for FAIL-FIRST validation in FilterConfig."""

    def test_zero_cap_raises(self) -> None:
        with pytest.raises(ValueError, match="max_selections"):
            FilterConfig(max_selections=0)

    def test_non_positive_ttl_raises(self) -> None:
        with pytest.raises(ValueError, match="cache_ttl"):
            FilterConfig(cache_ttl=0)

    def test_empty_data_source_raises(self) -> None:
        with pytest.raises(ValueError, match="data_source"):
            FilterConfig(data_source="")
