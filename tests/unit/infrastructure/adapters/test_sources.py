"""Tests for group source adapters."""

import json
from pathlib import Path

import pytest

from demofilter.infrastructure.adapters.json_source import JsonFileGroupSource
from demofilter.infrastructure.adapters.memory_source import InMemoryGroupSource
from tests.factories import make_rows


class TestInMemoryGroupSource:
    """Tests for InMemoryGroupSource."""

    def test_filters_null_options_and_counts(self) -> None:
        rows = [*make_rows(), {"demo": "x", "demo_options": None}]
        source = InMemoryGroupSource(tables={"demo_prelim": rows})
        rows = source.fetch_rows("demo_prelim")
        assert len(rows) == 3
        assert source.fetch_count == 1

    def test_unknown_source_raises(self) -> None:
        with pytest.raises(KeyError):
            InMemoryGroupSource().fetch_rows("missing")


class TestJsonFileGroupSource:
    """Tests for JsonFileGroupSource."""

    def test_list_file(self, tmp_path: Path) -> None:
        path = tmp_path / "rows.json"
        path.write_text(json.dumps(make_rows()), encoding="utf-8")
        assert len(JsonFileGroupSource(path).fetch_rows("anything")) == 3

    def test_keyed_file(self, tmp_path: Path) -> None:
        path = tmp_path / "rows.json"
        path.write_text(json.dumps({"demo_prelim": make_rows(), "other": []}), encoding="utf-8")
        source = JsonFileGroupSource(path)
        assert len(source.fetch_rows("demo_prelim")) == 3
        assert source.fetch_rows("other") == []

    def test_missing_data_source_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "rows.json"
        path.write_text(json.dumps({"other": []}), encoding="utf-8")
        with pytest.raises(ValueError, match="no data source"):
            JsonFileGroupSource(path).fetch_rows("demo_prelim")

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            JsonFileGroupSource(tmp_path / "nope.json").fetch_rows("demo_prelim")
