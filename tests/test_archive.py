"""Tests for the archive data source (fixture parsing and loading)."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from winter_weather.datasources.archive import (
    DAILY_VARS,
    WINTER_START_YEARS,
    fixture_path,
    load_winter,
    load_winters,
    parse_winter,
    winter_label,
)
from winter_weather.store import DataStore

REPO_DATA = Path(__file__).resolve().parent.parent / "data"

SAMPLE_PAYLOAD = {
    "latitude": 41.15,
    "longitude": -8.61,
    "timezone": "Europe/Lisbon",
    "daily": {
        "time": ["2024-12-01", "2024-12-03"],
        "temperature_2m_mean": [10.0, 12.0],
        "sunshine_duration": [3600.0, None],
    },
}


class TestWinterLabel:
    """Test season labels and fixture paths."""

    @pytest.mark.parametrize(
        ("year", "label"), [(2020, "2020-21"), (2024, "2024-25"), (2099, "2099-00")]
    )
    def test_label(self, year: int, label: str) -> None:
        assert winter_label(year) == label

    def test_fixture_path(self) -> None:
        assert fixture_path(2024) == Path("reference/winters/2024-25.json")


class TestParseWinter:
    """Test turning a payload into a WinterDataset."""

    def test_records_in_file_order(self) -> None:
        winter = parse_winter(SAMPLE_PAYLOAD, "2024-25", 2024)
        assert winter.label == "2024-25"
        assert winter.start_year == 2024
        assert winter.end_year == 2025
        assert [r.date for r in winter.records] == [date(2024, 12, 1), date(2024, 12, 3)]

    def test_values_and_nulls(self) -> None:
        winter = parse_winter(SAMPLE_PAYLOAD, "2024-25", 2024)
        first, second = winter.records
        assert first.value("temperature_2m_mean") == 10.0
        assert first.value("sunshine_duration") == 3600.0
        assert second.value("sunshine_duration") is None
        assert second.value("cloud_cover_mean") is None

    def test_empty_daily(self) -> None:
        winter = parse_winter({"daily": {"time": []}}, "2020-21", 2020)
        assert winter.records == ()


class TestLoadWinter:
    """Test loading fixtures through the store."""

    def test_load_enveloped_fixture(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(fixture_path(2024), SAMPLE_PAYLOAD, source="synthetic")

        winter = load_winter(store, 2024)
        assert winter.label == "2024-25"
        assert len(winter.records) == 2

    def test_load_bare_fixture(self, tmp_path: Path) -> None:
        """A plain archive response without an envelope also loads."""
        import json

        path = tmp_path / fixture_path(2023)
        path.parent.mkdir(parents=True)
        payload = {"daily": {"time": ["2023-12-01"], "precipitation_sum": [4.5]}}
        path.write_text(json.dumps(payload))

        winter = load_winter(DataStore(tmp_path), 2023)
        assert winter.records[0].value("precipitation_sum") == 4.5

    def test_missing_fixture(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="2022-23"):
            load_winter(DataStore(tmp_path), 2022)

    def test_load_winters_sorted(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        for year in (2021, 2020):
            store.write(fixture_path(year), {"daily": {"time": []}}, source="test")

        winters = load_winters(store, [2021, 2020])
        assert [w.label for w in winters] == ["2020-21", "2021-22"]


class TestShippedFixtures:
    """Test the six fixtures committed under data/."""

    def test_all_winters_load(self) -> None:
        winters = load_winters(DataStore(REPO_DATA))
        assert [w.start_year for w in winters] == list(WINTER_START_YEARS)

    def test_each_covers_dec_1_to_jan_31(self) -> None:
        for winter in load_winters(DataStore(REPO_DATA)):
            assert len(winter.records) == 62
            assert winter.records[0].date == date(winter.start_year, 12, 1)
            assert winter.records[-1].date == date(winter.end_year, 1, 31)

    def test_every_variable_present(self) -> None:
        for winter in load_winters(DataStore(REPO_DATA)):
            assert set(DAILY_VARS) <= set(winter.records[0].values)

    def test_provenance_marked_synthetic(self) -> None:
        """The fixtures are labelled as sample data, not as fetched archive responses."""
        store = DataStore(REPO_DATA)
        for year in WINTER_START_YEARS:
            envelope = store.read_raw(fixture_path(year))
            assert envelope is not None
            assert envelope["meta"]["source"].startswith("synthetic")
            assert "fetched_at" not in envelope["meta"]
