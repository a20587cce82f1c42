"""Tests for series alignment across winters."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from winter_weather.analysis.alignment import align_series, english_day_label, index_by_offset
from winter_weather.analysis.metrics import get_metric
from winter_weather.i18n import RU
from winter_weather.schemas import MonthFilter

if TYPE_CHECKING:
    from tests.conftest import WinterFactory
    from winter_weather.datasources.archive.models import WinterDataset

TEMP = get_metric("temperature_2m_mean")
SUN = get_metric("sunshine_duration")


class TestAlignSeries:
    """Test building one metric's aligned series."""

    def test_gap_becomes_none(self, gap_winter: WinterDataset) -> None:
        """Dec 1 and Dec 3 present, Dec 2 missing -> [10.0, None, 12.0]."""
        series = align_series(TEMP, [gap_winter], MonthFilter.DEC)
        assert series.values_for("2024-25")[:3] == [10.0, None, 12.0]

    def test_missing_days_are_none_not_zero(self, gap_winter: WinterDataset) -> None:
        """Offsets with no record are None for the whole range."""
        series = align_series(TEMP, [gap_winter])
        values = series.values_for("2024-25")
        assert len(values) == 62
        assert values.count(None) == 60
        assert 0 not in values

    def test_null_value_is_none(self, winter_factory: WinterFactory) -> None:
        winter = winter_factory(2022, {date(2022, 12, 1): {"temperature_2m_mean": None}})
        series = align_series(TEMP, [winter], MonthFilter.DEC)
        assert series.points[0].values["2022-23"] is None

    def test_missing_metric_column_is_none(self, winter_factory: WinterFactory) -> None:
        winter = winter_factory(2022, {date(2022, 12, 1): {"precipitation_sum": 3.0}})
        series = align_series(TEMP, [winter], MonthFilter.DEC)
        assert series.points[0].values["2022-23"] is None

    def test_transform_applied(self, winter_factory: WinterFactory) -> None:
        """Sunshine seconds are shown in hours."""
        winter = winter_factory(
            2021,
            {
                date(2021, 12, 1): {"sunshine_duration": 3600.0},
                date(2021, 12, 2): {"sunshine_duration": None},
            },
        )
        series = align_series(SUN, [winter], MonthFilter.DEC)
        assert series.values_for("2021-22")[:2] == [1.0, None]

    def test_aligns_winters_by_offset(self, winter_factory: WinterFactory) -> None:
        """Jan 1 of different years share offset 31."""
        a = winter_factory(2020, {date(2021, 1, 1): {"temperature_2m_mean": 5.0}})
        b = winter_factory(2024, {date(2025, 1, 1): {"temperature_2m_mean": 9.0}})
        series = align_series(TEMP, [a, b], MonthFilter.JAN)
        first = series.points[0]
        assert first.offset == 31
        assert first.values == {"2020-21": 5.0, "2024-25": 9.0}
        assert series.winter_labels == ("2020-21", "2024-25")

    def test_out_of_range_records_ignored(self, winter_factory: WinterFactory) -> None:
        winter = winter_factory(
            2024,
            {
                date(2024, 11, 30): {"temperature_2m_mean": 1.0},
                date(2025, 2, 1): {"temperature_2m_mean": 2.0},
            },
        )
        series = align_series(TEMP, [winter])
        assert all(v is None for v in series.values_for("2024-25"))

    def test_records_out_of_order(self, winter_factory: WinterFactory) -> None:
        """Lookup does not depend on record order."""
        winter = winter_factory(
            2024,
            {
                date(2024, 12, 3): {"temperature_2m_mean": 3.0},
                date(2024, 12, 1): {"temperature_2m_mean": 1.0},
            },
        )
        series = align_series(TEMP, [winter], MonthFilter.DEC)
        assert series.values_for("2024-25")[:3] == [1.0, None, 3.0]


class TestMonthFilter:
    """Test the active offset range and labels."""

    def test_december_points(self, gap_winter: WinterDataset) -> None:
        series = align_series(TEMP, [gap_winter], MonthFilter.DEC)
        assert series.offsets == list(range(31))
        assert series.points[0].label == "Dec 1"
        assert series.points[-1].label == "Dec 31"

    def test_january_points(self, gap_winter: WinterDataset) -> None:
        series = align_series(TEMP, [gap_winter], MonthFilter.JAN)
        assert series.offsets == list(range(31, 62))
        assert series.points[0].label == "Jan 1"
        assert series.points[-1].label == "Jan 31"

    def test_both_points(self, gap_winter: WinterDataset) -> None:
        series = align_series(TEMP, [gap_winter])
        assert len(series.points) == 62

    def test_label_strategy_injected(self, gap_winter: WinterDataset) -> None:
        series = align_series(TEMP, [gap_winter], MonthFilter.BOTH, label_for=RU.day_label)
        assert series.points[0].label == "Дек 1"
        assert series.points[31].label == "Янв 1"


class TestIndexByOffset:
    """Test the per-winter offset index."""

    def test_first_duplicate_wins(self, winter_factory: WinterFactory) -> None:
        """Two records mapping to the same day: the first is used."""
        winter = winter_factory(
            2024,
            {
                date(2024, 12, 1): {"temperature_2m_mean": 1.0},
                date(2024, 12, 2): {"temperature_2m_mean": 2.0},
            },
        )
        # Force a duplicate by adding a record for Dec 1 after the others
        duplicate = winter_factory(
            2024,
            {date(2024, 12, 1): {"temperature_2m_mean": 99.0}},
        ).records[0]
        winter = type(winter)(winter.label, winter.start_year, (*winter.records, duplicate))

        index = index_by_offset(winter)
        assert index[0].value("temperature_2m_mean") == 1.0
        series = align_series(TEMP, [winter], MonthFilter.DEC)
        assert series.values_for("2024-25")[0] == 1.0


class TestEnglishDayLabel:
    """Test the default day label."""

    def test_labels(self) -> None:
        assert english_day_label(0) == "Dec 1"
        assert english_day_label(30) == "Dec 31"
        assert english_day_label(31) == "Jan 1"
        assert english_day_label(61) == "Jan 31"
