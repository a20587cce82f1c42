"""Tests for the metric catalogue."""

from __future__ import annotations

import pytest

from winter_weather.analysis.metrics import METRICS, MetricDefinition, get_metric, seconds_to_hours


class TestSecondsToHours:
    """Test the sunshine unit transform."""

    @pytest.mark.parametrize(
        ("seconds", "hours"),
        [(3600, 1.0), (5400, 1.5), (0, 0.0), (1000, 0.28), (32400.0, 9.0)],
    )
    def test_conversion(self, seconds: float, hours: float) -> None:
        assert seconds_to_hours(seconds) == hours

    def test_none_stays_none(self) -> None:
        assert seconds_to_hours(None) is None


class TestMetricDefinition:
    """Test applying a metric's transform."""

    def test_apply_without_transform(self) -> None:
        metric = MetricDefinition("precipitation_sum", "Precip", "mm")
        assert metric.apply(4.2) == 4.2
        assert metric.apply(None) is None

    def test_apply_with_transform(self) -> None:
        metric = get_metric("sunshine_duration")
        assert metric.apply(3600) == 1.0
        assert metric.apply(None) is None

    def test_transform_never_sees_none(self) -> None:
        """Absent values bypass the transform entirely."""
        calls: list[float | None] = []

        def spy(value: float | None) -> float | None:
            calls.append(value)
            return value

        metric = MetricDefinition("x", "X", "u", transform=spy)
        metric.apply(None)
        metric.apply(2.0)
        assert calls == [2.0]


class TestCatalogue:
    """Test the built-in metrics."""

    def test_four_metrics_in_order(self) -> None:
        assert [m.key for m in METRICS] == [
            "temperature_2m_mean",
            "precipitation_sum",
            "cloud_cover_mean",
            "sunshine_duration",
        ]

    def test_units(self) -> None:
        assert {m.key: m.unit for m in METRICS} == {
            "temperature_2m_mean": "°C",
            "precipitation_sum": "mm",
            "cloud_cover_mean": "%",
            "sunshine_duration": "h",
        }

    def test_get_metric_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown metric"):
            get_metric("snow_depth")
