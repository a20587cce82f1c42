"""What the presentation layer asks of the analysis core.

``WinterArchive`` bundles the loaded winters, the metric catalogue and the
location into one immutable value. It is built once at startup and passed
in explicitly, so the core has no module-level data and can be tested with
synthetic winters.
"""

from __future__ import annotations

from dataclasses import dataclass

from winter_weather.analysis.alignment import (
    AlignedSeries,
    LabelFormatter,
    align_series,
    english_day_label,
)
from winter_weather.analysis.metrics import METRICS, MetricDefinition, get_metric
from winter_weather.analysis.smoothing import DEFAULT_WINDOW, moving_average
from winter_weather.analysis.summary import SummaryRow, build_summary_rows
from winter_weather.datasources.archive.models import WinterDataset  # noqa: TC001
from winter_weather.schemas import MonthFilter


@dataclass(frozen=True)
class WinterArchive:
    """All input data for the dashboard."""

    winters: tuple[WinterDataset, ...]
    metrics: tuple[MetricDefinition, ...] = METRICS
    location_name: str = "Porto"
    lat: float = 41.15
    lon: float = -8.61
    source: str = "Synthetic sample data (Open-Meteo archive schema)"

    @property
    def winter_labels(self) -> tuple[str, ...]:
        return tuple(w.label for w in self.winters)

    def metric(self, key: str) -> MetricDefinition:
        """Look up one of this archive's metrics by key."""
        return get_metric(key, self.metrics)


def series_for_metric(
    archive: WinterArchive,
    metric_key: str,
    month_filter: MonthFilter = MonthFilter.BOTH,
    *,
    smooth: bool = False,
    window: int = DEFAULT_WINDOW,
    label_for: LabelFormatter = english_day_label,
) -> AlignedSeries:
    """Chart data for one metric under the given filter and smoothing state."""
    series = align_series(archive.metric(metric_key), archive.winters, month_filter, label_for)
    if smooth:
        series = moving_average(series, window)
    return series


def summary_rows(archive: WinterArchive) -> list[SummaryRow]:
    """Summary rows for every winter and metric in the archive."""
    return build_summary_rows(archive.winters, archive.metrics)
