"""Monthly means per winter and metric, for the summary table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from winter_weather.analysis.day_index import day_offset, is_december

if TYPE_CHECKING:
    from collections.abc import Iterable

    from winter_weather.analysis.metrics import MetricDefinition
    from winter_weather.datasources.archive.models import WinterDataset


@dataclass(frozen=True)
class SummaryRow:
    """December, January and overall means for one (winter, metric) pair.

    A mean is None when its subset has no non-null values.
    """

    winter: str
    metric_key: str
    dec: float | None
    jan: float | None
    overall: float | None
    dec_count: int = 0
    jan_count: int = 0

    @property
    def overall_count(self) -> int:
        return self.dec_count + self.jan_count

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dict."""
        return {
            "winter": self.winter,
            "metric": self.metric_key,
            "dec": self.dec,
            "jan": self.jan,
            "overall": self.overall,
            "dec_count": self.dec_count,
            "jan_count": self.jan_count,
        }


def mean_or_none(values: list[float]) -> float | None:
    """Arithmetic mean, or None for an empty list."""
    if not values:
        return None
    return sum(values) / len(values)


def summarize_winter(winter: WinterDataset, metric: MetricDefinition) -> SummaryRow:
    """
    Average one metric over a winter's December, January and whole season.

    Records with an offset below 31 count as December, everything else as
    January. Values are converted to display units before averaging and
    nulls are skipped.
    """
    dec: list[float] = []
    jan: list[float] = []
    for record in winter.records:
        value = metric.apply(record.value(metric.key))
        if value is None:
            continue
        if is_december(day_offset(record.date, winter.start_year)):
            dec.append(value)
        else:
            jan.append(value)

    return SummaryRow(
        winter=winter.label,
        metric_key=metric.key,
        dec=mean_or_none(dec),
        jan=mean_or_none(jan),
        overall=mean_or_none(dec + jan),
        dec_count=len(dec),
        jan_count=len(jan),
    )


def build_summary_rows(
    winters: Iterable[WinterDataset],
    metrics: Iterable[MetricDefinition],
) -> list[SummaryRow]:
    """Summary rows for every winter and metric, grouped by winter."""
    metrics = tuple(metrics)
    return [summarize_winter(winter, metric) for winter in winters for metric in metrics]
