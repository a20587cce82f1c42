"""Align every winter's daily values on the shared day index.

Produces one point per day offset, each carrying a value (or None) for every
winter, which is the shape a multi-line chart wants.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from winter_weather.analysis.day_index import day_offset, day_range
from winter_weather.schemas import MonthFilter

if TYPE_CHECKING:
    from winter_weather.analysis.metrics import MetricDefinition
    from winter_weather.datasources.archive.models import DailyRecord, WinterDataset

LabelFormatter = Callable[[int], str]


def english_day_label(offset: int) -> str:
    """Default offset label: ``Dec 1`` .. ``Dec 31``, ``Jan 1`` .. ``Jan 31``."""
    return f"Dec {offset + 1}" if offset < 31 else f"Jan {offset - 30}"


@dataclass(frozen=True)
class AlignedPoint:
    """One x-axis position with a value per winter label."""

    offset: int
    label: str
    values: dict[str, float | None] = field(default_factory=dict)


@dataclass(frozen=True)
class AlignedSeries:
    """A metric's points across the active offset range."""

    metric_key: str
    winter_labels: tuple[str, ...]
    points: tuple[AlignedPoint, ...]

    def values_for(self, winter_label: str) -> list[float | None]:
        """One winter's values in offset order."""
        return [point.values.get(winter_label) for point in self.points]

    @property
    def offsets(self) -> list[int]:
        return [point.offset for point in self.points]


def index_by_offset(winter: WinterDataset) -> dict[int, DailyRecord]:
    """Map day offset -> record. If two records share an offset, the first wins."""
    index: dict[int, DailyRecord] = {}
    for record in winter.records:
        index.setdefault(day_offset(record.date, winter.start_year), record)
    return index


def align_series(
    metric: MetricDefinition,
    winters: Iterable[WinterDataset],
    month_filter: MonthFilter = MonthFilter.BOTH,
    label_for: LabelFormatter = english_day_label,
) -> AlignedSeries:
    """
    Build the aligned series for one metric.

    For each offset in the month filter's range and each winter, look up the
    record for that day, take the metric's value and convert it to display
    units. Days without a record, or with a null value, become None.

    Args:
        metric: Which variable to extract, and its unit transform.
        winters: Winters to align, in legend order.
        month_filter: Restricts the offsets to December, January, or both.
        label_for: Formats an offset as an axis label (locale strategy).

    Returns:
        AlignedSeries with one point per offset in the active range.
    """
    winters = tuple(winters)
    indexes = [(winter.label, index_by_offset(winter)) for winter in winters]

    points = []
    for offset in day_range(month_filter):
        values: dict[str, float | None] = {}
        for label, index in indexes:
            record = index.get(offset)
            raw = record.value(metric.key) if record is not None else None
            values[label] = metric.apply(raw)
        points.append(AlignedPoint(offset=offset, label=label_for(offset), values=values))

    return AlignedSeries(
        metric_key=metric.key,
        winter_labels=tuple(label for label, _ in indexes),
        points=tuple(points),
    )
