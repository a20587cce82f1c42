"""Pure transformations from winter datasets to chart and table data.

Dependency rule: analysis/ imports datasource *models* only.
It never reads files, renders HTML or formats numbers for display.

Modules:
  - day_index: calendar date <-> winter day offset (0 = Dec 1, 61 = Jan 31)
  - metrics: metric catalogue (key, title, unit, unit transform)
  - alignment: per-metric series aligned on day offset across winters
  - smoothing: centered moving average, absent-aware
  - summary: December / January / overall means
  - dashboard: WinterArchive and the two entry points renderers call

Adding an analysis module
-------------------------
1. Create ``analysis/{name}.py`` with pure functions over ``WinterDataset``
   or ``AlignedSeries``. No I/O, no Prefect decorators.
2. Return dataclasses renderers can consume directly.
3. Call it from ``renderers/`` or ``flows/build.py`` and add
   ``tests/test_{name}.py``.
"""

from winter_weather.analysis.alignment import AlignedPoint, AlignedSeries, align_series
from winter_weather.analysis.dashboard import WinterArchive, series_for_metric, summary_rows
from winter_weather.analysis.day_index import day_offset, day_range, offset_to_date
from winter_weather.analysis.metrics import METRICS, MetricDefinition, get_metric
from winter_weather.analysis.smoothing import moving_average
from winter_weather.analysis.summary import SummaryRow, build_summary_rows, summarize_winter

__all__ = [
    "METRICS",
    "AlignedPoint",
    "AlignedSeries",
    "MetricDefinition",
    "SummaryRow",
    "WinterArchive",
    "align_series",
    "build_summary_rows",
    "day_offset",
    "day_range",
    "get_metric",
    "moving_average",
    "offset_to_date",
    "series_for_metric",
    "summarize_winter",
    "summary_rows",
]
