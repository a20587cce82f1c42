"""Metric catalogue: which daily variables the dashboard charts and how.

Adding a metric
---------------
1. Make sure the variable is in every fixture's ``daily`` block
   (see ``datasources/archive/client.py``).
2. Append a ``MetricDefinition`` to ``METRICS``. If the raw unit differs
   from the display unit, pass a ``transform`` that maps None to None.
3. Add its title to each locale in ``i18n.py``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

Transform = Callable[[float | None], float | None]


def seconds_to_hours(value: float | None) -> float | None:
    """Convert a duration in seconds to hours, rounded to 2 decimals."""
    if value is None:
        return None
    return round(value / 3600, 2)


@dataclass(frozen=True)
class MetricDefinition:
    """A charted daily variable."""

    key: str  # Open-Meteo daily variable name
    title: str  # English title; locales override by key
    unit: str  # display unit
    transform: Transform | None = None

    def apply(self, value: float | None) -> float | None:
        """Convert a raw value to display units. Absent stays absent."""
        if value is None or self.transform is None:
            return value
        return self.transform(value)


METRICS: tuple[MetricDefinition, ...] = (
    MetricDefinition("temperature_2m_mean", "Mean Temperature (°C)", "°C"),
    MetricDefinition("precipitation_sum", "Daily Precipitation (mm)", "mm"),
    MetricDefinition("cloud_cover_mean", "Mean Cloud Cover (%)", "%"),
    MetricDefinition(
        "sunshine_duration",
        "Sunshine Duration (hours)",
        "h",
        transform=seconds_to_hours,
    ),
)


def get_metric(key: str, metrics: tuple[MetricDefinition, ...] = METRICS) -> MetricDefinition:
    """Look up a metric by key."""
    for metric in metrics:
        if metric.key == key:
            return metric
    known = ", ".join(m.key for m in metrics)
    msg = f"Unknown metric {key!r} (known: {known})"
    raise ValueError(msg)
