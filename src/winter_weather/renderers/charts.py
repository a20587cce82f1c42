"""Metric line-chart renderer.

One inline SVG per metric with a polyline per winter on the shared
day-offset x-axis. Gaps (None values) are skipped, so a line connects
across missing days.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from winter_weather.analysis.day_index import tick_offsets
from winter_weather.renderers import render_template
from winter_weather.renderers.format_utils import format_value, winter_color
from winter_weather.schemas import DashboardState

if TYPE_CHECKING:
    from collections.abc import Callable

    from winter_weather.analysis.alignment import AlignedSeries
    from winter_weather.analysis.metrics import MetricDefinition
    from winter_weather.i18n import Locale

# SVG dimensions
SVG_WIDTH = 640
SVG_HEIGHT = 280
MARGIN_LEFT = 45
MARGIN_RIGHT = 15
MARGIN_TOP = 15
MARGIN_BOTTOM = 30


def build_metric_chart_html(
    series: AlignedSeries,
    metric: MetricDefinition,
    locale: Locale,
    state: DashboardState | None = None,
) -> str:
    """Build the chart card for one metric.

    Args:
        series: Aligned (and possibly smoothed) values for the metric.
        metric: Metric definition, for its title fallback and unit.
        locale: Strings and unit labels for the page language.
        state: Dashboard state; lines it marks hidden start hidden and
            the month filter picks the x-axis ticks.

    Returns:
        Rendered HTML fragment with an inline SVG chart and legend.
    """
    state = state or DashboardState()
    title = locale.metric_title(metric.key, metric.title)
    unit = locale.unit(metric.unit)

    all_values = [
        v for label in series.winter_labels for v in series.values_for(label) if v is not None
    ]
    if not series.points or not all_values:
        return render_template("metric_chart.html.j2", title=title, empty=True)

    offsets = series.offsets
    first, last = offsets[0], offsets[-1]
    y_ticks_values = _nice_ticks(min(all_values), max(all_values))
    y_lo, y_hi = y_ticks_values[0], y_ticks_values[-1]

    plot_right = SVG_WIDTH - MARGIN_RIGHT
    plot_bottom = SVG_HEIGHT - MARGIN_BOTTOM
    plot_width = plot_right - MARGIN_LEFT
    plot_height = plot_bottom - MARGIN_TOP

    def x_for(offset: int) -> float:
        """Convert a day offset to SVG x coordinate."""
        return MARGIN_LEFT + (offset - first) / max(last - first, 1) * plot_width

    def y_for(value: float) -> float:
        """Convert a value to SVG y coordinate (inverted)."""
        return plot_bottom - (value - y_lo) / (y_hi - y_lo) * plot_height

    y_ticks = [
        {"y": round(y_for(v), 1), "label": _tick_label(v)} for v in y_ticks_values
    ]
    x_ticks = [
        {"x": round(x_for(t), 1), "label": locale.day_label(t)}
        for t in tick_offsets(state.month_filter)
        if first <= t <= last
    ]

    lines = []
    for i, label in enumerate(series.winter_labels):
        lines.append(
            {
                "label": label,
                "color": winter_color(i),
                "hidden": state.is_hidden(metric.key, label),
                **_build_line(series, label, unit, locale, x_for, y_for),
            }
        )

    return render_template(
        "metric_chart.html.j2",
        title=title,
        empty=False,
        metric_key=metric.key,
        svg_width=SVG_WIDTH,
        svg_height=SVG_HEIGHT,
        margin_left=MARGIN_LEFT,
        margin_top=MARGIN_TOP,
        plot_right=plot_right,
        plot_bottom=plot_bottom,
        y_ticks=y_ticks,
        x_ticks=x_ticks,
        lines=lines,
    )


def _build_line(
    series: AlignedSeries,
    winter_label: str,
    unit: str,
    locale: Locale,
    x_fn: Callable[[int], float],
    y_fn: Callable[[float], float],
) -> dict[str, Any]:
    """Polyline points and hover markers for one winter."""
    points = []
    markers = []
    for point in series.points:
        value = point.values.get(winter_label)
        if value is None:
            continue
        x, y = x_fn(point.offset), y_fn(value)
        points.append(f"{x:.1f},{y:.1f}")
        markers.append(
            {
                "x": f"{x:.1f}",
                "y": f"{y:.1f}",
                "title": f"{point.label} · {winter_label}: "
                f"{format_value(value, unit, locale.missing)}",
            }
        )
    return {"points": " ".join(points), "markers": markers}


def _nice_ticks(lo: float, hi: float, count: int = 5) -> list[float]:
    """Evenly spaced round tick values covering [lo, hi]."""
    if lo == hi:
        lo, hi = lo - 1, hi + 1
    raw_step = (hi - lo) / count
    magnitude = 10 ** math.floor(math.log10(raw_step))
    step = next(m * magnitude for m in (1, 2, 2.5, 5, 10) if m * magnitude >= raw_step)

    start = math.floor(lo / step) * step
    end = math.ceil(hi / step) * step
    n = round((end - start) / step)
    return [round(start + i * step, 6) for i in range(n + 1)]


def _tick_label(value: float) -> str:
    return f"{value:.0f}" if float(value).is_integer() else f"{value:g}"
