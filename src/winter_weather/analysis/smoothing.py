"""Centered moving average over an aligned series."""

from __future__ import annotations

from winter_weather.analysis.alignment import AlignedPoint, AlignedSeries

DEFAULT_WINDOW = 7


def moving_average(series: AlignedSeries, window: int = DEFAULT_WINDOW) -> AlignedSeries:
    """
    Smooth each winter's line with a centered moving average.

    Each output value is the mean of the non-None values within ``window // 2``
    points on either side. Near the ends the window is truncated (fewer
    samples, no wraparound). If every value in the window is None the output
    is None. Winters are smoothed independently; offsets and labels are kept.

    Smoothing an already smoothed series widens the effective window.

    Args:
        series: Aligned series to smooth.
        window: Window length in points; a positive odd number.

    Raises:
        ValueError: If ``window`` is not a positive odd integer.
    """
    if window < 1 or window % 2 == 0:
        msg = f"Smoothing window must be a positive odd number, got {window}"
        raise ValueError(msg)

    half = window // 2
    columns = {label: series.values_for(label) for label in series.winter_labels}
    n = len(series.points)

    smoothed = []
    for i, point in enumerate(series.points):
        lo, hi = max(0, i - half), min(n, i + half + 1)
        values: dict[str, float | None] = {}
        for label, column in columns.items():
            present = [v for v in column[lo:hi] if v is not None]
            values[label] = sum(present) / len(present) if present else None
        smoothed.append(AlignedPoint(offset=point.offset, label=point.label, values=values))

    return AlignedSeries(
        metric_key=series.metric_key,
        winter_labels=series.winter_labels,
        points=tuple(smoothed),
    )
