"""Monthly averages table renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from winter_weather.renderers import render_template
from winter_weather.renderers.format_utils import format_value, winter_color
from winter_weather.schemas import MonthFilter

if TYPE_CHECKING:
    from winter_weather.analysis.dashboard import WinterArchive
    from winter_weather.analysis.summary import SummaryRow
    from winter_weather.i18n import Locale


def visible_columns(month_filter: MonthFilter) -> dict[str, bool]:
    """Which mean columns the table shows under a month filter."""
    month_filter = MonthFilter(month_filter)
    return {
        "dec": month_filter != MonthFilter.JAN,
        "jan": month_filter != MonthFilter.DEC,
        "overall": month_filter == MonthFilter.BOTH,
    }


def build_summary_table_html(
    rows: list[SummaryRow],
    archive: WinterArchive,
    locale: Locale,
    month_filter: MonthFilter = MonthFilter.BOTH,
) -> str:
    """Build the summary table: one row per (winter, metric), grouped by winter."""
    if not rows:
        return "<p>No summary data available.</p>"

    colors = {label: winter_color(i) for i, label in enumerate(archive.winter_labels)}

    table_rows = []
    previous_winter = None
    for row in rows:
        metric = archive.metric(row.metric_key)
        unit = locale.unit(metric.unit)
        first_of_winter = row.winter != previous_winter
        previous_winter = row.winter
        table_rows.append(
            {
                "winter": row.winter if first_of_winter else "",
                "group_start": first_of_winter and len(table_rows) > 0,
                "color": colors.get(row.winter, "#e5e7eb"),
                "metric": locale.metric_title(metric.key, metric.title),
                "dec": format_value(row.dec, unit, locale.missing),
                "jan": format_value(row.jan, unit, locale.missing),
                "overall": format_value(row.overall, unit, locale.missing),
            }
        )

    return render_template(
        "summary_table.html.j2",
        t=locale,
        columns=visible_columns(month_filter),
        rows=table_rows,
    )
