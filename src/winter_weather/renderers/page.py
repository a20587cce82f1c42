"""Full dashboard page.

The site is static, so every combination of language, month filter and
smoothing gets its own page; the header controls are links between them.
Line visibility is toggled client-side from the chart legends.
"""

from __future__ import annotations

from itertools import product
from typing import TYPE_CHECKING

from winter_weather.analysis.dashboard import series_for_metric, summary_rows
from winter_weather.analysis.smoothing import DEFAULT_WINDOW
from winter_weather.i18n import get_locale
from winter_weather.renderers import render_template
from winter_weather.renderers.charts import build_metric_chart_html
from winter_weather.renderers.summary_table import build_summary_table_html
from winter_weather.schemas import DashboardState, Language, MonthFilter

if TYPE_CHECKING:
    from collections.abc import Iterator

    from winter_weather.analysis.dashboard import WinterArchive

DEFAULT_STATE = DashboardState()


def page_name(state: DashboardState) -> str:
    """File name of the page showing a dashboard state.

    The default state is ``index.html``; others are e.g. ``ru-dec-smooth.html``.
    """
    key = (state.lang, state.month_filter, state.smooth)
    if key == (DEFAULT_STATE.lang, DEFAULT_STATE.month_filter, DEFAULT_STATE.smooth):
        return "index.html"
    suffix = "-smooth" if state.smooth else ""
    return f"{state.lang}-{state.month_filter}{suffix}.html"


def all_states() -> Iterator[DashboardState]:
    """Every page-level state: language x month filter x smoothing."""
    for lang, month_filter, smooth in product(Language, MonthFilter, (False, True)):
        yield DashboardState(lang=lang, month_filter=month_filter, smooth=smooth)


def _controls(state: DashboardState, window: int = DEFAULT_WINDOW) -> dict[str, object]:
    """Header links: each control points at the page for the changed state."""
    t = get_locale(state.lang)
    return {
        "languages": [
            {
                "label": lang.value.upper(),
                "href": page_name(state.model_copy(update={"lang": lang})),
                "active": lang == state.lang,
            }
            for lang in Language
        ],
        "smooth": {
            "label": t.smooth_label(window),
            "href": page_name(state.model_copy(update={"smooth": not state.smooth})),
            "active": state.smooth,
        },
        "months": [
            {
                "label": label,
                "href": page_name(state.model_copy(update={"month_filter": month_filter})),
                "active": month_filter == state.month_filter,
            }
            for month_filter, label in (
                (MonthFilter.DEC, t.dec),
                (MonthFilter.BOTH, t.both),
                (MonthFilter.JAN, t.jan),
            )
        ],
    }


def build_dashboard_html(
    archive: WinterArchive,
    state: DashboardState = DEFAULT_STATE,
    *,
    window: int = DEFAULT_WINDOW,
    updated: str = "",
) -> str:
    """Render the complete page for one dashboard state."""
    locale = get_locale(state.lang)

    charts = [
        build_metric_chart_html(
            series_for_metric(
                archive,
                metric.key,
                state.month_filter,
                smooth=state.smooth,
                window=window,
                label_for=locale.day_label,
            ),
            metric,
            locale,
            state,
        )
        for metric in archive.metrics
    ]
    table = build_summary_table_html(summary_rows(archive), archive, locale, state.month_filter)

    return render_template(
        "base.html.j2",
        t=locale,
        lang=state.lang.value,
        controls=_controls(state, window),
        charts=charts,
        summary_table=table,
        updated=updated,
    )
