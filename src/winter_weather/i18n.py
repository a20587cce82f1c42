"""UI translations.

Each language is a ``Locale``: the page strings, metric titles, unit labels
and the day-offset label format. Renderers receive a Locale and never branch
on the language key themselves.

Adding a language
-----------------
1. Add a member to ``schemas.Language``.
2. Build a ``Locale`` below with every field filled in and register it in
   ``LOCALES``.
3. Add a case to ``tests/test_i18n.py``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from winter_weather.schemas import Language


@dataclass(frozen=True)
class Locale:
    """Strings and formatting rules for one UI language."""

    lang: Language
    title: str
    subtitle: str
    source: str
    smooth_button: str  # formatted with the smoothing window in days
    dec: str  # month abbreviation, also the December filter label
    jan: str
    both: str
    summary_title: str
    winter: str
    metric: str
    dec_avg: str
    jan_avg: str
    overall: str
    footer: str
    missing: str = "—"
    metric_titles: dict[str, str] = field(default_factory=dict)
    units: dict[str, str] = field(default_factory=dict)

    def day_label(self, offset: int) -> str:
        """Axis label for a day offset, e.g. ``Dec 1`` or ``Янв 31``."""
        if offset < 31:
            return f"{self.dec} {offset + 1}"
        return f"{self.jan} {offset - 30}"

    def metric_title(self, key: str, default: str = "") -> str:
        return self.metric_titles.get(key, default or key)

    def smooth_label(self, window: int) -> str:
        """Smoothing toggle label for a window, e.g. ``7d avg``."""
        return self.smooth_button.format(window=window)

    def unit(self, unit: str) -> str:
        """Localized unit label; unknown units are shown as-is."""
        return self.units.get(unit, unit)


EN = Locale(
    lang=Language.EN,
    title="Porto Winter Weather",
    subtitle="Daily weather · Dec 1 – Jan 31 · 2020-21 through 2025-26",
    source="41.15°N, 8.61°W · Synthetic sample data (Open-Meteo archive format)",
    smooth_button="{window}d avg",
    dec="Dec",
    jan="Jan",
    both="Both",
    summary_title="Monthly Averages Summary",
    winter="Winter",
    metric="Metric",
    dec_avg="Dec Avg",
    jan_avg="Jan Avg",
    overall="Overall",
    footer=(
        "Synthetic sample data in the Open-Meteo Historical Weather API format"
        " · Not real observations"
    ),
    metric_titles={
        "temperature_2m_mean": "Mean Temperature (°C)",
        "precipitation_sum": "Daily Precipitation (mm)",
        "cloud_cover_mean": "Mean Cloud Cover (%)",
        "sunshine_duration": "Sunshine Duration (hours)",
    },
    units={"°C": "°C", "mm": "mm", "%": "%", "h": "h"},
)

RU = Locale(
    lang=Language.RU,
    title="Зимняя погода в Порту",
    subtitle="Ежедневные данные · 1 дек – 31 янв · с 2020-21 по 2025-26",
    source="41.15°N, 8.61°W · Синтетические данные (формат архива Open-Meteo)",
    smooth_button="Ср. {window}д",
    dec="Дек",
    jan="Янв",
    both="Оба",
    summary_title="Сводка средних за месяц",
    winter="Зима",
    metric="Показатель",
    dec_avg="Ср. дек",
    jan_avg="Ср. янв",
    overall="Общее",
    footer=(
        "Синтетические данные в формате Open-Meteo Historical Weather API"
        " · Не реальные наблюдения"
    ),
    metric_titles={
        "temperature_2m_mean": "Средняя температура (°C)",
        "precipitation_sum": "Суточные осадки (мм)",
        "cloud_cover_mean": "Средняя облачность (%)",
        "sunshine_duration": "Продолжительность солнечного сияния (ч)",
    },
    units={"°C": "°C", "mm": "мм", "%": "%", "h": "ч"},
)

LOCALES: dict[Language, Locale] = {
    Language.EN: EN,
    Language.RU: RU,
}


def get_locale(lang: str) -> Locale:
    """Locale for a language key (``"en"`` or ``"ru"``)."""
    try:
        return LOCALES[Language(lang)]
    except ValueError:
        known = ", ".join(LOCALES)
        msg = f"Unsupported language {lang!r} (known: {known})"
        raise ValueError(msg) from None
