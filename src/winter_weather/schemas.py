"""
Domain schemas for winter weather.

Pydantic models for the Open-Meteo archive fixture shape and for the
dashboard's presentation state. The analysis core works on the frozen
dataclasses in ``datasources/archive/models.py``; these models sit at the
edges (parsing input, describing what a page shows).
"""

from __future__ import annotations

from datetime import date
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

# =============================================================================
# Dashboard state
# =============================================================================


class MonthFilter(StrEnum):
    """Which part of the Dec 1 - Jan 31 window is shown."""

    DEC = "dec"
    JAN = "jan"
    BOTH = "both"


class Language(StrEnum):
    """Supported UI languages."""

    EN = "en"
    RU = "ru"


class DashboardState(BaseModel):
    """Everything the presentation layer varies between renders.

    ``hidden`` holds ``(metric_key, winter_label)`` pairs whose chart line is
    switched off. The analysis core ignores it and always computes every line.
    """

    model_config = ConfigDict(frozen=True)

    lang: Language = Language.EN
    month_filter: MonthFilter = MonthFilter.BOTH
    smooth: bool = False
    hidden: frozenset[tuple[str, str]] = Field(default_factory=frozenset)

    def is_hidden(self, metric_key: str, winter_label: str) -> bool:
        """Whether a winter's line is hidden on a metric's chart."""
        return (metric_key, winter_label) in self.hidden

    def toggle_line(self, metric_key: str, winter_label: str) -> DashboardState:
        """Return a new state with one line's visibility flipped."""
        pair = (metric_key, winter_label)
        hidden = self.hidden - {pair} if pair in self.hidden else self.hidden | {pair}
        return self.model_copy(update={"hidden": frozenset(hidden)})


# =============================================================================
# Open-Meteo archive response
# =============================================================================


class ArchiveDaily(BaseModel):
    """The ``daily`` block: a ``time`` column plus one column per variable.

    Variable columns are kept as extra fields so any Open-Meteo daily
    variable can be carried without declaring it here.
    """

    model_config = ConfigDict(extra="allow")

    __pydantic_extra__: dict[str, list[float | None]]

    time: list[date]

    @model_validator(mode="after")
    def _columns_match_time(self) -> ArchiveDaily:
        for key, column in (self.model_extra or {}).items():
            if len(column) != len(self.time):
                msg = f"Column {key!r} has {len(column)} values but time has {len(self.time)}"
                raise ValueError(msg)
        return self

    def column(self, key: str) -> list[float | None]:
        """Values for a daily variable; all-absent when the column is missing."""
        extra = self.model_extra or {}
        if key not in extra:
            return [None] * len(self.time)
        return list(extra[key])


class ArchivePayload(BaseModel):
    """An Open-Meteo archive API response (only the fields we read)."""

    latitude: float | None = None
    longitude: float | None = None
    timezone: str | None = None
    daily_units: dict[str, str] = Field(default_factory=dict)
    daily: ArchiveDaily
