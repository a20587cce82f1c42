"""Winter dataset models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import date


@dataclass(frozen=True)
class DailyRecord:
    """One calendar day of measurements.

    ``values`` maps an Open-Meteo daily variable (e.g. ``precipitation_sum``)
    to its value; ``None`` means the measurement is absent.
    """

    date: date
    values: Mapping[str, float | None] = field(default_factory=dict)

    def value(self, key: str) -> float | None:
        """Raw value for a variable, or None when absent or not recorded."""
        return self.values.get(key)


@dataclass(frozen=True)
class WinterDataset:
    """One winter season: Dec 1 of ``start_year`` through Jan 31 of the next year."""

    label: str  # e.g. "2024-25"
    start_year: int  # calendar year of the December
    records: tuple[DailyRecord, ...] = ()

    @property
    def end_year(self) -> int:
        """Calendar year of the January."""
        return self.start_year + 1
