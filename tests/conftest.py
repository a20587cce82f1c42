"""Shared fixtures: synthetic winters built in memory."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import Any

import pytest

from winter_weather.analysis.dashboard import WinterArchive
from winter_weather.datasources.archive.models import DailyRecord, WinterDataset

WinterFactory = Callable[..., WinterDataset]


def make_winter(
    start_year: int,
    days: dict[date, dict[str, float | None]],
    label: str | None = None,
) -> WinterDataset:
    """Build a WinterDataset from ``{date: {metric_key: value}}`` in dict order."""
    records = tuple(DailyRecord(date=d, values=values) for d, values in days.items())
    label = label or f"{start_year}-{(start_year + 1) % 100:02d}"
    return WinterDataset(label=label, start_year=start_year, records=records)


@pytest.fixture
def winter_factory() -> WinterFactory:
    return make_winter


@pytest.fixture
def gap_winter() -> WinterDataset:
    """Dec 1 = 10.0, no Dec 2 record, Dec 3 = 12.0."""
    return make_winter(
        2024,
        {
            date(2024, 12, 1): {"temperature_2m_mean": 10.0},
            date(2024, 12, 3): {"temperature_2m_mean": 12.0},
        },
    )


@pytest.fixture
def two_winter_archive() -> WinterArchive:
    """Two full winters with simple, predictable values."""
    winters = []
    for year, base in ((2023, 10.0), (2024, 20.0)):
        days: dict[date, dict[str, Any]] = {}
        for offset in range(62):
            d = date.fromordinal(date(year, 12, 1).toordinal() + offset)
            days[d] = {
                "temperature_2m_mean": base + offset,
                "precipitation_sum": 1.0,
                "cloud_cover_mean": 50.0,
                "sunshine_duration": 7200.0,
            }
        winters.append(make_winter(year, days))
    return WinterArchive(winters=tuple(winters))
