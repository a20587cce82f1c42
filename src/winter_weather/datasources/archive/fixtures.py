"""Load archive fixtures from the store into immutable winter datasets."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from winter_weather.datasources.archive.client import (
    WINTER_START_YEARS,
    fixture_path,
    winter_label,
)
from winter_weather.datasources.archive.models import DailyRecord, WinterDataset
from winter_weather.schemas import ArchivePayload

if TYPE_CHECKING:
    from collections.abc import Iterable

    from winter_weather.store import DataStore

logger = logging.getLogger(__name__)


def parse_winter(payload: dict[str, Any], label: str, start_year: int) -> WinterDataset:
    """
    Turn an Open-Meteo archive response into a WinterDataset.

    Args:
        payload: Archive response with a ``daily`` block of parallel arrays.
        label: Season label (e.g. ``"2024-25"``).
        start_year: Calendar year of the season's December.

    Returns:
        WinterDataset with one DailyRecord per entry in ``daily.time``,
        in file order. Nulls stay None.
    """
    daily = ArchivePayload.model_validate(payload).daily
    columns = {key: daily.column(key) for key in daily.model_extra or {}}

    records = tuple(
        DailyRecord(date=day, values={key: column[i] for key, column in columns.items()})
        for i, day in enumerate(daily.time)
    )
    return WinterDataset(label=label, start_year=start_year, records=records)


def load_winter(store: DataStore, start_year: int) -> WinterDataset:
    """Read and parse one winter's fixture from the store."""
    path = fixture_path(start_year)
    payload = store.read(path)
    if payload is None:
        msg = f"Winter fixture not found: {store.base / path}"
        raise FileNotFoundError(msg)

    winter = parse_winter(payload, winter_label(start_year), start_year)
    logger.debug("Loaded winter %s: %d daily records", winter.label, len(winter.records))
    return winter


def load_winters(
    store: DataStore,
    start_years: Iterable[int] = WINTER_START_YEARS,
) -> tuple[WinterDataset, ...]:
    """Load every winter, oldest first."""
    return tuple(load_winter(store, year) for year in sorted(start_years))
