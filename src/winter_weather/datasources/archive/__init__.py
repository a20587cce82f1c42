"""Open-Meteo archive data source.

Six winters of daily weather, shipped as static fixtures (no network).

Public API:
  - models: DailyRecord, WinterDataset
  - fixtures: parse_winter, load_winter, load_winters
  - client: fixture locations, daily variables, season labels
"""

from winter_weather.datasources.archive.client import (
    DAILY_VARS,
    SOURCE,
    WINTER_START_YEARS,
    fixture_path,
    winter_label,
)
from winter_weather.datasources.archive.fixtures import load_winter, load_winters, parse_winter
from winter_weather.datasources.archive.models import DailyRecord, WinterDataset

__all__ = [
    "DAILY_VARS",
    "SOURCE",
    "WINTER_START_YEARS",
    "DailyRecord",
    "WinterDataset",
    "fixture_path",
    "load_winter",
    "load_winters",
    "parse_winter",
    "winter_label",
]
