"""Open-Meteo archive constants and fixture locations.

The six winters are synthetic sample data laid out exactly like an archive API
response, shipped as fixtures under the store's reference tier. Nothing here
talks to the network.

API docs: https://open-meteo.com/en/docs/historical-weather-api
"""

from __future__ import annotations

from pathlib import Path

SOURCE = "Synthetic sample data (Open-Meteo archive schema)"

# Daily variables present in every fixture
DAILY_VARS = [
    "temperature_2m_mean",
    "precipitation_sum",
    "cloud_cover_mean",
    "sunshine_duration",
]

# Start years (December) of the winters on the dashboard
WINTER_START_YEARS = (2020, 2021, 2022, 2023, 2024, 2025)

FIXTURE_DIR = Path("reference/winters")


def winter_label(start_year: int) -> str:
    """Season label for a winter, e.g. 2024 -> ``2024-25``."""
    return f"{start_year}-{(start_year + 1) % 100:02d}"


def fixture_path(start_year: int) -> Path:
    """Store-relative path of a winter's fixture file."""
    return FIXTURE_DIR / f"{winter_label(start_year)}.json"
