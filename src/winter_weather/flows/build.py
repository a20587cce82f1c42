"""
Prefect flow for building the static dashboard site.

Loads the six winter fixtures, renders one page per dashboard state and
writes a JSON summary of the monthly means next to the site.

Run locally:
    python -m winter_weather.flows.build
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo

from prefect import flow, task

from winter_weather.analysis.dashboard import WinterArchive, summary_rows
from winter_weather.config import get_settings
from winter_weather.datasources.archive import SOURCE, load_winters
from winter_weather.renderers.page import all_states, build_dashboard_html, page_name
from winter_weather.store import DataStore

store = DataStore(get_settings().data_dir)

SUMMARY_PATH = Path("derived/summary.json")

logger = logging.getLogger(__name__)


def open_archive(data_store: DataStore) -> WinterArchive:
    """Load every winter fixture into an immutable archive for the configured location."""
    settings = get_settings()
    return WinterArchive(
        winters=load_winters(data_store),
        location_name=settings.location_name,
        lat=settings.lat,
        lon=settings.lon,
        source=SOURCE,
    )


# =============================================================================
# Tasks
# =============================================================================


@task(name="load-archive")
def load_archive() -> WinterArchive:
    """Load the archive from the store."""
    return open_archive(store)


@task(name="build-pages")
def build_pages(archive: WinterArchive, window: int, updated: str = "") -> dict[str, str]:
    """Render every dashboard state, keyed by page file name."""
    return {
        page_name(state): build_dashboard_html(archive, state, window=window, updated=updated)
        for state in all_states()
    }


@task(name="write-site")
def write_site(pages: dict[str, str]) -> Path:
    """Write rendered pages to the site directory."""
    site_dir = store.derived / "site"
    site_dir.mkdir(parents=True, exist_ok=True)
    for name, html in pages.items():
        with (site_dir / name).open("w", encoding="utf-8") as f:
            f.write(html)
    logger.info("Wrote %d pages to %s", len(pages), site_dir)
    return site_dir


@task(name="write-summary")
def write_summary(archive: WinterArchive) -> Path:
    """Write monthly means for every winter and metric to the derived tier."""
    return store.write(
        SUMMARY_PATH,
        [row.to_dict() for row in summary_rows(archive)],
        source="winter-weather build",
        location={"name": archive.location_name, "lat": archive.lat, "lon": archive.lon},
        data_source=archive.source,
        winters=[
            {"label": w.label, "start": f"{w.start_year}-12-01", "end": f"{w.end_year}-01-31"}
            for w in archive.winters
        ],
    )


# =============================================================================
# Flow
# =============================================================================


@flow(name="build-site", log_prints=True)
def build_all() -> dict[str, Any]:
    """
    Build the static site from the winter fixtures.

    This is the main Prefect flow that generates the dashboard.
    """
    settings = get_settings()

    print("Loading winters...")
    try:
        archive = load_archive()
    except FileNotFoundError as e:
        print(f"Missing winter fixture: {e}")
        return {"error": "no data"}
    print(f"Loaded {len(archive.winters)} winters: {', '.join(archive.winter_labels)}")

    updated = datetime.now(UTC).astimezone(ZoneInfo("Europe/Lisbon")).strftime("%Y-%m-%d %H:%M")

    print("Building pages...")
    pages = build_pages(archive, settings.smoothing_window, updated)

    print("Writing site...")
    site_dir = write_site(pages)

    print("Writing summary...")
    summary_path = write_summary(archive)

    print(f"Site built: {site_dir}")
    return {"pages": len(pages), "output": str(site_dir), "summary": str(summary_path)}


if __name__ == "__main__":
    result = build_all()
    print(f"Flow complete: {result}")
