"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import http.server
import logging
import sys
from functools import partial

from winter_weather import __version__
from winter_weather.analysis.dashboard import summary_rows
from winter_weather.config import get_settings
from winter_weather.flows.build import build_all, open_archive
from winter_weather.i18n import get_locale
from winter_weather.renderers.format_utils import format_value
from winter_weather.renderers.summary_table import visible_columns
from winter_weather.schemas import Language, MonthFilter
from winter_weather.store import DataStore

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="winter-weather",
        description="Historical winter weather dashboard (Dec 1 - Jan 31, six winters)",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    subparsers.add_parser("build", help="Build the static site from the winter fixtures")

    summary_parser = subparsers.add_parser("summary", help="Print the monthly averages table")
    summary_parser.add_argument(
        "--lang",
        choices=[lang.value for lang in Language],
        default=None,
        help="Table language (default: default_lang from settings)",
    )
    summary_parser.add_argument(
        "--month",
        choices=[m.value for m in MonthFilter],
        default=MonthFilter.BOTH.value,
        help="Which month columns to show (default: both)",
    )

    serve_parser = subparsers.add_parser("serve", help="Serve site locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def configure_logging(debug: bool = False) -> None:
    """Set up root logging for CLI runs."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Location: {settings.location_name} ({settings.lat}, {settings.lon})")
    print(f"Data dir: {settings.data_dir}")
    print(f"Debug: {settings.debug}")
    return 0


def cmd_build(_args: argparse.Namespace) -> int:
    """Handle the 'build' command: render every dashboard page."""
    result = build_all()
    if "error" in result:
        print(f"Error: {result['error']}", file=sys.stderr)
        return 1
    print(f"Built {result['pages']} pages in {result['output']}")
    return 0


def cmd_summary(args: argparse.Namespace) -> int:
    """Handle the 'summary' command: print monthly means as a text table."""
    settings = get_settings()
    locale = get_locale(args.lang or settings.default_lang)

    try:
        archive = open_archive(DataStore(settings.data_dir))
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    columns = visible_columns(MonthFilter(args.month))
    shown = [key for key in ("dec", "jan", "overall") if columns[key]]
    column_titles = {"dec": locale.dec_avg, "jan": locale.jan_avg, "overall": locale.overall}
    headers = [locale.winter, locale.metric, *(column_titles[key] for key in shown)]

    lines = []
    for row in summary_rows(archive):
        metric = archive.metric(row.metric_key)
        fmt = partial(format_value, unit=locale.unit(metric.unit), missing=locale.missing)
        cells = [row.winter, locale.metric_title(metric.key, metric.title)]
        cells += [fmt(getattr(row, key)) for key in shown]
        lines.append(cells)

    widths = [max(len(str(c)) for c in col) for col in zip(headers, *lines, strict=False)]
    print(locale.summary_title)
    for cells in [headers, *lines]:
        print("  ".join(str(c).ljust(w) for c, w in zip(cells, widths, strict=True)).rstrip())
    logger.debug("Printed %d summary rows", len(lines))
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built site locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = settings.site_dir

    if not site_dir.exists():
        print("No site directory found. Run 'winter-weather build' first.", file=sys.stderr)
        return 1

    handler = partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    configure_logging(debug=getattr(args, "debug", False) or get_settings().debug)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "build": cmd_build,
        "summary": cmd_summary,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
