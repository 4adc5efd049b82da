"""
Command-line interface for the tracker client.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from invasive_tracker import __version__
from invasive_tracker.analysis import (
    habitat_distribution,
    monthly_reports,
    threat_level_distribution,
    verification_distribution,
)
from invasive_tracker.api import TrackerAPI
from invasive_tracker.config import get_settings
from invasive_tracker.errors import TrackerError


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="invasive-tracker",
        description="Query the invasive species tables and summarize sighting reports",
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
    subparsers.add_parser("stats", help="Print dashboard counts and distributions")

    search_parser = subparsers.add_parser("search", help="Search species by free text")
    search_parser.add_argument("query", type=str, help="Text to search for")

    return parser


def configure_logging(debug: bool = False) -> None:
    level = "DEBUG" if debug else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2))


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Base URL: {settings.base_url}")
    return 0


def cmd_stats(_args: argparse.Namespace) -> int:
    """Handle the 'stats' command."""
    try:
        stats = TrackerAPI().get_species_stats()
    except TrackerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    _print_json(
        {
            "total_species": stats.total_species,
            "active_reports": stats.active_reports,
            "total_reports": stats.total_reports,
            "monitoring_sites": stats.monitoring_sites,
            "contributors": stats.contributors,
            "threat_levels": threat_level_distribution(stats.species),
            "habitats": habitat_distribution(stats.reports),
            "verification": verification_distribution(stats.reports),
            "monthly_reports": monthly_reports(stats.reports),
        }
    )
    return 0


def cmd_search(args: argparse.Namespace) -> int:
    """Handle the 'search' command."""
    try:
        result = TrackerAPI().species.search(args.query)
    except TrackerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    _print_json(result.data)
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.debug)

    commands = {
        "info": cmd_info,
        "stats": cmd_stats,
        "search": cmd_search,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
