"""Command-line entry point: print the analytics report for an export file.

Usage:
    club-analytics ./costco-export.json
    club-analytics ./costco-export.json --top 10 --quiet
    python -m club_analytics ./costco-export.json --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys

from club_analytics.analytics.api import PurchaseAnalytics
from club_analytics.config import AnalyticsConfig
from club_analytics.exceptions import ClubAnalyticsError
from club_analytics.formatters.console import format_report_for_console, sanitize_for_console

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="club-analytics",
        description="Summarize a warehouse club purchase-history export.",
    )
    parser.add_argument("export", help="Path to the receipt export JSON file.")
    parser.add_argument(
        "--top",
        type=int,
        default=None,
        help="Number of products in the ranking (default: CLUB_ANALYTICS_TOP_PRODUCTS or 20).",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--quiet", action="store_true", help="Only log warnings and errors.")
    verbosity.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.quiet:
        level = logging.WARNING
    elif args.verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        config = AnalyticsConfig.from_env()
        analytics = PurchaseAnalytics.from_file(args.export, config=config)
        report = analytics.build_report(top_products_limit=args.top)
    except (FileNotFoundError, ClubAnalyticsError, ValueError) as e:
        logger.error("Failed to build report: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(sanitize_for_console(format_report_for_console(report)))
    return 0
