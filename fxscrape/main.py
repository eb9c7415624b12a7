"""Command line entry point for fx-scrape.

Reads the scraper selection from ``SCRAPERS`` (or ``--scrapers``), runs the
selected scrapers in order and exits non-zero on the first failure.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Optional

from .config import get_settings
from .errors import RunnerError
from .runner import run_selected
from .scraping import build_registry

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stdout)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run named provider scrapers sequentially"
    )
    parser.add_argument(
        "--scrapers",
        help="Comma-separated scraper names, or '*' for all (overrides SCRAPERS)",
    )
    parser.add_argument(
        "--pacing", type=float, help="Minimum seconds per scraper; 0 disables padding"
    )
    parser.add_argument("--log-level", help="Logging level (e.g. DEBUG, INFO)")
    parser.add_argument(
        "--list", action="store_true", help="List registered scrapers and exit"
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    settings = get_settings(
        scrapers=args.scrapers,
        pacing_seconds=args.pacing,
        log_level=args.log_level,
    )
    configure_logging(settings.log_level)
    registry = build_registry(settings)

    if args.list:
        for name in registry:
            print(name)
        return 0

    try:
        asyncio.run(run_selected(settings.scrapers, registry))
    except RunnerError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
