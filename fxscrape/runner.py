"""Resolve a scraper selection and run it one scraper at a time."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import logging

from .config import ALL_SCRAPERS
from .errors import ScraperFailedError, ScraperNotFoundError
from .scraping.base import Scraper

logger = logging.getLogger(__name__)


@dataclass
class RunReport:
    """Names that completed, in the order they ran."""

    completed: list[str] = field(default_factory=list)


def resolve_plan(directive: str, registry: Mapping[str, Scraper]) -> list[str]:
    """Turn a selection directive into an ordered list of scraper names.

    ``"*"`` (or a blank directive) selects every registered scraper in registry
    order. Anything else is split on commas and trimmed; duplicates and unknown
    names are kept so they surface when the plan runs.
    """
    if not directive.strip() or directive.strip() == ALL_SCRAPERS:
        return list(registry)
    return [piece.strip() for piece in directive.split(",")]


async def run_plan(plan: list[str], registry: Mapping[str, Scraper]) -> RunReport:
    """Await each scraper in ``plan`` in turn, stopping at the first failure."""
    report = RunReport()
    for name in plan:
        scraper = registry.get(name)
        if scraper is None:
            raise ScraperNotFoundError(name)
        try:
            await scraper.run()
        except Exception as exc:
            raise ScraperFailedError(name, str(exc)) from exc
        report.completed.append(name)
    return report


async def run_selected(directive: str, registry: Mapping[str, Scraper]) -> RunReport:
    logger.info("Environment variable SCRAPERS: %s", directive)
    plan = resolve_plan(directive, registry)
    if directive.strip() in ("", ALL_SCRAPERS):
        logger.info("Running all scrapers...")
    else:
        logger.info("Running selected scrapers: %s", ", ".join(plan))
    report = await run_plan(plan, registry)
    logger.info("All scrapers completed successfully!")
    return report
