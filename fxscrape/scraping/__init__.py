"""Scraper registry."""

from __future__ import annotations

from ..config import Settings
from .base import PageScraper, Registry, Scraper
from .providers import PROVIDERS


def build_registry(settings: Settings) -> Registry:
    """Instantiate every provider scraper with the configured pacing and timeout."""
    return Registry(
        provider(pacing_seconds=settings.pacing_seconds, timeout=settings.request_timeout)
        for provider in PROVIDERS
    )


__all__ = ["PageScraper", "Registry", "Scraper", "build_registry"]
