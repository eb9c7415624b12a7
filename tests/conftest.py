"""Shared fixtures for fx-scrape tests."""

import pytest

from fxscrape.scraping.base import Registry, Scraper


class FakeScraper(Scraper):
    """Scraper stand-in that records when it runs and optionally fails."""

    def __init__(self, name, events, error=None):
        self.name = name
        self.events = events
        self.error = error

    async def run(self):
        self.events.append(f"start:{self.name}")
        if self.error is not None:
            self.events.append(f"fail:{self.name}")
            raise self.error
        self.events.append(f"done:{self.name}")


@pytest.fixture
def events():
    return []


@pytest.fixture
def make_registry(events):
    """Build a registry from ``name -> error`` pairs; ``None`` means succeed."""

    def _make(**entries):
        return Registry(FakeScraper(name, events, error) for name, error in entries.items())

    return _make


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("SCRAPERS", "SCRAPER_PACING_SECONDS", "SCRAPER_REQUEST_TIMEOUT", "SCRAPER_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
