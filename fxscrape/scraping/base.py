"""Scraper base classes."""

from __future__ import annotations

from abc import ABC, abstractmethod
import asyncio
from collections.abc import Iterable, Iterator, Mapping
import logging
import time
from typing import Any, Awaitable, Callable, Optional

import httpx

from .. import schemas
from .parsing import parse_page_metadata

logger = logging.getLogger(__name__)


class Scraper(ABC):
    """A named operation the runner can await."""

    name: str

    @abstractmethod
    async def run(self) -> Any:
        raise NotImplementedError


class Registry(Mapping[str, Scraper]):
    """Read-only, insertion-ordered mapping of scraper name to scraper."""

    def __init__(self, scrapers: Iterable[Scraper]):
        entries: dict[str, Scraper] = {}
        for scraper in scrapers:
            if scraper.name in entries:
                raise ValueError(f"Duplicate scraper name: {scraper.name}")
            entries[scraper.name] = scraper
        self._entries = entries

    def __getitem__(self, name: str) -> Scraper:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Registry({list(self._entries)!r})"


class PageScraper(Scraper):
    """Fetch one provider page and log its title and description."""

    provider: str
    url: str

    def __init__(
        self,
        *,
        pacing_seconds: float = 20.0,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        """Initialize scraper.

        Args:
            pacing_seconds: Minimum wall time for a run; 0 disables padding.
            timeout: HTTP timeout in seconds.
            transport: Optional httpx transport, used to stub the network.
            sleep: Coroutine used for the pacing delay.
        """
        self.pacing_seconds = pacing_seconds
        self.timeout = timeout
        self.transport = transport
        self._sleep = sleep

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            transport=self.transport,
        )

    async def _pace(self, started: float) -> None:
        if self.pacing_seconds <= 0:
            return
        remaining = max(0.0, self.pacing_seconds - (time.monotonic() - started))
        if remaining > 0:
            logger.info("Processing data... (%.1fs remaining)", remaining)
            await self._sleep(remaining)

    async def run(self) -> schemas.PageSummary:
        logger.info("=== %s Scraper ===", self.provider)
        logger.info("Provider: %s", self.provider)
        logger.info("URL: %s", self.url)
        logger.info("Status: Starting scraper...")
        started = time.monotonic()
        try:
            async with self._client() as client:
                response = await client.get(self.url)
            logger.info("Status: %s %s", response.status_code, response.reason_phrase)
            logger.info("Content Length: %s bytes", len(response.text))
            response.raise_for_status()

            metadata = parse_page_metadata(response.text)
            if metadata.title:
                logger.info("Page Title: %s", metadata.title)
            else:
                logger.info("Page Title: not found")
            if metadata.description:
                logger.info("Description: %s", metadata.description)
            else:
                logger.info("Description: not found")

            await self._pace(started)
        except Exception as exc:
            logger.error("✗ Error: %s", exc)
            raise

        elapsed = time.monotonic() - started
        logger.info("✓ Scraping completed successfully in %.2fs", elapsed)
        return schemas.PageSummary(
            provider=self.provider,
            url=self.url,
            status_code=response.status_code,
            reason=response.reason_phrase,
            content_length=len(response.text),
            title=metadata.title,
            description=metadata.description,
            elapsed=elapsed,
        )
