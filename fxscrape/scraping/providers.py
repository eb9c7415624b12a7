"""Money-transfer provider homepages."""

from __future__ import annotations

from .base import PageScraper


class RemitlyScraper(PageScraper):
    name = "remitly"
    provider = "Remitly"
    url = "https://www.remitly.com"


class XEScraper(PageScraper):
    name = "xe"
    provider = "XE"
    url = "https://www.xe.com"


class WiseScraper(PageScraper):
    name = "wise"
    provider = "Wise"
    url = "https://wise.com"


PROVIDERS: tuple[type[PageScraper], ...] = (RemitlyScraper, XEScraper, WiseScraper)
