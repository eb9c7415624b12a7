"""HTML helpers for pulling page metadata."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup


@dataclass
class PageMetadata:
    title: Optional[str]
    description: Optional[str]


def _clean_text(text: Optional[str]) -> Optional[str]:
    if not text:
        return None
    text = re.sub(r"\s+", " ", text.strip())
    return text or None


def _meta_content(soup: BeautifulSoup, **attrs) -> Optional[str]:
    for key, value in attrs.items():
        pattern = re.compile(f"^{re.escape(value)}$", re.I)
        node = soup.find("meta", attrs={key: pattern})
        if node and node.get("content"):
            return _clean_text(node["content"])
    return None


def parse_page_metadata(html: str) -> PageMetadata:
    """Extract the document title and meta description.

    The description falls back to ``og:description`` when the page has no
    plain ``<meta name="description">`` tag. Either field is ``None`` when
    absent or empty.
    """
    soup = BeautifulSoup(html, "lxml")
    title_node = soup.find("title")
    title = _clean_text(title_node.get_text()) if title_node else None
    description = _meta_content(soup, name="description") or _meta_content(
        soup, property="og:description"
    )
    return PageMetadata(title=title, description=description)
