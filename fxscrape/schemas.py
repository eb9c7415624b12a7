"""Pydantic schemas for scraper results."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class PageSummary(BaseModel):
    provider: str
    url: str
    status_code: int
    reason: str
    content_length: int
    title: Optional[str] = None
    description: Optional[str] = None
    elapsed: float = 0.0
