"""Errors raised by the scraper runner."""

from __future__ import annotations


class RunnerError(Exception):
    """Base class for failures that abort a run."""


class ScraperNotFoundError(RunnerError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Scraper '{name}' not found")


class ScraperFailedError(RunnerError):
    def __init__(self, name: str, message: str):
        self.name = name
        self.message = message
        super().__init__(f"Failed to run {name}: {message}")
