"""Sequential runner for named provider page scrapers."""

__version__ = "1.0.0"
