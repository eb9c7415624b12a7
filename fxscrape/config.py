"""Application configuration helpers."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ALL_SCRAPERS = "*"


class Settings(BaseSettings):
    """Typed configuration loaded from environment variables."""

    scrapers: str = Field(default=ALL_SCRAPERS, validation_alias=AliasChoices("SCRAPERS", "scrapers"))
    pacing_seconds: float = Field(default=20.0, ge=0)
    request_timeout: float = Field(default=30.0, gt=0)
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="SCRAPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def get_settings(**overrides) -> Settings:
    """Return a fresh settings instance, applying any non-None overrides."""
    values = {key: value for key, value in overrides.items() if value is not None}
    return Settings(**values)
