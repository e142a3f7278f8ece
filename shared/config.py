"""
Shared configuration management for SurahKit.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "https://cdn.jsdelivr.net/npm/@mdkva/surahkit/data"


class SurahKitConfig(BaseSettings):
    """Configuration with defaults matching the public dataset CDN."""

    model_config = SettingsConfigDict(
        env_prefix="SURAHKIT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")

    # Data source
    base_url: str = Field(default=DEFAULT_BASE_URL)
    file_extension: str = Field(default=".json")
    request_timeout: float = Field(default=10.0, gt=0)


def get_config(**overrides) -> SurahKitConfig:
    """Get a fresh configuration, with optional explicit overrides."""
    return SurahKitConfig(**overrides)
