"""Application settings loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# libs/core/settings.py -> project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    """Runtime settings for the application."""

    # Translation files (<namespace>_<locale>.properties)
    locales_dir: Path = Field(default=PROJECT_ROOT / "locales")
    default_locale: str = Field(default="en_US")
    strings_namespace: str = Field(default="lolomo")
    # Upper bound for the concurrent existence checks, in seconds
    resolve_timeout: float = Field(default=2.0, gt=0)
    cache_translations: bool = Field(default=True)
    # answer existence checks from a cached directory listing
    cache_listing: bool = Field(default=False)

    catalog_path: Path = Field(default=PROJECT_ROOT / "data" / "lolomo.json")

    environment: str = Field(default="development")
    service_name: str = Field(default="lolomo")
    log_level: str = Field(default="INFO")
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Return application settings instance."""
    return Settings()


__all__ = ["Settings", "get_settings", "PROJECT_ROOT"]
