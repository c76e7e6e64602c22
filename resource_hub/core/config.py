"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# Dataset shipped with the package
DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "resources.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RESOURCE_HUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application environment
    env: Literal["dev", "test", "staging", "prod"] = "dev"

    # Logging
    log_level: str = "INFO"

    # Resource catalog (JSON or YAML list of records)
    catalog_path: Path | None = None

    # CORS (dev only)
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Default truncation for the by-tags lookup; None returns every match
    by_tags_default_limit: int | None = None

    @property
    def resolved_catalog_path(self) -> Path:
        """Return the configured catalog path or the packaged dataset."""
        return self.catalog_path or DEFAULT_CATALOG_PATH

    @property
    def is_dev(self) -> bool:
        """Check if running in development mode."""
        return self.env == "dev"

    @property
    def is_prod(self) -> bool:
        """Check if running in production mode."""
        return self.env == "prod"

    @property
    def is_test(self) -> bool:
        """Check if running in test mode."""
        return self.env == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
