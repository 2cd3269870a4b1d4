"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application environment
    env: Literal["dev", "test", "staging", "prod"] = "dev"

    # Logging
    log_level: str = "INFO"

    # ASQ-3 cutoff table. When no file is configured the built-in table is used.
    asq_cutoff_table_file: str | None = None
    asq_cutoff_tables_dir: Path | None = None  # Defaults to /cutoff_tables

    # Half-width of the administration window around an interval, in days
    asq_age_window_days: int = 15

    # Warn when an interval is scored against the flat default thresholds
    asq_warn_on_default_cutoffs: bool = True

    @property
    def is_dev(self) -> bool:
        """Check if running in development mode."""
        return self.env == "dev"

    @property
    def is_prod(self) -> bool:
        """Check if running in production mode."""
        return self.env == "prod"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
