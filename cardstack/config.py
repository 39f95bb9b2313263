"""
Configuration settings for cardstack.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CARDSTACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Storage
    # ========================================
    data_dir: Path = Field(
        default=Path.home() / ".cardstack",
        description="Directory holding the recent files list",
    )
    max_recents: int = Field(
        default=5,
        ge=0,
        description="How many recently opened decks to remember",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: str = Field(
        default="WARNING",
        description="Log level for the stderr sink",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional file that receives DEBUG logs",
    )

    # ========================================
    # Review behaviour
    # ========================================
    seed: int | None = Field(
        default=None,
        description="Seed for the shuffle generator; unset draws OS entropy",
    )
    case_sensitive: bool = Field(
        default=True,
        description="Whether open question answers must match case exactly",
    )
    use_escape_code: bool = Field(
        default=True,
        description="Switch the terminal cursor to a blinking bar on start",
    )

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    @property
    def recents_path(self) -> Path:
        return self.data_dir / "recents.json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
