"""
Configuration settings for the wordquest scheduler.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Session Construction
    # ========================================
    session_size: int = Field(
        default=20,
        ge=1,
        description="Maximum number of words in a generated session",
    )
    cross_categories: list[str] = Field(
        default=["food", "animals", "objects", "nature", "body", "colors"],
        description="Categories visited round-robin by the cross-category strategy",
    )
    progression_swap_probability: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Chance of swapping each adjacent pair after progression ordering",
    )
    pad_ignoring_cooldown: bool = Field(
        default=True,
        description="Allow cooling-down words as a last-resort pad for an empty session",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for the session random source (None = unseeded)",
    )

    # ========================================
    # Cooldown Bounds (hours)
    # ========================================
    min_cooldown_hours: float = Field(
        default=4.0,
        gt=0,
        description="Minimum rest before a word can reappear",
    )
    max_cooldown_hours: float = Field(
        default=72.0,
        gt=0,
        description="Maximum rest for well-known or difficult words",
    )

    # ========================================
    # Files
    # ========================================
    catalog_path: Path | None = Field(
        default=None,
        description="Word catalog JSON (None = packaged sample catalog)",
    )
    history_path: Path = Field(
        default=Path.home() / ".wordquest" / "history.json",
        description="Persisted per-word history records",
    )
    progress_path: Path = Field(
        default=Path.home() / ".wordquest" / "progress.json",
        description="Persisted remembered/forgotten/excluded word sets",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level for the CLI sink",
    )
    log_file: str | None = Field(
        default=None,
        description="Optional log file path",
    )

    @field_validator("cross_categories")
    @classmethod
    def _strip_categories(cls, value: list[str]) -> list[str]:
        return [c.strip() for c in value if c.strip()]

    @model_validator(mode="after")
    def _check_cooldown_bounds(self) -> Settings:
        if self.max_cooldown_hours < self.min_cooldown_hours:
            raise ValueError("max_cooldown_hours must be >= min_cooldown_hours")
        return self

    def get_scheduler_config(self) -> dict[str, object]:
        """Get scheduler tuning as a dictionary."""
        return {
            "session_size": self.session_size,
            "min_cooldown_hours": self.min_cooldown_hours,
            "max_cooldown_hours": self.max_cooldown_hours,
            "cross_categories": tuple(self.cross_categories),
            "progression_swap_probability": self.progression_swap_probability,
            "pad_ignoring_cooldown": self.pad_ignoring_cooldown,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
