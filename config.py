"""
Configuration settings for the code-learner study tool.

Uses Pydantic Settings for environment variable management with .env file support.
Every field can be overridden with a CODELEARNER_-prefixed environment variable.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR = Path.home() / ".codelearner"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CODELEARNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Corpus
    # ========================================
    data_path: Path = Field(
        default=Path("data") / "study_items.json",
        description="Pre-built study item corpus (JSON array of items)",
    )

    # ========================================
    # Progress Persistence
    # ========================================
    progress_backend: Literal["json", "sql"] = Field(
        default="json",
        description="Where the progress snapshot lives",
    )
    progress_path: Path = Field(
        default=APP_DIR / "progress.json",
        description="Snapshot file used by the json backend",
    )
    database_url: str = Field(
        default=f"sqlite:///{APP_DIR / 'progress.db'}",
        description="SQLAlchemy URL used by the sql backend",
    )
    progress_key: str = Field(
        default="codelearner-progress",
        description="Row key of the snapshot in the sql backend",
    )

    # ========================================
    # Quiz
    # ========================================
    quiz_question_count: int = Field(
        default=10,
        ge=1,
        description="Default number of questions per quiz",
    )
    quiz_min_module_items: int = Field(
        default=4,
        ge=1,
        description="Modules with fewer items are not offered as quizzes",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (None for stderr only)",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
