"""
Configuration management for jobmatch.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jobmatch.utils.constants import (
    AI_JOBS_LIMIT,
    EXPERIENCE_BONUS,
    EXTRACTION_LIMIT,
    LOCATION_BONUS,
    RECOMMENDATION_THRESHOLD,
    RECOMMENDATIONS_LIMIT,
    SKILL_KEYWORDS,
    SKILL_MATCH_WEIGHT,
    SUGGESTION_THRESHOLD,
    SUGGESTIONS_LIMIT,
)


# Base paths
ROOT_DIR = Path(__file__).parent.parent.parent


class MatchingSettings(BaseSettings):
    """Weights, result sizes and vocabulary for the matching engine."""

    model_config = SettingsConfigDict(env_prefix="MATCH_")

    # Score weights
    skill_weight: int = Field(default=SKILL_MATCH_WEIGHT, ge=0)
    experience_bonus: int = Field(default=EXPERIENCE_BONUS, ge=0)
    location_bonus: int = Field(default=LOCATION_BONUS, ge=0)

    # Result sizes per entry point
    ai_jobs_limit: int = Field(default=AI_JOBS_LIMIT, ge=1)
    suggestions_limit: int = Field(default=SUGGESTIONS_LIMIT, ge=1)
    recommendations_limit: int = Field(default=RECOMMENDATIONS_LIMIT, ge=1)
    extraction_limit: int = Field(default=EXTRACTION_LIMIT, ge=1)

    # Percentage cut-offs
    suggestion_threshold: int = Field(default=SUGGESTION_THRESHOLD, ge=0, le=100)
    recommendation_threshold: int = Field(default=RECOMMENDATION_THRESHOLD, ge=0, le=100)

    # Keywords used by free-text skill extraction (JSON list when set from env)
    skill_vocabulary: list[str] = Field(default_factory=lambda: list(SKILL_KEYWORDS))

    @field_validator("skill_vocabulary")
    @classmethod
    def normalize_vocabulary(cls, v: list[str]) -> list[str]:
        """Lowercase and trim keywords, dropping blanks and duplicates."""
        return list(dict.fromkeys(s.strip().lower() for s in v if s.strip()))


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_path: Path = ROOT_DIR / "logs" / "jobmatch.log"
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True
    file_output: bool = True

    # Ranking and scoring decisions, written next to the main log file
    audit_output: bool = True
    audit_file_name: str = "audit.log"
    audit_rotation: str = "1 week"
    audit_retention: str = "1 year"


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = "jobmatch"
    version: str = "0.1.0"
    description: str = "Keyword-based job and candidate matching"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Nested settings
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance (singleton pattern)
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings


# Convenience exports
settings = get_settings()
