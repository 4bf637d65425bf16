"""Translation framework configuration via Pydantic Settings.

Reads environment variables (and optional .env file) and validates them
at startup. Use ``get_settings()`` to obtain a cached singleton.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Validated translation settings sourced from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Locale discovery ------------------------------------------------
    LOCALE_DIR: Path = Path("share/locale")
    DEFAULT_LANGUAGE: str = "en"
    CATALOG_DOMAIN: str = "atheme"

    # --- Buffer bounds (characters, excluding terminator) ------------------
    TRANSLATION_MAX_LENGTH: int = 1023
    LANGUAGE_NAMES_MAX_LENGTH: int = 511

    LOG_LEVEL: str = "INFO"

    # --- Validators ------------------------------------------------------
    @field_validator("DEFAULT_LANGUAGE")
    @classmethod
    def _validate_default_language(cls, v: str) -> str:
        if not v:
            raise ValueError("DEFAULT_LANGUAGE must not be empty")
        if v.startswith("."):
            raise ValueError("DEFAULT_LANGUAGE must not start with '.'")
        if any(c.isspace() for c in v):
            raise ValueError("DEFAULT_LANGUAGE must not contain whitespace")
        return v

    @field_validator("CATALOG_DOMAIN")
    @classmethod
    def _validate_domain(cls, v: str) -> str:
        if not v:
            raise ValueError("CATALOG_DOMAIN must not be empty")
        return v

    @field_validator("TRANSLATION_MAX_LENGTH", "LANGUAGE_NAMES_MAX_LENGTH")
    @classmethod
    def _validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Value must be positive")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings singleton."""
    return Settings()
