"""Configuration using pydantic-settings."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Literal, get_args

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BUNDLED_PAYLOAD = Path(__file__).parent / "bundled"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class Settings(BaseSettings):
    """Installer settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="ANTIGRAVITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    user_config_root: Annotated[
        Path, Field(description="Per-user Antigravity/Gemini config directory")
    ] = Path("~/.gemini")

    source_root: Annotated[
        Path | None, Field(description="Directory holding agents/ and workflows/")
    ] = None

    log_level: Annotated[LogLevel, Field(description="Logging level")] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @property
    def user_config_path(self) -> Path:
        """Get expanded user config directory path."""
        return self.user_config_root.expanduser()

    @property
    def source_path(self) -> Path:
        """Get payload source directory.

        Falls back to the payload directory shipped with the package.
        """
        if self.source_root is not None:
            return self.source_root.expanduser()
        return BUNDLED_PAYLOAD


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """Configure and return the package logger."""
    if settings is None:
        settings = get_settings()

    level = getattr(logging, settings.log_level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    logger = logging.getLogger("antigravity_agents")
    logger.setLevel(level)

    return logger
