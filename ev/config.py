"""Application configuration using pydantic-settings."""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ev.dice.types import OutputStyle


class Settings(BaseSettings):
    """Application settings loaded from EV_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Output
    single_line: bool = False  # Default to single line output without -s

    # Logging
    log_level: str = "WARNING"
    debug: bool = False  # Forces DEBUG logging

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def output_style(self) -> OutputStyle:
        """Output style used when no flag overrides it."""
        if self.single_line:
            return OutputStyle.SINGLE_LINE
        return OutputStyle.MULTI_LINE

    @property
    def effective_log_level(self) -> int:
        """Numeric logging level, taking debug into account."""
        if self.debug:
            return logging.DEBUG
        return logging.getLevelName(self.log_level)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
