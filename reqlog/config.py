"""Pydantic settings for logging configuration."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# stdlib has no TRACE level; it sits below DEBUG
TRACE = 5

LEVELS: dict[str, int] = {
    "trace": TRACE,
    "debug": 10,
    "info": 20,
    "warn": 30,
    "warning": 30,
    "error": 40,
    "fatal": 50,
    "critical": 50,
}


def level_number(name: str) -> int:
    """Map a level name to its stdlib logging number.

    Args:
        name: Level name, case-insensitive (e.g. 'info', 'WARN').

    Returns:
        The numeric level.

    Raises:
        ValueError: If the name is not a known level.
    """
    try:
        return LEVELS[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown log level {name!r}, expected one of: {', '.join(LEVELS)}"
        ) from None


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = Field(
        default="info",
        description="Minimum severity level",
    )
    json_format: bool = Field(
        default=True,
        description="Use JSON format for logs",
    )

    @field_validator("level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level_number(value)
        return value.strip().lower()

    @property
    def numeric_level(self) -> int:
        """Numeric stdlib level for the configured minimum severity."""
        return LEVELS[self.level]


@lru_cache
def get_settings() -> LoggingSettings:
    """Get cached settings instance.

    Returns:
        The logging settings.
    """
    return LoggingSettings()


def refresh_settings() -> LoggingSettings:
    """Clear settings cache and return fresh settings.

    Returns:
        Fresh logging settings.
    """
    get_settings.cache_clear()
    return get_settings()
