"""Base logger configuration."""

from .config import (
    BASE_LOGGER_NAME,
    LeveledBoundLogger,
    bind_context,
    clear_context,
    configure_logging,
    get_base_logger,
    is_configured,
    reset_logging,
    unbind_context,
)

__all__ = [
    "BASE_LOGGER_NAME",
    "LeveledBoundLogger",
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_base_logger",
    "is_configured",
    "reset_logging",
    "unbind_context",
]
