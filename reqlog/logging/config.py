"""Base logger configuration with structlog."""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from reqlog.config import TRACE, get_settings, level_number

BASE_LOGGER_NAME = "reqlog"

# Flag to track if the base logger has been configured
_logging_configured = False


class LeveledBoundLogger(structlog.stdlib.BoundLogger):
    """stdlib bound logger that also understands ``trace`` and ``fatal``."""

    def trace(self, event: str | None = None, *args: Any, **kw: Any) -> Any:
        """Process event and log it at TRACE level."""
        if not self._logger.isEnabledFor(TRACE):
            return None
        if args:
            kw["positional_args"] = args
        try:
            args, kwargs = self._process_event("trace", event, kw)
        except structlog.DropEvent:
            return None
        return self._logger.log(TRACE, *args, **kwargs)

    def fatal(self, event: str | None = None, *args: Any, **kw: Any) -> Any:
        """Process event and log it at CRITICAL level."""
        return self._proxy_to_logger("critical", event, *args, **kw)


def configure_logging(
    level: str | None = None,
    json_format: bool | None = None,
) -> None:
    """Configure the structlog base logger.

    Args:
        level: Minimum level (trace, debug, info, warn, error, fatal).
            Defaults to LOG_LEVEL, then 'info'.
        json_format: If True, output JSON logs. If False, use console format.
            Defaults to LOG_JSON_FORMAT, then True.
    """
    global _logging_configured

    settings = get_settings()
    log_level = level_number(level) if level else settings.numeric_level
    if json_format is None:
        json_format = settings.json_format

    logging.addLevelName(TRACE, "TRACE")

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger(BASE_LOGGER_NAME).setLevel(log_level)

    structlog.configure(
        processors=processors,
        wrapper_class=LeveledBoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _logging_configured = True


def is_configured() -> bool:
    """Check whether the base logger has been configured."""
    return _logging_configured


def reset_logging() -> None:
    """Forget the current configuration so the next use configures again."""
    global _logging_configured
    structlog.reset_defaults()
    _logging_configured = False


def get_base_logger(name: str = BASE_LOGGER_NAME) -> LeveledBoundLogger:
    """Get the process-wide base logger, configuring it on first use.

    Args:
        name: stdlib logger name.

    Returns:
        A bound structlog logger.
    """
    if not _logging_configured:
        configure_logging()
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind values to the current logging context.

    Args:
        **kwargs: Key-value pairs to add to every record.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Unbind values from the current logging context.

    Args:
        *keys: Keys to remove from log context.
    """
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all values from the current logging context."""
    structlog.contextvars.clear_contextvars()
