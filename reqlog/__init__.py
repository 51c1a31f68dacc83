"""Structured logging with request, user and error context."""

from reqlog.context import (
    ErrorInfo,
    LogContext,
    ModuleInfo,
    RequestInfo,
    RequestLike,
    UserInfo,
    UserLike,
    get_request_context,
    process_error,
)
from reqlog.logger import (
    ContextLogger,
    create_logger,
    get_default_logger,
    reset_default_logger,
)
from reqlog.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_base_logger,
    reset_logging,
    unbind_context,
)

__all__ = [
    "ContextLogger",
    "ErrorInfo",
    "LogContext",
    "ModuleInfo",
    "RequestInfo",
    "RequestLike",
    "UserInfo",
    "UserLike",
    "bind_context",
    "clear_context",
    "configure_logging",
    "create_logger",
    "get_base_logger",
    "get_default_logger",
    "get_request_context",
    "process_error",
    "reset_default_logger",
    "reset_logging",
    "unbind_context",
]
