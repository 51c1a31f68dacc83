"""Context extraction and error normalization."""

from .errors import process_error
from .extractor import get_request_context
from .models import (
    ErrorInfo,
    LogContext,
    ModuleInfo,
    RequestInfo,
    RequestLike,
    UserInfo,
    UserLike,
)

__all__ = [
    "ErrorInfo",
    "LogContext",
    "ModuleInfo",
    "RequestInfo",
    "RequestLike",
    "UserInfo",
    "UserLike",
    "get_request_context",
    "process_error",
]
