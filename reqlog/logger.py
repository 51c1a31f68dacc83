"""Leveled logging facade that enriches records with request and error context."""

import sys
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from reqlog.context.errors import process_error
from reqlog.context.extractor import get_request_context
from reqlog.context.models import LogContext, ModuleInfo
from reqlog.context.probing import report_failure
from reqlog.logging.config import get_base_logger


class ContextLogger:
    """Logger exposing one method per severity level.

    Every call builds a fresh record from the optional request, error and
    metadata and hands it to the base logger as ``base.<level>(message,
    **record)``. Level filtering, timestamps and rendering are left to the
    base logger. No method ever raises.
    """

    def __init__(self, base: Any, module_info: ModuleInfo | None = None):
        """Initialize the logger.

        Args:
            base: structlog-style logger with ``bind`` and per-level methods.
            module_info: Static metadata attached to every record under
                ``module``.
        """
        self.module_info = module_info
        self._base = base.bind(module=dict(module_info)) if module_info else base

    @property
    def base(self) -> Any:
        """The (possibly module-bound) base logger."""
        return self._base

    def _build_record(
        self,
        request: Any,
        metadata: Mapping[str, Any] | None,
        error: Any = None,
        with_error: bool = False,
    ) -> LogContext:
        record = get_request_context(request, self._base)
        if with_error:
            error_info = process_error(error, self._base)
            if error_info is not None:
                record["error"] = error_info
        try:
            if metadata:
                record["metadata"] = dict(metadata)
        except Exception as exc:
            report_failure(self._base, "Failed to process metadata", exc_info=exc)
        return record

    def _emit(self, method_name: str, message: str, record: LogContext) -> None:
        try:
            getattr(self._base, method_name)(message, **record)
        except Exception as exc:
            print(
                f"[REQLOG] Failed to emit {method_name} record {message!r}: {exc!r}",
                file=sys.stderr,
                flush=True,
            )

    def trace(
        self,
        message: str,
        request: Any = None,
        metadata: Mapping[str, Any] | None = None,
    ) -> None:
        """Log at TRACE level with request context and metadata."""
        self._emit("trace", message, self._build_record(request, metadata))

    def debug(
        self,
        message: str,
        request: Any = None,
        metadata: Mapping[str, Any] | None = None,
    ) -> None:
        """Log at DEBUG level with request context and metadata."""
        self._emit("debug", message, self._build_record(request, metadata))

    def info(
        self,
        message: str,
        request: Any = None,
        metadata: Mapping[str, Any] | None = None,
    ) -> None:
        """Log at INFO level with request context and metadata."""
        self._emit("info", message, self._build_record(request, metadata))

    def warn(
        self,
        message: str,
        request: Any = None,
        metadata: Mapping[str, Any] | None = None,
    ) -> None:
        """Log at WARNING level with request context and metadata."""
        self._emit("warning", message, self._build_record(request, metadata))

    warning = warn

    def error(
        self,
        message: str,
        request: Any = None,
        error: Any = None,
        metadata: Mapping[str, Any] | None = None,
    ) -> None:
        """Log at ERROR level with request context, error info and metadata."""
        record = self._build_record(request, metadata, error, with_error=True)
        self._emit("error", message, record)

    def fatal(
        self,
        message: str,
        request: Any = None,
        error: Any = None,
        metadata: Mapping[str, Any] | None = None,
    ) -> None:
        """Log at CRITICAL level with request context, error info and metadata."""
        record = self._build_record(request, metadata, error, with_error=True)
        self._emit("critical", message, record)

    critical = fatal


def create_logger(
    module_info: ModuleInfo | None = None,
    *,
    base: Any = None,
) -> ContextLogger:
    """Create a context logger.

    Args:
        module_info: Optional static module metadata (domain, filepath).
        base: Base logger to delegate to. Defaults to the process-wide base
            logger, configured from the environment on first use.

    Returns:
        A new ContextLogger.
    """
    if base is None:
        base = get_base_logger()
    return ContextLogger(base, module_info)


@lru_cache
def get_default_logger() -> ContextLogger:
    """Get the cached process-wide logger without module info."""
    return create_logger()


def reset_default_logger() -> None:
    """Discard the cached default logger."""
    get_default_logger.cache_clear()
