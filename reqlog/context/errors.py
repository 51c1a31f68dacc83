"""Normalize arbitrary error-like values into ``ErrorInfo`` records."""

import traceback
from collections.abc import Mapping
from typing import Any

from reqlog.context.models import ErrorInfo
from reqlog.context.probing import probe, report_failure

FALLBACK_MESSAGE = "Unknown error"
FALLBACK_STACK = "No stack trace available"
PROCESSING_FAILED_MESSAGE = "Error processing failed"
PROCESSING_FAILED_STACK = "Unable to extract stack trace"

# Never overwritten by extension fields
CORE_FIELDS = frozenset({"message", "stack", "type"})

# Values whose str() is a meaningful message
_COERCIBLE = (BaseException, str, int, float)


def _message(error: Any) -> str:
    message = probe(error, "message")
    if message:
        return str(message)
    if isinstance(error, bytes):
        return error.decode("utf-8", errors="replace") or FALLBACK_MESSAGE
    if isinstance(error, _COERCIBLE):
        return str(error) or FALLBACK_MESSAGE
    return FALLBACK_MESSAGE


def _stack(error: Any) -> str:
    stack = probe(error, "stack")
    if stack:
        return str(stack)
    if isinstance(error, BaseException) and error.__traceback__ is not None:
        return "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        )
    return FALLBACK_STACK


def _extension_fields(error: Any) -> dict[str, Any]:
    if isinstance(error, Mapping):
        items = error.items()
    else:
        items = getattr(error, "__dict__", {}).items()
    return {
        key: value
        for key, value in items
        if isinstance(key, str) and not key.startswith("_") and key not in CORE_FIELDS
    }


def process_error(error: Any = None, logger: Any = None) -> ErrorInfo | None:
    """Turn an exception, mapping, string or other value into ``ErrorInfo``.

    Public fields of the source (instance attributes, or keys of a mapping)
    are passed through as extension fields; ``message``, ``stack`` and
    ``type`` always come from the rules below.

    Args:
        error: The error-like value, or None.
        logger: Logger used to report processing failures. Defaults to the
            base logger.

    Returns:
        The normalized error, or None when no error was given.
    """
    if error is None:
        return None

    try:
        info: ErrorInfo = {"message": _message(error), "stack": _stack(error)}
        if isinstance(error, BaseException):
            info["type"] = type(error).__name__
        info.update(_extension_fields(error))
        return info
    except Exception:
        report_failure(logger, "Failed to process error")
        return {
            "message": PROCESSING_FAILED_MESSAGE,
            "stack": PROCESSING_FAILED_STACK,
        }
