"""Helpers shared by the extractor and the error processor."""

import sys
from collections.abc import Mapping
from typing import Any

from reqlog.logging.config import get_base_logger


def probe(source: Any, name: str) -> Any:
    """Read a field from an object attribute or, for mappings, a key.

    Missing fields yield None. Exceptions raised by properties propagate.
    """
    value = getattr(source, name, None)
    if value is None and isinstance(source, Mapping):
        value = source.get(name)
    return value


def report_failure(logger: Any, event: str, **kw: Any) -> None:
    """Emit a warning about an internal failure without ever raising.

    Falls back to stderr when the logger itself is unusable.
    """
    try:
        (logger if logger is not None else get_base_logger()).warning(event, **kw)
    except Exception as exc:
        print(f"[REQLOG] {event} ({exc!r})", file=sys.stderr, flush=True)
