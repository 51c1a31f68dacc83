"""Record shapes attached to log events.

Every shape is a plain ``TypedDict`` so the merged record can be handed to
structlog as keyword arguments without conversion.
"""

from typing import Any, NotRequired, Protocol, TypedDict


class UserInfo(TypedDict, total=False):
    """Who made the request."""

    id: str
    ip: str


class RequestInfo(TypedDict, total=False):
    """What was requested."""

    id: str
    method: str
    route: str


class ErrorInfo(TypedDict):
    """Normalized error.

    Besides ``message`` and ``stack`` it carries any extension fields copied
    from the source error (e.g. ``domain``, ``filepath``, ``type``).
    """

    message: str
    stack: NotRequired[str]


class ModuleInfo(TypedDict, total=False):
    """Static module metadata bound to a logger instance."""

    domain: str
    filename: str
    filepath: str


class LogContext(TypedDict, total=False):
    """Structured record handed to the base logger."""

    user: UserInfo
    request: RequestInfo
    error: ErrorInfo
    module: ModuleInfo
    metadata: dict[str, Any]


class UserLike(Protocol):
    """Anything exposing a user identifier."""

    id: Any


class RequestLike(Protocol):
    """Structural contract for request-like inputs.

    Every attribute is optional in practice: the extractor probes each one and
    skips what is missing. Mappings with the same keys are accepted too.
    """

    id: Any
    method: Any
    original_url: Any
    url: Any
    ip: Any
    user: UserLike | None
