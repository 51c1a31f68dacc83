"""Build the user/request part of a log record from a request-like object."""

from typing import Any

from reqlog.context.models import LogContext, RequestInfo, UserInfo
from reqlog.context.probing import probe, report_failure

# Preferred first: the URL before any router rewrites
ROUTE_FIELDS = ("original_url", "originalUrl", "url")


def _route(request: Any) -> Any:
    for field in ROUTE_FIELDS:
        value = probe(request, field)
        if value:
            return value
    return None


def get_request_context(request: Any = None, logger: Any = None) -> LogContext:
    """Extract user and request info from a request-like object.

    Only fields that are present and truthy are copied, coerced to str. A
    sub-object is attached once it is complete, so a failure half-way through
    keeps what was finished before it.

    Args:
        request: Object or mapping following the ``RequestLike`` contract.
        logger: Logger used to report extraction failures. Defaults to the
            base logger.

    Returns:
        The context fragment, possibly empty.
    """
    context: LogContext = {}
    if request is None:
        return context

    try:
        user = probe(request, "user")
        user_id = probe(user, "id") if user else None
        ip = probe(request, "ip")
        if user_id or ip:
            user_info: UserInfo = {}
            if user_id:
                user_info["id"] = str(user_id)
            if ip:
                user_info["ip"] = str(ip)
            context["user"] = user_info

        request_id = probe(request, "id")
        method = probe(request, "method")
        route = _route(request)
        if request_id or method or route:
            request_info: RequestInfo = {}
            if request_id:
                request_info["id"] = str(request_id)
            if method:
                request_info["method"] = str(method)
            if route:
                request_info["route"] = str(route)
            context["request"] = request_info
    except Exception as exc:
        report_failure(logger, "Failed to extract request context", exc_info=exc)

    return context
