"""Request-scoped context via ContextVar.

Provides ``request_var``: the ``Request`` currently being dispatched in
this task. The router sets it around each dispatch and resets it after,
so helpers deep in a handler's call stack can reach the request without
threading it through every call.

Handlers should prefer their ``request`` argument; this is for code that
has no access to it (logging filters, template helpers).

Thread safety:
    ``ContextVar`` is task-local under asyncio. No locks needed.
"""

from contextvars import ContextVar

from waymark.http.request import Request

request_var: ContextVar[Request] = ContextVar("waymark_request")
"""The current request. Set by the router before dispatch."""


def get_request() -> Request:
    """Return the current request.

    Raises ``LookupError`` if called outside a request context.
    """
    return request_var.get()


def get_path_param(name: str, default: str | None = None) -> str | None:
    """Return one bound path parameter of the current request."""
    return get_request().path_params.get(name, default)
