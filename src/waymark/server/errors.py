"""Fallback responses: not found, method not allowed, and HTTPError.

Route misses are normal outcomes, not exceptions. The defaults here are
used when the router has no custom handler installed.
"""

import logging
from collections.abc import Callable

from waymark.errors import HTTPError
from waymark.http.request import Request
from waymark.http.response import Response

logger = logging.getLogger("waymark.server")


def make_not_found(body: str) -> Callable[[Request], Response]:
    """Build the default not-found handler with a fixed *body*."""

    def not_found(request: Request) -> Response:
        return Response(body=body, status=404)

    return not_found


def default_method_not_allowed(request: Request, allowed: frozenset[str]) -> Response:
    """405 with an ``Allow`` header listing *allowed* methods, sorted."""
    allow_value = ", ".join(sorted(allowed))
    return Response(body="405 method not allowed\n", status=405).with_header("Allow", allow_value)


def http_error_response(exc: HTTPError, request: Request) -> Response:
    """Render an ``HTTPError`` raised by a handler or middleware."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)
    detail = exc.detail or f"Error {exc.status}"
    response = Response(body=f"{detail}\n", status=exc.status)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response
