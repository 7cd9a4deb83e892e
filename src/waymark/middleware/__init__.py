"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> Response

Middleware registered last runs outermost: it sees the request first
and the response last.

Built-in middleware:
    RequestLogger -- Log method, path, status, and timing per request
"""

from waymark.middleware.access_log import RequestLogger
from waymark.middleware.protocol import Middleware, Next

__all__ = [
    "Middleware",
    "Next",
    "RequestLogger",
]
