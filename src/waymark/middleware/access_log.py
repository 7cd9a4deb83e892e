"""Request logging middleware.

Logs one line per request on the ``waymark.access`` logger::

    router.use(RequestLogger())
    # INFO waymark.access: GET /people/42 -> 200 (0.4 ms)
"""

import logging
import time

from waymark.http.request import Request
from waymark.http.response import Response
from waymark.middleware.protocol import Next

logger = logging.getLogger("waymark.access")


class RequestLogger:
    """Log method, path, status, and elapsed time for each routed request.

    Only sees requests that matched a route: the router calls its
    not-found handler without running middleware.
    """

    __slots__ = ("level", "logger")

    def __init__(self, *, level: int = logging.INFO, log: logging.Logger | None = None) -> None:
        self.level = level
        self.logger = log or logger

    async def __call__(self, request: Request, next: Next) -> Response:
        start = time.perf_counter()
        response = await next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        self.logger.log(
            self.level,
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.path,
            response.status,
            elapsed_ms,
        )
        return response
