"""The shape of a waymark middleware.

A middleware receives the request and ``next``, the rest of the chain,
and returns a ``Response``. Anything callable with that signature
qualifies; there is no base class. ``next`` always yields a
``Response``, because handler return values are negotiated before they
travel back out through the chain.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol, TypeAlias

from waymark.http.request import Request
from waymark.http.response import Response

Next: TypeAlias = Callable[[Request], Awaitable[Response]]


class Middleware(Protocol):
    """A callable wrapping the rest of the chain::

        async def require_json(request: Request, next: Next) -> Response:
            if request.method == "POST" and request.content_type != "application/json":
                return Response("Expected JSON\n", status=415)
            return await next(request)

    Returning without awaiting ``next`` short-circuits the chain. Plain
    ``def`` middleware and objects with ``__call__`` work too.
    """

    async def __call__(self, request: Request, next: Next) -> Response: ...
