"""Request dispatch — route lookup, parameter binding, middleware chain.

The dispatcher is a plain function over the router's state so several
routers can share it and tests can drive it without ASGI.

Middleware ordering:
    The chain is folded in registration order, each middleware wrapping
    everything built so far. The first registered middleware ends up
    innermost (closest to the handler) and the last registered ends up
    outermost (first to see the request, last to see the response)::

        router.use(m1)
        router.use(m2)
        # m2 -> m1 -> handler -> m1 -> m2
"""

import logging
from collections.abc import Callable, Sequence
from typing import Any

from waymark._internal.invoke import invoke
from waymark._internal.types import FallbackHandler, Handler
from waymark.context import request_var
from waymark.http.request import Request
from waymark.http.response import Response
from waymark.middleware.protocol import Next
from waymark.routing.table import RouteTable
from waymark.server.negotiation import negotiate

logger = logging.getLogger("waymark.server")


def build_chain(handler: Handler, middleware: Sequence[Callable[..., Any]]) -> Next:
    """Wrap *handler* in *middleware*; the last entry becomes outermost."""

    async def endpoint(request: Request) -> Response:
        return negotiate(await invoke(handler, request))

    chain: Next = endpoint
    for mw in middleware:
        chain = _wrap(mw, chain)
    return chain


def _wrap(mw: Callable[..., Any], inner: Next) -> Next:
    async def call(request: Request) -> Response:
        return negotiate(await invoke(mw, request, inner))

    return call


async def dispatch(
    request: Request,
    *,
    table: RouteTable,
    middleware: Sequence[Callable[..., Any]],
    not_found: FallbackHandler,
    method_not_allowed: FallbackHandler | None = None,
) -> Response:
    """Route *request* and return the handler's response.

    1. Look the method and path up in *table*.
    2. On a miss, call *not_found* (or *method_not_allowed* when given
       and the path matched some pattern under other methods).
       Middleware does not run for misses.
    3. On a hit, bind the path parameters onto a copy of the request,
       wrap the handler in *middleware*, and call it.
    """
    result = table.lookup(request.method, request.path)

    if not result.found or result.handler is None:
        if method_not_allowed is not None and result.allowed:
            logger.debug("405 %s %s (allowed: %s)", request.method, request.path, sorted(result.allowed))
            return negotiate(await invoke(method_not_allowed, request, result.allowed))
        logger.debug("404 %s %s", request.method, request.path)
        return negotiate(await invoke(not_found, request))

    request = request.with_path_params(result.params)
    token = request_var.set(request)
    try:
        chain = build_chain(result.handler, middleware)
        return await chain(request)
    finally:
        request_var.reset(token)
