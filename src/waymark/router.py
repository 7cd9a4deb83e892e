"""The waymark router.

Holds one route table, one middleware list, and the fallback handlers.
The router instance is itself the ASGI application.
"""

import logging
from collections.abc import Callable
from typing import Any

from waymark._internal.asgi import Receive, Scope, Send
from waymark._internal.invoke import invoke
from waymark._internal.types import FallbackHandler, Handler
from waymark.config import RouterConfig
from waymark.context import request_var
from waymark.errors import HTTPError
from waymark.http.request import Request
from waymark.http.response import Response
from waymark.middleware.protocol import Middleware
from waymark.routing.table import Route, RouteTable
from waymark.server.dispatch import dispatch
from waymark.server.errors import default_method_not_allowed, http_error_response, make_not_found
from waymark.server.sender import send_response

logger = logging.getLogger("waymark.router")


class Router:
    """An HTTP request router.

    Register routes and middleware during setup, then hand the router to
    an ASGI server::

        router = Router()

        @router.get("/people/{id}")
        async def get_person(request: Request) -> Response:
            return Response.json({"id": request.path_params["id"]})

        router.use(RequestLogger())
        router.run()

    Routes are matched in registration order. Each router owns its own
    state, so several routers can live in one process.

    Thread safety:
        Registration is single-threaded setup work. Once serving starts,
        the route table and middleware list are only read. Calling
        ``add()`` or ``use()`` while requests are in flight is unsupported.
    """

    __slots__ = (
        "_method_not_allowed",
        "_middleware",
        "_not_found",
        "_shutdown_hooks",
        "_startup_hooks",
        "_table",
        "config",
    )

    def __init__(self, config: RouterConfig | None = None) -> None:
        self.config: RouterConfig = config or RouterConfig()
        self._table = RouteTable(strict=self.config.strict_patterns)
        self._middleware: list[Middleware] = []
        self._not_found: FallbackHandler = make_not_found(self.config.not_found_body)
        self._method_not_allowed: FallbackHandler = default_method_not_allowed
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []

    # -- Route registration --

    def add(self, method: str, pattern: str, handler: Handler) -> Handler:
        """Register *handler* for *method* on *pattern*.

        Registering the same method and pattern again replaces the
        earlier handler. Returns *handler* unchanged.
        """
        self._table.register(method, pattern, handler)
        return handler

    def route(
        self,
        pattern: str,
        *,
        methods: list[str] | None = None,
    ) -> Callable[[Handler], Handler]:
        """Register a handler for several methods via decorator.

        Args:
            pattern: URL path pattern. Use ``{name}`` for path parameters.
            methods: HTTP methods. Defaults to ``["GET"]``.
        """

        def decorator(func: Handler) -> Handler:
            for method in methods or ["GET"]:
                self.add(method, pattern, func)
            return func

        return decorator

    def _method(self, method: str, pattern: str, handler: Handler | None) -> Any:
        if handler is not None:
            return self.add(method, pattern, handler)

        def decorator(func: Handler) -> Handler:
            return self.add(method, pattern, func)

        return decorator

    def get(self, pattern: str, handler: Handler | None = None) -> Any:
        """Register a GET handler: ``router.get(pattern, h)`` or ``@router.get(pattern)``."""
        return self._method("GET", pattern, handler)

    def post(self, pattern: str, handler: Handler | None = None) -> Any:
        """Register a POST handler."""
        return self._method("POST", pattern, handler)

    def put(self, pattern: str, handler: Handler | None = None) -> Any:
        """Register a PUT handler."""
        return self._method("PUT", pattern, handler)

    def delete(self, pattern: str, handler: Handler | None = None) -> Any:
        """Register a DELETE handler."""
        return self._method("DELETE", pattern, handler)

    def patch(self, pattern: str, handler: Handler | None = None) -> Any:
        """Register a PATCH handler."""
        return self._method("PATCH", pattern, handler)

    def options(self, pattern: str, handler: Handler | None = None) -> Any:
        """Register an OPTIONS handler."""
        return self._method("OPTIONS", pattern, handler)

    def head(self, pattern: str, handler: Handler | None = None) -> Any:
        """Register a HEAD handler."""
        return self._method("HEAD", pattern, handler)

    @property
    def routes(self) -> list[Route]:
        """All registered routes, in match order."""
        return self._table.routes

    # -- Middleware --

    def use(self, middleware: Middleware) -> Middleware:
        """Append *middleware* to the chain.

        The chain is read on every request, so middleware added later
        applies to every request dispatched afterwards. The last
        middleware added runs outermost.
        """
        self._middleware.append(middleware)
        return middleware

    @property
    def middleware(self) -> tuple[Middleware, ...]:
        return tuple(self._middleware)

    # -- Fallback handlers --

    def set_not_found(self, handler: FallbackHandler) -> FallbackHandler:
        """Replace the handler for requests no route matches.

        *handler* receives the request. Usable as a decorator::

            @router.set_not_found
            def missing(request: Request) -> Response:
                return Response("Custom 404: Page not found", status=404)
        """
        self._not_found = handler
        return handler

    def set_method_not_allowed(self, handler: FallbackHandler) -> FallbackHandler:
        """Replace the 405 handler. Only used with ``method_not_allowed=True``.

        *handler* receives ``(request, allowed)`` where *allowed* is a
        frozenset of the methods registered for the matching patterns.
        """
        self._method_not_allowed = handler
        return handler

    # -- Lifecycle hooks --

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register a sync or async hook to run at ASGI lifespan startup."""
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register a sync or async hook to run at ASGI lifespan shutdown."""
        self._shutdown_hooks.append(func)
        return func

    # -- Serving --

    async def serve(self, request: Request) -> Response:
        """Dispatch *request* and return the response.

        ``HTTPError`` raised by a handler or middleware becomes a plain
        response with its status. Other exceptions propagate.
        """
        token = request_var.set(request)
        try:
            return await dispatch(
                request,
                table=self._table,
                middleware=tuple(self._middleware),
                not_found=self._not_found,
                method_not_allowed=(
                    self._method_not_allowed if self.config.method_not_allowed else None
                ),
            )
        except HTTPError as exc:
            return http_error_response(exc, request)
        finally:
            request_var.reset(token)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        if scope["type"] != "http":
            return

        request = Request.from_asgi(scope, receive)
        response = await self.serve(request)
        await send_response(response, send, head=request.method == "HEAD")

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Answer ASGI lifespan events until shutdown or a failed startup."""
        while True:
            event = (await receive())["type"]
            if event == "lifespan.startup":
                try:
                    await _run_hooks(self._startup_hooks)
                except Exception as exc:
                    logger.exception("Startup hook failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})
            elif event == "lifespan.shutdown":
                await _run_hooks(self._shutdown_hooks)
                await send({"type": "lifespan.shutdown.complete"})
                return

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Serve this router with uvicorn until interrupted."""
        from waymark.server.run import run_server

        run_server(
            self,
            host or self.config.host,
            port or self.config.port,
            log_level=self.config.log_level,
        )


async def _run_hooks(hooks: list[Callable[..., Any]]) -> None:
    for hook in hooks:
        await invoke(hook)
