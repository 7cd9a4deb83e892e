"""Waymark — a minimal HTTP request router for ASGI.

Maps method + path to a handler, binds ``{name}`` path segments as
parameters, and runs middleware around the matched handler.

Basic usage::

    from waymark import Request, Response, Router

    router = Router()

    @router.get("/people/{id}")
    def get_person(request: Request) -> Response:
        return Response.json({"id": request.path_params["id"]})

    router.run()
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "HTTPError",
    "MethodNotAllowed",
    "Middleware",
    "Next",
    "NotFound",
    "Request",
    "RequestLogger",
    "Response",
    "Router",
    "RouterConfig",
    "WaymarkError",
    "get_request",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waymark`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from waymark.router import Router

        return Router

    if name == "RouterConfig":
        from waymark.config import RouterConfig

        return RouterConfig

    if name == "Request":
        from waymark.http.request import Request

        return Request

    if name == "Response":
        from waymark.http.response import Response

        return Response

    if name in ("Middleware", "Next"):
        from waymark.middleware import protocol as _mw

        return getattr(_mw, name)

    if name == "RequestLogger":
        from waymark.middleware.access_log import RequestLogger

        return RequestLogger

    if name == "get_request":
        from waymark.context import get_request

        return get_request

    if name in ("WaymarkError", "ConfigurationError", "HTTPError", "MethodNotAllowed", "NotFound"):
        from waymark import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
