"""Serve a router with uvicorn."""

import logging

import uvicorn

logger = logging.getLogger("waymark.server")


def run_server(app: object, host: str, port: int, *, log_level: str = "info") -> None:
    """Start a uvicorn server for the ASGI callable *app* and block.

    Args:
        app: ASGI callable (a waymark ``Router``).
        host: Bind host address.
        port: Bind port number.
        log_level: uvicorn log level name.
    """
    config = uvicorn.Config(
        app,  # type: ignore[arg-type]
        host=host,
        port=port,
        log_level=log_level,
        lifespan="on",
    )
    server = uvicorn.Server(config)
    logger.info("Listening on %s:%d", host, port)
    server.run()
