"""Waymark CLI — serve a router from an import string.

Entry point registered as ``waymark`` in ``pyproject.toml``::

    [project.scripts]
    waymark = "waymark.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``waymark`` command."""
    parser = argparse.ArgumentParser(
        prog="waymark",
        description="Waymark — a minimal HTTP request router for ASGI.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- waymark run ------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Serve a router with uvicorn")
    run_parser.add_argument(
        "app",
        help="Import string (e.g. myapi:router)",
    )
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument("--log-level", default=None, help="uvicorn log level")

    # -- waymark routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "app",
        help="Import string (e.g. myapi:router)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from waymark.cli._run import run_server

        run_server(args)
    elif args.command == "routes":
        from waymark.cli._routes import list_routes

        list_routes(args)
