"""``waymark routes`` — print the route table in match order."""

import argparse
import sys

from waymark.cli._resolve import resolve_router


def list_routes(args: argparse.Namespace) -> None:
    try:
        router = resolve_router(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = router.routes
    if not routes:
        print("No routes registered.")
        return

    width = max(len(route.method) for route in routes)
    for route in routes:
        name = getattr(route.handler, "__qualname__", repr(route.handler))
        print(f"{route.method:<{width}}  {route.pattern}  -> {name}")
