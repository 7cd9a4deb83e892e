"""``waymark run`` — serve a router with uvicorn."""

import argparse
import sys

from waymark.cli._resolve import resolve_router


def run_server(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and serve it; CLI flags override router config."""
    try:
        router = resolve_router(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    from waymark.server import run

    run.run_server(
        router,
        args.host or router.config.host,
        args.port or router.config.port,
        log_level=args.log_level or router.config.log_level,
    )
