"""Invoke helpers — call sync or async callables uniformly.

Handlers, middleware, and fallback handlers can be ``def`` or
``async def``. This module keeps the sync/async check in one place.

Usage::

    from waymark._internal.invoke import invoke

    result = await invoke(handler, request)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable."""
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
