"""Shared type aliases used across waymark modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: receives the Request, returns a response value (sync or async)
Handler: TypeAlias = Callable[..., Any]

# Not-found / method-not-allowed handler: same shape as a route handler
FallbackHandler: TypeAlias = Callable[..., Any]
