"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(port=3000, method_not_allowed=True)
    """

    # Server (used by ``waymark run`` and ``Router.run()``)
    host: str = "127.0.0.1"
    port: int = 9000
    log_level: str = "info"

    # Reject malformed ``{param}`` segments at registration time instead
    # of silently treating them as literals.
    strict_patterns: bool = False

    # Answer 405 + Allow when a path matches but no pattern has the method.
    # Off by default: such requests go to the not-found handler.
    method_not_allowed: bool = False

    # Default not-found response body
    not_found_body: str = "404 page not found\n"
