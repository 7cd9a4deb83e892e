"""Route table with linear, registration-ordered matching.

Patterns are kept in the order they were first registered. A lookup
scans them in that order, so when two patterns can both match a path
(``/people/new`` and ``/people/{id}``) the one registered first wins,
provided it has a handler for the request method.
"""

import logging
from dataclasses import dataclass, field

from waymark._internal.types import Handler
from waymark.routing.pattern import Segment, match_segments, parse_pattern, split_path

logger = logging.getLogger("waymark.router")


@dataclass(frozen=True, slots=True)
class Route:
    """One registered (method, pattern) pair. Used for introspection."""

    method: str
    pattern: str
    handler: Handler


@dataclass(frozen=True, slots=True)
class LookupResult:
    """Outcome of ``RouteTable.lookup``.

    ``found`` is False for a miss; ``handler`` is then None and
    ``params`` empty. ``allowed`` lists the methods registered on every
    pattern that matched the path structurally, whether or not the
    lookup found a handler.
    """

    handler: Handler | None
    params: dict[str, str]
    found: bool
    allowed: frozenset[str] = frozenset()


@dataclass(slots=True)
class _PatternEntry:
    segments: tuple[Segment, ...]
    handlers: dict[str, Handler] = field(default_factory=dict)


class RouteTable:
    """Mapping from route pattern to a mapping from HTTP method to handler.

    Usage::

        table = RouteTable()
        table.register("GET", "/people/{id}", get_person)
        result = table.lookup("GET", "/people/42")
        assert result.params == {"id": "42"}

    Thread safety:
        Registration is not synchronized. Finish registering before the
        first lookup; concurrent lookups only read.
    """

    __slots__ = ("_entries", "_strict")

    def __init__(self, *, strict: bool = False) -> None:
        self._entries: dict[str, _PatternEntry] = {}
        self._strict = strict

    def register(self, method: str, pattern: str, handler: Handler) -> None:
        """Store *handler* under (*pattern*, *method*).

        Re-registering the same pair replaces the previous handler.
        Raises ``ConfigurationError`` for malformed patterns in strict mode.
        """
        method = method.upper()
        entry = self._entries.get(pattern)
        if entry is None:
            entry = _PatternEntry(segments=parse_pattern(pattern, strict=self._strict))
            self._entries[pattern] = entry
        elif method in entry.handlers:
            logger.debug("Replacing handler for %s %s", method, pattern)
        entry.handlers[method] = handler

    def lookup(self, method: str, path: str) -> LookupResult:
        """Find the handler for *method* and *path*.

        Scans patterns in registration order. A pattern that matches the
        path but has no handler for *method* does not stop the scan.
        """
        method = method.upper()
        parts = split_path(path)
        allowed: set[str] = set()
        for entry in self._entries.values():
            params = match_segments(entry.segments, parts)
            if params is None:
                continue
            handler = entry.handlers.get(method)
            if handler is not None:
                return LookupResult(handler, params, True, frozenset(entry.handlers))
            allowed.update(entry.handlers)
        return LookupResult(None, {}, False, frozenset(allowed))

    @property
    def routes(self) -> list[Route]:
        """All registered routes, in table order."""
        return [
            Route(method, pattern, handler)
            for pattern, entry in self._entries.items()
            for method, handler in entry.handlers.items()
        ]

    def __len__(self) -> int:
        return sum(len(entry.handlers) for entry in self._entries.values())

    def __contains__(self, key: object) -> bool:
        """``("GET", "/people") in table``"""
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        method, pattern = key
        entry = self._entries.get(pattern)
        return entry is not None and str(method).upper() in entry.handlers
