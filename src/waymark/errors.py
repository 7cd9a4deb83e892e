"""Errors raised by waymark and by the handlers it dispatches to.

``ConfigurationError`` signals a setup mistake and surfaces at
registration time. ``HTTPError`` and its subclasses are for handlers:
raising one ends the request with that status instead of a 500.
"""

from collections.abc import Iterable


class WaymarkError(Exception):
    """Base for all waymark-specific errors."""


class ConfigurationError(WaymarkError):
    """A route pattern or router setting is invalid.

    Raised by ``Router.add()`` when ``strict_patterns`` rejects a pattern.
    """


class HTTPError(WaymarkError):
    """Ends the current request with *status*.

    The router renders *detail* as a plain-text body and copies
    *headers* onto the response::

        if not person_id.isdigit():
            raise HTTPError(400, "Invalid person ID")
    """

    def __init__(
        self,
        status: int,
        detail: str = "",
        headers: Iterable[tuple[str, str]] = (),
    ) -> None:
        super().__init__(status, detail)
        self.status = status
        self.detail = detail
        self.headers = tuple(headers)

    def __str__(self) -> str:
        return f"{self.status}: {self.detail}" if self.detail else str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 for a resource the handler could not find."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(404, detail)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405 carrying an ``Allow`` header built from *allowed*."""

    def __init__(self, allowed: Iterable[str], detail: str = "") -> None:
        self.allowed = frozenset(allowed)
        allow = ", ".join(sorted(self.allowed))
        super().__init__(
            405,
            detail or f"Method not allowed. Allowed methods: {allow}",
            (("Allow", allow),),
        )
