"""Outgoing HTTP response.

Handlers return a ``Response`` directly or return a plain value that
``negotiate`` turns into one. Middleware adjusts a response by deriving
a new one with ``with_status`` or ``with_header``.
"""

from __future__ import annotations

import json as json_module
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any

TEXT_PLAIN = "text/plain; charset=utf-8"
APPLICATION_JSON = "application/json"


@dataclass(frozen=True, slots=True)
class Response:
    """Body, status, content type, and extra headers.

    ``headers`` holds extra ``(name, value)`` pairs in send order. The
    sender adds ``content-type`` and ``content-length`` itself.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = TEXT_PLAIN
    headers: tuple[tuple[str, str], ...] = ()

    @classmethod
    def json(cls, data: Any, status: int = 200) -> Response:
        return cls(json_module.dumps(data), status, APPLICATION_JSON)

    def with_status(self, status: int) -> Response:
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        return self.with_headers([(name, value)])

    def with_headers(self, headers: Mapping[str, str] | Iterable[tuple[str, str]]) -> Response:
        """Append *headers*. A repeated name adds a value; nothing is replaced."""
        pairs = headers.items() if isinstance(headers, Mapping) else headers
        return replace(self, headers=(*self.headers, *pairs))

    def header(self, name: str, default: str | None = None) -> str | None:
        """First value sent for *name*, matched case-insensitively."""
        wanted = name.lower()
        return next((value for key, value in self.headers if key.lower() == wanted), default)

    def encode(self) -> bytes:
        """The body as bytes; ``str`` bodies are UTF-8."""
        return self.body.encode("utf-8") if isinstance(self.body, str) else self.body

    @property
    def text(self) -> str:
        return self.body.decode("utf-8") if isinstance(self.body, bytes) else self.body
