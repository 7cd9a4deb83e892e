"""Incoming HTTP request.

What routing and handlers read (method, path, headers, query) is fixed
when the request is built from the ASGI scope. The body stays on the
ASGI channel until a handler asks for it. Path parameters are attached
by the dispatcher after a route matches.
"""

from __future__ import annotations

import json as json_module
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from waymark._internal.asgi import Receive, Scope
from waymark.http.fields import FieldMap

_UNBOUND: Mapping[str, str] = MappingProxyType({})


async def _no_body() -> dict[str, Any]:
    return {"type": "http.request", "body": b"", "more_body": False}


def _header_map() -> FieldMap:
    return FieldMap(fold_case=True)


@dataclass(frozen=True, slots=True)
class Request:
    """One HTTP request, read-only.

    ``path_params`` maps each ``{name}`` segment of the matched pattern
    to the text of the path segment. Values are always strings; the
    handler parses them::

        def get_person(request: Request) -> Response:
            person_id = int(request.path_params["id"])

    Built by hand (``Request("GET", "/people/1")``) the request has no
    headers and an empty body, which is what most tests need.
    """

    method: str
    path: str
    headers: FieldMap = field(default_factory=_header_map)
    query: FieldMap = field(default_factory=FieldMap)
    path_params: Mapping[str, str] = field(default_factory=lambda: _UNBOUND)
    http_version: str = "1.1"
    client: tuple[str, int] | None = None
    _receive: Receive = field(default=_no_body, repr=False, compare=False)
    # Holds the body once read; bound copies share the same list.
    _body: list[bytes] = field(default_factory=list, repr=False, compare=False)

    @classmethod
    def from_asgi(cls, scope: Scope, receive: Receive) -> Request:
        """Build a request from an ASGI ``http`` scope. The method is upper-cased."""
        client = scope.get("client")
        return cls(
            method=scope["method"].upper(),
            path=scope["path"],
            headers=FieldMap.from_asgi_headers(scope.get("headers", ())),
            query=FieldMap.from_query_string(scope.get("query_string", b"")),
            http_version=scope.get("http_version", "1.1"),
            client=(client[0], client[1]) if client else None,
            _receive=receive,
        )

    @property
    def content_type(self) -> str | None:
        return self.headers.get("content-type")

    def with_path_params(self, params: Mapping[str, str]) -> Request:
        """A copy carrying a read-only snapshot of *params*."""
        return replace(self, path_params=MappingProxyType(dict(params)))

    async def body(self) -> bytes:
        """The full body. The ASGI channel is drained on the first call only."""
        if not self._body:
            chunks: list[bytes] = []
            more = True
            while more:
                message = await self._receive()
                chunks.append(message.get("body", b""))
                more = message.get("more_body", False)
            self._body.append(b"".join(chunks))
        return self._body[0]

    async def text(self, encoding: str = "utf-8") -> str:
        return (await self.body()).decode(encoding)

    async def json(self) -> Any:
        return json_module.loads(await self.body())
