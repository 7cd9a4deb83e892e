"""Read-only multi-valued string maps for request headers and query strings.

Both are decoded once, when the request is built. Header names fold to
lower case; query keys are kept exactly as sent.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from urllib.parse import parse_qsl


class FieldMap(Mapping[str, str]):
    """Ordered ``name -> values`` map where indexing returns the first value.

    Usage::

        headers = FieldMap.from_asgi_headers(scope["headers"])
        headers["Content-Type"]         # first value, any case
        query = FieldMap.from_query_string(b"tag=a&tag=b")
        query.getall("tag")             # ["a", "b"]
    """

    __slots__ = ("_fold", "_values")

    def __init__(self, pairs: Iterable[tuple[str, str]] = (), *, fold_case: bool = False) -> None:
        self._fold = fold_case
        self._values: dict[str, list[str]] = {}
        for name, value in pairs:
            self._values.setdefault(self._key(name), []).append(value)

    @classmethod
    def from_asgi_headers(cls, raw: Iterable[tuple[bytes, bytes]]) -> FieldMap:
        """Case-insensitive headers from ASGI ``(name, value)`` byte pairs."""
        return cls(
            ((name.decode("latin-1"), value.decode("latin-1")) for name, value in raw),
            fold_case=True,
        )

    @classmethod
    def from_query_string(cls, query_string: bytes) -> FieldMap:
        """Query parameters from a raw ASGI ``query_string``. Blank values are kept."""
        return cls(parse_qsl(query_string.decode("latin-1"), keep_blank_values=True))

    def _key(self, name: str) -> str:
        return name.lower() if self._fold else name

    def __getitem__(self, name: str) -> str:
        return self._values[self._key(name)][0]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"FieldMap({self._values!r})"

    def getall(self, name: str) -> list[str]:
        """Every value sent for *name*, in order. Empty if absent."""
        return list(self._values.get(self._key(name), ()))
