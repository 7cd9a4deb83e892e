"""Write a ``Response`` to an ASGI ``send`` channel."""

from waymark._internal.asgi import Send
from waymark.http.response import Response

# Statuses whose responses never carry a message body.
_BODYLESS = frozenset({204, 304})


def _latin1(name: str, value: str) -> tuple[bytes, bytes]:
    return name.lower().encode("latin-1"), value.encode("latin-1")


async def send_response(response: Response, send: Send, *, head: bool = False) -> None:
    """Emit one ``http.response.start`` and one ``http.response.body``.

    ``content-type`` comes first, then the response's own headers, then
    ``content-length``. A 1xx, 204, or 304 response is sent with an empty
    body and a length of 0. For ``HEAD`` (*head* True) the length of the
    body is announced but the body is not sent.
    """
    bodyless = response.status < 200 or response.status in _BODYLESS
    body = b"" if bodyless else response.encode()

    headers = [_latin1("content-type", response.content_type)]
    headers.extend(_latin1(name, value) for name, value in response.headers)
    headers.append(_latin1("content-length", str(len(body))))

    await send({"type": "http.response.start", "status": response.status, "headers": headers})
    await send({"type": "http.response.body", "body": b"" if head else body})
