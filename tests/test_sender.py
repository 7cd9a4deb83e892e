"""Tests for waymark.server.sender response emission rules."""

from waymark.http.response import Response
from waymark.server.sender import send_response


class _Sink:
    def __init__(self) -> None:
        self.messages: list[dict] = []

    async def __call__(self, message: dict) -> None:
        self.messages.append(message)


class TestSendResponse:
    async def test_start_and_body(self) -> None:
        sink = _Sink()
        await send_response(Response("ok").with_header("X-Custom", "v"), sink)

        start, body = sink.messages
        assert start["type"] == "http.response.start"
        assert start["status"] == 200
        headers = dict(start["headers"])
        assert headers[b"content-type"] == b"text/plain; charset=utf-8"
        assert headers[b"x-custom"] == b"v"
        assert headers[b"content-length"] == b"2"
        assert body == {"type": "http.response.body", "body": b"ok"}

    async def test_204_drops_body_and_sets_zero_content_length(self) -> None:
        sink = _Sink()
        # Even if a handler attaches body content, 204 must not carry it.
        await send_response(Response("unexpected-body").with_status(204), sink)

        headers = dict(sink.messages[0]["headers"])
        assert headers[b"content-length"] == b"0"
        assert sink.messages[1]["body"] == b""

    async def test_304_drops_body(self) -> None:
        sink = _Sink()
        await send_response(Response("unexpected-body").with_status(304), sink)
        assert sink.messages[1]["body"] == b""

    async def test_head_keeps_length_drops_body(self) -> None:
        sink = _Sink()
        await send_response(Response("four"), sink, head=True)

        headers = dict(sink.messages[0]["headers"])
        assert headers[b"content-length"] == b"4"
        assert sink.messages[1]["body"] == b""
