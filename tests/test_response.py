"""Tests for waymark.http.response — chainable immutable Response."""

from waymark.http.response import Response


class TestResponse:
    def test_defaults(self) -> None:
        response = Response()
        assert response.status == 200
        assert response.body == ""
        assert response.content_type == "text/plain; charset=utf-8"
        assert response.headers == ()

    def test_with_status_returns_new(self) -> None:
        original = Response("x")
        changed = original.with_status(201)
        assert changed.status == 201
        assert original.status == 200

    def test_with_header_appends(self) -> None:
        response = Response().with_header("X-A", "1").with_header("X-A", "2")
        assert response.headers == (("X-A", "1"), ("X-A", "2"))
        assert response.header("x-a") == "1"

    def test_with_headers(self) -> None:
        response = Response().with_headers({"X-A": "1", "X-B": "2"})
        assert response.header("X-B") == "2"
        assert response.header("X-C") is None

    def test_with_headers_accepts_pairs(self) -> None:
        response = Response().with_headers([("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")])
        assert [v for k, v in response.headers if k == "Set-Cookie"] == ["a=1", "b=2"]
        assert response.header("x-missing", "none") == "none"

    def test_json_factory(self) -> None:
        response = Response.json({"id": 1}, status=201)
        assert response.status == 201
        assert response.content_type == "application/json"
        assert response.text == '{"id": 1}'

    def test_body_conversions(self) -> None:
        assert Response("héllo").encode() == "héllo".encode()
        assert Response(b"raw").text == "raw"
