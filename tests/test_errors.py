"""Tests for waymark.errors and the default fallback responses."""

import pytest

from waymark.errors import (
    ConfigurationError,
    HTTPError,
    MethodNotAllowed,
    NotFound,
    WaymarkError,
)
from waymark.http.request import Request
from waymark.server.errors import (
    default_method_not_allowed,
    http_error_response,
    make_not_found,
)


class TestHierarchy:
    def test_all_derive_from_base(self) -> None:
        for exc_type in (ConfigurationError, HTTPError, NotFound, MethodNotAllowed):
            assert issubclass(exc_type, WaymarkError)

    def test_http_error_str(self) -> None:
        assert str(HTTPError(400, "bad")) == "400: bad"
        assert str(HTTPError(500)) == "500"

    def test_not_found_defaults(self) -> None:
        exc = NotFound()
        assert exc.status == 404
        assert exc.detail == "Not Found"

    def test_method_not_allowed_allow_header(self) -> None:
        exc = MethodNotAllowed(frozenset({"POST", "GET"}))
        assert exc.status == 405
        assert exc.headers == (("Allow", "GET, POST"),)
        assert "GET, POST" in exc.detail
        assert exc.allowed == frozenset({"GET", "POST"})

    def test_http_error_accepts_traceback(self) -> None:
        try:
            raise HTTPError(400, "bad")
        except HTTPError as exc:
            caught = exc
        caught.__traceback__ = None
        assert caught.__traceback__ is None
        assert caught.headers == ()

    def test_raisable(self) -> None:
        with pytest.raises(HTTPError) as exc_info:
            raise NotFound("missing")
        assert exc_info.value.status == 404


class TestFallbacks:
    def test_make_not_found(self) -> None:
        handler = make_not_found("nope")
        response = handler(Request("GET", "/x"))
        assert response.status == 404
        assert response.text == "nope"

    def test_default_method_not_allowed(self) -> None:
        response = default_method_not_allowed(Request("PUT", "/x"), frozenset({"POST", "GET"}))
        assert response.status == 405
        assert response.header("Allow") == "GET, POST"

    def test_http_error_response_without_detail(self) -> None:
        response = http_error_response(HTTPError(418), Request("GET", "/tea"))
        assert response.status == 418
        assert response.text == "Error 418\n"
