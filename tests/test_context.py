"""Tests for waymark.context — request-scoped ContextVar."""

import pytest

from waymark.context import get_path_param, get_request, request_var
from waymark.http.request import Request
from waymark.router import Router


class TestRequestVar:
    def test_get_request_raises_outside_context(self) -> None:
        with pytest.raises(LookupError):
            get_request()

    def test_set_and_get_request(self) -> None:
        request = Request("GET", "/test")
        token = request_var.set(request)
        try:
            assert get_request() is request
        finally:
            request_var.reset(token)

    async def test_handler_sees_bound_request(self) -> None:
        router = Router()

        def helper() -> str | None:
            return get_path_param("id")

        @router.get("/people/{id}")
        def handler(request: Request) -> str:
            assert get_request() is request
            return helper() or ""

        response = await router.serve(Request("GET", "/people/9"))
        assert response.text == "9"

    async def test_reset_after_dispatch(self) -> None:
        router = Router()
        router.get("/x", lambda request: "ok")
        await router.serve(Request("GET", "/x"))
        with pytest.raises(LookupError):
            get_request()

    async def test_reset_after_handler_error(self) -> None:
        router = Router()

        @router.get("/boom")
        def boom(request: Request) -> str:
            raise ValueError("bad")

        with pytest.raises(ValueError):
            await router.serve(Request("GET", "/boom"))
        with pytest.raises(LookupError):
            get_request()

    def test_get_path_param_default(self) -> None:
        token = request_var.set(Request("GET", "/"))
        try:
            assert get_path_param("id", "none") == "none"
        finally:
            request_var.reset(token)
