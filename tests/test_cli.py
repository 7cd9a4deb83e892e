"""Tests for waymark.cli — ``waymark run`` and ``waymark routes``."""

import sys
import types
from unittest.mock import MagicMock, patch

import pytest

from waymark.cli import main
from waymark.config import RouterConfig
from waymark.router import Router


def _list_people(request):
    return []


@pytest.fixture
def fake_router(monkeypatch: pytest.MonkeyPatch) -> Router:
    """Register a fake module holding a waymark Router."""
    router = Router(RouterConfig(host="127.0.0.1", port=9000))
    router.get("/people", _list_people)
    router.post("/people/{id}", _list_people)
    mod = types.ModuleType("_cli_test_api")
    mod.router = router  # type: ignore[attr-defined]
    mod.not_a_router = 42  # type: ignore[attr-defined]
    mod.make_router = lambda: router  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_cli_test_api", mod)
    return router


class TestRun:
    @patch("waymark.server.run.run_server")
    def test_defaults_from_config(self, mock_server: MagicMock, fake_router: Router) -> None:
        main(["run", "_cli_test_api:router"])
        mock_server.assert_called_once()
        args, kwargs = mock_server.call_args
        assert args == (fake_router, "127.0.0.1", 9000)
        assert kwargs == {"log_level": "info"}

    @patch("waymark.server.run.run_server")
    def test_overrides(self, mock_server: MagicMock, fake_router: Router) -> None:
        main(
            ["run", "_cli_test_api:router", "--host", "0.0.0.0", "--port", "3000",
             "--log-level", "debug"]
        )
        args, kwargs = mock_server.call_args
        assert args[1:] == ("0.0.0.0", 3000)
        assert kwargs["log_level"] == "debug"

    @patch("waymark.server.run.run_server")
    def test_default_attribute_is_router(self, mock_server: MagicMock, fake_router: Router) -> None:
        main(["run", "_cli_test_api"])
        assert mock_server.call_args[0][0] is fake_router

    @patch("waymark.server.run.run_server")
    def test_factory(self, mock_server: MagicMock, fake_router: Router) -> None:
        main(["run", "_cli_test_api:make_router"])
        assert mock_server.call_args[0][0] is fake_router

    def test_not_a_router_exits(
        self, fake_router: Router, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "_cli_test_api:not_a_router"])
        assert exc_info.value.code == 1
        assert "not a waymark.Router" in capsys.readouterr().err

    def test_missing_module_exits(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "_no_such_module_here:router"])
        assert exc_info.value.code == 1


class TestRoutes:
    def test_lists_in_match_order(
        self, fake_router: Router, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["routes", "_cli_test_api:router"])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].split() == ["GET", "/people", "->", "_list_people"]
        assert lines[1].split() == ["POST", "/people/{id}", "->", "_list_people"]

    def test_empty(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        mod = types.ModuleType("_cli_empty_api")
        mod.router = Router()  # type: ignore[attr-defined]
        monkeypatch.setitem(sys.modules, "_cli_empty_api", mod)
        main(["routes", "_cli_empty_api:router"])
        assert "No routes registered." in capsys.readouterr().out


class TestHelp:
    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "waymark" in capsys.readouterr().out
