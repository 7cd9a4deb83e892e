"""Tests for waymark.config — frozen RouterConfig."""

import dataclasses

import pytest

from waymark.config import RouterConfig


class TestRouterConfig:
    def test_defaults(self) -> None:
        config = RouterConfig()
        assert config.host == "127.0.0.1"
        assert config.port == 9000
        assert config.strict_patterns is False
        assert config.method_not_allowed is False
        assert config.not_found_body == "404 page not found\n"

    def test_override(self) -> None:
        config = RouterConfig(port=3000, method_not_allowed=True)
        assert config.port == 3000
        assert config.method_not_allowed is True

    def test_frozen(self) -> None:
        config = RouterConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.port = 1  # type: ignore[misc]
