"""Tests for signpost.config — RouterConfig frozen dataclass."""

import pytest

from signpost.config import RouterConfig
from signpost.routing.router import Router


class TestRouterConfig:
    def test_defaults(self) -> None:
        cfg = RouterConfig()
        assert cfg.freeze_on_dispatch is True
        assert cfg.not_found_detail == "Not Found"

    def test_override(self) -> None:
        cfg = RouterConfig(freeze_on_dispatch=False, not_found_detail="Nope")
        assert cfg.freeze_on_dispatch is False
        assert cfg.not_found_detail == "Nope"

    def test_frozen(self) -> None:
        cfg = RouterConfig()
        with pytest.raises(AttributeError):
            cfg.freeze_on_dispatch = False  # type: ignore[misc]

    def test_router_default_config(self) -> None:
        assert Router().config == RouterConfig()

    def test_router_uses_given_config(self) -> None:
        cfg = RouterConfig(not_found_detail="Missing")
        assert Router(cfg).config is cfg
