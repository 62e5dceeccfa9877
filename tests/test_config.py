"""Tests for waypoint.config — RouterConfig and per-navigation inputs."""

import pytest

from waypoint.config import NavigateOptions, RouterConfig, UrlObject


class TestRouterConfig:
    def test_defaults(self) -> None:
        cfg = RouterConfig()

        assert cfg.locales == ()
        assert cfg.async_mode is False
        assert cfg.path_parser is None

    def test_override(self) -> None:
        cfg = RouterConfig(locales=("en", "fr"), async_mode=True)

        assert cfg.locales == ("en", "fr")
        assert cfg.async_mode is True

    def test_frozen(self) -> None:
        cfg = RouterConfig()

        with pytest.raises(AttributeError):
            cfg.async_mode = True  # type: ignore[misc]


class TestNavigateOptions:
    def test_none(self) -> None:
        assert NavigateOptions.coerce(None) == NavigateOptions(shallow=False, locale=None)

    def test_mapping(self) -> None:
        opts = NavigateOptions.coerce({"shallow": True, "locale": "en"})
        assert opts == NavigateOptions(shallow=True, locale="en")

    def test_partial_mapping(self) -> None:
        assert NavigateOptions.coerce({"locale": "fr"}).shallow is False

    def test_passthrough(self) -> None:
        opts = NavigateOptions(shallow=True)
        assert NavigateOptions.coerce(opts) is opts


class TestUrlObject:
    def test_default_query(self) -> None:
        target = UrlObject(pathname="/one")
        assert target.query == {}
