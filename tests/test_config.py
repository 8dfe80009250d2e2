"""Tests for the configurations of the providers catalog."""

import pathlib

import pytest
from pydantic_core import PydanticCustomError

from config import AppConfig
from config._utils import init_config
from config.catalog import CatalogConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "CATALOG_ASSETS_DIR",
        "CATALOG_ASSETS_EXTENSIONS",
        "CATALOG_SYMBOLS_AVAILABLE",
        "CATALOG_SYMBOL_TINT",
        "CATALOG_EMAIL_PASSWORD_ICON",
    ):
        monkeypatch.delenv(name, raising=False)


class TestCatalogConfig:
    """Tests for `CatalogConfig`."""

    def test_defaults(self):
        config = init_config(CatalogConfig)
        assert config.ASSETS_DIR is None
        assert config.ASSETS_EXTENSIONS == (".png", ".svg", ".pdf")
        assert config.SYMBOLS_AVAILABLE is None
        assert config.SYMBOL_TINT == "systemOrange"
        assert config.EMAIL_PASSWORD_ICON == "firebaseIcon"

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CATALOG_ASSETS_DIR", str(tmp_path))
        monkeypatch.setenv("CATALOG_SYMBOLS_AVAILABLE", '["phone.fill", "lock.shield.fill"]')
        monkeypatch.setenv("CATALOG_SYMBOL_TINT", "systemBlue")
        monkeypatch.setenv("CATALOG_EMAIL_PASSWORD_ICON", "passwordIcon")
        config = init_config(CatalogConfig)
        assert config.ASSETS_DIR == pathlib.Path(tmp_path)
        assert config.SYMBOLS_AVAILABLE == frozenset({"phone.fill", "lock.shield.fill"})
        assert config.SYMBOL_TINT == "systemBlue"
        assert config.EMAIL_PASSWORD_ICON == "passwordIcon"

    def test_empty_env_is_ignored(self, monkeypatch):
        monkeypatch.setenv("CATALOG_SYMBOL_TINT", "")
        assert init_config(CatalogConfig).SYMBOL_TINT == "systemOrange"

    def test_invalid_extension_shows_the_env_name(self, monkeypatch):
        monkeypatch.setenv("CATALOG_ASSETS_EXTENSIONS", '["png"]')
        with pytest.raises(PydanticCustomError) as err:
            init_config(CatalogConfig)
        assert "CATALOG_ASSETS_EXTENSIONS" in str(err.value)

    def test_is_frozen(self):
        config = init_config(CatalogConfig)
        with pytest.raises(ValueError):
            config.SYMBOL_TINT = "systemRed"  # type: ignore


class TestAppConfig:
    """Tests for the global `AppConfig`."""

    def test_has_catalog_config(self):
        assert isinstance(AppConfig.CATALOG, CatalogConfig)

    def test_is_frozen(self):
        with pytest.raises(ValueError):
            AppConfig.APP_NAME = "changed"  # type: ignore
