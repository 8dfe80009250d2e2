"""Shared fixtures for the providers catalog tests."""

from types import SimpleNamespace

import pytest

from config.catalog import CatalogConfig
from services.catalog import BaseIconResolver, CatalogService, IconHandle


class FakeIconResolver(BaseIconResolver):
    """Resolves every requested icon, or none of them, and records the lookups."""

    def __init__(self, found: bool = True):
        self.found = found
        self.names: list[str] = []
        self.symbols: list[tuple[str, str]] = []

    def by_name(self, name: str) -> IconHandle | None:
        self.names.append(name)
        if not self.found:
            return None
        return IconHandle(kind="asset", name=name, source=f"/assets/{name}.png")

    def by_symbol_with_tint(self, symbol: str, tint: str) -> IconHandle | None:
        self.symbols.append((symbol, tint))
        if not self.found:
            return None
        return IconHandle(kind="symbol", name=symbol, tint=tint)


def _install(resolver: BaseIconResolver):
    previous = CatalogService._resolver
    CatalogService.setup(resolver)
    yield resolver
    CatalogService._resolver = previous


@pytest.fixture
def icons():
    """A resolver finding every icon, installed into the `CatalogService`."""
    yield from _install(FakeIconResolver(found=True))


@pytest.fixture
def no_icons():
    """A resolver finding no icons at all, installed into the `CatalogService`."""
    yield from _install(FakeIconResolver(found=False))


@pytest.fixture
def fresh_catalog():
    """The `CatalogService` as it is before its setup, i.e. without any resolver."""
    previous = CatalogService._resolver
    CatalogService._resolver = None
    yield CatalogService
    CatalogService._resolver = previous


@pytest.fixture
def catalog_config(monkeypatch):
    """Build new catalog configs from the given `CATALOG_*` env values and use them in the `CatalogService`."""

    def apply(**env: str) -> CatalogConfig:
        for name in CatalogConfig.model_fields:
            monkeypatch.delenv(f"CATALOG_{name}", raising=False)
        for name, value in env.items():
            monkeypatch.setenv(f"CATALOG_{name}", value)
        config = CatalogConfig()
        monkeypatch.setattr("services.catalog.service.AppConfig", SimpleNamespace(CATALOG=config))
        return config

    return apply
