"""Tests for the REST routes of the providers catalog."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from config import AppConfig
from main import app, lifespan
from services.catalog import CatalogService, LocalIconResolver


@pytest.fixture
def client(icons):
    return TestClient(app)


class TestProviders:
    """Tests for `/catalog/providers`."""

    def test_get_all(self, client):
        res = client.get("/catalog/providers")
        assert res.status_code == 200
        body = res.json()
        assert body["count"] == 12
        assert body["data"][0] == {
            "name": "GOOGLE",
            "display_label": "Google",
            "provider_id": "google.com",
            "is_identity_provider": True,
        }
        assert [p["provider_id"] for p in body["data"][7:]] == ["password", "emailLink", "phone", "anonymous", "custom"]

    @pytest.mark.parametrize(
        "provider_id,name",
        [("github.com", "GITHUB"), ("password", "EMAIL_PASSWORD"), ("emailLink", "PASSWORDLESS")],
    )
    def test_get_one(self, client, provider_id, name):
        res = client.get(f"/catalog/providers/{provider_id}")
        assert res.status_code == 200
        assert res.json()["data"]["name"] == name

    def test_get_one_unknown(self, client):
        res = client.get("/catalog/providers/linkedin.com")
        assert res.status_code == 404
        assert res.json() == {"detail": "Provider 'linkedin.com' not found"}


class TestSections:
    """Tests for `/catalog/sections`."""

    def test_get_all(self, client):
        res = client.get("/catalog/sections")
        assert res.status_code == 200
        body = res.json()
        assert body["count"] == 3
        assert [len(s["items"]) for s in body["data"]] == [7, 1, 4]
        assert body["data"][0]["header_text"] == "Identity Providers"

    def test_get_auth_link(self, client):
        res = client.get("/catalog/sections/auth-link")
        assert res.status_code == 200
        body = res.json()
        assert body["count"] == 1
        section = body["data"][0]
        assert section["header_text"] == "Manage linking between providers"
        assert len(section["items"]) == 12

    def test_get_email_password(self, client):
        res = client.get("/catalog/sections/email-password")
        assert res.status_code == 200
        item = res.json()["data"]["items"][0]
        assert item["title"] == "Email & Password Login"
        assert item["has_nested_content"] is True
        assert item["icon"]["name"] == AppConfig.CATALOG.EMAIL_PASSWORD_ICON

    def test_get_other(self, client):
        res = client.get("/catalog/sections/other")
        assert res.status_code == 200
        assert [i["icon"]["name"] for i in res.json()["data"]["items"]] == [
            "lock.slash.fill",
            "phone.fill",
            "questionmark.circle.fill",
            "lock.shield.fill",
        ]

    def test_get_unknown(self, client):
        assert client.get("/catalog/sections/unknown").status_code == 422


class TestMissingIcons:
    """Sections are still served when no icon can be resolved."""

    def test_icons_are_null(self, no_icons):
        res = TestClient(app).get("/catalog/sections/other")
        assert res.status_code == 200
        assert all(i["icon"] is None for i in res.json()["data"]["items"])


class TestLifespan:
    """The app sets up the catalog on startup."""

    def test_startup_sets_up_the_catalog(self, fresh_catalog, catalog_config):
        catalog_config()
        with TestClient(app) as client:
            assert isinstance(CatalogService._resolver, LocalIconResolver)
            res = client.get("/catalog/sections/email-password")
        assert res.status_code == 200
        assert res.json()["data"]["items"][0]["icon"] is None

    def test_startup_keeps_an_installed_resolver(self, icons):
        with TestClient(app) as client:
            assert CatalogService._resolver is icons
            res = client.get("/catalog/sections/other")
        assert all(i["icon"] is not None for i in res.json()["data"]["items"])

    def test_startup_exits_on_missing_assets_dir(self, fresh_catalog, catalog_config, tmp_path):
        catalog_config(ASSETS_DIR=str(tmp_path / "missing"))

        async def start():
            async with lifespan(app):
                pass

        with pytest.raises(SystemExit) as err:
            asyncio.run(start())
        assert err.value.code == 1
        assert CatalogService._resolver is None
