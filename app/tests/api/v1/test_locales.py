"""Tests for the /api/v1/locales endpoints."""

import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient

from api.dependencies.rate_limits import get_limiter
from infrastructure.i18n import MessageLoader
from infrastructure.services import get_message_loader
from modules.i18n.api import routes as locale_routes

pytestmark = pytest.mark.integration


class TestListLocales:
    def test_lists_catalog_in_order(self, client):
        response = client.get("/api/v1/locales")

        assert response.status_code == 200
        body = response.json()
        assert body["default_locale"] == "en"
        assert [locale["code"] for locale in body["locales"]] == ["en", "th"]
        assert body["locales"][1] == {
            "code": "th",
            "name": "Thai",
            "native_name": "ไทย",
            "flag": "🇹🇭",
            "direction": "ltr",
        }


class TestGetMessages:
    @pytest.mark.parametrize("code", ["en", "th"])
    def test_supported_locale(self, client, message_loader, code):
        response = client.get(f"/api/v1/locales/{code}/messages")

        assert response.status_code == 200
        assert response.json() == {
            "locale": code,
            "messages": message_loader.load(code).messages,
        }

    def test_unsupported_locale_falls_back(self, client):
        response = client.get("/api/v1/locales/fr/messages")

        assert response.status_code == 200
        assert response.json()["locale"] == "en"

    def test_catalog_failure_is_500(self, test_app):
        loader = MagicMock(spec=MessageLoader)
        loader.load.side_effect = FileNotFoundError("missing")
        test_app.dependency_overrides[get_message_loader] = lambda: loader

        response = TestClient(test_app).get("/api/v1/locales/th/messages")

        assert response.status_code == 500
        assert response.json()["locale"] == "th"


class TestSwitchLocale:
    def test_valid_switch_preserves_path(self, client):
        response = client.post(
            "/api/v1/locales/switch",
            json={"locale": "th", "pathname": "/en/dashboard/settings"},
        )

        assert response.status_code == 200
        assert response.json() == {"locale": "th", "pathname": "/th/dashboard/settings"}

    def test_switch_to_current_locale(self, client):
        response = client.post(
            "/api/v1/locales/switch",
            json={"locale": "en", "pathname": "/en/dashboard"},
        )

        assert response.status_code == 200
        assert response.json()["pathname"] == "/en/dashboard"

    def test_query_string_is_dropped(self, client):
        response = client.post(
            "/api/v1/locales/switch",
            json={"locale": "th", "pathname": "/en/search?q=1"},
        )

        assert response.json()["pathname"] == "/th/search"

    def test_invalid_locale_is_400(self, client):
        response = client.post(
            "/api/v1/locales/switch",
            json={"locale": "xx", "pathname": "/en/dashboard"},
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid locale: xx", "locale": "xx"}

    def test_missing_locale_field_is_422(self, client):
        response = client.post("/api/v1/locales/switch", json={"pathname": "/en"})

        assert response.status_code == 422


@pytest.mark.parametrize("endpoint", ["list_locales", "get_messages", "switch_locale"])
def test_locale_endpoints_are_rate_limited(endpoint):
    func = getattr(locale_routes, endpoint)

    assert f"{func.__module__}.{func.__name__}" in get_limiter()._route_limits
