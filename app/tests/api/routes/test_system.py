import pytest
from fastapi.testclient import TestClient

from infrastructure.configuration import Settings
from infrastructure.services import get_settings

pytestmark = pytest.mark.integration


def test_get_version_unknown(client):
    response = client.get("/version")
    assert response.status_code == 200
    assert response.json() == {"version": "Unknown"}


def test_get_version_known(test_app):
    test_app.dependency_overrides[get_settings] = lambda: Settings(GIT_SHA="foo")
    response = TestClient(test_app).get("/version")
    assert response.status_code == 200
    assert response.json() == {"version": "foo"}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
