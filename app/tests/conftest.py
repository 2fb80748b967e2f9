"""Shared fixtures for the test suite."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from infrastructure.i18n import YAMLMessageLoader
from infrastructure.services import get_message_loader
from modules.i18n.domain.repository import Navigator
from server.server import create_app


@pytest.fixture
def locales_dir():
    """The message resources shipped with the application."""
    return Path(__file__).resolve().parents[1] / "locales"


@pytest.fixture
def message_loader(locales_dir):
    return YAMLMessageLoader(locales_dir, use_cache=False)


@pytest.fixture
def navigator():
    """Navigator double recording replace() calls."""
    return MagicMock(spec=Navigator)


@pytest.fixture
def test_app(message_loader):
    app = create_app()
    app.dependency_overrides[get_message_loader] = lambda: message_loader
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(test_app):
    return TestClient(test_app)
