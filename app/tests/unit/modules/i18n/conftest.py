"""Fixtures for modules.i18n unit tests."""

from unittest.mock import MagicMock

import pytest

from infrastructure.i18n import MessageLoader
from modules.i18n.domain.repository import LocaleRepository
from modules.i18n.domain.models import is_supported_locale, LocaleCode

from tests.factories.i18n import make_message_catalog


@pytest.fixture
def mock_repository():
    """LocaleRepository double validating against the real catalog."""
    repository = MagicMock(spec=LocaleRepository)
    repository.is_valid_locale.side_effect = is_supported_locale
    repository.get_current_locale.return_value = LocaleCode.EN
    return repository


@pytest.fixture
def stub_loader():
    """MessageLoader double serving the sample catalogs."""
    loader = MagicMock(spec=MessageLoader)
    loader.load.side_effect = lambda code: make_message_catalog(code)
    return loader
