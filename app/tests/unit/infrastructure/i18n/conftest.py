"""Feature-level fixtures for i18n infrastructure tests."""

import pytest
import yaml

from infrastructure.i18n import YAMLMessageLoader


def _dump(path, data):
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, allow_unicode=True)


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create a temporary directory with sample message files.

    - home.en.yml
    - home.th.yml
    - switcher.en.yml
    - switcher.th.yml
    """
    _dump(
        tmp_path / "home.en.yml",
        {"HomePage": {"title": "Welcome", "greeting": "Hello {name}"}},
    )
    _dump(
        tmp_path / "switcher.en.yml",
        {"LocaleSwitcher": {"switchTo": "Switch to {name}"}},
    )
    _dump(
        tmp_path / "home.th.yml",
        {"HomePage": {"title": "ยินดีต้อนรับ", "greeting": "สวัสดี {name}"}},
    )
    _dump(
        tmp_path / "switcher.th.yml",
        {"LocaleSwitcher": {"switchTo": "เปลี่ยนเป็น {name}"}},
    )
    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """YAMLMessageLoader without caching."""
    return YAMLMessageLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_th": "th",
        "regional_th": "th-TH",
        "with_quality": "en-US,en;q=0.9,th;q=0.8",
        "thai_first": "fr-FR,th;q=0.9,en;q=0.7",
        "wildcard": "*",
        "invalid_quality": "de;q=invalid,th",
        "zero_quality": "th;q=0,en;q=0.5",
    }
