"""Unit tests for infrastructure.logging.formatters module."""

import pytest

from infrastructure.logging.formatters import (
    SENSITIVE_PATTERNS,
    add_app_info,
    mask_sensitive_data,
)


@pytest.mark.unit
class TestAddAppInfo:
    """Test suite for add_app_info processor factory."""

    def test_adds_name_and_version(self):
        processor = add_app_info("site-locale-router", "1.2.3")
        event_dict = {"event": "locale_switched", "locale": "th"}

        result = processor(None, "info", event_dict)

        assert result["app_name"] == "site-locale-router"
        assert result["app_version"] == "1.2.3"
        assert result["locale"] == "th"

    def test_unknown_version_by_default(self):
        result = add_app_info("test-app")(None, "info", {"event": "test"})

        assert result["app_version"] == "unknown"

    def test_overwrites_existing_app_info(self):
        processor = add_app_info("new-app", "3.0")

        result = processor(
            None, "info", {"event": "test", "app_name": "old", "app_version": "1.0"}
        )

        assert result["app_name"] == "new-app"
        assert result["app_version"] == "3.0"


@pytest.mark.unit
class TestMaskSensitiveData:
    """Test suite for mask_sensitive_data processor factory."""

    def test_masks_cookie_values(self):
        processor = mask_sensitive_data()

        result = processor(None, "info", {"event": "x", "cookie": "NEXT_LOCALE=th"})

        assert result["cookie"] == "***REDACTED***"

    def test_matching_is_case_insensitive_substring(self):
        processor = mask_sensitive_data()

        result = processor(None, "info", {"X_Session_Id": "abc", "AUTHORIZATION": "b"})

        assert result["X_Session_Id"] == "***REDACTED***"
        assert result["AUTHORIZATION"] == "***REDACTED***"

    def test_leaves_other_fields_and_none_values(self):
        processor = mask_sensitive_data()

        result = processor(None, "info", {"locale": "th", "token": None})

        assert result == {"locale": "th", "token": None}

    def test_custom_mask_and_patterns(self):
        processor = mask_sensitive_data(
            mask_value="[hidden]", additional_patterns=frozenset({"pathname"})
        )

        result = processor(None, "info", {"pathname": "/en/account", "locale": "en"})

        assert result["pathname"] == "[hidden]"
        assert result["locale"] == "en"

    def test_does_not_mutate_input(self):
        event_dict = {"password": "hunter2"}

        mask_sensitive_data()(None, "info", event_dict)

        assert event_dict["password"] == "hunter2"


@pytest.mark.unit
def test_sensitive_patterns_cover_credentials():
    assert {"password", "secret", "token", "cookie"} <= SENSITIVE_PATTERNS
