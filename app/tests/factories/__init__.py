"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_message_catalog,
    make_messages,
    make_request_locale_context,
)

__all__ = [
    "make_message_catalog",
    "make_messages",
    "make_request_locale_context",
]
