"""Errors for the i18n module."""

from typing import Any


class InvalidLocaleError(Exception):
    """Raised when a locale switch is requested for a code outside the catalog.

    Attributes:
        locale: the rejected value, as supplied by the caller
    """

    def __init__(self, locale: Any):
        super().__init__(f"Invalid locale: {locale}")
        self.locale = locale


class CatalogLoadError(Exception):
    """Raised when the message catalog of a resolved locale cannot be loaded.

    Fatal to the current request; no partial or substitute catalog is served.

    Attributes:
        locale: the locale code whose catalog failed to load
    """

    def __init__(self, locale: Any, reason: str):
        super().__init__(f"Could not load messages for locale {locale}: {reason}")
        self.locale = locale
